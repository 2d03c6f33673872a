import pytest
import requests

from config import Config
from services.soil_service import (
    SoilDataUnavailable,
    SoilService,
    build_session,
    convert_openlandmap,
)
from fakes import FakeResponse


SOILGRIDS = "https://soilgrids.test"
OPENLANDMAP = "https://openlandmap.test"


def test_soilgrids_success(soil_service, fake_session, soilgrids_layers):
    fake_session.routes[SOILGRIDS] = FakeResponse(200, {"properties": {"layers": soilgrids_layers}})
    result = soil_service.get_soil_data(11.02, 76.96)
    assert result["source"] == "soilgrids"
    assert result["data"] == soilgrids_layers
    url, params = fake_session.calls[0]
    assert url.startswith(SOILGRIDS)
    assert ("property", "phh2o") in params
    assert ("depth", "5-15cm") in params
    assert ("value", "mean") in params


def test_falls_back_to_openlandmap(soil_service, fake_session):
    fake_session.routes[SOILGRIDS] = FakeResponse(503, {})
    fake_session.routes[OPENLANDMAP] = FakeResponse(200, {
        "sol_ph.h2o_0..5cm_mean": 65,
        "sol_clay.wfraction_0..5cm_mean": 0.3,
    })
    result = soil_service.get_soil_data(11.02, 76.96)
    assert result["source"] == "openlandmap"
    layers = {layer["name"]: layer for layer in result["data"]}
    assert layers["phh2o"]["depths"][0]["values"]["mean"] == 65
    assert layers["phh2o"]["depths"][1]["values"]["mean"] == 70
    assert layers["clay"]["depths"][0]["values"]["mean"] == 300


def test_empty_soilgrids_response_triggers_backup(soil_service, fake_session):
    fake_session.routes[SOILGRIDS] = FakeResponse(200, {"properties": {"layers": []}})
    fake_session.routes[OPENLANDMAP] = FakeResponse(200, {})
    assert soil_service.get_soil_data(11.0, 77.0)["source"] == "openlandmap"


def test_both_sources_down_raises(soil_service, fake_session):
    fake_session.routes[SOILGRIDS] = requests.ConnectionError("down")
    fake_session.routes[OPENLANDMAP] = FakeResponse(500, {})
    with pytest.raises(SoilDataUnavailable):
        soil_service.get_soil_data(11.0, 77.0)


def test_client_error_is_not_retried(soil_service, fake_session):
    fake_session.routes[SOILGRIDS] = FakeResponse(400, {})
    fake_session.routes[OPENLANDMAP] = FakeResponse(404, {})
    with pytest.raises(SoilDataUnavailable):
        soil_service.get_soil_data(11.0, 77.0)
    assert len(fake_session.calls) == 2


def test_invalid_json_counts_as_failure(soil_service, fake_session):
    fake_session.routes[SOILGRIDS] = FakeResponse(200, ValueError("bad json"))
    fake_session.routes[OPENLANDMAP] = FakeResponse(200, ["not", "an", "object"])
    with pytest.raises(SoilDataUnavailable):
        soil_service.get_soil_data(11.0, 77.0)


def test_openlandmap_defaults_and_scaling():
    layers = {layer["name"]: layer for layer in convert_openlandmap({})}
    means = {name: [d["values"]["mean"] for d in layer["depths"]] for name, layer in layers.items()}
    assert means["phh2o"] == [70, 70]
    assert means["clay"] == [250, 250]
    assert means["sand"] == [400, 400]
    assert means["silt"] == [350, 350]
    assert means["soc"] == [120, 100]
    assert means["nitrogen"] == [110, 100]
    assert means["cec"] == [180, 190]
    assert means["bdod"] == [135, 140]


def test_session_retries_server_errors_only():
    session = build_session(3, 1.0)
    retry = session.get_adapter("https://rest.isric.org").max_retries
    assert retry.total == 3
    assert retry.backoff_factor == 1.0
    assert 503 in retry.status_forcelist
    assert 429 in retry.status_forcelist
    assert 404 not in retry.status_forcelist


def test_defaults_are_read_when_the_service_is_built(monkeypatch):
    monkeypatch.setattr(Config, "SOILGRIDS_URL", "https://mirror.soilgrids.test")
    monkeypatch.setattr(Config, "SOIL_API_TIMEOUT", 2.5)
    monkeypatch.setattr(Config, "SOIL_API_MAX_RETRIES", 7)
    service = SoilService()
    assert service.soilgrids_url == "https://mirror.soilgrids.test"
    assert service.timeout == 2.5
    assert service.session.get_adapter("https://x.test").max_retries.total == 7


def test_from_config_prefers_app_settings():
    service = SoilService.from_config({
        "SOILGRIDS_URL": "https://app.soilgrids.test",
        "SOIL_API_TIMEOUT": 0,
        "SOIL_API_MAX_RETRIES": 0,
        "SOIL_API_BACKOFF": 0.1,
    })
    assert service.soilgrids_url == "https://app.soilgrids.test"
    assert service.openlandmap_url == Config.OPENLANDMAP_URL
    assert service.timeout == 0
    assert service.session.get_adapter("https://x.test").max_retries.total == 0
