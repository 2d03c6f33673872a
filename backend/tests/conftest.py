import pytest

from app import create_app
from config import TestingConfig
from services.observability import metrics
from services.soil_service import SoilService
from fakes import FakeSession


SOILGRIDS_LAYERS = [
    {"name": "phh2o", "depths": [
        {"label": "0-5cm", "values": {"mean": 72}},
        {"label": "5-15cm", "values": {"mean": 74}},
    ]},
    {"name": "clay", "depths": [
        {"label": "0-5cm", "values": {"mean": 420}},
        {"label": "5-15cm", "values": {"mean": 440}},
    ]},
    {"name": "sand", "depths": [{"label": "0-5cm", "values": {"mean": 260}}]},
    {"name": "silt", "depths": [{"label": "0-5cm", "values": {"mean": 320}}]},
    {"name": "soc", "depths": [{"label": "0-5cm", "values": {"mean": 140}}]},
    {"name": "nitrogen", "depths": [{"label": "0-5cm", "values": {"mean": 125}}]},
    {"name": "bdod", "depths": [{"label": "0-5cm", "values": {"mean": 135}}]},
    {"name": "cec", "depths": [{"label": "0-5cm", "values": {"mean": 310}}]},
]


@pytest.fixture
def soilgrids_layers():
    return [dict(layer) for layer in SOILGRIDS_LAYERS]


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def soil_service(fake_session):
    return SoilService(
        soilgrids_url="https://soilgrids.test/query",
        openlandmap_url="https://openlandmap.test/point",
        timeout=1,
        session=fake_session,
    )


@pytest.fixture(autouse=True)
def fresh_metrics():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def app(soil_service):
    return create_app(TestingConfig, soil_service=soil_service)


@pytest.fixture
def client(app):
    return app.test_client()


class FetchingConfig(TestingConfig):
    SOIL_FETCH_ENABLED = True


@pytest.fixture
def fetching_client(soil_service):
    return create_app(FetchingConfig, soil_service=soil_service).test_client()
