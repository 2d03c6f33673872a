from fakes import FakeResponse
from tn_agri_ai.registry.profiles import get_region
from tn_agri_ai.soil.payload import encode_payload
from tn_agri_ai.soil.reading import typical_reading


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.get_json()["message"]


def test_crop_recommendation_post(client):
    resp = client.post("/crop-recommendation", json={
        "latitude": 11.02, "longitude": 76.96,
        "primary_goal": "profit", "risk_tolerance": "medium",
    })
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["district"] == "Coimbatore"
    assert "Cotton" in data["crops"]
    assert "Sorghum (Cholam)" in data["crops"]
    assert data["soilSource"] == "synthetic"
    assert data["dataSource"] == "synthetic"
    assert data["reasoning"].startswith("Based on detailed analysis of Coimbatore district:")


def test_crop_recommendation_get(client):
    resp = client.get("/crop-recommendation?latitude=13.08&longitude=80.27")
    assert resp.status_code == 200
    assert resp.get_json()["district"] == "Chennai"


def test_crop_recommendation_with_payload(client):
    payload = encode_payload(typical_reading(get_region("Chennai")))
    resp = client.post("/crop-recommendation", json={
        "latitude": 13.08, "longitude": 80.27, "soil_data": payload,
    })
    data = resp.get_json()
    assert resp.status_code == 200
    assert data["soilSource"] == "payload"
    assert data["dataSource"] == "payload"
    assert data["soilDataSummary"]["ph"] == "7.5"


def test_crop_recommendation_uses_live_soil(fetching_client, fake_session, soilgrids_layers):
    fake_session.routes["https://soilgrids.test"] = FakeResponse(
        200, {"properties": {"layers": soilgrids_layers}}
    )
    resp = fetching_client.post("/crop-recommendation", json={"latitude": 11.02, "longitude": 76.96})
    data = resp.get_json()
    assert resp.status_code == 200
    assert data["dataSource"] == "soilgrids"
    assert data["soilDataSummary"]["ph"] == "7.2"
    assert data["soilDataSummary"]["clay"] == "42%"


def test_crop_recommendation_survives_soil_outage(fetching_client):
    resp = fetching_client.post("/crop-recommendation", json={"latitude": 11.02, "longitude": 76.96})
    assert resp.status_code == 200
    assert resp.get_json()["dataSource"] == "synthetic"


def test_crop_recommendation_rejects_bad_input(client):
    resp = client.post("/crop-recommendation", json={"latitude": "north", "longitude": 76.96})
    assert resp.status_code == 400
    details = resp.get_json()["details"]
    assert any(d["field"] == "latitude" for d in details)

    assert client.post("/crop-recommendation", json={"longitude": 76.96}).status_code == 400
    assert client.post("/crop-recommendation", json={"latitude": 200, "longitude": 76.96}).status_code == 400
    assert client.post("/crop-recommendation", data="garbage").status_code == 400


def test_unknown_goal_is_not_an_error(client):
    resp = client.post("/crop-recommendation", json={
        "latitude": 11.02, "longitude": 76.96, "primary_goal": "fame",
    })
    assert resp.status_code == 200


def test_regions_listing(client):
    data = client.get("/regions").get_json()
    assert data["count"] == 27
    assert data["regions"][0]["district"] == "Chennai"


def test_region_profile_and_404(client):
    resp = client.get("/regions/Salem")
    assert resp.status_code == 200
    assert resp.get_json()["soilType"] == "Red loamy"
    resp = client.get("/regions/Atlantis")
    assert resp.status_code == 404
    assert "Atlantis" in resp.get_json()["error"]


def test_resolve_endpoint(client):
    data = client.get("/resolve?lat=11.60&lon=78.60").get_json()
    assert data["district"] == "Salem"
    assert data["centroid"] == "Salem-Attur"
    assert client.get("/resolve?lat=abc&lon=78.6").status_code == 400


def test_regional_defaults_endpoint(client):
    resp = client.get("/regional-defaults?lat=11.02&lon=76.96")
    assert resp.status_code == 200
    assert 1 <= resp.get_json()["fieldSize"] <= 10
    assert client.get("/regional-defaults?lat=11.02").status_code == 400


def test_soil_data_offline_is_encoded_estimate(client):
    data = client.get("/soil-data?lat=11.02&lon=76.96").get_json()
    assert data["source"] == "synthetic"
    assert data["district"] == "Coimbatore"
    assert len(data["data"]) == 6
    assert len(data["table"]) == 8
    assert data["soilType"]["name"]


def test_soil_data_live(fetching_client, fake_session, soilgrids_layers):
    fake_session.routes["https://soilgrids.test"] = FakeResponse(
        200, {"properties": {"layers": soilgrids_layers}}
    )
    data = fetching_client.get("/soil-data?lat=11.02&lon=76.96").get_json()
    assert data["source"] == "soilgrids"
    bdod = next(row for row in data["table"] if row["property"] == "bdod")
    assert bdod["values"][0]["value"] == 1.35
    assert data["soilType"]["name"] == "Black Cotton Soil"


def test_unknown_route_is_json_404(client):
    resp = client.get("/no-such-page")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Not Found"


def test_metrics_endpoint(client):
    client.get("/regions")
    data = client.get("/metrics").get_json()
    assert data["totals"]["total_requests"] >= 1
    assert "region_bp.list_regions" in data["per_endpoint"]


def test_metrics_count_soil_sources_and_districts(client, fetching_client, fake_session, soilgrids_layers):
    client.post("/crop-recommendation", json={"latitude": 11.02, "longitude": 76.96})
    client.get("/soil-data?lat=13.08&lon=80.27")
    payload = encode_payload(typical_reading(get_region("Salem")))
    client.post("/crop-recommendation", json={"latitude": 11.66, "longitude": 78.16, "soil_data": payload})
    fake_session.routes["https://soilgrids.test"] = FakeResponse(
        200, {"properties": {"layers": soilgrids_layers}}
    )
    fetching_client.post("/crop-recommendation", json={"latitude": 11.02, "longitude": 76.96})

    data = client.get("/metrics").get_json()
    assert data["soil_sources"] == {
        "soilgrids": 1, "openlandmap": 0, "payload": 1, "synthetic": 2,
    }
    assert data["districts"] == {"Coimbatore": 2, "Chennai": 1, "Salem": 1}


def test_rejected_request_is_not_counted_as_soil_lookup(client):
    client.post("/crop-recommendation", json={"longitude": 76.96})
    data = client.get("/metrics").get_json()
    assert sum(data["soil_sources"].values()) == 0
    assert data["totals"]["total_errors"] == 1


def test_app_sets_no_signing_key(app):
    assert app.config["SECRET_KEY"] is None
    assert app.config["SOIL_FETCH_ENABLED"] is False
