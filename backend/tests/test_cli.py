import json

from tn_agri_ai.cli import main


def test_recommend_prints_rationale(capsys):
    assert main(["recommend", "--lat", "11.02", "--lon", "76.96", "--goal", "profit"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Based on detailed analysis of Coimbatore district:")


def test_recommend_json(capsys):
    assert main(["recommend", "--lat", "13.08", "--lon", "80.27", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["district"] == "Chennai"
    assert data["soilSource"] == "synthetic"


def test_recommend_with_nan_latitude(capsys):
    assert main(["recommend", "--lat", "nan", "--lon", "77", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["district"] == "Coimbatore"
    assert len(data["crops"]) == 5


def test_resolve_prints_district(capsys):
    assert main(["resolve", "--lat", "11.60", "--lon", "78.60"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["district"] == "Salem"
    assert data["centroid"] == "Salem-Attur"


def test_regions_lists_every_district(capsys):
    assert main(["regions"]) == 0
    out = capsys.readouterr().out
    assert "Nilgiris" in out
    assert "Coimbatore" in out
