import dataclasses

import pytest

from tn_agri_ai.registry.crops import CROP_ALIASES, Suitability, crop_key
from tn_agri_ai.registry.profiles import (
    DEFAULT_REGION,
    CropEntry,
    SoilRange,
    all_regions,
    get_region,
    region_names,
    registry_frame,
)
from tn_agri_ai.registry.soil_types import identify_soil_type
from tn_agri_ai.scoring.rules import DEFAULT_RULES


def test_catalog_has_27_unique_districts():
    names = region_names()
    assert len(names) == 27
    assert len(set(names)) == 27
    assert DEFAULT_REGION in names


def test_every_region_satisfies_range_and_crop_invariants():
    for region in all_regions():
        assert region.crops
        for r in (region.ph, region.clay, region.sand, region.silt,
                  region.organic_carbon, region.nitrogen):
            assert r.min <= r.typical <= r.max
        for entry in region.crops:
            assert isinstance(entry.suitability, Suitability)
            assert entry.key


def test_unknown_region_lookup_returns_none():
    assert get_region("Atlantis") is None
    assert get_region("coimbatore") is None
    assert get_region("Coimbatore").name == "Coimbatore"


def test_invalid_range_is_rejected():
    with pytest.raises(ValueError):
        SoilRange(6.0, 7.0, 7.5)


def test_invalid_tier_is_rejected():
    with pytest.raises(ValueError):
        CropEntry("Cotton", "superb", "Kharif", "1 ton/ha", "high", "Medium", "150 days")


def test_region_without_crops_is_rejected():
    salem = get_region("Salem")
    with pytest.raises(ValueError):
        dataclasses.replace(salem, crops=())


def test_registry_is_read_only():
    region = get_region("Salem")
    with pytest.raises(dataclasses.FrozenInstanceError):
        region.name = "Other"
    assert isinstance(all_regions(), tuple)


def test_crop_keys_from_aliases_and_slugs():
    assert crop_key("Rice (Paddy)") == "rice"
    assert crop_key("Pulses (Black gram)") == "black_gram"
    assert crop_key("Finger Millet (Ragi)") == "finger_millet"
    assert crop_key("Sorghum (Cholam)") == "sorghum"
    assert crop_key("Vegetables (Tomato, Brinjal)") == "vegetables"
    assert crop_key("Cotton") == "cotton"
    assert crop_key("Pearl Millet (Bajra)") == "pearl_millet"


def test_rule_sets_reach_registry_crops():
    registry_keys = {e.key for r in all_regions() for e in r.crops}
    for key in ("rice", "sorghum", "finger_millet", "vegetables", "black_gram",
                "red_gram", "chickpea", "pearl_millet", "cotton", "turmeric"):
        assert key in registry_keys
    # every alias target is a key some rule or catalog entry can use
    assert set(CROP_ALIASES.values()) <= registry_keys
    assert DEFAULT_RULES.cash_crops & registry_keys == DEFAULT_RULES.cash_crops


def test_coimbatore_carries_cotton_and_sorghum():
    keys = [e.key for e in get_region("Coimbatore").crops]
    assert "cotton" in keys
    assert "sorghum" in keys


def test_registry_frame_has_one_row_per_district():
    frame = registry_frame()
    assert len(frame) == 27
    assert list(frame["district"]) == list(region_names())
    row = frame.set_index("district").loc["Coimbatore"]
    assert row["ph"] == 7.8
    assert row["crop_count"] == 7


@pytest.mark.parametrize("ph, clay, sand, expected", [
    (7.8, 45, 25, "Black Cotton Soil"),
    (6.8, 30, 40, "Red Loamy Soil"),
    (6.5, 20, 55, "Red Sandy Soil"),
    (5.5, 20, 40, "Laterite Soil"),
    (7.6, 38, 30, "Deltaic Alluvium (Cauvery Delta)"),
    (9.5, 10, 30, "Red Loamy Soil"),
])
def test_identify_soil_type(ph, clay, sand, expected):
    assert identify_soil_type(ph, clay, sand).name == expected


def test_region_profile_to_dict_is_json_ready():
    data = get_region("Nilgiris").to_dict()
    assert data["region"] == "hill"
    assert data["pH"] == {"min": 5.0, "max": 6.5, "typical": 5.8}
    assert data["recommendedCrops"][0]["crop"] == "Tea"


def test_registry_index_is_read_only():
    from tn_agri_ai.registry import profiles

    with pytest.raises(TypeError):
        profiles._BY_NAME["Atlantis"] = get_region("Salem")
    assert get_region("Atlantis") is None
