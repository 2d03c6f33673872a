"""
Crop vocabulary shared by the registry and the scorer.

Display names in the district catalog carry local detail ("Rice (Paddy)",
"Pulses (Black gram)"). Scoring rules are keyed by a canonical crop key so a
renamed display string can never silently drop out of a rule set.
"""

import re
from enum import Enum
from types import MappingProxyType


class Suitability(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"


class MarketDemand(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class WaterRequirement(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Season(str, Enum):
    KHARIF = "Kharif"
    RABI = "Rabi"
    SUMMER = "Summer"
    PERENNIAL = "Perennial"
    YEAR_ROUND = "Year-round"


class RegionCategory(str, Enum):
    COASTAL = "coastal"
    INTERIOR = "interior"
    WESTERN = "western"
    HILL = "hill"


class Drainage(str, Enum):
    WELL_DRAINED = "Well-drained"
    MODERATE = "Moderate"
    POOR = "Poor"


# Display name -> canonical key. Names not listed here fall back to a slug.
CROP_ALIASES = MappingProxyType({
    "Rice (Paddy)": "rice",
    "Finger Millet (Ragi)": "finger_millet",
    "Pearl Millet (Bajra)": "pearl_millet",
    "Sorghum (Cholam)": "sorghum",
    "Coffee (Arabica)": "coffee",
    "Pulses (Black gram)": "black_gram",
    "Pulses (Green gram)": "green_gram",
    "Pulses (Red gram)": "red_gram",
    "Pulses (Chickpea)": "chickpea",
    "Vegetables (Tomato, Brinjal)": "vegetables",
    "Vegetables (Cabbage, Cauliflower)": "vegetables",
    "Vegetables (Carrot, Cabbage)": "vegetables",
    "Vegetables (Beans, Carrot)": "vegetables",
    "Spices (Cardamom, Pepper)": "spices",
    "Spices (Pepper, Clove)": "spices",
    "Flowers (Jasmine, Rose)": "flowers",
    "Palmyra (Palm)": "palmyra",
})

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def crop_key(name: str) -> str:
    """Canonical identifier for a crop display name."""
    alias = CROP_ALIASES.get(name)
    if alias:
        return alias
    base = name.split("(")[0]
    return _SLUG_RE.sub("_", base.strip().lower()).strip("_")
