"""
Location-seeded defaults used to prefill the crop recommendation form.
"""

import datetime
import math
from typing import Dict, Optional, Union


RAINFALL_BANDS = ["<500mm", "500-1000mm", ">1000mm"]
SOIL_TEXTURES = ["sandy", "clay", "loam", "silty", "peaty"]
RECENT_CROPS = ["Rice", "Sugarcane", "Turmeric", "Coconut", "Banana", "Tapioca", "Groundnut", "Maize"]
IRRIGATION_METHODS = ["drip", "flood", "sprinkler", "rainfed"]
FORM_GOALS = ["cash-crop", "mixed", "personal-consumption"]
FERTILIZERS = ["organic", "synthetic", "mixed"]


def _picker(lat: float, lon: float):
    mixed = lat * 1000 + lon * 1000
    seed = math.floor(mixed) if math.isfinite(mixed) else 0

    def rand(offset: int) -> float:
        x = math.sin(seed + offset) * 10000
        return x - math.floor(x)

    return rand


def regional_defaults(
    lat: float, lon: float, today: Optional[datetime.date] = None
) -> Dict[str, Union[str, int]]:
    rand = _picker(lat, lon)
    today = today or datetime.date.today()

    return {
        "rainfall": RAINFALL_BANDS[2 if rand(1) > 0.6 else 1],
        "soilType": SOIL_TEXTURES[math.floor(rand(2) * len(SOIL_TEXTURES))],
        "primaryGoal": FORM_GOALS[math.floor(rand(5) * len(FORM_GOALS))],
        "riskTolerance": "medium" if rand(6) > 0.5 else "low",
        "fieldSize": math.floor(rand(7) * 10) + 1,
        "recentCrop": RECENT_CROPS[math.floor(rand(3) * len(RECENT_CROPS))],
        "fertilizer": FERTILIZERS[math.floor(rand(8) * len(FERTILIZERS))],
        "irrigation": IRRIGATION_METHODS[math.floor(rand(4) * len(IRRIGATION_METHODS))],
        "recentCropYear": str(today.year - 1),
    }
