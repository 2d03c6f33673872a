"""
Deterministic synthetic soil estimate for coordinates without measured data.

The seed comes from a trigonometric hash of the coordinate and drives an
explicit ``random.Random`` instance, so the same coordinate always yields the
same reading.
"""

import math
import random

from ..registry.profiles import RegionProfile
from .reading import FIELDS, SYNTHETIC, SoilReading, typical_values


COASTAL_LONGITUDE = 80.27
COASTAL_BAND_DEG = 1.5

# Max shift at the coast itself, scaled down linearly across the band.
COASTAL_SHIFT = {"clay": -8.0, "sand": 10.0, "ph": 0.3}

JITTER = {
    "ph": 0.3,
    "clay": 3.0,
    "sand": 4.0,
    "silt": 3.0,
    "organic_carbon": 2.0,
    "nitrogen": 12.0,
}


def coordinate_seed(lat: float, lon: float) -> int:
    arg = lat * 12.9898 + lon * 78.233
    # Non-finite or overflowing coordinates share one fixed seed
    if not math.isfinite(arg):
        return 0
    x = math.sin(arg) * 43758.5453
    frac = x - math.floor(x)
    return int(frac * 2 ** 32) & 0xFFFFFFFF


def coastal_factor(lon: float) -> float:
    if not math.isfinite(lon):
        return 0.0
    return max(0.0, 1.0 - abs(lon - COASTAL_LONGITUDE) / COASTAL_BAND_DEG)


def estimate_reading(region: RegionProfile, lat: float, lon: float) -> SoilReading:
    rng = random.Random(coordinate_seed(lat, lon))
    base = typical_values(region)

    factor = coastal_factor(lon)
    for name, shift in COASTAL_SHIFT.items():
        base[name] += shift * factor

    values = {}
    for name in FIELDS:
        value = base[name] + rng.uniform(-JITTER[name], JITTER[name])
        value = getattr(region, name).clamp(value)
        values[name] = round(value, 2) if name == "ph" else round(value, 1)

    return SoilReading(**values, sources={name: SYNTHETIC for name in FIELDS})
