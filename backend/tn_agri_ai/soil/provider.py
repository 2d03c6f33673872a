import logging
from typing import Any, Optional

from ..registry.profiles import RegionProfile
from .payload import decode_payload
from .reading import FIELDS, PAYLOAD, PROFILE, SoilReading, typical_values
from .synthetic import estimate_reading


logger = logging.getLogger(__name__)


def provide_reading(
    region: RegionProfile,
    lat: float,
    lon: float,
    payload: Optional[Any] = None,
) -> SoilReading:
    """
    Complete six-field reading for scoring.

    With a payload, decoded fields win and the region's typical values fill
    the rest. Without one, a deterministic synthetic estimate is used.
    """
    if payload is None:
        logger.info("No soil payload for (%.4f, %.4f); using synthetic estimate", lat, lon)
        return estimate_reading(region, lat, lon)

    decoded = decode_payload(payload)
    values = typical_values(region)
    sources = {}
    for name in FIELDS:
        if name in decoded:
            values[name] = decoded[name]
            sources[name] = PAYLOAD
        else:
            sources[name] = PROFILE

    missing = [name for name in FIELDS if sources[name] == PROFILE]
    if missing:
        logger.info(
            "Soil payload missing %s; filled from %s typical values",
            ", ".join(missing),
            region.name,
        )
    return SoilReading(**values, sources=sources)
