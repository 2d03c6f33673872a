"""
SoilGrids-style payload handling.

A payload is a list of layers, each ``{"name": <property>, "depths": [{"label":
"0-5cm", "values": {"mean": <int>}}, ...]}``. Values are integer-encoded with
a fixed per-property divisor.
"""

import logging
import math
import re
from typing import Any, Dict, List, Optional

from .reading import SoilReading


logger = logging.getLogger(__name__)

# property -> (reading field, divisor). Nitrogen stays in cg/kg.
DECODE_TABLE = {
    "phh2o": ("ph", 10.0),
    "clay": ("clay", 10.0),
    "sand": ("sand", 10.0),
    "silt": ("silt", 10.0),
    "soc": ("organic_carbon", 10.0),
    "nitrogen": ("nitrogen", 1.0),
}

# property -> (display label, divisor, unit) for the soil data table.
DISPLAY_TABLE = {
    "phh2o": ("pH (H2O)", 10.0, "pH"),
    "bdod": ("Bulk density", 100.0, "g/cm³"),
    "cec": ("Cation exchange capacity", 10.0, "cmol/kg"),
    "soc": ("Soil organic carbon", 10.0, "g/kg"),
    "nitrogen": ("Nitrogen", 100.0, "g/kg"),
    "clay": ("Clay", 10.0, "%"),
    "sand": ("Sand", 10.0, "%"),
    "silt": ("Silt", 10.0, "%"),
}

DEFAULT_DEPTH_LABEL = "0-5cm"

_TOP_DEPTH_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)")


def layers_of(payload: Any) -> List[Dict[str, Any]]:
    """Accept a bare layer list or a full SoilGrids response."""
    if isinstance(payload, dict):
        payload = payload.get("properties", payload)
        if isinstance(payload, dict):
            payload = payload.get("layers", [])
    if not isinstance(payload, list):
        return []
    return [layer for layer in payload if isinstance(layer, dict)]


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def _top_depth(label: Any) -> Optional[float]:
    if not isinstance(label, str):
        return None
    match = _TOP_DEPTH_RE.match(label)
    return float(match.group(1)) if match else None


def shallowest_depth(depths: Any) -> Optional[Dict[str, Any]]:
    """
    Depth band with the smallest parsable top depth, else the first listed.
    """
    if not isinstance(depths, list):
        return None
    bands = [d for d in depths if isinstance(d, dict)]
    if not bands:
        return None
    ranked = []
    for i, band in enumerate(bands):
        top = _top_depth(band.get("label"))
        if top is not None:
            ranked.append((top, i))
    if ranked:
        return bands[min(ranked)[1]]
    return bands[0]


def _band_mean(band: Optional[Dict[str, Any]]) -> Optional[float]:
    if band is None:
        return None
    values = band.get("values")
    if not isinstance(values, dict):
        return None
    return _number(values.get("mean"))


def decode_payload(payload: Any) -> Dict[str, float]:
    """
    Decode whatever the payload carries into reading fields.

    Properties that are missing or malformed are simply left out, so the
    caller can fall back field by field. Never raises.
    """
    decoded: Dict[str, float] = {}
    for layer in layers_of(payload):
        name = layer.get("name")
        if name not in DECODE_TABLE:
            continue
        field_name, divisor = DECODE_TABLE[name]
        if field_name in decoded:
            continue
        raw = _band_mean(shallowest_depth(layer.get("depths")))
        if raw is None:
            logger.debug("Soil payload property %s has no usable mean", name)
            continue
        decoded[field_name] = raw / divisor
    return decoded


def encode_payload(reading: SoilReading, label: str = DEFAULT_DEPTH_LABEL) -> List[Dict[str, Any]]:
    """Inverse of decode_payload for a single depth band."""
    layers = []
    for name, (field_name, divisor) in DECODE_TABLE.items():
        layers.append(
            {
                "name": name,
                "depths": [
                    {
                        "label": label,
                        "values": {"mean": int(round(getattr(reading, field_name) * divisor))},
                    }
                ],
            }
        )
    return layers


def transform_value(name: str, raw: Any) -> Optional[float]:
    """Display conversion of one encoded SoilGrids value. None when absent."""
    value = _number(raw)
    if value is None:
        return None
    display = DISPLAY_TABLE.get(name)
    if display is None:
        return value
    return round(value / display[1], 2)


def soil_table(payload: Any, bands: int = 2) -> List[Dict[str, Any]]:
    """
    Rows for the soil property table: one per known property, with values for
    the first ``bands`` depth bands.
    """
    by_name = {layer.get("name"): layer for layer in layers_of(payload)}
    rows = []
    for name, (label, _divisor, unit) in DISPLAY_TABLE.items():
        layer = by_name.get(name) or {}
        depths = layer.get("depths")
        depths = [d for d in depths if isinstance(d, dict)] if isinstance(depths, list) else []
        values = []
        for band in depths[:bands]:
            raw = band.get("values", {}).get("mean") if isinstance(band.get("values"), dict) else None
            values.append({"depth": band.get("label"), "value": transform_value(name, raw)})
        while len(values) < bands:
            values.append({"depth": None, "value": None})
        rows.append({"property": name, "label": label, "unit": unit, "values": values})
    return rows
