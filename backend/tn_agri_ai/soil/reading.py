from dataclasses import dataclass, field
from typing import Dict

from ..registry.profiles import RegionProfile


FIELDS = ("ph", "clay", "sand", "silt", "organic_carbon", "nitrogen")

PAYLOAD = "payload"
PROFILE = "profile"
SYNTHETIC = "synthetic"


@dataclass(frozen=True)
class SoilReading:
    """
    Six-field soil snapshot in physical units: pH, clay/sand/silt in percent,
    organic carbon in g/kg and total nitrogen in cg/kg.
    """

    ph: float
    clay: float
    sand: float
    silt: float
    organic_carbon: float
    nitrogen: float
    sources: Dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def source(self) -> str:
        kinds = set(self.sources.values())
        if not kinds:
            return PROFILE
        if SYNTHETIC in kinds:
            return SYNTHETIC
        if len(kinds) == 1:
            return kinds.pop()
        return "mixed"

    def as_values(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in FIELDS}

    def summary(self) -> Dict[str, str]:
        return {
            "ph": f"{self.ph:.1f}",
            "clay": f"{self.clay:.0f}%",
            "sand": f"{self.sand:.0f}%",
            "nitrogen": f"{self.nitrogen:.0f} cg/kg",
            "organicCarbon": f"{self.organic_carbon:.1f} g/kg",
        }


def typical_values(region: RegionProfile) -> Dict[str, float]:
    return {
        "ph": region.ph.typical,
        "clay": region.clay.typical,
        "sand": region.sand.typical,
        "silt": region.silt.typical,
        "organic_carbon": region.organic_carbon.typical,
        "nitrogen": region.nitrogen.typical,
    }


def typical_reading(region: RegionProfile) -> SoilReading:
    return SoilReading(
        **typical_values(region), sources={name: PROFILE for name in FIELDS}
    )
