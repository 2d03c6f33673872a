"""
Soil type catalog for Tamil Nadu with a simple pH/texture classifier.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .crops import Drainage


@dataclass(frozen=True)
class SoilType:
    name: str
    scientific_name: str
    ph_min: float
    ph_max: float
    ph_optimal: float
    texture: str
    drainage: Drainage
    avoid_crops: Tuple[str, ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "scientificName": self.scientific_name,
            "phRange": {"min": self.ph_min, "max": self.ph_max, "optimal": self.ph_optimal},
            "texture": self.texture,
            "drainage": self.drainage.value,
            "avoidCrops": list(self.avoid_crops),
        }


SOIL_TYPES: Tuple[SoilType, ...] = (
    SoilType(
        "Red Loamy Soil", "Alfisols (Red Loam)", 6.0, 7.5, 6.8,
        "25-35% clay, 30-45% sand, 25-40% silt", Drainage.WELL_DRAINED,
        ("Rice", "Sugarcane", "Tea"),
    ),
    SoilType(
        "Red Sandy Soil", "Alfisols (Red Sandy Loam)", 6.0, 7.0, 6.5,
        "15-25% clay, 45-60% sand, 20-30% silt", Drainage.WELL_DRAINED,
        ("Rice", "Sugarcane", "Banana", "Water-intensive crops"),
    ),
    SoilType(
        "Black Cotton Soil", "Vertisols (Regur)", 7.0, 8.5, 7.8,
        "40-60% clay, high shrink-swell", Drainage.POOR,
        ("Tea", "Coffee", "Acid-loving crops"),
    ),
    SoilType(
        "Deltaic Alluvium (Cauvery Delta)", "Entisols / Inceptisols", 6.8, 7.8, 7.2,
        "30-40% clay, fine silty alluvium", Drainage.MODERATE,
        ("Drought-tolerant crops", "Millets"),
    ),
    SoilType(
        "Coastal Alluvium", "Entisols (Coastal Sands)", 7.0, 8.3, 7.6,
        "15-25% clay, 50-65% sand", Drainage.WELL_DRAINED,
        ("Tea", "Coffee", "Salinity-sensitive crops", "Heavy-clay crops"),
    ),
    SoilType(
        "Laterite Soil", "Oxisols / Ultisols", 4.5, 6.5, 5.5,
        "15-30% clay, 35-55% sand, gravelly", Drainage.WELL_DRAINED,
        ("Wheat", "Chickpea", "Alkaline crops"),
    ),
    SoilType(
        "Forest Loam (Hill Soil)", "Inceptisols (Forest Soils)", 5.0, 6.5, 5.8,
        "20-30% clay, 35-50% sand, high humus", Drainage.WELL_DRAINED,
        ("Tropical crops", "Cotton", "Sugarcane"),
    ),
    SoilType(
        "Saline-Alkaline Soil", "Aridisols (Sodic)", 8.0, 10.0, 8.5,
        "Variable, often clayey", Drainage.POOR,
        ("Most crops without reclamation", "Sensitive vegetables", "Pulses"),
    ),
)

_FALLBACK = SOIL_TYPES[0]


def _matches(soil: SoilType, ph: float, clay: float, sand: float) -> bool:
    if clay > 40 and "Black" in soil.name:
        return True
    if clay < 25 and sand > 50 and "Sandy" in soil.name:
        return True
    if ph < 6.5 and "Laterite" in soil.name:
        return True
    if 6.5 <= ph <= 7.5 and 25 <= clay <= 35 and "Red Loamy" in soil.name:
        return True
    if 30 <= clay <= 40 and "Alluvium" in soil.name:
        return True
    return False


def identify_soil_type(ph: float, clay: float, sand: float) -> SoilType:
    """
    First catalog entry whose pH range holds the reading and whose texture
    signature fits. Red Loamy when nothing fits.
    """
    for soil in SOIL_TYPES:
        if soil.ph_min <= ph <= soil.ph_max and _matches(soil, ph, clay, sand):
            return soil
    return _FALLBACK


def soil_type_names() -> List[str]:
    return [s.name for s in SOIL_TYPES]
