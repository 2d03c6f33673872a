"""
Tamil Nadu district soil & crop registry.

Research-based typical soil chemistry and ranked crop suitability for each
district (TNAU Agritech portal, ICAR soil survey, district agriculture office
reports). The catalog is built once at import and is read-only afterwards.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import pandas as pd

from .crops import (
    Drainage,
    MarketDemand,
    RegionCategory,
    Season,
    Suitability,
    WaterRequirement,
    crop_key,
)

DEFAULT_REGION = "Coimbatore"


@dataclass(frozen=True)
class SoilRange:
    min: float
    max: float
    typical: float

    def __post_init__(self):
        if not (self.min <= self.typical <= self.max):
            raise ValueError(
                f"Invalid soil range: expected min <= typical <= max, got "
                f"{self.min} / {self.typical} / {self.max}"
            )

    def clamp(self, value: float) -> float:
        return max(self.min, min(self.max, value))


@dataclass(frozen=True)
class CropEntry:
    crop: str
    suitability: Suitability
    season: Season
    expected_yield: str
    market_demand: MarketDemand
    water_requirement: WaterRequirement
    growing_period: str
    key: str = field(default="")

    def __post_init__(self):
        # Coerce plain strings into the closed vocabularies (raises ValueError).
        object.__setattr__(self, "suitability", Suitability(self.suitability))
        object.__setattr__(self, "season", Season(self.season))
        object.__setattr__(self, "market_demand", MarketDemand(self.market_demand))
        object.__setattr__(
            self, "water_requirement", WaterRequirement(self.water_requirement)
        )
        if not self.key:
            object.__setattr__(self, "key", crop_key(self.crop))

    def to_dict(self) -> Dict[str, str]:
        return {
            "crop": self.crop,
            "key": self.key,
            "suitability": self.suitability.value,
            "season": self.season.value,
            "expectedYield": self.expected_yield,
            "marketDemand": self.market_demand.value,
            "waterRequirement": self.water_requirement.value,
            "growingPeriod": self.growing_period,
        }


@dataclass(frozen=True)
class RegionProfile:
    name: str
    category: RegionCategory
    soil_type: str
    ph: SoilRange
    clay: SoilRange
    sand: SoilRange
    silt: SoilRange
    organic_carbon: SoilRange  # g/kg
    nitrogen: SoilRange  # cg/kg
    average_rainfall: int  # mm/year
    drainage: Drainage
    characteristics: str
    crops: Tuple[CropEntry, ...]

    def __post_init__(self):
        object.__setattr__(self, "category", RegionCategory(self.category))
        object.__setattr__(self, "drainage", Drainage(self.drainage))
        object.__setattr__(self, "crops", tuple(self.crops))
        if not self.crops:
            raise ValueError(f"Region {self.name!r} has no crop recommendations")

    def to_dict(self) -> Dict[str, object]:
        def _range(r: SoilRange) -> Dict[str, float]:
            return {"min": r.min, "max": r.max, "typical": r.typical}

        return {
            "district": self.name,
            "region": self.category.value,
            "soilType": self.soil_type,
            "pH": _range(self.ph),
            "clay": _range(self.clay),
            "sand": _range(self.sand),
            "silt": _range(self.silt),
            "organicCarbon": _range(self.organic_carbon),
            "nitrogen": _range(self.nitrogen),
            "averageRainfall": self.average_rainfall,
            "drainage": self.drainage.value,
            "characteristics": self.characteristics,
            "recommendedCrops": [c.to_dict() for c in self.crops],
        }


def _r(lo: float, hi: float, typical: float) -> SoilRange:
    return SoilRange(lo, hi, typical)


def _c(crop, suitability, season, expected_yield, demand, water, period) -> CropEntry:
    return CropEntry(crop, suitability, season, expected_yield, demand, water, period)


_PROFILES: Tuple[RegionProfile, ...] = (
    # =================== COASTAL DISTRICTS ===================
    RegionProfile(
        name="Chennai", category="coastal", soil_type="Coastal alluvium, sandy",
        ph=_r(7.0, 8.2, 7.5), clay=_r(12, 20, 15), sand=_r(50, 65, 58),
        silt=_r(20, 35, 27), organic_carbon=_r(3, 12, 7), nitrogen=_r(60, 110, 85),
        average_rainfall=1400, drainage="Well-drained",
        characteristics="Sandy, alkaline, low water retention, moderate salinity",
        crops=(
            _c("Coconut", "excellent", "Perennial", "80-100 nuts/tree/year", "high", "Medium", "Perennial (7-8 years to bearing)"),
            _c("Cashew", "excellent", "Perennial", "8-12 kg/tree", "high", "Low", "Perennial (3 years to bearing)"),
            _c("Casuarina", "excellent", "Year-round", "150-200 tons/ha (10 years)", "medium", "Low", "8-10 years"),
            _c("Groundnut", "good", "Kharif", "1.5-2 tons/ha", "high", "Medium", "120-130 days"),
            _c("Pulses (Black gram)", "good", "Rabi", "0.8-1.2 tons/ha", "high", "Low", "70-90 days"),
        ),
    ),
    RegionProfile(
        name="Kanchipuram", category="coastal", soil_type="Red sandy loam, alluvial",
        ph=_r(6.8, 7.8, 7.2), clay=_r(15, 25, 20), sand=_r(45, 60, 52),
        silt=_r(20, 32, 28), organic_carbon=_r(4, 14, 9), nitrogen=_r(70, 120, 95),
        average_rainfall=1200, drainage="Moderate",
        characteristics="Moderately drained, medium fertility, suitable for irrigation",
        crops=(
            _c("Rice (Paddy)", "excellent", "Kharif", "4-5 tons/ha", "high", "High", "120-150 days"),
            _c("Groundnut", "excellent", "Rabi", "2-2.5 tons/ha", "high", "Medium", "120-130 days"),
            _c("Sugarcane", "good", "Year-round", "80-100 tons/ha", "high", "High", "12 months"),
            _c("Cotton", "good", "Kharif", "1.5-2 tons/ha", "high", "Medium", "150-180 days"),
            _c("Vegetables (Tomato, Brinjal)", "good", "Rabi", "25-30 tons/ha", "high", "Medium", "90-120 days"),
        ),
    ),
    RegionProfile(
        name="Cuddalore", category="coastal", soil_type="Coastal alluvium, clayey",
        ph=_r(7.2, 8.0, 7.6), clay=_r(20, 30, 25), sand=_r(35, 50, 42),
        silt=_r(25, 40, 33), organic_carbon=_r(5, 15, 10), nitrogen=_r(80, 130, 105),
        average_rainfall=1150, drainage="Moderate",
        characteristics="Clayey alluvial, good fertility, suitable for paddy",
        crops=(
            _c("Rice (Paddy)", "excellent", "Kharif", "4.5-5.5 tons/ha", "high", "High", "120-150 days"),
            _c("Sugarcane", "excellent", "Year-round", "90-110 tons/ha", "high", "High", "12 months"),
            _c("Groundnut", "good", "Rabi", "2-2.5 tons/ha", "high", "Medium", "120-130 days"),
            _c("Coconut", "good", "Perennial", "70-90 nuts/tree/year", "high", "Medium", "Perennial"),
            _c("Pulses (Green gram)", "moderate", "Summer", "0.7-1 ton/ha", "medium", "Low", "60-70 days"),
        ),
    ),
    # =================== INTERIOR DISTRICTS ===================
    RegionProfile(
        name="Salem", category="interior", soil_type="Red loamy",
        ph=_r(6.5, 7.3, 6.8), clay=_r(22, 35, 28), sand=_r(30, 45, 36),
        silt=_r(28, 38, 36), organic_carbon=_r(8, 18, 12), nitrogen=_r(95, 135, 115),
        average_rainfall=980, drainage="Well-drained",
        characteristics="Well-drained, medium fertility, good for rainfed crops",
        crops=(
            _c("Cotton", "excellent", "Kharif", "1.5-2.5 tons/ha", "high", "Medium", "150-180 days"),
            _c("Maize", "excellent", "Kharif", "4-6 tons/ha", "high", "Medium", "90-110 days"),
            _c("Groundnut", "excellent", "Rabi", "1.8-2.3 tons/ha", "high", "Medium", "120-130 days"),
            _c("Finger Millet (Ragi)", "good", "Kharif", "2-3 tons/ha", "medium", "Low", "120-130 days"),
            _c("Tapioca", "good", "Year-round", "25-35 tons/ha", "medium", "Medium", "8-10 months"),
            _c("Pulses (Red gram)", "good", "Kharif", "1-1.5 tons/ha", "high", "Low", "150-180 days"),
        ),
    ),
    RegionProfile(
        name="Dharmapuri", category="interior", soil_type="Red sandy loam",
        ph=_r(6.2, 7.0, 6.5), clay=_r(18, 28, 23), sand=_r(38, 52, 45),
        silt=_r(25, 35, 32), organic_carbon=_r(6, 15, 10), nitrogen=_r(80, 120, 100),
        average_rainfall=850, drainage="Well-drained",
        characteristics="Slightly acidic, low-medium fertility, drought-prone",
        crops=(
            _c("Finger Millet (Ragi)", "excellent", "Kharif", "2-2.5 tons/ha", "high", "Low", "120-130 days"),
            _c("Groundnut", "excellent", "Rabi", "1.5-2 tons/ha", "high", "Medium", "120-130 days"),
            _c("Cotton", "good", "Kharif", "1.2-1.8 tons/ha", "high", "Medium", "150-180 days"),
            _c("Maize", "good", "Kharif", "3-4 tons/ha", "high", "Medium", "90-110 days"),
            _c("Tamarind", "good", "Perennial", "50-100 kg/tree/year", "medium", "Low", "Perennial (7-8 years to bearing)"),
            _c("Mango", "moderate", "Perennial", "100-150 kg/tree", "high", "Medium", "Perennial (4-5 years to bearing)"),
        ),
    ),
    RegionProfile(
        name="Madurai", category="interior", soil_type="Black cotton soil, red loam mix",
        ph=_r(7.0, 8.0, 7.4), clay=_r(30, 45, 38), sand=_r(25, 40, 32),
        silt=_r(25, 35, 30), organic_carbon=_r(7, 16, 11), nitrogen=_r(85, 125, 105),
        average_rainfall=850, drainage="Moderate",
        characteristics="Heavy clay, good water retention, cracking when dry",
        crops=(
            _c("Cotton", "excellent", "Kharif", "1.8-2.5 tons/ha", "high", "Medium", "150-180 days"),
            _c("Sorghum (Cholam)", "excellent", "Kharif", "2.5-3.5 tons/ha", "medium", "Low", "110-130 days"),
            _c("Groundnut", "good", "Rabi", "1.5-2 tons/ha", "high", "Medium", "120-130 days"),
            _c("Pulses (Chickpea)", "good", "Rabi", "1.2-1.8 tons/ha", "high", "Low", "100-120 days"),
            _c("Sunflower", "good", "Rabi", "1.5-2 tons/ha", "medium", "Medium", "90-110 days"),
        ),
    ),
    # =================== WESTERN DISTRICTS ===================
    RegionProfile(
        name="Coimbatore", category="western", soil_type="Black cotton soil",
        ph=_r(7.2, 8.5, 7.8), clay=_r(35, 52, 43), sand=_r(20, 35, 27),
        silt=_r(20, 32, 30), organic_carbon=_r(9, 20, 14), nitrogen=_r(100, 150, 125),
        average_rainfall=700, drainage="Moderate",
        characteristics="High clay, alkaline, excellent fertility, irrigation-friendly",
        crops=(
            _c("Cotton", "excellent", "Kharif", "2-3 tons/ha", "high", "Medium", "150-180 days"),
            _c("Sugarcane", "excellent", "Year-round", "100-120 tons/ha", "high", "High", "12 months"),
            _c("Maize", "excellent", "Kharif", "5-7 tons/ha", "high", "Medium", "90-110 days"),
            _c("Turmeric", "excellent", "Kharif", "4-6 tons/ha", "high", "High", "7-9 months"),
            _c("Sorghum (Cholam)", "excellent", "Kharif", "3-4 tons/ha", "high", "Low", "110-130 days"),
            _c("Vegetables (Cabbage, Cauliflower)", "good", "Rabi", "30-40 tons/ha", "high", "Medium", "90-120 days"),
            _c("Banana", "good", "Year-round", "40-50 tons/ha", "high", "High", "12 months"),
        ),
    ),
    RegionProfile(
        name="Erode", category="western", soil_type="Red loam, black soil mix",
        ph=_r(6.8, 7.9, 7.3), clay=_r(28, 42, 35), sand=_r(25, 40, 32),
        silt=_r(25, 38, 33), organic_carbon=_r(8, 18, 13), nitrogen=_r(95, 140, 118),
        average_rainfall=750, drainage="Well-drained",
        characteristics="Medium to heavy texture, good fertility, perennial crop suitable",
        crops=(
            _c("Turmeric", "excellent", "Kharif", "5-7 tons/ha", "high", "High", "7-9 months"),
            _c("Cotton", "excellent", "Kharif", "2-2.5 tons/ha", "high", "Medium", "150-180 days"),
            _c("Sugarcane", "good", "Year-round", "90-110 tons/ha", "high", "High", "12 months"),
            _c("Banana", "good", "Year-round", "45-55 tons/ha", "high", "High", "12 months"),
            _c("Coconut", "good", "Perennial", "80-100 nuts/tree/year", "high", "Medium", "Perennial"),
        ),
    ),
    # =================== HILL DISTRICTS ===================
    RegionProfile(
        name="Nilgiris", category="hill", soil_type="Laterite, forest loam",
        ph=_r(5.0, 6.5, 5.8), clay=_r(15, 30, 22), sand=_r(35, 55, 45),
        silt=_r(25, 40, 33), organic_carbon=_r(15, 35, 25), nitrogen=_r(120, 180, 150),
        average_rainfall=1800, drainage="Well-drained",
        characteristics="Acidic, high organic matter, well-drained, cool climate",
        crops=(
            _c("Tea", "excellent", "Year-round", "2000-2500 kg/ha", "high", "High", "Perennial (3 years to bearing)"),
            _c("Coffee (Arabica)", "excellent", "Perennial", "800-1200 kg/ha", "high", "Medium", "Perennial (3-4 years to bearing)"),
            _c("Potato", "excellent", "Rabi", "20-25 tons/ha", "high", "Medium", "90-120 days"),
            _c("Vegetables (Carrot, Cabbage)", "excellent", "Year-round", "25-35 tons/ha", "high", "Medium", "90-120 days"),
            _c("Spices (Cardamom, Pepper)", "good", "Perennial", "200-300 kg/ha", "high", "High", "Perennial (2-3 years to bearing)"),
        ),
    ),
    # =================== ADDITIONAL DISTRICTS ===================
    RegionProfile(
        name="Tiruvallur", category="coastal", soil_type="Red sandy, alluvial",
        ph=_r(6.8, 7.6, 7.2), clay=_r(15, 22, 18), sand=_r(48, 62, 55),
        silt=_r(22, 32, 27), organic_carbon=_r(4, 13, 8), nitrogen=_r(70, 115, 92),
        average_rainfall=1300, drainage="Well-drained",
        characteristics="Sandy loam, moderate fertility, coastal influence",
        crops=(
            _c("Rice (Paddy)", "excellent", "Kharif", "4-5 tons/ha", "high", "High", "120-150 days"),
            _c("Groundnut", "good", "Rabi", "1.8-2.2 tons/ha", "high", "Medium", "120-130 days"),
            _c("Coconut", "good", "Perennial", "75-95 nuts/tree/year", "high", "Medium", "Perennial"),
        ),
    ),
    RegionProfile(
        name="Thanjavur", category="coastal", soil_type="Alluvial, clayey (Cauvery Delta)",
        ph=_r(7.0, 7.8, 7.4), clay=_r(25, 38, 32), sand=_r(30, 45, 38),
        silt=_r(25, 38, 30), organic_carbon=_r(8, 18, 13), nitrogen=_r(100, 145, 122),
        average_rainfall=950, drainage="Moderate",
        characteristics="Fertile delta soil, excellent for paddy, high organic content",
        crops=(
            _c("Rice (Paddy)", "excellent", "Kharif", "5-6.5 tons/ha", "high", "High", "120-150 days"),
            _c("Sugarcane", "excellent", "Year-round", "95-115 tons/ha", "high", "High", "12 months"),
            _c("Banana", "good", "Year-round", "45-55 tons/ha", "high", "High", "12 months"),
            _c("Pulses (Black gram)", "good", "Rabi", "0.9-1.3 tons/ha", "high", "Low", "70-90 days"),
        ),
    ),
    RegionProfile(
        name="Vellore", category="interior", soil_type="Red loam",
        ph=_r(6.3, 7.2, 6.7), clay=_r(20, 32, 26), sand=_r(32, 48, 40),
        silt=_r(24, 36, 34), organic_carbon=_r(7, 16, 11), nitrogen=_r(88, 128, 108),
        average_rainfall=950, drainage="Well-drained",
        characteristics="Red loam, moderate fertility, mixed cropping",
        crops=(
            _c("Groundnut", "excellent", "Kharif", "1.8-2.5 tons/ha", "high", "Medium", "120-130 days"),
            _c("Maize", "excellent", "Kharif", "4-5.5 tons/ha", "high", "Medium", "90-110 days"),
            _c("Cotton", "good", "Kharif", "1.5-2 tons/ha", "high", "Medium", "150-180 days"),
            _c("Finger Millet (Ragi)", "good", "Kharif", "2-2.8 tons/ha", "medium", "Low", "120-130 days"),
            _c("Mango", "good", "Perennial", "100-150 kg/tree", "high", "Medium", "Perennial (4-5 years to bearing)"),
        ),
    ),
    RegionProfile(
        name="Tiruppur", category="western", soil_type="Red loam, black patches",
        ph=_r(6.9, 8.2, 7.5), clay=_r(30, 45, 38), sand=_r(22, 38, 30),
        silt=_r(22, 35, 32), organic_carbon=_r(8, 19, 13), nitrogen=_r(95, 145, 120),
        average_rainfall=650, drainage="Moderate",
        characteristics="Mixed red-black, good fertility, cotton belt",
        crops=(
            _c("Cotton", "excellent", "Kharif", "2-2.8 tons/ha", "high", "Medium", "150-180 days"),
            _c("Maize", "excellent", "Kharif", "5-6.5 tons/ha", "high", "Medium", "90-110 days"),
            _c("Coconut", "good", "Perennial", "75-95 nuts/tree/year", "high", "Medium", "Perennial"),
            _c("Turmeric", "good", "Kharif", "4.5-6.5 tons/ha", "high", "High", "7-9 months"),
        ),
    ),
    RegionProfile(
        name="Namakkal", category="western", soil_type="Red loam",
        ph=_r(6.7, 7.6, 7.1), clay=_r(26, 38, 32), sand=_r(28, 42, 35),
        silt=_r(26, 36, 33), organic_carbon=_r(8, 17, 12), nitrogen=_r(92, 138, 115),
        average_rainfall=820, drainage="Well-drained",
        characteristics="Red loam, poultry hub, mixed farming",
        crops=(
            _c("Maize", "excellent", "Kharif", "5-6 tons/ha", "high", "Medium", "90-110 days"),
            _c("Groundnut", "excellent", "Rabi", "1.8-2.3 tons/ha", "high", "Medium", "120-130 days"),
            _c("Tapioca", "good", "Year-round", "28-38 tons/ha", "medium", "Medium", "8-10 months"),
            _c("Coconut", "good", "Perennial", "80-100 nuts/tree/year", "high", "Medium", "Perennial"),
        ),
    ),
    RegionProfile(
        name="Krishnagiri", category="interior", soil_type="Red loam, gravelly",
        ph=_r(6.3, 7.1, 6.6), clay=_r(20, 30, 25), sand=_r(35, 50, 42),
        silt=_r(25, 38, 33), organic_carbon=_r(7, 16, 11), nitrogen=_r(85, 125, 105),
        average_rainfall=880, drainage="Well-drained",
        characteristics="Red loam with gravelly patches, hillock areas, mango belt",
        crops=(
            _c("Mango", "excellent", "Perennial", "120-180 kg/tree", "high", "Medium", "Perennial (4-5 years to bearing)"),
            _c("Groundnut", "excellent", "Kharif", "1.8-2.5 tons/ha", "high", "Medium", "120-130 days"),
            _c("Finger Millet (Ragi)", "excellent", "Kharif", "2-3 tons/ha", "high", "Low", "120-130 days"),
            _c("Maize", "good", "Kharif", "4-5.5 tons/ha", "high", "Medium", "90-110 days"),
            _c("Tamarind", "good", "Perennial", "60-120 kg/tree/year", "medium", "Low", "Perennial (7-8 years to bearing)"),
        ),
    ),
    RegionProfile(
        name="Tiruvannamalai", category="interior", soil_type="Red loam",
        ph=_r(6.4, 7.3, 6.8), clay=_r(22, 34, 28), sand=_r(30, 46, 38),
        silt=_r(26, 38, 34), organic_carbon=_r(7, 17, 12), nitrogen=_r(88, 132, 110),
        average_rainfall=1050, drainage="Well-drained",
        characteristics="Red loam, groundnut belt, mixed cropping",
        crops=(
            _c("Groundnut", "excellent", "Kharif", "2-2.8 tons/ha", "high", "Medium", "120-130 days"),
            _c("Maize", "excellent", "Kharif", "4.5-6 tons/ha", "high", "Medium", "90-110 days"),
            _c("Sugarcane", "good", "Year-round", "85-105 tons/ha", "high", "High", "12 months"),
            _c("Finger Millet (Ragi)", "good", "Kharif", "2-3 tons/ha", "medium", "Low", "120-130 days"),
        ),
    ),
    RegionProfile(
        name="Villupuram", category="coastal", soil_type="Red sandy loam, coastal mix",
        ph=_r(6.6, 7.6, 7.0), clay=_r(18, 28, 23), sand=_r(40, 56, 48),
        silt=_r(22, 34, 29), organic_carbon=_r(6, 15, 10), nitrogen=_r(80, 120, 100),
        average_rainfall=1100, drainage="Well-drained",
        characteristics="Red sandy loam, coastal influence, cashew area",
        crops=(
            _c("Cashew", "excellent", "Perennial", "10-15 kg/tree", "high", "Low", "Perennial (3 years to bearing)"),
            _c("Groundnut", "excellent", "Kharif", "1.8-2.5 tons/ha", "high", "Medium", "120-130 days"),
            _c("Coconut", "good", "Perennial", "75-95 nuts/tree/year", "high", "Medium", "Perennial"),
            _c("Rice (Paddy)", "good", "Kharif", "4-5 tons/ha", "high", "High", "120-150 days"),
        ),
    ),
    RegionProfile(
        name="Pudukkottai", category="interior", soil_type="Red sandy, black patches",
        ph=_r(6.8, 7.9, 7.3), clay=_r(25, 38, 32), sand=_r(28, 44, 36),
        silt=_r(24, 36, 32), organic_carbon=_r(6, 15, 10), nitrogen=_r(82, 122, 102),
        average_rainfall=880, drainage="Moderate",
        characteristics="Mixed red-black, low rainfall, rainfed crops",
        crops=(
            _c("Cotton", "excellent", "Kharif", "1.5-2.3 tons/ha", "high", "Medium", "150-180 days"),
            _c("Groundnut", "good", "Kharif", "1.5-2 tons/ha", "high", "Medium", "120-130 days"),
            _c("Sorghum (Cholam)", "good", "Kharif", "2.5-3.5 tons/ha", "medium", "Low", "110-130 days"),
            _c("Pulses (Red gram)", "good", "Kharif", "1-1.5 tons/ha", "high", "Low", "150-180 days"),
        ),
    ),
    RegionProfile(
        name="Theni", category="western", soil_type="Red loam, black patches, hill slopes",
        ph=_r(6.7, 7.8, 7.2), clay=_r(28, 42, 35), sand=_r(24, 40, 32),
        silt=_r(24, 36, 33), organic_carbon=_r(8, 18, 13), nitrogen=_r(90, 135, 112),
        average_rainfall=780, drainage="Well-drained",
        characteristics="Mixed soil, hill areas, cotton, cardamom in hills",
        crops=(
            _c("Cotton", "excellent", "Kharif", "1.8-2.5 tons/ha", "high", "Medium", "150-180 days"),
            _c("Cardamom", "excellent", "Perennial", "200-350 kg/ha", "high", "High", "Perennial (2-3 years to bearing)"),
            _c("Coconut", "good", "Perennial", "80-100 nuts/tree/year", "high", "Medium", "Perennial"),
            _c("Banana", "good", "Year-round", "45-60 tons/ha", "high", "High", "12 months"),
        ),
    ),
    RegionProfile(
        name="Dindigul", category="western", soil_type="Red loam, black cotton mix",
        ph=_r(6.8, 7.9, 7.3), clay=_r(28, 44, 36), sand=_r(24, 40, 32),
        silt=_r(24, 36, 32), organic_carbon=_r(8, 18, 13), nitrogen=_r(90, 137, 113),
        average_rainfall=850, drainage="Moderate",
        characteristics="Mixed red-black, famous for vegetables and flowers",
        crops=(
            _c("Vegetables (Beans, Carrot)", "excellent", "Rabi", "25-35 tons/ha", "high", "Medium", "90-120 days"),
            _c("Flowers (Jasmine, Rose)", "excellent", "Year-round", "8-12 tons/ha", "high", "Medium", "Perennial"),
            _c("Cotton", "good", "Kharif", "1.8-2.5 tons/ha", "high", "Medium", "150-180 days"),
            _c("Banana", "good", "Year-round", "45-58 tons/ha", "high", "High", "12 months"),
        ),
    ),
    RegionProfile(
        name="Sivaganga", category="interior", soil_type="Red sandy, black patches",
        ph=_r(7.0, 8.2, 7.5), clay=_r(26, 40, 33), sand=_r(26, 42, 34),
        silt=_r(24, 36, 33), organic_carbon=_r(6, 15, 10), nitrogen=_r(80, 120, 100),
        average_rainfall=820, drainage="Moderate",
        characteristics="Mixed red-black, semi-arid, cotton belt",
        crops=(
            _c("Cotton", "excellent", "Kharif", "1.5-2.3 tons/ha", "high", "Medium", "150-180 days"),
            _c("Sorghum (Cholam)", "excellent", "Kharif", "2.5-3.5 tons/ha", "medium", "Low", "110-130 days"),
            _c("Pulses (Chickpea)", "good", "Rabi", "1.2-1.8 tons/ha", "high", "Low", "100-120 days"),
            _c("Groundnut", "good", "Kharif", "1.5-2 tons/ha", "high", "Medium", "120-130 days"),
        ),
    ),
    RegionProfile(
        name="Virudhunagar", category="interior", soil_type="Red loam, black patches",
        ph=_r(6.9, 7.9, 7.4), clay=_r(28, 42, 35), sand=_r(26, 40, 33),
        silt=_r(24, 36, 32), organic_carbon=_r(7, 16, 11), nitrogen=_r(85, 125, 105),
        average_rainfall=850, drainage="Moderate",
        characteristics="Mixed red-black, cotton and groundnut belt",
        crops=(
            _c("Cotton", "excellent", "Kharif", "1.8-2.5 tons/ha", "high", "Medium", "150-180 days"),
            _c("Groundnut", "excellent", "Kharif", "1.8-2.5 tons/ha", "high", "Medium", "120-130 days"),
            _c("Sorghum (Cholam)", "good", "Kharif", "2.5-3.5 tons/ha", "medium", "Low", "110-130 days"),
            _c("Sunflower", "good", "Rabi", "1.5-2.2 tons/ha", "medium", "Medium", "90-110 days"),
        ),
    ),
    RegionProfile(
        name="Ramanathapuram", category="coastal", soil_type="Coastal saline, sandy",
        ph=_r(7.5, 9.0, 8.2), clay=_r(18, 30, 24), sand=_r(42, 60, 51),
        silt=_r(20, 32, 25), organic_carbon=_r(3, 10, 6), nitrogen=_r(55, 95, 75),
        average_rainfall=720, drainage="Well-drained",
        characteristics="Saline coastal, alkaline, salt-tolerant crops only",
        crops=(
            _c("Coconut", "good", "Perennial", "60-85 nuts/tree/year", "high", "Medium", "Perennial"),
            _c("Palmyra (Palm)", "excellent", "Perennial", "80-120 fruits/tree", "medium", "Low", "Perennial"),
            _c("Sorghum (Cholam)", "moderate", "Kharif", "2-2.8 tons/ha", "medium", "Low", "110-130 days"),
            _c("Pearl Millet (Bajra)", "moderate", "Kharif", "1.5-2.5 tons/ha", "low", "Low", "70-90 days"),
        ),
    ),
    RegionProfile(
        name="Thoothukudi", category="coastal", soil_type="Coastal alluvial, saline patches",
        ph=_r(7.2, 8.5, 7.8), clay=_r(20, 32, 26), sand=_r(38, 54, 46),
        silt=_r(22, 34, 28), organic_carbon=_r(4, 12, 8), nitrogen=_r(65, 105, 85),
        average_rainfall=680, drainage="Moderate",
        characteristics="Coastal, some salinity, coconut and cotton areas",
        crops=(
            _c("Coconut", "excellent", "Perennial", "70-95 nuts/tree/year", "high", "Medium", "Perennial"),
            _c("Cotton", "good", "Kharif", "1.5-2.2 tons/ha", "high", "Medium", "150-180 days"),
            _c("Pulses (Black gram)", "good", "Rabi", "0.8-1.2 tons/ha", "high", "Low", "70-90 days"),
            _c("Groundnut", "moderate", "Kharif", "1.5-2 tons/ha", "high", "Medium", "120-130 days"),
        ),
    ),
    RegionProfile(
        name="Tirunelveli", category="interior", soil_type="Red loam, black cotton mix",
        ph=_r(6.8, 7.8, 7.3), clay=_r(26, 40, 33), sand=_r(26, 42, 34),
        silt=_r(26, 38, 33), organic_carbon=_r(7, 16, 11), nitrogen=_r(85, 125, 105),
        average_rainfall=750, drainage="Moderate",
        characteristics="Mixed red-black, rice in ayacut, cotton in dry areas",
        crops=(
            _c("Rice (Paddy)", "excellent", "Kharif", "4.5-5.5 tons/ha", "high", "High", "120-150 days"),
            _c("Cotton", "excellent", "Kharif", "1.8-2.5 tons/ha", "high", "Medium", "150-180 days"),
            _c("Banana", "good", "Year-round", "45-60 tons/ha", "high", "High", "12 months"),
            _c("Coconut", "good", "Perennial", "75-95 nuts/tree/year", "high", "Medium", "Perennial"),
        ),
    ),
    RegionProfile(
        name="Kanyakumari", category="coastal", soil_type="Laterite, coastal alluvial",
        ph=_r(5.5, 6.8, 6.1), clay=_r(18, 32, 25), sand=_r(35, 52, 43),
        silt=_r(24, 38, 32), organic_carbon=_r(10, 25, 17), nitrogen=_r(100, 160, 130),
        average_rainfall=1800, drainage="Well-drained",
        characteristics="High rainfall, laterite, rubber and spices suitable",
        crops=(
            _c("Rubber", "excellent", "Perennial", "1500-2000 kg/ha", "high", "High", "Perennial (7 years to tapping)"),
            _c("Coconut", "excellent", "Perennial", "80-110 nuts/tree/year", "high", "Medium", "Perennial"),
            _c("Banana", "excellent", "Year-round", "50-70 tons/ha", "high", "High", "12 months"),
            _c("Spices (Pepper, Clove)", "good", "Perennial", "1-2 kg/vine", "high", "High", "Perennial"),
            _c("Rice (Paddy)", "good", "Kharif", "4-5 tons/ha", "high", "High", "120-150 days"),
        ),
    ),
    RegionProfile(
        name="Karur", category="western", soil_type="Red loam, black patches",
        ph=_r(6.8, 7.7, 7.2), clay=_r(28, 42, 35), sand=_r(26, 40, 33),
        silt=_r(24, 36, 32), organic_carbon=_r(7, 17, 12), nitrogen=_r(88, 130, 109),
        average_rainfall=780, drainage="Moderate",
        characteristics="Mixed red-black, moderate rainfall, mixed cropping",
        crops=(
            _c("Cotton", "excellent", "Kharif", "2-2.8 tons/ha", "high", "Medium", "150-180 days"),
            _c("Maize", "excellent", "Kharif", "5-6.5 tons/ha", "high", "Medium", "90-110 days"),
            _c("Sugarcane", "good", "Year-round", "90-110 tons/ha", "high", "High", "12 months"),
            _c("Banana", "good", "Year-round", "45-58 tons/ha", "high", "High", "12 months"),
        ),
    ),
)

_BY_NAME: Mapping[str, RegionProfile] = MappingProxyType({p.name: p for p in _PROFILES})

if len(_BY_NAME) != len(_PROFILES):
    raise ValueError("Duplicate district names in the soil profile registry")
if DEFAULT_REGION not in _BY_NAME:
    raise ValueError(f"Default region {DEFAULT_REGION!r} missing from registry")


def get_region(name: str) -> Optional[RegionProfile]:
    """Exact-name lookup. Returns None for unknown names."""
    return _BY_NAME.get(name)


def all_regions() -> Tuple[RegionProfile, ...]:
    return _PROFILES


def region_names() -> Tuple[str, ...]:
    return tuple(p.name for p in _PROFILES)


def default_region() -> RegionProfile:
    return _BY_NAME[DEFAULT_REGION]


def registry_frame() -> pd.DataFrame:
    """
    One row per district with the typical soil values, for tooling and the CLI.
    """
    rows = []
    for p in _PROFILES:
        rows.append(
            {
                "district": p.name,
                "region": p.category.value,
                "soil_type": p.soil_type,
                "ph": p.ph.typical,
                "clay": p.clay.typical,
                "sand": p.sand.typical,
                "silt": p.silt.typical,
                "organic_carbon": p.organic_carbon.typical,
                "nitrogen": p.nitrogen.typical,
                "rainfall_mm": p.average_rainfall,
                "crop_count": len(p.crops),
            }
        )
    return pd.DataFrame(rows)
