"""
Additive scoring rules. Thresholds and point values are fixed agronomic
constants; crop sets are keyed by canonical crop key.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping

from ..registry.crops import Suitability


BASE_SCORE = 100
TOP_N = 5


@dataclass(frozen=True)
class ScoringRules:
    tier_bonus: Mapping[Suitability, int] = field(
        default_factory=lambda: MappingProxyType({
            Suitability.EXCELLENT: 40,
            Suitability.GOOD: 20,
            Suitability.MODERATE: 5,
        })
    )

    acidic_below: float = 6.0
    acid_lovers: FrozenSet[str] = frozenset({"tea", "coffee", "ginger", "turmeric", "finger_millet"})
    acid_lover_bonus: int = 20
    acid_sensitive: FrozenSet[str] = frozenset({"wheat", "sugarcane", "sorghum", "mustard"})
    acid_sensitive_penalty: int = -30

    alkaline_above: float = 7.5
    alkaline_tolerant: FrozenSet[str] = frozenset({"coconut", "sugarcane", "cotton", "sorghum"})
    alkaline_tolerant_bonus: int = 15
    alkaline_sensitive: FrozenSet[str] = frozenset({"tea", "coffee", "finger_millet"})
    alkaline_sensitive_penalty: int = -25

    heavy_clay_above: float = 40.0
    clay_lovers: FrozenSet[str] = frozenset({"cotton", "sugarcane", "rice", "turmeric"})
    clay_lover_bonus: int = 25

    sandy_clay_below: float = 20.0
    sandy_tolerant: FrozenSet[str] = frozenset({"coconut", "cashew", "groundnut", "pearl_millet"})
    sandy_tolerant_bonus: int = 20
    clay_requiring: FrozenSet[str] = frozenset({"cotton", "sugarcane"})
    clay_requiring_penalty: int = -20

    market_demand_bonus: int = 30
    legumes: FrozenSet[str] = frozenset({"red_gram", "green_gram", "black_gram", "chickpea"})
    legume_bonus: int = 40

    stable_crops: FrozenSet[str] = frozenset({"rice", "groundnut", "maize", "finger_millet"})
    stable_bonus: int = 15
    cash_crops: FrozenSet[str] = frozenset({"cotton", "turmeric", "banana", "vegetables"})
    cash_crop_bonus: int = 20

    def __post_init__(self):
        if self.acid_lovers & self.acid_sensitive:
            raise ValueError("Acid-loving and acid-sensitive crop sets overlap")
        if self.alkaline_tolerant & self.alkaline_sensitive:
            raise ValueError("Alkaline-tolerant and alkaline-sensitive crop sets overlap")


DEFAULT_RULES = ScoringRules()
