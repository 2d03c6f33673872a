import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import pandas as pd

from ..preferences import PrimaryGoal, RiskTolerance
from ..registry.crops import MarketDemand
from ..registry.profiles import CropEntry
from ..soil.reading import SoilReading
from .rules import BASE_SCORE, DEFAULT_RULES, TOP_N, ScoringRules


logger = logging.getLogger(__name__)


@dataclass
class ScoredCandidate:
    entry: CropEntry
    score: int
    reasons: List[str] = field(default_factory=list)
    position: int = 0

    @property
    def explanation(self) -> str:
        return ", ".join(self.reasons)

    def to_dict(self) -> Dict[str, object]:
        return {
            "crop": self.entry.crop,
            "key": self.entry.key,
            "suitability": self.entry.suitability.value,
            "score": self.score,
            "reasons": list(self.reasons),
            "explanation": self.explanation,
        }


def score_crop(
    entry: CropEntry,
    reading: SoilReading,
    goal: PrimaryGoal,
    risk: RiskTolerance,
    rules: ScoringRules = DEFAULT_RULES,
) -> Tuple[int, List[str]]:
    key = entry.key
    score = BASE_SCORE
    reasons: List[str] = []

    def apply(members, delta, reason):
        nonlocal score
        if key in members:
            score += delta
            reasons.append(reason)

    # pH
    if reading.ph < rules.acidic_below:
        apply(rules.acid_lovers, rules.acid_lover_bonus, "acidic soil lover")
        apply(rules.acid_sensitive, rules.acid_sensitive_penalty, "sensitive to acidic soil")
    elif reading.ph > rules.alkaline_above:
        apply(rules.alkaline_tolerant, rules.alkaline_tolerant_bonus, "alkaline tolerant")
        apply(rules.alkaline_sensitive, rules.alkaline_sensitive_penalty, "sensitive to alkaline soil")

    # Texture
    if reading.clay > rules.heavy_clay_above:
        apply(rules.clay_lovers, rules.clay_lover_bonus, "thrives in clayey soil")
    elif reading.clay < rules.sandy_clay_below:
        apply(rules.sandy_tolerant, rules.sandy_tolerant_bonus, "suited for sandy soil")
        apply(rules.clay_requiring, rules.clay_requiring_penalty, "needs heavier soil")

    # Goal
    if goal.profit_oriented and entry.market_demand == MarketDemand.HIGH:
        score += rules.market_demand_bonus
        reasons.append("high market demand")
    elif goal == PrimaryGoal.SOIL_HEALTH:
        apply(rules.legumes, rules.legume_bonus, "nitrogen-fixing legume")

    # Risk
    if risk == RiskTolerance.LOW:
        apply(rules.stable_crops, rules.stable_bonus, "stable crop")
    elif risk == RiskTolerance.HIGH:
        apply(rules.cash_crops, rules.cash_crop_bonus, "high-value cash crop")

    score += rules.tier_bonus.get(entry.suitability, 0)
    return score, reasons


def score_candidates(
    crops: Sequence[CropEntry],
    reading: SoilReading,
    goal: PrimaryGoal,
    risk: RiskTolerance,
    rules: ScoringRules = DEFAULT_RULES,
) -> List[ScoredCandidate]:
    scored = []
    for position, entry in enumerate(crops):
        score, reasons = score_crop(entry, reading, goal, risk, rules)
        scored.append(ScoredCandidate(entry, score, reasons, position))
    return scored


def rank_candidates(
    candidates: Sequence[ScoredCandidate], top_n: int = TOP_N
) -> List[ScoredCandidate]:
    """
    Highest score first; equal scores keep registry order.
    """
    if not candidates:
        return []
    frame = pd.DataFrame(
        {
            "index": range(len(candidates)),
            "position": [c.position for c in candidates],
            "score": [c.score for c in candidates],
        }
    )
    ranked = frame.sort_values(
        ["score", "position", "index"], ascending=[False, True, True], kind="stable"
    ).head(top_n)
    logger.debug(
        "Ranked %d candidates, kept %d (top score %d)",
        len(candidates), len(ranked), int(ranked["score"].iloc[0]),
    )
    return [candidates[int(i)] for i in ranked["index"]]
