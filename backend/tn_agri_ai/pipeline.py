"""
Location-to-recommendation pipeline.

coordinate -> nearest district profile -> soil reading -> scored crops ->
top-N with a rationale. Pure computation: no I/O and no shared mutable state.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .advisory.rationale import build_rationale
from .geo.resolver import resolve
from .preferences import PrimaryGoal, RiskTolerance, parse_goal, parse_risk
from .registry.soil_types import identify_soil_type
from .scoring.rules import DEFAULT_RULES, TOP_N, ScoringRules
from .scoring.scorer import ScoredCandidate, rank_candidates, score_candidates
from .soil.provider import provide_reading
from .soil.reading import SoilReading


logger = logging.getLogger(__name__)


@dataclass
class RecommendationRequest:
    latitude: float
    longitude: float
    primary_goal: Union[PrimaryGoal, str, None] = PrimaryGoal.MIXED
    risk_tolerance: Union[RiskTolerance, str, None] = RiskTolerance.MEDIUM
    soil_payload: Optional[Any] = None


@dataclass
class RecommendationResult:
    crops: List[str]
    suitability: Dict[str, str]
    reasoning: str
    district: str
    centroid: str
    soil: SoilReading
    soil_type: str
    candidates: List[ScoredCandidate] = field(default_factory=list)

    @property
    def soil_summary(self) -> Dict[str, str]:
        return self.soil.summary()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "crops": list(self.crops),
            "suitability": dict(self.suitability),
            "reasoning": self.reasoning,
            "district": self.district,
            "centroid": self.centroid,
            "soilDataSummary": self.soil_summary,
            "soilSource": self.soil.source,
            "soilType": self.soil_type,
            "candidates": [c.to_dict() for c in self.candidates],
        }


def recommend(
    request: RecommendationRequest,
    top_n: int = TOP_N,
    rules: ScoringRules = DEFAULT_RULES,
) -> RecommendationResult:
    goal = parse_goal(request.primary_goal)
    risk = parse_risk(request.risk_tolerance)

    resolution = resolve(request.latitude, request.longitude)
    region = resolution.region
    logger.info(
        "Resolved (%.4f, %.4f) to %s via %s",
        request.latitude,
        request.longitude,
        region.name,
        resolution.label,
    )

    reading = provide_reading(
        region, request.latitude, request.longitude, request.soil_payload
    )
    scored = score_candidates(region.crops, reading, goal, risk, rules)
    ranked = rank_candidates(scored, top_n)

    return RecommendationResult(
        crops=[c.entry.crop for c in ranked],
        suitability={c.entry.crop: c.entry.suitability.value for c in ranked},
        reasoning=build_rationale(region, reading, ranked, goal, risk),
        district=region.name,
        centroid=resolution.label,
        soil=reading,
        soil_type=identify_soil_type(reading.ph, reading.clay, reading.sand).name,
        candidates=ranked,
    )
