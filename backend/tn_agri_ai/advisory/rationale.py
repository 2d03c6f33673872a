from typing import List, Sequence

from ..preferences import PrimaryGoal, RiskTolerance
from ..registry.profiles import RegionProfile
from ..scoring.scorer import ScoredCandidate
from ..soil.reading import SoilReading


def ph_label(ph: float) -> str:
    if ph < 6.5:
        return "acidic"
    if ph > 7.5:
        return "alkaline"
    return "neutral"


def texture_label(clay: float) -> str:
    if clay > 35:
        return "heavy"
    if clay < 20:
        return "light, sandy"
    return "medium loam"


def _format_candidate(rank: int, candidate: ScoredCandidate) -> List[str]:
    entry = candidate.entry
    lines = [
        f"{rank}. **{entry.crop}** ({entry.suitability.value})",
        f"   - Season: {entry.season.value}",
        f"   - Expected yield: {entry.expected_yield}",
        f"   - Market demand: {entry.market_demand.value}",
        f"   - Water requirement: {entry.water_requirement.value}",
    ]
    if candidate.reasons:
        lines.append(f"   - Why: {candidate.explanation}")
    return lines


def build_rationale(
    region: RegionProfile,
    reading: SoilReading,
    ranked: Sequence[ScoredCandidate],
    goal: PrimaryGoal,
    risk: RiskTolerance,
) -> str:
    """
    Farmer-facing explanation of the ranked crops: restates the soil numbers,
    walks through each crop and closes with the data sources.
    """
    lines = [f"Based on detailed analysis of {region.name} district:", ""]

    lines.append("**Soil Characteristics:**")
    lines.append(f"- pH {reading.ph:.1f} ({ph_label(reading.ph)})")
    lines.append(
        f"- {reading.clay:.0f}% clay, {reading.sand:.0f}% sand "
        f"({texture_label(reading.clay)} texture)"
    )
    lines.append(
        f"- Nitrogen: {reading.nitrogen:.0f} cg/kg, "
        f"Organic Carbon: {reading.organic_carbon:.1f} g/kg"
    )
    lines.append(f"- Soil type: {region.soil_type}")
    lines.append(f"- Average rainfall: {region.average_rainfall}mm")
    lines.append("")

    lines.append("**Recommended Crops (in order of suitability):**")
    lines.append("")
    for rank, candidate in enumerate(ranked, start=1):
        lines.extend(_format_candidate(rank, candidate))
        lines.append("")

    lines.append("This recommendation is based on:")
    lines.append(f"- Scientific soil data for {region.name} district")
    lines.append(f"- Your goal: {goal.value}")
    lines.append(f"- Your risk tolerance: {risk.value}")
    lines.append("- Tamil Nadu Agricultural University (TNAU) crop suitability research")

    return "\n".join(lines)
