import logging
from enum import Enum
from typing import Union


logger = logging.getLogger(__name__)


class PrimaryGoal(str, Enum):
    PROFIT = "profit"
    CASH_CROP = "cash-crop"
    SOIL_HEALTH = "soil-health"
    MIXED = "mixed"
    PERSONAL_CONSUMPTION = "personal-consumption"

    @property
    def profit_oriented(self) -> bool:
        return self in (PrimaryGoal.PROFIT, PrimaryGoal.CASH_CROP)


class RiskTolerance(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _normalize(value: str) -> str:
    return str(value).strip().lower().replace("_", "-").replace(" ", "-")


def parse_goal(value: Union[PrimaryGoal, str, None]) -> PrimaryGoal:
    if isinstance(value, PrimaryGoal):
        return value
    if value is None or value == "":
        return PrimaryGoal.MIXED
    try:
        return PrimaryGoal(_normalize(value))
    except ValueError:
        logger.warning("Unknown primary goal %r; treating as mixed", value)
        return PrimaryGoal.MIXED


def parse_risk(value: Union[RiskTolerance, str, None]) -> RiskTolerance:
    if isinstance(value, RiskTolerance):
        return value
    if value is None or value == "":
        return RiskTolerance.MEDIUM
    try:
        return RiskTolerance(_normalize(value))
    except ValueError:
        logger.warning("Unknown risk tolerance %r; treating as medium", value)
        return RiskTolerance.MEDIUM
