"""
Request models for the HTTP API.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


class CoordinateQuery(BaseModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class CropRecommendationRequest(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    primary_goal: str = Field(default="mixed", description="profit, cash-crop, soil-health, mixed ...")
    risk_tolerance: str = Field(default="medium", description="low, medium or high")
    soil_data: Optional[List[Any]] = Field(
        default=None, description="SoilGrids-style layers; skips the live fetch when given"
    )
    fetch_soil: bool = Field(default=True)

    @field_validator("primary_goal", "risk_tolerance", mode="before")
    @classmethod
    def _blank_to_default(cls, v):
        if v is None:
            return ""
        return str(v).strip()


def validation_details(exc: ValidationError):
    return [
        {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
