"""
Disease Impact Insight Pydantic Schemas
Response models for the lifestyle insight endpoints.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DiseaseImpactResponse(BaseModel):
    """
    One analysed disease of a generation.

    contributing_factors maps a factor name ("exercise", "stress", ...) to
    an explanation sentence. Keys are fixed per disease.
    """
    id: UUID
    user_id: UUID
    disease_name: str
    current_risk_level: int = Field(..., ge=0, le=100)
    risk_trend: str = Field(..., description="improving | worsening | stable")
    contributing_factors: dict[str, str]
    preventive_actions: list[str]
    precautions: list[str]
    lifestyle_remedies: list[str]
    analysis_date: datetime
    created_at: datetime

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)


class DiseaseImpactListResponse(BaseModel):
    """Analyses ordered by analysis_date, newest first."""
    analyses: list[DiseaseImpactResponse]
    total: int
