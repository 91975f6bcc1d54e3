"""
Risk Assessment Pydantic Schemas
Response models for the risk scoring endpoints.

Generation takes no body: the score is derived from the stored profile
and the most recent health records.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RiskFactorsSnapshot(BaseModel):
    """Inputs captured at computation time."""
    age: Optional[int] = Field(None, description="Age in whole years")
    bmi: Optional[float] = Field(None, description="Body mass index")
    conditions: list[str] = Field(default_factory=list)


class RiskAssessmentResponse(BaseModel):
    """
    Stored risk assessment.

    Returned by:
        - POST /api/v1/risk-assessments
        - GET /api/v1/risk-assessments
        - GET /api/v1/risk-assessments/latest
    """
    id: UUID
    user_id: UUID
    assessment_date: date
    overall_risk_score: int = Field(..., ge=0, le=100)
    cardiovascular_risk: Optional[int] = Field(None, ge=0, le=100)
    diabetes_risk: Optional[int] = Field(None, ge=0, le=100)
    respiratory_risk: Optional[int] = Field(None, ge=0, le=100)
    cancer_risk: Optional[int] = Field(None, ge=0, le=100)
    risk_factors: RiskFactorsSnapshot
    recommendations: list[str]
    created_at: datetime

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)


class RiskAssessmentListResponse(BaseModel):
    """Assessment history, newest first."""
    assessments: list[RiskAssessmentResponse]
    total: int
