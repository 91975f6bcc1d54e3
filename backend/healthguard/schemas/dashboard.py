"""
Dashboard Pydantic Schemas
Aggregated views shown on the home and progress pages.
"""

from typing import Optional

from pydantic import BaseModel, Field

from healthguard.schemas.health import DailyHealthLogResponse, HealthRecordResponse
from healthguard.schemas.insight import DiseaseImpactResponse
from healthguard.schemas.risk import RiskAssessmentResponse


class DashboardResponse(BaseModel):
    """
    Home page summary.

    welcome_name falls back to "User" when no profile exists yet.
    """
    welcome_name: str
    has_profile: bool
    health_records_count: int = Field(..., ge=0)
    reports_count: int = Field(..., ge=0)
    latest_record: Optional[HealthRecordResponse] = None
    latest_risk_assessment: Optional[RiskAssessmentResponse] = None


class ProgressResponse(BaseModel):
    """Progress page: habit history plus the latest engine outputs."""
    daily_logs: list[DailyHealthLogResponse]
    latest_risk_assessment: Optional[RiskAssessmentResponse] = None
    latest_analyses: list[DiseaseImpactResponse]
