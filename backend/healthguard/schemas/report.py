"""
Medical Report Pydantic Schemas
Response models for report upload and listing.

The upload itself is multipart form data (report_type, report_date, file)
so there is no request schema here.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ReportAnalysis(BaseModel):
    """Canned analysis bundle attached to a report."""
    findings: list[str] = Field(default_factory=list)
    risk_factors: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class MedicalReportResponse(BaseModel):
    """
    Stored report.

    Returned by:
        - POST /api/v1/reports
        - GET /api/v1/reports
        - GET /api/v1/reports/{id}
    """
    id: UUID
    user_id: UUID
    report_type: str
    report_date: date
    file_name: str
    file_url: str
    findings: list[str]
    risk_factors: list[str]
    recommendations: list[str]
    created_at: datetime

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)


class MedicalReportListResponse(BaseModel):
    """Reports, newest first."""
    reports: list[MedicalReportResponse]
    total: int


class ReportTypesResponse(BaseModel):
    """Report types offered by the upload form."""
    report_types: list[str]
