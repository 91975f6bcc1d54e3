"""
Medical Report API Endpoints

Endpoints:
    - POST /reports - Upload a report (multipart form)
    - GET  /reports - List reports, newest first
    - GET  /reports/types - Report types offered by the upload form
    - GET  /reports/{id} - Get single report

The uploaded file content is not stored; only its name is kept and the
analysis is the canned bundle for the report type.
"""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session

from healthguard.api.v1.deps import get_current_user
from healthguard.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, REPORT_TYPES
from healthguard.db.session import get_db
from healthguard.models.user import User
from healthguard.schemas.report import (
    MedicalReportListResponse,
    MedicalReportResponse,
    ReportTypesResponse,
)
from healthguard.services import report_service

router = APIRouter(prefix="/reports")


@router.post("", response_model=MedicalReportResponse, status_code=status.HTTP_201_CREATED)
async def upload_report(
    report_type: str = Form(..., min_length=1, max_length=100, description="e.g. Blood Test"),
    report_date: date = Form(...),
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Upload a medical report.

    Form fields:
        - report_type: One of GET /reports/types (other values are accepted)
        - report_date: Date of the report (YYYY-MM-DD)
        - file: The document (PDF, image...)

    Errors:
        - 400: File has no name
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file has no name"
        )

    report = report_service.create_report(
        db,
        user_id=current_user.id,
        report_type=report_type,
        report_date=report_date,
        file_name=file.filename,
    )
    await file.close()
    return report


@router.get("", response_model=MedicalReportListResponse)
def list_reports(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    reports, total = report_service.get_reports(db, current_user.id, limit=limit, offset=offset)
    return MedicalReportListResponse(reports=reports, total=total)


@router.get("/types", response_model=ReportTypesResponse)
def list_report_types(current_user: User = Depends(get_current_user)):
    return ReportTypesResponse(report_types=list(REPORT_TYPES))


@router.get("/{report_id}", response_model=MedicalReportResponse)
def get_report(
    report_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    report = report_service.get_report_by_id(db, report_id, current_user.id)
    if not report:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Report {report_id} not found"
        )
    return report
