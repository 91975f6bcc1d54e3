"""
Risk Assessment API Endpoints

Endpoints:
    - POST /risk-assessments - Generate a new assessment
    - GET  /risk-assessments - History, newest first
    - GET  /risk-assessments/latest - Current assessment
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from healthguard.api.v1.deps import get_current_user
from healthguard.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from healthguard.db.session import get_db
from healthguard.models.user import User
from healthguard.schemas.risk import RiskAssessmentListResponse, RiskAssessmentResponse
from healthguard.services import assessment_service

router = APIRouter(prefix="/risk-assessments")


@router.post("", response_model=RiskAssessmentResponse, status_code=status.HTTP_201_CREATED)
def generate_risk_assessment(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Score the caller's profile and 10 most recent health records.

    Errors:
        - 404: No profile yet (complete onboarding first)
    """
    return assessment_service.generate_risk_assessment(db, current_user.id)


@router.get("", response_model=RiskAssessmentListResponse)
def list_risk_assessments(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    assessments, total = assessment_service.get_risk_assessments(
        db, current_user.id, limit=limit, offset=offset
    )
    return RiskAssessmentListResponse(assessments=assessments, total=total)


@router.get("/latest", response_model=RiskAssessmentResponse)
def get_latest_risk_assessment(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    assessment = assessment_service.get_latest_risk_assessment(db, current_user.id)
    if not assessment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No risk assessment yet"
        )
    return assessment
