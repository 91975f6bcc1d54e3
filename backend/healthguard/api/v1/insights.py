"""
Disease Impact Insight API Endpoints

Endpoints:
    - POST /insights/disease-impact - Generate insights from daily logs
    - GET  /insights/disease-impact - Analyses, newest first
    - GET  /insights/disease-impact/latest - Rows of the newest generation
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from healthguard.api.v1.deps import get_current_user
from healthguard.db.session import get_db
from healthguard.models.user import User
from healthguard.schemas.insight import DiseaseImpactListResponse
from healthguard.services import assessment_service

router = APIRouter(prefix="/insights/disease-impact")


@router.post("", response_model=DiseaseImpactListResponse, status_code=status.HTTP_201_CREATED)
def generate_disease_insights(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Analyse the last week of daily logs for Cardiovascular Disease,
    Type 2 Diabetes and Hypertension.

    Errors:
        - 404: No profile yet
        - 400: Fewer than 3 daily logs
    """
    analyses = assessment_service.generate_disease_insights(db, current_user.id)
    return DiseaseImpactListResponse(analyses=analyses, total=len(analyses))


@router.get("", response_model=DiseaseImpactListResponse)
def list_disease_insights(
    limit: int = Query(10, ge=1, le=100),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    analyses = assessment_service.get_disease_analyses(db, current_user.id, limit=limit)
    return DiseaseImpactListResponse(analyses=analyses, total=len(analyses))


@router.get("/latest", response_model=DiseaseImpactListResponse)
def get_latest_disease_insights(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Newest generation only; empty list if insights were never generated."""
    analyses = assessment_service.get_latest_disease_analyses(db, current_user.id)
    return DiseaseImpactListResponse(analyses=analyses, total=len(analyses))
