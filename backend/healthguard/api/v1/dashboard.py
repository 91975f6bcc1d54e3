"""
Dashboard API Endpoints

Endpoints:
    - GET /dashboard - Home page summary
    - GET /dashboard/progress - Habit history and latest engine outputs
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from healthguard.api.v1.deps import get_current_user
from healthguard.db.session import get_db
from healthguard.models.user import User
from healthguard.schemas.dashboard import DashboardResponse, ProgressResponse
from healthguard.services import dashboard_service

router = APIRouter(prefix="/dashboard")


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Counts of records and reports, latest vitals and latest risk assessment.

    Works before onboarding: welcome_name is "User" and has_profile false.
    """
    return dashboard_service.get_dashboard(db, current_user.id)


@router.get("/progress", response_model=ProgressResponse)
def get_progress(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return dashboard_service.get_progress(db, current_user.id)
