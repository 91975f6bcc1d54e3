"""
Dashboard Service
Aggregates the data shown on the home and progress pages.
"""

from uuid import UUID

from sqlalchemy.orm import Session

from healthguard.services import assessment_service, health_service, profile_service, report_service

DEFAULT_WELCOME_NAME = "User"
PROGRESS_LOG_DAYS = 30
PROGRESS_ANALYSES = 10


def get_dashboard(db: Session, user_id: UUID) -> dict:
    """
    Home page summary.

    Returns:
        dict matching DashboardResponse
    """
    profile = profile_service.get_profile(db, user_id)

    return {
        "welcome_name": profile.full_name if profile and profile.full_name else DEFAULT_WELCOME_NAME,
        "has_profile": profile is not None,
        "health_records_count": health_service.count_health_records(db, user_id),
        "reports_count": report_service.count_reports(db, user_id),
        "latest_record": health_service.get_latest_health_record(db, user_id),
        "latest_risk_assessment": assessment_service.get_latest_risk_assessment(db, user_id),
    }


def get_progress(db: Session, user_id: UUID) -> dict:
    """
    Progress page: last 30 daily logs (oldest first), the latest risk
    assessment and the 10 newest disease analyses.
    """
    return {
        "daily_logs": health_service.get_recent_daily_logs(db, user_id, limit=PROGRESS_LOG_DAYS),
        "latest_risk_assessment": assessment_service.get_latest_risk_assessment(db, user_id),
        "latest_analyses": assessment_service.get_disease_analyses(db, user_id, limit=PROGRESS_ANALYSES),
    }
