"""
Assessment Service
Runs the scoring engines on stored data and persists their results.

Flow for both engines:
    1. Load the profile (ProfileNotFoundError if onboarding is missing)
    2. Load the recent history the engine needs
    3. Convert rows to snapshots and run the pure engine
    4. Insert the result rows in a single commit

Results are history: previous assessments and analyses are never updated
or deleted, readers pick the newest ones.
"""

import logging
import random
from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import desc
from sqlalchemy.orm import Session

from healthguard.core.config import settings
from healthguard.core.exceptions import InsufficientDataError
from healthguard.models.base import utcnow
from healthguard.models.disease_impact import DiseaseImpactAnalysis
from healthguard.models.risk_assessment import RiskAssessment
from healthguard.services import health_service, profile_service
from healthguard.services.disease_impact import compute_disease_impact
from healthguard.services.risk_scoring import compute_risk_assessment
from healthguard.services.snapshots import DailyLogSnapshot, ProfileSnapshot, VitalsSnapshot

logger = logging.getLogger(__name__)


def _jitter_rng() -> random.Random:
    """Random source for category jitter, seeded when RISK_JITTER_SEED is set."""
    return random.Random(settings.RISK_JITTER_SEED)


# ============================================================================
# RISK ASSESSMENTS
# ============================================================================

def generate_risk_assessment(
    db: Session,
    user_id: UUID,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None
) -> RiskAssessment:
    """
    Compute and store a new risk assessment for the user.

    Args:
        db: Database session
        user_id: Owner of the profile and records
        rng: Random source for the category jitter (default: from settings)
        today: Assessment date and age reference (default: today)

    Returns:
        RiskAssessment: The inserted row

    Raises:
        ProfileNotFoundError: If the user has no profile (nothing is written)
    """
    today = today or date.today()
    profile = profile_service.require_profile(db, user_id)
    records = health_service.get_recent_health_records(
        db, user_id, limit=settings.RISK_RECENT_RECORDS
    )

    result = compute_risk_assessment(
        ProfileSnapshot.from_model(profile),
        [VitalsSnapshot.from_model(r) for r in records],
        rng=rng or _jitter_rng(),
        today=today,
    )

    assessment = RiskAssessment(
        user_id=user_id,
        assessment_date=today,
        overall_risk_score=result.overall_risk_score,
        cardiovascular_risk=result.cardiovascular_risk,
        diabetes_risk=result.diabetes_risk,
        respiratory_risk=result.respiratory_risk,
        cancer_risk=result.cancer_risk,
        risk_factors=result.risk_factors,
        recommendations=result.recommendations,
    )

    try:
        db.add(assessment)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(assessment)

    logger.info(
        f"Risk assessment for user {user_id}: overall={result.overall_risk_score} "
        f"from {len(records)} records"
    )
    return assessment


def get_risk_assessments(
    db: Session,
    user_id: UUID,
    limit: int = 50,
    offset: int = 0
) -> tuple[list[RiskAssessment], int]:
    """Assessment history, newest first."""
    query = db.query(RiskAssessment).filter(RiskAssessment.user_id == user_id)
    total = query.count()
    assessments = (
        query.order_by(desc(RiskAssessment.assessment_date), desc(RiskAssessment.created_at))
        .limit(limit)
        .offset(offset)
        .all()
    )
    return assessments, total


def get_latest_risk_assessment(db: Session, user_id: UUID) -> Optional[RiskAssessment]:
    """The authoritative assessment: latest date, ties broken by creation time."""
    assessments, _ = get_risk_assessments(db, user_id, limit=1)
    return assessments[0] if assessments else None


# ============================================================================
# DISEASE IMPACT INSIGHTS
# ============================================================================

def generate_disease_insights(db: Session, user_id: UUID) -> list[DiseaseImpactAnalysis]:
    """
    Analyse recent daily logs and store one row per disease.

    All rows of one generation share the same analysis_date.

    Raises:
        ProfileNotFoundError: If the user has no profile
        InsufficientDataError: If fewer than INSIGHT_MIN_DAILY_LOGS logs exist
    """
    profile = profile_service.require_profile(db, user_id)
    logs = health_service.get_recent_daily_logs(db, user_id, limit=settings.INSIGHT_LOG_WINDOW)

    if len(logs) < settings.INSIGHT_MIN_DAILY_LOGS:
        raise InsufficientDataError(
            f"At least {settings.INSIGHT_MIN_DAILY_LOGS} daily logs are needed "
            f"to generate insights ({len(logs)} logged)"
        )

    results = compute_disease_impact(
        ProfileSnapshot.from_model(profile),
        [DailyLogSnapshot.from_model(log) for log in logs],
    )

    analysis_date = utcnow()
    analyses = [
        DiseaseImpactAnalysis(
            user_id=user_id,
            disease_name=result.disease_name,
            current_risk_level=result.current_risk_level,
            risk_trend=result.risk_trend,
            contributing_factors=result.contributing_factors,
            preventive_actions=result.preventive_actions,
            precautions=result.precautions,
            lifestyle_remedies=result.lifestyle_remedies,
            analysis_date=analysis_date,
        )
        for result in results
    ]

    try:
        db.add_all(analyses)
        db.commit()
    except Exception:
        db.rollback()
        raise
    for analysis in analyses:
        db.refresh(analysis)

    logger.info(f"Disease insights generated for user {user_id} from {len(logs)} daily logs")
    return analyses


def get_disease_analyses(db: Session, user_id: UUID, limit: int = 10) -> list[DiseaseImpactAnalysis]:
    """Analyses across generations, newest first."""
    return (
        db.query(DiseaseImpactAnalysis)
        .filter(DiseaseImpactAnalysis.user_id == user_id)
        .order_by(desc(DiseaseImpactAnalysis.analysis_date), DiseaseImpactAnalysis.created_at)
        .limit(limit)
        .all()
    )


def get_latest_disease_analyses(db: Session, user_id: UUID) -> list[DiseaseImpactAnalysis]:
    """Rows of the newest generation, in generation order. Empty if none."""
    newest = get_disease_analyses(db, user_id, limit=1)
    if not newest:
        return []

    return (
        db.query(DiseaseImpactAnalysis)
        .filter(
            DiseaseImpactAnalysis.user_id == user_id,
            DiseaseImpactAnalysis.analysis_date == newest[0].analysis_date
        )
        .order_by(DiseaseImpactAnalysis.created_at)
        .all()
    )
