"""
Report Service
Business logic for uploaded medical reports.

Uploads are metadata only: the file is not stored, file_url is a
placeholder built from the file name, and the analysis comes from the
report classifier.
"""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, desc
from sqlalchemy.orm import Session

from healthguard.core.constants import REPORT_FILE_URL_PREFIX
from healthguard.models.medical_report import MedicalReport
from healthguard.services.report_classifier import classify

logger = logging.getLogger(__name__)


def placeholder_file_url(file_name: str) -> str:
    return f"{REPORT_FILE_URL_PREFIX}/{file_name}"


def create_report(
    db: Session,
    user_id: UUID,
    report_type: str,
    report_date: date,
    file_name: str
) -> MedicalReport:
    """
    Classify and store a report.

    Unknown report types are accepted and get the manual review analysis.

    Example:
        report = create_report(db, user.id, "Blood Test", date(2025, 1, 10), "cbc.pdf")
        report.file_url  # "placeholder-url/cbc.pdf"
    """
    analysis = classify(report_type)

    report = MedicalReport(
        user_id=user_id,
        report_type=report_type,
        report_date=report_date,
        file_name=file_name,
        file_url=placeholder_file_url(file_name),
        ai_analysis=analysis.to_dict(),
        findings=analysis.findings,
        risk_factors=analysis.risk_factors,
        recommendations=analysis.recommendations,
    )

    try:
        db.add(report)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(report)

    logger.info(f"Report '{report_type}' ({file_name}) stored for user {user_id}")
    return report


def get_reports(
    db: Session,
    user_id: UUID,
    limit: int = 50,
    offset: int = 0
) -> tuple[list[MedicalReport], int]:
    """Reports, newest report_date first."""
    query = db.query(MedicalReport).filter(MedicalReport.user_id == user_id)
    total = query.count()
    reports = (
        query.order_by(desc(MedicalReport.report_date), desc(MedicalReport.created_at))
        .limit(limit)
        .offset(offset)
        .all()
    )
    return reports, total


def get_report_by_id(db: Session, report_id: UUID, user_id: UUID) -> Optional[MedicalReport]:
    return db.query(MedicalReport).filter(
        and_(
            MedicalReport.id == report_id,
            MedicalReport.user_id == user_id
        )
    ).first()


def count_reports(db: Session, user_id: UUID) -> int:
    return db.query(MedicalReport).filter(MedicalReport.user_id == user_id).count()
