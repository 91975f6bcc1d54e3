"""
Health Service
Business logic for health records and daily health logs.

This service provides reusable functions for:
    - Creating and reading health records (vitals, immutable)
    - Upserting and reading daily health logs (one per user per day)
    - Loading the recent history the scoring engines work on

Separating business logic from API routes improves:
    - Code reusability
    - Testability
    - Clear separation of concerns
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, desc
from sqlalchemy.orm import Session

from healthguard.models.daily_health_log import DailyHealthLog
from healthguard.models.health_record import HealthRecord
from healthguard.schemas.health import DailyHealthLogUpsert, HealthRecordCreate

logger = logging.getLogger(__name__)


# ============================================================================
# HEALTH RECORD SERVICE FUNCTIONS
# ============================================================================

def create_health_record(
    db: Session,
    user_id: UUID,
    record_data: HealthRecordCreate
) -> HealthRecord:
    """
    Create a new health record.

    Args:
        db: Database session
        user_id: ID of user recording the vitals
        record_data: Health record data from request

    Returns:
        HealthRecord: Created record

    Example:
        record = create_health_record(
            db=db,
            user_id=current_user.id,
            record_data=HealthRecordCreate(
                record_date=date(2025, 1, 13),
                blood_pressure_systolic=135,
                blood_pressure_diastolic=85,
            )
        )
    """
    db_record = HealthRecord(user_id=user_id, **record_data.model_dump())

    db.add(db_record)
    db.commit()
    db.refresh(db_record)  # Refresh to get id and timestamps

    return db_record


def get_health_records(
    db: Session,
    user_id: UUID,
    limit: int = 100,
    offset: int = 0
) -> tuple[list[HealthRecord], int]:
    """
    Get the user's health records, most recent first.

    Ordering is by record_date, then by creation time for records sharing
    a date.

    Returns:
        tuple: (list of HealthRecord objects, total count)
    """
    query = db.query(HealthRecord).filter(HealthRecord.user_id == user_id)

    # Get total count before pagination
    total = query.count()

    records = (
        query.order_by(desc(HealthRecord.record_date), desc(HealthRecord.created_at))
        .limit(limit)
        .offset(offset)
        .all()
    )

    return records, total


def get_recent_health_records(db: Session, user_id: UUID, limit: int) -> list[HealthRecord]:
    """Most recent `limit` health records, newest first."""
    records, _ = get_health_records(db, user_id, limit=limit)
    return records


def get_latest_health_record(db: Session, user_id: UUID) -> Optional[HealthRecord]:
    """Newest health record or None."""
    records = get_recent_health_records(db, user_id, limit=1)
    return records[0] if records else None


def get_health_record_by_id(db: Session, record_id: UUID, user_id: UUID) -> Optional[HealthRecord]:
    """
    Get a single health record by ID.

    Returns:
        HealthRecord or None if not found or owned by another user

    Security:
        Always filter by user_id to prevent reading other users' data.
    """
    return db.query(HealthRecord).filter(
        and_(
            HealthRecord.id == record_id,
            HealthRecord.user_id == user_id
        )
    ).first()


def count_health_records(db: Session, user_id: UUID) -> int:
    return db.query(HealthRecord).filter(HealthRecord.user_id == user_id).count()


# ============================================================================
# DAILY HEALTH LOG SERVICE FUNCTIONS
# ============================================================================

def upsert_daily_log(
    db: Session,
    user_id: UUID,
    log_data: DailyHealthLogUpsert
) -> tuple[DailyHealthLog, bool]:
    """
    Create or replace the log for (user, log_date).

    A second submission for the same date overwrites every habit field,
    fields omitted from the request are cleared.

    Returns:
        tuple: (DailyHealthLog, created) where created is False on replace
    """
    values = log_data.model_dump()

    db_log = db.query(DailyHealthLog).filter(
        and_(
            DailyHealthLog.user_id == user_id,
            DailyHealthLog.log_date == log_data.log_date
        )
    ).first()

    created = db_log is None
    if created:
        db_log = DailyHealthLog(user_id=user_id, **values)
        db.add(db_log)
    else:
        for field, value in values.items():
            setattr(db_log, field, value)

    db.commit()
    db.refresh(db_log)

    logger.debug(
        f"Daily log {'created' if created else 'replaced'} for user {user_id} on {log_data.log_date}"
    )
    return db_log, created


def get_recent_daily_logs(db: Session, user_id: UUID, limit: int = 30) -> list[DailyHealthLog]:
    """
    The `limit` most recent daily logs, returned in ascending date order.
    """
    logs = (
        db.query(DailyHealthLog)
        .filter(DailyHealthLog.user_id == user_id)
        .order_by(desc(DailyHealthLog.log_date))
        .limit(limit)
        .all()
    )
    logs.reverse()
    return logs


def count_daily_logs(db: Session, user_id: UUID) -> int:
    return db.query(DailyHealthLog).filter(DailyHealthLog.user_id == user_id).count()
