"""
Health API Endpoints
Vitals (health records) and daily habit logs.

Endpoints:
    Health Records:
        - POST /health-records - Create health record
        - GET  /health-records - List records, most recent first
        - GET  /health-records/{id} - Get single record

    Daily Logs:
        - PUT /daily-logs - Create or replace the log of a day
        - GET /daily-logs - Last N days, oldest first

All endpoints require authentication and only ever touch the caller's rows.
Records are immutable: there are no update or delete endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from healthguard.api.v1.deps import get_current_user
from healthguard.db.session import get_db
from healthguard.models.user import User
from healthguard.schemas.health import (
    DailyHealthLogListResponse,
    DailyHealthLogResponse,
    DailyHealthLogUpsert,
    HealthRecordCreate,
    HealthRecordListResponse,
    HealthRecordResponse,
)
from healthguard.services import health_service

router = APIRouter()


# ============================================================================
# HEALTH RECORD ENDPOINTS
# ============================================================================

@router.post("/health-records", response_model=HealthRecordResponse, status_code=status.HTTP_201_CREATED)
def create_health_record(
    record_data: HealthRecordCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Log vitals.

    Example Request:
        POST /api/v1/health-records
        {
            "record_date": "2025-01-13",
            "blood_pressure_systolic": 135,
            "blood_pressure_diastolic": 85,
            "heart_rate": ""
        }

    Empty strings are stored as "not measured"; non-numeric values are
    rejected with 422.
    """
    return health_service.create_health_record(db, current_user.id, record_data)


@router.get("/health-records", response_model=HealthRecordListResponse)
def list_health_records(
    limit: int = Query(50, ge=1, le=500, description="Maximum results (1-500)"),
    offset: int = Query(0, ge=0, description="Number of results to skip"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    List the caller's health records, most recent record_date first.

    Example:
        GET /api/v1/health-records?limit=10
        -> The 10 newest records (the same window the risk engine reads)
    """
    records, total = health_service.get_health_records(db, current_user.id, limit=limit, offset=offset)
    return HealthRecordListResponse(records=records, total=total, limit=limit, offset=offset)


@router.get("/health-records/{record_id}", response_model=HealthRecordResponse)
def get_health_record(
    record_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    record = health_service.get_health_record_by_id(db, record_id, current_user.id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Health record {record_id} not found"
        )
    return record


# ============================================================================
# DAILY LOG ENDPOINTS
# ============================================================================

@router.put("/daily-logs", response_model=DailyHealthLogResponse)
def upsert_daily_log(
    log_data: DailyHealthLogUpsert,
    response: Response,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Create or replace the log for log_date.

    Returns 201 when the day is logged for the first time, 200 when an
    existing log is replaced.
    """
    log, created = health_service.upsert_daily_log(db, current_user.id, log_data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return log


@router.get("/daily-logs", response_model=DailyHealthLogListResponse)
def list_daily_logs(
    limit: int = Query(30, ge=1, le=365, description="Number of most recent days"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Most recent `limit` logs in ascending date order (chart friendly)."""
    logs = health_service.get_recent_daily_logs(db, current_user.id, limit=limit)
    total = health_service.count_daily_logs(db, current_user.id)
    return DailyHealthLogListResponse(logs=logs, total=total)
