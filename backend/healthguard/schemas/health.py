"""
Health Pydantic Schemas
Request and response models for vitals and daily habit logging.

These schemas define the structure of data for:
    - Health records (point-in-time vitals)
    - Daily health logs (one per day, upsert semantics)

Numeric fields accept numbers or numeric strings; an empty string is
treated as "not measured". Anything else that is not a number is rejected
with a 422 before any engine runs.
"""

from typing import Optional
from uuid import UUID
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator, ConfigDict

from healthguard.schemas.validators import blank_to_none


# ============================================================================
# HEALTH RECORD SCHEMAS
# ============================================================================

VITAL_FIELDS = (
    "heart_rate",
    "blood_pressure_systolic",
    "blood_pressure_diastolic",
    "blood_sugar",
    "temperature",
    "weight_kg",
    "oxygen_saturation",
    "notes",
)


class HealthRecordBase(BaseModel):
    """
    Base HealthRecord schema with common fields.
    All measurements are optional.
    """
    record_date: date = Field(..., description="Date the measurements were taken")
    heart_rate: Optional[int] = Field(None, gt=0, le=300, description="Heart rate (bpm)")
    blood_pressure_systolic: Optional[int] = Field(None, gt=0, le=300, description="Systolic (mmHg)")
    blood_pressure_diastolic: Optional[int] = Field(None, gt=0, le=250, description="Diastolic (mmHg)")
    blood_sugar: Optional[float] = Field(None, gt=0, le=1000, allow_inf_nan=False, description="Blood sugar (mg/dL)")
    temperature: Optional[float] = Field(None, ge=25, le=45, allow_inf_nan=False, description="Body temperature (C)")
    weight_kg: Optional[float] = Field(None, gt=0, le=500, allow_inf_nan=False, description="Weight (kg)")
    oxygen_saturation: Optional[int] = Field(None, ge=0, le=100, description="SpO2 (%)")
    notes: Optional[str] = Field(None, max_length=5000, description="Free-text note")

    @field_validator(*VITAL_FIELDS, mode="before")
    @classmethod
    def empty_string_is_missing(cls, v):
        return blank_to_none(v)


class HealthRecordCreate(HealthRecordBase):
    """
    Schema for creating a new health record.

    Used by:
        POST /api/v1/health-records

    Request body example:
    {
        "record_date": "2025-01-13",
        "blood_pressure_systolic": 135,
        "blood_pressure_diastolic": 85,
        "heart_rate": 72,
        "notes": "Morning reading"
    }

    Notes:
        - user_id is inferred from JWT token
        - records are immutable, there is no update schema
    """
    pass


class HealthRecordResponse(HealthRecordBase):
    """
    Complete HealthRecord response schema.

    Returned by:
        - POST /api/v1/health-records
        - GET /api/v1/health-records
        - GET /api/v1/health-records/{id}
    """
    id: UUID = Field(..., description="Unique health record identifier")
    user_id: UUID = Field(..., description="User who recorded these vitals")
    created_at: datetime = Field(..., description="When record was created")

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)


class HealthRecordListResponse(BaseModel):
    """
    List of health records with pagination metadata (most recent first).
    """
    records: list[HealthRecordResponse] = Field(..., description="List of health records")
    total: int = Field(..., description="Total number of records for the user")
    limit: int = Field(..., description="Number of results per page")
    offset: int = Field(0, description="Number of results skipped")

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)


# ============================================================================
# DAILY HEALTH LOG SCHEMAS
# ============================================================================

HABIT_FIELDS = (
    "sleep_hours",
    "exercise_minutes",
    "stress_level",
    "calories_intake",
    "water_intake_ml",
    "mood_level",
    "notes",
)


class DailyHealthLogBase(BaseModel):
    """
    Base DailyHealthLog schema with common fields.
    """
    log_date: date = Field(..., description="Day being logged (unique per user)")
    sleep_hours: Optional[float] = Field(None, ge=0, le=24, allow_inf_nan=False, description="Hours slept")
    exercise_minutes: Optional[int] = Field(None, ge=0, le=1440, description="Minutes of exercise")
    stress_level: Optional[int] = Field(None, ge=1, le=10, description="Stress (1-10)")
    calories_intake: Optional[int] = Field(None, ge=0, le=20000, description="Calories eaten")
    water_intake_ml: Optional[int] = Field(None, ge=0, le=20000, description="Water drunk (ml)")
    mood_level: Optional[int] = Field(None, ge=1, le=10, description="Mood (1-10)")
    notes: Optional[str] = Field(None, max_length=5000)

    @field_validator(*HABIT_FIELDS, mode="before")
    @classmethod
    def empty_string_is_missing(cls, v):
        return blank_to_none(v)


class DailyHealthLogUpsert(DailyHealthLogBase):
    """
    Schema for logging a day.

    Used by:
        PUT /api/v1/daily-logs

    Submitting the same log_date again replaces every field of that day,
    including clearing fields sent as null/empty.

    Request body example:
    {
        "log_date": "2025-01-13",
        "sleep_hours": 6.5,
        "exercise_minutes": 20,
        "stress_level": 7,
        "mood_level": 6
    }
    """
    pass


class DailyHealthLogResponse(DailyHealthLogBase):
    """Stored daily log."""
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)


class DailyHealthLogListResponse(BaseModel):
    """
    Daily logs in ascending date order (chart friendly).
    """
    logs: list[DailyHealthLogResponse] = Field(..., description="Logs, oldest first")
    total: int = Field(..., description="Total number of logged days")

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)
