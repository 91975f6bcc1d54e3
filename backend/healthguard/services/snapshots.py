"""
Engine Input Snapshots
Plain, storage-free views of the rows the engines read.

The scoring engines never touch a Session: orchestrating services load ORM
rows, convert them with the `from_model` constructors below and hand the
snapshots over. Tests build snapshots directly.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ProfileSnapshot:
    """Profile fields used by the risk and insight engines."""
    date_of_birth: Optional[date] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    medical_conditions: list[str] = field(default_factory=list)

    @classmethod
    def from_model(cls, profile) -> "ProfileSnapshot":
        return cls(
            date_of_birth=profile.date_of_birth,
            height_cm=profile.height_cm,
            weight_kg=profile.weight_kg,
            medical_conditions=list(profile.medical_conditions or []),
        )


@dataclass(frozen=True)
class VitalsSnapshot:
    """The part of a health record the risk engine looks at."""
    record_date: date
    blood_pressure_systolic: Optional[int] = None
    blood_pressure_diastolic: Optional[int] = None

    @classmethod
    def from_model(cls, record) -> "VitalsSnapshot":
        return cls(
            record_date=record.record_date,
            blood_pressure_systolic=record.blood_pressure_systolic,
            blood_pressure_diastolic=record.blood_pressure_diastolic,
        )


@dataclass(frozen=True)
class DailyLogSnapshot:
    """Habit values of one logged day."""
    log_date: date
    sleep_hours: Optional[float] = None
    exercise_minutes: Optional[int] = None
    stress_level: Optional[int] = None

    @classmethod
    def from_model(cls, log) -> "DailyLogSnapshot":
        return cls(
            log_date=log.log_date,
            sleep_hours=log.sleep_hours,
            exercise_minutes=log.exercise_minutes,
            stress_level=log.stress_level,
        )
