"""
HealthRecord Model
Point-in-time vitals submitted by the user.

Every measurement is optional: a user may log only a blood pressure
reading one day and only a temperature the next. Records are immutable
once created and several may exist for the same date.

Use Cases:
    - Blood pressure trend (feeds the risk engine)
    - Latest reading card on the dashboard
    - Health records history list
"""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, Text, Uuid

from healthguard.models.base import BaseModel


class HealthRecord(BaseModel):
    """
    Vitals snapshot.

    Units:
        heart_rate: beats per minute
        blood_pressure_systolic / _diastolic: mmHg
        blood_sugar: mg/dL
        temperature: degrees Celsius
        weight_kg: kilograms
        oxygen_saturation: percent (SpO2)

    Example Usage:
        - 2025-01-05: systolic=142, diastolic=91, heart_rate=78
        - 2025-01-06: blood_sugar=112.5, notes="after breakfast"
    """

    __tablename__ = "health_records"

    # Foreign Key: User
    # NOT NULL: every health record must have an owner
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),  # Delete records if user is deleted
        nullable=False,
        index=True,  # Index for user-specific queries
        comment="User who recorded these vitals"
    )

    # Measurement date (user-provided, may be backfilled)
    record_date = Column(
        Date,
        nullable=False,
        index=True,  # Index for "most recent first" queries
        comment="Date the measurements were taken"
    )

    heart_rate = Column(Integer, nullable=True)
    blood_pressure_systolic = Column(Integer, nullable=True)
    blood_pressure_diastolic = Column(Integer, nullable=True)
    blood_sugar = Column(Float, nullable=True)
    temperature = Column(Float, nullable=True)
    weight_kg = Column(Float, nullable=True)
    oxygen_saturation = Column(Integer, nullable=True)

    notes = Column(Text, nullable=True)

    def __repr__(self):
        """String representation for debugging."""
        return (
            f"<HealthRecord(user_id={self.user_id}, record_date={self.record_date}, "
            f"bp={self.blood_pressure_systolic}/{self.blood_pressure_diastolic})>"
        )

    @property
    def blood_pressure(self):
        """Formatted "systolic/diastolic" reading, or None if incomplete."""
        if self.blood_pressure_systolic is None or self.blood_pressure_diastolic is None:
            return None
        return f"{self.blood_pressure_systolic}/{self.blood_pressure_diastolic}"
