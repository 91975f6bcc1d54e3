"""
DailyHealthLog Model
One row per user per calendar day describing lifestyle habits.

Submitting the daily form twice for the same date replaces the earlier
values (upsert on user_id + log_date). The insight engine averages the
most recent week of these rows.
"""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, Text, UniqueConstraint, Uuid

from healthguard.models.base import BaseModel


class DailyHealthLog(BaseModel):
    """
    Daily habits log.

    Ranges (validated by the request schema):
        sleep_hours: 0-24
        exercise_minutes: >= 0
        stress_level: 1-10
        mood_level: 1-10
    """

    __tablename__ = "daily_health_logs"
    __table_args__ = (
        UniqueConstraint("user_id", "log_date", name="uq_daily_health_logs_user_date"),
    )

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who logged the day"
    )

    log_date = Column(Date, nullable=False, index=True)

    sleep_hours = Column(Float, nullable=True)
    exercise_minutes = Column(Integer, nullable=True)
    stress_level = Column(Integer, nullable=True)
    calories_intake = Column(Integer, nullable=True)
    water_intake_ml = Column(Integer, nullable=True)
    mood_level = Column(Integer, nullable=True)

    notes = Column(Text, nullable=True)

    def __repr__(self):
        return f"<DailyHealthLog(user_id={self.user_id}, log_date={self.log_date})>"
