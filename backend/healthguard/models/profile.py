"""
Profile Model
Personal health profile filled in during onboarding.

The risk engine reads age (from date_of_birth), BMI (from height and
weight) and the number of medical conditions from this table; the insight
engine checks the condition list for a diabetes history.
"""

from sqlalchemy import Column, Date, Float, ForeignKey, JSON, String, Uuid

from healthguard.models.base import BaseModel


class Profile(BaseModel):
    """
    One profile per user.

    List fields (medical_conditions, allergies, medications) are stored as
    JSON arrays of strings, e.g. ["Asthma", "Diabetes"].
    """

    __tablename__ = "profiles"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,  # One profile per user
        index=True,
        comment="Owner of this profile"
    )

    full_name = Column(String(255), nullable=False)
    date_of_birth = Column(Date, nullable=True)
    gender = Column(String(32), nullable=True)

    # Body measurements, validated positive by the request schema
    height_cm = Column(Float, nullable=True)
    weight_kg = Column(Float, nullable=True)

    phone = Column(String(50), nullable=True)
    emergency_contact_name = Column(String(255), nullable=True)
    emergency_contact_phone = Column(String(50), nullable=True)

    medical_conditions = Column(JSON, default=list, nullable=False)
    allergies = Column(JSON, default=list, nullable=False)
    medications = Column(JSON, default=list, nullable=False)

    def __repr__(self):
        return f"<Profile(user_id={self.user_id}, name='{self.full_name}')>"

    @property
    def bmi(self):
        """Body mass index rounded to 2 decimals, None when height or weight is missing."""
        if not self.height_cm or not self.weight_kg:
            return None
        return round(self.weight_kg / (self.height_cm / 100) ** 2, 2)
