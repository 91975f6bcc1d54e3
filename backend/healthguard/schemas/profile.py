"""
Profile Pydantic Schemas
Request and response models for the onboarding / profile endpoints.

Used by:
    POST /api/v1/profile  - onboarding (create)
    GET  /api/v1/profile  - read
    PUT  /api/v1/profile  - partial update
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from healthguard.schemas.validators import blank_to_none, split_comma_list


OPTIONAL_FIELDS = (
    "date_of_birth", "gender", "height_cm", "weight_kg", "phone",
    "emergency_contact_name", "emergency_contact_phone",
)
LIST_FIELDS = ("medical_conditions", "allergies", "medications")


class ProfileBase(BaseModel):
    """
    Common profile fields.

    height_cm / weight_kg must be positive finite numbers when given.
    List fields accept a JSON array or a comma separated string.
    """
    full_name: str = Field(..., min_length=1, max_length=255)
    date_of_birth: Optional[date] = Field(None, description="Used to derive age")
    gender: Optional[str] = Field(None, max_length=32)
    height_cm: Optional[float] = Field(None, gt=0, le=300, allow_inf_nan=False)
    weight_kg: Optional[float] = Field(None, gt=0, le=500, allow_inf_nan=False)
    phone: Optional[str] = Field(None, max_length=50)
    emergency_contact_name: Optional[str] = Field(None, max_length=255)
    emergency_contact_phone: Optional[str] = Field(None, max_length=50)
    medical_conditions: list[str] = Field(
        default_factory=list,
        description="Diagnosed conditions, e.g. ['Asthma', 'Diabetes']"
    )
    allergies: list[str] = Field(default_factory=list)
    medications: list[str] = Field(default_factory=list)

    @field_validator(*OPTIONAL_FIELDS, mode="before")
    @classmethod
    def empty_string_is_missing(cls, v):
        return blank_to_none(v)

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def parse_list(cls, v):
        return split_comma_list(v)


class ProfileCreate(ProfileBase):
    """
    Onboarding request.

    Request body example:
    {
        "full_name": "Asha Verma",
        "date_of_birth": "1958-03-14",
        "gender": "female",
        "height_cm": 160,
        "weight_kg": 82,
        "medical_conditions": "Hypertension, Diabetes"
    }
    """
    pass


class ProfileUpdate(BaseModel):
    """
    Partial profile update. Only provided fields are changed.
    """
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    date_of_birth: Optional[date] = None
    gender: Optional[str] = Field(None, max_length=32)
    height_cm: Optional[float] = Field(None, gt=0, le=300, allow_inf_nan=False)
    weight_kg: Optional[float] = Field(None, gt=0, le=500, allow_inf_nan=False)
    phone: Optional[str] = Field(None, max_length=50)
    emergency_contact_name: Optional[str] = Field(None, max_length=255)
    emergency_contact_phone: Optional[str] = Field(None, max_length=50)
    medical_conditions: Optional[list[str]] = None
    allergies: Optional[list[str]] = None
    medications: Optional[list[str]] = None

    @field_validator(*OPTIONAL_FIELDS, mode="before")
    @classmethod
    def empty_string_is_missing(cls, v):
        return blank_to_none(v)

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def parse_list(cls, v):
        return split_comma_list(v)


class ProfileResponse(ProfileBase):
    """Stored profile with metadata and derived BMI."""
    id: UUID
    user_id: UUID
    bmi: Optional[float] = Field(None, description="Derived from height and weight")
    created_at: datetime
    updated_at: datetime

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)
