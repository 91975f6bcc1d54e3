"""
Profile API Endpoints
Onboarding and maintenance of the user's health profile.

Endpoints:
    - POST /profile - Onboarding (create, 409 if one exists)
    - GET  /profile - Read own profile
    - PUT  /profile - Partial update
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from healthguard.api.v1.deps import get_current_user
from healthguard.db.session import get_db
from healthguard.models.user import User
from healthguard.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from healthguard.services import profile_service

router = APIRouter(prefix="/profile")


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
def create_profile(
    profile_data: ProfileCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Complete onboarding.

    List fields accept a JSON array or a comma separated string:
        "medical_conditions": "Hypertension, Diabetes"
    """
    return profile_service.create_profile(db, current_user.id, profile_data)


@router.get("", response_model=ProfileResponse)
def read_profile(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Own profile, 404 until onboarding is done."""
    return profile_service.require_profile(db, current_user.id)


@router.put("", response_model=ProfileResponse)
def update_profile(
    profile_data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update only the fields present in the request body."""
    return profile_service.update_profile(db, current_user.id, profile_data)
