"""
Profile Service
Business logic for the onboarding profile (one per user).
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from healthguard.core.exceptions import ProfileAlreadyExistsError, ProfileNotFoundError
from healthguard.models.profile import Profile
from healthguard.schemas.profile import ProfileCreate, ProfileUpdate

logger = logging.getLogger(__name__)


def get_profile(db: Session, user_id: UUID) -> Optional[Profile]:
    """Get the user's profile, None if onboarding is not done yet."""
    return db.query(Profile).filter(Profile.user_id == user_id).first()


def require_profile(db: Session, user_id: UUID) -> Profile:
    """
    Get the user's profile or raise.

    Raises:
        ProfileNotFoundError: If the user has no profile
    """
    profile = get_profile(db, user_id)
    if not profile:
        raise ProfileNotFoundError()
    return profile


def create_profile(db: Session, user_id: UUID, profile_data: ProfileCreate) -> Profile:
    """
    Create the profile at the end of onboarding.

    Raises:
        ProfileAlreadyExistsError: If the user already has a profile
    """
    if get_profile(db, user_id):
        raise ProfileAlreadyExistsError()

    profile = Profile(user_id=user_id, **profile_data.model_dump())

    db.add(profile)
    db.commit()
    db.refresh(profile)

    logger.info(f"Profile created for user {user_id}")
    return profile


def update_profile(db: Session, user_id: UUID, profile_data: ProfileUpdate) -> Profile:
    """
    Update the user's profile.

    Only fields present in the request are changed (partial update).

    Raises:
        ProfileNotFoundError: If the user has no profile
    """
    profile = require_profile(db, user_id)

    update_data = profile_data.model_dump(exclude_unset=True)
    # full_name is required, an explicit null keeps the current one
    if update_data.get("full_name") is None:
        update_data.pop("full_name", None)

    for field, value in update_data.items():
        setattr(profile, field, value)

    db.commit()
    db.refresh(profile)

    return profile
