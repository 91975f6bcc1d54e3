"""
Authentication Service
Handles user registration, lookup and credential checks.

Token creation and verification live in healthguard.core.security; this
module only deals with User rows.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from healthguard.core.security import hash_password, verify_password
from healthguard.models.user import User
from healthguard.schemas.user import UserCreate


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """
    Authenticate a user by email and password.

    Args:
        db: Database session
        email: User's email address
        password: Plain text password to verify

    Returns:
        User object if credentials are valid, None otherwise

    Example:
        user = authenticate_user(db, "asha@example.com", "password123")
    """
    user = get_user_by_email(db, email)

    if user is None or not user.is_active:
        return None

    if not verify_password(password, user.password_hash):
        return None

    return user


def create_user(db: Session, user_data: UserCreate) -> User:
    """
    Create a new user account.

    Hashes the password before storing and creates a new user record.

    Args:
        db: Database session
        user_data: UserCreate schema with email, password, full_name, language

    Returns:
        Created User object with all fields populated

    Raises:
        IntegrityError: If email already exists in database
    """
    user = User(
        email=user_data.email,
        password_hash=hash_password(user_data.password),
        full_name=user_data.full_name,
        language=user_data.language,
    )

    db.add(user)
    db.commit()
    db.refresh(user)  # Refresh to get generated id and timestamps

    return user


def get_user_by_id(db: Session, user_id: UUID) -> Optional[User]:
    """Get user by ID, None if not found."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email address, None if not found."""
    return db.query(User).filter(User.email == email).first()
