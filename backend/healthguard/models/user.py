"""
User Model
Represents an authenticated account of the health tracker.

The account only holds login data and UI preferences. Health-related
personal data (date of birth, body measurements, conditions...) lives
in the Profile model, created during onboarding.
"""

from sqlalchemy import Boolean, Column, String

from healthguard.models.base import BaseModel


class User(BaseModel):
    """
    User model for authentication.

    Fields:
        id (UUID): Primary key, inherited from BaseModel
        email (str): Unique email address for login
        password_hash (str): Bcrypt hashed password
        full_name (str): Display name chosen at registration
        language (str): Preferred UI language code ("en", "hi")
        is_active (bool): Disabled accounts cannot authenticate

    Example usage:
        user = User(
            email="asha@example.com",
            password_hash=hash_password("secret123"),
            full_name="Asha Verma"
        )
        db.add(user)
        db.commit()
    """

    __tablename__ = "users"

    # Email must be unique across all users for login purposes
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,  # Index for fast lookups during login
        comment="User's email address for authentication"
    )

    # Password hash - NEVER store plain text passwords
    password_hash = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    full_name = Column(
        String(255),
        nullable=True,
        comment="User's full display name"
    )

    language = Column(
        String(8),
        default="en",
        nullable=False,
        comment="Preferred UI language code"
    )

    is_active = Column(
        Boolean,
        default=True,
        nullable=False,
        comment="Inactive accounts are rejected at login"
    )

    def __repr__(self):
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email}, name={self.full_name})>"
