"""
User Pydantic Schemas
Request and response models for authentication endpoints.

These schemas define the structure of data sent to and received from the API.
They provide automatic validation, serialization, and documentation.
"""

from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import Literal, Optional
from uuid import UUID
from datetime import datetime


# ============================================================================
# Authentication Schemas
# ============================================================================

class UserCreate(BaseModel):
    """
    Schema for user registration request.

    Used in POST /api/v1/auth/register endpoint.

    Example:
        {
            "email": "asha@example.com",
            "password": "SecurePass123!",
            "full_name": "Asha Verma"
        }
    """
    email: EmailStr = Field(
        ...,
        description="Valid email address for authentication",
        examples=["asha@example.com"]
    )
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,  # bcrypt only uses the first 72 bytes
        description="Password (minimum 8 characters)",
        examples=["SecurePass123!"]
    )
    full_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's full name",
        examples=["Asha Verma"]
    )
    language: Literal["en", "hi"] = Field(
        "en",
        description="Preferred UI language"
    )


class LoginRequest(BaseModel):
    """
    Schema for user login request.

    Example:
        {
            "email": "asha@example.com",
            "password": "SecurePass123!"
        }
    """
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's password")


class Token(BaseModel):
    """
    Schema for JWT token response.

    Returned by /register, /login, and /refresh endpoints.
    """
    access_token: str = Field(..., description="JWT access token for API authentication")
    refresh_token: str = Field(..., description="JWT refresh token for obtaining new access tokens")
    token_type: str = Field(default="bearer", description="Token type (always 'bearer' for JWT)")


class RefreshTokenRequest(BaseModel):
    """Schema for POST /api/v1/auth/refresh."""
    refresh_token: str = Field(..., description="Valid refresh token")


class UserResponse(BaseModel):
    """
    Account details returned by GET /api/v1/auth/me.
    Never includes password_hash.
    """
    id: UUID = Field(..., description="Unique user identifier")
    email: str = Field(..., description="User's email address")
    full_name: Optional[str] = Field(None, description="User's full name")
    language: str = Field("en", description="Preferred UI language")
    created_at: datetime = Field(..., description="Account creation timestamp")

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)


# ============================================================================
# Helper Schemas
# ============================================================================

class TokenPayload(BaseModel):
    """
    Decoded JWT payload (internal use).

    - sub: Subject (user_id)
    - exp: Expiration timestamp
    - type: Token type (access or refresh)
    """
    sub: str = Field(..., description="Subject (user ID)")
    exp: int = Field(..., description="Expiration timestamp (Unix)")
    type: str = Field(..., description="Token type (access or refresh)")
