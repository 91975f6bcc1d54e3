"""
Base Model Class
Provides common fields and functionality for all database models.

All application models inherit from BaseModel instead of Base directly.
This ensures consistent ID format (UUID) and automatic timestamp tracking.
"""

from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, DateTime, Uuid, func

from healthguard.db.base import Base


def utcnow() -> datetime:
    """Timezone-aware current time, used as Python-side column default."""
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """
    Abstract base model with common fields for all tables.

    Provides:
    - UUID primary key
    - created_at timestamp (set on insert)
    - updated_at timestamp (refreshed on modification)

    Timestamps are generated in Python (microsecond precision) so that rows
    inserted within the same request still sort in insertion order; the
    server default only covers rows written outside the ORM.

    Example:
        class ChatMessage(BaseModel):
            __tablename__ = "chat_messages"
            content = Column(Text)
            # id, created_at, updated_at are inherited automatically
    """

    # Make this an abstract base class (no table created for BaseModel itself)
    __abstract__ = True

    # Primary Key: UUID
    # Generic Uuid type: native UUID on PostgreSQL, CHAR(32) elsewhere
    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,  # Auto-generate UUID v4 on insert
        nullable=False
    )

    # Timestamp: Record Creation
    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True
    )

    # Timestamp: Last Update
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,  # Update on every modification
        nullable=False
    )

    def __repr__(self):
        """String representation for debugging and logging."""
        return f"<{self.__class__.__name__}(id={self.id})>"
