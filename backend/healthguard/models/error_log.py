"""
Error Log Model
Persisted application errors written by the error logging service.

Each row captures the exception, the request that triggered it, the
authenticated user (if any) and sanitised context data, so that a failed
assessment or chat send can be investigated from its error_id.
"""

from sqlalchemy import Column, DateTime, JSON, String, Text, Uuid

from healthguard.models.base import BaseModel, utcnow


class ErrorLog(BaseModel):
    """Stored error entry, referenced by the error_id returned to clients."""

    __tablename__ = "error_logs"

    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Classification
    error_type = Column(String(255), nullable=False, index=True)  # e.g. "ValueError"
    error_code = Column(String(50), nullable=True)  # HTTP status code when known
    severity = Column(String(20), default="error", nullable=False)  # info, warning, error, critical

    # Where it was raised
    module = Column(String(255), nullable=True)
    function = Column(String(255), nullable=True)
    line_number = Column(String(20), nullable=True)

    # Who triggered it (nullable for unauthenticated requests)
    user_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    user_email = Column(String(255), nullable=True)

    # Request context
    request_method = Column(String(10), nullable=True)
    request_path = Column(String(500), nullable=True)
    request_query = Column(Text, nullable=True)
    client_ip = Column(String(50), nullable=True)
    user_agent = Column(String(500), nullable=True)

    # Details
    message = Column(Text, nullable=False)
    stack_trace = Column(Text, nullable=True)
    context_data = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<ErrorLog(id={self.id}, type={self.error_type}, message={self.message[:50]}...)>"
