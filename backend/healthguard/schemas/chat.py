"""
Chat Pydantic Schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatMessageCreate(BaseModel):
    """
    Message sent by the user.

    Example:
        {"content": "How much exercise do I need?"}
    """
    content: str = Field(..., min_length=1, max_length=4000)

    @field_validator("content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Message cannot be empty")
        return v


class ChatMessageResponse(BaseModel):
    id: UUID
    role: str = Field(..., description="user | assistant")
    content: str
    created_at: datetime

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)


class ChatExchangeResponse(BaseModel):
    """The stored user message and the assistant reply it produced."""
    user_message: ChatMessageResponse
    assistant_message: ChatMessageResponse


class ChatHistoryResponse(BaseModel):
    """Transcript in creation order."""
    messages: list[ChatMessageResponse]
    total: int
