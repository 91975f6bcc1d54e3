"""
ChatMessage Model
Append-only transcript of the conversation with the health assistant.
"""

from sqlalchemy import Column, ForeignKey, String, Text, Uuid

from healthguard.models.base import BaseModel


class ChatMessage(BaseModel):
    """
    One message of the transcript.

    role: "user" for patient input, "assistant" for generated replies.
    Read back ordered by created_at ascending.
    """

    __tablename__ = "chat_messages"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    role = Column(String(20), nullable=False)
    content = Column(Text, nullable=False)

    def __repr__(self):
        return f"<ChatMessage(role={self.role}, content='{self.content[:30]}')>"
