"""
Chat Service
Stores the conversation with the rule-based health assistant.

Each user message produces exactly two rows, the message itself and the
assistant reply, committed together: if either insert fails nothing is
stored and the error propagates to the caller.
"""

import logging
import time
from uuid import UUID

from sqlalchemy.orm import Session

from healthguard.core.config import settings
from healthguard.core.constants import ROLE_ASSISTANT, ROLE_USER
from healthguard.models.chat_message import ChatMessage
from healthguard.services.chat_responder import respond

logger = logging.getLogger(__name__)


def send_message(
    db: Session,
    user_id: UUID,
    user_name: str,
    content: str
) -> tuple[ChatMessage, ChatMessage]:
    """
    Store a user message and the assistant's reply.

    Args:
        db: Database session
        user_id: Author of the message
        user_name: Name used by the greeting reply
        content: Message text

    Returns:
        tuple: (user message row, assistant message row)
    """
    # No write transaction is open during the delay
    if settings.CHAT_RESPONSE_DELAY_SECONDS > 0:
        time.sleep(settings.CHAT_RESPONSE_DELAY_SECONDS)

    user_message = ChatMessage(user_id=user_id, role=ROLE_USER, content=content)

    try:
        db.add(user_message)
        db.flush()

        reply = ChatMessage(
            user_id=user_id,
            role=ROLE_ASSISTANT,
            content=respond(content, user_name),
        )
        db.add(reply)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Chat exchange for user {user_id} rolled back")
        raise

    db.refresh(user_message)
    db.refresh(reply)
    return user_message, reply


def get_messages(db: Session, user_id: UUID) -> list[ChatMessage]:
    """Full transcript in creation order."""
    return (
        db.query(ChatMessage)
        .filter(ChatMessage.user_id == user_id)
        .order_by(ChatMessage.created_at)
        .all()
    )
