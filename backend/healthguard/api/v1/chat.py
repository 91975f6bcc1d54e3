"""
Chat API Endpoints
Conversation with the rule-based health assistant.

Endpoints:
    - POST /chat/messages - Send a message, get the assistant reply
    - GET  /chat/messages - Full transcript in creation order
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from healthguard.api.v1.deps import get_current_user
from healthguard.db.session import get_db
from healthguard.models.user import User
from healthguard.schemas.chat import ChatExchangeResponse, ChatHistoryResponse, ChatMessageCreate
from healthguard.services import chat_service, profile_service

router = APIRouter(prefix="/chat")


def _display_name(db: Session, user: User) -> str:
    """Profile name first, then the account name, then "User"."""
    profile = profile_service.get_profile(db, user.id)
    if profile and profile.full_name:
        return profile.full_name
    return user.full_name or "User"


# Plain def: the optional response delay sleeps in the threadpool
@router.post("/messages", response_model=ChatExchangeResponse, status_code=status.HTTP_201_CREATED)
def send_message(
    message: ChatMessageCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Example:
        POST /api/v1/chat/messages
        {"content": "How can I sleep better?"}
        -> user_message + assistant_message (sleep advice)
    """
    user_message, reply = chat_service.send_message(
        db,
        user_id=current_user.id,
        user_name=_display_name(db, current_user),
        content=message.content,
    )
    return ChatExchangeResponse(user_message=user_message, assistant_message=reply)


@router.get("/messages", response_model=ChatHistoryResponse)
def list_messages(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    messages = chat_service.get_messages(db, current_user.id)
    return ChatHistoryResponse(messages=messages, total=len(messages))
