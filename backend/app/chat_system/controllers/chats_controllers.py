"""Create chats and messages, and search messages of a chat."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from chat_system.models.api_models import (
    ErrorResponse,
    MessageCreateRequest,
    SearchResponse,
)
from chat_system.repositories.interactions.dependencies import get_db
from chat_system.repositories.interactions.schemas.chats_schema import ChatRead
from chat_system.repositories.interactions.schemas.messages_schema import MessageRead
from chat_system.services.interactions.chats_services import (
    ChatsService,
    get_chats_service,
)
from chat_system.services.interactions.messages_services import (
    MessagesService,
    get_messages_service,
)
from chat_system.services.search.search_gateway import (
    SearchGateway,
    get_search_gateway,
)

chats_router = APIRouter(prefix="/applications/{application_token}/chats", tags=["Chats"])


@chats_router.post(
    "",
    response_model=ChatRead,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def create_chat(
    application_token: str,
    db: Session = Depends(get_db),
    service: ChatsService = Depends(get_chats_service),
) -> ChatRead:
    """Create the next chat of an application."""
    chat = service.create(db, application_token)
    return ChatRead.model_validate(chat)


@chats_router.post(
    "/{chat_number}/messages",
    response_model=MessageRead,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def create_message(
    application_token: str,
    chat_number: int,
    data: MessageCreateRequest,
    db: Session = Depends(get_db),
    service: MessagesService = Depends(get_messages_service),
) -> MessageRead:
    """Append a message to a chat."""
    message = service.create(db, application_token, chat_number, data.message.body)
    return MessageRead.model_validate(message)


@chats_router.get(
    "/{chat_number}/messages/search",
    response_model=SearchResponse,
    responses={422: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def search_messages(
    application_token: str,
    chat_number: int,
    query: Optional[str] = None,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    gateway: SearchGateway = Depends(get_search_gateway),
) -> Dict[str, Any]:
    """Full-text search over the messages of one chat, in message order."""
    return gateway.search(application_token, chat_number, query or "", page, per_page)
