"""This module provides the MessagesService class for managing chat messages."""

from typing import Optional

from sqlalchemy.orm import Session
from fastapi import Depends

from chat_system.errors import ValidationFailure
from chat_system.logger_config import get_logger
from chat_system.repositories.interactions.crud.messages_crud import CRUDMessage
from chat_system.repositories.interactions.models.messages_model import Messages
from chat_system.services.interactions.chats_services import (
    ChatsService,
    build_numbered_writer,
    get_chats_service,
)
from chat_system.services.interactions.sequence_allocator import NumberedChildWriter

logger = get_logger(__name__)


class MessagesService:
    """Service layer for handling message-related operations."""

    def __init__(
        self,
        chats_service: ChatsService,
        message_repository: CRUDMessage,
        writer: NumberedChildWriter,
    ):
        """
        Initialize the MessagesService.

        Args:
            chats_service (ChatsService): Resolves the chat a message is written to.
            message_repository (CRUDMessage): Repository for message rows.
            writer (NumberedChildWriter): Numbers and inserts new messages atomically.
        """
        self.chats_service = chats_service
        self.message_repository = message_repository
        self.writer = writer

    def create(
        self,
        db: Session,
        application_token: str,
        chat_number: int,
        body: Optional[str],
    ) -> Messages:
        """
        Append a message to a chat.

        The message number and the chat's ``messages_count`` are written in the
        same transaction.

        Raises:
            ValidationFailure: the body is missing or blank.
            NotFound: the application or the chat does not exist.
            ConstraintViolation: no unique number could be allocated.
        """
        if body is None or not body.strip():
            raise ValidationFailure("Body can't be blank")

        message: Messages = self.writer.create(
            db,
            lambda: self.chats_service.get(db, application_token, chat_number),
            lambda chat, number: self.message_repository.create(
                db, chat.id, number, body
            ),
        )
        logger.info(
            f"Created message {message.number} in chat {chat_number} "
            f"of application {application_token}"
        )
        return message


# Dependency Injection for FastAPI
def get_messages_service(
    chats_service: ChatsService = Depends(get_chats_service),
    message_repository: CRUDMessage = Depends(),
    writer: NumberedChildWriter = Depends(build_numbered_writer),
) -> MessagesService:
    """Retrieve an instance of MessagesService with the provided repositories."""
    return MessagesService(chats_service, message_repository, writer)
