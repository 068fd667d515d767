"""This module provides the ChatsService class for managing chats in the application."""

from sqlalchemy.orm import Session
from fastapi import Depends, Request

from chat_system.errors import NotFound
from chat_system.logger_config import get_logger
from chat_system.repositories.interactions.crud.applications_crud import (
    CRUDApplication,
)
from chat_system.repositories.interactions.crud.chats_crud import CRUDChat
from chat_system.repositories.interactions.models.applications_model import (
    Applications,
)
from chat_system.repositories.interactions.models.chats_model import Chats
from chat_system.services.interactions.counter_cache import CounterCache
from chat_system.services.interactions.sequence_allocator import (
    NumberedChildWriter,
    SequenceAllocator,
)

logger = get_logger(__name__)


class ChatsService:
    """Service layer for handling chat-related operations."""

    def __init__(
        self,
        application_repository: CRUDApplication,
        chat_repository: CRUDChat,
        counter_cache: CounterCache,
        writer: NumberedChildWriter,
    ):
        """
        Initialize the ChatsService.

        Args:
            application_repository (CRUDApplication): Repository used to resolve tokens.
            chat_repository (CRUDChat): Repository for chat-related database operations.
            counter_cache (CounterCache): Keeps ``chats_count`` in step with chat writes.
            writer (NumberedChildWriter): Numbers and inserts new chats atomically.
        """
        self.application_repository = application_repository
        self.chat_repository = chat_repository
        self.counter_cache = counter_cache
        self.writer = writer

    def get_application(self, db: Session, application_token: str) -> Applications:
        """Resolve an application token, raising NotFound when unknown."""
        application = self.application_repository.get_by_token(db, application_token)
        if application is None:
            raise NotFound(f"Couldn't find Application with token {application_token}")
        return application

    def get(self, db: Session, application_token: str, number: int) -> Chats:
        """
        Retrieve a chat by application token and chat number.

        Raises:
            NotFound: the application or the chat does not exist.
        """
        application = self.get_application(db, application_token)
        chat = self.chat_repository.get(db, application.id, number)
        if chat is None:
            raise NotFound(
                f"Couldn't find Chat {number} in Application {application_token}"
            )
        return chat

    def create(self, db: Session, application_token: str) -> Chats:
        """
        Create the next chat of an application.

        The chat number and the application's ``chats_count`` are written in the
        same transaction.

        Raises:
            NotFound: the application does not exist.
            ConstraintViolation: no unique number could be allocated.
        """
        chat: Chats = self.writer.create(
            db,
            lambda: self.get_application(db, application_token),
            lambda application, number: self.chat_repository.create(
                db, application.id, number
            ),
        )
        logger.info(f"Created chat {chat.number} in application {application_token}")
        return chat

    def delete(self, db: Session, application_token: str, number: int) -> Chats:
        """
        Delete a chat and its messages, decrementing the application's ``chats_count``.

        Raises:
            NotFound: the application or the chat does not exist.
        """
        chat = self.get(db, application_token, number)
        try:
            self.counter_cache.decrement(db, chat.application)
            self.chat_repository.delete(db, chat)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info(f"Deleted chat {number} from application {application_token}")
        return chat


def build_numbered_writer(request: Request) -> NumberedChildWriter:
    """Numbered insert helper configured from the application settings."""
    return NumberedChildWriter(
        SequenceAllocator(),
        CounterCache(),
        max_attempts=request.app.state.settings.SEQUENCE_MAX_RETRIES,
    )


# Dependency for FastAPI
def get_chats_service(
    application_repository: CRUDApplication = Depends(),
    chat_repository: CRUDChat = Depends(),
    writer: NumberedChildWriter = Depends(build_numbered_writer),
) -> ChatsService:
    """Retrieve an instance of ChatsService with the provided repositories."""
    return ChatsService(application_repository, chat_repository, CounterCache(), writer)
