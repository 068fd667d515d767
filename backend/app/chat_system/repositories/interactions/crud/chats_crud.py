"""
CRUD operations for managing chats in the database.

This module provides a `CRUDChat` class with methods to:
- Retrieve a chat by application and number.
- Create a chat with an already allocated number.
- Delete a chat together with its messages.

Methods only flush; committing is left to the service owning the unit of work.
"""

from typing import Optional
from sqlalchemy.orm import Session
from chat_system.repositories.interactions.models.chats_model import Chats


class CRUDChat:
    """
    Repository class for handling database operations related to chats.

    This class provides methods to interact with the database, including
    fetching, creating, and deleting chats.
    """

    def get(self, db: Session, application_id: int, number: int) -> Optional[Chats]:
        """
        Retrieve a chat by its number inside an application.

        Args:
            db (Session): The database session.
            application_id (int): Internal ID of the owning application.
            number (int): Sequence number of the chat.

        Returns:
            Optional[Chats]: The chat object if found, otherwise None.
        """
        return (
            db.query(Chats)
            .filter(Chats.application_id == application_id, Chats.number == number)
            .first()
        )

    def create(self, db: Session, application_id: int, number: int) -> Chats:
        """
        Add a new chat to the session and flush it.

        Args:
            db (Session): The database session.
            application_id (int): Internal ID of the owning application.
            number (int): The allocated sequence number.

        Returns:
            Chats: The pending chat object.
        """
        db_chat = Chats(application_id=application_id, number=number, messages_count=0)
        db.add(db_chat)
        db.flush()
        return db_chat

    def delete(self, db: Session, chat: Chats) -> Chats:
        """
        Delete a chat; its messages are removed by the ORM cascade.

        Args:
            db (Session): The database session.
            chat (Chats): The chat to delete.

        Returns:
            Chats: The deleted chat object.
        """
        db.delete(chat)
        db.flush()
        return chat
