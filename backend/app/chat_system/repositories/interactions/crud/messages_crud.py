"""
CRUD operations for managing chat messages in the database.

This module provides a `CRUDMessage` class with methods to:
- Create a message with an already allocated number.

Methods only flush; committing is left to the service owning the unit of work.
"""

from sqlalchemy.orm import Session
from chat_system.repositories.interactions.models.messages_model import Messages


class CRUDMessage:
    """Repository class for handling database operations related to messages."""

    def create(self, db: Session, chat_id: int, number: int, body: str) -> Messages:
        """
        Add a new message to the session and flush it.

        Args:
            db (Session): The database session.
            chat_id (int): The ID of the owning chat.
            number (int): The allocated sequence number.
            body (str): The text content of the message.

        Returns:
            Messages: The pending message object.
        """
        db_message = Messages(chat_id=chat_id, number=number, body=body)
        db.add(db_message)
        db.flush()
        return db_message
