"""This module defines the Messages model for storing chat messages in the database."""

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    TIMESTAMP,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from chat_system.repositories.interactions.database import Base


class Messages(Base):  # type: ignore
    """
    Represents a chat message entity in the database.

    Attributes:
        id (int): Primary key, unique identifier for the message.
        chat_id (int): ID of the chat.
        number (int): Position of the message inside its chat, starting at 1.
        body (str): The text content of the message, indexed externally for search.
    """

    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    chat_id = Column(
        Integer, ForeignKey("chats.id", ondelete="CASCADE"), nullable=False
    )
    number = Column(Integer, nullable=False)
    body = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=False), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=False), server_default=func.now(), onupdate=func.now()
    )

    chat = relationship("Chats", back_populates="messages")

    __table_args__ = (
        UniqueConstraint("chat_id", "number", name="uq_message_number"),
    )

    __mapper_args__ = {"eager_defaults": True}
