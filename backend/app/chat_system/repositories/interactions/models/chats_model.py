"""This module defines the Chats model for storing chats in the database."""

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    TIMESTAMP,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from chat_system.repositories.interactions.database import Base


class Chats(Base):  # type: ignore
    """Represents a chat owned by an application, numbered within that application."""

    __tablename__ = "chats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    application_id = Column(
        Integer, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False
    )
    number = Column(Integer, nullable=False)
    messages_count = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(TIMESTAMP(timezone=False), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=False), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        UniqueConstraint("application_id", "number", name="uq_chat_number"),
    )

    application = relationship("Applications", back_populates="chats")
    messages = relationship(
        "Messages", back_populates="chat", cascade="all, delete-orphan"
    )

    __mapper_args__ = {"eager_defaults": True}
