"""This module defines the Applications model for storing applications in the database."""

from sqlalchemy import Column, Integer, String, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from chat_system.repositories.interactions.database import Base


class Applications(Base):  # type: ignore
    """
    Represents an application entity in the database.

    Attributes:
        id (int): Internal primary key, never exposed to clients.
        token (str): Opaque unique identifier shared with clients.
        name (str): Human readable name of the application.
        chats_count (int): Denormalized number of chats, maintained with every chat write.
        created_at (timestamp): When the application was created.
        updated_at (timestamp): When the application row was last written.
    """

    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    chats_count = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(TIMESTAMP(timezone=False), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=False), server_default=func.now(), onupdate=func.now()
    )

    chats = relationship(
        "Chats", back_populates="application", cascade="all, delete-orphan"
    )

    __mapper_args__ = {"eager_defaults": True}
