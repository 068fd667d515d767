"""
This module defines Pydantic models for handling chat-related data.

Chats are addressed by their number inside the owning application.
"""

from pydantic import BaseModel, ConfigDict


class ChatRead(BaseModel):
    """
    Represents a chat returned to clients.

    Attributes:
        number (int): Sequence number of the chat inside its application.
        messages_count (int): Number of messages currently stored in the chat.
    """

    model_config = ConfigDict(from_attributes=True)

    number: int
    messages_count: int
