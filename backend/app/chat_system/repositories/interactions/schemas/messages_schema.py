"""
This module defines Pydantic models for handling message-related data.

It includes the payload accepted when a message is written and the model
returned to clients.
"""

from pydantic import BaseModel, ConfigDict


class MessageRead(BaseModel):
    """
    Represents a message returned to clients.

    Attributes:
        number (int): Sequence number of the message inside its chat.
        body (str): The message content.
    """

    model_config = ConfigDict(from_attributes=True)

    number: int
    body: str
