"""
This module defines Pydantic models for handling application-related data.

It includes the payload used to create an application and the serialized
representation returned to clients and stored in the cache.
"""

from pydantic import BaseModel, ConfigDict, StringConstraints
from typing import Annotated
from datetime import datetime


class ApplicationBase(BaseModel):
    """
    Represents the base structure for an application.

    Attributes:
        name (str): Human readable name of the application.
    """

    name: Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]


class ApplicationCreate(ApplicationBase):
    """
    Represents the data required to create a new application.

    Attributes:
        token (str): Generated opaque token assigned by the service.
    """

    token: str


class ApplicationRead(BaseModel):
    """Public representation of an application, keyed by its token."""

    model_config = ConfigDict(from_attributes=True)

    token: str
    name: str
    chats_count: int
    created_at: datetime
    updated_at: datetime
