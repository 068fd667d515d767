"""Request and response models of the HTTP API."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class ApplicationParams(BaseModel):
    """Permitted attributes of an application in a create request."""

    name: Optional[str] = Field(default=None, description="Name of the application.")


class ApplicationCreateRequest(BaseModel):
    """Body of ``POST /applications``."""

    application: ApplicationParams = Field(
        ..., description="Attributes of the new application."
    )


class ApplicationCreatedResponse(BaseModel):
    """Data returned after an application is created."""

    token: str = Field(..., description="Opaque token identifying the application.")
    name: str = Field(..., description="Name of the application.")


class PaginationMeta(BaseModel):
    """Pagination block returned with listings."""

    page: int
    per_page: int
    total: int
    total_pages: int


class ApplicationListResponse(BaseModel):
    """Paginated list of applications."""

    data: List[Dict[str, Any]]
    meta: PaginationMeta


class MessageParams(BaseModel):
    """Permitted attributes of a message in a create request."""

    body: Optional[str] = Field(default=None, description="Text of the message.")


class MessageCreateRequest(BaseModel):
    """Body of ``POST /applications/{token}/chats/{number}/messages``."""

    message: MessageParams = Field(..., description="Attributes of the new message.")


class SearchResponse(BaseModel):
    """Search envelope: hit count, matching message documents and the echoed page."""

    total: int = Field(..., description="Total number of matching messages.")
    results: List[Dict[str, Any]] = Field(
        ..., description="Matching messages ordered by message number."
    )
    page: int
    per_page: int


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Human readable error message.")
