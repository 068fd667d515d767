"""Create, list and show applications."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from chat_system.models.api_models import (
    ApplicationCreateRequest,
    ApplicationCreatedResponse,
    ApplicationListResponse,
    ErrorResponse,
)
from chat_system.repositories.interactions.dependencies import get_db
from chat_system.services.interactions.applications_services import (
    ApplicationsService,
    get_applications_service,
)

applications_router = APIRouter(prefix="/applications", tags=["Applications"])


@applications_router.get("", response_model=ApplicationListResponse)
def list_applications(
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: Session = Depends(get_db),
    service: ApplicationsService = Depends(get_applications_service),
) -> Dict[str, Any]:
    """
    List applications newest first.

    ``page`` and ``per_page`` are coerced to integers and clamped, so garbage
    values fall back to the first page of the default size.
    """
    return service.list(db, page, per_page)


@applications_router.post(
    "",
    response_model=ApplicationCreatedResponse,
    responses={422: {"model": ErrorResponse}},
)
def create_application(
    data: ApplicationCreateRequest,
    db: Session = Depends(get_db),
    service: ApplicationsService = Depends(get_applications_service),
) -> ApplicationCreatedResponse:
    """Create an application and return its generated token."""
    application = service.create(db, data.application.name)
    return ApplicationCreatedResponse(token=application.token, name=application.name)


@applications_router.get(
    "/{token}",
    responses={404: {"model": ErrorResponse}},
)
def show_application(
    token: str,
    db: Session = Depends(get_db),
    service: ApplicationsService = Depends(get_applications_service),
) -> Dict[str, Any]:
    """Return one application. Served from a 30 minute cache when available."""
    return service.show(db, token)
