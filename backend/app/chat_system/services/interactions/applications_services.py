"""This module provides the ApplicationsService class for managing applications."""

import json
import secrets
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from chat_system.errors import NotFound, ValidationFailure
from chat_system.logger_config import get_logger
from chat_system.repositories.interactions.crud.applications_crud import (
    CRUDApplication,
)
from chat_system.repositories.interactions.models.applications_model import (
    Applications,
)
from chat_system.repositories.interactions.schemas.applications_schema import (
    ApplicationCreate,
    ApplicationRead,
)
from chat_system.services.pagination import PaginationEngine
from chat_system.services.redis.entity_cache import (
    EntityCache,
    application_cache_key,
    get_entity_cache,
)

logger = get_logger(__name__)

APPLICATION_CACHE_TTL_SECONDS = 30 * 60


def generate_token() -> str:
    """Return a new opaque application token (24 url-safe characters)."""
    return secrets.token_urlsafe(18)


class ApplicationsService:
    """Service layer for handling application-related operations."""

    def __init__(
        self,
        application_repository: CRUDApplication,
        entity_cache: EntityCache,
        pagination: PaginationEngine,
        cache_ttl: int = APPLICATION_CACHE_TTL_SECONDS,
    ) -> None:
        """
        Initialize the ApplicationsService.

        Args:
            application_repository (CRUDApplication): Repository for application rows.
            entity_cache (EntityCache): Read-through cache used by ``show``.
            pagination (PaginationEngine): Page window calculator used by ``list``.
            cache_ttl (int): Lifetime in seconds of cached applications.
        """
        self.application_repository = application_repository
        self.entity_cache = entity_cache
        self.pagination = pagination
        self.cache_ttl = cache_ttl

    def list(self, db: Session, page: Any, per_page: Any) -> Dict[str, Any]:
        """
        Return one page of applications, newest first, with pagination metadata.

        Args:
            db (Session): The database session.
            page (Any): Requested page, coerced and clamped to at least 1.
            per_page (Any): Requested page size, coerced and clamped.

        Returns:
            Dict[str, Any]: ``{"data": [...], "meta": {page, per_page, total, total_pages}}``.
        """
        total = self.application_repository.count(db)
        window = self.pagination.window(page, per_page, total)
        applications = self.application_repository.list(
            db, window.offset, window.limit
        )
        return {
            "data": [
                ApplicationRead.model_validate(application).model_dump(mode="json")
                for application in applications
            ],
            "meta": window.meta(),
        }

    def create(self, db: Session, name: Optional[str]) -> Applications:
        """
        Create an application with a freshly generated token.

        Raises:
            ValidationFailure: the name is missing or blank, or the token collided.
        """
        if name is None or not name.strip():
            raise ValidationFailure("Name can't be blank")

        try:
            application_in = ApplicationCreate(name=name, token=generate_token())
        except ValidationError as e:
            raise ValidationFailure(f"Invalid application: {e.errors()[0]['msg']}") from e

        try:
            application = self.application_repository.create(db, application_in)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ValidationFailure("Token has already been taken") from e
        except Exception:
            db.rollback()
            raise

        db.refresh(application)
        logger.info(f"Created application {application.token}")
        return application

    def serialized(self, db: Session, token: str) -> str:
        """Read an application from the database and return it as JSON text."""
        application = self.application_repository.get_by_token(db, token)
        if application is None:
            raise NotFound(f"Couldn't find Application with token {token}")
        return ApplicationRead.model_validate(application).model_dump_json()

    def show(self, db: Session, token: str) -> Dict[str, Any]:
        """
        Return an application by token, served from the cache when possible.

        Raises:
            NotFound: no application carries this token. Absence is never cached.
        """
        payload = self.entity_cache.get_or_load(
            application_cache_key(token),
            lambda: self.serialized(db, token),
            self.cache_ttl,
        )
        application: Dict[str, Any] = json.loads(payload)
        return application


# Dependency for FastAPI
def get_applications_service(
    request: Request,
    application_repository: CRUDApplication = Depends(),
    entity_cache: EntityCache = Depends(get_entity_cache),
) -> ApplicationsService:
    """Retrieve an instance of ApplicationsService with the provided collaborators."""
    settings = request.app.state.settings
    return ApplicationsService(
        application_repository,
        entity_cache,
        PaginationEngine(
            settings.DEFAULT_PER_PAGE, settings.MAX_PER_PAGE, settings.MAX_RESULT_WINDOW
        ),
        cache_ttl=settings.APPLICATION_CACHE_TTL_SECONDS,
    )
