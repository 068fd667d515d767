"""
CRUD operations for managing applications in the database.

This module provides a `CRUDApplication` class with methods to:
- Retrieve an application by its token.
- List applications newest first, windowed by offset/limit.
- Count applications.
- Create a new application.

Methods only flush; committing is left to the service owning the unit of work.
"""

from typing import List, Optional
from sqlalchemy import desc, func
from sqlalchemy.orm import Session
from chat_system.repositories.interactions.models.applications_model import (
    Applications,
)
from chat_system.repositories.interactions.schemas.applications_schema import (
    ApplicationCreate,
)


class CRUDApplication:
    """Repository class for handling database operations related to applications."""

    def get_by_token(self, db: Session, token: str) -> Optional[Applications]:
        """
        Retrieve an application by its public token.

        Args:
            db (Session): The database session.
            token (str): Opaque token of the application.

        Returns:
            Optional[Applications]: The application if found, otherwise None.
        """
        return db.query(Applications).filter(Applications.token == token).first()

    def list(self, db: Session, offset: int, limit: int) -> List[Applications]:
        """
        Retrieve a window of applications ordered newest first.

        Args:
            db (Session): The database session.
            offset (int): Number of rows to skip.
            limit (int): Maximum number of rows to return.

        Returns:
            List[Applications]: The applications inside the window.
        """
        return (
            db.query(Applications)
            .order_by(desc(Applications.created_at), desc(Applications.id))
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count(self, db: Session) -> int:
        """Return the total number of applications."""
        total: int = db.query(func.count(Applications.id)).scalar() or 0
        return total

    def create(self, db: Session, application_in: ApplicationCreate) -> Applications:
        """
        Add a new application to the session and flush it.

        Args:
            db (Session): The database session.
            application_in (ApplicationCreate): The application data to be inserted.

        Returns:
            Applications: The pending application, with its primary key assigned.
        """
        db_application = Applications(**application_in.model_dump())
        db.add(db_application)
        db.flush()
        return db_application
