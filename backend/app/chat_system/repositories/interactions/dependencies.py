"""
Database session dependency.

Provides a SQLAlchemy database session for use in request handling.
Ensures proper cleanup after use.
"""

from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Yield a database session and ensures it is closed after use.

    The session factory is opened by the application lifespan and kept on
    ``app.state``, so every request gets its own session from the same pool.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
