"""
Database configuration module.

Sets up the SQLAlchemy engine, session factory, and declarative base for ORM models.

Exports:
    - Base: Declarative base class for defining ORM models.
    - build_engine: Create an engine for the configured DATABASE_URL.
    - build_session_factory: Session factory bound to an engine.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine, sharing SQLite connections across request threads."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": 30}
    return create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    """Return the session factory used for every unit of work."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
