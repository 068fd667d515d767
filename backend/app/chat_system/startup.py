"""Seed helper for local development."""

from sqlalchemy.orm import Session, sessionmaker

from chat_system.logger_config import get_logger
from chat_system.repositories.interactions.models.applications_model import (
    Applications,
)
from chat_system.services.interactions.applications_services import generate_token

logger = get_logger(__name__)

DEMO_APPLICATIONS = ["Demo Support Desk", "Demo Sales Chat"]


def create_mock_data(session_factory: sessionmaker) -> None:
    """Populate the database with demo applications when it is empty."""
    db: Session = session_factory()
    try:
        existing = db.query(Applications).count()
        if existing:
            logger.info("Applications already present (%d records). Skipping.", existing)
            return

        logger.info("Creating demo applications.")
        for name in DEMO_APPLICATIONS:
            db.add(Applications(name=name, token=generate_token(), chats_count=0))
        db.commit()
        logger.info("Demo applications inserted with success.")
    except Exception as exc:
        logger.error("Failed to seed demo applications: %s", exc)
        db.rollback()
        raise
    finally:
        db.close()
