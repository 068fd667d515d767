"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_system.configs import Settings, settings as default_settings
from chat_system.controllers.applications_controllers import applications_router
from chat_system.controllers.chats_controllers import chats_router
from chat_system.controllers.error_handlers import register_error_handlers
from chat_system.logger_config import get_logger
from chat_system.repositories.interactions import models  # noqa: F401
from chat_system.repositories.interactions.database import (
    Base,
    build_engine,
    build_session_factory,
)
from chat_system.repositories.redis.redis_crud import RedisDatabase
from chat_system.repositories.search.elasticsearch_client import ElasticsearchClient
from chat_system.startup import create_mock_data

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API with its database, cache and search resources bound to its lifespan."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = build_engine(settings.DATABASE_URL)
        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully!")

        app.state.settings = settings
        app.state.session_factory = build_session_factory(engine)
        app.state.redis_repository = RedisDatabase(
            settings.REDIS_URL, socket_timeout=settings.REDIS_SOCKET_TIMEOUT
        )
        app.state.search_client = ElasticsearchClient(
            settings.ELASTICSEARCH_URL, timeout=settings.SEARCH_TIMEOUT_SECONDS
        )

        if settings.SEED_DEMO_DATA:
            logger.info("Populating mocked data!")
            create_mock_data(app.state.session_factory)

        try:
            yield
        finally:
            logger.info("Closing cache, search and database connections...")
            app.state.redis_repository.close()
            app.state.search_client.close()
            engine.dispose()

    logger.info("Starting FastAPI application...")
    app = FastAPI(
        title="Chat System API",
        root_path=settings.ROOT_PATH_BACKEND,
        description="Applications, numbered chats and messages with full-text search",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(applications_router)
    app.include_router(chats_router)

    @app.get("/up", response_description="Api healthcheck")  # type: ignore[misc]
    async def health() -> Dict[str, str]:
        """Report that the application booted."""
        return {"status": "ok"}

    return app
