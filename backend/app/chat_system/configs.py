"""Application settings loaded from environment variables.

Defines all environment-driven configuration used by the app.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration model for the application."""

    # Primary store
    DATABASE_URL: str = "sqlite:///./chat_system.db"

    # Redis cache
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_SOCKET_TIMEOUT: float = 2.0
    CACHE_STRICT: bool = False
    APPLICATION_CACHE_TTL_SECONDS: int = 30 * 60

    # Elasticsearch
    ELASTICSEARCH_URL: str = "http://elasticsearch:9200"
    MESSAGES_INDEX: str = "messages"
    SEARCH_TIMEOUT_SECONDS: float = 10.0

    # Pagination
    DEFAULT_PER_PAGE: int = 20
    MAX_PER_PAGE: Optional[int] = 100
    MAX_RESULT_WINDOW: Optional[int] = 10_000

    # Sequence numbering
    SEQUENCE_MAX_RETRIES: int = 3

    # API parameters
    ROOT_PATH_BACKEND: str = ""
    ALLOWED_ORIGINS: list[str] = ["*"]
    SEED_DEMO_DATA: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
