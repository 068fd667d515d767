"""Module for interacting with a Redis database used as a key/value cache with per-key TTL."""

from typing import Optional

import redis

from chat_system.logger_config import get_logger

logger = get_logger(__name__)


class RedisDatabase:
    """Handles get/set operations against the Redis cache store."""

    def __init__(self, url: str, socket_timeout: Optional[float] = None) -> None:
        """
        Initialize a connection pool to the Redis database.

        Args:
            url (str): Redis connection URL, e.g. ``redis://localhost:6379/0``.
            socket_timeout (float): Upper bound in seconds for connect and command calls.

        The connection is lazy: nothing is sent to the server until the first command.
        """
        self.handler = redis.Redis.from_url(
            url,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            decode_responses=True,
        )

    def get(self, key: str) -> Optional[str]:
        """Return the value stored at ``key`` or None when absent or expired."""
        value: Optional[str] = self.handler.get(key)
        return value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store ``value`` at ``key``, expiring after ``ttl_seconds``."""
        self.handler.set(key, value, ex=ttl_seconds)
        logger.info(f"Cached key {key} for {ttl_seconds}s")

    def close(self) -> None:
        """Release every pooled connection."""
        self.handler.close()
