"""Read-through cache of serialized entities, backed by Redis with per-key TTL."""

from typing import Callable, Optional

from fastapi import Request
from redis.exceptions import RedisError

from chat_system.errors import CacheUnavailable
from chat_system.logger_config import get_logger
from chat_system.repositories.redis.redis_crud import RedisDatabase

logger = get_logger(__name__)


def application_cache_key(token: str) -> str:
    """Cache key under which an application is stored."""
    return f"application:token:{token}"


class EntityCache:
    """
    Serve single-entity lookups from Redis, loading from the primary store on miss.

    Entries expire on their own after the TTL; writes to the underlying entity do
    not invalidate them. In best-effort mode (the default) a failing cache store is
    logged and skipped so reads keep working; in strict mode it raises
    ``CacheUnavailable``.
    """

    def __init__(self, redis_repository: RedisDatabase, strict: bool = False) -> None:
        """
        Initialize the cache with the redis repository.

        Args:
            redis_repository (RedisDatabase): Key/value store holding the entries.
            strict (bool): Raise instead of bypassing the cache when Redis fails.
        """
        self.redis_repository = redis_repository
        self.strict = strict

    def get_or_load(self, key: str, loader: Callable[[], str], ttl: int) -> str:
        """
        Return the cached value for ``key`` or load, store and return it.

        Args:
            key (str): Cache key of the entity.
            loader (Callable[[], str]): Reads the entity from the primary store and
                returns its serialized form. Errors it raises (e.g. ``NotFound``)
                propagate and nothing is cached.
            ttl (int): Lifetime of the stored entry in seconds.

        Returns:
            str: The serialized entity.
        """
        cached = self._read(key)
        if cached is not None:
            return cached

        value = loader()
        self._write(key, value, ttl)
        return value

    def _read(self, key: str) -> Optional[str]:
        try:
            return self.redis_repository.get(key)
        except RedisError as e:
            if self.strict:
                raise CacheUnavailable(f"Cache read failed for {key}") from e
            logger.warning(f"Cache read failed for {key}, loading from database: {e}")
            return None

    def _write(self, key: str, value: str, ttl: int) -> None:
        try:
            self.redis_repository.set(key, value, ttl)
        except RedisError as e:
            if self.strict:
                raise CacheUnavailable(f"Cache write failed for {key}") from e
            logger.warning(f"Cache write failed for {key}, serving uncached value: {e}")


# Dependency for FastAPI
def get_entity_cache(request: Request) -> EntityCache:
    """Retrieve an EntityCache over the Redis connection opened at startup."""
    return EntityCache(
        request.app.state.redis_repository,
        strict=request.app.state.settings.CACHE_STRICT,
    )
