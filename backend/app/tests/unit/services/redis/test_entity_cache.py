"""Test the read-through EntityCache."""

from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from chat_system.errors import CacheUnavailable, NotFound
from chat_system.repositories.redis.redis_crud import RedisDatabase
from chat_system.services.redis.entity_cache import EntityCache, application_cache_key

KEY = "application:token:abc"
TTL = 1800


class TestEntityCache:
    """Test cases for EntityCache.get_or_load."""

    def test_miss_loads_once_and_stores_with_ttl(self, cache_store) -> None:
        cache = EntityCache(cache_store)
        loader = MagicMock(return_value='{"token": "abc"}')

        result = cache.get_or_load(KEY, loader, TTL)

        assert result == '{"token": "abc"}'
        loader.assert_called_once_with()
        assert cache_store.set_calls == [(KEY, '{"token": "abc"}', TTL)]

    def test_hit_within_ttl_does_not_call_loader(self, cache_store) -> None:
        cache = EntityCache(cache_store)
        loader = MagicMock(return_value='{"token": "abc"}')
        cache.get_or_load(KEY, loader, TTL)

        cache_store.now += TTL - 1
        result = cache.get_or_load(KEY, loader, TTL)

        assert result == '{"token": "abc"}'
        assert loader.call_count == 1

    def test_expired_entry_is_loaded_again(self, cache_store) -> None:
        cache = EntityCache(cache_store)
        loader = MagicMock(side_effect=['{"name": "old"}', '{"name": "new"}'])
        cache.get_or_load(KEY, loader, TTL)

        cache_store.now += TTL
        result = cache.get_or_load(KEY, loader, TTL)

        assert result == '{"name": "new"}'
        assert loader.call_count == 2

    def test_not_found_propagates_and_is_not_cached(self, cache_store) -> None:
        cache = EntityCache(cache_store)
        loader = MagicMock(side_effect=NotFound("missing"))

        with pytest.raises(NotFound):
            cache.get_or_load(KEY, loader, TTL)
        with pytest.raises(NotFound):
            cache.get_or_load(KEY, loader, TTL)

        assert loader.call_count == 2
        assert cache_store.set_calls == []

    def test_unavailable_store_falls_through_to_loader(self) -> None:
        store = MagicMock(spec=RedisDatabase)
        store.get.side_effect = RedisConnectionError("down")
        store.set.side_effect = RedisConnectionError("down")
        cache = EntityCache(store)

        result = cache.get_or_load(KEY, lambda: "value", TTL)

        assert result == "value"
        store.set.assert_called_once_with(KEY, "value", TTL)

    def test_strict_mode_raises_cache_unavailable(self) -> None:
        store = MagicMock(spec=RedisDatabase)
        store.get.side_effect = RedisConnectionError("down")
        cache = EntityCache(store, strict=True)
        loader = MagicMock()

        with pytest.raises(CacheUnavailable):
            cache.get_or_load(KEY, loader, TTL)
        loader.assert_not_called()

    def test_strict_mode_raises_on_write_failure(self) -> None:
        store = MagicMock(spec=RedisDatabase)
        store.get.return_value = None
        store.set.side_effect = RedisConnectionError("down")
        cache = EntityCache(store, strict=True)

        with pytest.raises(CacheUnavailable):
            cache.get_or_load(KEY, lambda: "value", TTL)

    def test_application_cache_key(self) -> None:
        assert application_cache_key("abc") == KEY
