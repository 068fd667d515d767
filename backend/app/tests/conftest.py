"""Shared fixtures: SQLite databases, a clock-driven cache store and a fake search index."""

from typing import Any, Dict, Generator, List, Optional, Tuple

import pytest
from sqlalchemy.orm import Session, sessionmaker

from chat_system.configs import Settings
from chat_system.repositories.interactions import models  # noqa: F401
from chat_system.repositories.interactions.database import (
    Base,
    build_engine,
    build_session_factory,
)


class FakeCacheStore:
    """In-memory stand-in for RedisDatabase whose expiry follows ``self.now``."""

    def __init__(self) -> None:
        self.now = 0.0
        self.entries: Dict[str, Tuple[str, float]] = {}
        self.set_calls: List[Tuple[str, str, int]] = []

    def get(self, key: str) -> Optional[str]:
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.now >= expires_at:
            del self.entries[key]
            return None
        return value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self.set_calls.append((key, value, ttl_seconds))
        self.entries[key] = (value, self.now + ttl_seconds)

    def close(self) -> None:
        pass


class FakeSearchIndex:
    """Evaluates the search bodies built by SearchGateway over in-memory documents."""

    def __init__(self, documents: Optional[List[Dict[str, Any]]] = None) -> None:
        self.documents = documents or []
        self.requests: List[Tuple[str, Dict[str, Any]]] = []

    def search(self, index: str, body: Dict[str, Any]) -> Dict[str, Any]:
        self.requests.append((index, body))
        query = body["query"]["bool"]
        terms = [next(iter(f["term"].items())) for f in query["filter"]]
        text = query["must"][0]["multi_match"]["query"].lower()

        hits = [
            doc
            for doc in self.documents
            if all(doc.get(field) == value for field, value in terms)
            and text in doc["body"].lower()
        ]
        hits.sort(key=lambda doc: doc["message_number"])
        window = hits[body["from"] : body["from"] + body["size"]]
        return {
            "hits": {
                "total": {"value": len(hits), "relation": "eq"},
                "hits": [{"_id": str(i), "_source": doc} for i, doc in enumerate(window)],
            }
        }

    def close(self) -> None:
        pass


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'chat_system.db'}",
        REDIS_URL="redis://localhost:6379/15",
        ELASTICSEARCH_URL="http://localhost:9200",
        SEED_DEMO_DATA=False,
    )


@pytest.fixture()
def session_factory(settings: Settings) -> Generator[sessionmaker, None, None]:
    engine = build_engine(settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture()
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def cache_store() -> FakeCacheStore:
    return FakeCacheStore()


@pytest.fixture()
def make_search_index():
    return FakeSearchIndex
