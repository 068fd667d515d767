"""Full-text search of chat messages through Elasticsearch."""

from typing import Any, Dict, List

import requests
from fastapi import Request

from chat_system.errors import SearchUnavailable, ValidationFailure
from chat_system.logger_config import get_logger
from chat_system.repositories.search.elasticsearch_client import ElasticsearchClient
from chat_system.services.pagination import PaginationEngine

logger = get_logger(__name__)

SEARCH_FIELDS = ["body", "body.ngram"]


def build_search_body(
    application_token: str, chat_number: int, query_text: str, offset: int, size: int
) -> Dict[str, Any]:
    """
    Build the query for messages of one chat matching ``query_text``.

    Application token and chat number are exact-match filters; the text is matched
    against the plain and n-gram analyzed body with automatic fuzziness. Hits are
    sorted by message number so results read in chat order.
    """
    return {
        "query": {
            "bool": {
                "filter": [
                    {"term": {"application_token": application_token}},
                    {"term": {"chat_number": chat_number}},
                ],
                "must": [
                    {
                        "multi_match": {
                            "query": query_text,
                            "fields": SEARCH_FIELDS,
                            "type": "best_fields",
                            "fuzziness": "AUTO",
                        }
                    }
                ],
            }
        },
        "from": offset,
        "size": size,
        "sort": [{"message_number": {"order": "asc"}}],
    }


def _hits_total(response: Dict[str, Any]) -> int:
    total = response.get("hits", {}).get("total", 0)
    # Elasticsearch 7+ reports {"value": n, "relation": ...}, older clusters a bare int.
    if isinstance(total, dict):
        return int(total.get("value", 0))
    return int(total or 0)


class SearchGateway:
    """Query the messages index and reshape hits into the pagination envelope."""

    def __init__(
        self,
        client: ElasticsearchClient,
        pagination: PaginationEngine,
        index: str = "messages",
    ) -> None:
        self.client = client
        self.pagination = pagination
        self.index = index

    def search(
        self,
        application_token: str,
        chat_number: int,
        query_text: str,
        page: Any = 1,
        per_page: Any = None,
    ) -> Dict[str, Any]:
        """
        Search the messages of a chat.

        Returns:
            Dict[str, Any]: ``{"total", "results", "page", "per_page"}`` where
            ``results`` are the indexed message documents in number order.

        Raises:
            ValidationFailure: ``query_text`` is blank.
            SearchUnavailable: the search cluster failed or answered garbage.
        """
        if not query_text or not query_text.strip():
            raise ValidationFailure("Query parameter 'query' is required")

        window = self.pagination.window(page, per_page, 0)
        body = build_search_body(
            application_token, chat_number, query_text.strip(), window.offset, window.limit
        )

        try:
            response = self.client.search(self.index, body)
            total = _hits_total(response)
            results: List[Dict[str, Any]] = [
                hit.get("_source", {}) for hit in response.get("hits", {}).get("hits", [])
            ]
        except (requests.RequestException, ValueError, AttributeError) as e:
            logger.error(f"Elasticsearch search failed: {e}")
            raise SearchUnavailable("Search is temporarily unavailable") from e

        return {
            "total": total,
            "results": results,
            "page": window.page,
            "per_page": window.per_page,
        }


# Dependency for FastAPI
def get_search_gateway(request: Request) -> SearchGateway:
    """Retrieve a SearchGateway over the Elasticsearch client opened at startup."""
    settings = request.app.state.settings
    return SearchGateway(
        request.app.state.search_client,
        PaginationEngine(
            settings.DEFAULT_PER_PAGE, settings.MAX_PER_PAGE, settings.MAX_RESULT_WINDOW
        ),
        index=settings.MESSAGES_INDEX,
    )
