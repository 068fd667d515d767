"""Test SearchGateway query building and response shaping."""

from unittest.mock import MagicMock

import pytest
import requests

from chat_system.errors import SearchUnavailable, ValidationFailure
from chat_system.repositories.search.elasticsearch_client import ElasticsearchClient
from chat_system.services.pagination import PaginationEngine
from chat_system.services.search.search_gateway import SearchGateway, build_search_body

TOKEN = "app-token"


def _document(chat_number: int, message_number: int, body: str, token: str = TOKEN):
    return {
        "application_token": token,
        "chat_number": chat_number,
        "message_number": message_number,
        "body": body,
    }


@pytest.fixture()
def chat_documents():
    return [
        _document(1, 3, "hello there"),
        _document(1, 1, "hello world"),
        _document(1, 2, "goodbye world"),
        _document(2, 1, "hello from another chat"),
        _document(1, 1, "hello from another application", token="other"),
    ]


class TestSearchGateway:
    """Test cases for SearchGateway.search."""

    def test_returns_matching_messages_in_number_order(
        self, make_search_index, chat_documents
    ) -> None:
        gateway = SearchGateway(make_search_index(chat_documents), PaginationEngine())

        result = gateway.search(TOKEN, 1, "hello", page=1, per_page=20)

        assert result["total"] == 2
        assert [doc["body"] for doc in result["results"]] == [
            "hello world",
            "hello there",
        ]
        assert [doc["message_number"] for doc in result["results"]] == [1, 3]
        assert (result["page"], result["per_page"]) == (1, 20)

    def test_window_comes_from_pagination(
        self, make_search_index, chat_documents
    ) -> None:
        index = make_search_index(chat_documents)
        gateway = SearchGateway(index, PaginationEngine(), index="messages")

        result = gateway.search(TOKEN, 1, "hello", page=2, per_page=1)

        assert result["total"] == 2
        assert [doc["message_number"] for doc in result["results"]] == [3]
        name, body = index.requests[0]
        assert name == "messages"
        assert (body["from"], body["size"]) == (1, 1)

    def test_page_and_size_are_normalized(self, make_search_index) -> None:
        index = make_search_index([])
        gateway = SearchGateway(index, PaginationEngine(max_per_page=100))

        result = gateway.search(TOKEN, 1, "hello", page="0", per_page="500")

        assert result == {"total": 0, "results": [], "page": 1, "per_page": 100}
        _, body = index.requests[0]
        assert (body["from"], body["size"]) == (0, 100)

    @pytest.mark.parametrize("query_text", ["", "   ", None])
    def test_blank_query_is_rejected(self, query_text) -> None:
        client = MagicMock(spec=ElasticsearchClient)
        gateway = SearchGateway(client, PaginationEngine())

        with pytest.raises(ValidationFailure):
            gateway.search(TOKEN, 1, query_text)
        client.search.assert_not_called()

    def test_cluster_error_is_logged_and_raised_as_search_unavailable(
        self, caplog
    ) -> None:
        client = MagicMock(spec=ElasticsearchClient)
        client.search.side_effect = requests.ConnectionError("connection refused")
        gateway = SearchGateway(client, PaginationEngine())

        with pytest.raises(SearchUnavailable) as exc_info:
            gateway.search(TOKEN, 1, "hello")

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
        assert "Elasticsearch search failed" in caplog.text

    def test_undecodable_response_is_search_unavailable(self) -> None:
        client = MagicMock(spec=ElasticsearchClient)
        client.search.side_effect = ValueError("Expecting value")
        gateway = SearchGateway(client, PaginationEngine())

        with pytest.raises(SearchUnavailable):
            gateway.search(TOKEN, 1, "hello")

    def test_legacy_integer_total(self) -> None:
        client = MagicMock(spec=ElasticsearchClient)
        client.search.return_value = {
            "hits": {"total": 1, "hits": [{"_source": _document(1, 1, "hello")}]}
        }
        gateway = SearchGateway(client, PaginationEngine())

        result = gateway.search(TOKEN, 1, "hello")

        assert result["total"] == 1
        assert result["results"][0]["body"] == "hello"


def test_build_search_body() -> None:
    body = build_search_body(TOKEN, 4, "helo", 40, 20)

    assert body == {
        "query": {
            "bool": {
                "filter": [
                    {"term": {"application_token": TOKEN}},
                    {"term": {"chat_number": 4}},
                ],
                "must": [
                    {
                        "multi_match": {
                            "query": "helo",
                            "fields": ["body", "body.ngram"],
                            "type": "best_fields",
                            "fuzziness": "AUTO",
                        }
                    }
                ],
            }
        },
        "from": 40,
        "size": 20,
        "sort": [{"message_number": {"order": "asc"}}],
    }
