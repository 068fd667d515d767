"""HTTP client for the Elasticsearch query API."""

from typing import Any, Dict, Optional

import requests


class ElasticsearchClient:
    """Thin wrapper over the ``_search`` endpoint of an Elasticsearch cluster."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url (str): Root URL of the cluster, e.g. ``http://elasticsearch:9200``.
            timeout (float): Seconds to wait for the cluster before giving up.
            session (requests.Session): Session reused across requests.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def search(self, index: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Run a search request and return the decoded response.

        Raises:
            requests.RequestException: transport failure or non 2xx answer.
            ValueError: the response body is not JSON.
        """
        response = self.session.post(
            f"{self.base_url}/{index}/_search",
            json=body,
            timeout=self.timeout,
        )
        response.raise_for_status()
        result: Dict[str, Any] = response.json()
        return result

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
