"""
Thin HTTP transport used by every CRM call.

One request in, one response (or None) out. Request failures (transport,
decoding, redirect loops) are logged and swallowed here so callers only
branch on the status code.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

logger = logging.getLogger(__name__)

TRANSPORT_ERROR = "Transport error"
INVALID_JSON_ERROR = "Invalid JSON response"


@dataclass(frozen=True)
class HttpResponse:
    """Status code and raw body of a completed request."""
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        """Only 200 counts as success for the CRM API."""
        return self.status_code == 200

    def json(self) -> Any:
        """Decode the body. Raises ValueError on malformed JSON."""
        return json.loads(self.body)


def describe_failure(response: Optional[HttpResponse]) -> str:
    """Short message for a failed call, used in logs and result objects."""
    if response is None:
        return TRANSPORT_ERROR
    return f"HTTP Code: {response.status_code}"


class HttpClient:
    """
    Blocking HTTP client wrapping a single httpx.Client.

    No retries and no timeout tuning: httpx defaults apply.
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        """
        Initialize HTTP client.

        Args:
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._client = httpx.Client(transport=transport)

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()

    def send(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[Union[str, bytes]] = None,
        is_post: bool = False
    ) -> Optional[HttpResponse]:
        """
        Perform a GET or POST request.

        Args:
            url: Target URL
            headers: Request headers
            data: Raw request body, only sent with POST
            is_post: Send a POST instead of a GET

        Returns:
            HttpResponse, or None if no response was received
        """
        method = "POST" if is_post else "GET"
        try:
            response = self._client.request(
                method,
                url,
                headers=headers,
                content=data if is_post else None,
            )
        except httpx.RequestError as e:
            logger.error(f"HTTP request failed for {method} {url}: {e}")
            return None

        return HttpResponse(status_code=response.status_code, body=response.text)
