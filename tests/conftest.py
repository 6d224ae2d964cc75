"""
Shared pytest fixtures for SuiteCRM vardefs tests.

This module provides common fixtures including:
- ApiMocker: Canned SuiteCRM API responses served through httpx.MockTransport
- CRM configuration and HTTP client wired to the mocker
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from suitecrm_vardefs.config.provider import CRMConfig
from suitecrm_vardefs.modules.http import HttpClient

BASE_URL = "http://crm.test/Api/"


# =============================================================================
# SuiteCRM API Mocking Infrastructure
# =============================================================================

@dataclass
class ApiResponse:
    """Represents a mocked API response."""
    status_code: int = 200
    json_body: Any = None
    text: Optional[str] = None
    # Undecoded body bytes, served as-is alongside headers
    raw: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)
    # Raise this instead of responding, to simulate transport failures
    error: Optional[Exception] = None

    def to_httpx(self, request: httpx.Request) -> httpx.Response:
        """Convert to an httpx.Response for the given request."""
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(
                self.status_code,
                headers=self.headers,
                stream=httpx.ByteStream(self.raw),
                request=request,
            )
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text, request=request)
        return httpx.Response(self.status_code, json=self.json_body, request=request)


@dataclass
class ApiCall:
    """Record of a request made during testing."""
    method: str
    path: str
    headers: Dict[str, str]
    body: bytes = b""
    response: Optional[ApiResponse] = None

    def json(self) -> Any:
        return json.loads(self.body)


class ApiMocker:
    """
    Mock SuiteCRM endpoints with path-matched responses.

    Usage:
        def test_token(api_mocker, http_client):
            api_mocker.register("POST", "/Api/access_token", ApiResponse(
                json_body={"access_token": "X"}
            ))
            result = get_access_token(http_client, ...)
            assert api_mocker.was_called_with("POST", "/Api/access_token")
    """

    def __init__(self):
        self._responses: Dict[Tuple[str, str], ApiResponse] = {}
        self._call_history: List[ApiCall] = []
        self._default_response = ApiResponse(
            status_code=404,
            json_body={"errors": {"detail": "mock not configured for this path"}}
        )

    def register(
        self,
        method: str,
        path: str,
        response: Union[ApiResponse, Dict[str, Any]]
    ) -> "ApiMocker":
        """
        Register a response for an exact method and path.

        Args:
            method: HTTP method
            path: URL path (no query string)
            response: ApiResponse, or a dict used as a 200 JSON body

        Returns:
            self for chaining
        """
        if isinstance(response, dict):
            response = ApiResponse(json_body=response)
        self._responses[(method.upper(), path)] = response
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        """Request handler for httpx.MockTransport."""
        method = request.method
        path = request.url.path
        response = self._responses.get((method, path), self._default_response)

        self._call_history.append(ApiCall(
            method=method,
            path=path,
            headers=dict(request.headers),
            body=request.content,
            response=response,
        ))
        return response.to_httpx(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def calls(self) -> List[ApiCall]:
        """Get all requests made during the test."""
        return self._call_history

    @property
    def call_count(self) -> int:
        return len(self._call_history)

    def was_called_with(self, method: str, path: str) -> bool:
        """Check if any request hit the given method and path."""
        return any(c.method == method and c.path == path for c in self._call_history)

    def get_calls_matching(self, fragment: str) -> List[ApiCall]:
        """Get all requests whose path contains the fragment."""
        return [c for c in self._call_history if fragment in c.path]

    def reset(self):
        """Clear call history (but keep registered responses)."""
        self._call_history = []


@pytest.fixture
def api_mocker():
    """Provide an empty ApiMocker."""
    return ApiMocker()


@pytest.fixture
def http_client(api_mocker):
    """HttpClient whose requests are served by api_mocker."""
    with HttpClient(transport=api_mocker.transport) as client:
        yield client


@pytest.fixture
def crm_config():
    """Create a test CRM configuration."""
    return CRMConfig(
        base_url=BASE_URL,
        client_id="test-client",
        client_secret="test-secret",
        username="admin",
        password="admin-password",
    )


@pytest.fixture
def token_path():
    return "/Api/access_token"


@pytest.fixture
def modules_path():
    return "/Api/V8/meta/modules"


def _vardefs_path(module_name: str) -> str:
    return f"/Api/V8/module/vardefs/{module_name}/110"


@pytest.fixture
def vardefs_path():
    """Build the mock path of a module's vardefs endpoint."""
    return _vardefs_path


@pytest.fixture
def happy_api(api_mocker, token_path, modules_path, vardefs_path):
    """Mocker preloaded with a successful token, two modules and their vardefs."""
    api_mocker.register("POST", token_path, {"access_token": "X", "token_type": "Bearer"})
    api_mocker.register("GET", modules_path, {
        "data": {"type": "modules", "attributes": {"Accounts": {}, "Contacts": {}}}
    })
    api_mocker.register("GET", vardefs_path("Accounts"), {"data": {"name": {"type": "name"}}})
    api_mocker.register("GET", vardefs_path("Contacts"), {"data": {"email1": {"type": "varchar"}}})
    return api_mocker
