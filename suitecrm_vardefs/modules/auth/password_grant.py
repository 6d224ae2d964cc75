"""
OAuth2 password grant against the SuiteCRM token endpoint.
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from ..http import INVALID_JSON_ERROR, HttpClient, describe_failure

logger = logging.getLogger(__name__)


@dataclass
class TokenResult:
    """Standardized token acquisition result."""
    ok: bool
    access_token: Optional[str] = None
    status_code: Optional[int] = None
    error: Optional[str] = None


def get_access_token(
    http: HttpClient,
    url: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str
) -> TokenResult:
    """
    Exchange credentials for a bearer token.

    Args:
        http: HTTP client
        url: Token endpoint
        client_id: OAuth client ID
        client_secret: OAuth client secret
        username: CRM user name
        password: CRM user password

    Returns:
        TokenResult carrying the token on HTTP 200, the failure reason otherwise
    """
    payload = json.dumps({
        "grant_type": "password",
        "client_id": client_id,
        "client_secret": client_secret,
        "username": username,
        "password": password,
    })

    response = http.send(url, {"Content-Type": "application/json"}, payload, is_post=True)

    if response is None or not response.ok:
        error = describe_failure(response)
        logger.error(f"Failed to fetch access token. {error}")
        return TokenResult(
            ok=False,
            status_code=response.status_code if response else None,
            error=error
        )

    try:
        body = response.json()
    except ValueError:
        logger.error(f"Failed to fetch access token. {INVALID_JSON_ERROR}")
        return TokenResult(ok=False, status_code=response.status_code, error=INVALID_JSON_ERROR)

    token = body.get("access_token") if isinstance(body, dict) else None
    if not token:
        logger.error("Failed to fetch access token. access_token missing from response")
        return TokenResult(
            ok=False,
            status_code=response.status_code,
            error="access_token missing from response"
        )

    logger.debug("Access token obtained")
    return TokenResult(ok=True, access_token=token, status_code=response.status_code)
