"""Module listing via V8/meta/modules."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..http import INVALID_JSON_ERROR, HttpClient, describe_failure

logger = logging.getLogger(__name__)


def bearer_headers(bearer_token: str) -> dict:
    """Headers sent with every authenticated metadata call."""
    return {
        "Authorization": f"Bearer {bearer_token}",
        "Content-Type": "application/json",
    }


@dataclass
class ModuleListResult:
    """
    Result of listing modules.

    ok=True with an empty list means the CRM exposes no modules;
    ok=False means the call itself failed.
    """
    ok: bool
    modules: List[str] = field(default_factory=list)
    status_code: Optional[int] = None
    error: Optional[str] = None


def fetch_module_names(http: HttpClient, url: str, bearer_token: str) -> ModuleListResult:
    """
    List module names in the order the server returns them.

    Args:
        http: HTTP client
        url: Modules metadata endpoint
        bearer_token: Access token

    Returns:
        ModuleListResult with the keys of data.attributes
    """
    response = http.send(url, bearer_headers(bearer_token))

    if response is None or not response.ok:
        error = describe_failure(response)
        logger.error(f"Failed to fetch module names. {error}")
        return ModuleListResult(
            ok=False,
            status_code=response.status_code if response else None,
            error=error
        )

    try:
        body = response.json()
    except ValueError:
        logger.error(f"Failed to fetch module names. {INVALID_JSON_ERROR}")
        return ModuleListResult(ok=False, status_code=response.status_code, error=INVALID_JSON_ERROR)

    data = body.get("data") if isinstance(body, dict) else None
    attributes = data.get("attributes") if isinstance(data, dict) else None
    if not isinstance(attributes, dict):
        logger.warning("Module metadata response has no data.attributes")
        attributes = {}

    modules = list(attributes.keys())
    logger.info(f"Found {len(modules)} modules")
    return ModuleListResult(ok=True, modules=modules, status_code=response.status_code)
