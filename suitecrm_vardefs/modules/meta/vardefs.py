"""Per-module vardef retrieval via V8/module/vardefs."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..http import INVALID_JSON_ERROR, HttpClient, describe_failure
from .modules import bearer_headers

logger = logging.getLogger(__name__)

# Fixed trailing path segment of the vardefs endpoint. Meaning unconfirmed
# against the API documentation; keep verbatim.
VARDEFS_PATH_SUFFIX = "110"


@dataclass
class VardefResult:
    """Vardefs of one module, or the reason they could not be fetched."""
    module_name: str
    vardefs: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form: either a vardefs or an error key, never both."""
        if self.error is not None:
            return {"module_name": self.module_name, "error": self.error}
        return {"module_name": self.module_name, "vardefs": self.vardefs}


def fetch_vardefs_by_module(
    http: HttpClient,
    base_url: str,
    bearer_token: str,
    module_name: str
) -> VardefResult:
    """
    Fetch the vardefs of a single module.

    Args:
        http: HTTP client
        base_url: Vardefs endpoint without the module segment
        bearer_token: Access token
        module_name: Module to fetch

    Returns:
        VardefResult with the response's data field, or an error message
    """
    url = f"{base_url}/{module_name}/{VARDEFS_PATH_SUFFIX}"
    response = http.send(url, bearer_headers(bearer_token))

    if response is None or not response.ok:
        error = describe_failure(response)
        logger.error(f"Failed to fetch vardefs for module {module_name}. {error}")
        return VardefResult(module_name=module_name, error=error)

    try:
        body = response.json()
    except ValueError:
        logger.error(f"Failed to fetch vardefs for module {module_name}. {INVALID_JSON_ERROR}")
        return VardefResult(module_name=module_name, error=INVALID_JSON_ERROR)

    vardefs = body.get("data") if isinstance(body, dict) else None
    return VardefResult(module_name=module_name, vardefs=vardefs)


def fetch_vardefs(
    http: HttpClient,
    base_url: str,
    bearer_token: str,
    module_names: Iterable[str]
) -> List[VardefResult]:
    """
    Fetch vardefs for every module, one request at a time.

    A failing module is recorded and the loop moves on.
    """
    results = []
    for module_name in module_names:
        results.append(fetch_vardefs_by_module(http, base_url, bearer_token, module_name))

    failed = sum(1 for r in results if not r.ok)
    if failed:
        logger.warning(f"Vardefs unavailable for {failed} of {len(results)} modules")
    return results
