"""
Export pipeline: authenticate, list modules, fetch vardefs, render.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config.provider import CRMConfig
from .modules.auth import TokenResult, get_access_token
from .modules.http import HttpClient
from .modules.meta import ModuleListResult, VardefResult, fetch_module_names, fetch_vardefs

logger = logging.getLogger(__name__)

TOKEN_FAILURE_MESSAGE = "Failed to fetch access token."
OUTPUT_PREFIX = "<pre>"
OUTPUT_SUFFIX = "</pre>"


@dataclass
class PipelineResult:
    """Outcome of one export run."""
    ok: bool
    output: Optional[str] = None
    error: Optional[str] = None
    token: Optional[TokenResult] = None
    modules: Optional[ModuleListResult] = None
    vardefs: List[VardefResult] = field(default_factory=list)


def render_vardefs(results: List[VardefResult]) -> str:
    """Pretty-print the results as a JSON array inside the fixed frame."""
    document = json.dumps([r.to_dict() for r in results], indent=4)
    return f"{OUTPUT_PREFIX}{document}{OUTPUT_SUFFIX}"


def run_pipeline(config: CRMConfig, http: HttpClient) -> PipelineResult:
    """
    Run the full export once.

    Args:
        config: CRM connection settings
        http: HTTP client used for every request

    Returns:
        PipelineResult; ok=False only when no access token was obtained
    """
    token = get_access_token(
        http,
        config.access_token_endpoint,
        config.client_id,
        config.client_secret,
        config.username,
        config.password,
    )
    if not token.ok:
        return PipelineResult(ok=False, error=TOKEN_FAILURE_MESSAGE, token=token)

    modules = fetch_module_names(http, config.modules_endpoint, token.access_token)
    if not modules.ok:
        # Listing failure still yields a (empty) document
        logger.warning(f"Continuing without modules: {modules.error}")

    vardefs = fetch_vardefs(http, config.vardefs_endpoint, token.access_token, modules.modules)

    return PipelineResult(
        ok=True,
        output=render_vardefs(vardefs),
        token=token,
        modules=modules,
        vardefs=vardefs,
    )
