"""
HTTP Module - Black Box Interface

Purpose: Perform a single HTTP request against the CRM
Interface: HttpClient.send(), HttpResponse, describe_failure()
Hidden: httpx client lifecycle, transport error handling

Can be replaced with any transport without affecting other modules.
"""

from .client import (
    INVALID_JSON_ERROR,
    TRANSPORT_ERROR,
    HttpClient,
    HttpResponse,
    describe_failure,
)

__all__ = [
    "INVALID_JSON_ERROR",
    "TRANSPORT_ERROR",
    "HttpClient",
    "HttpResponse",
    "describe_failure",
]
