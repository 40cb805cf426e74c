"""HTTP fetch layer for executing catalog requests.

This module provides:
- A single-shot httpx executor for built catalog requests
- Cache policy translation into Cache-Control headers
- Typed classification of transport and HTTP failures
- Header redaction for logging
"""

from src.fetch.client import CatalogFetcher
from src.fetch.constants import (
    CACHE_CONTROL_BY_POLICY,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
    HTTP_STATUS_TOO_MANY_REQUESTS,
)
from src.fetch.models import FetchError, FetchErrorClass, FetchResult
from src.fetch.redact import redact_headers


__all__ = [
    # Client
    "CatalogFetcher",
    # Models
    "FetchResult",
    "FetchError",
    "FetchErrorClass",
    # Constants
    "CACHE_CONTROL_BY_POLICY",
    "HTTP_STATUS_OK_MIN",
    "HTTP_STATUS_OK_MAX",
    "HTTP_STATUS_TOO_MANY_REQUESTS",
    # Redaction
    "redact_headers",
]
