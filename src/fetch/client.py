"""HTTP client that executes built catalog requests."""

import time
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx
import structlog

from src.catalog.models import CatalogRequest
from src.fetch.constants import (
    CACHE_CONTROL_BY_POLICY,
    CACHE_CONTROL_HEADER,
    COMPONENT_FETCH,
    DEFAULT_ACCEPT,
    DEFAULT_USER_AGENT,
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
    HTTP_STATUS_SERVER_ERROR_MAX,
    HTTP_STATUS_SERVER_ERROR_MIN,
    HTTP_STATUS_TOO_MANY_REQUESTS,
)
from src.fetch.models import FetchError, FetchErrorClass, FetchResult
from src.fetch.redact import redact_headers


logger = structlog.get_logger()


class CatalogFetcher:
    """Executes catalog requests over HTTP.

    Sends exactly one GET per request using the request's headers, timeout
    and cache policy. Transport and HTTP failures are returned as a
    classified FetchError on the result rather than raised.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize the fetcher.

        Args:
            http_client: Optional shared httpx client. When omitted a
                short-lived client is opened for each request.
            user_agent: User-Agent header value.
        """
        self._http_client = http_client
        self._user_agent = user_agent
        self._log = logger.bind(component=COMPONENT_FETCH)

    def fetch(self, request: CatalogRequest) -> FetchResult:
        """Execute a catalog request.

        Args:
            request: Request produced by the request builder.

        Returns:
            FetchResult with status, raw body and error information.
        """
        start_time_ns = time.perf_counter_ns()
        headers = self._build_headers(request)
        log = self._log.bind(
            url=request.url,
            headers=redact_headers(headers),
            cache_policy=request.cache_policy.value,
        )

        if self._http_client is not None:
            result = self._execute(self._http_client, request, headers)
        else:
            with httpx.Client(
                timeout=request.timeout_seconds, follow_redirects=True
            ) as client:
                result = self._execute(client, request, headers)

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        log.info(
            "fetch_complete",
            status_code=result.status_code,
            bytes=result.body_size,
            duration_ms=round(duration_ms, 2),
            error_class=result.error.error_class.value if result.error else None,
        )
        return result

    def _build_headers(self, request: CatalogRequest) -> dict[str, str]:
        """Build request headers.

        Args:
            request: Catalog request.

        Returns:
            Complete headers dictionary.
        """
        headers: dict[str, str] = {
            "User-Agent": self._user_agent,
            "Accept": DEFAULT_ACCEPT,
        }

        cache_control = CACHE_CONTROL_BY_POLICY[request.cache_policy]
        if cache_control is not None:
            headers[CACHE_CONTROL_HEADER] = cache_control

        headers.update(request.headers)
        return headers

    def _execute(
        self,
        client: httpx.Client,
        request: CatalogRequest,
        headers: dict[str, str],
    ) -> FetchResult:
        """Execute a single HTTP request.

        Args:
            client: httpx client to send with.
            request: Catalog request.
            headers: Complete request headers.

        Returns:
            FetchResult from the request.
        """
        try:
            response = client.request(
                request.method,
                request.url,
                headers=headers,
                timeout=request.timeout_seconds,
            )
        except httpx.TimeoutException as e:
            return self._failure(
                request,
                FetchErrorClass.NETWORK_TIMEOUT,
                f"Request timed out: {e}",
            )
        except httpx.ConnectError as e:
            return self._failure(
                request,
                FetchErrorClass.CONNECTION_ERROR,
                f"Connection failed: {e}",
            )
        except httpx.HTTPError as e:
            return self._failure(
                request,
                FetchErrorClass.UNKNOWN,
                f"Unexpected error: {e}",
            )

        return FetchResult(
            status_code=response.status_code,
            final_url=str(response.url),
            headers=dict(response.headers),
            body_bytes=response.content,
            error=self._classify_http_error(response.status_code, response.headers),
        )

    def _failure(
        self,
        request: CatalogRequest,
        error_class: FetchErrorClass,
        message: str,
    ) -> FetchResult:
        return FetchResult(
            status_code=0,
            final_url=request.url,
            error=FetchError(error_class=error_class, message=message),
        )

    def _classify_http_error(
        self,
        status_code: int,
        headers: httpx.Headers,
    ) -> FetchError | None:
        """Classify HTTP status code as error.

        Args:
            status_code: HTTP status code.
            headers: Response headers.

        Returns:
            FetchError if status indicates error, None otherwise.
        """
        if HTTP_STATUS_OK_MIN <= status_code < HTTP_STATUS_OK_MAX:
            return None

        if status_code == HTTP_STATUS_TOO_MANY_REQUESTS:
            return FetchError(
                error_class=FetchErrorClass.RATE_LIMITED,
                message="Rate limited (429 Too Many Requests)",
                status_code=status_code,
                retry_after=self._parse_retry_after(headers.get("retry-after")),
            )

        if HTTP_STATUS_BAD_REQUEST <= status_code < HTTP_STATUS_SERVER_ERROR_MIN:
            return FetchError(
                error_class=FetchErrorClass.HTTP_4XX,
                message=f"Client error ({status_code})",
                status_code=status_code,
            )

        if HTTP_STATUS_SERVER_ERROR_MIN <= status_code < HTTP_STATUS_SERVER_ERROR_MAX:
            return FetchError(
                error_class=FetchErrorClass.HTTP_5XX,
                message=f"Server error ({status_code})",
                status_code=status_code,
            )

        if status_code >= HTTP_STATUS_SERVER_ERROR_MAX:
            return FetchError(
                error_class=FetchErrorClass.UNKNOWN,
                message=f"Non-standard status ({status_code})",
                status_code=status_code,
            )

        return None

    def _parse_retry_after(self, value: str | None) -> int | None:
        """Parse Retry-After header value.

        Args:
            value: Header value (seconds or HTTP date).

        Returns:
            Seconds to wait, or None if not parseable.
        """
        if not value:
            return None

        try:
            return int(value)
        except ValueError:
            pass

        try:
            dt = parsedate_to_datetime(value)
            delta = dt - datetime.now(UTC)
            return max(0, int(delta.total_seconds()))
        except (ValueError, TypeError):
            pass

        return None
