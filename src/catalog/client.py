"""Catalog API client combining the request builder and the fetcher."""

from collections.abc import Iterable
from types import TracebackType

import httpx

from src.catalog.builder import RequestBuilder
from src.catalog.constants import COMPONENT_CATALOG
from src.catalog.models import CatalogRequest, MediaType
from src.fetch.client import CatalogFetcher
from src.fetch.models import FetchResult
from src.observability.logging import get_logger
from src.settings.app import AppSettings


class CatalogClient:
    """Searches and fetches catalog resources.

    Requests are shaped by a RequestBuilder and executed by a
    CatalogFetcher. Response bodies are returned raw on the FetchResult.

    Attributes:
        builder: Request builder used for every call.
    """

    def __init__(
        self,
        builder: RequestBuilder,
        fetcher: CatalogFetcher | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            builder: Configured request builder.
            fetcher: Optional fetcher; a fetcher with a shared httpx client
                is created when omitted and closed by close().
        """
        self.builder = builder
        self._owned_http: httpx.Client | None = None
        if fetcher is None:
            self._owned_http = httpx.Client(follow_redirects=True)
            fetcher = CatalogFetcher(http_client=self._owned_http)
        self._fetcher = fetcher
        self._log = get_logger(component=COMPONENT_CATALOG, subcomponent="client")

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        fetcher: CatalogFetcher | None = None,
    ) -> "CatalogClient":
        """Create a client from application settings."""
        return cls(RequestBuilder.from_settings(settings), fetcher=fetcher)

    def close(self) -> None:
        if self._owned_http is not None:
            self._owned_http.close()
            self._owned_http = None

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def search(
        self,
        term: str,
        limit: int | None = None,
        types: Iterable[MediaType] | MediaType | None = None,
        *,
        with_user_token: bool = False,
    ) -> FetchResult:
        """Search the catalog.

        Raises:
            MissingUserTokenError: If with_user_token is set and the builder
                has no user token.
        """
        request = self.builder.build_search_request(term, limit=limit, types=types)
        return self._send(request, with_user_token=with_user_token)

    def fetch(
        self,
        media_type: MediaType | str,
        resource_id: str,
        include: Iterable[str] | str | None = None,
        *,
        with_user_token: bool = False,
    ) -> FetchResult:
        """Fetch one catalog resource by type and identifier.

        Raises:
            MissingUserTokenError: If with_user_token is set and the builder
                has no user token.
        """
        request = self.builder.build_fetch_request(
            media_type, resource_id, include=include
        )
        return self._send(request, with_user_token=with_user_token)

    def _send(self, request: CatalogRequest, *, with_user_token: bool) -> FetchResult:
        if with_user_token:
            request = self.builder.attach_user_token(request)
        result = self._fetcher.fetch(request)
        if not result.is_success:
            self._log.warning(
                "catalog_request_failed",
                path=request.path,
                status_code=result.status_code,
                error_class=result.error.error_class.value if result.error else None,
            )
        return result
