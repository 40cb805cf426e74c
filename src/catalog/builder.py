"""Request builder for the Apple Music catalog API."""

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode, urlunsplit

import structlog

from src.catalog.constants import (
    ALBUMS_PATH,
    API_HOST,
    API_SCHEME,
    ARTISTS_PATH,
    AUTHORIZATION_HEADER,
    BEARER_PREFIX,
    COMPONENT_CATALOG,
    DEFAULT_TIMEOUT_SECONDS,
    ID_PLACEHOLDER,
    INCLUDE_PARAM,
    MUSIC_VIDEOS_PATH,
    PLAYLISTS_PATH,
    QUERY_SAFE_CHARS,
    SEARCH_LIMIT_PARAM,
    SEARCH_PATH,
    SEARCH_TERM_PARAM,
    SEARCH_TYPES_PARAM,
    SONGS_PATH,
    STOREFRONT_PLACEHOLDER,
    USER_TOKEN_HEADER,
)
from src.catalog.errors import MissingUserTokenError
from src.catalog.models import CachePolicy, CatalogRequest, MediaType, Storefront
from src.fetch.redact import redact_headers


if TYPE_CHECKING:
    from src.settings.app import AppSettings


logger = structlog.get_logger()

FETCH_PATHS: dict[MediaType, str] = {
    MediaType.ARTISTS: ARTISTS_PATH,
    MediaType.ALBUMS: ALBUMS_PATH,
    MediaType.SONGS: SONGS_PATH,
    MediaType.PLAYLISTS: PLAYLISTS_PATH,
    MediaType.MUSIC_VIDEOS: MUSIC_VIDEOS_PATH,
}


def _join_values(values: Iterable[str] | str | None) -> str | None:
    """Comma-join tag values, treating an empty collection as absent.

    A single string or enum member counts as one value.
    """
    if values is None:
        return None
    if isinstance(values, (str, Enum)):
        values = [values]
    joined = ",".join(
        value.value if isinstance(value, Enum) else str(value)
        for value in values
    )
    return joined or None


def _replace_spaces_with_pluses(term: str) -> str:
    return term.replace(" ", "+")


class RequestBuilder:
    """Builds authenticated catalog requests.

    Holds the storefront, developer token and optional user token. Build
    calls read this configuration and never write to it, so one builder can
    serve any number of callers. Setting a user token returns a new builder.
    """

    def __init__(
        self,
        storefront: Storefront | str,
        developer_token: str,
        user_token: str | None = None,
        *,
        cache_policy: CachePolicy | str = CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the builder.

        Args:
            storefront: Regional storefront code used on every path.
            developer_token: Service-level bearer credential.
            user_token: Optional end-user credential.
            cache_policy: Cache policy stamped on every request.
            timeout_seconds: Request timeout stamped on every request.

        Raises:
            ValueError: If the storefront or cache policy is unknown, or the
                timeout is not positive.
        """
        if timeout_seconds <= 0:
            msg = f"timeout_seconds must be positive, got {timeout_seconds}"
            raise ValueError(msg)

        self._storefront = Storefront(storefront)
        self._developer_token = developer_token
        self._user_token = user_token
        self._cache_policy = CachePolicy(cache_policy)
        self._timeout_seconds = float(timeout_seconds)
        self._log = logger.bind(
            component=COMPONENT_CATALOG,
            storefront=self._storefront.value,
        )

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "RequestBuilder":
        """Create a builder from application settings."""
        return cls(
            storefront=settings.storefront,
            developer_token=settings.developer_token,
            user_token=settings.user_token,
            cache_policy=settings.cache_policy,
            timeout_seconds=settings.request_timeout_seconds,
        )

    @property
    def storefront(self) -> Storefront:
        return self._storefront

    @property
    def developer_token(self) -> str:
        return self._developer_token

    @property
    def user_token(self) -> str | None:
        return self._user_token

    @property
    def cache_policy(self) -> CachePolicy:
        return self._cache_policy

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def __repr__(self) -> str:
        return (
            f"RequestBuilder(storefront={self._storefront.value!r}, "
            f"has_user_token={self._user_token is not None})"
        )

    def with_user_token(self, user_token: str | None) -> "RequestBuilder":
        """Return a new builder with the user token replaced.

        Args:
            user_token: New user token, or None to clear it.

        Returns:
            New builder sharing every other setting with this one.
        """
        return RequestBuilder(
            storefront=self._storefront,
            developer_token=self._developer_token,
            user_token=user_token,
            cache_policy=self._cache_policy,
            timeout_seconds=self._timeout_seconds,
        )

    # Requests

    def build_search_request(
        self,
        term: str,
        limit: int | None = None,
        types: Iterable[MediaType] | MediaType | None = None,
    ) -> CatalogRequest:
        """Build a catalog search request.

        Args:
            term: Search term; spaces are sent as ``+``.
            limit: Optional maximum number of results per type.
            types: Optional media types to restrict the search to.

        Returns:
            Request with the bearer authorization header set.
        """
        params: list[tuple[str, str]] = [
            (SEARCH_TERM_PARAM, _replace_spaces_with_pluses(term))
        ]
        if limit is not None:
            params.append((SEARCH_LIMIT_PARAM, str(limit)))
        types_value = _join_values(types)
        if types_value is not None:
            params.append((SEARCH_TYPES_PARAM, types_value))

        path = self._add_storefront(SEARCH_PATH)
        return self._construct_request(self._build_url(path, params))

    def build_fetch_request(
        self,
        media_type: MediaType | str,
        resource_id: str,
        include: Iterable[str] | str | None = None,
    ) -> CatalogRequest:
        """Build a request for one catalog resource.

        Args:
            media_type: Resource type selecting the path template.
            resource_id: Catalog identifier substituted into the path.
            include: Optional relationship names to expand.

        Returns:
            Request with the bearer authorization header set.
        """
        template = FETCH_PATHS[MediaType(media_type)]
        path = self._add_storefront(template).replace(ID_PLACEHOLDER, resource_id)

        params: list[tuple[str, str]] = []
        include_value = _join_values(include)
        if include_value is not None:
            params.append((INCLUDE_PARAM, include_value))

        return self._construct_request(self._build_url(path, params))

    def attach_user_token(self, request: CatalogRequest) -> CatalogRequest:
        """Return a copy of a request carrying the user token header.

        Args:
            request: Request built by this or another builder.

        Returns:
            New request with ``Music-User-Token`` set.

        Raises:
            MissingUserTokenError: If no user token is configured.
        """
        if self._user_token is None:
            self._log.warning("user_token_missing", url=request.url)
            raise MissingUserTokenError
        return request.with_header(USER_TOKEN_HEADER, self._user_token)

    # Helpers

    def _add_storefront(self, template: str) -> str:
        return template.replace(STOREFRONT_PLACEHOLDER, self._storefront.value)

    def _build_url(self, path: str, params: list[tuple[str, str]]) -> str:
        query = urlencode(params, safe=QUERY_SAFE_CHARS, quote_via=quote)
        return urlunsplit((API_SCHEME, API_HOST, "/" + quote(path), query, ""))

    def _construct_request(self, url: str) -> CatalogRequest:
        headers = {AUTHORIZATION_HEADER: BEARER_PREFIX + self._developer_token}
        request = CatalogRequest(
            url=url,
            headers=headers,
            cache_policy=self._cache_policy,
            timeout_seconds=self._timeout_seconds,
        )
        self._log.debug("request_built", url=url, headers=redact_headers(headers))
        return request
