"""Data models for catalog request construction."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Storefront(str, Enum):
    """Regional storefront codes accepted on catalog paths."""

    UNITED_STATES = "us"
    UNITED_KINGDOM = "gb"
    CANADA = "ca"
    AUSTRALIA = "au"
    GERMANY = "de"
    FRANCE = "fr"
    JAPAN = "jp"


class MediaType(str, Enum):
    """Catalog resource types.

    Values are the resource names used by the API, both in fetch paths and
    in the ``types`` search parameter.
    """

    ARTISTS = "artists"
    ALBUMS = "albums"
    SONGS = "songs"
    PLAYLISTS = "playlists"
    MUSIC_VIDEOS = "music-videos"


class CachePolicy(str, Enum):
    """Cache policy handed to the HTTP client with each request.

    - USE_PROTOCOL_CACHE_POLICY: Let the server's caching headers decide
    - RELOAD_IGNORING_LOCAL_CACHE_DATA: Always go to the network
    - RETURN_CACHE_DATA_ELSE_LOAD: Accept stale cached responses (max-stale)
    - RETURN_CACHE_DATA_DONT_LOAD: Ask caches to answer only from stored
      responses (only-if-cached); the request is still sent
    """

    USE_PROTOCOL_CACHE_POLICY = "use_protocol_cache_policy"
    RELOAD_IGNORING_LOCAL_CACHE_DATA = "reload_ignoring_local_cache_data"
    RETURN_CACHE_DATA_ELSE_LOAD = "return_cache_data_else_load"
    RETURN_CACHE_DATA_DONT_LOAD = "return_cache_data_dont_load"


class CatalogRequest(BaseModel):
    """A fully-shaped catalog API request.

    Built fresh by the request builder and never mutated afterwards; adding
    a header produces a new instance.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: str = "GET"
    url: Annotated[str, Field(min_length=1, description="Absolute request URL")]
    headers: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Request headers (read-only)",
    )
    cache_policy: CachePolicy = CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD
    timeout_seconds: Annotated[float, Field(gt=0)] = 5.0

    @field_validator("headers", mode="after")
    @classmethod
    def freeze_headers(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        """Store headers behind a read-only view."""
        return MappingProxyType(dict(v))

    def with_header(self, name: str, value: str) -> "CatalogRequest":
        """Return a copy of this request with one header set.

        Args:
            name: Header name.
            value: Header value.

        Returns:
            New request; this instance is left unchanged.
        """
        headers = dict(self.headers)
        headers[name] = value
        return self.model_copy(update={"headers": MappingProxyType(headers)})

    @property
    def path(self) -> str:
        """URL path component."""
        return urlsplit(self.url).path

    @property
    def query(self) -> str:
        """Raw (still encoded) URL query string."""
        return urlsplit(self.url).query

    @property
    def query_params(self) -> dict[str, str]:
        """Raw query parameters keyed by name, values left encoded."""
        params: dict[str, str] = {}
        for pair in self.query.split("&"):
            if not pair:
                continue
            key, _, value = pair.partition("=")
            params[key] = value
        return params
