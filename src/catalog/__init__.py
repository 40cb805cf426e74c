"""Request construction for the Apple Music catalog API.

Builds authenticated search and fetch requests against a fixed storefront.
The HTTP facade lives in ``src.catalog.client``.
"""

from src.catalog.builder import FETCH_PATHS, RequestBuilder
from src.catalog.errors import CatalogError, MissingUserTokenError
from src.catalog.models import CachePolicy, CatalogRequest, MediaType, Storefront


__all__ = [
    # Builder
    "RequestBuilder",
    "FETCH_PATHS",
    # Models
    "CatalogRequest",
    "CachePolicy",
    "MediaType",
    "Storefront",
    # Errors
    "CatalogError",
    "MissingUserTokenError",
]
