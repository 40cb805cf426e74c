"""HTTP constants for the fetch layer."""

from src.catalog.models import CachePolicy


# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300
HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_TOO_MANY_REQUESTS = 429
HTTP_STATUS_SERVER_ERROR_MIN = 500
HTTP_STATUS_SERVER_ERROR_MAX = 600
HTTP_STATUS_MAX = 999

# Default request headers
DEFAULT_USER_AGENT = "catalog-requests/1.0"
DEFAULT_ACCEPT = "application/json"

CACHE_CONTROL_HEADER = "Cache-Control"

# Cache-Control request directive sent for each cache policy (None sends no
# header). The request always goes out; the directive only instructs caches
# along the way.
CACHE_CONTROL_BY_POLICY: dict[CachePolicy, str | None] = {
    CachePolicy.USE_PROTOCOL_CACHE_POLICY: None,
    CachePolicy.RELOAD_IGNORING_LOCAL_CACHE_DATA: "no-cache",
    CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD: "max-stale",
    CachePolicy.RETURN_CACHE_DATA_DONT_LOAD: "only-if-cached",
}

# Log component name
COMPONENT_FETCH = "fetch"
