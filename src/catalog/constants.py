"""Constants for the Apple Music catalog API surface.

Path templates carry literal ``{storefront}`` and ``{id}`` placeholders that
are replaced by exact string substitution, matching the paths the upstream
API expects.
"""

# Base endpoint
API_SCHEME = "https"
API_HOST = "api.music.apple.com"

# Placeholder tokens
STOREFRONT_PLACEHOLDER = "{storefront}"
ID_PLACEHOLDER = "{id}"

# Search
SEARCH_PATH = "v1/catalog/{storefront}/search"
SEARCH_TERM_PARAM = "term"
SEARCH_LIMIT_PARAM = "limit"
SEARCH_TYPES_PARAM = "types"

# Fetch
ARTISTS_PATH = "v1/catalog/{storefront}/artists/{id}"
ALBUMS_PATH = "v1/catalog/{storefront}/albums/{id}"
SONGS_PATH = "v1/catalog/{storefront}/songs/{id}"
PLAYLISTS_PATH = "v1/catalog/{storefront}/playlists/{id}"
MUSIC_VIDEOS_PATH = "v1/catalog/{storefront}/music-videos/{id}"
INCLUDE_PARAM = "include"

# Headers
AUTHORIZATION_HEADER = "Authorization"
USER_TOKEN_HEADER = "Music-User-Token"
BEARER_PREFIX = "Bearer "

# Characters left literal in query values
QUERY_SAFE_CHARS = "+,"

# Request defaults
DEFAULT_TIMEOUT_SECONDS = 5.0

# Log component name
COMPONENT_CATALOG = "catalog"
