"""Domain-specific error types for the catalog module."""


class CatalogError(Exception):
    """Base class for catalog request errors."""


class MissingUserTokenError(CatalogError):
    """A user token was required but none is configured on the builder."""

    def __init__(self, message: str = "No user token configured") -> None:
        super().__init__(message)
