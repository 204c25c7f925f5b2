"""Exception hierarchy for mscatalog.

Absence (unknown id, missing shard, empty result) is never an error.
Only transport failures and corrupt source data raise.
"""

__all__ = [
    "CatalogError",
    "ResourceNotFound",
    "FetchError",
    "CatalogParseError",
]


class CatalogError(Exception):
    """Base class for all catalog errors."""


class ResourceNotFound(CatalogError):
    """Raised by a fetcher when a resource key has no backing content."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Resource not found: {key}")
        self.key = key


class FetchError(CatalogError):
    """Raised by a fetcher when a resource exists but cannot be read."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class CatalogParseError(CatalogError):
    """Raised when a source table contains corrupt data."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        row: int | None = None,
        field: str | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        source : str | None, optional
            Resource key of the table being parsed.
        row : int | None, optional
            1-based data row number (header excluded).
        field : str | None, optional
            Column holding the corrupt value.
        """
        super().__init__(message)
        self.source = source
        self.row = row
        self.field = field
