"""In-memory fetcher for bundled assets and tests."""

from collections.abc import Mapping

from mscatalog.errors import ResourceNotFound

__all__ = ["MappingFetcher"]


class MappingFetcher:
    """Serve resources from a key -> text mapping.

    Attributes
    ----------
    resources : dict[str, str]
        Copy of the mapping given at construction.
    requests : list[str]
        Keys requested so far, in order (including misses).
    """

    def __init__(self, resources: Mapping[str, str] | None = None) -> None:
        self.resources: dict[str, str] = dict(resources or {})
        self.requests: list[str] = []

    async def fetch_text(self, key: str) -> str:
        """Return the text stored under ``key``.

        Raises
        ------
        ResourceNotFound
            If the key is not in the mapping.
        """
        self.requests.append(key)
        try:
            return self.resources[key]
        except KeyError:
            raise ResourceNotFound(key) from None
