"""Routing of manuscript ids to location shards.

Location records are partitioned into shards of ``CHUNK_SIZE`` consecutive
numeric ids: ids 0..999 live in shard 1, 1000..1999 in shard 2, and so on.
The constant must match the partitioning that produced the shard files.
"""

from collections.abc import Callable

from mscatalog.audit import AuditLogger
from mscatalog.errors import CatalogParseError, FetchError, ResourceNotFound
from mscatalog.fetch import TextFetcher
from mscatalog.models import LocationRecord
from mscatalog.normalize import extract_integer
from mscatalog.parse import parse_location_shard
from mscatalog.store.cache import CatalogCache, ShardIndex

__all__ = ["CHUNK_SIZE", "route_to_shard", "ShardRouter"]

CHUNK_SIZE = 1000


def route_to_shard(unique_id: str) -> int:
    """Compute the 1-based shard index expected to hold ``unique_id``.

    Parameters
    ----------
    unique_id : str
        Manuscript id in any digit script, with or without prefix.

    Returns
    -------
    int
        ``number // CHUNK_SIZE + 1`` where ``number`` is the first digit run
        of the id; ids without digits route to shard 1.

    Examples
    --------
        >>> route_to_shard("MS-1054")
        2
        >>> route_to_shard("٩٩٩")
        1
    """
    number = extract_integer(unique_id)
    return (number or 0) // CHUNK_SIZE + 1


class ShardRouter:
    """Resolve shard indexes to cached, parsed shard content.

    Parameters
    ----------
    fetcher : TextFetcher
        Source of shard text.
    cache : CatalogCache
        Cache owning the shard slots.
    shard_key : Callable[[int], str]
        Maps a shard index to the fetcher's resource key.
    audit_logger : AuditLogger | None, optional
        Event log for shard loads and misses.
    """

    def __init__(
        self,
        fetcher: TextFetcher,
        cache: CatalogCache,
        shard_key: Callable[[int], str],
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.cache = cache
        self.shard_key = shard_key
        self.audit_logger = audit_logger

    async def load_index(self, index: int, rid: str | None = None) -> ShardIndex:
        """Return the cached shard index, fetching and parsing it on first use.

        A shard that does not exist or cannot be read is cached as empty for
        good and is never fetched again.

        Parameters
        ----------
        index : int
            1-based shard index.
        rid : str | None, optional
            Manuscript id whose lookup triggered the load, for the event log.

        Returns
        -------
        ShardIndex
            Loaded (possibly empty) shard.

        Raises
        ------
        CatalogParseError
            If the shard exists but holds malformed location data. Nothing
            is cached in that case.
        """
        cached = self.cache.get_shard(index)
        if cached is not None:
            return cached

        key = self.shard_key(index)
        try:
            text = await self.fetcher.fetch_text(key)
        except (ResourceNotFound, FetchError) as e:
            if self.audit_logger is not None:
                self.audit_logger.shard_missing(index, key, str(e), rid=rid)
            return self.cache.store_shard(index, ShardIndex())

        try:
            records, _warnings = parse_location_shard(text, source=key)
        except CatalogParseError as e:
            if self.audit_logger is not None:
                self.audit_logger.error(type(e).__name__, str(e), stage="load_shard", rid=rid)
            raise

        shard = self.cache.store_shard(index, ShardIndex(records))

        if self.audit_logger is not None:
            self.audit_logger.shard_loaded(index, key, len(shard), rid=rid)

        return shard

    async def ensure_shard_loaded(self, index: int) -> tuple[LocationRecord, ...]:
        """Return the location records of shard ``index``, loading it if needed.

        Returns
        -------
        tuple[LocationRecord, ...]
            Shard records in source order; empty for a missing shard.
        """
        shard = await self.load_index(index)
        return shard.records
