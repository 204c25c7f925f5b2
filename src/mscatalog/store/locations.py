"""Location lookup by manuscript id.

Ids are written inconsistently across the metadata table and the shards
(for example "MS-1054" in one and "1054" in the other). Lookup tries an
exact id match first and falls back to comparing the first digit run of
both ids.
"""

from mscatalog.models import LocationEntry, LocationRecord
from mscatalog.normalize import extract_integer
from mscatalog.store.cache import ShardIndex
from mscatalog.store.shards import ShardRouter, route_to_shard

__all__ = ["find_location_record", "LocationResolver"]


def find_location_record(shard: ShardIndex, unique_id: str) -> LocationRecord | None:
    """Find the record for ``unique_id`` within one shard.

    Parameters
    ----------
    shard : ShardIndex
        Loaded shard.
    unique_id : str
        Queried id; surrounding whitespace is ignored.

    Returns
    -------
    LocationRecord | None
        First exact id match, else the first record with the same numeric
        core, else None. Ids without digits only match exactly.
    """
    wanted = unique_id.strip()

    record = shard.find_exact(wanted)
    if record is not None:
        return record

    number = extract_integer(wanted)
    if number is None:
        return None
    return shard.find_numeric(number)


class LocationResolver:
    """Resolve manuscript ids to their known locations.

    Parameters
    ----------
    router : ShardRouter
        Router owning shard loading and caching.
    """

    def __init__(self, router: ShardRouter) -> None:
        self.router = router

    async def resolve_locations(self, unique_id: str) -> tuple[LocationEntry, ...]:
        """Return the locations recorded for ``unique_id``.

        Parameters
        ----------
        unique_id : str
            Manuscript id in any digit script, with or without prefix.

        Returns
        -------
        tuple[LocationEntry, ...]
            Known copies in shard order. Empty when the id is unknown or its
            shard is missing.
        """
        shard = await self.router.load_index(route_to_shard(unique_id), rid=unique_id.strip())
        record = find_location_record(shard, unique_id)
        if record is None:
            return ()
        return record.ms_locations
