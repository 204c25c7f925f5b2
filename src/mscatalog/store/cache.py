"""Process-lifetime cache for loaded tables.

One ``CatalogCache`` owns the main manuscript table slot and one slot per
location shard. Slots are filled once and never invalidated. When two
loads of the same slot race, the first stored value wins and later values
are discarded, so every caller observes a single stable value per key.
"""

from collections.abc import Iterable

from mscatalog.models import LocationRecord, Manuscript
from mscatalog.normalize import extract_integer

__all__ = ["ShardIndex", "CatalogCache"]


class ShardIndex:
    """Loaded shard content with id lookup tables.

    Both lookup tables keep the first record in shard order for each key,
    which matches a front-to-back scan of the shard.

    Attributes
    ----------
    records : tuple[LocationRecord, ...]
        Shard records in source order.
    """

    __slots__ = ("records", "_by_id", "_by_number")

    def __init__(self, records: Iterable[LocationRecord] = ()) -> None:
        self.records: tuple[LocationRecord, ...] = tuple(records)
        self._by_id: dict[str, LocationRecord] = {}
        self._by_number: dict[int, LocationRecord] = {}

        for record in self.records:
            self._by_id.setdefault(record.unique_id, record)
            number = extract_integer(record.unique_id)
            if number is not None:
                self._by_number.setdefault(number, record)

    def __len__(self) -> int:
        return len(self.records)

    def find_exact(self, unique_id: str) -> LocationRecord | None:
        """Return the first record whose id equals ``unique_id``."""
        return self._by_id.get(unique_id)

    def find_numeric(self, number: int) -> LocationRecord | None:
        """Return the first record whose id's first digit run equals ``number``."""
        return self._by_number.get(number)


class CatalogCache:
    """Load-once cache for the metadata table and location shards."""

    def __init__(self) -> None:
        self._manuscripts: tuple[Manuscript, ...] | None = None
        self._shards: dict[int, ShardIndex] = {}

    def __repr__(self) -> str:
        table = "unloaded" if self._manuscripts is None else f"{len(self._manuscripts)} records"
        return f"CatalogCache(table={table}, shards={self.loaded_shards})"

    @property
    def manuscripts(self) -> tuple[Manuscript, ...] | None:
        """Cached metadata table, or None before the first successful load."""
        return self._manuscripts

    def store_manuscripts(self, records: tuple[Manuscript, ...]) -> tuple[Manuscript, ...]:
        """Fill the table slot unless already filled; return the stored table."""
        if self._manuscripts is None:
            self._manuscripts = records
        return self._manuscripts

    def get_shard(self, index: int) -> ShardIndex | None:
        """Cached shard, or None when the shard has not been requested yet."""
        return self._shards.get(index)

    def store_shard(self, index: int, shard: ShardIndex) -> ShardIndex:
        """Fill a shard slot unless already filled; return the stored shard."""
        return self._shards.setdefault(index, shard)

    @property
    def loaded_shards(self) -> list[int]:
        """Indexes of cached shards, including cached empty shards."""
        return sorted(self._shards)
