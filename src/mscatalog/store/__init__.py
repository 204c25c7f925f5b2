"""Cached storage of loaded tables.

- CatalogCache: load-once slots for the metadata table and shards
- RecordLoader: memoized metadata table loader
- ShardRouter: id -> shard routing and lazy shard loading
- LocationResolver: id -> locations lookup with numeric fallback
"""

from mscatalog.store.cache import CatalogCache, ShardIndex
from mscatalog.store.locations import LocationResolver, find_location_record
from mscatalog.store.shards import CHUNK_SIZE, ShardRouter, route_to_shard
from mscatalog.store.tables import RecordLoader

__all__ = [
    "CHUNK_SIZE",
    "CatalogCache",
    "ShardIndex",
    "RecordLoader",
    "ShardRouter",
    "LocationResolver",
    "route_to_shard",
    "find_location_record",
]
