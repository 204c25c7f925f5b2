"""Tabular source parsing.

Both source tables are CSV with a header row:
- Main metadata table: unique_id, categories, titles, author, shuhras,
  death_date, century (list columns as JSON arrays)
- Location shards: unique_id, ms_locations (JSON array of objects)

Main entry points:
- parse_manuscripts: Parse the metadata table
- parse_location_shard: Parse one location shard
"""

from mscatalog.parse.base import ParseResult, iter_rows
from mscatalog.parse.locations import parse_location_shard
from mscatalog.parse.manuscripts import parse_manuscripts

__all__ = [
    "ParseResult",
    "iter_rows",
    "parse_manuscripts",
    "parse_location_shard",
]
