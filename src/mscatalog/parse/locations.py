"""Parser for location shard tables."""

from mscatalog.models import LocationEntry, LocationRecord
from mscatalog.parse.base import (
    ParseResult,
    check_columns,
    decode_json_field,
    iter_rows,
    read_header,
)
from mscatalog.parse.schemas import LOCATION_LIST_VALIDATOR

__all__ = ["parse_location_shard"]

_SHARD_COLUMNS = ("unique_id", "ms_locations")


def parse_location_shard(text: str, source: str) -> ParseResult:
    """Parse one location shard into LocationRecord objects.

    Parameters
    ----------
    text : str
        Decoded shard text with columns ``unique_id, ms_locations``.
    source : str
        Resource key, used in warnings and errors.

    Returns
    -------
    ParseResult
        Location records in shard order and column warnings.

    Raises
    ------
    CatalogParseError
        If the id column is missing or a row holds malformed location JSON.
    """
    warnings = check_columns(read_header(text), _SHARD_COLUMNS, ("unique_id",), source)
    records: list[LocationRecord] = []

    for row in iter_rows(text):
        payload = decode_json_field(
            row.values.get("ms_locations", ""),
            LOCATION_LIST_VALIDATOR,
            source=source,
            row=row.number,
            field="ms_locations",
        )
        records.append(
            LocationRecord(
                unique_id=row.values.get("unique_id", ""),
                ms_locations=tuple(LocationEntry.from_dict(item) for item in payload),
            )
        )

    return ParseResult(tuple(records), warnings)
