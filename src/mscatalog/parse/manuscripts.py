"""Parser for the main manuscript metadata table."""

from mscatalog.models import MANUSCRIPT_FIELDS, SEQUENCE_FIELDS, Manuscript
from mscatalog.parse.base import (
    ParseResult,
    check_columns,
    decode_json_field,
    iter_rows,
    read_header,
)
from mscatalog.parse.schemas import STRING_LIST_VALIDATOR

__all__ = ["parse_manuscripts"]


def parse_manuscripts(text: str, source: str = "manuscript_metadata.csv") -> ParseResult:
    """Parse the metadata table into Manuscript records.

    The three list columns (categories, titles, shuhras) hold JSON arrays
    of strings. An empty cell decodes to an empty tuple.

    Parameters
    ----------
    text : str
        Decoded table text.
    source : str, optional
        Resource key, used in warnings and errors.

    Returns
    -------
    ParseResult
        Manuscript records in source order and column warnings.

    Raises
    ------
    CatalogParseError
        If the id column is missing, or any row holds malformed JSON or a
        list of the wrong shape. The whole table fails; no partial result
        is returned.
    """
    warnings = check_columns(read_header(text), MANUSCRIPT_FIELDS, ("unique_id",), source)
    records: list[Manuscript] = []

    for row in iter_rows(text):
        values = row.values
        lists = {
            name: tuple(
                decode_json_field(
                    values.get(name, ""),
                    STRING_LIST_VALIDATOR,
                    source=source,
                    row=row.number,
                    field=name,
                )
            )
            for name in SEQUENCE_FIELDS
        }
        records.append(
            Manuscript(
                unique_id=values.get("unique_id", ""),
                author=values.get("author", ""),
                death_date=values.get("death_date", ""),
                century=values.get("century", ""),
                **lists,
            )
        )

    return ParseResult(tuple(records), warnings)
