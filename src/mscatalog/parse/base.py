"""Base types and utilities for table parsers."""

import csv
import io
import json
from collections.abc import Iterator
from typing import Any, NamedTuple

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from mscatalog.errors import CatalogParseError


class TableRow(NamedTuple):
    """One non-blank data row of a table.

    Attributes
    ----------
    number : int
        1-based data row number (header excluded, blank rows counted).
    values : dict[str, str]
        Trimmed cell values keyed by trimmed header name. Columns missing
        from a short row map to an empty string.
    """

    number: int
    values: dict[str, str]


class ParseResult(NamedTuple):
    """Result of parsing a table.

    Supports tuple unpacking: ``records, warnings = parse_manuscripts(...)``.

    Attributes
    ----------
    records : tuple
        Parsed records in source order.
    warnings : list[str]
        Non-fatal warning messages.
    """

    records: tuple
    warnings: list[str]


def read_header(text: str) -> list[str]:
    """Return the trimmed header names of a table, or [] for empty text."""
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    return [name.strip() for name in header] if header else []


def iter_rows(text: str) -> Iterator[TableRow]:
    """Iterate over the data rows of a CSV table.

    Header names and cell values are trimmed of surrounding whitespace.
    Rows whose cells are all blank are skipped.

    Parameters
    ----------
    text : str
        Decoded table text; the first row is the header.

    Yields
    ------
    TableRow
        Non-blank rows in source order.
    """
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if not header:
        return

    names = [name.strip() for name in header]

    for number, cells in enumerate(reader, start=1):
        trimmed = [cell.strip() for cell in cells]
        if not any(trimmed):
            continue

        values = {name: "" for name in names}
        values.update(zip(names, trimmed, strict=False))
        yield TableRow(number=number, values=values)


def decode_json_field(
    raw: str,
    validator: Draft202012Validator,
    *,
    source: str,
    row: int,
    field: str,
) -> Any:
    """Decode and validate a JSON-encoded cell.

    An empty cell decodes to an empty list.

    Parameters
    ----------
    raw : str
        Trimmed cell text.
    validator : Draft202012Validator
        Schema validator for the decoded payload.
    source : str
        Resource key, for error reporting.
    row : int
        Data row number, for error reporting.
    field : str
        Column name, for error reporting.

    Returns
    -------
    Any
        Decoded payload conforming to the validator's schema.

    Raises
    ------
    CatalogParseError
        If the text is not valid JSON or the payload has the wrong shape.
    """
    if not raw:
        return []

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogParseError(
            f"{source} row {row}: malformed JSON in '{field}': {e.msg}",
            source=source,
            row=row,
            field=field,
        ) from e

    try:
        validator.validate(payload)
    except ValidationError as e:
        raise CatalogParseError(
            f"{source} row {row}: unexpected shape in '{field}': {e.message}",
            source=source,
            row=row,
            field=field,
        ) from e

    return payload


def check_columns(
    header: list[str],
    expected: tuple[str, ...],
    required: tuple[str, ...],
    source: str,
) -> list[str]:
    """Compare a table header with the expected columns.

    Parameters
    ----------
    header : list[str]
        Trimmed header names.
    expected : tuple[str, ...]
        All columns the parser reads.
    required : tuple[str, ...]
        Columns without which the table is unusable.
    source : str
        Resource key, for messages.

    Returns
    -------
    list[str]
        Warnings for optional columns that are missing.

    Raises
    ------
    CatalogParseError
        If a required column is missing from a non-empty table.
    """
    if not header:
        return []

    missing_required = [name for name in required if name not in header]
    if missing_required:
        raise CatalogParseError(
            f"{source}: missing required column(s): {', '.join(missing_required)}",
            source=source,
            field=missing_required[0],
        )

    return [
        f"{source}: missing column '{name}', values default to empty"
        for name in expected
        if name not in header and name not in required
    ]
