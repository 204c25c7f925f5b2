"""Free-text search combined with filters."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from mscatalog.models import SCALAR_FIELDS, SEQUENCE_FIELDS, FilterCriteria, Manuscript
from mscatalog.query.filters import matches_filters

__all__ = ["SEARCH_FIELDS", "matches_search_term", "search"]

SEARCH_FIELDS: tuple[str, ...] = SCALAR_FIELDS + SEQUENCE_FIELDS


def _field_names(search_fields: Iterable[str] | str) -> tuple[str, ...]:
    # A bare field name is one field, not a sequence of characters
    if isinstance(search_fields, str):
        return (search_fields,) if search_fields else ()
    return tuple(search_fields)


def _field_contains(manuscript: Manuscript, field: str, needle: str) -> bool:
    value = getattr(manuscript, field, None)
    if isinstance(value, tuple):
        return any(needle in item.lower() for item in value)
    if isinstance(value, str) and value:
        return needle in value.lower()
    return False


def matches_search_term(
    manuscript: Manuscript,
    search_term: str,
    search_fields: Iterable[str] = (),
) -> bool:
    """Case-insensitive substring test over the chosen fields.

    Parameters
    ----------
    manuscript : Manuscript
        Record to test.
    search_term : str
        Text to look for. A blank term matches everything.
    search_fields : Iterable[str], optional
        Fields to search. When empty, every scalar and sequence field is
        searched. Unknown names never match.

    Returns
    -------
    bool
        True when ANY searched field contains the term; sequence fields
        match when ANY element contains it.
    """
    if not search_term or not search_term.strip():
        return True

    needle = search_term.lower()
    fields = _field_names(search_fields) or SEARCH_FIELDS
    return any(_field_contains(manuscript, field, needle) for field in fields)


def search(
    manuscripts: Sequence[Manuscript],
    search_term: str = "",
    search_fields: Iterable[str] = (),
    filter_criteria: FilterCriteria | Mapping[str, Any] | None = None,
) -> Sequence[Manuscript]:
    """Select the manuscripts matching a search term and filters.

    Parameters
    ----------
    manuscripts : Sequence[Manuscript]
        Full loaded record set.
    search_term : str, optional
        Free text, matched case-insensitively.
    search_fields : Iterable[str], optional
        Fields the term is matched against; all fields when empty.
    filter_criteria : FilterCriteria | Mapping[str, Any] | None, optional
        Filters that must all hold. Empty filter values are ignored.

    Returns
    -------
    Sequence[Manuscript]
        Matching records in their original relative order. With no term
        and no criteria, ``manuscripts`` itself is returned unchanged.

    Raises
    ------
    ValueError
        If a criteria mapping names a field that cannot be filtered.
    """
    criteria = FilterCriteria.from_mapping(filter_criteria)
    fields = _field_names(search_fields)

    if (not search_term or not search_term.strip()) and criteria.is_empty:
        return manuscripts

    return tuple(
        m
        for m in manuscripts
        if matches_search_term(m, search_term, fields) and matches_filters(m, criteria)
    )
