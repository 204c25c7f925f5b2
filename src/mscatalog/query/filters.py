"""Per-field filter predicates.

Each filterable field has its own matching rule. The rules are not
uniform: categories require an exact tag, while titles and shuhras accept
a substring of any element, and century requires exact equality.
"""

from collections.abc import Callable
from typing import Any, NamedTuple

from mscatalog.models import DateRange, FilterCriteria, Manuscript
from mscatalog.normalize import extract_integer

__all__ = [
    "FilterType",
    "FILTER_TYPES",
    "is_date_in_range",
    "matches_filter",
    "matches_filters",
]


class FilterType(NamedTuple):
    """A filter offered to the browsing UI.

    Attributes
    ----------
    field : str
        Filter field name.
    label : str
        English label.
    use_input : bool
        True for a free-text input, False for a choice list built from the
        field's facet values.
    """

    field: str
    label: str
    use_input: bool


FILTER_TYPES: tuple[FilterType, ...] = (
    FilterType("categories", "Subject", True),
    FilterType("century", "Century", False),
    FilterType("death_date_range", "Death Date Range", True),
    FilterType("author", "Author", True),
    FilterType("shuhras", "Shuhra", True),
    FilterType("titles", "Manuscript Title", True),
)


def _blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def is_date_in_range(date: str | None, min_value: str | None, max_value: str | None) -> bool:
    """Check a free-text death date against an inclusive numeric range.

    Parameters
    ----------
    date : str | None
        Death date text, e.g. "١٠٥٤هـ" or "1054/1644".
    min_value : str | None
        Lower bound text; blank means unbounded.
    max_value : str | None
        Upper bound text; blank means unbounded.

    Returns
    -------
    bool
        For a blank date: True only for an unconstrained range, so any
        bound (including a max-only range) excludes unknown dates.
        Otherwise the date's first integer must lie within the bounds. A
        date without digits never matches; a bound without digits is
        ignored.

    Examples
    --------
        >>> is_date_in_range("1054", "1000", "1100")
        True
        >>> is_date_in_range("", "", "1100")
        False
        >>> is_date_in_range("", "", "")
        True
    """
    if _blank(date):
        return _blank(min_value) and _blank(max_value)

    date_value = extract_integer(date)
    if date_value is None:
        return False

    if not _blank(min_value):
        lower = extract_integer(min_value)
        if lower is not None and date_value < lower:
            return False

    if not _blank(max_value):
        upper = extract_integer(max_value)
        if upper is not None and date_value > upper:
            return False

    return True


def _contains(text: str, value: str) -> bool:
    return bool(text) and value in text


def _any_contains(items: tuple[str, ...], value: str) -> bool:
    return any(value in item for item in items)


def _in_date_range(manuscript: Manuscript, value: DateRange) -> bool:
    return is_date_in_range(manuscript.death_date, value.min, value.max)


_PREDICATES: dict[str, Callable[[Manuscript, Any], bool]] = {
    "death_date_range": _in_date_range,
    "categories": lambda m, v: v in m.categories,
    "century": lambda m, v: m.century == v,
    "titles": lambda m, v: _any_contains(m.titles, v),
    "shuhras": lambda m, v: _any_contains(m.shuhras, v),
    "death_date": lambda m, v: _contains(m.death_date, v),
    "author": lambda m, v: _contains(m.author, v),
    "unique_id": lambda m, v: _contains(m.unique_id, v),
}


def matches_filter(manuscript: Manuscript, field: str, value: Any) -> bool:
    """Apply one filter to one manuscript.

    Raises
    ------
    ValueError
        If ``field`` is not filterable.
    """
    try:
        predicate = _PREDICATES[field]
    except KeyError:
        raise ValueError(f"Unknown filter field: {field}") from None
    return predicate(manuscript, value)


def matches_filters(manuscript: Manuscript, criteria: FilterCriteria) -> bool:
    """True when the manuscript satisfies every non-empty filter."""
    return all(
        matches_filter(manuscript, field, value) for field, value in criteria.entries()
    )
