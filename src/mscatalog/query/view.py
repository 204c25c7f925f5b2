"""Sorted, paginated views of a result set."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from mscatalog.models import MANUSCRIPT_FIELDS, Manuscript

__all__ = ["SORTABLE_FIELDS", "DEFAULT_PAGE_SIZE", "ResultPage", "sort_records", "project"]

SORTABLE_FIELDS: tuple[str, ...] = MANUSCRIPT_FIELDS
DEFAULT_PAGE_SIZE = 25


@dataclass(frozen=True)
class ResultPage:
    """One page of a sorted result set.

    Attributes
    ----------
    items : tuple[Manuscript, ...]
        Records on this page.
    total : int
        Size of the whole result set.
    page_index : int
        0-based page index.
    page_size : int
        Maximum records per page.
    """

    items: tuple[Manuscript, ...]
    total: int
    page_index: int
    page_size: int

    @property
    def page_count(self) -> int:
        """Number of pages needed for the whole result set."""
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        """True when a later page holds records."""
        return self.page_index + 1 < self.page_count

    @property
    def has_previous(self) -> bool:
        """True when this is not the first page."""
        return self.page_index > 0


def sort_records(
    records: Sequence[Manuscript],
    sort_key: str | None = None,
    descending: bool = False,
) -> tuple[Manuscript, ...]:
    """Stable sort on a field, without touching the input.

    Only string-valued keys are sorted; list-valued fields (and a missing
    key) keep the source order.

    Raises
    ------
    ValueError
        If ``sort_key`` is not a manuscript field.
    """
    if sort_key is None:
        return tuple(records)
    if sort_key not in SORTABLE_FIELDS:
        raise ValueError(f"Unknown sort key: {sort_key}")

    keys = [getattr(record, sort_key) for record in records]
    if not all(isinstance(key, str) for key in keys):
        return tuple(records)

    # sorted() keeps equal keys in source order, also with reverse=True
    order = sorted(range(len(records)), key=keys.__getitem__, reverse=descending)
    return tuple(records[i] for i in order)


def project(
    records: Sequence[Manuscript],
    sort_key: str | None = None,
    descending: bool = False,
    page_index: int = 0,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ResultPage:
    """Sort a result set and cut one page out of it.

    Parameters
    ----------
    records : Sequence[Manuscript]
        Result set, e.g. from ``search``.
    sort_key : str | None, optional
        Field to sort on; None keeps the result order.
    descending : bool, optional
        Sort direction, by default ascending.
    page_index : int, optional
        0-based page index, by default 0.
    page_size : int, optional
        Records per page, by default 25.

    Returns
    -------
    ResultPage
        Records ``[page_index * page_size, page_index * page_size + page_size)``
        of the sorted set, clamped to its length. A page past the end is
        empty.

    Raises
    ------
    ValueError
        If ``page_index`` is negative or ``page_size`` is not positive.
    """
    if page_index < 0:
        raise ValueError(f"page_index must be >= 0, got {page_index}")
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")

    ordered = sort_records(records, sort_key, descending)
    start = page_index * page_size

    return ResultPage(
        items=ordered[start : start + page_size],
        total=len(ordered),
        page_index=page_index,
        page_size=page_size,
    )
