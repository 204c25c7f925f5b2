"""Distinct field values for filter choice lists."""

from collections.abc import Iterable

from mscatalog.models import MANUSCRIPT_FIELDS, Manuscript

__all__ = ["unique_values"]


def unique_values(manuscripts: Iterable[Manuscript], field: str) -> tuple[str, ...]:
    """Collect the sorted distinct values of a field.

    Parameters
    ----------
    manuscripts : Iterable[Manuscript]
        Records to scan.
    field : str
        Field name. Sequence fields contribute every element, scalar
        fields their single value.

    Returns
    -------
    tuple[str, ...]
        Non-empty trimmed values, lexicographically sorted, no duplicates.

    Raises
    ------
    ValueError
        If ``field`` is not a manuscript field.
    """
    if field not in MANUSCRIPT_FIELDS:
        raise ValueError(f"Unknown field: {field}")

    values: set[str] = set()
    for manuscript in manuscripts:
        value = getattr(manuscript, field)
        items = value if isinstance(value, tuple) else (value,)
        values.update(item.strip() for item in items if item and item.strip())

    return tuple(sorted(values))
