"""Per-query filter criteria.

A ``FilterCriteria`` holds at most one value per filterable field. Scalar
filters carry a match string; the death-date range filter carries a
``DateRange`` whose bounds are free text (they are parsed with the digit
normalizer at evaluation time).
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields
from typing import Any

__all__ = ["DateRange", "FilterCriteria", "FILTER_FIELDS"]

FILTER_FIELDS: tuple[str, ...] = (
    "categories",
    "century",
    "titles",
    "shuhras",
    "author",
    "unique_id",
    "death_date",
    "death_date_range",
)


def _blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


@dataclass(frozen=True)
class DateRange:
    """Inclusive range over death dates.

    Attributes
    ----------
    min : str | None
        Lower bound text, or None/blank for no lower bound.
    max : str | None
        Upper bound text, or None/blank for no upper bound.
    """

    min: str | None = None
    max: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when neither bound carries information."""
        return _blank(self.min) and _blank(self.max)

    @classmethod
    def from_value(cls, value: Any) -> "DateRange":
        """Coerce a mapping like ``{"min": "1000", "max": ""}`` to a range."""
        if isinstance(value, DateRange):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - {"min", "max"}
            if unknown:
                raise ValueError(f"Unknown date range keys: {sorted(unknown)}")
            return cls(min=value.get("min"), max=value.get("max"))
        raise ValueError(f"death_date_range must be a mapping with min/max, got {value!r}")


@dataclass(frozen=True)
class FilterCriteria:
    """Conjunction of per-field filters.

    Attributes
    ----------
    categories : str | None
        Exact category tag.
    century : str | None
        Exact century value.
    titles : str | None
        Substring of any title.
    shuhras : str | None
        Substring of any shuhra.
    author : str | None
        Substring of the author.
    unique_id : str | None
        Substring of the id.
    death_date : str | None
        Substring of the death date text.
    death_date_range : DateRange | None
        Numeric range over the death date.
    """

    categories: str | None = None
    century: str | None = None
    titles: str | None = None
    shuhras: str | None = None
    author: str | None = None
    unique_id: str | None = None
    death_date: str | None = None
    death_date_range: DateRange | None = None

    @classmethod
    def from_mapping(cls, criteria: Mapping[str, Any] | None) -> "FilterCriteria":
        """Build criteria from a plain field -> value mapping.

        Parameters
        ----------
        criteria : Mapping[str, Any] | None
            Field names from ``FILTER_FIELDS`` mapped to values. The
            ``death_date_range`` value may be a ``DateRange`` or a mapping
            with ``min``/``max`` keys.

        Returns
        -------
        FilterCriteria
            Typed criteria.

        Raises
        ------
        ValueError
            If a field name is not filterable.
        """
        if criteria is None:
            return cls()
        if isinstance(criteria, FilterCriteria):
            return criteria

        unknown = [name for name in criteria if name not in FILTER_FIELDS]
        if unknown:
            raise ValueError(f"Unknown filter field(s): {', '.join(sorted(unknown))}")

        values = dict(criteria)
        if values.get("death_date_range") is not None:
            values["death_date_range"] = DateRange.from_value(values["death_date_range"])
        return cls(**values)

    def entries(self) -> Iterator[tuple[str, Any]]:
        """Yield (field, value) for every filter that carries information.

        Empty strings and ranges with both bounds blank are skipped.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, DateRange):
                if value.is_empty:
                    continue
            elif value == "":
                continue
            yield f.name, value

    @property
    def is_empty(self) -> bool:
        """True when no filter carries information."""
        return next(self.entries(), None) is None
