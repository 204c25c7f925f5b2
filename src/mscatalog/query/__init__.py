"""In-memory query engine.

- search: free-text search and filter conjunction
- filters: per-field filter predicates and date range matching
- facets: distinct values for choice lists
- view: sorting and pagination
"""

from mscatalog.query.facets import unique_values
from mscatalog.query.filters import (
    FILTER_TYPES,
    FilterType,
    is_date_in_range,
    matches_filter,
    matches_filters,
)
from mscatalog.query.search import SEARCH_FIELDS, matches_search_term, search
from mscatalog.query.view import (
    DEFAULT_PAGE_SIZE,
    SORTABLE_FIELDS,
    ResultPage,
    project,
    sort_records,
)

__all__ = [
    "search",
    "matches_search_term",
    "SEARCH_FIELDS",
    "FILTER_TYPES",
    "FilterType",
    "is_date_in_range",
    "matches_filter",
    "matches_filters",
    "unique_values",
    "DEFAULT_PAGE_SIZE",
    "SORTABLE_FIELDS",
    "ResultPage",
    "project",
    "sort_records",
]
