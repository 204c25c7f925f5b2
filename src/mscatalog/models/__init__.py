"""Shared data types for mscatalog.

This package contains the record dataclasses and per-query criteria
consumed across the loaders and the query engine.
"""

from mscatalog.models.criteria import FILTER_FIELDS, DateRange, FilterCriteria
from mscatalog.models.records import (
    LOCATION_FIELDS,
    MANUSCRIPT_FIELDS,
    SCALAR_FIELDS,
    SEQUENCE_FIELDS,
    LocationEntry,
    LocationRecord,
    Manuscript,
    ManuscriptDetails,
)

__all__ = [
    # Field groups
    "MANUSCRIPT_FIELDS",
    "SCALAR_FIELDS",
    "SEQUENCE_FIELDS",
    "LOCATION_FIELDS",
    "FILTER_FIELDS",
    # Record models
    "Manuscript",
    "LocationEntry",
    "LocationRecord",
    "ManuscriptDetails",
    # Query criteria
    "DateRange",
    "FilterCriteria",
]
