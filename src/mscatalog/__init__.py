"""Browsable in-memory catalog of manuscript records.

This package provides:
- Data models (mscatalog.models): manuscripts, locations, filter criteria
- Normalization (mscatalog.normalize): digit-script normalization
- Parsing (mscatalog.parse): metadata table and location shard parsing
- Fetchers (mscatalog.fetch): resource access by key
- Store (mscatalog.store): load-once cache, shard routing, location lookup
- Query (mscatalog.query): search, filters, facets, pagination
- Audit (mscatalog.audit): JSONL event logging
- CLI (mscatalog.cli): command-line interface
- Public API (mscatalog.catalog): the Catalog facade
"""

__version__ = "0.1.0"
__license__ = "MIT"

from mscatalog.catalog import Catalog, open_catalog
from mscatalog.config import CatalogConfig
from mscatalog.errors import CatalogError, CatalogParseError, FetchError, ResourceNotFound
from mscatalog.fetch import DirectoryFetcher, MappingFetcher
from mscatalog.models import (
    DateRange,
    FilterCriteria,
    LocationEntry,
    Manuscript,
    ManuscriptDetails,
)
from mscatalog.normalize import extract_integer, normalize_digits
from mscatalog.store import CatalogCache, route_to_shard

__all__ = [
    "__version__",
    "__license__",
    "Catalog",
    "CatalogCache",
    "CatalogConfig",
    "open_catalog",
    "DirectoryFetcher",
    "MappingFetcher",
    "Manuscript",
    "LocationEntry",
    "ManuscriptDetails",
    "FilterCriteria",
    "DateRange",
    "normalize_digits",
    "extract_integer",
    "route_to_shard",
    "CatalogError",
    "CatalogParseError",
    "FetchError",
    "ResourceNotFound",
]
