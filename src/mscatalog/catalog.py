"""Public API of the manuscript catalog.

This module provides the ``Catalog`` facade used by presentation layers:
- Searching and filtering the metadata table
- Facet values for filter choice lists
- Sorted, paginated listing pages
- Manuscript details with known locations
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from mscatalog.audit import AuditLogger
from mscatalog.config import CatalogConfig
from mscatalog.fetch import DirectoryFetcher, TextFetcher
from mscatalog.models import FilterCriteria, LocationEntry, Manuscript, ManuscriptDetails
from mscatalog.query import ResultPage, project, search, unique_values
from mscatalog.store import (
    CatalogCache,
    LocationResolver,
    RecordLoader,
    ShardRouter,
    route_to_shard,
)

__all__ = ["Catalog", "open_catalog"]


class Catalog:
    """Read-only manuscript catalog over a fetcher and a cache.

    The cache is owned by the caller: share one ``CatalogCache`` between
    catalogs to share loaded tables, or let each catalog create its own.

    Parameters
    ----------
    fetcher : TextFetcher
        Source of table text.
    config : CatalogConfig | None, optional
        Resource keys and defaults; ``CatalogConfig()`` when omitted.
    cache : CatalogCache | None, optional
        Table cache; a fresh one when omitted.
    audit_logger : AuditLogger | None, optional
        Event log for loads and failures.

    Examples
    --------
        >>> import asyncio
        >>> from mscatalog import Catalog, DirectoryFetcher
        >>> catalog = Catalog(DirectoryFetcher("data/"))
        >>> results = asyncio.run(catalog.search("tafsir", ["categories"]))
        >>> page = catalog.page(results, sort_key="author")
    """

    def __init__(
        self,
        fetcher: TextFetcher,
        config: CatalogConfig | None = None,
        cache: CatalogCache | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.config = config or CatalogConfig()
        self.cache = cache if cache is not None else CatalogCache()
        self.audit_logger = audit_logger

        self.loader = RecordLoader(fetcher, self.cache, self.config.metadata_key, audit_logger)
        self.router = ShardRouter(fetcher, self.cache, self.config.shard_key, audit_logger)
        self.resolver = LocationResolver(self.router)

    async def load(self) -> tuple[Manuscript, ...]:
        """Return the full metadata table, loading it on first use."""
        return await self.loader.load()

    async def search(
        self,
        search_term: str = "",
        search_fields: Iterable[str] = (),
        filter_criteria: FilterCriteria | Mapping[str, Any] | None = None,
    ) -> Sequence[Manuscript]:
        """Search the full table; see ``mscatalog.query.search``."""
        manuscripts = await self.load()
        return search(manuscripts, search_term, search_fields, filter_criteria)

    async def unique_values(self, field: str) -> tuple[str, ...]:
        """Sorted distinct values of ``field`` across the full table."""
        manuscripts = await self.load()
        return unique_values(manuscripts, field)

    def page(
        self,
        records: Sequence[Manuscript],
        sort_key: str | None = None,
        descending: bool = False,
        page_index: int = 0,
        page_size: int | None = None,
    ) -> ResultPage:
        """Sort and paginate a result set using the configured page size."""
        return project(
            records,
            sort_key=sort_key,
            descending=descending,
            page_index=page_index,
            page_size=page_size if page_size is not None else self.config.default_page_size,
        )

    async def get_manuscript(self, unique_id: str) -> Manuscript | None:
        """First manuscript whose id equals ``unique_id`` (trimmed), or None."""
        wanted = unique_id.strip()
        manuscripts = await self.load()
        return next((m for m in manuscripts if m.unique_id == wanted), None)

    async def resolve_locations(self, unique_id: str) -> tuple[LocationEntry, ...]:
        """Known locations of ``unique_id``; empty when none are recorded."""
        return await self.resolver.resolve_locations(unique_id)

    async def get_details(self, unique_id: str) -> ManuscriptDetails | None:
        """Manuscript plus locations, or None for an unknown manuscript."""
        manuscript = await self.get_manuscript(unique_id)
        if manuscript is None:
            return None

        locations = await self.resolve_locations(unique_id)
        return ManuscriptDetails(manuscript=manuscript, locations=locations)

    def shard_for(self, unique_id: str) -> int:
        """Shard index ``unique_id`` routes to."""
        return route_to_shard(unique_id)


def open_catalog(
    data_dir: str | Path,
    *,
    event_log_path: str | Path | None = None,
    cache: CatalogCache | None = None,
) -> Catalog:
    """Create a catalog reading its tables from a directory.

    Parameters
    ----------
    data_dir : str | Path
        Directory holding ``manuscript_metadata.csv`` and ``chunks/``.
    event_log_path : str | Path | None, optional
        JSONL audit log path. If None, no events are written.
    cache : CatalogCache | None, optional
        Shared cache; a fresh one when omitted.

    Returns
    -------
    Catalog
        Catalog over a ``DirectoryFetcher``. Close its ``audit_logger``
        when done if an event log path was given.

    Raises
    ------
    FileNotFoundError
        If ``data_dir`` does not exist.
    """
    data_path = Path(data_dir)
    if not data_path.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    config = CatalogConfig(data_dir=data_path, event_log_path=event_log_path)
    audit_logger = (
        AuditLogger(config.event_log_path) if config.event_log_path is not None else None
    )
    return Catalog(DirectoryFetcher(data_path), config, cache=cache, audit_logger=audit_logger)
