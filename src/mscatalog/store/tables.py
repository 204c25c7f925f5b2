"""Loading of the main manuscript metadata table."""

import time

from mscatalog.audit import AuditLogger
from mscatalog.errors import CatalogError
from mscatalog.fetch import TextFetcher
from mscatalog.models import Manuscript
from mscatalog.parse import parse_manuscripts
from mscatalog.store.cache import CatalogCache
from mscatalog.utils import calculate_string_sha256

__all__ = ["RecordLoader"]


class RecordLoader:
    """Memoized loader for the metadata table.

    Parameters
    ----------
    fetcher : TextFetcher
        Source of the table text.
    cache : CatalogCache
        Cache owning the table slot.
    key : str
        Resource key of the metadata table.
    audit_logger : AuditLogger | None, optional
        Event log for loads and failures.
    """

    def __init__(
        self,
        fetcher: TextFetcher,
        cache: CatalogCache,
        key: str,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.cache = cache
        self.key = key
        self.audit_logger = audit_logger

    async def load(self) -> tuple[Manuscript, ...]:
        """Return all manuscripts, fetching and parsing the table on first use.

        Later calls return the identical cached tuple without re-parsing.

        Returns
        -------
        tuple[Manuscript, ...]
            Manuscripts in source order.

        Raises
        ------
        ResourceNotFound
            If the table does not exist.
        FetchError
            If the table cannot be read.
        CatalogParseError
            If any row holds malformed list data.

        Notes
        -----
        Failures leave the cache empty, so the next call retries the load.
        """
        cached = self.cache.manuscripts
        if cached is not None:
            return cached

        started = time.perf_counter()
        try:
            text = await self.fetcher.fetch_text(self.key)
            records, warnings = parse_manuscripts(text, source=self.key)
        except CatalogError as e:
            if self.audit_logger is not None:
                self.audit_logger.error(type(e).__name__, str(e), stage="load_table")
            raise

        stored = self.cache.store_manuscripts(records)

        if self.audit_logger is not None and stored is records:
            self.audit_logger.table_loaded(
                source=self.key,
                sha256=calculate_string_sha256(text),
                record_count=len(records),
                duration_seconds=round(time.perf_counter() - started, 6),
                warnings=warnings,
            )

        return stored
