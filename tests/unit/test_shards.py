"""Tests for shard routing and shard caching."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from mscatalog.audit import AuditLogger
from mscatalog.errors import CatalogParseError, FetchError
from mscatalog.fetch import MappingFetcher
from mscatalog.store import CHUNK_SIZE, CatalogCache, ShardIndex, ShardRouter, route_to_shard


def _shard_key(index: int) -> str:
    return f"chunks/locations_{index}.csv"


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_chunk_size_constant() -> None:
    """Test the partition size matches the shard files."""
    assert CHUNK_SIZE == 1000


@pytest.mark.unit
def test_route_boundaries() -> None:
    """Test 0..999 route to shard 1 and 1000..1999 to shard 2."""
    assert {route_to_shard(str(i)) for i in range(0, 1000)} == {1}
    assert {route_to_shard(str(i)) for i in range(1000, 2000)} == {2}
    assert route_to_shard("2000") == 3


@pytest.mark.unit
def test_route_is_monotonic() -> None:
    """Test shard index never decreases as the numeric id grows."""
    shards = [route_to_shard(str(i)) for i in range(0, 5000, 7)]

    assert shards == sorted(shards)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("unique_id", "expected"),
    [("MS-1054", 2), ("١٠٥٤", 2), ("ms ٣٠٥", 1), ("12345", 13), ("", 1), ("no digits", 1)],
)
def test_route_id_formats(unique_id: str, expected: int) -> None:
    """Test prefixes and digit scripts route by the numeric core."""
    assert route_to_shard(unique_id) == expected


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_ensure_shard_loaded_parses_and_caches(
    make_shard: Callable[..., str], run_async: Callable
) -> None:
    """Test a shard is fetched once and then served from the cache."""
    fetcher = MappingFetcher({_shard_key(1): make_shard([("5", []), ("6", [])])})
    cache = CatalogCache()
    router = ShardRouter(fetcher, cache, _shard_key)

    first = run_async(router.ensure_shard_loaded(1))
    second = run_async(router.ensure_shard_loaded(1))

    assert [r.unique_id for r in first] == ["5", "6"]
    assert second is first
    assert fetcher.requests == [_shard_key(1)]
    assert cache.loaded_shards == [1]


@pytest.mark.unit
def test_missing_shard_cached_as_empty(run_async: Callable) -> None:
    """Test a missing shard yields no records and is never re-fetched."""
    fetcher = MappingFetcher({})
    router = ShardRouter(fetcher, CatalogCache(), _shard_key)

    assert run_async(router.ensure_shard_loaded(7)) == ()
    assert run_async(router.ensure_shard_loaded(7)) == ()
    assert fetcher.requests == [_shard_key(7)]


@pytest.mark.unit
def test_unreadable_shard_cached_as_empty(run_async: Callable) -> None:
    """Test a transport failure is treated like a missing shard."""

    class FailingFetcher:
        calls = 0

        async def fetch_text(self, key: str) -> str:
            FailingFetcher.calls += 1
            raise FetchError("connection reset", key=key)

    router = ShardRouter(FailingFetcher(), CatalogCache(), _shard_key)

    assert run_async(router.ensure_shard_loaded(2)) == ()
    assert run_async(router.ensure_shard_loaded(2)) == ()
    assert FailingFetcher.calls == 1


@pytest.mark.unit
def test_corrupt_shard_raises_and_is_not_cached(
    make_csv: Callable[..., str], run_async: Callable
) -> None:
    """Test malformed location JSON surfaces as an error and leaves no cache entry."""
    fetcher = MappingFetcher({_shard_key(1): make_csv(["unique_id", "ms_locations"], [["1", "[{"]])})
    cache = CatalogCache()
    router = ShardRouter(fetcher, cache, _shard_key)

    with pytest.raises(CatalogParseError):
        run_async(router.ensure_shard_loaded(1))

    assert cache.get_shard(1) is None


@pytest.mark.unit
def test_shard_events_logged(
    tmp_path: Path, make_shard: Callable[..., str], run_async: Callable
) -> None:
    """Test loads and misses are written to the audit log."""
    fetcher = MappingFetcher({_shard_key(1): make_shard([("5", [])])})
    with AuditLogger(tmp_path / "events.jsonl", run_id="r") as logger:
        router = ShardRouter(fetcher, CatalogCache(), _shard_key, audit_logger=logger)
        run_async(router.load_index(1, rid="5"))
        run_async(router.load_index(4, rid="3500"))

    events = [json.loads(line) for line in (tmp_path / "events.jsonl").read_text().splitlines()]

    assert [e["event"] for e in events] == ["shard_loaded", "shard_missing"]
    assert events[0]["data"] == {"shard": 1, "source": _shard_key(1), "record_count": 1}
    assert events[0]["rid"] == "5"
    assert events[1]["level"] == "WARN"
    assert events[1]["data"]["shard"] == 4


@pytest.mark.unit
def test_cache_first_store_wins() -> None:
    """Test racing stores converge on the first stored value."""
    cache = CatalogCache()
    first = ShardIndex()
    second = ShardIndex()

    assert cache.store_shard(3, first) is first
    assert cache.store_shard(3, second) is first
    assert cache.get_shard(3) is first
