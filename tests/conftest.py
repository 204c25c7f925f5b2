"""Pytest configuration and fixtures for test suite."""

import asyncio
import csv
import io
import json
import sys
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from mscatalog import (  # noqa: E402
    Catalog,
    CatalogCache,
    CatalogConfig,
    MappingFetcher,
    Manuscript,
)

METADATA_HEADER = [
    "unique_id",
    "categories",
    "titles",
    "author",
    "shuhras",
    "death_date",
    "century",
]

# (unique_id, categories, titles, author, shuhras, death_date, century)
METADATA_ROWS: list[tuple[str, list[str], list[str], str, list[str], str, str]] = [
    ("1054", ["فقه", "أصول"], ["كتاب الأم", "الأم"], "الشافعي", ["الإمام الشافعي"], "٢٠٤هـ", "3"),
    (
        "MS-2001",
        ["تفسير"],
        ["جامع البيان", "تفسير الطبري"],
        "محمد بن جرير الطبري",
        ["الطبري", "ابن جرير"],
        "310",
        "4",
    ),
    ("17", ["فقه"], ["Al-Muwatta"], "Malik ibn Anas", ["Imam Malik"], "179/795", "2"),
    ("٣٠٥", [], [], "", [], "", ""),
    ("1500", ["Hadith", "فقه"], ["Sahih"], "al-Bukhari", ["Bukhari"], "256 AH", "3"),
]

SHARD_ROWS: dict[int, list[tuple[str, list[dict[str, Any]]]]] = {
    1: [
        (
            "17",
            [
                {"library": "Chester Beatty", "country": "Ireland", "city": "Dublin",
                 "catalog_num": "3001"},
                {"library": "Süleymaniye", "country": "Turkey", "city": "Istanbul",
                 "catalog_num": 512},
            ],
        ),
        ("MS-٣٠٥", [{"library": "Dar al-Kutub", "country": "Egypt", "city": "Cairo"}]),
    ],
    2: [
        (
            "MS-1054",
            [{"library": "British Library", "country": "UK", "city": "London",
              "catalog_num": "Or. 1054"}],
        ),
        ("1500", []),
    ],
    3: [
        (
            "2001",
            [{"library": "Azhar", "country": "Egypt", "city": "Cairo", "catalog_num": "88"}],
        ),
    ],
}


def make_table(header: list[str], rows: list[list[str]]) -> str:
    """Render rows as CSV text with a header line."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue()


def metadata_text(rows: list[tuple] = METADATA_ROWS) -> str:
    """Render metadata rows, JSON-encoding the list columns."""
    return make_table(
        METADATA_HEADER,
        [
            [
                uid,
                json.dumps(cats, ensure_ascii=False),
                json.dumps(titles, ensure_ascii=False),
                author,
                json.dumps(shuhras, ensure_ascii=False),
                death,
                century,
            ]
            for uid, cats, titles, author, shuhras, death, century in rows
        ],
    )


def shard_text(rows: list[tuple[str, list[dict[str, Any]]]]) -> str:
    """Render location shard rows."""
    return make_table(
        ["unique_id", "ms_locations"],
        [[uid, json.dumps(locs, ensure_ascii=False)] for uid, locs in rows],
    )


def sample_resources() -> dict[str, str]:
    """Metadata table plus shards 1-3, keyed like the default config."""
    config = CatalogConfig()
    resources = {config.metadata_key: metadata_text()}
    for index, rows in SHARD_ROWS.items():
        resources[config.shard_key(index)] = shard_text(rows)
    return resources


def run(coro: Coroutine[Any, Any, Any]) -> Any:
    """Drive a coroutine to completion."""
    return asyncio.run(coro)


@pytest.fixture
def resources() -> dict[str, str]:
    """Sample tables keyed by resource key."""
    return sample_resources()


@pytest.fixture
def fetcher(resources: dict[str, str]) -> MappingFetcher:
    """In-memory fetcher serving the sample tables."""
    return MappingFetcher(resources)


@pytest.fixture
def catalog(fetcher: MappingFetcher) -> Catalog:
    """Catalog over the sample tables with a fresh cache."""
    return Catalog(fetcher, cache=CatalogCache())


@pytest.fixture
def manuscripts(catalog: Catalog) -> tuple[Manuscript, ...]:
    """Loaded sample manuscripts."""
    return run(catalog.load())


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory laid out like a deployed catalog."""
    root = tmp_path / "data"
    for key, text in sample_resources().items():
        path = root / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def make_manuscript() -> Callable[..., Manuscript]:
    """Factory for manuscripts with minimal boilerplate."""

    def _factory(
        unique_id: str = "1",
        *,
        categories: tuple[str, ...] = (),
        titles: tuple[str, ...] = (),
        author: str = "",
        shuhras: tuple[str, ...] = (),
        death_date: str = "",
        century: str = "",
    ) -> Manuscript:
        return Manuscript(
            unique_id=unique_id,
            categories=tuple(categories),
            titles=tuple(titles),
            author=author,
            shuhras=tuple(shuhras),
            death_date=death_date,
            century=century,
        )

    return _factory


@pytest.fixture
def run_async() -> Callable[[Coroutine[Any, Any, Any]], Any]:
    """Run a coroutine to completion from a synchronous test."""
    return run


@pytest.fixture
def make_metadata() -> Callable[..., str]:
    """Render metadata rows (see METADATA_ROWS) as CSV text."""
    return metadata_text


@pytest.fixture
def make_shard() -> Callable[..., str]:
    """Render (unique_id, locations) rows as shard CSV text."""
    return shard_text


@pytest.fixture
def make_csv() -> Callable[..., str]:
    """Render raw rows as CSV text with a header."""
    return make_table
