"""
Shared test fixtures for dialect-ingest tests.

Fixture files (small CSVs and assets) live in ``tests/fixtures``. If
they move, update ``FIXTURES_DIR`` here.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from dialect_ingest.cache import ResultCache
from dialect_ingest.fetch import BaseFetcher

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def _parse_year(value: str) -> int | None:
    """Four-digit years only."""
    if len(value) == 4 and value.isdigit():
        return int(value)
    return None


class FakeFetcher(BaseFetcher):
    """In-memory fetcher that records every call."""

    def __init__(
        self,
        texts: dict[str, str] | None = None,
        assets: dict[str, object] | None = None,
    ) -> None:
        self.texts = texts or {}
        self.assets = assets or {}
        self.text_calls: list[str] = []
        self.asset_calls: list[str] = []

    def fetch_text(self, path: str) -> str:
        self.text_calls.append(path)
        if path not in self.texts:
            raise FileNotFoundError(path)
        return self.texts[path]

    def fetch_asset(self, path: str) -> object:
        self.asset_calls.append(path)
        if path not in self.assets:
            raise FileNotFoundError(path)
        return self.assets[path]


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def cache() -> ResultCache:
    """A fresh cache, so tests never see each other's datasets."""
    return ResultCache()


@pytest.fixture()
def year_parser():
    """Time-column parser: returns the year as int, ``None`` if rejected."""
    return _parse_year


@pytest.fixture()
def make_fetcher():
    """Factory for ``FakeFetcher`` instances."""
    return FakeFetcher


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against fixture files)",
    )
