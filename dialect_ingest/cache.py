"""
In-memory result cache for dialect-ingest.

Parsed datasets are keyed by ``SourceKey(path, modification_token)``.
Because the modification token is part of the key, a changed source
simply misses the cache; entries are never revalidated or evicted and
live for the lifetime of the process (bounded by the number of distinct
sources opened).

A structured key (rather than ``path + token`` string concatenation)
keeps ``("a.csv1", "")`` and ``("a.csv", "1")`` apart.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from dialect_ingest.parsers.base import RawDataset

logger = logging.getLogger(__name__)


class SourceKey(NamedTuple):
    """Identity of one version of a source."""
    path: str
    modification_token: str = ""


class ResultCache:
    """Mapping of SourceKey -> RawDataset."""

    def __init__(self) -> None:
        self._entries: dict[SourceKey, RawDataset] = {}

    def get(self, key: SourceKey) -> RawDataset | None:
        return self._entries.get(key)

    def put(self, key: SourceKey, dataset: RawDataset) -> None:
        self._entries[key] = dataset
        logger.debug("Cached dataset for %s (%d entries)", key, len(self._entries))

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# Shared by every reader that is not given its own cache
_DEFAULT_CACHE = ResultCache()


def default_cache() -> ResultCache:
    """Return the process-wide cache."""
    return _DEFAULT_CACHE
