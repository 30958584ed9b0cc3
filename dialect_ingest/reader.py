"""
CSV reader handle for dialect-ingest.

The ``CSVReader`` class is a **handle object** that encapsulates one
source (a ``ReaderConfig``) together with its collaborators: a fetcher
that returns raw text and a cache of parsed results. Once created (via
``dialect_ingest.open()``), it remembers the path, so callers never
need to pass it again.

Read side, in order:

1. ``load()``  -- fetch -> detect delimiter -> parse rows, cached by
   ``SourceKey(path, last_modified)``.
2. ``read()``  -- ``load()`` -> sanity checks -> number coercion.

Every failure is raised to the caller; nothing is retried and no
partial result is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from dialect_ingest.cache import ResultCache, SourceKey, default_cache
from dialect_ingest.config import ReaderConfig
from dialect_ingest.detect import guess_delimiter
from dialect_ingest.exceptions import SourceNotFoundError
from dialect_ingest.fetch import BaseFetcher, LocalFetcher
from dialect_ingest.parsers.base import BaseParser, RawDataset
from dialect_ingest.parsers.dsv import DSVParser
from dialect_ingest.transforms.numbers import CoercionResult, ParserMap, coerce_numbers
from dialect_ingest.validate import ensure_data_is_correct

logger = logging.getLogger(__name__)


@dataclass
class DatasetInfo:
    """Display metadata about a source, returned by ``get_dataset_info()``.

    Attributes:
        name: Trailing ``/`` segment of the source path (the file name).
    """

    name: str


class CSVReader:
    """Handle object for one delimited-text source.

    Attributes:
        config: The validated ``ReaderConfig``.
        fetcher: Collaborator returning raw text and assets.
        cache: Parsed-result cache (process-wide by default).
    """

    name = "csv"

    def __init__(
        self,
        config: ReaderConfig,
        fetcher: BaseFetcher | None = None,
        cache: ResultCache | None = None,
        parser: BaseParser | None = None,
    ) -> None:
        self.config = config
        self.fetcher = fetcher or LocalFetcher()
        self.cache = cache if cache is not None else default_cache()
        self.parser = parser or DSVParser()

    def __repr__(self) -> str:
        return (
            f"CSVReader(path={self.config.path!r}, "
            f"delimiter={self.config.delimiter!r}, key_size={self.config.key_size})"
        )

    @property
    def source_key(self) -> SourceKey:
        return SourceKey(self.config.path, self.config.last_modified)

    # -- Read side ----------------------------------------------------------

    def load(self) -> RawDataset:
        """Fetch, detect the delimiter and parse rows (cached).

        Returns:
            The parsed ``RawDataset``. Repeated calls for the same
            ``(path, last_modified)`` return the identical object without
            fetching again.

        Raises:
            SourceNotFoundError: If the source is missing, unreadable or empty.
            NotEnoughRowsError: If the text has fewer than two lines.
            UndefinedDelimiterError: If the delimiter cannot be detected.
        """
        key = self.source_key
        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Cache hit for %s", self.config.path)
            return cached

        path = self.config.path
        try:
            text = self.fetcher.fetch_text(path)
        except (OSError, ValueError) as e:
            raise SourceNotFoundError(path) from e
        if not text:
            raise SourceNotFoundError(path)

        delimiter = self.config.delimiter or guess_delimiter(text)
        dataset = self.parser.parse(text, delimiter)
        logger.info(
            "Loaded %s: delimiter=%r, %d rows x %d columns",
            path, delimiter, len(dataset), len(dataset.columns),
        )

        self.cache.put(key, dataset)
        return dataset

    def read(self, parsers: ParserMap | None = None) -> CoercionResult:
        """Load, validate and coerce numbers in one go.

        Args:
            parsers: Mapping of column name -> parser. The parser of the
                time column (``columns[key_size]``) also gates the
                dataset: its first value must be accepted.

        Returns:
            CoercionResult with typed rows and the accepted number format.

        Raises:
            Everything ``load()`` raises, plus WrongTimeColumnOrUnitsError,
            EmptyHeadersError and DifferentSeparatorsError.
        """
        dataset = self.load()
        ensure_data_is_correct(dataset, self.config.key_size, parsers)
        return coerce_numbers(dataset.df, parsers)

    def get_dataset_info(self) -> DatasetInfo:
        """Return display info; the name is the last path segment."""
        return DatasetInfo(name=self.config.path.split("/")[-1])

    def get_asset(self, asset: str) -> Any:
        """Fetch an auxiliary JSON/YAML document relative to ``assets_path``.

        Raises:
            SourceNotFoundError: If the asset cannot be fetched or decoded.
        """
        path = self.config.assets_path + asset
        try:
            return self.fetcher.fetch_asset(path)
        except (OSError, ValueError) as e:
            raise SourceNotFoundError(path) from e
