"""
dialect-ingest: read delimited text of unknown dialect.

Given raw text with an unknown field delimiter (``,`` or ``;``) and an
unknown number format (``1,234.5`` or ``1.234,5``), the library infers
both, parses rows into named columns and coerces every numeric-looking
cell consistently across the whole dataset.

Public API surface:

- ``open(path, ...)`` -- **recommended entry point**. Polymorphic: accepts
  either a source text file or a reader config YAML and returns a
  ``CSVReader`` handle.

- ``CSVReader`` -- ``load()`` (cached parse), ``read()`` (parse +
  validate + coerce), ``get_dataset_info()``, ``get_asset()``.

- ``guess_delimiter(text)`` and ``coerce_numbers(df)`` -- the two
  heuristics, usable on their own.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dialect_ingest.cache import ResultCache, SourceKey
from dialect_ingest.config import ReaderConfig, load_config
from dialect_ingest.detect import guess_delimiter
from dialect_ingest.fetch import BaseFetcher
from dialect_ingest.reader import CSVReader, DatasetInfo
from dialect_ingest.transforms.numbers import CoercionResult, coerce_numbers

__all__ = [
    "open",
    "CSVReader",
    "DatasetInfo",
    "CoercionResult",
    "ReaderConfig",
    "ResultCache",
    "SourceKey",
    "guess_delimiter",
    "coerce_numbers",
]

logger = logging.getLogger(__name__)


def open(
    path: str,
    fetcher: BaseFetcher | None = None,
    cache: ResultCache | None = None,
    **options: object,
) -> CSVReader:
    """Single entry point: open a source file or an existing reader config.

    Polymorphic behaviour based on the file extension of *path*:

    - **YAML file** (``.yaml`` / ``.yml``): Loads the config and builds
      the reader from it. *options* are not allowed.
    - **Anything else**: Treated as the source itself; *options* are
      ``ReaderConfig`` fields (``last_modified``, ``delimiter``,
      ``key_size``, ``assets_path``).

    Nothing is fetched until ``load()`` / ``read()`` is called.

    Examples::

        reader = dialect_ingest.open("inputs/population.csv", key_size=1)
        result = reader.read(parsers={"year": parse_year})
        result.strategy          # "dot-decimal"
        result.rows[0]           # {"geo": "Canada", "year": 2001, ...}

    Raises:
        FileNotFoundError: If a YAML config path does not exist.
        pydantic.ValidationError: If the options fail validation.
    """
    p = Path(path)

    if p.suffix.lower() in (".yaml", ".yml"):
        if options:
            raise TypeError(
                f"Options {sorted(options)} cannot be combined with a config file."
            )
        logger.info("open() -- loading config from %s", path)
        config = load_config(p)
    else:
        config = ReaderConfig(path=path, **options)

    return CSVReader(config, fetcher=fetcher, cache=cache)
