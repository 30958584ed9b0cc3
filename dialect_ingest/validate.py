"""
Dataset sanity checks for dialect-ingest.

Run once per read, after parsing and before number coercion, as a
fast-fail gate:

- the time column (the first column after the key columns) must hold a
  value its registered parser accepts in the first row, and
- at least one header name must be non-empty.
"""

from __future__ import annotations

import logging

from dialect_ingest.exceptions import (
    EmptyHeadersError,
    NotEnoughRowsError,
    WrongTimeColumnOrUnitsError,
)
from dialect_ingest.parsers.base import RawDataset
from dialect_ingest.transforms.numbers import ParserMap

logger = logging.getLogger(__name__)


def ensure_data_is_correct(
    dataset: RawDataset,
    time_column_index: int,
    parsers: ParserMap | None = None,
) -> None:
    """Validate the time column and the header row of a parsed dataset.

    Args:
        dataset: Output of the row parser.
        time_column_index: Position of the time column in
            ``dataset.columns`` (equal to the number of key columns).
        parsers: Mapping of column name -> parser. Only the time
            column's parser is consulted; a falsy return rejects the value.

    Raises:
        NotEnoughRowsError: If the dataset has no data rows.
        WrongTimeColumnOrUnitsError: If the time column is missing or its
            first value is rejected.
        EmptyHeadersError: If every header name is empty.
    """
    parsers = parsers or {}

    if len(dataset) == 0:
        raise NotEnoughRowsError("Dataset has a header but no data rows.")

    if 0 <= time_column_index < len(dataset.columns):
        time_key: str | None = dataset.columns[time_column_index]
    else:
        time_key = None
    parser = parsers.get(time_key) if time_key is not None else None

    if parser is not None:
        time = str(dataset.df[time_key].iloc[0]).strip()
        if not parser(time):
            raise WrongTimeColumnOrUnitsError(time)
    elif parsers and time_key is None:
        # Parsers were given but the time column index points past the header
        raise WrongTimeColumnOrUnitsError(None)

    if not any(dataset.columns):
        raise EmptyHeadersError("All header names are empty.")

    logger.debug("Dataset checks passed (time column=%r)", time_key)
