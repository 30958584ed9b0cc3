"""
Delimiter-separated values parser for dialect-ingest.

Input structure:
  - First non-blank line: header row (column names, order-significant)
  - Following lines: data rows, one record per line

Cells are split with the standard ``csv`` module, so double-quoted cells
may contain the delimiter and ``""`` escapes a quote. Each record is
mapped onto the header by position:

  - missing trailing cells become ``""``
  - surplus cells are ignored
  - duplicate header names keep the last cell

Records whose cells are all empty are dropped (see transforms/empty.py).
"""

from __future__ import annotations

import csv
import io
import logging

import pandas as pd

from dialect_ingest.exceptions import NotEnoughRowsError
from dialect_ingest.parsers.base import BaseParser, RawDataset
from dialect_ingest.transforms.empty import drop_blank_rows

logger = logging.getLogger(__name__)


class DSVParser(BaseParser):
    """Parser for comma/semicolon separated text."""

    def parse(self, text: str, delimiter: str) -> RawDataset:
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
        # Skip empty lines before the header, as guess_delimiter does
        header = next((cells for cells in reader if cells), None)
        if header is None:
            raise NotEnoughRowsError("Text is blank: no header row found.")

        columns = tuple(header)
        # Unique names in first-seen order; duplicates collapse like dict keys
        unique_columns = list(dict.fromkeys(columns))

        records: list[dict[str, str]] = []
        for cells in reader:
            record: dict[str, str] = {}
            for i, name in enumerate(columns):
                record[name] = cells[i] if i < len(cells) else ""
            records.append(record)

        df = pd.DataFrame.from_records(records, columns=unique_columns)
        df = drop_blank_rows(df)

        logger.debug(
            "Parsed %d data rows (%d blank dropped) x %d columns",
            len(df), len(records) - len(df), len(columns),
        )
        return RawDataset(columns=columns, df=df)
