"""
Base parser protocol / ABC for dialect-ingest.

All row parsers must implement this interface. The contract is:
1. parse() takes raw text and a delimiter, and returns a RawDataset.
2. RawDataset contains the header sequence (order-significant) and a
   DataFrame of raw string cells, one row per non-blank data line.

Why an ABC:
- Enforces a consistent interface across parsers.
- Lets the reader swap in another row parser without touching the
  detection or coercion code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True, eq=False)
class RawDataset:
    """Standardized output from any row parser.

    Attributes:
        columns: Header names in source order. May contain empty
            strings or duplicates; use this (not ``df.columns``) for
            positional access such as "the column at ``key_size``".
        df: Raw cells as strings, one row per data row, source order
            preserved. Rows whose cells were all empty are not present.
            Treat as read-only -- cached datasets are shared.
    """
    columns: tuple[str, ...]
    df: pd.DataFrame

    @property
    def rows(self) -> list[dict[str, str]]:
        """Data rows as ``{column: raw cell}`` mappings."""
        return self.df.to_dict(orient="records")

    def __len__(self) -> int:
        return len(self.df)


class BaseParser(ABC):
    """Abstract base class for delimited-text row parsers."""

    @abstractmethod
    def parse(self, text: str, delimiter: str) -> RawDataset:
        """Split *text* into a header and data rows.

        Args:
            text: Raw delimited text; the first non-empty line is the header.
            delimiter: Single field-separator character.

        Returns:
            RawDataset with blank rows removed.

        Raises:
            NotEnoughRowsError: If the text has no non-empty line.
        """
