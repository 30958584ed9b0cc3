"""
Blank row dropper transform for dialect-ingest.

Removes data rows in which every cell is empty.

Why:
  Spreadsheet exports often end with separator-only lines (``,,,``) or
  contain spacer lines between blocks. They carry no data and would
  otherwise show up as rows of empty strings, so they are dropped
  before anything downstream sees them.
"""

from __future__ import annotations

import pandas as pd


def drop_blank_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Drop rows whose cells are all empty.

    Whitespace-only cells count as content. Missing cells (``None`` /
    ``NaN``) count as empty.

    Args:
        df: DataFrame of raw string cells.

    Returns:
        A new DataFrame with blank rows removed and a fresh index.
    """
    if df.empty:
        # No rows, or no columns (every row is blank)
        return df.iloc[0:0].reset_index(drop=True)
    has_content = df.fillna("").astype(str).ne("").any(axis=1)
    return df[has_content].reset_index(drop=True)
