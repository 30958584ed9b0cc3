"""
Number parsing transform for dialect-ingest.

Delimited exports come from spreadsheets in different locales, so the
same text can mean different numbers:

- dot-decimal:   ``1,234.5`` (``,`` thousands, ``.`` decimal)
- comma-decimal: ``1.234,5`` (``.`` thousands, ``,`` decimal)

``1.234`` is valid under both. The ambiguity can only be resolved for a
whole dataset at once, so this transform tries one convention
(strategy) after another against *every* cell and accepts the first
one under which all numeric-looking cells parse cleanly:

1. dot-decimal
2. comma-decimal
3. identity (leave everything as strings) -- the fallback

Each attempt is a pure trial with no state shared between attempts.
Reaching the fallback means the dataset mixes formats; that is reported
as DifferentSeparatorsError rather than silently returning strings.

Cells that contain anything besides digits, ``-`` and the strategy's
separators (e.g. ``"Canada"``) are never touched. Columns with a
registered parser (typically the time column) are converted by that
parser instead and never take part in the trials.
"""

from __future__ import annotations

import functools
import logging
import math
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import numpy as np
import pandas as pd

from dialect_ingest.exceptions import DifferentSeparatorsError

logger = logging.getLogger(__name__)

ParserMap = Mapping[str, Callable[[str], Any]]


@functools.lru_cache(maxsize=None)
def _number_pattern(thousands: str, decimal: str) -> re.Pattern[str]:
    """Regex for a locale-formatted number.

    Integer part is either plain digits or 1-3 digits followed by groups
    of exactly three digits joined by *thousands*.
    """
    t = re.escape(thousands)
    d = re.escape(decimal)
    return re.compile(
        rf"^\s*([+-]?(?:[0-9]{{1,3}}(?:{t}[0-9]{{3}})+|[0-9]*))(?:{d}([0-9]*))?\s*$"
    )


def parse_decimal(value: str, thousands: str, decimal: str) -> float:
    """Parse a locale-formatted number, returning NaN when it doesn't fit.

    >>> parse_decimal("1,234.5", ",", ".")
    1234.5
    >>> parse_decimal("1.234,5", ".", ",")
    1234.5
    """
    match = _number_pattern(thousands, decimal).match(value)
    if match is None:
        return math.nan
    integer = match.group(1).replace(thousands, "")
    fraction = match.group(2) or ""
    try:
        return float(f"{integer}.{fraction}")
    except ValueError:
        # Sign or separator with no digits, e.g. "-" or "."
        return math.nan


class ParseStrategy(Protocol):
    """One decimal-convention hypothesis."""

    name: str

    def __call__(self, value: str) -> float | str: ...

    def apply(self, series: pd.Series) -> pd.Series | None: ...


@dataclass(frozen=True)
class SeparatorStrategy:
    """Parse numeric-looking cells with a fixed thousands/decimal pair."""

    name: str
    thousands: str
    decimal: str

    @property
    def numeric_chars(self) -> str:
        """Character-class pattern for cells this strategy attempts."""
        return f"[-0-9{re.escape(self.thousands + self.decimal)}]+"

    def looks_numeric(self, value: object) -> bool:
        return (
            isinstance(value, str)
            and bool(value)
            and re.fullmatch(self.numeric_chars, value) is not None
        )

    def __call__(self, value: str) -> float | str:
        if self.looks_numeric(value):
            return parse_decimal(value, self.thousands, self.decimal)
        return value

    def apply(self, series: pd.Series) -> pd.Series | None:
        """Coerce one column; ``None`` if any attempted cell is not finite."""
        mask = series.map(self.looks_numeric).astype(bool)
        if not mask.any():
            return series.copy()

        parsed = series[mask].map(self)
        if not np.isfinite(parsed.to_numpy(dtype=float)).all():
            return None

        result = series.astype(object)
        result[mask] = parsed
        return result


@dataclass(frozen=True)
class IdentityStrategy:
    """Fallback: leave every cell as it is."""

    name: str = "identity"

    def __call__(self, value: str) -> float | str:
        return value

    def apply(self, series: pd.Series) -> pd.Series | None:
        return series.copy()


DOT_DECIMAL = SeparatorStrategy("dot-decimal", thousands=",", decimal=".")
COMMA_DECIMAL = SeparatorStrategy("comma-decimal", thousands=".", decimal=",")
IDENTITY = IdentityStrategy()

# Order matters: earlier conventions win when several fit.
DEFAULT_STRATEGIES: tuple[ParseStrategy, ...] = (DOT_DECIMAL, COMMA_DECIMAL, IDENTITY)


@dataclass
class CoercionResult:
    """Output of the coercion step.

    Attributes:
        df: Copy of the input with numeric cells converted to ``float``
            and parser columns converted by their parser.
        strategy: Name of the accepted decimal convention.
    """
    df: pd.DataFrame
    strategy: str

    @property
    def rows(self) -> list[dict[str, Any]]:
        return self.df.to_dict(orient="records")


def _apply_parsers(df: pd.DataFrame, parsers: ParserMap) -> pd.DataFrame:
    """Convert parser columns in place on *df* (already a private copy)."""
    for i, col in enumerate(df.columns):
        parser = parsers.get(col)
        if parser is None:
            continue
        df.isetitem(
            i,
            df.iloc[:, i].map(
                lambda v: parser(v.strip()) if isinstance(v, str) and v.strip() else v
            ),
        )
    return df


def _run_trial(
    strategy: ParseStrategy,
    df: pd.DataFrame,
    value_positions: list[int],
) -> pd.DataFrame | None:
    """Apply *strategy* to every value column; stop at the first failure."""
    result = df.copy()
    for i in value_positions:
        coerced = strategy.apply(df.iloc[:, i])
        if coerced is None:
            logger.debug(
                "Strategy '%s' failed on column %r", strategy.name, df.columns[i]
            )
            return None
        result.isetitem(i, coerced)
    return result


def coerce_numbers(
    df: pd.DataFrame,
    parsers: ParserMap | None = None,
    strategies: Sequence[ParseStrategy] = DEFAULT_STRATEGIES,
) -> CoercionResult:
    """Coerce numeric cells using the first convention that fits the whole dataset.

    The last strategy in *strategies* is the fallback. It is only ever
    reached when every strategy before it failed, and reaching it is an
    error.

    Args:
        df: DataFrame of raw string cells (e.g. ``RawDataset.df``).
            Not modified.
        parsers: Optional mapping of column name -> parser. Those columns
            are converted by their parser and skipped by the strategies.
        strategies: Ordered conventions to try. Defaults to
            dot-decimal, comma-decimal, identity.

    Returns:
        CoercionResult with the coerced copy and the accepted strategy name.

    Raises:
        DifferentSeparatorsError: If no strategy other than the fallback
            parses every numeric-looking cell.
    """
    if not strategies:
        raise ValueError("At least one parse strategy is required.")
    parsers = parsers or {}

    base = _apply_parsers(df.astype(object), parsers)
    value_positions = [i for i, col in enumerate(base.columns) if col not in parsers]
    fallback = strategies[-1]

    failed: list[str] = []
    for strategy in strategies:
        coerced = _run_trial(strategy, base, value_positions)
        if coerced is None:
            failed.append(strategy.name)
            continue
        if strategy is fallback:
            break
        logger.info(
            "Accepted number format '%s' for %d rows", strategy.name, len(coerced)
        )
        return CoercionResult(df=coerced, strategy=strategy.name)

    raise DifferentSeparatorsError(
        "Numbers in this dataset use different decimal/thousands separators; "
        f"no single convention fits every cell (tried: {', '.join(failed)})."
    )
