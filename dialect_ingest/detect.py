"""
Delimiter detection for dialect-ingest.

Infers whether ``,`` or ``;`` separates the fields of a delimited text by
looking at the header line and the first data line only.

Detection algorithm:
1. Drop every double-quoted span so delimiters inside quoted cells
   never count.
2. Take the first two non-empty lines (header + first data row).
   Fewer than two lines -> NotEnoughRowsError.
3. Count commas and semicolons on both lines.
4. A real delimiter occurs the same number of times on every line
   (constant column count), and more than once. It must also dominate
   the competing candidate, unless the competitor is inconsistent
   between the two lines or absent altogether.
5. Comma is checked first; semicolon only when comma fails.
   Neither -> UndefinedDelimiterError.
"""

from __future__ import annotations

import logging

from dialect_ingest.exceptions import NotEnoughRowsError, UndefinedDelimiterError

logger = logging.getLogger(__name__)

COMMA = ","
SEMICOLON = ";"

# Header line + first data line
_LINES_TO_CHECK = 2


def _strip_quoted(text: str) -> str:
    """Remove every ``"..."`` span, quotes included.

    A span may not cross a carriage return. A quote with no closing
    partner before the next ``\\r`` (or the end of text) is kept as a
    literal character and scanning resumes right after it.
    """
    parts: list[str] = []
    pos = 0
    start = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            break
        closing = text.find('"', opening + 1)
        carriage = text.find("\r", opening + 1)
        if closing == -1 or (carriage != -1 and carriage < closing):
            pos = opening + 1
            continue
        parts.append(text[start:opening])
        start = pos = closing + 1
    parts.append(text[start:])
    return "".join(parts)


def _first_lines(text: str, count: int) -> list[str]:
    """Return up to *count* non-empty lines, splitting on ``\\r`` and ``\\n``."""
    lines: list[str] = []
    for line in text.replace("\r", "\n").split("\n"):
        if not line:
            continue
        lines.append(line)
        if len(lines) == count:
            break
    return lines


def _check_delimiters(
    first_in_header: int,
    first_in_row: int,
    second_in_header: int,
    second_in_row: int,
) -> bool:
    """Test whether the first candidate beats the second as the delimiter."""
    return (
        first_in_header == first_in_row
        and first_in_header > 1
        and (
            second_in_header != second_in_row
            or (not second_in_header and not second_in_row)
            or (first_in_header > second_in_header and first_in_row > second_in_row)
        )
    )


def guess_delimiter(text: str) -> str:
    """Infer the field delimiter of *text*.

    Args:
        text: Raw delimited text (header line first).

    Returns:
        ``","`` or ``";"``.

    Raises:
        NotEnoughRowsError: If fewer than two non-empty lines exist.
        UndefinedDelimiterError: If neither candidate passes the
            consistency + dominance test.
    """
    lines = _first_lines(_strip_quoted(text), _LINES_TO_CHECK)
    if len(lines) != _LINES_TO_CHECK:
        raise NotEnoughRowsError(
            f"Need at least {_LINES_TO_CHECK} non-empty lines to detect the "
            f"delimiter, found {len(lines)}."
        )

    header, first_row = lines
    commas = (header.count(COMMA), first_row.count(COMMA))
    semicolons = (header.count(SEMICOLON), first_row.count(SEMICOLON))
    logger.debug(
        "Delimiter counts (header, first row): comma=%s, semicolon=%s",
        commas, semicolons,
    )

    if _check_delimiters(*commas, *semicolons):
        return COMMA
    if _check_delimiters(*semicolons, *commas):
        return SEMICOLON

    raise UndefinedDelimiterError(
        "Could not determine the delimiter: neither ',' nor ';' occurs "
        "consistently in the first two lines.\n"
        f"Header: {header[:200]}\n"
        f"First row: {first_row[:200]}"
    )
