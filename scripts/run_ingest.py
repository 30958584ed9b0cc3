"""
Demo script: read delimited text files via the public API.

Usage:
    uv run python scripts/run_ingest.py                       # bundled fixtures
    uv run python scripts/run_ingest.py data/a.csv data/b.csv # your own files

For each file, open() builds a reader, read() detects the delimiter and
the number format, and the first rows are logged. Column 1 is treated
as the time column and must hold four-digit years.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

INPUT_FILES = [
    "tests/fixtures/population_dot.csv",
    "tests/fixtures/population_comma.csv",
    "tests/fixtures/mixed_separators.csv",
]

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_ingest")


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _parse_year(value: str) -> int | None:
    return int(value) if len(value) == 4 and value.isdigit() else None


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import dialect_ingest
    from dialect_ingest.exceptions import DialectIngestError

    input_files = sys.argv[1:] or INPUT_FILES

    for input_path in input_files:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            continue

        log.info("=" * 70)
        log.info("Processing: %s", input_path)
        log.info("=" * 70)

        reader = dialect_ingest.open(input_path)
        try:
            # Look up the time column by position, whatever the header calls it
            columns = reader.load().columns
            key_size = reader.config.key_size
            parsers = {columns[key_size]: _parse_year} if key_size < len(columns) else {}
            result = reader.read(parsers)
        except DialectIngestError as e:
            log.error("  %s [%s]: %s", type(e).__name__, e.code, e)
            continue

        log.info("  Number format: %s", result.strategy)
        for row in result.rows[:5]:
            log.info("  %s", row)

        log.info("Done: %s\n", reader.get_dataset_info().name)

    log.info("All files processed.")


if __name__ == "__main__":
    main()
