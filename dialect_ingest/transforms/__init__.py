"""
Transforms sub-package for dialect-ingest.

Contains the steps applied to parsed rows:
  - empty.py: Drop rows whose cells are all empty.
  - numbers.py: Infer the decimal convention and coerce numeric cells.

Each transform takes a DataFrame and returns a new one, so steps are
independently testable and never mutate cached data.
"""
