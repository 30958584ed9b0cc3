"""
Custom exception hierarchy for dialect-ingest.

Why a custom hierarchy:
- Callers can catch specific exceptions (e.g., UndefinedDelimiterError vs
  DifferentSeparatorsError) without relying on generic ValueError/RuntimeError.
- Every error carries a stable ``code`` string so a host application can
  map it to a translated, user-facing message.
"""

from __future__ import annotations


class DialectIngestError(Exception):
    """Base exception for all dialect-ingest errors."""

    code = "reader/error/generic"


class SourceNotFoundError(DialectIngestError, FileNotFoundError):
    """Raised when the source text (or an asset) cannot be fetched.

    Covers missing files, permission problems and empty sources. The
    offending path is kept in ``endpoint``.
    """

    code = "reader/error/fileNotFoundOrPermissionsOrEmpty"

    def __init__(self, endpoint: str) -> None:
        super().__init__(f"No permissions, missing or empty file: {endpoint}")
        self.endpoint = endpoint


class NotEnoughRowsError(DialectIngestError):
    """Raised when there are too few lines to sniff or no data rows to read."""

    code = "reader/error/notEnoughRows"


class UndefinedDelimiterError(DialectIngestError):
    """Raised when neither ``,`` nor ``;`` looks like the field delimiter."""

    code = "reader/error/undefinedDelimiter"


class DifferentSeparatorsError(DialectIngestError):
    """Raised when no single decimal convention parses every numeric cell.

    The dataset mixes incompatible number formats, e.g. ``1,5`` in one
    cell and ``1.5`` in another.
    """

    code = "reader/error/differentSeparators"


class WrongTimeColumnOrUnitsError(DialectIngestError):
    """Raised when the time column's first value is rejected by its parser."""

    code = "reader/error/wrongTimeUnitsOrColumn"

    def __init__(self, value: str | None) -> None:
        super().__init__(f"Wrong time column or time units: {value!r}")
        self.value = value


class EmptyHeadersError(DialectIngestError):
    """Raised when the header row has no non-empty column names."""

    code = "reader/error/emptyHeaders"


class ConfigValidationError(DialectIngestError):
    """Raised when a reader config file cannot be used.

    Schema violations surface as ``pydantic.ValidationError``; this is
    for problems pydantic never sees, such as an empty YAML file.
    """

    code = "config/error/invalid"
