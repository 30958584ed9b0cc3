"""
Source fetching for dialect-ingest.

The reader never opens files itself; it asks a fetcher for the raw text
of a source and for auxiliary assets. Swapping the fetcher (e.g. for one
backed by HTTP or an archive) needs no change to detection, parsing or
coercion.

Each fetch is single-shot: it returns the whole payload or raises. A
missing or unreadable source raises ``OSError`` (usually
``FileNotFoundError``); the reader turns that into SourceNotFoundError.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


class BaseFetcher(ABC):
    """Abstract base class for source fetchers."""

    @abstractmethod
    def fetch_text(self, path: str) -> str:
        """Return the full text of *path*.

        Raises:
            OSError: If the source cannot be read.
            ValueError: If the source cannot be decoded.
        """

    @abstractmethod
    def fetch_asset(self, path: str) -> Any:
        """Return the parsed JSON (or YAML) document at *path*.

        Raises:
            OSError: If the asset cannot be read.
            ValueError: If the asset is not valid JSON / YAML.
        """


class LocalFetcher(BaseFetcher):
    """Fetch sources from the local filesystem.

    Text is decoded as UTF-8 with an optional BOM (``utf-8-sig``), which
    is what spreadsheet applications write on export.
    """

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        self.encoding = encoding

    def fetch_text(self, path: str) -> str:
        logger.debug("Reading text from %s", path)
        with open(path, "r", encoding=self.encoding, newline="") as f:
            return f.read()

    def fetch_asset(self, path: str) -> Any:
        logger.debug("Reading asset from %s", path)
        with open(path, "r", encoding=self.encoding) as f:
            if Path(path).suffix.lower() not in _YAML_SUFFIXES:
                return json.load(f)
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML asset {path}: {e}") from e
