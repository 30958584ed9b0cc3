"""
Configuration model and YAML I/O for dialect-ingest.

This module defines the Pydantic model describing one delimited-text
source, plus helpers for loading and saving it as YAML.

Key model:
- ReaderConfig: source path, modification token, optional fixed
  delimiter, number of key columns and the assets prefix.

Key functions:
- load_config(path) -> ReaderConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Why Pydantic + YAML:
- Pydantic gives us strict validation, type coercion, and clear error messages.
- YAML is human-editable (e.g. to pin a delimiter the sniffer gets wrong).
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from dialect_ingest.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ReaderConfig(BaseModel):
    """Settings for reading one delimited-text source."""

    path: str = Field(..., description="Path of the source text")
    last_modified: str = Field(
        "",
        description="Modification token; part of the cache key",
    )
    delimiter: str | None = Field(
        None,
        description="Field delimiter; detected from the text when omitted",
    )
    key_size: int = Field(
        1,
        ge=0,
        description="Number of key columns; the time column comes right after them",
    )
    assets_path: str = Field("", description="Prefix prepended to asset names")

    @field_validator("last_modified", mode="before")
    @classmethod
    def _token_to_str(cls, value: object) -> object:
        # Timestamps arrive as numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("delimiter")
    @classmethod
    def _check_single_char(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        return value


def load_config(path: str | Path) -> ReaderConfig:
    """Load and validate a reader config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ReaderConfig.model_validate(raw)


def save_config(config: ReaderConfig, path: str | Path) -> None:
    """Serialize a ReaderConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# dialect-ingest reader configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
