"""
Configuration model and YAML I/O for fastq-stream.

``ReaderConfig`` maps 1:1 to a small YAML file describing how a stream
should be parsed and what to do with bad records:

    variant: descriptive   # "strict" | "descriptive"
    on_error: stop         # "stop" | "skip"
    validate: false        # run Record.check() on each parsed record
    max_errors: null       # with on_error=skip, give up after N errors

Key functions:
- load_config(path) -> ReaderConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from fastq_stream.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ReaderConfig(BaseModel):
    """How to parse a FASTQ stream and react to bad records."""

    variant: Literal["strict", "descriptive"] = Field(
        "descriptive",
        description="'strict' for the fixed 4-line reader, 'descriptive' for the context-carrying one",
    )
    on_error: Literal["stop", "skip"] = Field(
        "stop",
        description="'stop' ends iteration after the first error; 'skip' logs it and continues",
    )
    validate_records: bool = Field(
        False,
        alias="validate",
        description="If True, run Record.check() on every parsed record",
    )
    max_errors: int | None = Field(
        None,
        description="With on_error='skip', stop after this many errors",
    )

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _check_max_errors(self) -> ReaderConfig:
        if self.max_errors is None:
            return self
        if self.max_errors < 1:
            raise ValueError(f"max_errors must be a positive integer, got {self.max_errors}")
        if self.on_error != "skip":
            raise ValueError("max_errors is only meaningful with on_error='skip'")
        return self


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
    data = config.model_dump(mode="json", by_alias=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# fastq-stream reader configuration\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)
