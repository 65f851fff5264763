"""
fastq-stream: streaming FASTQ record parser.

Public API surface:

- ``parse(source, variant=...)`` -- raw parser iterator over a binary
  line source. Yields ``ParseResult`` items (record or error) lazily.

- ``parse_with_config(source, config)`` -- same, with the error policy
  from a ``ReaderConfig`` (or a YAML path) applied: stop or skip on
  error, optional record validation.

Two parser variants are available:

- ``"strict"``: fixed 4-line records, separator unchecked, stops at the
  first error.
- ``"descriptive"``: splits id/description, enforces the ``+`` separator,
  errors carry the text read so far, keeps going after an error.

The caller owns the stream::

    with open("reads.fastq", "rb") as fh:
        for result in fastq_stream.parse(fh):
            record = result.unwrap()
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from fastq_stream._pipeline import iter_results, make_parser
from fastq_stream.config import ReaderConfig, load_config, save_config
from fastq_stream.exceptions import (
    FastqStreamError,
    ParseError,
    RecordValidationError,
)
from fastq_stream.parsers import (
    BaseParser,
    DescriptiveReader,
    ParseResult,
    StrictReader,
    StrictRecords,
)
from fastq_stream.records import DescriptiveRecord, Record, StrictRecord
from fastq_stream.source import LineSource

__version__ = "0.1.0"

__all__ = [
    "parse",
    "parse_with_config",
    "ReaderConfig",
    "load_config",
    "save_config",
    "ParseResult",
    "Record",
    "StrictRecord",
    "DescriptiveRecord",
    "StrictReader",
    "StrictRecords",
    "DescriptiveReader",
    "FastqStreamError",
    "ParseError",
    "RecordValidationError",
]

logger = logging.getLogger(__name__)


def parse(source: LineSource, variant: str = "descriptive") -> BaseParser:
    """Return a lazy, single-pass iterator of ParseResults over *source*.

    Args:
        source: Binary stream with ``readline()`` / ``read()``, e.g. a
            file opened with ``"rb"`` or an ``io.BytesIO``.
        variant: ``"strict"`` or ``"descriptive"``.

    Raises:
        ValueError: If *variant* is unknown.
    """
    return make_parser(source, variant)


def parse_with_config(
    source: LineSource,
    config: ReaderConfig | str | Path | None = None,
) -> Iterator[ParseResult]:
    """Parse *source* applying the error policy of *config*.

    Args:
        source: Binary line source.
        config: A ReaderConfig, a path to a YAML config, or ``None`` for
            the defaults (descriptive variant, stop on first error).

    Raises:
        FileNotFoundError: If *config* is a path that does not exist.
        ConfigValidationError: If the config file is empty.
    """
    if config is None:
        config = ReaderConfig()
    elif not isinstance(config, ReaderConfig):
        logger.info("parse_with_config() -- loading config from %s", config)
        config = load_config(config)
    return iter_results(source, config)
