"""
Internal pipeline orchestration for fastq-stream.

Selects a parser variant by name and applies the caller's error policy
(``ReaderConfig``) on top of the raw ParseResult stream:

1. Optional record validation (``Record.check()``), turning invalid
   records into error items.
2. ``on_error='stop'``: end after the first error item.
3. ``on_error='skip'``: log the error and keep going, up to
   ``max_errors`` errors.

The parsers themselves make no policy decisions. This module is **not**
part of the public API; use ``fastq_stream.parse_with_config()``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from fastq_stream.config import ReaderConfig
from fastq_stream.exceptions import RecordValidationError
from fastq_stream.parsers.base import BaseParser, ParseResult
from fastq_stream.parsers.descriptive import DescriptiveReader
from fastq_stream.parsers.strict import StrictRecords
from fastq_stream.source import LineSource

logger = logging.getLogger(__name__)

# Maps variant name to parser class
_PARSER_MAP: dict[str, type[BaseParser]] = {
    "strict": StrictRecords,
    "descriptive": DescriptiveReader,
}


def make_parser(source: LineSource, variant: str = "descriptive") -> BaseParser:
    """Build the parser for *variant* over *source*.

    Raises:
        ValueError: If *variant* is not a known parser name.
    """
    parser_cls = _PARSER_MAP.get(variant)
    if parser_cls is None:
        raise ValueError(
            f"Unknown parser variant: '{variant}'. "
            f"Supported variants: {sorted(_PARSER_MAP)}"
        )
    return parser_cls(source)


def _validated(result: ParseResult) -> ParseResult:
    """Turn a record failing ``check()`` into an error item."""
    if result.record is None:
        return result
    try:
        result.record.check()
    except RecordValidationError as e:
        return ParseResult(error=e)
    return result


def iter_results(source: LineSource, config: ReaderConfig) -> Iterator[ParseResult]:
    """Parse *source* with the variant and error policy in *config*.

    Yields:
        ParseResult items in input order. With ``on_error='skip'``,
        error items are still yielded (after being logged) so callers
        can count or report them.
    """
    parser = make_parser(source, config.variant)
    logger.info(
        "Parsing FASTQ stream (variant=%s, on_error=%s, validate=%s)",
        config.variant, config.on_error, config.validate_records,
    )

    records = 0
    errors = 0
    for result in parser:
        if config.validate_records:
            result = _validated(result)

        if result.ok:
            records += 1
            yield result
            continue

        errors += 1
        yield result
        if config.on_error == "stop":
            logger.info("Stopping at first error after %d records: %s", records, result.error)
            break
        logger.warning("Skipping bad record #%d: %s", errors, result.error)
        if config.max_errors is not None and errors >= config.max_errors:
            logger.warning("Reached max_errors=%d, stopping", config.max_errors)
            break

    logger.info("Parsed %d records, %d errors", records, errors)
