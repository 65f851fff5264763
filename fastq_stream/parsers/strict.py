"""
Strict 4-line FASTQ reader.

Every record is exactly four lines: header, sequence, separator and
quality. The reader only checks that the header starts with ``@`` and
that all four lines are present; the separator line is read but its
content is not inspected, and whitespace is trimmed lazily by
``StrictRecord``.

A header without ``@`` is fatal: the 4-line framing can no longer be
trusted, so ``StrictRecords`` stops after yielding the first error.
"""

from __future__ import annotations

import logging

from fastq_stream.exceptions import (
    StrictIncompleteRecordError,
    StrictMissingStartMarkerError,
    StrictParseError,
    StrictStreamError,
)
from fastq_stream.parsers.base import BaseParser, ParseResult
from fastq_stream.records import START_MARKER, StrictRecord
from fastq_stream.source import STREAM_ERRORS, LineSource, read_line_into

logger = logging.getLogger(__name__)


class StrictReader:
    """Read fixed 4-line FASTQ records into caller-owned records."""

    def __init__(self, source: LineSource) -> None:
        self.source = source
        self.sep_line = bytearray()

    def read(self, record: StrictRecord) -> None:
        """Clear *record* and fill it with the next record of the stream.

        At end of stream the record is left empty and no error is raised;
        use ``record.is_empty()`` to detect it.

        Raises:
            StrictMissingStartMarkerError: If the header does not start with ``@``.
            StrictIncompleteRecordError: If the stream ends mid-record.
            StrictStreamError: If the line source fails.
        """
        record.clear()
        del self.sep_line[:]
        try:
            if read_line_into(self.source, record.header) == 0:
                return
            if not record.header.startswith(START_MARKER):
                raise StrictMissingStartMarkerError()
            for buffer in (record.seq, self.sep_line, record.qual):
                if read_line_into(self.source, buffer) == 0:
                    raise StrictIncompleteRecordError()
        except STREAM_ERRORS as e:
            raise StrictStreamError.from_exception(e) from e

    def records(self) -> StrictRecords:
        """Return an iterator over the records of this stream."""
        return StrictRecords(self)


class StrictRecords(BaseParser):
    """Single-pass iterator over a StrictReader.

    Ends at end of stream, or right after yielding the first error.
    Each successful item holds its own StrictRecord.
    """

    variant = "strict"

    def __init__(self, reader: StrictReader | LineSource) -> None:
        if not isinstance(reader, StrictReader):
            reader = StrictReader(reader)
        super().__init__(reader.source)
        self.reader = reader
        self._failed = False

    def _step(self) -> ParseResult | None:
        if self._failed:
            return None
        record = StrictRecord()
        try:
            self.reader.read(record)
        except StrictParseError as e:
            logger.debug("Strict parse failed after %d records: %s", self.records_read, e)
            self._failed = True
            return ParseResult(error=e)
        if record.is_empty():
            logger.debug("End of stream after %d records", self.records_read)
            return None
        return ParseResult(record=record)
