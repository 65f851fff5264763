"""
Descriptive FASTQ reader.

Parses one record per ``next()`` call and reports failures with the
text assembled so far, so a caller can say *where* a file went wrong:

1. Read one byte; end of stream ends iteration, anything but ``@`` is
   a MissingStartMarkerError.
2. Read the header line and split off a trailing description token.
3. Read the sequence line.
4. Read the separator line, which must start with ``+``.
5. Read the quality line and compare its length with the sequence.

A required line that is missing or blank yields an IncompleteRecordError
whose ``prior`` text uses ``<nothing>`` for the lines not yet read.

Each step is independent: after an error the reader keeps its stream
position and the caller may keep pulling items. Only a clean end of
stream at step 1 ends the iteration.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastq_stream.exceptions import (
    MISSING_PLACEHOLDER,
    DescriptiveParseError,
    IncompleteRecordError,
    LengthMismatchError,
    MissingSeparatorError,
    MissingStartMarkerError,
    StreamIOError,
)
from fastq_stream.parsers.base import BaseParser, ParseResult
from fastq_stream.records import SEPARATOR_MARKER, START_MARKER, DescriptiveRecord
from fastq_stream.source import (
    STREAM_ERRORS,
    read_byte,
    read_line,
    strip_terminator,
)

logger = logging.getLogger(__name__)


def split_header(header: str) -> tuple[str, str | None]:
    """Split a header line into ``(id, description)``.

    The last whitespace-delimited token becomes the description when
    whitespace separates it from the rest of the line; otherwise the whole
    line is the id.

    Examples:
        >>> split_header("r1 desc")
        ('r1', 'desc')
        >>> split_header("r1")
        ('r1', None)
    """
    tokens = header.rstrip().rsplit(None, 1)
    if len(tokens) == 2:
        return tokens[0], tokens[1]
    return header.rstrip(), None


class DescriptiveReader(BaseParser):
    """Iterator of ParseResults that keeps going after parse errors."""

    variant = "descriptive"

    def _step(self) -> ParseResult | None:
        try:
            return self._parse_record()
        except DescriptiveParseError as e:
            logger.debug("Descriptive parse failed after %d records: %s", self.records_read, e)
            return ParseResult(error=e)
        except STREAM_ERRORS as e:
            logger.debug("Line source failed: %s", e)
            return ParseResult(error=StreamIOError.from_exception(e))

    def _parse_record(self) -> ParseResult | None:
        at = read_byte(self.source)
        if not at:
            logger.debug("End of stream after %d records", self.records_read)
            return None
        if at != START_MARKER:
            raise MissingStartMarkerError(at[0])

        header = self._read_content_line(lambda: f"@{MISSING_PLACEHOLDER}")
        ident, desc = split_header(header)

        sequence = self._read_content_line(
            lambda: f"@{header}\n{MISSING_PLACEHOLDER}\n+\n{MISSING_PLACEHOLDER}"
        )

        sep_line = read_line(self.source)
        if not sep_line:
            raise IncompleteRecordError(
                f"@{header}\n{sequence}\n{MISSING_PLACEHOLDER}\n{MISSING_PLACEHOLDER}"
            )
        if not sep_line.startswith(SEPARATOR_MARKER):
            raise MissingSeparatorError(f"@{header}\n{sequence}", sep_line[0])

        quality = self._read_content_line(
            lambda: f"@{header}\n{sequence}\n+\n{MISSING_PLACEHOLDER}"
        )

        seq_bytes = sequence.encode("utf-8")
        qual_bytes = quality.encode("utf-8")
        if len(seq_bytes) != len(qual_bytes):
            raise LengthMismatchError(sequence, quality)

        return ParseResult(
            record=DescriptiveRecord(
                id=ident,
                description=desc,
                sequence=seq_bytes,
                quality=qual_bytes,
            )
        )

    def _read_content_line(self, prior: Callable[[], str]) -> str:
        """Read a line that must have content besides its terminator.

        Args:
            prior: Callable building the diagnostic text used when the
                line is missing or blank.

        Raises:
            IncompleteRecordError: If the line is missing or blank.
            StreamIOError: If the line is not valid UTF-8.
        """
        line = strip_terminator(read_line(self.source))
        if not line:
            raise IncompleteRecordError(prior())
        try:
            return line.decode("utf-8")
        except UnicodeDecodeError as e:
            raise StreamIOError.from_exception(e) from e
