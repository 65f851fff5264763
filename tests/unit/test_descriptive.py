"""
Unit tests for the descriptive reader (fastq_stream.parsers.descriptive).

Covers header splitting, each error kind with its diagnostic context,
wrapped stream failures, and the "keep going after an error" behaviour
that sets this reader apart from the strict one.
"""

import io

import pytest

from fastq_stream.exceptions import (
    IncompleteRecordError,
    LengthMismatchError,
    MissingSeparatorError,
    MissingStartMarkerError,
    StreamIOError,
)
from fastq_stream.parsers.descriptive import DescriptiveReader, split_header
from fastq_stream.records import DescriptiveRecord
from tests.conftest import (
    BAD_SEPARATOR,
    BAD_START,
    LENGTH_MISMATCH,
    NO_FINAL_NEWLINE,
    SINGLE_RECORD,
    TWO_RECORDS,
)


def _parse(data: bytes) -> list:
    return list(DescriptiveReader(io.BytesIO(data)))


def _only_error(data: bytes):
    results = _parse(data)
    assert len(results) == 1
    assert not results[0].ok
    return results[0].error


class _BrokenSource:
    """Line source whose readline() always fails."""

    def read(self, size: int = -1) -> bytes:
        return b"@"

    def readline(self, size: int = -1) -> bytes:
        raise OSError("connection reset")


# ---------------------------------------------------------------------------
# split_header
# ---------------------------------------------------------------------------

class TestSplitHeader:
    """The last whitespace-separated token becomes the description."""

    def test_id_only(self):
        assert split_header("r1") == ("r1", None)

    def test_id_and_description(self):
        assert split_header("r1 desc") == ("r1", "desc")

    def test_last_token_only(self):
        assert split_header("r1 lane 1:N:0") == ("r1 lane", "1:N:0")

    def test_whitespace_run_removed(self):
        assert split_header("r1 \tdesc") == ("r1", "desc")

    def test_trailing_whitespace_ignored(self):
        assert split_header("r1  ") == ("r1", None)


# ---------------------------------------------------------------------------
# Successful parses
# ---------------------------------------------------------------------------

class TestDescriptiveRecords:
    """Well-formed input parses field-exactly."""

    def test_single_record(self):
        (result,) = _parse(SINGLE_RECORD)
        assert result.unwrap() == DescriptiveRecord("r1", "desc", b"ACGT", b"!!!!")

    def test_two_records(self, two_records):
        records = [r.unwrap() for r in DescriptiveReader(two_records)]
        assert [r.id for r in records] == ["read1", "read2"]
        assert records[0].description == "sample=A"
        assert records[1].description is None
        assert records[1].quality == b"#2?I"

    def test_separator_may_repeat_id(self):
        results = _parse(b"@r1\nAC\n+r1 again\n!!\n")
        assert results[0].ok

    def test_final_line_without_newline(self):
        (result,) = _parse(NO_FINAL_NEWLINE)
        assert result.unwrap().quality == b"!!!!"

    def test_carriage_return_is_content(self):
        (result,) = _parse(b"@r1\nAC\r\n+\n!!\r\n")
        assert result.unwrap().sequence == b"AC\r"

    def test_records_are_valid(self):
        for result in _parse(TWO_RECORDS):
            result.unwrap().check()

    def test_empty_input(self):
        assert _parse(b"") == []


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestDescriptiveErrors:
    """Each error kind carries the text read so far."""

    def test_missing_start_marker(self):
        parser = DescriptiveReader(io.BytesIO(BAD_START))
        error = next(parser).error
        assert isinstance(error, MissingStartMarkerError)
        assert error.byte == ord("X")
        assert str(error) == "Encountered b'X' instead of @"

    def test_header_missing(self):
        error = _only_error(b"@\n")
        assert isinstance(error, IncompleteRecordError)
        assert error.prior == "@<nothing>"

    def test_header_at_end_of_stream(self):
        error = _only_error(b"@")
        assert error == IncompleteRecordError("@<nothing>")

    def test_sequence_missing(self):
        error = _only_error(b"@r1 desc\n")
        assert error == IncompleteRecordError("@r1 desc\n<nothing>\n+\n<nothing>")

    def test_blank_sequence_line(self):
        results = _parse(b"@r1\n\n+\n\n")
        assert results[0].error == IncompleteRecordError("@r1\n<nothing>\n+\n<nothing>")

    def test_separator_missing_at_end_of_stream(self):
        error = _only_error(b"@r1\nACGT\n")
        assert error == IncompleteRecordError("@r1\nACGT\n<nothing>\n<nothing>")

    def test_wrong_separator(self):
        results = _parse(BAD_SEPARATOR)
        error = results[0].error
        assert isinstance(error, MissingSeparatorError)
        assert error.prior == "@r1\nACGT"
        assert error.byte == ord("-")
        assert "instead of +" in str(error)

    def test_quality_missing(self):
        error = _only_error(b"@r1\nACGT\n+\n")
        assert error == IncompleteRecordError("@r1\nACGT\n+\n<nothing>")

    def test_length_mismatch(self):
        error = _only_error(LENGTH_MISMATCH)
        assert isinstance(error, LengthMismatchError)
        assert error.sequence == "ACGT"
        assert error.quality == "!!!"
        assert str(error) == "The lengths do not match:\nseq:  'ACGT'\nqual: '!!!'"

    def test_invalid_utf8_is_stream_error(self):
        parser = DescriptiveReader(io.BytesIO(b"@r\xff1\nACGT\n+\n!!!!\n"))
        error = next(parser).error
        assert isinstance(error, StreamIOError)
        assert error.kind == "UnicodeDecodeError"

    def test_source_failure_is_wrapped(self):
        parser = DescriptiveReader(_BrokenSource())
        error = next(parser).error
        assert error == StreamIOError("OSError", "connection reset")
        assert str(error) == "connection reset"


# ---------------------------------------------------------------------------
# Iteration behaviour
# ---------------------------------------------------------------------------

class TestDescriptiveIteration:
    """Iteration continues after errors, ends only at a clean end of stream."""

    def test_continues_after_error(self):
        results = _parse(LENGTH_MISMATCH + SINGLE_RECORD)
        assert len(results) == 2
        assert isinstance(results[0].error, LengthMismatchError)
        assert results[1].unwrap().id == "r1"

    def test_bad_start_consumes_one_byte_per_step(self):
        results = _parse(b"XY" + SINGLE_RECORD)
        assert [r.error.byte for r in results[:2]] == [ord("X"), ord("Y")]
        assert results[2].ok

    def test_exhausted_for_good(self):
        parser = DescriptiveReader(io.BytesIO(SINGLE_RECORD))
        assert len(list(parser)) == 1
        with pytest.raises(StopIteration):
            next(parser)

    def test_counters(self):
        parser = DescriptiveReader(io.BytesIO(LENGTH_MISMATCH + SINGLE_RECORD))
        list(parser)
        assert parser.records_read == 1
        assert parser.errors_seen == 1
