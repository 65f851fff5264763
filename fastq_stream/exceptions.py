"""
Custom exception hierarchy for fastq-stream.

Why a custom hierarchy:
- Callers can catch one parser variant's failures (StrictParseError vs
  DescriptiveParseError) or a single kind (e.g., MissingSeparatorError)
  without string-matching messages.
- Parse errors are handed out as *values* inside ``ParseResult`` rather
  than raised out of the iterator, so every error here is a plain,
  copyable object that compares equal by kind and payload.

Three independent groups live here:

- RecordValidationError: returned by ``Record.check()`` on request.
- StrictParseError: failures of the fixed 4-line strict reader.
- DescriptiveParseError: failures of the descriptive reader, each carrying
  the text assembled so far for "failure near X" diagnostics.
"""

from __future__ import annotations

# Placeholder used in diagnostic text for lines that were never read.
MISSING_PLACEHOLDER = "<nothing>"


class FastqStreamError(Exception):
    """Base exception for all fastq-stream errors."""

    description: str = "FASTQ error"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ConfigValidationError(FastqStreamError):
    """Raised when a reader config file fails validation (e.g., empty file)."""

    description = "Invalid reader configuration"


# ---------------------------------------------------------------------------
# Record validation
# ---------------------------------------------------------------------------

class RecordValidationError(FastqStreamError):
    """Raised by ``Record.check()`` for the first violated record invariant."""

    description = "Invalid FASTQ record"

    def __str__(self) -> str:
        return self.description


class MissingIdError(RecordValidationError):
    description = "Expecting id for FastQ record."


class NonAsciiSequenceError(RecordValidationError):
    description = "Non-ascii character found in sequence."


class NonAsciiQualityError(RecordValidationError):
    description = "Non-ascii character found in qualities."


class UnequalLengthError(RecordValidationError):
    description = "Unequal length of sequence and qualities."


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------

class ParseError(FastqStreamError):
    """Base for errors produced while parsing a record from a stream."""

    description = "FASTQ parse error"


def describe_io_failure(exc: BaseException) -> tuple[str, str]:
    """Normalise an underlying stream failure into ``(description, message)``.

    The original exception object is not kept, so the error values built
    from this pair stay copyable and picklable.
    """
    return type(exc).__name__, str(exc)


# -- Strict variant ---------------------------------------------------------

class StrictParseError(ParseError):
    """Base for failures of the fixed 4-line strict reader."""

    description = "FASTQ parse error (strict)"

    def __str__(self) -> str:
        return self.description


class StrictMissingStartMarkerError(StrictParseError):
    """The first line of a record is present but does not start with ``@``."""

    description = "Expected @ at record start."


class StrictIncompleteRecordError(StrictParseError):
    """The stream ended before all four lines of a record were read."""

    description = (
        "Incomplete record. Each FastQ record has to consist of 4 lines: "
        "header, sequence, separator and qualities."
    )


class StrictStreamError(StrictParseError):
    """The underlying line source failed while the strict reader was reading."""

    description = "I/O failure while reading FASTQ"

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(kind, message)
        self.kind = kind
        self.message = message

    @classmethod
    def from_exception(cls, exc: BaseException) -> StrictStreamError:
        return cls(*describe_io_failure(exc))

    def __str__(self) -> str:
        return self.message


# -- Descriptive variant ----------------------------------------------------

class DescriptiveParseError(ParseError):
    """Base for failures of the descriptive reader."""

    description = "FASTQ parse error (descriptive)"


class MissingStartMarkerError(DescriptiveParseError):
    """The first byte of a record is not ``@``."""

    description = "No @ at FASTQ start"

    def __init__(self, byte: int) -> None:
        super().__init__(byte)
        self.byte = byte

    def __str__(self) -> str:
        return f"Encountered {bytes([self.byte])!r} instead of @"


class MissingSeparatorError(DescriptiveParseError):
    """The line after the sequence does not start with ``+``."""

    description = "No + after FASTQ sequence"

    def __init__(self, prior: str, byte: int) -> None:
        super().__init__(prior, byte)
        self.prior = prior
        self.byte = byte

    def __str__(self) -> str:
        return f"Encountered {bytes([self.byte])!r} instead of + after {self.prior!r}"


class IncompleteRecordError(DescriptiveParseError):
    """A required line was empty or missing.

    ``prior`` is a best-effort reconstruction of the record read so far,
    with ``<nothing>`` standing in for lines that never arrived.
    """

    description = "Incomplete FASTQ record"

    def __init__(self, prior: str) -> None:
        super().__init__(prior)
        self.prior = prior

    def __str__(self) -> str:
        return f"Premature EOF after {self.prior!r}"


class LengthMismatchError(DescriptiveParseError):
    """Sequence and quality lines differ in length."""

    description = "FASTQ with differing length"

    def __init__(self, sequence: str, quality: str) -> None:
        super().__init__(sequence, quality)
        self.sequence = sequence
        self.quality = quality

    def __str__(self) -> str:
        return (
            "The lengths do not match:\n"
            f"seq:  {self.sequence!r}\n"
            f"qual: {self.quality!r}"
        )


class StreamIOError(DescriptiveParseError):
    """The underlying line source failed while the descriptive reader was reading."""

    description = "I/O failure while reading FASTQ"

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(kind, message)
        self.kind = kind
        self.message = message

    @classmethod
    def from_exception(cls, exc: BaseException) -> StreamIOError:
        return cls(*describe_io_failure(exc))

    def __str__(self) -> str:
        return self.message
