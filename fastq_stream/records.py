"""
FASTQ record types for fastq-stream.

Both parser variants hand out records through the same ``Record``
interface (id, description, sequence, quality, ``is_empty()``,
``clear()``, ``check()``) but store their fields differently:

- ``StrictRecord`` keeps the raw line bytes, terminators included, in
  reusable buffers and trims trailing whitespace lazily in its accessors.
  ``StrictReader.read()`` clears and refills the same instance, so a
  caller can walk a file without allocating a record per read.
- ``DescriptiveRecord`` is filled once with already-clean values by the
  descriptive reader.

Record invariants are never enforced at construction time (a record is
transiently invalid while a parser fills it). They are checked on demand
by ``check()``, which raises the first violation in a fixed order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fastq_stream.exceptions import (
    MissingIdError,
    NonAsciiQualityError,
    NonAsciiSequenceError,
    RecordValidationError,
    UnequalLengthError,
)

START_MARKER = b"@"
SEPARATOR_MARKER = b"+"


class Record(ABC):
    """Common interface of the two FASTQ record shapes.

    Attributes:
        id: Identifier following the ``@`` marker, ``None`` when absent.
        description: Trailing header text, ``None`` when absent.
        sequence: Sequence line without its terminator.
        quality: Quality line without its terminator.
    """

    id: str | None
    description: str | None
    sequence: bytes
    quality: bytes

    __slots__ = ()

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if every field is empty or absent."""

    @abstractmethod
    def clear(self) -> None:
        """Reset every field to its empty/absent state."""

    def check(self) -> None:
        """Validate the record.

        Checks, in order: non-empty id (a fully empty record is valid),
        ASCII sequence, ASCII quality, equal sequence/quality length.
        Only the first violation is reported. The record is never modified.

        Raises:
            MissingIdError: If the id is absent or empty on a non-empty record.
            NonAsciiSequenceError: If the sequence has non-ASCII bytes.
            NonAsciiQualityError: If the quality has non-ASCII bytes.
            UnequalLengthError: If sequence and quality lengths differ.
        """
        if not self.id and not self.is_empty():
            raise MissingIdError()
        sequence = self.sequence
        quality = self.quality
        if not sequence.isascii():
            raise NonAsciiSequenceError()
        if not quality.isascii():
            raise NonAsciiQualityError()
        if len(sequence) != len(quality):
            raise UnequalLengthError()

    def is_valid(self) -> bool:
        """Return True if ``check()`` passes."""
        try:
            self.check()
        except RecordValidationError:
            return False
        return True


# ---------------------------------------------------------------------------
# Strict variant
# ---------------------------------------------------------------------------

class StrictRecord(Record):
    """Record backed by the raw lines read by ``StrictReader``.

    The buffers hold exactly what the line source returned, including
    line terminators; the properties strip trailing whitespace on access.
    """

    __slots__ = ("header", "seq", "qual")

    def __init__(self) -> None:
        self.header = bytearray()
        self.seq = bytearray()
        self.qual = bytearray()

    def _header_parts(self) -> list[str] | None:
        if not self.header:
            return None
        text = bytes(self.header[1:]).rstrip().decode("utf-8", errors="replace")
        return text.split(" ", 1)

    @property
    def id(self) -> str | None:  # type: ignore[override]
        parts = self._header_parts()
        return parts[0] if parts is not None else None

    @property
    def description(self) -> str | None:  # type: ignore[override]
        parts = self._header_parts()
        if parts is None or len(parts) < 2:
            return None
        return parts[1]

    @property
    def sequence(self) -> bytes:  # type: ignore[override]
        return bytes(self.seq).rstrip()

    @property
    def quality(self) -> bytes:  # type: ignore[override]
        return bytes(self.qual).rstrip()

    def is_empty(self) -> bool:
        return not self.header and not self.seq and not self.qual

    def clear(self) -> None:
        # In place, so the buffers keep their capacity between reads.
        del self.header[:]
        del self.seq[:]
        del self.qual[:]

    def copy(self) -> StrictRecord:
        """Return an independent record with the same content."""
        other = StrictRecord()
        other.header += self.header
        other.seq += self.seq
        other.qual += self.qual
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrictRecord):
            return NotImplemented
        return (
            self.header == other.header
            and self.seq == other.seq
            and self.qual == other.qual
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"StrictRecord(id={self.id!r}, description={self.description!r}, "
            f"sequence={self.sequence!r}, quality={self.quality!r})"
        )


# ---------------------------------------------------------------------------
# Descriptive variant
# ---------------------------------------------------------------------------

@dataclass
class DescriptiveRecord(Record):
    """Record produced by ``DescriptiveReader`` with pre-trimmed fields."""

    id: str = ""
    description: str | None = None
    sequence: bytes = b""
    quality: bytes = b""

    def is_empty(self) -> bool:
        return (
            not self.id
            and self.description is None
            and not self.sequence
            and not self.quality
        )

    def clear(self) -> None:
        self.id = ""
        self.description = None
        self.sequence = b""
        self.quality = b""
