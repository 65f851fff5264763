"""
Base parser protocol / ABC for fastq-stream.

All parser variants implement this interface. The contract is:
1. A parser wraps a LineSource and is itself a single-pass iterator.
2. Each item is a ParseResult holding either a record or the parse
   error for that record. ``__next__`` never raises anything except
   StopIteration; failures travel as values.

Why an ABC:
- Enforces a consistent interface across the strict and descriptive
  variants.
- Lets the pipeline pick a variant by name without caring which one it got.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fastq_stream.exceptions import FastqStreamError
from fastq_stream.records import Record
from fastq_stream.source import LineSource


@dataclass
class ParseResult:
    """One item produced by a parser.

    Exactly one of ``record`` / ``error`` is set.

    Attributes:
        record: The parsed record on success.
        error: The error for this item on failure. Usually a ParseError;
            the pipeline may also put a RecordValidationError here when
            validation is enabled.
    """

    record: Record | None = None
    error: FastqStreamError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Record:
        """Return the record, or raise the carried error."""
        if self.error is not None:
            raise self.error
        assert self.record is not None
        return self.record


class BaseParser(ABC):
    """Abstract base class for FASTQ parser variants.

    Subclasses implement ``_step()``, which returns the next ParseResult
    or ``None`` once the stream is cleanly exhausted. Once ``_step()``
    returns ``None`` the parser stays exhausted.
    """

    variant: str = ""

    def __init__(self, source: LineSource) -> None:
        self.source = source
        self._exhausted = False
        self.records_read = 0
        self.errors_seen = 0

    @abstractmethod
    def _step(self) -> ParseResult | None:
        """Parse one item from the source."""

    def __iter__(self) -> BaseParser:
        return self

    def __next__(self) -> ParseResult:
        if self._exhausted:
            raise StopIteration
        result = self._step()
        if result is None:
            self._exhausted = True
            raise StopIteration
        if result.ok:
            self.records_read += 1
        else:
            self.errors_seen += 1
        return result
