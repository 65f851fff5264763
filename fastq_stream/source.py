"""
Line source contract for fastq-stream.

The parsers never open files or sockets. They consume any object that
behaves like a buffered binary stream: ``io.BufferedReader`` from
``open(path, "rb")``, ``gzip.open(path, "rb")``, ``io.BytesIO``, a
socket's ``makefile("rb")``, and so on. Buffering and decompression are
the caller's business.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
    """What the parsers need from the IO layer.

    ``readline()`` returns one line including its terminator, or ``b""``
    at end of stream. A final line without a terminator is returned as-is.
    ``read(size)`` is used by the descriptive reader to look at the single
    leading byte of a record.
    """

    def readline(self, size: int = -1, /) -> bytes: ...

    def read(self, size: int = -1, /) -> bytes: ...


def _require_bytes(chunk: object) -> bytes:
    if not isinstance(chunk, (bytes, bytearray)):
        raise TypeError(
            f"Line source returned {type(chunk).__name__}, expected bytes. "
            "Open the input in binary mode (e.g., open(path, 'rb'))."
        )
    return chunk


def read_line_into(source: LineSource, buffer: bytearray) -> int:
    """Append the next line of *source* (terminator included) to *buffer*.

    Returns:
        Number of bytes read; ``0`` means end of stream.
    """
    line = _require_bytes(source.readline())
    buffer += line
    return len(line)


def read_line(source: LineSource) -> bytes:
    """Return the next line of *source* (terminator included)."""
    return bytes(_require_bytes(source.readline()))


def read_byte(source: LineSource) -> bytes:
    """Return the next single byte of *source*, ``b""`` at end of stream."""
    return bytes(_require_bytes(source.read(1)))


def strip_terminator(line: bytes) -> bytes:
    """Drop one trailing ``\\n`` if present. Carriage returns are content."""
    if line.endswith(b"\n"):
        return line[:-1]
    return line


# Failures of the underlying stream that parsers turn into error values.
# gzip raises EOFError for a truncated member.
STREAM_ERRORS: tuple[type[BaseException], ...] = (OSError, EOFError)
