"""
Shared test fixtures and FASTQ samples for fastq-stream tests.

All sample inputs are defined here as module-level byte constants so the
unit and integration tests agree on what a well-formed file looks like.
Streams are in-memory (``io.BytesIO``); nothing touches disk except the
config YAML tests, which use ``tmp_path``.
"""

import io

import pytest

# ---------------------------------------------------------------------------
# Sample inputs -- edit here if the fixtures need to change
# ---------------------------------------------------------------------------
SINGLE_RECORD = b"@r1 desc\nACGT\n+\n!!!!\n"

TWO_RECORDS = (
    b"@read1 sample=A\n"
    b"GATTACA\n"
    b"+\n"
    b"IIIIIII\n"
    b"@read2\n"
    b"TTGC\n"
    b"+read2\n"
    b"#2?I\n"
)

NO_FINAL_NEWLINE = b"@r1\nACGT\n+\n!!!!"

LENGTH_MISMATCH = b"@r1\nACGT\n+\n!!!\n"

BAD_START = b"Xr1\nACGT\n+\n!!!!\n"

BAD_SEPARATOR = b"@r1\nACGT\n-\n!!!!\n"


def stream(data: bytes) -> io.BytesIO:
    return io.BytesIO(data)


@pytest.fixture
def two_records() -> io.BytesIO:
    return stream(TWO_RECORDS)


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs through the public API)",
    )
