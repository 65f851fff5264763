"""
Parsers sub-package for fastq-stream.

Contains the two FASTQ parsing strategies. Both wrap a LineSource and
yield ParseResult items (record or error) lazily, one record at a time.

Design: Strategy Pattern
- base.py defines ParseResult and the BaseParser ABC (protocol).
- strict.py implements StrictReader / StrictRecords: fixed 4-line layout,
  separator content unchecked, stops at the first error.
- descriptive.py implements DescriptiveReader: header split into id and
  description, ``+`` separator enforced, context-carrying errors, keeps
  going after an error.

The pipeline (_pipeline.py) selects a parser by variant name at runtime.
"""

from fastq_stream.parsers.base import BaseParser, ParseResult
from fastq_stream.parsers.descriptive import DescriptiveReader, split_header
from fastq_stream.parsers.strict import StrictReader, StrictRecords

__all__ = [
    "BaseParser",
    "DescriptiveReader",
    "ParseResult",
    "StrictReader",
    "StrictRecords",
    "split_header",
]
