"""
Tabular reporting of parse results.

Turns a stream of ParseResult items into a pandas DataFrame, one row per
item, for diagnostics: which records parsed, which failed and why.
Record bytes are not copied into the frame; only lengths are kept.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import pandas as pd

from fastq_stream.parsers.base import ParseResult

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "index",
    "ok",
    "id",
    "description",
    "length",
    "error_kind",
    "error_message",
]


def _row(index: int, result: ParseResult) -> dict[str, Any]:
    if result.ok:
        record = result.unwrap()
        return {
            "index": index,
            "ok": True,
            "id": record.id,
            "description": record.description,
            "length": len(record.sequence),
            "error_kind": None,
            "error_message": None,
        }
    return {
        "index": index,
        "ok": False,
        "id": None,
        "description": None,
        "length": None,
        "error_kind": type(result.error).__name__,
        "error_message": str(result.error),
    }


def results_to_frame(results: Iterable[ParseResult]) -> pd.DataFrame:
    """Consume *results* and tabulate them.

    Returns:
        DataFrame with columns ``REPORT_COLUMNS``. ``length`` is a nullable
        integer column (``pd.NA`` for error rows).
    """
    rows = [_row(i, result) for i, result in enumerate(results)]
    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    df["length"] = df["length"].astype("Int64")
    df["ok"] = df["ok"].astype(bool)
    logger.debug("Tabulated %d parse results", len(df))
    return df


def summarize(df: pd.DataFrame) -> dict[str, Any]:
    """Summarize a frame built by ``results_to_frame()``.

    Returns:
        Dict with keys ``records`` (int), ``errors`` (int) and
        ``errors_by_kind`` (dict[str, int]).
    """
    failed = df[~df["ok"]]
    return {
        "records": int(df["ok"].sum()),
        "errors": len(failed),
        "errors_by_kind": {
            str(kind): int(count)
            for kind, count in failed["error_kind"].value_counts().items()
        },
    }
