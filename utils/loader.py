"""
Edge file loader for Reddit hyperlink dumps.

Reads tab-separated files (the published dump format) and comma-separated
files with the same header.

Time Complexity: O(n) where n = number of rows
Memory: O(n)
"""

import io
import logging
import os
from typing import IO

import pandas as pd

from app.config import MAX_EDGE_RECORDS, SOURCE_COLUMN, TARGET_COLUMN

logger = logging.getLogger(__name__)


def separator_for(filename: str) -> str:
    """Pick the column separator from the file suffix (tab unless .csv)."""
    return "," if os.path.splitext(filename)[1].lower() == ".csv" else "\t"


def _truncate(df: pd.DataFrame, max_records: int) -> pd.DataFrame:
    if max_records > 0 and len(df) > max_records:
        logger.info("Truncating input from %d to %d records", len(df), max_records)
        return df.head(max_records)
    return df


def read_edge_records(
    source: str | IO[bytes],
    sep: str | None = None,
    max_records: int = MAX_EDGE_RECORDS,
) -> pd.DataFrame:
    """Load an edge file from a path or binary stream into a DataFrame."""
    if sep is None:
        name = source if isinstance(source, str) else getattr(source, "name", "")
        sep = separator_for(str(name))
    df = pd.read_csv(source, sep=sep, dtype={SOURCE_COLUMN: str, TARGET_COLUMN: str})
    return _truncate(df, max_records)


def read_edge_bytes(
    contents: bytes,
    filename: str,
    max_records: int = MAX_EDGE_RECORDS,
) -> pd.DataFrame:
    """Load an uploaded edge file."""
    return read_edge_records(io.BytesIO(contents), separator_for(filename), max_records)
