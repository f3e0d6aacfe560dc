"""
Hyperlink record validation.

Ensures an uploaded edge table has the required columns with usable values.

Time Complexity: O(n) where n = number of rows
Memory: O(1) additional beyond the DataFrame
"""

from typing import Any

import pandas as pd

from app.config import LABEL_COLUMN, SOURCE_COLUMN, TARGET_COLUMN

REQUIRED_COLUMNS = [
    SOURCE_COLUMN,
    TARGET_COLUMN,
    LABEL_COLUMN,
]


def validate_edge_records(df: Any) -> str | None:
    """
    Validate hyperlink table structure. Returns error message if invalid, None if valid.

    Checks:
        1. All required columns present
        2. At least one record
        3. No null or blank subreddit names
        4. LINK_SENTIMENT holds integer labels
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        return f"Missing required columns: {', '.join(missing)}"

    if df.empty:
        return "Edge file is empty."

    null_cols = [col for col in REQUIRED_COLUMNS if df[col].isnull().any()]
    if null_cols:
        return f"Null values found in columns: {', '.join(null_cols)}"

    blank_cols = [
        col for col in (SOURCE_COLUMN, TARGET_COLUMN)
        if (df[col].astype(str).str.strip() == "").any()
    ]
    if blank_cols:
        return f"Blank node names found in columns: {', '.join(blank_cols)}"

    try:
        labels = pd.to_numeric(df[LABEL_COLUMN], errors="raise")
    except (ValueError, TypeError):
        return f"Column '{LABEL_COLUMN}' must contain numeric values."

    if not (labels == labels.round()).all():
        return f"Column '{LABEL_COLUMN}' must contain integer labels."

    return None
