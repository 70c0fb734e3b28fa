"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is a list of per-year DataFrames (as produced by
``fars.data.reader.fars_read_years``); output is a month × year count table.

Package Location: src/fars/analysis/summary.py

Missing combinations:
    A (month, year) pair with no accidents has no group in the count step,
    so the pivot leaves that cell as ``NaN``.  Cells are not zero-filled;
    columns containing a gap are therefore float rather than int.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

_MONTH_COL: str = "MONTH"
_YEAR_COL: str = "year"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize_months(frames: Sequence[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per month for each year and pivot years into columns.

    ``None`` entries (years that failed to load) are skipped; they add no
    rows and no column.

    Args:
        frames: Per-year DataFrames, each with ``MONTH`` and ``year``
            columns.  May contain ``None``.

    Returns:
        DataFrame with a leading ``MONTH`` column (ascending) and one column
        per distinct year (ascending), holding the row count for that
        month/year.  An empty frame with only a ``MONTH`` column is returned
        when no year contributed data.
    """
    loaded: List[pd.DataFrame] = [f for f in frames if f is not None]
    if not loaded:
        return pd.DataFrame(columns=[_MONTH_COL])

    combined = pd.concat(loaded, ignore_index=True)

    counts = (
        combined.groupby([_YEAR_COL, _MONTH_COL])
        .size()
        .reset_index(name="n")
    )

    wide = (
        counts.pivot(index=_MONTH_COL, columns=_YEAR_COL, values="n")
        .sort_index()
        .sort_index(axis=1)
        .reset_index()
    )
    wide.columns.name = None
    return wide
