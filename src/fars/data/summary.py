"""
FARS Summary Engine (Imperative Shell)

Loads the requested years through ``reader.fars_read_years`` and delegates
the count/pivot to the Functional Core (analysis/summary.py).

Package Location: src/fars/data/summary.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from .reader import fars_read_years
from ..analysis.summary import summarize_months

log = logging.getLogger(__name__)


def fars_summarize_years(
    years: Any,
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Number of accidents by month for each requested year.

    Years that fail to load emit an ``InvalidYearWarning`` (see
    ``fars_read_years``) and are left out of the result entirely; they do
    not appear as empty or zero columns.

    Example::

        df = fars_summarize_years([2013, 2014, 2015])
        #    MONTH  2013  2014  2015
        # 0      1  2230  2168  2368
        # ...

    Args:
        years: A year or an iterable of years (ints or numeric strings).
        data_dir: Resource base directory.  Defaults to the installed
            package directory.

    Returns:
        DataFrame with a ``MONTH`` column followed by one count column per
        loaded year.  Month/year cells without accidents are ``NaN``.
    """
    frames = fars_read_years(years, data_dir=data_dir)
    loaded = sum(f is not None for f in frames)
    log.debug(
        "Summarising years",
        extra={"requested": len(frames), "loaded": loaded},
    )
    return summarize_months(frames)
