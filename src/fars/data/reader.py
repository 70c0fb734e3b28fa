"""
FARS Data Reader (Imperative Shell)

Resolves per-year dataset paths inside the resource directory and reads the
compressed accident CSVs into DataFrames.

Package Location: src/fars/data/reader.py

Two loading paths are provided and deliberately behave differently:

1. Single file (fars_read):
   Fail-fast.  A missing file raises ``FileNotFoundError`` immediately.

2. Multiple years (fars_read_years):
   Batch-resilient.  Every year is loaded independently; a year that cannot
   be resolved or read produces an ``InvalidYearWarning`` and a ``None``
   slot, and the remaining years are still processed.

Resource layout:
    <data_dir>/extdata/accident_<year>.csv.bz2

``data_dir`` defaults to the installed package directory, where the
bundled datasets are shipped as package data.
"""

from __future__ import annotations

import logging
import re
import warnings
from collections.abc import Iterable
from numbers import Number
from pathlib import Path
from typing import Any, List, Optional, Union

import numpy as np
import pandas as pd

from ..exceptions import InvalidYearWarning
from ..utils.resources import resolve_data_dir

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Resource layout
# ---------------------------------------------------------------------------
_FILENAME_TEMPLATE: str = "extdata/accident_{year:d}.csv.bz2"
_FILENAME_PATTERN = re.compile(r"^accident_(\d+)\.csv\.bz2$")

# Columns kept from each year in the multi-year path.
_YEAR_COLUMNS: List[str] = ["MONTH", "year"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(
    year: Union[int, float, str],
    data_dir: Optional[Union[str, Path]] = None,
) -> str:
    """
    Build the path of the bundled accident file for one year.

    Args:
        year: Year as an int, float or numeric string.  Decimals are
            truncated (``"2013.7"`` → 2013).
        data_dir: Resource base directory.  Defaults to the installed
            package directory.

    Returns:
        Path string ``<data_dir>/extdata/accident_<year>.csv.bz2``.  The file
        is not required to exist.

    Raises:
        ValueError: If *year* cannot be interpreted as a number.
    """
    year_int = coerce_int(year)
    base = resolve_data_dir(data_dir)
    return str(base / _FILENAME_TEMPLATE.format(year=year_int))


def fars_read(filename: Union[str, Path]) -> pd.DataFrame:
    """
    Read one FARS accident file into a DataFrame.

    Compression is inferred from the file suffix (``.bz2``, ``.gz``,
    ``.zip``, ``.xz``).  Column types are inferred from the whole file;
    pandas dtype/parser warnings are suppressed.

    Args:
        filename: Path to a comma-separated file with a header row.

    Returns:
        DataFrame with every column and row of the input, in file order.

    Raises:
        FileNotFoundError: If *filename* is not an existing file.
    """
    path = Path(filename)
    if not path.is_file():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    log.debug("Reading accident file", extra={"path": str(path)})
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", pd.errors.DtypeWarning)
        warnings.simplefilter("ignore", pd.errors.ParserWarning)
        df = pd.read_csv(path, compression="infer", low_memory=False)

    return df


def fars_read_years(
    years: Any,
    data_dir: Optional[Union[str, Path]] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load the ``MONTH`` column for each requested year.

    Failures are isolated per year: any exception raised while resolving or
    reading a year is converted into an ``InvalidYearWarning`` and that
    year's slot is ``None``.  This function never raises for a bad year.

    Args:
        years: An iterable of years, or a single year (int, float, numeric
            string or numpy scalar).
        data_dir: Resource base directory passed to :func:`make_filename`.

    Returns:
        List with one entry per input year, in input order.  Each entry is
        a DataFrame with columns ``[MONTH, year]`` or ``None``.
    """
    results: List[Optional[pd.DataFrame]] = []
    for year in _as_year_list(years):
        try:
            year_int = coerce_int(year)
            dat = fars_read(make_filename(year_int, data_dir))
            results.append(dat.assign(year=year_int)[_YEAR_COLUMNS])
        except Exception:
            log.debug("Failed to load year", exc_info=True, extra={"year": year})
            warnings.warn(f"invalid year: {year}", InvalidYearWarning, stacklevel=2)
            results.append(None)

    return results


def available_years(data_dir: Optional[Union[str, Path]] = None) -> List[int]:
    """
    List the years that have an accident file in the resource directory.

    Args:
        data_dir: Resource base directory.  Defaults to the installed
            package directory.

    Returns:
        Sorted list of years.  Empty if the ``extdata`` folder is absent.
    """
    extdata = resolve_data_dir(data_dir) / Path(_FILENAME_TEMPLATE).parent
    if not extdata.is_dir():
        return []

    years = []
    for path in extdata.iterdir():
        match = _FILENAME_PATTERN.match(path.name)
        if match and path.is_file():
            years.append(int(match.group(1)))
    return sorted(years)


def coerce_int(value: Union[int, float, str]) -> int:
    """
    Coerce a year or state code to ``int``, truncating any decimals.

    Args:
        value: Integer, float, numeric string, or numpy scalar.

    Returns:
        The truncated integer value.

    Raises:
        ValueError: For non-numeric strings, NaN or infinite values.
        TypeError: For values that are neither numbers nor strings.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected a number or numeric string, got {value!r}")
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                raise ValueError(f"'{value}' is not a numeric value")
    if isinstance(value, Number):
        try:
            return int(value)
        except (OverflowError, ValueError):
            raise ValueError(f"'{value}' cannot be converted to an integer")
    raise TypeError(f"Expected a number or numeric string, got {value!r}")


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _as_year_list(years: Any) -> List[Any]:
    """Wrap a scalar year into a one-element list; materialise iterables."""
    if isinstance(years, (str, bytes, Number, np.generic)):
        return [years]
    if isinstance(years, Iterable):
        return list(years)
    return [years]
