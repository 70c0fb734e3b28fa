"""
FARS Accident Coordinates (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/coordinates.py

Sentinel Rule:
    FARS encodes unknown positions with out-of-range values (e.g. 999.9999
    for LONGITUD, 99.9999 for LATITUDE).  Any LONGITUD > 900 or
    LATITUDE > 90 is replaced by ``NaN``.  Rows are never dropped by the
    mask, so row counts and existence checks on the subset are unaffected;
    only the plotting step excludes rows lacking a valid coordinate pair.
"""

from __future__ import annotations

from typing import Tuple

import pandas as pd

_LON_COL: str = "LONGITUD"
_LAT_COL: str = "LATITUDE"
_STATE_COL: str = "STATE"

# Values strictly above these are sentinels, not coordinates.
_LON_SENTINEL_ABOVE: float = 900.0
_LAT_SENTINEL_ABOVE: float = 90.0


def filter_state(df: pd.DataFrame, state: int) -> pd.DataFrame:
    """Return a copy of the rows whose ``STATE`` equals *state*."""
    return df.loc[df[_STATE_COL] == state].copy()


def mask_invalid_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with ``NaN``.

    Args:
        df: Accident rows with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        A copy of *df* with the same rows; ``LONGITUD > 900`` and
        ``LATITUDE > 90`` cells set to ``NaN``.
    """
    out = df.copy()
    lon = pd.to_numeric(out[_LON_COL], errors="coerce")
    lat = pd.to_numeric(out[_LAT_COL], errors="coerce")
    out[_LON_COL] = lon.mask(lon > _LON_SENTINEL_ABOVE)
    out[_LAT_COL] = lat.mask(lat > _LAT_SENTINEL_ABOVE)
    return out


def coordinate_bounds(
    df: pd.DataFrame,
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Observed ``(min, max)`` for longitude and latitude.

    Each range ignores missing values and is computed over its own column,
    so a row with a valid latitude but a masked longitude still widens the
    latitude range.

    Returns:
        ``((lon_min, lon_max), (lat_min, lat_max))``.  A range is
        ``(nan, nan)`` when its column has no valid values.
    """
    lon = df[_LON_COL]
    lat = df[_LAT_COL]
    return (
        (float(lon.min(skipna=True)), float(lon.max(skipna=True))),
        (float(lat.min(skipna=True)), float(lat.max(skipna=True))),
    )


def valid_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows with both a valid longitude and a valid latitude."""
    return df.dropna(subset=[_LON_COL, _LAT_COL])
