"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no rendering side effects.
Input: sanitised accident rows + axis ranges.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    US state outlines come from plotly's built-in geo layer (country
    subunits).  A Mercator projection is used because the composite
    ``albers usa`` projection ignores explicit axis ranges.  The
    longitude/latitude axes are clipped to the observed accident bounds.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objects as go

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Half-width (degrees) used when every accident shares one coordinate, so
# the axis range is never zero-width.
_MIN_HALF_SPAN: float = 0.25

_POINT_STYLE = {'color': 'black', 'size': 2, 'symbol': 'circle'}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_points: pd.DataFrame,
    lon_range: Tuple[float, float],
    lat_range: Tuple[float, float],
    title: Optional[str] = None,
) -> go.Figure:
    """
    Build an accident scatter over US state outlines.

    One small dot is drawn per row at ``(LONGITUD, LATITUDE)``.  Rows with
    a missing coordinate are not drawn.

    Args:
        df_points: Accident rows with ``LONGITUD`` and ``LATITUDE`` columns.
        lon_range: ``(min, max)`` longitude for the map extent.  A range
            with a NaN end is ignored and the geo layer keeps its default.
        lat_range: ``(min, max)`` latitude for the map extent.
        title: Optional figure title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If ``df_points`` is missing a coordinate column.
    """
    _validate_columns(df_points, required=['LONGITUD', 'LATITUDE'])

    pts = df_points.dropna(subset=['LONGITUD', 'LATITUDE'])

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=pts['LONGITUD'],
        lat=pts['LATITUDE'],
        mode='markers',
        marker=dict(_POINT_STYLE),
        name='Accident',
        showlegend=False,
        hovertemplate=(
            "Lon: %{lon:.4f}<br>"
            "Lat: %{lat:.4f}<extra></extra>"
        ),
    ))

    geo = dict(
        scope='north america',
        projection_type='mercator',
        resolution=50,
        showcountries=True,
        showsubunits=True,
        subunitcolor='gray',
        showland=False,
        showlakes=False,
    )
    if _finite(lon_range):
        geo['lonaxis_range'] = list(_widen(lon_range))
    if _finite(lat_range):
        geo['lataxis_range'] = list(_widen(lat_range))

    fig.update_geos(**geo)
    fig.update_layout(
        title=title,
        margin=dict(l=10, r=10, t=40 if title else 10, b=10),
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"df_points is missing required columns: {missing}"
        )


def _finite(bounds: Tuple[float, float]) -> bool:
    return bool(np.isfinite(bounds[0]) and np.isfinite(bounds[1]))


def _widen(bounds: Tuple[float, float]) -> Tuple[float, float]:
    lo, hi = bounds
    if hi - lo < 2 * _MIN_HALF_SPAN:
        mid = (lo + hi) / 2.0
        return mid - _MIN_HALF_SPAN, mid + _MIN_HALF_SPAN
    return lo, hi
