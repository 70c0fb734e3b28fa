"""
FARS State Map Generator (Imperative Shell)

Thin orchestration layer: resolves the year's dataset through reader.py,
validates the state code, delegates filtering and coordinate sanitising to
the Functional Core (analysis/coordinates.py), builds the figure with
plotting/state_map.py, and hands it to a rendering surface.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import fars_map_state

    # Open in the default plotly renderer
    fars_map_state(13, 2014)

    # Write to disk instead
    fars_map_state(13, 2014, output_path="georgia_2014.html")

Rendering:
    The renderer is injected as ``render(fig)``.  When omitted, the figure
    is written to ``output_path`` as HTML if one is given, otherwise shown
    with ``fig.show()``.  Nothing is rendered when the state code is
    invalid or when the state has no accidents.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Union

import plotly.graph_objects as go

from ..analysis.coordinates import (
    coordinate_bounds,
    filter_state,
    mask_invalid_coordinates,
    valid_points,
)
from ..data.reader import coerce_int, fars_read, make_filename
from ..exceptions import InvalidStateError
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)

Renderer = Callable[[go.Figure], None]


def fars_map_state(
    state_num: Union[int, float, str],
    year: Union[int, float, str],
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    render: Optional[Renderer] = None,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state for one year.

    Args:
        state_num: FARS state code (int or numeric string).
        year: A single year, not a list.
        data_dir: Resource base directory.  Defaults to the installed
            package directory.
        output_path: When given and *render* is ``None``, write the map
            to this HTML file instead of opening it.
        render: Callable that receives the finished figure.  Overrides the
            default show/write behaviour.

    Returns:
        The rendered figure, or ``None`` when there were no accidents to
        plot.

    Raises:
        FileNotFoundError: If the year's dataset does not exist.
        InvalidStateError: If *state_num* does not occur in the year's
            ``STATE`` column.
    """
    data = fars_read(make_filename(year, data_dir))
    state = coerce_int(state_num)

    if state not in set(data["STATE"].unique()):
        raise InvalidStateError(state)

    data_sub = filter_state(data, state)
    if data_sub.empty:
        log.info("no accidents to plot", extra={"state": state, "year": year})
        return None

    data_sub = mask_invalid_coordinates(data_sub)
    lon_range, lat_range = coordinate_bounds(data_sub)
    points = valid_points(data_sub)

    log.debug(
        "Plotting state accidents",
        extra={
            "state": state,
            "year": year,
            "rows": len(data_sub),
            "points": len(points),
        },
    )

    fig = plot_state_map(
        points,
        lon_range=lon_range,
        lat_range=lat_range,
        title=f"FARS accidents – state {state}, {coerce_int(year)}",
    )

    renderer = render or _default_renderer(output_path)
    renderer(fig)
    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _default_renderer(output_path: Optional[Union[str, Path]]) -> Renderer:
    """Return a renderer that writes HTML to *output_path* or shows the figure."""
    if output_path is None:
        return lambda fig: fig.show()

    path = Path(output_path)

    def _write(fig: go.Figure) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(path))
        log.info("Wrote state map", extra={"path": str(path)})

    return _write
