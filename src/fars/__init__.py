"""
pyfars - FARS accident summaries and state maps

A small Python package for the US Fatality Analysis Reporting System
accident files, using the Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file resolution, CSV reads, multi-year loads)
- analysis/ : Functional Core (month/year pivot, coordinate sanitising)
- plotting/ : Functional Core (plotly figure construction)
- reports/  : Imperative Shell (state map orchestration and rendering)
- extdata/  : bundled accident_<year>.csv.bz2 datasets
"""

from .data import (
    available_years,
    fars_read,
    fars_read_years,
    fars_summarize_years,
    make_filename,
)
from .exceptions import FarsError, InvalidStateError, InvalidYearWarning
from .reports import fars_map_state

__version__ = "0.1.0"

__all__ = [
    'available_years',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'make_filename',
    'fars_map_state',
    'FarsError',
    'InvalidStateError',
    'InvalidYearWarning',
]
