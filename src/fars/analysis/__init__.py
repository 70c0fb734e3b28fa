"""
FARS Analysis Package (Functional Core)

Pure DataFrame transformations.  No I/O, no side effects.

Modules:
- summary:     Month × year accident counts
- coordinates: State filtering, sentinel masking and map bounds
"""

from .summary import summarize_months
from .coordinates import (
    coordinate_bounds,
    filter_state,
    mask_invalid_coordinates,
    valid_points,
)

__all__ = [
    'summarize_months',
    'coordinate_bounds',
    'filter_state',
    'mask_invalid_coordinates',
    'valid_points',
]
