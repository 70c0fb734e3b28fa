"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS system.

Modules:
- reader:  Filename resolution, single-file and multi-year loading
- summary: Month × year accident count orchestration
"""

from .reader import (
    available_years,
    coerce_int,
    fars_read,
    fars_read_years,
    make_filename,
)
from .summary import fars_summarize_years

__all__ = [
    # Reader
    'available_years',
    'coerce_int',
    'fars_read',
    'fars_read_years',
    'make_filename',
    # Summary
    'fars_summarize_years',
]
