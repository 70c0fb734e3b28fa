"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, plot generation, and rendering.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: fars_map_state() for rendering one state's accidents in
                one year.
"""

from .generators import fars_map_state

__all__ = [
    'fars_map_state',
]
