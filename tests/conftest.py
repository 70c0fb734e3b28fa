"""Shared fixtures: small FARS-shaped accident files written to tmp_path."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

import pandas as pd
import pytest

# (STATE, MONTH, LONGITUD, LATITUDE) per accident.  999.9999 / 99.9999 are
# the FARS "unknown position" sentinels.
ACCIDENTS: Dict[int, List[Tuple[int, int, float, float]]] = {
    2013: [
        (1, 1, -86.5, 32.1),
        (1, 1, -87.0, 33.0),
        (1, 2, 999.9999, 32.5),
        (1, 3, -86.0, 99.9999),
        (2, 1, -150.0, 61.2),
        (2, 12, 999.9999, 99.9999),
    ],
    2014: [
        (1, 1, -86.7, 32.4),
        (1, 2, -85.9, 31.8),
        (1, 2, -88.1, 30.7),
        (6, 5, -118.2, 34.0),
    ],
    2015: [
        (1, 3, -86.3, 32.3),
        (1, 3, -87.6, 33.5),
        (2, 12, -149.9, 61.2),
    ],
}


def _accident_frame(year: int) -> pd.DataFrame:
    rows = ACCIDENTS[year]
    return pd.DataFrame({
        "STATE": [r[0] for r in rows],
        "ST_CASE": [r[0] * 10000 + i for i, r in enumerate(rows, start=1)],
        "MONTH": [r[1] for r in rows],
        "DAY": [15] * len(rows),
        "FATALS": [1] * len(rows),
        "LATITUDE": [r[3] for r in rows],
        "LONGITUD": [r[2] for r in rows],
    })


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Resource base directory holding extdata/accident_<year>.csv.bz2."""
    extdata = tmp_path / "extdata"
    extdata.mkdir()
    for year in ACCIDENTS:
        _accident_frame(year).to_csv(
            extdata / f"accident_{year}.csv.bz2", index=False, compression="bz2"
        )
    return tmp_path


@pytest.fixture
def accidents() -> Dict[int, List[Tuple[int, int, float, float]]]:
    """The rows written by the data_dir fixture, keyed by year."""
    return ACCIDENTS


@pytest.fixture(autouse=True)
def _reset_fars_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging between tests."""
    logger = logging.getLogger("fars")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def rendered() -> List:
    """Collects figures handed to the injected renderer."""
    return []
