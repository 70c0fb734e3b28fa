"""Unit tests for filename resolution and single/multi-year loading."""

from __future__ import annotations

import warnings
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from fars.data.reader import (
    available_years,
    coerce_int,
    fars_read,
    fars_read_years,
    make_filename,
)
from fars.exceptions import InvalidYearWarning
from fars.utils.resources import PACKAGE_DIR

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# make_filename
# ---------------------------------------------------------------------------

def test_make_filename_formats_template_under_data_dir(tmp_path: Path) -> None:
    """The year is formatted into extdata/accident_<year>.csv.bz2."""

    assert make_filename(2013, tmp_path) == str(tmp_path / "extdata" / "accident_2013.csv.bz2")


def test_make_filename_accepts_numeric_strings_and_truncates() -> None:
    """Strings and floats are coerced to int with decimals truncated."""

    assert make_filename("2014", "base").endswith("accident_2014.csv.bz2")
    assert make_filename("2014.9", "base").endswith("accident_2014.csv.bz2")
    assert make_filename(2015.2, "base").endswith("accident_2015.csv.bz2")
    assert make_filename(np.int64(2013), "base").endswith("accident_2013.csv.bz2")


def test_make_filename_defaults_to_package_directory() -> None:
    """Without data_dir the path points into the installed package."""

    assert make_filename(2013) == str(PACKAGE_DIR / "extdata" / "accident_2013.csv.bz2")


def test_make_filename_does_not_check_existence(tmp_path: Path) -> None:
    """A year with no file still yields a path."""

    path = make_filename(1900, tmp_path)
    assert path.endswith("accident_1900.csv.bz2")
    assert not Path(path).exists()


def test_make_filename_rejects_non_numeric_year() -> None:
    with pytest.raises(ValueError):
        make_filename("twenty-thirteen")


def test_coerce_int_rejects_nan_and_bool() -> None:
    with pytest.raises(ValueError):
        coerce_int(float("nan"))
    with pytest.raises(TypeError):
        coerce_int(True)


# ---------------------------------------------------------------------------
# fars_read
# ---------------------------------------------------------------------------

def test_fars_read_missing_file_raises_with_path(tmp_path: Path) -> None:
    """A missing file is a hard stop naming the path."""

    missing = tmp_path / "extdata" / "accident_1999.csv.bz2"
    with pytest.raises(FileNotFoundError, match="accident_1999.csv.bz2"):
        fars_read(missing)


def test_fars_read_returns_all_columns_in_file_order(data_dir: Path, accidents: dict) -> None:
    """Compressed CSV is read with every column and row intact."""

    df = fars_read(make_filename(2013, data_dir))

    assert list(df.columns) == ["STATE", "ST_CASE", "MONTH", "DAY", "FATALS", "LATITUDE", "LONGITUD"]
    assert len(df) == len(accidents[2013])
    assert df["MONTH"].tolist() == [r[1] for r in accidents[2013]]
    assert pd.api.types.is_integer_dtype(df["STATE"])
    assert pd.api.types.is_float_dtype(df["LATITUDE"])


@pytest.mark.parametrize("year", [2013, 2014, 2015])
def test_fars_read_months_are_valid(data_dir: Path, year: int) -> None:
    """Every bundled year loads non-empty with MONTH in 1..12."""

    df = fars_read(make_filename(year, data_dir))

    assert not df.empty
    assert pd.api.types.is_integer_dtype(df["MONTH"])
    assert df["MONTH"].between(1, 12).all()


def test_fars_read_plain_csv(tmp_path: Path) -> None:
    """Uncompressed files are read as well."""

    path = tmp_path / "accident.csv"
    path.write_text("STATE,MONTH\n1,4\n2,5\n")

    df = fars_read(path)

    assert df.to_dict("list") == {"STATE": [1, 2], "MONTH": [4, 5]}


# ---------------------------------------------------------------------------
# fars_read_years
# ---------------------------------------------------------------------------

def test_fars_read_years_projects_month_and_year(data_dir: Path, accidents: dict) -> None:
    """Each loaded year keeps only MONTH plus a constant year column."""

    frames = fars_read_years([2013, 2014], data_dir=data_dir)

    assert len(frames) == 2
    for frame, year in zip(frames, (2013, 2014)):
        assert list(frame.columns) == ["MONTH", "year"]
        assert (frame["year"] == year).all()
        assert len(frame) == len(accidents[year])


def test_fars_read_years_accepts_scalar(data_dir: Path) -> None:
    """A single year is treated as a one-element sequence."""

    frames = fars_read_years(2015, data_dir=data_dir)

    assert len(frames) == 1
    assert frames[0]["year"].unique().tolist() == [2015]


def test_fars_read_years_accepts_string_scalar(data_dir: Path) -> None:
    frames = fars_read_years("2014", data_dir=data_dir)

    assert len(frames) == 1
    assert frames[0]["year"].unique().tolist() == [2014]


def test_fars_read_years_isolates_missing_year(data_dir: Path) -> None:
    """A missing year becomes None with a warning; other years still load."""

    with pytest.warns(InvalidYearWarning, match="invalid year: 1999"):
        frames = fars_read_years([2013, 1999, 2015], data_dir=data_dir)

    assert len(frames) == 3
    assert frames[1] is None
    assert frames[0] is not None and frames[2] is not None
    assert frames[2]["year"].unique().tolist() == [2015]


def test_fars_read_years_warns_for_non_numeric_year(data_dir: Path) -> None:
    """Unresolvable input is also a per-year warning, never an exception."""

    with pytest.warns(InvalidYearWarning, match="invalid year: abc"):
        frames = fars_read_years(["abc", 2014], data_dir=data_dir)

    assert frames[0] is None
    assert frames[1] is not None


def test_fars_read_years_one_warning_per_failed_year(tmp_path: Path) -> None:
    """Every failed year is reported, in input order."""

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        frames = fars_read_years([2001, 2002], data_dir=tmp_path)

    assert frames == [None, None]
    messages = [str(w.message) for w in caught if issubclass(w.category, InvalidYearWarning)]
    assert messages == ["invalid year: 2001", "invalid year: 2002"]


# ---------------------------------------------------------------------------
# available_years
# ---------------------------------------------------------------------------

def test_available_years_lists_dataset_files(data_dir: Path) -> None:
    (data_dir / "extdata" / "notes.txt").write_text("ignored")

    assert available_years(data_dir) == [2013, 2014, 2015]


def test_available_years_without_extdata(tmp_path: Path) -> None:
    assert available_years(tmp_path) == []
