"""
FARS Command-Line Interface

Exposes three subcommands:

    fars years     [--data-dir DIR]                      List bundled years
    fars summarize --years Y [Y ...] [--output FILE.csv]  Month × year counts
    fars map       --state N --year Y [--output FILE.html] Map one state's accidents

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path
from typing import List, Optional

from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


def _data_dir(args: argparse.Namespace) -> Optional[Path]:
    return Path(args.data_dir) if args.data_dir else None


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_years(args: argparse.Namespace) -> None:
    """Print the years that have a dataset in the resource directory."""
    from fars.data import available_years

    years = available_years(_data_dir(args))
    if not years:
        _die("No accident datasets found in the resource directory.")
    for year in years:
        print(year)


def handle_summarize(args: argparse.Namespace) -> None:
    """Print or write the month × year accident count table.

    Years that fail to load are reported on stderr and left out of the
    table; the command only fails when no year could be loaded.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.data import fars_summarize_years
    from fars.exceptions import InvalidYearWarning

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", InvalidYearWarning)
        summary = fars_summarize_years(args.years, data_dir=_data_dir(args))

    for w in caught:
        if issubclass(w.category, InvalidYearWarning):
            print(f"Warning: {w.message}", file=sys.stderr)

    if summary.empty:
        _die("None of the requested years could be loaded.")

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(out, index=False)
        print(f"Summary written to {out}")
    else:
        print(summary.to_string(index=False))


def handle_map(args: argparse.Namespace) -> None:
    """Render the accident map for one state and one year.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports import fars_map_state
    from fars.exceptions import InvalidStateError

    try:
        fig = fars_map_state(
            args.state,
            args.year,
            data_dir=_data_dir(args),
            output_path=args.output,
        )
    except (FileNotFoundError, InvalidStateError, ValueError) as exc:
        _die(str(exc))
        return

    if fig is None:
        print("no accidents to plot")
    elif args.output:
        print(f"Map written to {args.output}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``years``, ``summarize``, and
        ``map`` subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System accident tools\n"
            "Monthly accident summaries and per-state accident maps."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable DEBUG logging.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )

    # Shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help=(
            "Base directory containing extdata/accident_<year>.csv.bz2 "
            "(default: the installed package)."
        ),
    )

    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # years
    # ------------------------------------------------------------------
    p_years = subs.add_parser(
        "years",
        parents=[common],
        help="List the years with a bundled accident dataset.",
    )
    p_years.set_defaults(func=handle_years)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        parents=[common],
        help="Count accidents by month for one or more years.",
        description=(
            "Count accidents per month for each requested year.\n\n"
            "Years without a dataset are reported as warnings and skipped.\n"
            "Months with no accidents in a year are left blank."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YEAR",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the table to this CSV file instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        parents=[common],
        help="Plot accident locations for one state in one year.",
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="N",
        help="FARS state code, e.g. 13.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YEAR",
        help="A single year, e.g. 2014.",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the map to this HTML file instead of opening it.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, json_format=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
