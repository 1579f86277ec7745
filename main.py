#!/usr/bin/env python3
"""
Command-line front end for the unit converter.
"""

# Usage overview:
# 1) ``main.py 5 --from "Feet (ft)" --to "Inches (in)"`` converts one value and
#    prints it at display precision. Values such as ``-1e3`` look like flags to
#    argparse; pass them as ``--value=-1e3`` or after a ``--`` separator.
# 2) ``main.py --list`` prints the selectable units grouped by category.
# 3) ``main.py --table length [--outdir output]`` prints the pairwise factor
#    matrix and optionally writes it as CSV together with scale charts.

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from unitconv.engine import DEFAULT_ENGINE
from unitconv.errors import ConversionError
from unitconv.plotting import plot_category_scales
from unitconv.reporting import (
    DISPLAY_DECIMALS,
    conversion_matrix,
    create_results_dataframe,
    format_converted_value,
    save_data_to_csv,
    unit_options,
)
from unitconv.session import ConverterSession


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for script execution."""
    parser = argparse.ArgumentParser(
        description="Convert values between length, weight and volume units."
    )
    parser.add_argument("value", nargs="?", default=None, help="Value to convert.")
    parser.add_argument(
        "--value",
        dest="value_option",
        default=None,
        help="Value to convert; use --value=-1e3 for negative exponent forms.",
    )
    parser.add_argument("--from", dest="source_unit", default=None, help="Source unit name.")
    parser.add_argument("--to", dest="target_unit", default=None, help="Target unit name.")
    parser.add_argument(
        "--decimals",
        type=_non_negative_int,
        default=DISPLAY_DECIMALS,
        help=f"Decimal places for display (default: {DISPLAY_DECIMALS}).",
    )
    parser.add_argument("--list", action="store_true", help="List units by category.")
    parser.add_argument("--table", default=None, help="Print the factor matrix of a category.")
    parser.add_argument(
        "--outdir",
        default=None,
        help="Write CSV and chart outputs to this directory.",
    )
    return parser


def _print_units():
    for label, units in unit_options():
        print(f"{label}:")
        for unit in units:
            print(f"  {unit}")


def _run_table(category, outdir):
    try:
        matrix = conversion_matrix(category)
    except ConversionError as exc:
        logging.error("%s", exc.message)
        return 1
    print(matrix.to_string())
    if outdir:
        os.makedirs(outdir, exist_ok=True)
        matrix_path = os.path.join(outdir, f"{category}_matrix.csv")
        matrix.to_csv(matrix_path)
        chart_path = plot_category_scales(category, outdir)
        logging.info("  - Conversion matrix: %s", matrix_path)
        logging.info("  - Scale chart: %s", chart_path)
    return 0


def _run_conversion(args):
    session = ConverterSession(DEFAULT_ENGINE)
    session.set_value(args.value)
    session.set_source_unit(args.source_unit)
    session.set_target_unit(args.target_unit)

    step_start = time.time()
    result = session.submit()
    logging.info("Conversion completed in %.4f seconds", time.time() - step_start)

    if not result.ok:
        logging.error("%s (%s)", session.notice, result.error.message)
        return 1

    print(f"{format_converted_value(result.value, args.decimals)} {session.display_unit}")
    if args.outdir:
        results_df = create_results_dataframe(
            [(session.request, result)], decimals=args.decimals
        )
        results_path = save_data_to_csv(results_df, args.outdir)
        logging.info("  - Conversion results: %s", results_path)
    return 0


def main(argv=None):
    """Main execution function."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    if args.value_option is not None:
        if args.value is not None:
            parser.error("give the value either positionally or with --value, not both")
        args.value = args.value_option

    if args.list:
        _print_units()
        return 0
    if args.table:
        logging.info("Building conversion matrix for '%s'", args.table)
        return _run_table(args.table, args.outdir)

    logging.info(
        "Converting %s from %s to %s", args.value, args.source_unit, args.target_unit
    )
    return _run_conversion(args)


if __name__ == "__main__":
    sys.exit(main())
