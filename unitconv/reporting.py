"""Format conversion results for display and export them as tables.

Nothing here changes a converted value; rounding is applied to text output
only, the engine always returns full precision.
"""

from __future__ import annotations

import math
import os
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from .engine import DEFAULT_ENGINE, ConversionEngine, ConversionRequest, ConversionResult
from .schema import ResultColumns

DISPLAY_DECIMALS = 2
DEFAULT_OUTPUT_DIR = "output"


def format_converted_value(value: Optional[float], decimals: int = DISPLAY_DECIMALS) -> str:
    """Format a converted value with a fixed number of decimal places.

    Args:
        value (float or None): Converted value, or ``None`` when nothing has
            been converted yet.
        decimals (int, optional): Decimal places. Defaults to ``2``.

    Returns:
        str: Fixed-point text, or ``"0"`` for ``None``.

    Raises:
        ValueError: If ``value`` is non-finite.
    """
    if value is None:
        return "0"
    if not math.isfinite(value):
        raise ValueError(f"Converted value must be finite, got {value!r}")
    return f"{value:.{decimals}f}"


def unit_options(engine: ConversionEngine = DEFAULT_ENGINE) -> List[Tuple[str, List[str]]]:
    """Return grouped unit options for a selection widget.

    Group labels are the category names capitalised ("Length"); both groups
    and units keep registry declaration order.
    """
    return [
        (category[:1].upper() + category[1:], list(engine.list_units(category)))
        for category in engine.list_categories()
    ]


def create_results_dataframe(
    results: Iterable[Tuple[ConversionRequest, ConversionResult]],
    engine: ConversionEngine = DEFAULT_ENGINE,
    decimals: int = DISPLAY_DECIMALS,
) -> pd.DataFrame:
    """Tabulate conversion requests alongside their outcomes.

    Args:
        results: Pairs of request and the result the engine returned for it.
        engine (ConversionEngine, optional): Used to label each row's category.
        decimals (int, optional): Precision of the display column.

    Returns:
        pandas.DataFrame: One row per pair with the ``ResultColumns`` labels.
        Failed rows hold ``NaN`` results and the error kind; results that
        overflowed to infinity keep the raw value and an empty display cell.
    """
    cols = ResultColumns()
    records = []
    for request, result in results:
        category = engine.find_category(request.source_unit) if request.source_unit else None
        records.append(
            {
                cols.value: request.value,
                cols.source: request.source_unit,
                cols.target: request.target_unit,
                cols.category: category or "",
                cols.result: result.value if result.ok else np.nan,
                cols.display: (
                    format_converted_value(result.value, decimals)
                    if result.ok and math.isfinite(result.value)
                    else ""
                ),
                cols.error: "" if result.ok else result.error.kind,
            }
        )
    return pd.DataFrame.from_records(
        records,
        columns=[
            cols.value,
            cols.source,
            cols.target,
            cols.category,
            cols.result,
            cols.display,
            cols.error,
        ],
    )


def conversion_matrix(category: str, engine: ConversionEngine = DEFAULT_ENGINE) -> pd.DataFrame:
    """Build the pairwise conversion factors of one category.

    Cell ``(row, col)`` is how many ``col`` units make one ``row`` unit, so the
    diagonal is 1 and the matrix is reciprocal across it.

    Raises:
        CategoryNotFound: If ``category`` is not registered.
    """
    units = list(engine.list_units(category))
    scales = np.array([engine.registry.table(category)[u] for u in units], dtype=float)
    factors = scales[:, np.newaxis] / scales[np.newaxis, :]
    return pd.DataFrame(factors, index=units, columns=units)


def save_data_to_csv(results_df: pd.DataFrame, output_dir: str = DEFAULT_OUTPUT_DIR) -> str:
    """Save a conversion results table to ``conversion_results.csv``.

    Returns:
        str: Path of the written CSV file.
    """
    os.makedirs(output_dir, exist_ok=True)
    results_path = os.path.join(output_dir, "conversion_results.csv")
    results_df.to_csv(results_path, index=False)
    return results_path
