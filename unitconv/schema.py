"""Define standardized column names for conversion result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized column labels.

    These column names are used in every conversion table produced by
    ``unitconv.reporting`` so exported CSV files stay consistent.

    Attributes:
        value: Column name for the input quantity, expressed in ``source``.
        source: Column name for the unit the input quantity is given in.
        target: Column name for the unit the result is expressed in.
        category: Column name for the category of the source unit, which for
            incompatible pairs differs from the target unit's category. Empty
            when the source unit is unknown.
        result: Column name for the full-precision converted value; ``NaN``
            for failed conversions.
        display: Column name for the result rounded to display precision.
        error: Column name for the failure kind (for example
            ``"incompatible_units"``); empty for successful rows.
    """

    value: str = "Value"
    source: str = "From Unit"
    target: str = "To Unit"
    category: str = "Category"
    result: str = "Converted Value"
    display: str = "Displayed Value"
    error: str = "Error"
