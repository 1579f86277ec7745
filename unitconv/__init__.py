"""
A Python package for converting values between units of the same category.

Conversions are multiplicative: each unit carries a scale factor relative to
its category's base unit, and a value is converted through that base unit.

Modules:
    - units: The built-in length, weight and volume scale tables.
    - registry: Immutable, validated registry of categories and units.
    - engine: Category lookup, compatibility checks and conversion.
    - session: Caller-side form state and the missing-input pre-check.
    - reporting: Display formatting and pandas result tables.
    - plotting: Scale-factor charts.
"""

__version__ = "1.0.0"

from .engine import (
    ConversionEngine,
    ConversionRequest,
    ConversionResult,
    are_compatible,
    convert,
    convert_value,
    find_category,
    list_categories,
    list_units,
)
from .errors import (
    CategoryNotFound,
    ConversionError,
    IncompatibleUnits,
    MissingInput,
    RegistryError,
    ResultOutOfRange,
    UnitNotFound,
)
from .registry import UnitRegistry
from .session import ConverterSession, check_request, parse_value

__all__ = [
    # Engine
    "ConversionEngine",
    "ConversionRequest",
    "ConversionResult",
    "are_compatible",
    "convert",
    "convert_value",
    "find_category",
    "list_categories",
    "list_units",
    "UnitRegistry",
    # Errors
    "ConversionError",
    "MissingInput",
    "UnitNotFound",
    "IncompatibleUnits",
    "CategoryNotFound",
    "RegistryError",
    "ResultOutOfRange",
    # Caller side
    "ConverterSession",
    "check_request",
    "parse_value",
]
