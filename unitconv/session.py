"""Caller-side state for an interactive converter form.

The engine only sees complete requests. This module owns what a form holds
between edits (typed value text, selected units, last converted value) and
the pre-check that short-circuits with ``MissingInput`` before the engine is
called.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from .engine import DEFAULT_ENGINE, ConversionEngine, ConversionRequest, ConversionResult
from .errors import (
    ConversionError,
    IncompatibleUnits,
    MissingInput,
    ResultOutOfRange,
    UnitNotFound,
)
from .reporting import format_converted_value

# Leading decimal literal, optional sign and exponent; trailing text ignored.
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

MISSING_INPUT_NOTICE = "Please fill all fields."
INCOMPATIBLE_NOTICE = "Incompatible unit types selected."
OUT_OF_RANGE_NOTICE = "Converted value is too large to display."


def parse_value(text: Optional[str]) -> Optional[float]:
    """Parse the numeric prefix of a text field.

    ``"12.5"`` and ``"12.5 kg"`` both give ``12.5``. Blank, non-numeric and
    non-finite input give ``None``.
    """
    if text is None:
        return None
    match = _NUMBER_PREFIX.match(str(text))
    if match is None:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def check_request(request: ConversionRequest) -> None:
    """Raise ``MissingInput`` naming every field that is not filled in."""
    missing = []
    if request.value is None or not math.isfinite(request.value):
        missing.append("value")
    if not request.source_unit:
        missing.append("source_unit")
    if not request.target_unit:
        missing.append("target_unit")
    if missing:
        raise MissingInput(missing)


def notice_for(error: ConversionError) -> str:
    """Return the user-facing notice text for a failure."""
    if isinstance(error, MissingInput):
        return MISSING_INPUT_NOTICE
    if isinstance(error, IncompatibleUnits):
        return INCOMPATIBLE_NOTICE
    if isinstance(error, UnitNotFound):
        return f"Unknown unit: {error.unit}"
    if isinstance(error, ResultOutOfRange):
        return OUT_OF_RANGE_NOTICE
    return error.message


class ConverterSession:
    """Headless model of the converter form.

    Args:
        engine (ConversionEngine, optional): Engine used on submit.

    Attributes:
        value (float or None): Parsed value field.
        source_unit (str or None): Selected "from" unit.
        target_unit (str or None): Selected "to" unit.
        converted_value (float or None): Last successful result; reset to
            ``None`` whenever a submit fails so stale output is never shown.
        notice (str or None): Message for the last failed submit.
    """

    def __init__(self, engine: ConversionEngine = DEFAULT_ENGINE):
        self.engine = engine
        self.value: Optional[float] = None
        self.source_unit: Optional[str] = None
        self.target_unit: Optional[str] = None
        self.converted_value: Optional[float] = None
        self.notice: Optional[str] = None

    def set_value(self, text: Optional[str]) -> None:
        self.value = parse_value(text)

    def set_source_unit(self, unit: Optional[str]) -> None:
        self.source_unit = unit

    def set_target_unit(self, unit: Optional[str]) -> None:
        self.target_unit = unit

    @property
    def request(self) -> ConversionRequest:
        return ConversionRequest(self.value, self.source_unit, self.target_unit)

    def submit(self) -> ConversionResult:
        """Validate the form, convert, and update the displayed state."""
        request = self.request
        try:
            check_request(request)
        except MissingInput as exc:
            result = ConversionResult(error=exc)
        else:
            result = self.engine.convert_request(request)
            if result.ok and not math.isfinite(result.value):
                result = ConversionResult(
                    error=ResultOutOfRange(
                        request.value, request.source_unit, request.target_unit
                    )
                )

        if result.ok:
            self.converted_value = result.value
            self.notice = None
        else:
            self.converted_value = None
            self.notice = notice_for(result.error)
        return result

    @property
    def display_value(self) -> str:
        return format_converted_value(self.converted_value)

    @property
    def display_unit(self) -> str:
        return self.target_unit or "Unit"
