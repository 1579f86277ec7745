"""Classified failures raised or returned by the conversion layer."""

from __future__ import annotations

from typing import Iterable, Optional


class ConversionError(ValueError):
    """Base class for all conversion failures.

    Attributes:
        message (str): Human-readable description suitable for a notice.
    """

    kind = "conversion_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInput(ConversionError):
    """One or more caller-side fields were not filled in.

    Only produced by the caller pre-check; the engine never sees this case.
    """

    kind = "missing_input"

    def __init__(self, fields: Iterable[str]):
        self.fields = tuple(fields)
        super().__init__(f"Missing input: {', '.join(self.fields)}")


class UnitNotFound(ConversionError):
    kind = "unit_not_found"

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Unknown unit: {unit}")


class IncompatibleUnits(ConversionError):
    kind = "incompatible_units"

    def __init__(
        self,
        source_unit: str,
        target_unit: str,
        source_category: Optional[str] = None,
        target_category: Optional[str] = None,
    ):
        self.source_unit = source_unit
        self.target_unit = target_unit
        self.source_category = source_category
        self.target_category = target_category
        detail = ""
        if source_category and target_category:
            detail = f" ({source_category} vs {target_category})"
        super().__init__(
            f"Cannot convert '{source_unit}' to '{target_unit}'{detail}"
        )


class CategoryNotFound(ConversionError):
    kind = "category_not_found"

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Unknown category: {category}")


class RegistryError(ValueError):
    """Raised when a unit table violates registry invariants."""


class ResultOutOfRange(ConversionError):
    """A finite input converted to a value outside the float range."""

    kind = "result_out_of_range"

    def __init__(self, value: float, source_unit: str, target_unit: str):
        self.value = value
        self.source_unit = source_unit
        self.target_unit = target_unit
        super().__init__(
            f"Converting {value!r} '{source_unit}' to '{target_unit}' is out of range"
        )
