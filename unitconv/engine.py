"""Convert values between units of the same category.

Conversion goes through the category's base unit::

    base = value * scale(source)
    result = base / scale(target)

The engine holds no state besides its read-only registry, so one instance can
be shared by any number of callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .errors import ConversionError, IncompatibleUnits, UnitNotFound
from .registry import UnitRegistry
from .units import CONVERSION_RATES


@dataclass(frozen=True)
class ConversionRequest:
    """Caller-owned inputs for one conversion; ``None`` means not filled in."""

    value: Optional[float] = None
    source_unit: Optional[str] = None
    target_unit: Optional[str] = None


@dataclass(frozen=True)
class ConversionResult:
    """Either a converted value or a classified failure, never both."""

    value: Optional[float] = None
    error: Optional[ConversionError] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("ConversionResult needs exactly one of value or error.")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        if self.error is not None:
            raise self.error
        return self.value


class ConversionEngine:
    """Category lookup, compatibility checks and conversion over a registry.

    Args:
        registry (UnitRegistry, optional): Scale tables to convert with.
            Defaults to the built-in length/weight/volume table.
    """

    def __init__(self, registry: Optional[UnitRegistry] = None):
        self.registry = registry if registry is not None else UnitRegistry(CONVERSION_RATES)

    def list_categories(self) -> Tuple[str, ...]:
        return self.registry.categories()

    def list_units(self, category: str) -> Tuple[str, ...]:
        return self.registry.units(category)

    def find_category(self, unit: str) -> Optional[str]:
        return self.registry.find_category(unit)

    def are_compatible(self, source_unit: str, target_unit: str) -> bool:
        source_category = self.find_category(source_unit)
        return source_category is not None and source_category == self.find_category(
            target_unit
        )

    def _resolve(self, source_unit: str, target_unit: str) -> Tuple[float, float]:
        """Return ``(source_scale, target_scale)`` for a compatible unit pair.

        Raises:
            UnitNotFound: If either unit is unknown (source checked first).
            IncompatibleUnits: If the units belong to different categories.
        """
        source_category = self.find_category(source_unit)
        if source_category is None:
            raise UnitNotFound(source_unit)
        target_category = self.find_category(target_unit)
        if target_category is None:
            raise UnitNotFound(target_unit)
        if source_category != target_category:
            raise IncompatibleUnits(
                source_unit, target_unit, source_category, target_category
            )
        table = self.registry.table(source_category)
        return table[source_unit], table[target_unit]

    def convert_value(self, value: float, source_unit: str, target_unit: str) -> float:
        """Convert ``value`` and return the full-precision result.

        Args:
            value (float): Quantity in ``source_unit``; any sign is allowed.
            source_unit (str): Registered unit name of ``value``.
            target_unit (str): Registered unit name to express ``value`` in.

        Returns:
            float: ``value`` expressed in ``target_unit``.

        Raises:
            UnitNotFound: If either unit is not registered.
            IncompatibleUnits: If the units belong to different categories.
        """
        source_scale, target_scale = self._resolve(source_unit, target_unit)
        base_value = float(value) * source_scale
        return base_value / target_scale

    def convert(self, value: float, source_unit: str, target_unit: str) -> ConversionResult:
        """Convert ``value`` and return a classified result instead of raising."""
        try:
            return ConversionResult(value=self.convert_value(value, source_unit, target_unit))
        except ConversionError as exc:
            return ConversionResult(error=exc)

    def convert_request(self, request: ConversionRequest) -> ConversionResult:
        """Convert a fully populated request.

        The caller is expected to have rejected missing fields already (see
        ``unitconv.session.check_request``).
        """
        return self.convert(request.value, request.source_unit, request.target_unit)

    def convert_array(self, values, source_unit: str, target_unit: str) -> np.ndarray:
        """Convert many values between one pair of units.

        Args:
            values (array-like): Quantities in ``source_unit``.
            source_unit (str): Registered unit name of ``values``.
            target_unit (str): Registered unit name of the output.

        Returns:
            numpy.ndarray: Float array with the same shape as ``values``.

        Raises:
            UnitNotFound: If either unit is not registered.
            IncompatibleUnits: If the units belong to different categories.
        """
        source_scale, target_scale = self._resolve(source_unit, target_unit)
        arr = np.asarray(values, dtype=float)
        return (arr * source_scale) / target_scale


DEFAULT_ENGINE = ConversionEngine()


def list_categories() -> Tuple[str, ...]:
    return DEFAULT_ENGINE.list_categories()


def list_units(category: str) -> Tuple[str, ...]:
    return DEFAULT_ENGINE.list_units(category)


def find_category(unit: str) -> Optional[str]:
    return DEFAULT_ENGINE.find_category(unit)


def are_compatible(source_unit: str, target_unit: str) -> bool:
    return DEFAULT_ENGINE.are_compatible(source_unit, target_unit)


def convert(value: float, source_unit: str, target_unit: str) -> ConversionResult:
    return DEFAULT_ENGINE.convert(value, source_unit, target_unit)


def convert_value(value: float, source_unit: str, target_unit: str) -> float:
    return DEFAULT_ENGINE.convert_value(value, source_unit, target_unit)
