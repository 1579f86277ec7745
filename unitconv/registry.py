"""Immutable registry of unit categories and scale factors.

The registry is validated once at construction:

- unit names are unique across the whole registry, not only per category;
- every scale factor is a finite real number strictly greater than zero;
- every category declares at least one unit.

A category without a unit of scale exactly 1 is accepted, since only ratios
enter a conversion, but a ``UserWarning`` is emitted so a mistyped anchor is
noticed.
"""

from __future__ import annotations

import math
import numbers
import warnings
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .errors import CategoryNotFound, RegistryError, UnitNotFound


def _validate_scale(category: str, unit: str, scale) -> float:
    if isinstance(scale, bool) or not isinstance(scale, numbers.Real):
        raise RegistryError(
            f"Scale for '{unit}' in '{category}' must be a real number, got {scale!r}"
        )
    value = float(scale)
    if not math.isfinite(value) or value <= 0:
        raise RegistryError(
            f"Scale for '{unit}' in '{category}' must be finite and > 0, got {scale!r}"
        )
    return value


class UnitRegistry:
    """Read-only mapping of category name to unit scale table.

    Args:
        rates (Mapping[str, Mapping[str, float]]): Category name mapped to an
            ordered table of unit name to scale factor, relative to the
            category's base unit.

    Raises:
        RegistryError: If a unit name repeats, a scale is not a positive finite
            real, or a category is empty.
    """

    def __init__(self, rates: Mapping[str, Mapping[str, float]]):
        tables: Dict[str, Mapping[str, float]] = {}
        index: Dict[str, str] = {}

        for category, units in rates.items():
            if not isinstance(category, str) or not category:
                raise RegistryError(f"Category name must be a non-empty string, got {category!r}")
            if not units:
                raise RegistryError(f"Category '{category}' declares no units.")

            table: Dict[str, float] = {}
            for unit, scale in units.items():
                if not isinstance(unit, str) or not unit:
                    raise RegistryError(
                        f"Unit name in '{category}' must be a non-empty string, got {unit!r}"
                    )
                if unit in index:
                    raise RegistryError(
                        f"Unit '{unit}' declared in both '{index[unit]}' and '{category}'"
                    )
                table[unit] = _validate_scale(category, unit, scale)
                index[unit] = category

            if 1.0 not in table.values():
                warnings.warn(
                    f"Category '{category}' has no base unit with scale 1.",
                    UserWarning,
                    stacklevel=2,
                )
            tables[category] = MappingProxyType(table)

        self._tables: Mapping[str, Mapping[str, float]] = MappingProxyType(tables)
        self._index: Mapping[str, str] = MappingProxyType(index)

    def __contains__(self, unit: object) -> bool:
        return unit in self._index

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"UnitRegistry(categories={list(self._tables)!r})"

    @property
    def tables(self) -> Mapping[str, Mapping[str, float]]:
        return self._tables

    def categories(self) -> Tuple[str, ...]:
        """Return category names in declaration order."""
        return tuple(self._tables)

    def units(self, category: str) -> Tuple[str, ...]:
        """Return the unit names of ``category`` in declaration order.

        Raises:
            CategoryNotFound: If ``category`` is not registered.
        """
        return tuple(self.table(category))

    def table(self, category: str) -> Mapping[str, float]:
        try:
            return self._tables[category]
        except KeyError:
            raise CategoryNotFound(category) from None

    def find_category(self, unit: str) -> Optional[str]:
        """Return the category declaring ``unit``, or ``None`` when unknown."""
        return self._index.get(unit)

    def scale(self, unit: str) -> float:
        """Return the scale factor of ``unit`` relative to its base unit.

        Raises:
            UnitNotFound: If ``unit`` is not registered.
        """
        category = self.find_category(unit)
        if category is None:
            raise UnitNotFound(unit)
        return self._tables[category][unit]

    def base_unit(self, category: str) -> Optional[str]:
        """Return the first unit of ``category`` whose scale is exactly 1."""
        for unit, scale in self.table(category).items():
            if scale == 1.0:
                return unit
        return None
