"""Centralized unit scale tables.

Each category maps unit names to a scale factor expressed in the category's
base unit (the unit whose factor is exactly 1). Declaration order is the
display order.
"""

from __future__ import annotations

from typing import Dict

# Ounce, pound and US liquid volume factors are truncated to six significant figures.
CONVERSION_RATES: Dict[str, Dict[str, float]] = {
    "length": {
        "Millimeters (mm)": 1,
        "Centimeters (cm)": 10,
        "Meters (m)": 1000,
        "Kilometers (km)": 1000000,
        "Inches (in)": 25.4,
        "Feet (ft)": 304.8,
        "Yards (yd)": 914.4,
        "Miles (mi)": 1609344,
    },
    "weight": {
        "Grams (g)": 1,
        "Kilograms (kg)": 1000,
        "Ounces (oz)": 28.3495,
        "Pounds (lb)": 453.592,
    },
    "volume": {
        "Milliliters (ml)": 1,
        "Liters (l)": 1000,
        "Fluid Ounces (fl oz)": 29.5735,
        "Cups (cup)": 240,
        "Pints (pt)": 473.176,
        "Quarts (qt)": 946.353,
        "Gallons (gal)": 3785.41,
    },
}
