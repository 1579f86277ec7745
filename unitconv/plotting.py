"""Render scale-factor charts for the unit categories.

Plotting code receives scales from the registry and only draws them; no
conversion arithmetic happens here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

import matplotlib.pyplot as plt
import numpy as np

from .engine import DEFAULT_ENGINE, ConversionEngine
from .reporting import DEFAULT_OUTPUT_DIR

FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LINEWIDTH_THIN: float = 1.2
    GRID_ALPHA: float = 0.20
    BAR_COLOR: str = "#4A4A4A"
    BASE_COLOR: str = "#000000"
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)


STYLE = StyleConfig()


def setup_plot_style() -> None:
    """Apply the grayscale serif plotting style once per process."""
    if _STYLE_STATE["initialized"]:
        return
    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.size": STYLE.BASE_FONTSIZE,
            "axes.titlesize": STYLE.TITLE_FONTSIZE,
            "axes.labelsize": STYLE.LABEL_FONTSIZE,
            "xtick.labelsize": STYLE.TICK_FONTSIZE,
            "ytick.labelsize": STYLE.TICK_FONTSIZE,
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": STYLE.GRID_ALPHA,
            "grid.linestyle": ":",
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
        }
    )
    _STYLE_STATE["initialized"] = True


def plot_category_scales(
    category: str,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    engine: ConversionEngine = DEFAULT_ENGINE,
) -> str:
    """Draw the scale factors of one category as a log-scale bar chart.

    Args:
        category (str): Registered category name.
        output_dir (str, optional): Directory for the PNG file. Defaults to
            ``"output"``.
        engine (ConversionEngine, optional): Source of the registry.

    Returns:
        str: Path to ``<category>_scales.png``.

    Raises:
        CategoryNotFound: If ``category`` is not registered.

    Note:
        The base unit bar is drawn in black, all others in gray. Bars are
        listed top-down in declaration order.
    """
    table = engine.registry.table(category)
    base_unit = engine.registry.base_unit(category)
    units = list(table)
    scales = np.array([table[u] for u in units], dtype=float)

    setup_plot_style()
    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    positions = np.arange(len(units))
    colors = [STYLE.BASE_COLOR if u == base_unit else STYLE.BAR_COLOR for u in units]
    ax.barh(positions, scales, color=colors)
    ax.set_yticks(positions)
    ax.set_yticklabels(units)
    ax.invert_yaxis()
    ax.set_xscale("log")
    ax.grid(True, axis="x")
    reference = base_unit if base_unit is not None else "reference unit"
    ax.set_xlabel(f"Scale factor (in {reference})")
    ax.set_title(f"{category[:1].upper() + category[1:]} units")

    os.makedirs(output_dir, exist_ok=True)
    png_path = os.path.join(output_dir, f"{category}_scales.png")
    fig.savefig(png_path, dpi=FIGURE_DPI)
    plt.close(fig)
    return png_path


def plot_all_categories(
    output_dir: str = DEFAULT_OUTPUT_DIR, engine: ConversionEngine = DEFAULT_ENGINE
) -> List[str]:
    """Draw one scale chart per registered category and return the paths."""
    return [
        plot_category_scales(category, output_dir, engine)
        for category in engine.list_categories()
    ]
