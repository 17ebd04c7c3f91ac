"""Foundation configuration dataclasses.

Calibration constants of the geometry engines live here, not as magic
numbers in code. Per-render user choices live in barlayout.settings.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThicknessConfig:
    """Calibration of bar thickness for categorical and continuous axes.

    Continuous axes use two fixed calibration points (3 and 4 distinct
    categories) and a linear divider beyond them.
    """

    category_min_width: float = 1.0
    category_max_width: float = 450.0
    sparse_divider: float = 8.0        # < 3 categories: plot height / 8
    base_divider: float = 3.75         # exactly 3 categories
    divider_step: float = 1.25         # added per category above 3
    min_redistribution_width: float = 1.5


@dataclass(frozen=True)
class LabelConfig:
    """Label background paddings and unit conversion for text measurement."""

    background_height_padding: float = 4.0
    background_width_padding: float = 6.2
    points_to_pixels: float = 96.0 / 72.0
