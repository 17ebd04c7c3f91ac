# barlayout/adapters/matplotlib.py

from __future__ import annotations

from typing import Any

from matplotlib.backends.backend_agg import RendererAgg
from matplotlib.font_manager import FontProperties

from barlayout.core.errors import InvalidArgumentError, MeasurementError
from barlayout.models import AxisProperties, Axes
from barlayout.settings import AxisType
from barlayout.text import TextProperties

# Ascender and descender, so the estimate covers any label text.
HEIGHT_SAMPLE_TEXT = "Mg"

# At 72 dpi one point is one pixel, so pixel font sizes pass through unchanged.
_MEASURE_DPI = 72


class MatplotlibTextMeasurer:
    """Measure label text with matplotlib's Agg renderer.

    Uses the same font machinery matplotlib uses when drawing, so sizes
    match what a matplotlib figure would render. Fonts that are not
    installed fall back to matplotlib's default family.
    """

    def __init__(self) -> None:
        self._renderer = RendererAgg(1, 1, _MEASURE_DPI)

    def measure_width(self, properties: TextProperties, text: str) -> float:
        width, _, _ = self._extent(properties, text)
        return width

    def estimate_height(self, properties: TextProperties) -> float:
        _, height, _ = self._extent(properties, HEIGHT_SAMPLE_TEXT)
        return height

    def _extent(self, properties: TextProperties, text: str) -> tuple[float, float, float]:
        try:
            font = FontProperties(family=properties.font_family, size=properties.font_size)
            return self._renderer.get_text_width_height_descent(text, font, ismath=False)
        except Exception as e:
            raise MeasurementError(
                f"Failed to measure {text!r} in {properties.font_family} "
                f"{properties.font_size}px: {e}"
            ) from e


class MatplotlibScale:
    """Adapt a matplotlib Axes data transform to the Scale protocol.

    matplotlib display coordinates have a bottom-left origin.
    We use top-left with y increasing downward (screen coords), so y is
    flipped against the figure height.
    """

    def __init__(self, ax: Any, axis: str):
        if axis not in ("x", "y"):
            raise InvalidArgumentError(f"axis must be 'x' or 'y', got {axis!r}")
        self._ax = ax
        self.axis = axis

    @property
    def domain(self) -> tuple[float, float]:
        lo, hi = self._ax.get_xlim() if self.axis == "x" else self._ax.get_ylim()
        return (min(lo, hi), max(lo, hi))

    def __call__(self, value: float) -> float:
        ax = self._ax
        if self.axis == "x":
            px, _ = ax.transData.transform((value, ax.get_ylim()[0]))
            return float(px)
        _, py = ax.transData.transform((ax.get_xlim()[0], value))
        return float(ax.figure.bbox.height - py)

    def bandwidth(self) -> float:
        """Pixel width of one data unit along this axis."""
        return abs(self(1) - self(0))


class MatplotlibBandScale(MatplotlibScale):
    """Category slots one data unit wide, centred on the category.

    matplotlib draws categorical bars at 0, 1, 2, ... so a category maps to
    the left edge of its slot, as band scales do.
    """

    def __call__(self, value: float) -> float:
        return min(super().__call__(value - 0.5), super().__call__(value + 0.5))


def axes_from_matplotlib(ax: Any, axis_type: AxisType = AxisType.CONTINUOUS) -> Axes:
    """x and y axes over the current limits of a matplotlib Axes.

    A categorical axis_type gives a band x scale and x_is_scalar=False.
    Coordinates are relative to the figure, not the plot area.
    """
    is_categorical = axis_type == AxisType.CATEGORICAL
    x_scale = MatplotlibBandScale(ax, "x") if is_categorical else MatplotlibScale(ax, "x")
    y_scale = MatplotlibScale(ax, "y")
    return Axes(
        x=AxisProperties(scale=x_scale, data_domain=x_scale.domain),
        y=AxisProperties(scale=y_scale, data_domain=y_scale.domain),
        x_is_scalar=not is_categorical,
    )
