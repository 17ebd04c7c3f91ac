# barlayout/positions.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from barlayout.core.config import LabelConfig
from barlayout.core.errors import ConfigError
from barlayout.geometry import Rect
from barlayout.models import DataPoint
from barlayout.settings import CategoryLabelsSettings, LabelPosition

DEFAULT_LABEL_CONFIG = LabelConfig()


@dataclass(frozen=True)
class PlacementContext:
    """Everything a placement needs to put one label next to one bar.

    box_height already includes the background padding.
    The "end" of a bar is its top for non-negative values and its bottom
    for negative ones.
    """
    bar: Rect
    box_height: float
    is_negative: bool
    chart_height: float
    overflow: bool

    @property
    def fits_inside(self) -> bool:
        return self.overflow or self.box_height <= self.bar.height

    def fits_chart(self, y: float) -> bool:
        return y >= 0 and y + self.box_height <= self.chart_height


@runtime_checkable
class LabelPlacement(Protocol):
    """Protocol for a vertical label placement.

    Returns the top edge of the label box, or None to suppress the label.
    Placements are stateless, pure functions of the context.
    """

    @property
    def name(self) -> str:
        """Unique name for this placement (matches LabelPosition value)."""
        ...

    def __call__(self, ctx: PlacementContext) -> Optional[float]:
        ...


# --- Registry ---

_POSITIONS: dict[str, LabelPlacement] = {}


def get_registered_positions() -> dict[str, LabelPlacement]:
    return dict(_POSITIONS)


def position(name: str):
    """Decorator for registering a placement class.

    Usage:
        @position("inside_end")
        class InsideEnd:
            name = "inside_end"
            def __call__(self, ctx: PlacementContext) -> Optional[float]:
                ...
    """
    def decorator(cls):
        _POSITIONS[name] = cls()
        return cls
    return decorator


# --- Placements ---


@position("inside_end")
class InsideEnd:
    name = "inside_end"

    def __call__(self, ctx: PlacementContext) -> Optional[float]:
        if not ctx.fits_inside:
            return None
        if ctx.is_negative:
            return ctx.bar.bottom - ctx.box_height
        return ctx.bar.y


@position("inside_center")
class InsideCenter:
    name = "inside_center"

    def __call__(self, ctx: PlacementContext) -> Optional[float]:
        if not ctx.fits_inside:
            return None
        return ctx.bar.y + (ctx.bar.height - ctx.box_height) / 2


@position("inside_base")
class InsideBase:
    name = "inside_base"

    def __call__(self, ctx: PlacementContext) -> Optional[float]:
        if not ctx.fits_inside:
            return None
        if ctx.is_negative:
            return ctx.bar.y
        return ctx.bar.bottom - ctx.box_height


def _outside_end_y(ctx: PlacementContext) -> float:
    if ctx.is_negative:
        return ctx.bar.bottom
    return ctx.bar.y - ctx.box_height


@position("outside_end")
class OutsideEnd:
    """Beyond the bar's end. Falls back inside when it would leave the chart."""
    name = "outside_end"

    def __call__(self, ctx: PlacementContext) -> Optional[float]:
        y = _outside_end_y(ctx)
        if ctx.overflow or ctx.fits_chart(y):
            return y
        return _POSITIONS["inside_end"](ctx)


@position("auto")
class AutoPosition:
    """Outside the end when there is room in the chart, else inside the end."""
    name = "auto"

    def __call__(self, ctx: PlacementContext) -> Optional[float]:
        y = _outside_end_y(ctx)
        if ctx.fits_chart(y):
            return y
        return _POSITIONS["inside_end"](ctx)


def calculate_position_shift(
    settings: CategoryLabelsSettings,
    text_height: float,
    data_point: DataPoint,
    chart_height: float,
    config: LabelConfig = DEFAULT_LABEL_CONFIG,
) -> Optional[float]:
    """Top edge of the data label box for one bar, or None for no label.

    Bars excluded from the plot (zero rect) get no label unless overflow
    is allowed.

    Raises:
        ConfigError: If no placement is registered for settings.label_position.
    """
    bar = data_point.bar_coordinates
    if bar is None or (bar.is_zero and not settings.overflow_text):
        return None

    position_setting = settings.label_position
    key = position_setting.value if isinstance(position_setting, LabelPosition) else position_setting
    placement = _POSITIONS.get(key)
    if placement is None:
        raise ConfigError(f"No label placement registered for {key!r}")

    padding = config.background_height_padding if settings.show_background else 0
    ctx = PlacementContext(
        bar=bar,
        box_height=text_height + padding,
        is_negative=data_point.value < 0,
        chart_height=chart_height,
        overflow=settings.overflow_text,
    )
    return placement(ctx)
