"""Value formatting for data labels and axis titles.

Display units scale a value before it is printed (1500 -> "1.5K").
A display_units setting of 0 means auto: the unit is picked from the
magnitude of a reference value, usually the largest value in the chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from barlayout.core.errors import ConfigError
from barlayout.models import AxisProperties, ChartData, ColumnMetadata
from barlayout.settings import AxisTitleStyle

AUTO_DISPLAY_UNITS: float = 0

# Decimals shown when no precision is configured. Trailing zeros are trimmed.
DEFAULT_DECIMALS: int = 2

NO_UNIT_TITLE: str = "No unit"


@dataclass(frozen=True)
class DisplayUnit:
    value: float
    title: str
    suffix: str


NONE_UNIT = DisplayUnit(1, "None", "")

# Ordered smallest to largest. Auto selection relies on the order.
DISPLAY_UNITS: tuple[DisplayUnit, ...] = (
    NONE_UNIT,
    DisplayUnit(1e3, "Thousands", "K"),
    DisplayUnit(1e6, "Millions", "M"),
    DisplayUnit(1e9, "Billions", "bn"),
    DisplayUnit(1e12, "Trillions", "T"),
)


def resolve_display_unit(display_units: float, reference_value: float = 0) -> DisplayUnit:
    """Map a display_units setting to a DisplayUnit.

    Raises:
        ConfigError: If display_units is neither auto nor a known unit.
    """
    if display_units == AUTO_DISPLAY_UNITS:
        magnitude = abs(reference_value)
        chosen = NONE_UNIT
        for unit in DISPLAY_UNITS:
            if magnitude >= unit.value:
                chosen = unit
        return chosen

    for unit in DISPLAY_UNITS:
        if unit.value == display_units:
            return unit
    raise ConfigError(
        f"Unknown display units {display_units!r}; "
        f"expected 0 (auto) or one of {[u.value for u in DISPLAY_UNITS]}"
    )


class ValueFormatter:
    """Formats numbers with a display unit suffix.

    precision wins over format_spec; with neither, up to DEFAULT_DECIMALS
    decimals are printed and trailing zeros trimmed.
    """

    def __init__(
        self,
        display_unit: DisplayUnit = NONE_UNIT,
        precision: Optional[int] = None,
        format_spec: Optional[str] = None,
    ):
        if precision is not None and precision < 0:
            raise ConfigError(f"precision must be >= 0, got {precision}")
        self.display_unit = display_unit
        self.precision = precision
        self.format_spec = format_spec

    def format(self, value: float) -> str:
        scaled = value / self.display_unit.value
        if self.precision is not None:
            text = format(scaled, f".{self.precision}f")
        elif self.format_spec:
            text = format(scaled, self.format_spec)
        else:
            text = format(scaled, f".{DEFAULT_DECIMALS}f")
            if "." in text:
                text = text.rstrip("0").rstrip(".")
        return _strip_negative_zero(text) + self.display_unit.suffix

    def __repr__(self) -> str:
        return (
            f"ValueFormatter(unit={self.display_unit.title!r}, "
            f"precision={self.precision!r}, format_spec={self.format_spec!r})"
        )


def _strip_negative_zero(text: str) -> str:
    if text.startswith("-") and text[1:].strip("0.,") == "":
        return text[1:]
    return text


def create_formatter(
    display_units: float,
    precision: Optional[int],
    column: Optional[ColumnMetadata],
    value: float,
) -> ValueFormatter:
    """Build the label formatter for one render pass.

    Args:
        display_units: 0 for auto, else the unit's value (1e3, 1e6, ...).
        precision: Fixed number of decimals, or None.
        column: Metadata of the measure column; its format is the fallback
            format spec.
        value: Reference value for auto units.
    """
    unit = resolve_display_unit(display_units, value)
    return ValueFormatter(
        display_unit=unit,
        precision=precision,
        format_spec=column.format if column is not None else None,
    )


def value_for_formatter(data: ChartData) -> float:
    """Reference value for auto display units: the largest magnitude in the chart."""
    return max((abs(p.value) for p in data.data_points), default=0)


def get_unit_type(axis: AxisProperties) -> Optional[str]:
    """Title of the axis display unit, or None when values are not scaled."""
    formatter = axis.formatter
    if formatter is not None and formatter.display_unit.value > NONE_UNIT.value:
        return formatter.display_unit.title
    return None


def get_title_with_unit_type(
    title: str,
    axis_style: AxisTitleStyle,
    axis: AxisProperties,
) -> str:
    unit_title = get_unit_type(axis) or NO_UNIT_TITLE
    if axis_style == AxisTitleStyle.SHOW_UNIT_ONLY:
        return unit_title
    if axis_style == AxisTitleStyle.SHOW_BOTH:
        return f"{title} ({unit_title})"
    return title
