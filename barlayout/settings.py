"""User-configurable chart settings.

Immutable per-render configuration read by the geometry engines.
Every field has a default so callers only spell out what the user changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class AxisType(str, Enum):
    """How the category axis treats its values."""

    CATEGORICAL = "categorical"
    CONTINUOUS = "continuous"


class AxisRangeType(str, Enum):
    """Whether start/end were chosen by the user or synchronized across panels."""

    AUTO = "auto"
    CUSTOM = "custom"


class LabelOrientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LabelPosition(str, Enum):
    """Where a data label sits relative to its bar."""

    AUTO = "auto"
    OUTSIDE_END = "outside_end"
    INSIDE_END = "inside_end"
    INSIDE_CENTER = "inside_center"
    INSIDE_BASE = "inside_base"


class AxisTitleStyle(str, Enum):
    SHOW_TITLE_ONLY = "showTitleOnly"
    SHOW_UNIT_ONLY = "showUnitOnly"
    SHOW_BOTH = "showBoth"


class LineStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


@dataclass(frozen=True)
class CategoryAxisSettings:
    """Category (horizontal) axis.

    start/end bound the visible range of a continuous axis. They are
    ignored for categorical axes.
    """

    axis_type: AxisType = AxisType.CONTINUOUS
    start: Optional[float] = None
    end: Optional[float] = None
    range_type: AxisRangeType = AxisRangeType.AUTO
    inner_padding: float = 20.0        # percent of the band left empty
    title_font_family: str = "DejaVu Sans"
    title_font_size: float = 11.0      # points
    axis_title_style: AxisTitleStyle = AxisTitleStyle.SHOW_TITLE_ONLY


@dataclass(frozen=True)
class ValueAxisSettings:
    """Value (vertical) axis."""

    start: Optional[float] = None
    end: Optional[float] = None
    range_type: AxisRangeType = AxisRangeType.AUTO
    display_units: float = 0           # 0 = auto
    precision: Optional[int] = None
    title_font_family: str = "DejaVu Sans"
    title_font_size: float = 11.0
    axis_title_style: AxisTitleStyle = AxisTitleStyle.SHOW_TITLE_ONLY


@dataclass(frozen=True)
class CategoryLabelsSettings:
    """Data labels drawn on or next to each bar."""

    show: bool = False
    orientation: LabelOrientation = LabelOrientation.HORIZONTAL
    label_position: LabelPosition = LabelPosition.AUTO
    overflow_text: bool = False
    show_background: bool = False
    display_units: float = 0
    precision: Optional[int] = None
    font_family: str = "DejaVu Sans"
    font_size: float = 9.0             # points


@dataclass(frozen=True)
class VisualSettings:
    """All settings for one render pass."""

    category_axis: CategoryAxisSettings = field(default_factory=CategoryAxisSettings)
    value_axis: ValueAxisSettings = field(default_factory=ValueAxisSettings)
    category_labels: CategoryLabelsSettings = field(default_factory=CategoryLabelsSettings)
