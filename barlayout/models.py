"""barlayout data models.

This is the shared contract file. Dataclasses that cross module
boundaries (data points, axes, metadata) live here.

Data points are the only mutable objects: the bar and label engines write
their output fields in place, once per render pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from barlayout.geometry import Rect
from barlayout.scales import Scale

if TYPE_CHECKING:
    from barlayout.formatting import ValueFormatter


@dataclass
class DataPoint:
    """A single chart observation.

    category: numeric domain value on the category axis. For ordinal axes
        this is the positional index of the category.
    shift_value: index of the series within its cluster.
    bar_coordinates / label_coordinates: engine output. A None label means
        no label is drawn for this point.
    """

    category: float
    value: float
    shift_value: int = 0
    series: Optional[str] = None
    selected: bool = False
    highlight: bool = False
    bar_coordinates: Optional[Rect] = None
    label_coordinates: Optional[Rect] = None


@dataclass(frozen=True)
class Size:
    """Plot area size in pixels."""

    width: float
    height: float


@dataclass
class AxisProperties:
    """One axis: its scale, the visible data domain and its tick formatter.

    data_domain is (min, max) after the user's start/end settings have been
    applied.
    """

    scale: Scale
    data_domain: tuple[float, float] = (0.0, 0.0)
    formatter: Optional[ValueFormatter] = None


@dataclass
class Axes:
    x: AxisProperties
    y: AxisProperties
    x_is_scalar: bool = False


@dataclass
class ChartData:
    """Everything one render pass computes geometry for.

    legend_count is the number of series sharing one category slot.
    """

    data_points: list[DataPoint]
    axes: Axes
    legend_count: int = 1


@dataclass(frozen=True)
class ColumnMetadata:
    """A bound column. format is a Python format spec, e.g. ',.2f'."""

    display_name: str
    format: Optional[str] = None


@dataclass(frozen=True)
class MeasureMetadata:
    value: ColumnMetadata
    category: Optional[ColumnMetadata] = None
    series: Optional[ColumnMetadata] = None
