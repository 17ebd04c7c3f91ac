"""Bar geometry engine.

Turns each data point's category, value and series offset into a pixel
rectangle. Points that must not be drawn keep their place in the list but
get the zero rect (see Rect.zero).

Value clamping happens in value space before any coordinate conversion:
scales are not trusted outside their domain.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from barlayout.core.errors import InvalidArgumentError
from barlayout.geometry import Rect
from barlayout.models import Axes, ChartData, DataPoint
from barlayout.settings import AxisRangeType, AxisType, VisualSettings

logger = logging.getLogger(__name__)

# Heights in (0, MIN_BAR_HEIGHT) are rounded up so tiny bars stay visible.
MIN_BAR_HEIGHT: float = 1.0


def set_zero_coordinates(point: DataPoint) -> None:
    """Mark a point as excluded from the visible plot."""
    point.bar_coordinates = Rect.zero()


def calculate_bar_coordinates_by_data(
    data: ChartData,
    settings: VisualSettings,
    bar_thickness: float,
    is_small_multiple: bool = False,
) -> None:
    """Convenience: cluster count comes from the number of legend entries."""
    calculate_bar_coordinates(
        data.data_points,
        data.legend_count or 1,
        data.axes,
        settings,
        bar_thickness,
        is_small_multiple,
    )


def calculate_bar_coordinates(
    data_points: Sequence[DataPoint],
    clusters_count: int,
    axes: Axes,
    settings: VisualSettings,
    data_point_thickness: float,
    is_small_multiple: bool = False,
) -> None:
    """Compute bar_coordinates for every point, in place.

    Args:
        data_points: Points of one render pass.
        clusters_count: Number of series sharing one category slot (>= 1).
        axes: Category (x) and value (y) axes.
        settings: Visual settings; only the category axis is read.
        data_point_thickness: Pixel width of one category's full cluster.
            Negative thickness gives zero-width bars on continuous axes.
        is_small_multiple: Trellis panel. The user's start/end only narrow
            bar widths when the range type is custom.

    Raises:
        InvalidArgumentError: If clusters_count < 1.
    """
    if clusters_count < 1:
        raise InvalidArgumentError(f"clusters_count must be >= 1, got {clusters_count}")

    category_axis = settings.category_axis
    is_continuous = bool(axes.x_is_scalar and category_axis.axis_type != AxisType.CATEGORICAL)

    skip_start_end = is_small_multiple and category_axis.range_type != AxisRangeType.CUSTOM

    # A configured bound of 0 counts as unset here.
    category_start = (category_axis.start or -math.inf) if is_continuous else -math.inf
    category_end = (category_axis.end or math.inf) if is_continuous else math.inf

    if clusters_count > 1 and len(data_points) < 3:
        data_point_thickness = data_point_thickness / 2

    min_value, max_value = axes.y.data_domain
    excluded = 0

    for point in data_points:
        if is_continuous:
            start = None if skip_start_end else category_axis.start
            end = None if skip_start_end else category_axis.end

            if (start is not None and start > point.category) or data_point_thickness < 0:
                width = 0.0
            else:
                width = data_point_thickness / clusters_count
            if end is not None and end <= point.category:
                width = 0.0

            if not category_start <= point.category <= category_end:
                set_zero_coordinates(point)
                excluded += 1
                continue
        else:
            width = axes.x.scale.bandwidth() / clusters_count

        x = axes.x.scale(point.category)
        if is_continuous:
            # continuous scales map to the cluster center
            x -= width * clusters_count / 2

        if point.shift_value > max_value:
            set_zero_coordinates(point)
            excluded += 1
            continue

        if clusters_count > 1:
            x += width * point.shift_value

        from_value = 0 if point.value >= 0 else point.value
        if from_value < min_value:
            from_value = min_value
        elif from_value > max_value:
            set_zero_coordinates(point)
            excluded += 1
            continue

        to_value = point.value if point.value >= 0 else 0
        if to_value < min_value:
            set_zero_coordinates(point)
            excluded += 1
            continue
        elif to_value > max_value:
            to_value = max_value

        from_coordinate = axes.y.scale(from_value)
        to_coordinate = axes.y.scale(to_value)

        if not all(math.isfinite(v) for v in (x, width, from_coordinate, to_coordinate)):
            logger.warning(
                "Non-finite bar geometry for category=%r value=%r "
                "(x=%r, width=%r, from=%r, to=%r); bar not drawn",
                point.category, point.value, x, width, from_coordinate, to_coordinate,
            )
            set_zero_coordinates(point)
            excluded += 1
            continue

        if to_coordinate >= from_coordinate:
            set_zero_coordinates(point)
            excluded += 1
            continue

        height = from_coordinate - to_coordinate
        if 0 < height < MIN_BAR_HEIGHT:
            height = MIN_BAR_HEIGHT

        point.bar_coordinates = Rect(x=x, y=to_coordinate, width=width, height=height)

    logger.debug(
        "Computed bar coordinates for %d points (%d excluded, continuous=%s)",
        len(data_points), excluded, is_continuous,
    )
