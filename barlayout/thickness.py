"""Bar thickness: how wide one category's cluster of bars is, in pixels.

calculate_data_point_thickness feeds the bar engine.
recalculate_thickness_for_continuous is a separate post-process for dense
continuous axes. The bar engine does not call it; callers opt in.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Sequence

from barlayout.core.config import ThicknessConfig
from barlayout.core.errors import InvalidArgumentError
from barlayout.models import DataPoint, Size
from barlayout.settings import AxisRangeType, AxisType, VisualSettings

logger = logging.getLogger(__name__)

DEFAULT_THICKNESS_CONFIG = ThicknessConfig()


def calculate_data_point_thickness(
    data_points: Sequence[DataPoint],
    visual_size: Size,
    categories_count: int,
    category_inner_padding: float,
    settings: VisualSettings,
    is_categorical: bool = False,
    is_small_multiple: bool = False,
    config: ThicknessConfig = DEFAULT_THICKNESS_CONFIG,
) -> float:
    """Nominal pixel width of one category's full cluster span.

    Categorical axes split the plot width evenly, clamped to
    [category_min_width, category_max_width] and reduced by the inner
    padding percentage.

    Continuous axes size bars by how many distinct categories fall inside
    the visible range: fewer than 3 use a fraction of the plot height,
    exactly 3 use width / 3.75, and each further category adds 1.25 to the
    divider.

    Raises:
        InvalidArgumentError: If categories_count < 1.
    """
    if categories_count < 1:
        raise InvalidArgumentError(f"categories_count must be >= 1, got {categories_count}")

    category_axis = settings.category_axis

    if is_categorical or category_axis.axis_type == AxisType.CATEGORICAL:
        current_thickness = visual_size.width / categories_count
        clamped = min(config.category_max_width, max(config.category_min_width, current_thickness))
        return clamped * (1 - category_inner_padding / 100)

    skip_start_end = is_small_multiple and category_axis.range_type != AxisRangeType.CUSTOM
    start = None if skip_start_end else category_axis.start
    end = None if skip_start_end else category_axis.end

    points = list(data_points)
    if start is not None or end is not None:
        points = [
            p for p in points
            if (start is None or p.category >= start) and (end is None or p.category <= end)
        ]

    distinct_count = len({p.category for p in points})

    if distinct_count < 3:
        return visual_size.height / config.sparse_divider
    if distinct_count < 4:
        return visual_size.width / config.base_divider
    divider = config.base_divider + config.divider_step * (distinct_count - 3)
    return visual_size.width / divider


def recalculate_thickness_for_continuous(
    data_points: list[DataPoint],
    data_point_thickness: float,
    clusters_count: int,
    config: ThicknessConfig = DEFAULT_THICKNESS_CONFIG,
) -> None:
    """Re-space bars on a continuous axis so neighbours do not overlap.

    Sorts data_points in place by bar left edge and finds the smallest
    gap between consecutive bars. A gap strictly between
    min_redistribution_width and data_point_thickness becomes the new
    uniform bar width; otherwise the thickness is kept. Rects are then
    re-centered on their category and re-offset within their cluster.
    Zero-width rects stay zero-width.
    """
    data_points.sort(key=lambda p: p.bar_coordinates.x)

    min_distance = math.inf
    for previous, current in zip(data_points, data_points[1:]):
        distance = current.bar_coordinates.x - previous.bar_coordinates.x
        min_distance = min(min_distance, distance)

    if config.min_redistribution_width < min_distance < data_point_thickness:
        new_width = min_distance
    else:
        new_width = data_point_thickness

    if not data_point_thickness or data_point_thickness == new_width:
        return

    logger.debug(
        "Redistributing %d bars: thickness %.2f -> %.2f",
        len(data_points), data_point_thickness, new_width,
    )

    for point in data_points:
        rect = point.bar_coordinates
        old_width = rect.width

        x = rect.x + data_point_thickness / 2 - old_width * point.shift_value
        x -= new_width / 2
        if clusters_count > 1:
            x += new_width * point.shift_value

        point.bar_coordinates = replace(rect, x=x, width=new_width if old_width else 0)
