"""Label geometry engine.

Places one data label per bar from the already computed bar rectangle,
the formatted value and its measured size. A point whose label does not
fit (and overflow is off) gets label_coordinates = None.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Optional, Sequence

from barlayout.core.config import LabelConfig
from barlayout.formatting import create_formatter, value_for_formatter
from barlayout.geometry import Rect
from barlayout.models import ChartData, DataPoint, MeasureMetadata
from barlayout.positions import calculate_position_shift
from barlayout.settings import CategoryLabelsSettings, LabelOrientation
from barlayout.text import (
    TextMeasurer,
    get_text_properties,
    get_text_properties_for_height_calculation,
)

logger = logging.getLogger(__name__)

DEFAULT_LABEL_CONFIG = LabelConfig()

# (settings, text_height, data_point, chart_height) -> label top, or None
PositionShift = Callable[[CategoryLabelsSettings, float, DataPoint, float], Optional[float]]


def calculate_label_coordinates(
    data: ChartData,
    settings: CategoryLabelsSettings,
    metadata: MeasureMetadata,
    chart_height: float,
    text_measurer: TextMeasurer,
    data_points: Optional[Sequence[DataPoint]] = None,
    position_shift: Optional[PositionShift] = None,
    config: LabelConfig = DEFAULT_LABEL_CONFIG,
) -> None:
    """Compute label_coordinates in place. No-op when labels are hidden.

    Vertical labels run along the bar, so their "width" across the bar is
    the text height and their extent along the bar is the text width.

    Args:
        data: The render pass; also the reference for auto display units.
        settings: Data label settings.
        metadata: Measure metadata; the value column's format is used.
        chart_height: Plot height in pixels, for the vertical placement.
        text_measurer: Measures formatted label text.
        data_points: Subset to label instead of data.data_points.
        position_shift: Vertical placement. Returns the label top or None.
            Defaults to calculate_position_shift with the same config.
        config: Paddings and point size conversion, shared by the fit
            test, the font and the default placement.
    """
    if not settings.show:
        return

    points = data_points if data_points is not None else data.data_points

    formatter = create_formatter(
        settings.display_units,
        settings.precision,
        metadata.value,
        value_for_formatter(data),
    )

    if position_shift is None:
        position_shift = partial(calculate_position_shift, config=config)

    width_properties = get_text_properties(settings, config)
    height_properties = get_text_properties_for_height_calculation(settings, config)

    is_horizontal = settings.orientation == LabelOrientation.HORIZONTAL
    background_padding = config.background_height_padding if settings.show_background else 0
    placed = 0

    for point in points:
        formatted_text = formatter.format(point.value)
        height_properties = height_properties.with_text(formatted_text)

        if is_horizontal:
            text_width = text_measurer.measure_width(width_properties, formatted_text)
            text_height = text_measurer.estimate_height(height_properties)
        else:
            text_width = text_measurer.estimate_height(height_properties)
            text_height = text_measurer.measure_width(width_properties, formatted_text)

        bar = point.bar_coordinates or Rect.zero()

        if not (settings.overflow_text or text_width + background_padding < bar.width):
            point.label_coordinates = None
            continue

        offset = -text_width / 2 if is_horizontal else text_width / 3
        dx = bar.x + bar.width / 2 + offset
        dy = position_shift(settings, text_height, point, chart_height)

        if dy is None:
            point.label_coordinates = None
            continue

        point.label_coordinates = Rect(x=dx, y=dy, width=text_width, height=text_height)
        placed += 1

    logger.debug("Placed %d of %d data labels", placed, len(points))
