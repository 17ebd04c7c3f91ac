"""Pixel geometry for bar charts: bar rectangles and data label boxes."""

from barlayout.bars import calculate_bar_coordinates, calculate_bar_coordinates_by_data
from barlayout.geometry import Rect
from barlayout.labels import calculate_label_coordinates
from barlayout.models import AxisProperties, Axes, ChartData, DataPoint, MeasureMetadata, Size
from barlayout.thickness import calculate_data_point_thickness, recalculate_thickness_for_continuous

__all__ = [
    "AxisProperties",
    "Axes",
    "ChartData",
    "DataPoint",
    "MeasureMetadata",
    "Rect",
    "Size",
    "calculate_bar_coordinates",
    "calculate_bar_coordinates_by_data",
    "calculate_data_point_thickness",
    "calculate_label_coordinates",
    "recalculate_thickness_for_continuous",
]
