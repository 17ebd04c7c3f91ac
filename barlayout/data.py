"""Data intake: turn a tabular frame into data points and axes.

Ordinal categories become positional indices on a band scale; numeric
categories stay numeric on a linear scale unless the user forces a
categorical axis. Each series gets its own shift_value inside a cluster.
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype

from barlayout.core.errors import DataError
from barlayout.models import AxisProperties, Axes, ChartData, DataPoint, Size
from barlayout.scales import LinearScale, OrdinalBandScale
from barlayout.settings import AxisType, VisualSettings

logger = logging.getLogger(__name__)


def category_is_scalar(column: pd.Series) -> bool:
    """True if the column can be laid out on a continuous axis.

    Numeric columns are scalar. Text, categorical and boolean columns are
    ordinal.
    """
    return is_numeric_dtype(column) and not is_bool_dtype(column)


def _padded_domain(lo: float, hi: float) -> tuple[float, float]:
    if lo == hi:
        return (lo - 1.0, hi + 1.0)
    return (lo, hi)


def build_chart_data(
    frame: pd.DataFrame,
    category: str,
    value: str,
    plot_size: Size,
    series: Optional[str] = None,
    settings: Optional[VisualSettings] = None,
) -> ChartData:
    """Build data points and axes for one render pass.

    The value domain always includes 0 so bars grow from the baseline.
    User start/end on either axis override the data extent.

    Raises:
        DataError: If a column is missing or the measure is not numeric.
    """
    settings = settings or VisualSettings()

    columns = [category, value] + ([series] if series else [])
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise DataError(f"Columns not found in frame: {missing}")

    try:
        values = pd.to_numeric(frame[value], errors="raise")
    except (ValueError, TypeError) as e:
        raise DataError(f"Measure column {value!r} is not numeric: {e}") from e

    frame = frame.assign(**{value: values}).dropna(subset=[category, value])
    if len(frame) == 0:
        logger.warning("No rows left after dropping missing categories or values")

    x_is_scalar = category_is_scalar(frame[category])
    continuous = x_is_scalar and settings.category_axis.axis_type != AxisType.CATEGORICAL

    if continuous:
        categories = frame[category].astype(float).tolist()
        category_count = len(set(categories))
    else:
        codes, uniques = pd.factorize(frame[category], sort=x_is_scalar)
        categories = codes.tolist()
        category_count = len(uniques)

    if series:
        shifts, series_names = pd.factorize(frame[series], sort=False)
        shift_values = shifts.tolist()
        series_labels = [str(s) for s in frame[series]]
        legend_count = max(1, len(series_names))
    else:
        shift_values = [0] * len(frame)
        series_labels = [None] * len(frame)
        legend_count = 1

    data_points = [
        DataPoint(category=c, value=float(v), shift_value=s, series=label)
        for c, v, s, label in zip(categories, frame[value], shift_values, series_labels)
    ]

    value_axis = settings.value_axis
    value_min = min([0.0] + [p.value for p in data_points])
    value_max = max([0.0] + [p.value for p in data_points])
    y_domain = _padded_domain(
        value_axis.start if value_axis.start is not None else value_min,
        value_axis.end if value_axis.end is not None else value_max,
    )
    y = AxisProperties(scale=LinearScale(y_domain, (plot_size.height, 0)), data_domain=y_domain)

    category_axis = settings.category_axis
    if continuous:
        x_domain = _padded_domain(
            category_axis.start if category_axis.start is not None else min(categories, default=0.0),
            category_axis.end if category_axis.end is not None else max(categories, default=0.0),
        )
        x = AxisProperties(scale=LinearScale(x_domain, (0, plot_size.width)), data_domain=x_domain)
    else:
        band = OrdinalBandScale(
            max(1, category_count),
            (0, plot_size.width),
            padding_inner=category_axis.inner_padding / 100,
        )
        x = AxisProperties(scale=band, data_domain=(0, max(0, category_count - 1)))

    logger.debug(
        "Built %d data points: %d categories, %d series, continuous=%s",
        len(data_points), category_count, legend_count, continuous,
    )
    return ChartData(
        data_points=data_points,
        axes=Axes(x=x, y=y, x_is_scalar=x_is_scalar),
        legend_count=legend_count,
    )
