"""Tests for the bar geometry engine."""

import logging
import math

import pytest

from barlayout.bars import (
    MIN_BAR_HEIGHT,
    calculate_bar_coordinates,
    calculate_bar_coordinates_by_data,
    set_zero_coordinates,
)
from barlayout.core.errors import BarLayoutError, InvalidArgumentError
from barlayout.geometry import Rect
from barlayout.models import AxisProperties, Axes, ChartData, DataPoint
from barlayout.scales import LinearScale, OrdinalBandScale
from barlayout.settings import AxisRangeType, AxisType, CategoryAxisSettings, VisualSettings


def discrete_axes(count=1, width=40, y_domain=(0, 100), y_range=(200, 0)):
    return Axes(
        x=AxisProperties(scale=OrdinalBandScale(count, (0, width))),
        y=AxisProperties(scale=LinearScale(y_domain, y_range), data_domain=y_domain),
        x_is_scalar=False,
    )


def continuous_axes(x_domain=(0, 10), width=100, y_domain=(0, 100), y_range=(200, 0)):
    return Axes(
        x=AxisProperties(scale=LinearScale(x_domain, (0, width)), data_domain=x_domain),
        y=AxisProperties(scale=LinearScale(y_domain, y_range), data_domain=y_domain),
        x_is_scalar=True,
    )


def continuous_settings(**kwargs):
    return VisualSettings(category_axis=CategoryAxisSettings(axis_type=AxisType.CONTINUOUS, **kwargs))


DISCRETE = VisualSettings(category_axis=CategoryAxisSettings(axis_type=AxisType.CATEGORICAL))


class NanScale:
    def __call__(self, value):
        return math.nan


class TestDiscreteAxis:
    def test_single_positive_bar(self):
        point = DataPoint(category=0, value=50)
        calculate_bar_coordinates([point], 1, discrete_axes(), DISCRETE, 0)
        assert point.bar_coordinates == Rect(x=0, y=100, width=40, height=100)

    def test_negative_value_below_domain_is_suppressed(self):
        # from -10 clamps to 0, so from and to coordinates coincide
        point = DataPoint(category=0, value=-10)
        calculate_bar_coordinates([point], 1, discrete_axes(), DISCRETE, 0)
        assert point.bar_coordinates.is_zero

    def test_negative_value_grows_down_from_zero(self):
        # scale: v -> 100 - 2v
        point = DataPoint(category=0, value=-20)
        axes = discrete_axes(y_domain=(-50, 50))
        calculate_bar_coordinates([point], 1, axes, DISCRETE, 0)
        assert point.bar_coordinates.y == pytest.approx(100)
        assert point.bar_coordinates.height == pytest.approx(40)

    def test_value_above_domain_is_clamped(self):
        point = DataPoint(category=0, value=150)
        calculate_bar_coordinates([point], 1, discrete_axes(), DISCRETE, 0)
        assert point.bar_coordinates == Rect(x=0, y=0, width=40, height=200)

    def test_bar_entirely_below_domain(self):
        point = DataPoint(category=0, value=5)
        calculate_bar_coordinates([point], 1, discrete_axes(y_domain=(10, 100)), DISCRETE, 0)
        assert point.bar_coordinates.is_zero

    def test_baseline_above_domain(self):
        point = DataPoint(category=0, value=5)
        calculate_bar_coordinates([point], 1, discrete_axes(y_domain=(-100, -10)), DISCRETE, 0)
        assert point.bar_coordinates.is_zero

    def test_sub_pixel_height_rounds_up(self):
        # 0.2 px per unit
        point = DataPoint(category=0, value=1)
        calculate_bar_coordinates([point], 1, discrete_axes(y_domain=(0, 1000)), DISCRETE, 0)
        assert point.bar_coordinates.height == MIN_BAR_HEIGHT
        assert point.bar_coordinates.y == pytest.approx(199.8)

    def test_inverted_scale_gives_zero_rect(self):
        point = DataPoint(category=0, value=50)
        axes = discrete_axes(y_range=(0, 200))
        calculate_bar_coordinates([point], 1, axes, DISCRETE, 0)
        assert point.bar_coordinates.is_zero

    def test_clusters_split_band(self):
        axes = discrete_axes(count=2, width=100)
        points = [
            DataPoint(category=0, value=10, shift_value=0),
            DataPoint(category=1, value=10, shift_value=0),
            DataPoint(category=1, value=20, shift_value=1),
        ]
        calculate_bar_coordinates(points, 2, axes, DISCRETE, 0)
        assert [p.bar_coordinates.x for p in points] == [0, 50, 75]
        assert all(p.bar_coordinates.width == 25 for p in points)

    def test_shift_value_beyond_domain_is_suppressed(self):
        point = DataPoint(category=0, value=0.5, shift_value=2)
        axes = discrete_axes(y_domain=(0, 1))
        calculate_bar_coordinates([point], 3, axes, DISCRETE, 0)
        assert point.bar_coordinates.is_zero

    def test_categorical_setting_overrides_scalar_axis(self):
        axes = discrete_axes()
        axes.x_is_scalar = True
        point = DataPoint(category=0, value=50)
        calculate_bar_coordinates([point], 1, axes, DISCRETE, 999)
        assert point.bar_coordinates.width == 40


class TestContinuousAxis:
    def three_points(self, **overrides):
        points = [DataPoint(category=c, value=50) for c in (2, 5, 8)]
        for key, value in overrides.items():
            setattr(points[1], key, value)
        return points

    def test_bar_is_centered_on_category(self):
        points = self.three_points()
        calculate_bar_coordinates(points, 1, continuous_axes(), continuous_settings(), 20)
        assert points[1].bar_coordinates == Rect(x=40, y=100, width=20, height=100)

    def test_cluster_offset(self):
        points = self.three_points(shift_value=1)
        calculate_bar_coordinates(points, 2, continuous_axes(), continuous_settings(), 20)
        assert points[1].bar_coordinates.width == 10
        assert points[1].bar_coordinates.x == 50

    def test_thickness_halved_for_sparse_clusters(self):
        points = [DataPoint(category=5, value=50), DataPoint(category=5, value=30, shift_value=1)]
        calculate_bar_coordinates(points, 2, continuous_axes(), continuous_settings(), 20)
        assert points[0].bar_coordinates.width == 5
        assert points[0].bar_coordinates.x == 45
        assert points[1].bar_coordinates.x == 50

    def test_thickness_not_halved_for_single_cluster(self):
        points = [DataPoint(category=5, value=50)]
        calculate_bar_coordinates(points, 1, continuous_axes(), continuous_settings(), 20)
        assert points[0].bar_coordinates.width == 20

    def test_points_outside_range_are_zeroed(self):
        points = [DataPoint(category=c, value=50) for c in (1, 5, 9)]
        calculate_bar_coordinates(points, 1, continuous_axes(), continuous_settings(start=2, end=8), 20)
        assert points[0].bar_coordinates.is_zero
        assert points[2].bar_coordinates.is_zero
        assert not points[1].bar_coordinates.is_zero

    def test_point_on_end_bound_keeps_position_with_zero_width(self):
        points = self.three_points()
        calculate_bar_coordinates(points, 1, continuous_axes(), continuous_settings(start=2, end=8), 20)
        last = points[2].bar_coordinates
        assert last.width == 0
        assert last.x == 80
        assert last.height == 100

    def test_zero_start_bound_does_not_clip(self):
        points = [DataPoint(category=c, value=50) for c in (-1, 2, 5)]
        calculate_bar_coordinates(points, 1, continuous_axes(), continuous_settings(start=0), 20)
        first = points[0].bar_coordinates
        assert not first.is_zero
        assert first.width == 0
        assert first.x == -10

    def test_small_multiple_ignores_auto_range_for_width(self):
        points = self.three_points()
        settings = continuous_settings(start=2, end=8)
        calculate_bar_coordinates(points, 1, continuous_axes(), settings, 20, is_small_multiple=True)
        assert points[2].bar_coordinates.width == 20

    def test_small_multiple_custom_range_narrows_width(self):
        points = self.three_points()
        settings = continuous_settings(start=2, end=8, range_type=AxisRangeType.CUSTOM)
        calculate_bar_coordinates(points, 1, continuous_axes(), settings, 20, is_small_multiple=True)
        assert points[2].bar_coordinates.width == 0

    def test_negative_thickness_gives_zero_width(self):
        points = self.three_points()
        calculate_bar_coordinates(points, 1, continuous_axes(), continuous_settings(), -5)
        assert all(p.bar_coordinates.width == 0 for p in points)


class TestBoundary:
    def test_zero_clusters_raises(self):
        with pytest.raises(InvalidArgumentError):
            calculate_bar_coordinates([DataPoint(0, 1)], 0, discrete_axes(), DISCRETE, 0)

    def test_precondition_error_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_bar_coordinates([], -1, discrete_axes(), DISCRETE, 0)
        assert issubclass(InvalidArgumentError, BarLayoutError)

    def test_non_finite_scale_output_is_zeroed_and_logged(self, caplog):
        axes = discrete_axes()
        axes.y = AxisProperties(scale=NanScale(), data_domain=(0, 100))
        point = DataPoint(category=0, value=50)
        with caplog.at_level(logging.WARNING, logger="barlayout.bars"):
            calculate_bar_coordinates([point], 1, axes, DISCRETE, 0)
        assert point.bar_coordinates.is_zero
        assert "Non-finite" in caplog.text

    def test_every_point_gets_a_rect(self):
        points = [DataPoint(category=0, value=v) for v in (-500, -1, 0, 0.01, 42, 500)]
        calculate_bar_coordinates(points, 1, discrete_axes(), DISCRETE, 0)
        assert all(p.bar_coordinates is not None for p in points)

    def test_in_domain_rects_are_non_negative_and_never_sub_pixel(self):
        points = [DataPoint(category=0, value=v / 10) for v in range(0, 1001, 7)]
        calculate_bar_coordinates(points, 1, discrete_axes(y_domain=(0, 1000)), DISCRETE, 0)
        for p in points:
            rect = p.bar_coordinates
            assert rect.width >= 0
            assert rect.height >= 0
            assert not 0 < rect.height < 1

    def test_set_zero_coordinates(self):
        point = DataPoint(category=3, value=3, bar_coordinates=Rect(1, 2, 3, 4))
        set_zero_coordinates(point)
        assert point.bar_coordinates == Rect.zero()


def test_by_data_uses_legend_count():
    axes = discrete_axes(count=1, width=60)
    points = [DataPoint(category=0, value=10, shift_value=s) for s in range(3)]
    data = ChartData(data_points=points, axes=axes, legend_count=3)
    calculate_bar_coordinates_by_data(data, DISCRETE, 0)
    assert [p.bar_coordinates.x for p in points] == [0, 20, 40]


def test_by_data_defaults_to_one_cluster():
    point = DataPoint(category=0, value=10)
    data = ChartData(data_points=[point], axes=discrete_axes(), legend_count=0)
    calculate_bar_coordinates_by_data(data, DISCRETE, 0)
    assert point.bar_coordinates.width == 40
