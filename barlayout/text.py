# barlayout/text.py

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Protocol, runtime_checkable

from barlayout.core.config import LabelConfig
from barlayout.geometry import Rect
from barlayout.settings import CategoryAxisSettings, CategoryLabelsSettings, ValueAxisSettings

DEFAULT_LABEL_CONFIG = LabelConfig()


@dataclass(frozen=True)
class TextProperties:
    """Font description handed to a TextMeasurer. font_size is in pixels."""
    font_family: str
    font_size: float
    text: str = ""

    def with_text(self, text: str) -> TextProperties:
        return replace(self, text=text)


@runtime_checkable
class TextMeasurer(Protocol):
    """Protocol for measuring rendered text.

    Implementations:
    - MatplotlibTextMeasurer measures with matplotlib's Agg renderer.
    - Tests use fixed-width fakes.
    """

    def measure_width(self, properties: TextProperties, text: str) -> float:
        """Pixel width of text rendered with the given font."""
        ...

    def estimate_height(self, properties: TextProperties) -> float:
        """Pixel height of one line of text in the given font."""
        ...


def points_to_pixels(points: float, config: LabelConfig = DEFAULT_LABEL_CONFIG) -> float:
    return points * config.points_to_pixels


def get_text_properties(
    settings: CategoryLabelsSettings,
    config: LabelConfig = DEFAULT_LABEL_CONFIG,
) -> TextProperties:
    """Font used for data labels."""
    return TextProperties(
        font_family=settings.font_family,
        font_size=points_to_pixels(settings.font_size, config),
    )


def get_text_properties_for_height_calculation(
    settings: CategoryLabelsSettings,
    config: LabelConfig = DEFAULT_LABEL_CONFIG,
) -> TextProperties:
    """Same font as get_text_properties. The label text is filled in per point."""
    return get_text_properties(settings, config)


def _title_height(font_family: str, font_size: float, measurer: TextMeasurer) -> float:
    properties = TextProperties(font_family=font_family, font_size=points_to_pixels(font_size))
    return measurer.estimate_height(properties)


def get_x_axis_title_height(settings: CategoryAxisSettings, measurer: TextMeasurer) -> float:
    return _title_height(settings.title_font_family, settings.title_font_size, measurer)


def get_y_axis_title_height(settings: ValueAxisSettings, measurer: TextMeasurer) -> float:
    return _title_height(settings.title_font_family, settings.title_font_size, measurer)


def get_labels_max_width(label_boxes: Iterable[Optional[Rect]]) -> float:
    """Largest extent of any label box, whichever way it is rotated.

    Missing labels are skipped. No labels gives 0.
    """
    return max(
        (max(box.width, box.height) for box in label_boxes if box is not None),
        default=0,
    )


def get_labels_max_height(label_boxes: Iterable[Optional[Rect]]) -> float:
    return max((box.height for box in label_boxes if box is not None), default=0)


def small_multiple_label_rotation_is_needed(
    label_widths: Iterable[float],
    bar_height: float,
    max_label_height: float,
) -> bool:
    """True if any category tick label is wider than one band.

    Widths are capped at max_label_height first: a label that would be
    truncated to that size anyway is measured at the cap.
    """
    max_label_width = 0.0
    for width in label_widths:
        max_label_width = max(max_label_width, min(width, max_label_height))
    return max_label_width > bar_height
