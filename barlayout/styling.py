# barlayout/styling.py

from __future__ import annotations

from typing import Any, Optional, Sequence

from barlayout.models import DataPoint
from barlayout.settings import LineStyle

DIMMED_OPACITY: float = 0.4
DEFAULT_OPACITY: float = 1.0

# SVG stroke-dasharray per line style.
# Declarative: change patterns without changing logic.
LINE_STYLE_DASHARRAY: dict[LineStyle, str] = {
    LineStyle.SOLID: "none",
    LineStyle.DASHED: "7, 5",
    LineStyle.DOTTED: "2, 2",
}


def is_selected(
    selected: bool,
    highlight: bool,
    has_selection: bool,
    has_partial_highlights: bool,
) -> bool:
    """False when another point is selected or highlighted instead of this one."""
    return not (has_partial_highlights and not highlight or has_selection and not selected)


def get_fill_opacity(
    selected: bool,
    highlight: bool,
    has_selection: bool,
    has_partial_highlights: bool,
) -> float:
    if is_selected(selected, highlight, has_selection, has_partial_highlights):
        return DEFAULT_OPACITY
    return DIMMED_OPACITY


def get_fill_opacity_for(point: DataPoint, has_selection: bool, has_partial_highlights: bool) -> float:
    """Fill opacity from the point's own selected and highlight flags."""
    return get_fill_opacity(point.selected, point.highlight, has_selection, has_partial_highlights)


def get_line_style_param(line_style: LineStyle | str) -> Optional[str]:
    """Dash pattern for a line style, None for unknown styles."""
    try:
        return LINE_STYLE_DASHARRAY[LineStyle(line_style)]
    except ValueError:
        return None


def compare_objects(first: Sequence[Any], second: Sequence[Any], attribute: str) -> bool:
    """True if both sequences have the same length and pairwise equal attribute.

    Used to skip re-layout when the data points of two passes match.
    """
    if len(first) != len(second):
        return False
    return all(getattr(a, attribute) == getattr(b, attribute) for a, b in zip(first, second))
