# barlayout/geometry.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixel coordinates.

    Origin: top-left of the plot (screen coordinates, y grows downward).
    All values in pixels.

    The all-zero rect means "excluded from the visible plot", not
    "zero value". Bars with a zero value keep their x and width.
    """
    x: float        # left edge
    y: float        # top edge
    width: float
    height: float

    @classmethod
    def zero(cls) -> Rect:
        return cls(x=0, y=0, width=0, height=0)

    @property
    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.width == 0 and self.height == 0

    @property
    def bottom(self) -> float:
        return self.y + self.height

