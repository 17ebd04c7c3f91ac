"""Scale protocol and the two scale kinds the engines need.

A scale maps a domain value to a pixel coordinate. Discrete (band)
scales also expose a uniform band width. Host adapters (see
barlayout.adapters) implement the same protocols.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from barlayout.core.errors import InvalidArgumentError


@runtime_checkable
class Scale(Protocol):
    """Protocol for mapping a domain value to a pixel coordinate.

    Scales are treated as pure functions. They are not required to behave
    sensibly outside their domain, so callers clamp in value space first.
    """

    def __call__(self, value: float) -> float:
        ...


@runtime_checkable
class BandScale(Scale, Protocol):
    """Discrete scale: maps a positional index to the left edge of its band."""

    def bandwidth(self) -> float:
        """Pixel width of one band."""
        ...


class LinearScale:
    """Continuous linear scale.

    The range may be inverted, e.g. ``LinearScale((0, 100), (200, 0))``
    maps larger values higher up the screen.
    """

    def __init__(self, domain: Sequence[float], range: Sequence[float]):
        d0, d1 = float(domain[0]), float(domain[1])
        if d0 == d1:
            raise InvalidArgumentError(f"Linear scale domain must not be empty: {domain}")
        self.domain = (d0, d1)
        self.range = (float(range[0]), float(range[1]))

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"


class OrdinalBandScale:
    """Band scale over positional indices 0..count-1.

    Padding follows the usual band-scale convention: the range is split
    into ``count - padding_inner + 2 * padding_outer`` steps, each band is
    ``step * (1 - padding_inner)`` wide.
    """

    def __init__(
        self,
        count: int,
        range: Sequence[float],
        padding_inner: float = 0.0,
        padding_outer: float = 0.0,
    ):
        if count < 1:
            raise InvalidArgumentError(f"Band scale needs at least one band, got {count}")
        if not 0.0 <= padding_inner < 1.0:
            raise InvalidArgumentError(f"padding_inner must be in [0, 1), got {padding_inner}")
        self.count = count
        self.domain = (0, count - 1)
        self.range = (float(range[0]), float(range[1]))
        self.padding_inner = padding_inner
        self.padding_outer = padding_outer

        r0, r1 = self.range
        self._step = (r1 - r0) / max(1.0, count - padding_inner + 2 * padding_outer)
        self._start = r0 + self._step * padding_outer

    def __call__(self, value: float) -> float:
        return self._start + self._step * value

    def bandwidth(self) -> float:
        return self._step * (1 - self.padding_inner)

    def __repr__(self) -> str:
        return (
            f"OrdinalBandScale(count={self.count}, range={self.range}, "
            f"padding_inner={self.padding_inner}, padding_outer={self.padding_outer})"
        )
