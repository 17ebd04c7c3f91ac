"""Exception hierarchy for barlayout.

BarLayoutError is the root. All exceptions inherit from it so callers
can catch broad categories or specific types.

Geometry edge cases (out-of-range values, inverted scales, labels that do
not fit) never raise: they degrade to the zero rect or a missing label.
Only broken preconditions and collaborator failures end up here.
"""


class BarLayoutError(Exception):
    """Root exception for the entire project."""


class InvalidArgumentError(BarLayoutError, ValueError):
    """Precondition violations: zero cluster count, zero category count."""


class ConfigError(BarLayoutError):
    """Invalid settings or configuration values."""


class MeasurementError(BarLayoutError):
    """Text measurement failures in a measurer adapter."""


class DataError(BarLayoutError):
    """Data intake failed: missing columns, non-numeric measures."""
