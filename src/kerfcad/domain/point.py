"""Core geometric types for drawing representation.

This module defines the fundamental value types used throughout kerfcad:
- Point: A 2D point, or the pen-up break sentinel
- BREAK: The shared break sentinel (both coordinates NaN)
- Kerf: Horizontal/vertical cut-width compensation
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from kerfcad.exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. A point whose coordinates are both NaN is a
    break: it marks a pen-up between two subpaths and survives every
    transform unchanged.

    Attributes:
        x: X coordinate in drawing units
        y: Y coordinate in drawing units
    """

    x: float
    y: float

    @property
    def is_break(self) -> bool:
        """Whether this point is a pen-up break."""
        return math.isnan(self.x) and math.isnan(self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> "Point":
        """Return this point moved by (dx, dy). Breaks stay breaks."""
        if self.is_break:
            return self
        return Point(self.x + dx, self.y + dy)


BREAK = Point(math.nan, math.nan)


@dataclass(frozen=True, slots=True)
class Kerf:
    """Cut-width compensation along the local horizontal and vertical axes.

    Positive values grow cut geometry outward (protruding features),
    negative values shrink it (clearance, holes).

    Attributes:
        horizontal: Compensation along the local travel axis
        vertical: Compensation across the local travel axis
    """

    horizontal: float = 0.0
    vertical: float = 0.0

    @classmethod
    def of(cls, value: "float | Sequence[float] | Kerf") -> "Kerf":
        """Build a Kerf from a scalar, a (horizontal, vertical) pair or a Kerf.

        Args:
            value: Scalar applied to both axes, 1- or 2-element sequence, or Kerf

        Returns:
            Kerf instance

        Raises:
            InvalidArgumentError: If a sequence has an unsupported length
        """
        if isinstance(value, Kerf):
            return value
        if isinstance(value, (int, float)):
            return cls(float(value), float(value))
        values = [float(v) for v in value]
        if len(values) == 1:
            return cls(values[0], values[0])
        if len(values) == 2:
            return cls(values[0], values[1])
        raise InvalidArgumentError("kerf", f"expected 1 or 2 values, got {len(values)}")

    @classmethod
    def zero(cls) -> "Kerf":
        """Kerf-free compensation, used for nominal geometry."""
        return cls(0.0, 0.0)

    def magnitude(self) -> "Kerf":
        """Return the kerf with both components made non-negative."""
        return Kerf(abs(self.horizontal), abs(self.vertical))
