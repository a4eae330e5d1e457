"""Finger-joint (tooth) generation.

A row of teeth is a square wave along the local +x axis: segments at level 1
form tabs and segments at level 0 form gaps, with the wave amplitude equal
to the centre height. Kerf is redistributed at every level transition so
tabs grow and gaps shrink by the same amount, which keeps the overall span
unchanged while mating faces stay dimensionally accurate.

Key functions:
- tooth_profile: Raw profile over explicit per-segment widths and levels
- tooth_path: Oriented tooth row built from a parsed ToothCode
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from kerfcad.core.geometry import orient, translate_points
from kerfcad.domain import Kerf, Point, ToothCode
from kerfcad.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TracedPath:
    """Generator output that also reports where the nominal path ends.

    Attributes:
        points: Oriented local points
        end: Kerf-free displacement from the start to the end of the feature
    """

    points: list[Point]
    end: Point


def tooth_profile(
    widths: Sequence[float],
    levels: Sequence[float],
    scale: float,
    ends: tuple[bool, bool] = (True, True),
    kerf: Kerf | None = None,
    protrude: bool = True,
    kerf_signs: tuple[float, float] = (1.0, 1.0),
) -> list[Point]:
    """Build a square-wave profile from per-segment widths and levels.

    Each segment contributes a horizontal run; a change of level between
    two consecutive segments adds a vertical step. Only the boundary between
    segment ``i - 1`` and segment ``i`` (``i >= 1``) can carry a transition,
    so the redistribution never reaches before the first segment.

    Args:
        widths: Width of every segment
        levels: Level of every segment (0/1 for teeth, any value allowed)
        scale: Height of one level unit
        ends: Whether to draw the closing vertical line at the left/right end
        kerf: Compensation (horizontal applied at transitions and ends,
            vertical applied to every y)
        protrude: Tabs extend past the edge; otherwise the profile is shifted
            down one level so it reads as notches
        kerf_signs: Multipliers for the outer-end horizontal kerf

    Returns:
        Profile points in the local frame

    Raises:
        InvalidArgumentError: If widths and levels differ in length or are empty

    Examples:
        >>> [p.to_tuple() for p in tooth_profile([1, 1], [1, 0], 1.0)]
        [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (2.0, 0.0)]
    """
    if len(widths) != len(levels):
        raise InvalidArgumentError(
            "levels", f"expected {len(widths)} levels to match widths, got {len(levels)}"
        )
    if not widths:
        raise InvalidArgumentError("widths", "at least one segment is required")

    kerf = kerf if kerf is not None else Kerf.zero()
    kx, ky = kerf.horizontal, kerf.vertical
    steps = [float(level) for level in levels]
    spans = [float(width) for width in widths]

    # Tabs grow and gaps shrink at every transition
    for i in range(1, len(steps)):
        delta = steps[i] - steps[i - 1]
        if delta < 0:
            spans[i] -= kx
            spans[i - 1] += kx
        elif delta > 0:
            spans[i] += kx
            spans[i - 1] -= kx

    xs = [0.0]
    ys = [steps[0]]
    x = 0.0
    for i, step in enumerate(steps):
        if i > 0 and step != steps[i - 1]:
            xs.append(x)
            ys.append(step)
        x += spans[i]
        xs.append(x)
        ys.append(step)

    ys = [y * scale + ky for y in ys]

    left_sign, right_sign = kerf_signs
    if protrude:
        xs[0] -= kx * left_sign
        xs[-1] += kx * right_sign
    else:
        xs[0] += kx * left_sign
        xs[-1] -= kx * right_sign
        ys = [y - scale for y in ys]

    points = [Point(x, y) for x, y in zip(xs, ys)]

    # Decided on the uncompensated levels so every kerf gives the same count
    base = 0.0 if protrude else 1.0
    if ends[0] and steps[0] != base:
        points.insert(0, Point(points[0].x, ky))
    if ends[1] and steps[-1] != base:
        points.append(Point(points[-1].x, ky))

    return points


def _expand_levels(bits: tuple[bool, bool, bool, bool], count: int) -> list[bool]:
    """Spread the four code bits over ``count`` segments.

    The bits land on the first two and last two segments (later bits win
    when they overlap); the middle continues alternating from the second bit.
    """
    if count < 2:
        raise InvalidArgumentError("n", f"a tooth row needs at least 2 segments, got {count}")

    levels = [False] * count
    for index, bit in zip((0, 1, count - 2, count - 1), bits):
        levels[index] = bit
    second = int(levels[1])
    for k in range(count - 4):
        levels[2 + k] = k % 2 == second
    return levels


def normalize_heights(heights: float | Sequence[float]) -> tuple[float, float, float]:
    """Expand a height argument into (left, centre, right).

    Raises:
        InvalidArgumentError: If a sequence holds anything but 1 or 3 values
    """
    if isinstance(heights, (int, float)):
        value = float(heights)
        return value, value, value
    values = [float(h) for h in heights]
    if len(values) == 1:
        return values[0], values[0], values[0]
    if len(values) == 3:
        return values[0], values[1], values[2]
    raise InvalidArgumentError("heights", f"expected 1 or 3 heights, got {len(values)}")


def tooth_path(
    code: ToothCode,
    n: int,
    width: float,
    heights: float | Sequence[float],
    kerf: Kerf,
    protrude: bool,
) -> TracedPath:
    """Generate an oriented row of ``n`` teeth.

    Args:
        code: Parsed tooth code
        n: Number of tooth segments
        width: Width of each segment
        heights: Centre height, or (left, centre, right) heights; the outer
            heights size the grown end segments
        kerf: Compensation; only magnitudes are used, the profile decides
            where it grows or shrinks
        protrude: Tabs (True) or notches (False)

    Returns:
        TracedPath whose end is ``n * width`` plus every grown edge that
        pushes forward, rotated into the code's direction

    Raises:
        InvalidArgumentError: On a non-positive count or width, or bad heights
    """
    if n < 1:
        raise InvalidArgumentError("n", f"must be at least 1, got {n}")
    if width <= 0:
        raise InvalidArgumentError("width", f"must be positive, got {width}")

    height_left, height_center, height_right = normalize_heights(heights)
    magnitude = kerf.magnitude()

    widths = [float(width)] * n
    length = n * float(width)
    if code.left.grow:
        widths.insert(0, height_left)
        if code.left.push:
            length += height_left
    if code.right.grow:
        widths.append(height_right)
        if code.right.push:
            length += height_right

    levels = _expand_levels(code.levels, len(widths))
    points = tooth_profile(
        widths,
        levels,
        height_center,
        ends=(code.left.line, code.right.line),
        kerf=magnitude,
        protrude=protrude,
        kerf_signs=code.kerf_signs,
    )
    if code.left.grow and not code.left.push:
        points = translate_points(points, -height_left, 0.0)

    logger.debug(
        "Tooth row: direction=%s segments=%d length=%.4f protrude=%s",
        code.direction.value,
        len(widths),
        length,
        protrude,
    )

    end = orient([Point(length, 0.0)], code.direction)[0]
    return TracedPath(points=orient(points, code.direction, code.mirrored), end=end)
