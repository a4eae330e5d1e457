"""Geometric helpers shared by generators, the drawing and the exporter.

This module provides:
- Evenly spaced sampling (linspace)
- Rotation by an exact (cos, sin) pair or by an angle about an origin
- Reflection across the local travel axis
- Translation
- Bounding boxes and subpath splitting that skip pen-up breaks

All functions are pure. Break points pass through every transform unchanged.
"""

import math
from collections.abc import Iterable, Sequence

from kerfcad.domain import Direction, Point


def linspace(start: float, stop: float, num: int) -> list[float]:
    """Return ``num`` evenly spaced samples from start to stop, both included.

    Examples:
        >>> linspace(0.0, 1.0, 3)
        [0.0, 0.5, 1.0]
    """
    if num <= 0:
        return []
    if num == 1:
        return [float(start)]
    step = (stop - start) / (num - 1)
    samples = [start + i * step for i in range(num - 1)]
    samples.append(float(stop))
    return samples


def rotate_points(points: Iterable[Point], cos_a: float, sin_a: float) -> list[Point]:
    """Rotate points about the origin by the angle whose cosine/sine are given.

    Args:
        points: Points to rotate
        cos_a: Cosine of the rotation angle
        sin_a: Sine of the rotation angle

    Returns:
        Rotated points (counter-clockwise for positive angles)
    """
    rotated: list[Point] = []
    for p in points:
        if p.is_break:
            rotated.append(p)
        else:
            rotated.append(Point(p.x * cos_a - p.y * sin_a, p.y * cos_a + p.x * sin_a))
    return rotated


def rotate_about(points: Iterable[Point], angle: float, origin: Point) -> list[Point]:
    """Rotate points by ``angle`` radians about ``origin``.

    Computes ``R(angle) · (p − origin) + origin`` for every non-break point.
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    ox, oy = origin.x, origin.y
    rotated: list[Point] = []
    for p in points:
        if p.is_break:
            rotated.append(p)
            continue
        dx = p.x - ox
        dy = p.y - oy
        rotated.append(Point(dx * cos_a - dy * sin_a + ox, dy * cos_a + dx * sin_a + oy))
    return rotated


def mirror_points(points: Iterable[Point]) -> list[Point]:
    """Reflect points across the local travel (x) axis."""
    return [p if p.is_break else Point(p.x, -p.y) for p in points]


def translate_points(points: Iterable[Point], dx: float, dy: float) -> list[Point]:
    """Move every non-break point by (dx, dy)."""
    return [p.translated(dx, dy) for p in points]


def orient(points: Iterable[Point], direction: Direction, mirrored: bool = False) -> list[Point]:
    """Place local feature geometry into the drawing frame.

    Mirrors across the travel axis first (lowercase codes), then rotates by
    the direction's exact quarter turn.
    """
    local = mirror_points(points) if mirrored else list(points)
    cos_a, sin_a = direction.rotation
    return rotate_points(local, cos_a, sin_a)


def bounding_box(points: Iterable[Point]) -> tuple[float, float, float, float] | None:
    """Calculate the bounding box of all non-break points.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y), or None if there are no points
    """
    xs: list[float] = []
    ys: list[float] = []
    for p in points:
        if not p.is_break:
            xs.append(p.x)
            ys.append(p.y)
    if not xs:
        return None
    return (min(xs), min(ys), max(xs), max(ys))


def split_subpaths(points: Sequence[Point]) -> list[list[Point]]:
    """Split a point sequence into maximal runs of non-break points.

    Empty runs (consecutive breaks, leading or trailing breaks) are dropped.
    """
    runs: list[list[Point]] = []
    current: list[Point] = []
    for p in points:
        if p.is_break:
            if current:
                runs.append(current)
                current = []
        else:
            current.append(p)
    if current:
        runs.append(current)
    return runs
