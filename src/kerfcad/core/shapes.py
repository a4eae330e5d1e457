"""Closed shape generation: rectangles and circles.

Both shapes are static: they are drawn relative to the cursor, wrapped in
pen-up breaks, and leave the cursor where it was.
"""

import math

from kerfcad.config import CircleOptions, RectangleOptions
from kerfcad.core.geometry import linspace
from kerfcad.domain import BREAK, Kerf, Point
from kerfcad.exceptions import DegenerateGeometryError, InvalidArgumentError


def _sharp_rectangle(width: float, height: float, kx: float, ky: float) -> list[Point]:
    return [
        Point(-kx, -ky),
        Point(-kx, height + ky),
        Point(width + kx, height + ky),
        Point(width + kx, -ky),
        Point(-kx, -ky),
    ]


def _rounded_rectangle(
    width: float,
    height: float,
    radius: float,
    resolution: int,
    kx: float,
    ky: float,
) -> list[Point]:
    # Corner centres in drawing order: lower-left, upper-left, upper-right, lower-right
    centers = (
        (radius - kx, radius - ky),
        (radius - kx, height - radius + ky),
        (width - radius + kx, height - radius + ky),
        (width - radius + kx, radius - ky),
    )
    sweep = linspace(-math.pi, -0.5 * math.pi, resolution)

    points: list[Point] = []
    for quarter, (cx, cy) in enumerate(centers):
        turn = 0.5 * math.pi * quarter
        for s in sweep:
            points.append(Point(cx + radius * math.sin(s + turn), cy + radius * math.cos(s + turn)))
    points.append(points[0])
    return points


def rectangle_path(
    width: float,
    height: float,
    kerf: Kerf,
    options: RectangleOptions | None = None,
) -> list[Point]:
    """Generate a sharp or rounded rectangle with its lower-left corner at the origin.

    The outline is traced clockwise starting at the lower-left corner and
    closed on its first point. Kerf moves every straight edge outward (or
    inward for negative kerf); rounded corners keep their radius and have
    their centres pulled along with the edges, so the rounded outline
    converges on the sharp one as the radius goes to zero.

    Args:
        width: Rectangle width; a negative width mirrors it to the left
        height: Rectangle height; a negative height mirrors it downward
        kerf: Horizontal/vertical compensation
        options: Corner radius and resolution

    Returns:
        Break, closed outline, break
    """
    options = options or RectangleOptions()
    w = abs(width)
    h = abs(height)
    kx, ky = kerf.horizontal, kerf.vertical

    resolution = options.corner_resolution(width, height)
    if options.radius > 0 and resolution >= 2:
        outline = _rounded_rectangle(w, h, options.radius, resolution, kx, ky)
    else:
        outline = _sharp_rectangle(w, h, kx, ky)

    shift_x = -w if width < 0 else 0.0
    shift_y = -h if height < 0 else 0.0
    if shift_x or shift_y:
        outline = [p.translated(shift_x, shift_y) for p in outline]

    return [BREAK, *outline, BREAK]


def circle_path(radius: float, kerf: Kerf, options: CircleOptions | None = None) -> list[Point]:
    """Generate one full circle per centre in ``options.centers``.

    The radius grows by the horizontal kerf along x and the vertical kerf
    along y. Each circle starts and ends at its lowest point and is
    surrounded by breaks.

    Raises:
        InvalidArgumentError: If the radius is negative
        DegenerateGeometryError: If kerf shrinks the radius below zero
    """
    options = options or CircleOptions()
    if radius < 0:
        raise InvalidArgumentError("radius", f"must not be negative, got {radius}")

    rx = radius + kerf.horizontal
    ry = radius + kerf.vertical
    if rx < 0 or ry < 0:
        raise DegenerateGeometryError(f"kerf {kerf} collapses circle of radius {radius}")

    samples = [(math.sin(t), math.cos(t)) for t in linspace(-math.pi, math.pi, options.resolution)]
    points: list[Point] = [BREAK]
    for cx, cy in options.centers:
        points.extend(Point(cx + rx * s, cy + ry * c) for s, c in samples)
        points.append(BREAK)
    return points
