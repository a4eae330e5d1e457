"""Circular arc generation.

An arc joins the current point to a target offset (dx, dy) with a given
sweep. The radius follows from the chord: ``chord = 2 R sin(sweep / 2)``.
The arc is built along +x and rotated onto the chord.
"""

import math

from kerfcad.config import ArcOptions
from kerfcad.core.geometry import linspace, mirror_points, rotate_points
from kerfcad.domain import Kerf, Point
from kerfcad.exceptions import DegenerateGeometryError

EPSILON = 1e-12


def arc_path(dx: float, dy: float, kerf: Kerf, options: ArcOptions | None = None) -> list[Point]:
    """Generate an arc from the origin to (dx, dy).

    Positive sweeps bulge to the left of the chord; negative sweeps mirror
    the arc to the right. Kerf is added to the sampled radius while the
    centre stays put, so compensated arcs are concentric with nominal ones.

    Args:
        dx: Target x offset
        dy: Target y offset
        kerf: Compensation; the horizontal component offsets the radius
        options: Sweep in degrees, resolution and drawn proportion

    Returns:
        ``options.resolution`` points from the start towards the target

    Raises:
        DegenerateGeometryError: If the chord has zero length, the sweep is
            zero, or the sweep covers a full turn or more
    """
    options = options or ArcOptions()
    chord = math.hypot(dx, dy)
    sweep = math.radians(abs(options.degrees))

    if chord < EPSILON:
        raise DegenerateGeometryError("arc chord has zero length")
    if sweep < EPSILON:
        raise DegenerateGeometryError("arc sweep is zero")
    if abs(options.degrees) >= 360.0:
        raise DegenerateGeometryError(f"arc sweep of {options.degrees} degrees is a full turn or more")

    half = 0.5 * sweep
    radius = chord / (2.0 * math.sin(half))
    drop = radius * math.cos(half)
    reach = radius + kerf.horizontal

    last = half - 2.0 * options.proportion * half
    points = []
    for t in linspace(half, last, options.resolution):
        angle = t + 0.5 * math.pi
        points.append(Point(reach * math.cos(angle) + 0.5 * chord, reach * math.sin(angle) - drop))

    if options.degrees < 0:
        points = mirror_points(points)

    return rotate_points(points, dx / chord, dy / chord)
