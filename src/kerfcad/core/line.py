"""Straight line generation.

Lines built from compass codes carry independent kerf at each end so that
perimeters drawn from four calls grow or shrink consistently; the
perpendicular kerf side follows the letter case.
"""

from kerfcad.core.geometry import orient
from kerfcad.domain import Kerf, LineCode, Point


def line_path(code: LineCode, width: float, kerf: Kerf) -> list[Point]:
    """Generate a straight segment of length ``width`` along the code direction.

    Without a sign suffix the start moves back and the end moves forward by
    the horizontal kerf (the line grows for positive kerf and shrinks for
    negative kerf). With a suffix each end uses ``±|kerf|`` as given.
    Uppercase codes offset the line by ``+kerf`` across the travel axis,
    lowercase codes by ``-kerf``.

    Returns:
        Start and end points, oriented
    """
    kx, ky = kerf.horizontal, kerf.vertical
    if code.kerf_signs is None:
        start, end = -kx, kx
    else:
        start = code.kerf_signs[0] * abs(kx)
        end = code.kerf_signs[1] * abs(kx)
    across = -ky if code.mirrored else ky

    points = [Point(start, across), Point(width + end, across)]
    return orient(points, code.direction)


def line_to_path(dx: float, dy: float, kerf: Kerf) -> list[Point]:
    """Generate a single target point at (dx, dy), offset by (kx, ky) when compensated."""
    return [Point(dx + kerf.horizontal, dy + kerf.vertical)]
