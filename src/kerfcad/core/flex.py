"""Living-hinge (flex) generation.

A living hinge is a brick pattern of parallel slits that lets a rigid
sheet bend. Rows alternate between one centred slit (inset by the margin
on both sides) and two slits running in from the edges. Kerf is never
applied: the slits are structural, not dimensional.
"""

from kerfcad.core.geometry import orient
from kerfcad.domain import BREAK, FlexCode, Point
from kerfcad.exceptions import InvalidArgumentError


def flex_path(code: FlexCode, width: float, height: float, count: int, margin: float) -> list[Point]:
    """Generate ``count + 1`` rows of slits spread evenly over ``height``.

    Args:
        code: Parsed flex code; the start bit selects which row style comes first
        width: Row length along the local +x axis
        height: Distance between the first and last rows
        count: Number of row intervals
        margin: Solid material left at each end of a centred slit

    Returns:
        Oriented slit segments, each followed by a break, with a leading break
    """
    if count < 1:
        raise InvalidArgumentError("count", f"must be at least 1, got {count}")
    if margin < 0:
        raise InvalidArgumentError("margin", f"must not be negative, got {margin}")

    pitch = height / count
    inner = width - 2.0 * margin

    points: list[Point] = [BREAK]
    for row in range(count + 1):
        offset = row * pitch
        if (row + int(code.start)) % 2:
            points.extend([Point(margin, offset), Point(margin + inner, offset), BREAK])
        else:
            points.extend(
                [
                    Point(0.0, offset),
                    Point(0.5 * inner, offset),
                    BREAK,
                    Point(0.5 * inner + 2.0 * margin, offset),
                    Point(width, offset),
                    BREAK,
                ]
            )

    return orient(points, code.direction, code.mirrored)
