"""Slit generation.

Slits are closed rectangular slots cut at every run of high levels along
the local +x axis, each inset by kerf on all four sides. They never move
the cursor.
"""

from collections.abc import Sequence

from kerfcad.core.geometry import orient
from kerfcad.domain import BREAK, Kerf, Point, SlitCode
from kerfcad.exceptions import InvalidArgumentError


def level_runs(levels: Sequence[float]) -> list[tuple[int, int]]:
    """Group consecutive equal levels.

    Returns:
        List of (first, last) inclusive index pairs, one per run

    Examples:
        >>> level_runs([1, 0, 0, 1, 1, 0, 1])
        [(0, 0), (1, 2), (3, 4), (5, 5), (6, 6)]
    """
    runs: list[tuple[int, int]] = []
    start = 0
    for i in range(1, len(levels) + 1):
        if i == len(levels) or levels[i] != levels[start]:
            runs.append((start, i - 1))
            start = i
    return runs


def slit_profile(
    widths: Sequence[float],
    levels: Sequence[float],
    height: float,
    kerf: Kerf | None = None,
) -> list[Point]:
    """Cut one slot per run of high levels.

    Args:
        widths: Width of every segment
        levels: Level of every segment; runs of truthy levels become slots
        height: Slot height
        kerf: Inset applied on all sides

    Returns:
        For every slot, a break followed by its 5-point closed outline
    """
    if len(widths) != len(levels):
        raise InvalidArgumentError(
            "levels", f"expected {len(widths)} levels to match widths, got {len(levels)}"
        )

    kerf = kerf if kerf is not None else Kerf.zero()
    kx, ky = kerf.horizontal, kerf.vertical

    points: list[Point] = []
    position = 0.0
    for first, last in level_runs(levels):
        span = sum(float(w) for w in widths[first : last + 1])
        a, b = position, position + span
        position = b
        if not levels[first]:
            continue
        points.extend(
            [
                BREAK,
                Point(a + kx, ky),
                Point(a + kx, height - ky),
                Point(b - kx, height - ky),
                Point(b - kx, ky),
                Point(a + kx, ky),
            ]
        )
    return points


def slit_path(code: SlitCode, n: int, width: float, height: float, kerf: Kerf) -> list[Point]:
    """Generate slots along ``n`` segments of the given width.

    A level-1 code cuts ceil(n / 2) slots starting at the origin; a level-0
    code cuts floor(n / 2) slots starting one width in. Slots repeat every
    two widths. The output ends with a break so the pen lifts afterwards.
    """
    if n < 0:
        raise InvalidArgumentError("n", f"must not be negative, got {n}")

    levels = [(i % 2 == 0) == code.level for i in range(n)]
    points = slit_profile([width] * n, levels, height, kerf)
    points.append(BREAK)
    return orient(points, code.direction, code.mirrored)
