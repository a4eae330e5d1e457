"""Sinusoidal wave generation.

A wave of ``n`` periods runs along the local +x axis; each period is
``width`` long and ``height`` tall. Kerf offsets every sample along the unit
normal of the scaled curve, so compensated waves are true parallel curves
rather than shifted or scaled copies.
"""

import math

from kerfcad.config import WaveOptions
from kerfcad.core.geometry import linspace, orient
from kerfcad.domain import Kerf, Point, WaveCode, WavePhase
from kerfcad.exceptions import InvalidArgumentError

# Phase offset (radians) and vertical lift (in half-heights) per start phase
PHASES: dict[WavePhase, tuple[float, float]] = {
    WavePhase.TROUGH: (-0.5 * math.pi, 1.0),
    WavePhase.CREST: (0.5 * math.pi, 1.0),
    WavePhase.RISING: (0.0, 0.0),
    WavePhase.FALLING: (math.pi, 0.0),
}


def wave_path(
    code: WaveCode,
    n: int,
    width: float,
    height: float,
    kerf: Kerf,
    options: WaveOptions | None = None,
) -> list[Point]:
    """Generate ``n`` periods of a sine wave.

    Args:
        code: Parsed wave code; lowercase puts the kerf offset on the other side
        n: Number of periods
        width: Length of one period
        height: Peak-to-trough height
        kerf: Compensation; the horizontal component is used as the offset
        options: Sampling options

    Returns:
        ``n * resolution`` oriented points

    Raises:
        InvalidArgumentError: On a non-positive count or width
    """
    options = options or WaveOptions()
    if n < 1:
        raise InvalidArgumentError("n", f"must be at least 1, got {n}")
    if width <= 0:
        raise InvalidArgumentError("width", f"must be positive, got {width}")

    offset, lift = PHASES[code.phase]
    side = -1.0 if code.mirrored else 1.0
    amount = kerf.horizontal * side

    # d/dt of (width * t / 2pi, height / 2 * sin(t))
    tx = width / (2.0 * math.pi)
    half = 0.5 * height

    points: list[Point] = []
    for t in linspace(0.0, 2.0 * n * math.pi, n * options.resolution):
        cos_t = math.cos(t + offset)
        sin_t = math.sin(t + offset)
        ty = half * cos_t
        norm = math.hypot(tx, ty)
        nx = -ty / norm
        ny = tx / norm
        points.append(Point(tx * t + amount * nx, half * (sin_t + lift) + amount * ny))

    return orient(points, code.direction)
