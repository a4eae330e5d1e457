"""Feature code descriptors and their parsers.

Feature codes are compact strings such as ``"N|1011]-+"`` that select the
orientation and pattern of a generator call. Each code is parsed exactly
once, at the drawing boundary, into one of the frozen descriptors below;
generators never look at raw characters.

Code grammar:
- Direction: ``E N W S`` (local +x rotated 0, 90, 180, 270 degrees
  counter-clockwise); lowercase mirrors the feature across its travel axis
- Tooth: ``<dir><left><4 bits><right>[<sign><sign>]`` or the short form
  ``<dir><left><bit><right>[<sign><sign>]`` broadcasting a single bit
- Slit: ``<dir><bit>``
- Wave: ``<dir><phase>`` with phase in ``0 1 / \\``
- Line: ``<dir>[<sign><sign>]``
- Flex: ``<dir>[<bit>]``
- Arc heading: ``N E S W NE NW SE SW``
"""

from dataclasses import dataclass
from enum import Enum

from kerfcad.exceptions import InvalidCodeError

LINE_MODIFIERS = "[|]"
GROW_MODIFIERS = "[{]}"
LEFT_PUSH_MODIFIERS = "]}"
RIGHT_PUSH_MODIFIERS = "[{"
EDGE_MODIFIERS = "[]{}|:"


class Direction(str, Enum):
    """Travel direction of a feature's local +x axis."""

    EAST = "E"
    NORTH = "N"
    WEST = "W"
    SOUTH = "S"

    @property
    def rotation(self) -> tuple[float, float]:
        """Exact (cos, sin) of the rotation, free of rounding error."""
        return _ROTATIONS[_QUARTER_TURNS[self]]


_QUARTER_TURNS = {
    Direction.EAST: 0,
    Direction.NORTH: 1,
    Direction.WEST: 2,
    Direction.SOUTH: 3,
}

_ROTATIONS = ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))


class WavePhase(str, Enum):
    """Where a wave starts within its period."""

    TROUGH = "0"
    CREST = "1"
    RISING = "/"
    FALLING = "\\"


HEADINGS: dict[str, tuple[float, float]] = {
    "N": (0.0, 1.0),
    "E": (1.0, 0.0),
    "S": (0.0, -1.0),
    "W": (-1.0, 0.0),
    "NE": (1.0, 1.0),
    "NW": (-1.0, 1.0),
    "SE": (1.0, -1.0),
    "SW": (-1.0, -1.0),
}


@dataclass(frozen=True, slots=True)
class EdgeModifier:
    """How one end of a tooth row is finished.

    Attributes:
        grow: Append an end segment as wide as that side's height
        line: Draw the closing vertical line back to the base line
        push: The grown segment extends the row forward instead of behind
    """

    grow: bool = False
    line: bool = True
    push: bool = False


@dataclass(frozen=True, slots=True)
class ToothCode:
    """Parsed finger-joint code."""

    direction: Direction
    mirrored: bool
    left: EdgeModifier
    levels: tuple[bool, bool, bool, bool]
    right: EdgeModifier
    kerf_signs: tuple[float, float] = (1.0, 1.0)


@dataclass(frozen=True, slots=True)
class SlitCode:
    """Parsed slit code."""

    direction: Direction
    mirrored: bool
    level: bool


@dataclass(frozen=True, slots=True)
class WaveCode:
    """Parsed wave code."""

    direction: Direction
    mirrored: bool
    phase: WavePhase


@dataclass(frozen=True, slots=True)
class LineCode:
    """Parsed line code. ``kerf_signs`` is None when the code has no suffix."""

    direction: Direction
    mirrored: bool
    kerf_signs: tuple[float, float] | None = None


@dataclass(frozen=True, slots=True)
class FlexCode:
    """Parsed living-hinge code."""

    direction: Direction
    mirrored: bool
    start: bool = False


def parse_direction(letter: str, code: str | None = None) -> tuple[Direction, bool]:
    """Map a compass letter to a direction and a mirror flag.

    Args:
        letter: One of ``E N W S`` (or lowercase for the mirrored variant)
        code: Full code, for error reporting

    Returns:
        Tuple of (direction, mirrored)

    Raises:
        InvalidCodeError: If the letter is not a compass letter
    """
    try:
        direction = Direction(letter.upper())
    except ValueError:
        raise InvalidCodeError(code or letter, f"unknown direction '{letter}'") from None
    return direction, letter.islower()


def _parse_bit(code: str, char: str) -> bool:
    if char not in "01":
        raise InvalidCodeError(code, f"level must be 0 or 1, got '{char}'")
    return char == "1"


def _parse_signs(code: str, chars: str) -> tuple[float, float]:
    signs = []
    for char in chars:
        if char not in "+-":
            raise InvalidCodeError(code, f"kerf sign must be + or -, got '{char}'")
        signs.append(1.0 if char == "+" else -1.0)
    return signs[0], signs[1]


def _parse_edge(code: str, char: str, push_modifiers: str) -> EdgeModifier:
    if char not in EDGE_MODIFIERS:
        raise InvalidCodeError(code, f"unknown edge modifier '{char}'")
    return EdgeModifier(
        grow=char in GROW_MODIFIERS,
        line=char in LINE_MODIFIERS,
        push=char in push_modifiers,
    )


def parse_tooth_code(code: str) -> ToothCode:
    """Parse a finger-joint code.

    ``"E[1]"`` is shorthand for ``"E[1111]"`` and ``"E[1]++"`` for
    ``"E[1111]++"``.

    Raises:
        InvalidCodeError: On a bad length or any unrecognized character
    """
    expanded = code
    if len(code) in (4, 6):
        expanded = code[:2] + code[2] * 4 + code[3:]
    if len(expanded) not in (7, 9):
        raise InvalidCodeError(code, "expected <dir><left><levels><right>[<sign><sign>]")

    direction, mirrored = parse_direction(expanded[0], code)
    left = _parse_edge(code, expanded[1], LEFT_PUSH_MODIFIERS)
    levels = tuple(_parse_bit(code, char) for char in expanded[2:6])
    right = _parse_edge(code, expanded[6], RIGHT_PUSH_MODIFIERS)
    signs = _parse_signs(code, expanded[7:9]) if len(expanded) == 9 else (1.0, 1.0)

    return ToothCode(
        direction=direction,
        mirrored=mirrored,
        left=left,
        levels=(levels[0], levels[1], levels[2], levels[3]),
        right=right,
        kerf_signs=signs,
    )


def parse_slit_code(code: str) -> SlitCode:
    """Parse a slit code such as ``"E1"``."""
    if len(code) != 2:
        raise InvalidCodeError(code, "expected <dir><level>")
    direction, mirrored = parse_direction(code[0], code)
    return SlitCode(direction=direction, mirrored=mirrored, level=_parse_bit(code, code[1]))


def parse_wave_code(code: str) -> WaveCode:
    """Parse a wave code such as ``"E0"`` or ``"n/"``."""
    if len(code) != 2:
        raise InvalidCodeError(code, "expected <dir><phase>")
    direction, mirrored = parse_direction(code[0], code)
    try:
        phase = WavePhase(code[1])
    except ValueError:
        raise InvalidCodeError(code, f"unknown wave phase '{code[1]}'") from None
    return WaveCode(direction=direction, mirrored=mirrored, phase=phase)


def parse_line_code(code: str) -> LineCode:
    """Parse a line code such as ``"N"`` or ``"s+-"``."""
    if len(code) not in (1, 3):
        raise InvalidCodeError(code, "expected <dir>[<sign><sign>]")
    direction, mirrored = parse_direction(code[0], code)
    signs = _parse_signs(code, code[1:]) if len(code) == 3 else None
    return LineCode(direction=direction, mirrored=mirrored, kerf_signs=signs)


def parse_flex_code(code: str) -> FlexCode:
    """Parse a living-hinge code such as ``"E0"``."""
    if len(code) not in (1, 2):
        raise InvalidCodeError(code, "expected <dir>[<level>]")
    direction, mirrored = parse_direction(code[0], code)
    start = _parse_bit(code, code[1]) if len(code) == 2 else False
    return FlexCode(direction=direction, mirrored=mirrored, start=start)


def parse_heading(code: str) -> tuple[float, float]:
    """Map an arc heading (``N``, ``NE``, ...) to its unscaled target offset."""
    try:
        return HEADINGS[code]
    except KeyError:
        raise InvalidCodeError(code, "expected one of " + ", ".join(HEADINGS)) from None
