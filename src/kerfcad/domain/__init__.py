"""Domain models for kerfcad.

This module contains the value types shared by generators, the drawing
composer and the exporter. All models are:

- Immutable (frozen dataclasses)
- Independent of any output format

Key classes:
- Point: A 2D point, or the BREAK pen-up sentinel
- Kerf: Horizontal/vertical cut-width compensation
- Direction: Compass direction of a feature's travel axis
- ToothCode, SlitCode, WaveCode, LineCode, FlexCode: parsed feature codes
"""

from kerfcad.domain.codes import (
    Direction,
    EdgeModifier,
    FlexCode,
    LineCode,
    SlitCode,
    ToothCode,
    WaveCode,
    WavePhase,
    parse_direction,
    parse_flex_code,
    parse_heading,
    parse_line_code,
    parse_slit_code,
    parse_tooth_code,
    parse_wave_code,
)
from kerfcad.domain.point import BREAK, Kerf, Point

__all__: list[str] = [
    # Enums
    "Direction",
    "WavePhase",
    # Core types
    "BREAK",
    "Kerf",
    "Point",
    # Codes
    "EdgeModifier",
    "FlexCode",
    "LineCode",
    "SlitCode",
    "ToothCode",
    "WaveCode",
    # Parsers
    "parse_direction",
    "parse_flex_code",
    "parse_heading",
    "parse_line_code",
    "parse_slit_code",
    "parse_tooth_code",
    "parse_wave_code",
]
