"""Core path generation for kerfcad.

This module contains the pure feature generators and the geometry helpers
they share. Every generator maps (parsed code, shape parameters, kerf,
options) to a list of local points; calling it with Kerf.zero() yields the
nominal twin of the compensated path.

All generators are:
- Stateless and free of side effects
- Oriented by exact quarter turns for compass directions
- Break-aware (pen-up sentinels pass through unchanged)

Key functions:
- tooth_profile / tooth_path: Finger joints
- slit_profile / slit_path: Rectangular slots
- wave_path: Sinusoidal edges with normal-offset kerf
- line_path / line_to_path: Straight segments
- rectangle_path / circle_path: Closed shapes
- arc_path: Circular arcs through a target point
- flex_path: Living-hinge slit patterns
"""

from kerfcad.core.arc import arc_path
from kerfcad.core.flex import flex_path
from kerfcad.core.geometry import (
    bounding_box,
    linspace,
    mirror_points,
    orient,
    rotate_about,
    rotate_points,
    split_subpaths,
    translate_points,
)
from kerfcad.core.line import line_path, line_to_path
from kerfcad.core.shapes import circle_path, rectangle_path
from kerfcad.core.slit import level_runs, slit_path, slit_profile
from kerfcad.core.tooth import TracedPath, normalize_heights, tooth_path, tooth_profile
from kerfcad.core.wave import wave_path

__all__ = [
    "TracedPath",
    # Generators
    "arc_path",
    "circle_path",
    "flex_path",
    "line_path",
    "line_to_path",
    "rectangle_path",
    "slit_path",
    "slit_profile",
    "tooth_path",
    "tooth_profile",
    "wave_path",
    # Helpers
    "bounding_box",
    "level_runs",
    "linspace",
    "mirror_points",
    "normalize_heights",
    "orient",
    "rotate_about",
    "rotate_points",
    "split_subpaths",
    "translate_points",
]
