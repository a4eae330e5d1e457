"""kerfcad - Parametric 2D toolpaths for laser and CNC cutting.

kerfcad builds cut drawings (finger joints, slits, waves, lines, rounded
rectangles, arcs, circles and living hinges) with a moving cursor. Every
feature is generated twice: once with kerf compensation for the cutter and
once kerf-free, so features always line up on nominal dimensions.

Example:
    from kerfcad import Drawing

    panel = Drawing()
    panel.rectangle(100, 60, 0.1, radius=3).slit("E1", 5, 10, 3, -0.1)
    panel.export("panel.svg")
"""

from kerfcad.domain import BREAK, Kerf, Point
from kerfcad.drawing import Drawing

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["BREAK", "Drawing", "Kerf", "Point", "__author__", "__version__"]
