"""Drawing I/O layer for kerfcad.

This module serializes drawings to SVG for laser cutters and CNC
toolchains.

Key responsibilities:
- Split the compensated path into drawable subpaths
- Size the document from the drawing's bounding box
- Persist atomically so failed exports leave nothing behind

Key classes:
- SvgWriter: Render and save SVG documents
"""

from kerfcad.io.writer import SvgWriter, format_number

__all__ = [
    "SvgWriter",
    "format_number",
]
