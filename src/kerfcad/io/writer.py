"""SVG writer for exporting drawings.

This module provides the SvgWriter class which turns a compensated point
sequence into an SVG document: one path per subpath, sized by the bounding
box of all drawn points, and persists it atomically.
"""

import os
import stat
import tempfile
from collections.abc import Sequence
from pathlib import Path

from kerfcad.config import ExportConfig
from kerfcad.core.geometry import bounding_box, split_subpaths
from kerfcad.domain import Point
from kerfcad.exceptions import ExportError, InvalidArgumentError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


def _file_mode(target: Path) -> int:
    """Permissions for an exported file: kept from the file it replaces, else from the umask."""
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        pass
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def format_number(value: float, precision: int) -> str:
    """Format a coordinate with fixed decimals, printing negative zero as zero.

    Examples:
        >>> format_number(-0.00001, 4)
        '0.0000'
        >>> format_number(2.5, 2)
        '2.50'
    """
    text = f"{value:.{precision}f}"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text


class SvgWriter:
    """Writes a compensated point sequence as an SVG document.

    Example:
        writer = SvgWriter(drawing.compensated)
        writer.save(Path("panel.svg"), container=(300, 200))
    """

    def __init__(self, points: Sequence[Point], config: ExportConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            points: Compensated points, with breaks between subpaths
            config: Export settings (precision, unit, newline, paint)
        """
        self._points = list(points)
        self._config = config or ExportConfig()

    @property
    def subpaths(self) -> list[list[Point]]:
        """Subpaths with at least two points; shorter runs are not drawable."""
        return [run for run in split_subpaths(self._points) if len(run) >= 2]

    def view_box(self) -> tuple[float, float, float, float]:
        """Get (min_x, min_y, width, height) over all non-break points."""
        box = bounding_box(self._points)
        if box is None:
            return (0.0, 0.0, 0.0, 0.0)
        min_x, min_y, max_x, max_y = box
        return (min_x, min_y, max_x - min_x, max_y - min_y)

    def _fmt(self, value: float) -> str:
        return format_number(value, self._config.precision)

    def _path_data(self, run: list[Point]) -> str:
        head, *tail = run
        commands = [f"M{self._fmt(head.x)},{self._fmt(head.y)}"]
        commands.extend(f"L{self._fmt(p.x)},{self._fmt(p.y)}" for p in tail)
        return " ".join(commands)

    def render(self, container: Sequence[float] | None = None) -> str:
        """Render the SVG document.

        Args:
            container: Optional (width, height) of the stock sheet, drawn as
                a rectangle at the origin before every path

        Returns:
            Complete SVG document text

        Raises:
            InvalidArgumentError: If container is not a (width, height) pair
        """
        config = self._config
        min_x, min_y, width, height = self.view_box()
        fmt = self._fmt

        lines = [
            XML_DECLARATION,
            (
                f'<svg xmlns="{SVG_NAMESPACE}" '
                f'width="{fmt(width)}{config.unit}" height="{fmt(height)}{config.unit}" '
                f'viewBox="{fmt(min_x)} {fmt(min_y)} {fmt(width)} {fmt(height)}">'
            ),
            f'<g fill="{config.fill}" stroke="{config.stroke}">',
        ]

        if container is not None:
            if len(container) != 2:
                raise InvalidArgumentError(
                    "container", f"expected (width, height), got {len(container)} values"
                )
            lines.append(
                f'<rect x="0" y="0" width="{fmt(container[0])}" height="{fmt(container[1])}"/>'
            )

        for run in self.subpaths:
            lines.append(f'\t<path d="{self._path_data(run)}"></path>')

        lines.extend(["</g>", "</svg>"])
        return config.newline.join(lines)

    def save(self, path: Path | str, container: Sequence[float] | None = None) -> Path:
        """Write the document to ``path``.

        The document is rendered fully in memory, written to a temporary file
        next to the destination and moved over it in one step, so a failed
        export never leaves a truncated file behind.
        A replaced file keeps its permissions; a new file gets the default
        permissions allowed by the umask.

        Args:
            path: Destination file
            container: Optional stock sheet size, see render()

        Returns:
            The destination path

        Raises:
            ExportError: If the file cannot be written
        """
        target = Path(path)
        document = self.render(container)

        try:
            fd, staging = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
        except OSError as e:
            raise ExportError(str(target), str(e)) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(document)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(staging, _file_mode(target))
            os.replace(staging, target)
        except BaseException as e:
            if os.path.exists(staging):
                os.unlink(staging)
            if isinstance(e, OSError):
                raise ExportError(str(target), str(e)) from e
            raise

        return target
