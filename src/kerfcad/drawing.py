"""Drawing composition: cursor, pivot and subpath state machine.

A Drawing holds two index-aligned point sequences: the kerf-compensated path
that is sent to the cutter and the kerf-free nominal path that positions
everything. Generator methods append to both; shifting generators (tooth,
wave, line, arc) then move the cursor along the nominal path, while static
generators (slit, rectangle, circle, flex) leave it in place.

Example:
    box = Drawing()
    box.tooth("N|1011]", 5, 3, 1, 0.1)
    box.tooth("E:1011]", 9, 3, 1, 0.1)
    box.tooth("S:1001|", 5, 3, 1, 0.1)
    box.tooth("W|1001|", 9, 3, 1, 0.1)
    box.export("box.svg")
"""

import operator
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from kerfcad.config import (
    ArcOptions,
    CircleOptions,
    KerfCadSettings,
    RectangleOptions,
    ToothOptions,
    WaveOptions,
    get_default_settings,
)
from kerfcad.core import (
    arc_path,
    circle_path,
    flex_path,
    line_path,
    line_to_path,
    rectangle_path,
    rotate_about,
    slit_path,
    tooth_path,
    wave_path,
)
from kerfcad.domain import (
    BREAK,
    Kerf,
    Point,
    parse_flex_code,
    parse_heading,
    parse_line_code,
    parse_slit_code,
    parse_tooth_code,
    parse_wave_code,
)
from kerfcad.exceptions import InvalidArgumentError
from kerfcad.io import SvgWriter
from kerfcad.utils import DrawingLogger, DrawingStats, get_logger

KerfLike = float | Sequence[float] | Kerf
OptionsT = TypeVar("OptionsT", bound=BaseModel)


def _count(name: str, value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(name, f"expected an integer, got {value!r}") from None


class Drawing:
    """A multi-subpath drawing built by a moving cursor.

    Invariants:
    - ``compensated`` and ``nominal`` always have the same length
    - a BREAK at index i in one sequence is a BREAK at index i in the other

    All mutating methods return the drawing itself so calls can be chained.
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        settings: KerfCadSettings | None = None,
    ) -> None:
        """Create an empty drawing.

        Args:
            x: Initial cursor x
            y: Initial cursor y
            settings: Default generator options and export settings
        """
        self.settings = settings or get_default_settings()
        self._compensated: list[Point] = []
        self._nominal: list[Point] = []
        self._cursor = Point(float(x), float(y))
        self._pivot = self._cursor
        self._pivot_index = 0
        self._begin_index = 0
        self._log = DrawingLogger(get_logger(__name__))

    def __len__(self) -> int:
        return len(self._compensated)

    def __repr__(self) -> str:
        return (
            f"Drawing(points={len(self)}, cursor=({self._cursor.x:g}, {self._cursor.y:g}), "
            f"pivot_index={self._pivot_index}, begin_index={self._begin_index})"
        )

    @property
    def compensated(self) -> list[Point]:
        """Kerf-compensated points (a copy)."""
        return list(self._compensated)

    @property
    def nominal(self) -> list[Point]:
        """Kerf-free points (a copy)."""
        return list(self._nominal)

    @property
    def cursor(self) -> Point:
        return self._cursor

    @property
    def pivot_point(self) -> Point:
        return self._pivot

    @property
    def pivot_index(self) -> int:
        return self._pivot_index

    @property
    def begin_index(self) -> int:
        return self._begin_index

    @property
    def stats(self) -> DrawingStats:
        """Counters of generator calls, breaks, rotations, merges and exports."""
        return self._log.stats

    def coordinates(self, nominal: bool = False) -> tuple[list[float], list[float]]:
        """Get separate x and y lists for plotting, with NaN at breaks.

        Args:
            nominal: Return the kerf-free path instead of the compensated one
        """
        points = self._nominal if nominal else self._compensated
        return [p.x for p in points], [p.y for p in points]

    def copy(self) -> "Drawing":
        """Return an independent deep copy of this drawing."""
        clone = Drawing(self._cursor.x, self._cursor.y, settings=self.settings.model_copy(deep=True))
        clone._compensated = list(self._compensated)
        clone._nominal = list(self._nominal)
        clone._pivot = self._pivot
        clone._pivot_index = self._pivot_index
        clone._begin_index = self._begin_index
        return clone

    # Cursor and subpath state

    def move(self, x: float | None = None, y: float | None = None) -> "Drawing":
        """Move the cursor.

        With coordinates, moves there. Without, moves to the last drawn point
        of the nominal path, so kerf never shifts the coordinate frame.
        """
        if x is None and y is None:
            for p in reversed(self._nominal):
                if not p.is_break:
                    self._cursor = p
                    break
            return self
        if x is None or y is None:
            raise InvalidArgumentError("move", "pass both x and y, or neither")
        self._cursor = Point(float(x), float(y))
        return self

    def shift(self, dx: float, dy: float) -> "Drawing":
        """Move the cursor relative to its current position."""
        return self.move(self._cursor.x + dx, self._cursor.y + dy)

    def begin(self) -> "Drawing":
        """Start a new subpath at the next appended point."""
        self._begin_index = len(self._nominal)
        return self

    def cut(self) -> "Drawing":
        """Lift the pen: append a break and start a new subpath."""
        self._compensated.append(BREAK)
        self._nominal.append(BREAK)
        self._log.log_break(len(self._nominal) - 1)
        return self.begin()

    def close(self) -> "Drawing":
        """Close the current subpath by repeating its first point.

        Breaks at the start of the subpath are skipped. Nothing happens on an
        empty drawing or when the subpath holds no points yet.
        """
        for i in range(self._begin_index, len(self._compensated)):
            if not self._compensated[i].is_break:
                self._compensated.append(self._compensated[i])
                self._nominal.append(self._nominal[i])
                break
        return self

    def pivot(self, x: float | None = None, y: float | None = None) -> "Drawing":
        """Mark where a later rotate() starts and the point it turns about.

        Args:
            x: Pivot x (default: cursor)
            y: Pivot y (default: cursor)
        """
        if (x is None) != (y is None):
            raise InvalidArgumentError("pivot", "pass both x and y, or neither")
        self._pivot_index = len(self._nominal)
        self._pivot = self._cursor if x is None else Point(float(x), float(y))
        return self

    def rotate(self, angle: float) -> "Drawing":
        """Rotate every point drawn since the pivot by ``angle`` radians.

        Both sequences are rotated about the pivot point. Points before the
        pivot index, the cursor and later generator frames are unaffected.
        """
        start = self._pivot_index
        self._compensated[start:] = rotate_about(self._compensated[start:], angle, self._pivot)
        self._nominal[start:] = rotate_about(self._nominal[start:], angle, self._pivot)
        self._log.log_rotation(angle, start, len(self._nominal) - start)
        return self

    def append(
        self,
        compensated: Sequence[Point] | None = None,
        nominal: Sequence[Point] | None = None,
    ) -> "Drawing":
        """Append local points, offset by the cursor, to both sequences.

        Without arguments the cursor itself is appended to both.

        Raises:
            InvalidArgumentError: If only one sequence is given or their
                lengths differ
        """
        if compensated is None and nominal is None:
            compensated = nominal = [Point(0.0, 0.0)]
        if compensated is None or nominal is None:
            raise InvalidArgumentError("append", "pass both point sequences, or neither")
        if len(compensated) != len(nominal):
            raise InvalidArgumentError(
                "append",
                f"compensated has {len(compensated)} points, nominal has {len(nominal)}",
            )
        cx, cy = self._cursor.x, self._cursor.y
        self._compensated.extend(p.translated(cx, cy) for p in compensated)
        self._nominal.extend(p.translated(cx, cy) for p in nominal)
        return self

    def merge(
        self,
        other: "Drawing | Iterable[Drawing]",
        x: float | None = None,
        y: float | None = None,
    ) -> "Drawing":
        """Copy other drawings into this one, translated by (x, y).

        The offset defaults to the cursor. This drawing's cursor, pivot and
        subpath start are left as they are.
        """
        if (x is None) != (y is None):
            raise InvalidArgumentError("merge", "pass both x and y, or neither")
        dx = self._cursor.x if x is None else float(x)
        dy = self._cursor.y if y is None else float(y)

        others = [other] if isinstance(other, Drawing) else list(other)
        # Snapshot first: a drawing may be merged into itself
        snapshots = [(list(source._compensated), list(source._nominal)) for source in others]
        for compensated, nominal in snapshots:
            self._compensated.extend(p.translated(dx, dy) for p in compensated)
            self._nominal.extend(p.translated(dx, dy) for p in nominal)
            self._log.log_merge(len(compensated), (dx, dy))
        return self

    # Generators

    def _options(self, model: type[OptionsT], base: OptionsT | None = None, **overrides: Any) -> OptionsT:
        values = base.model_dump() if base is not None else {}
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return model.model_validate(values)
        except ValidationError as e:
            raise InvalidArgumentError(model.__name__, str(e)) from e

    def _draw(
        self,
        kind: str,
        compensated: Sequence[Point],
        nominal: Sequence[Point],
        shifting: bool,
    ) -> "Drawing":
        self.append(compensated, nominal)
        if shifting:
            self.move()
        self._log.log_feature(kind, len(compensated), self._cursor.to_tuple())
        return self

    def tooth(
        self,
        code: str,
        n: int | None,
        width: float,
        height: float | Sequence[float],
        kerf: KerfLike = 0.0,
        protrude: bool | None = None,
    ) -> "Drawing":
        """Draw a row of finger-joint teeth and advance the cursor.

        Args:
            code: ``<dir><left><levels><right>[<sign><sign>]``, e.g. ``"N|1011]"``
            n: Number of segments; None draws 2 segments of half the width
            width: Segment width (total width when n is None)
            height: Tooth height, or (left, centre, right) heights
            kerf: Cut-width compensation, scalar or (horizontal, vertical)
            protrude: Tabs (True) or notches (False); defaults to kerf >= 0

        The cursor advances by exactly ``n * width`` (plus pushed grown
        edges) along the code direction, whatever the kerf.
        """
        parsed = parse_tooth_code(code)
        kerf_value = Kerf.of(kerf)
        options = self._options(ToothOptions, protrude=protrude)
        if n is None:
            count, segment = 2, width / 2
        else:
            count, segment = _count("n", n), width
        protrudes = options.protrude if options.protrude is not None else kerf_value.vertical >= 0

        compensated = tooth_path(parsed, count, segment, height, kerf_value, protrudes)
        nominal = tooth_path(parsed, count, segment, height, Kerf.zero(), protrudes)
        self.append(compensated.points, nominal.points)
        self.shift(nominal.end.x, nominal.end.y)
        self._log.log_feature("tooth", len(compensated.points), self._cursor.to_tuple())
        return self

    def slit(self, code: str, n: int, width: float, height: float, kerf: KerfLike = 0.0) -> "Drawing":
        """Draw slots along ``n`` segments; the cursor stays put.

        Args:
            code: ``<dir><level>``, e.g. ``"E1"``
            n: Number of segments
            width: Segment width
            height: Slot height
            kerf: Inset on all sides, scalar or (horizontal, vertical)
        """
        parsed = parse_slit_code(code)
        count = _count("n", n)
        compensated = slit_path(parsed, count, width, height, Kerf.of(kerf))
        nominal = slit_path(parsed, count, width, height, Kerf.zero())
        return self._draw("slit", compensated, nominal, shifting=False)

    def wave(
        self,
        code: str,
        n: int,
        width: float,
        height: float,
        kerf: KerfLike = 0.0,
        resolution: int | None = None,
    ) -> "Drawing":
        """Draw ``n`` sine periods and advance the cursor.

        Args:
            code: ``<dir><phase>`` with phase ``0``, ``1``, ``/`` or ``\\``
            n: Number of periods
            width: Period length
            height: Peak-to-trough height
            kerf: Offset along the curve normal
            resolution: Samples per period (default from settings)
        """
        parsed = parse_wave_code(code)
        count = _count("n", n)
        options = self._options(WaveOptions, self.settings.wave, resolution=resolution)
        compensated = wave_path(parsed, count, width, height, Kerf.of(kerf), options)
        nominal = wave_path(parsed, count, width, height, Kerf.zero(), options)
        return self._draw("wave", compensated, nominal, shifting=True)

    def line(self, code: str | float, width: float, kerf: KerfLike = 0.0) -> "Drawing":
        """Draw a straight line and advance the cursor.

        Args:
            code: ``<dir>[<sign><sign>]``, e.g. ``"N"`` or ``"s+-"``; a number
                is taken as dx and the call is forwarded to line_to()
            width: Line length (dy when code is a number)
            kerf: Compensation, scalar or (horizontal, vertical)
        """
        if not isinstance(code, str):
            return self.line_to(code, width, kerf)
        parsed = parse_line_code(code)
        compensated = line_path(parsed, width, Kerf.of(kerf))
        nominal = line_path(parsed, width, Kerf.zero())
        return self._draw("line", compensated, nominal, shifting=True)

    def line_to(self, dx: float, dy: float, kerf: KerfLike = 0.0) -> "Drawing":
        """Draw a line to the cursor offset (dx, dy), at any angle.

        The compensated end point is shifted by (kerf_x, kerf_y).
        """
        compensated = line_to_path(dx, dy, Kerf.of(kerf))
        nominal = line_to_path(dx, dy, Kerf.zero())
        return self._draw("line", compensated, nominal, shifting=True)

    def rectangle(
        self,
        width: float,
        height: float,
        kerf: KerfLike = 0.0,
        radius: float | None = None,
        resolution: int | None = None,
    ) -> "Drawing":
        """Draw a sharp or rounded rectangle at the cursor; the cursor stays put.

        Args:
            width: Width; negative mirrors to the left of the cursor
            height: Height; negative mirrors below the cursor
            kerf: Edge offset, scalar or (horizontal, vertical)
            radius: Corner radius (0 or None for sharp corners)
            resolution: Samples per rounded corner
        """
        options = self._options(RectangleOptions, radius=radius, resolution=resolution)
        compensated = rectangle_path(width, height, Kerf.of(kerf), options)
        nominal = rectangle_path(width, height, Kerf.zero(), options)
        return self._draw("rectangle", compensated, nominal, shifting=False)

    def arc(
        self,
        code: str | float,
        width: float,
        kerf: KerfLike = 0.0,
        degrees: float | None = None,
        resolution: int | None = None,
        proportion: float | None = None,
    ) -> "Drawing":
        """Draw an arc towards a compass heading and advance the cursor.

        Args:
            code: Heading ``N E S W NE NW SE SW``; a number is taken as dx
                and the call is forwarded to arc_to()
            width: Distance along each axis of the heading (dy when code is
                a number)
            kerf: Radius offset
            degrees: Sweep angle; negative bulges to the other side
            resolution: Number of samples
            proportion: Fraction of the sweep to draw
        """
        if not isinstance(code, str):
            return self.arc_to(code, width, kerf, degrees, resolution, proportion)
        ux, uy = parse_heading(code)
        return self.arc_to(ux * width, uy * width, kerf, degrees, resolution, proportion)

    def arc_to(
        self,
        dx: float,
        dy: float,
        kerf: KerfLike = 0.0,
        degrees: float | None = None,
        resolution: int | None = None,
        proportion: float | None = None,
    ) -> "Drawing":
        """Draw an arc from the cursor to the cursor offset (dx, dy)."""
        options = self._options(
            ArcOptions,
            self.settings.arc,
            degrees=degrees,
            resolution=resolution,
            proportion=proportion,
        )
        compensated = arc_path(dx, dy, Kerf.of(kerf), options)
        nominal = arc_path(dx, dy, Kerf.zero(), options)
        return self._draw("arc", compensated, nominal, shifting=True)

    def circle(
        self,
        radius: float,
        kerf: KerfLike = 0.0,
        resolution: int | None = None,
        centers: Sequence[tuple[float, float]] | None = None,
    ) -> "Drawing":
        """Draw one circle per centre (relative to the cursor); the cursor stays put.

        Args:
            radius: Nominal radius
            kerf: Radius offset
            resolution: Samples per circle (default from settings)
            centers: Circle centres relative to the cursor (default: the cursor)
        """
        options = self._options(
            CircleOptions,
            self.settings.circle,
            resolution=resolution,
            centers=list(centers) if centers is not None else None,
        )
        compensated = circle_path(radius, Kerf.of(kerf), options)
        nominal = circle_path(radius, Kerf.zero(), options)
        return self._draw("circle", compensated, nominal, shifting=False)

    def flex(self, code: str, width: float, height: float, count: int, margin: float) -> "Drawing":
        """Draw living-hinge slits; the cursor stays put. Kerf is not applied.

        Args:
            code: ``<dir>[<start>]``, e.g. ``"E0"``
            width: Row length
            height: Span covered by the rows
            count: Number of row intervals (count + 1 rows are cut)
            margin: Solid material at the ends of centred slits
        """
        parsed = parse_flex_code(code)
        points = flex_path(parsed, width, height, _count("count", count), margin)
        return self._draw("flex", points, points, shifting=False)

    # Export

    def to_svg(self, container: Sequence[float] | None = None) -> str:
        """Render the compensated path as an SVG document."""
        return SvgWriter(self._compensated, self.settings.export).render(container)

    def export(self, path: Path | str, container: Sequence[float] | None = None) -> Path:
        """Write the compensated path to an SVG file.

        Args:
            path: Destination file, replaced atomically
            container: Optional (width, height) of the stock sheet

        Returns:
            The destination path

        Raises:
            ExportError: If the file cannot be written
        """
        writer = SvgWriter(self._compensated, self.settings.export)
        try:
            target = writer.save(path, container)
        except OSError as e:
            self._log.log_export_error(str(path), e)
            raise
        self._log.log_export(str(target), len(writer.subpaths))
        return target
