from __future__ import annotations

import copy

import numpy as np

from ._format import format_flag, format_number

_PI = np.float32(np.pi)


class Path:
    """Accumulates SVG path commands as text.

    Every command method appends to the buffer and returns the same instance, so
    calls chain. ``str(path)`` gives the ``d`` attribute value at any point::

        tag = f'<path d="{Path().move_to(0, 0).line_to(10, 0).close()}"></path>'
    """

    def __init__(self) -> None:
        self._inner = ""

    @classmethod
    def new(cls) -> "Path":
        return cls()

    def _push(self, letter: str, *groups: tuple[float, ...]) -> "Path":
        text = ", ".join(" ".join(format_number(v) for v in group) for group in groups)
        self._inner += f"{letter} {text}"
        return self

    def move_to(self, x: float, y: float) -> "Path":
        """Start a new subpath at ``(x, y)``."""
        return self._push("M", (x, y))

    def move_by(self, dx: float, dy: float) -> "Path":
        """Start a new subpath ``(dx, dy)`` away from the current point."""
        return self._push("m", (dx, dy))

    def line_to(self, x: float, y: float) -> "Path":
        return self._push("L", (x, y))

    def line_by(self, dx: float, dy: float) -> "Path":
        return self._push("l", (dx, dy))

    def horizontal_line_to(self, x: float) -> "Path":
        return self._push("H", (x,))

    def horizontal_line_by(self, dx: float) -> "Path":
        return self._push("h", (dx,))

    def vertical_line_to(self, y: float) -> "Path":
        return self._push("V", (y,))

    def vertical_line_by(self, dy: float) -> "Path":
        return self._push("v", (dy,))

    def close(self) -> "Path":
        """Close the current subpath with a line back to its initial point."""
        self._inner += "Z"
        return self

    def cubic_bezier_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> "Path":
        """Cubic curve to ``(x, y)`` with control points ``(x1, y1)`` and ``(x2, y2)``."""
        return self._push("C", (x1, y1), (x2, y2), (x, y))

    def cubic_bezier_by(
        self, dx1: float, dy1: float, dx2: float, dy2: float, dx: float, dy: float
    ) -> "Path":
        return self._push("c", (dx1, dy1), (dx2, dy2), (dx, dy))

    def smooth_cubic_bezier_to(self, x2: float, y2: float, x: float, y: float) -> "Path":
        """Cubic curve whose first control point reflects the previous curve's second one.

        The previous command is not checked; a renderer falls back to the current
        point when it is not a cubic curve.
        """
        return self._push("S", (x2, y2), (x, y))

    def smooth_cubic_bezier_by(self, dx2: float, dy2: float, dx: float, dy: float) -> "Path":
        return self._push("s", (dx2, dy2), (dx, dy))

    def quadratic_bezier_to(self, x1: float, y1: float, x: float, y: float) -> "Path":
        return self._push("Q", (x1, y1), (x, y))

    def quadratic_bezier_by(self, dx1: float, dy1: float, dx: float, dy: float) -> "Path":
        return self._push("q", (dx1, dy1), (dx, dy))

    def smooth_quadratic_cubic_bezier_to(self, x: float, y: float) -> "Path":
        """Quadratic curve reusing the reflection of the previous control point."""
        return self._push("T", (x, y))

    def smooth_quadratic_cubic_bezier_by(self, dx: float, dy: float) -> "Path":
        return self._push("t", (dx, dy))

    def elliptical_arc_to(
        self,
        rx: float,
        ry: float,
        xrot: float,
        large_arc: bool,
        sweep: bool,
        x: float,
        y: float,
    ) -> "Path":
        """Elliptical arc to ``(x, y)``.

        ``xrot`` rotates the ellipse's x-axis in degrees. The ``large_arc`` and
        ``sweep`` flags pick one of the four candidate arcs and are written as
        ``1``/``0``.
        """
        return self._arc("A", rx, ry, xrot, large_arc, sweep, x, y)

    def elliptical_arc_by(
        self,
        rx: float,
        ry: float,
        xrot: float,
        large_arc: bool,
        sweep: bool,
        dx: float,
        dy: float,
    ) -> "Path":
        return self._arc("a", rx, ry, xrot, large_arc, sweep, dx, dy)

    def _arc(
        self,
        letter: str,
        rx: float,
        ry: float,
        xrot: float,
        large_arc: bool,
        sweep: bool,
        x: float,
        y: float,
    ) -> "Path":
        fields = [format_number(rx), format_number(ry), format_number(xrot)]
        fields += [format_flag(large_arc), format_flag(sweep)]
        fields += [format_number(x), format_number(y)]
        self._inner += f"{letter} {' '.join(fields)}"
        return self

    @classmethod
    def partial_circle(
        cls,
        center_x: float,
        center_y: float,
        radius: float,
        start_angle: float,
        arc_angle: float,
    ) -> "Path":
        """Build the circular arc spanning ``arc_angle`` radians from ``start_angle``.

        Angles grow counter-clockwise on screen (y points down). Arcs wider than
        half a circle are split in two, since one arc command cannot express them
        with ``large_arc`` fixed to false.
        """

        with np.errstate(over="ignore", invalid="ignore"):
            cx, cy, r = np.float32(center_x), np.float32(center_y), np.float32(radius)
            start, arc = np.float32(start_angle), np.float32(arc_angle)

            def point(angle: np.float32) -> tuple[np.float32, np.float32]:
                return cx + r * np.cos(angle), cy - r * np.sin(angle)

            sweep = bool(arc < 0)
            path = cls().move_to(*point(start))

            mid = start + np.sign(arc) * min(abs(arc), _PI)
            path.elliptical_arc_to(r, r, 0.0, False, sweep, *point(mid))

            if abs(arc) > _PI:
                path.elliptical_arc_to(r, r, 0.0, False, sweep, *point(start + arc))

            return path

    @property
    def d(self) -> str:
        return self._inner

    def copy(self) -> "Path":
        return copy.copy(self)

    def __copy__(self) -> "Path":
        dup = type(self)()
        dup._inner = self._inner
        return dup

    def __str__(self) -> str:
        return self.d

    def __format__(self, format_spec: str) -> str:
        return format(self.d, format_spec)

    def __repr__(self) -> str:
        return f"Path({self.d!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.d == other.d
