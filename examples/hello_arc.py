"""Example svgpath model returning a few paths for `svgpath render`."""

from __future__ import annotations

import math

from svgpath import Path


def build():
    """Compose a rounded tab outline and a three-quarter ring."""

    tab = (
        Path()
        .move_to(0, 40)
        .vertical_line_to(10)
        .quadratic_bezier_to(0, 0, 10, 0)
        .horizontal_line_by(40)
        .quadratic_bezier_by(10, 0, 10, 10)
        .vertical_line_to(40)
        .close()
    )
    ring = Path.partial_circle(30, 70, 20, math.pi / 2, -1.5 * math.pi)

    return [tab, ring]
