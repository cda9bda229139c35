"""Drawable entities: circles, line segments and extruded rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass

Point2d = tuple[float, float]
Point3d = tuple[float, float, float]


@dataclass
class Circle:
    """A circle drawn as a filled fan of ``segments`` slices in the XY plane."""

    center: Point3d = (0.0, 0.0, 0.0)
    radius: float = 0.0
    segments: int = 1000

    def vertices(self) -> list[Point2d]:
        """Return the fan vertices: the center, then the rim from angle 0 round to 2*pi."""
        cx, cy = self.center[0], self.center[1]
        fan = [(cx, cy)]
        for i in range(self.segments + 1):
            angle = 2.0 * math.pi * i / self.segments
            fan.append((cx + math.cos(angle) * self.radius, cy + math.sin(angle) * self.radius))
        return fan


@dataclass
class Line:
    """A line segment between two 3D points."""

    start: Point3d = (0.0, 0.0, 0.0)
    end: Point3d = (0.0, 0.0, 0.0)

    def vertices(self) -> tuple[Point3d, Point3d]:
        """Return the two end points in drawing order."""
        return (self.start, self.end)


@dataclass
class Box:
    """A rectangle from ``min_pnt`` to ``max_pnt`` extruded from z=0 up to ``height``."""

    min_pnt: Point2d = (0.0, 0.0)
    max_pnt: Point2d = (1.0, 1.0)
    height: float = 1.0

    def _corners(self) -> tuple[Point3d, ...]:
        (x0, y0), (x1, y1) = self.min_pnt, self.max_pnt
        b, t = 0.0, self.height
        return (
            (x0, y0, b), (x1, y0, b), (x1, y1, b), (x0, y1, b),
            (x0, y0, t), (x1, y0, t), (x1, y1, t), (x0, y1, t),
        )

    def faces(self) -> list[tuple[Point3d, Point3d, Point3d, Point3d]]:
        """Return the six quads: bottom, top, then the four sides."""
        c = self._corners()
        order = (
            (0, 1, 2, 3),
            (4, 5, 6, 7),
            (0, 1, 5, 4),
            (1, 2, 6, 5),
            (2, 3, 7, 6),
            (3, 0, 4, 7),
        )
        return [tuple(c[i] for i in quad) for quad in order]

    def edges(self) -> list[tuple[Point3d, Point3d]]:
        """Return the twelve outline edges: bottom loop, top loop, then verticals."""
        c = self._corners()
        order = (
            (0, 1), (1, 2), (2, 3), (3, 0),
            (4, 5), (5, 6), (6, 7), (7, 4),
            (0, 4), (1, 5), (2, 6), (3, 7),
        )
        return [(c[a], c[b]) for a, b in order]