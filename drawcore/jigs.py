"""Interactive drag previews that size a circle or stretch a line towards the cursor."""

from __future__ import annotations

import math
from enum import Enum
from typing import MutableSequence, Sequence

from drawcore.shapes import Circle, Line

_POINT_TOLERANCE = 1.0e-5


class DragStatus(Enum):
    """Outcome of a drag step: keep going, or the drag makes no entity."""

    NORMAL = 0
    CANCEL = 1


def _point3d(point: Sequence[float]) -> tuple[float, float, float]:
    x, y, z = point
    return (float(x), float(y), float(z))


def _points_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    return all(math.isclose(p, q, abs_tol=_POINT_TOLERANCE) for p, q in zip(a, b))


class CircleJig:
    """Drags the radius of a circle with a fixed center."""

    def __init__(self, center: Sequence[float] = (0.0, 0.0, 0.0)) -> None:
        self.circle = Circle(center=_point3d(center))

    def sampler(self) -> DragStatus:
        """Return CANCEL while the radius is still zero, NORMAL otherwise."""
        if self.circle.radius == 0.0:
            return DragStatus.CANCEL
        return DragStatus.NORMAL

    def acquire_point(self, point: Sequence[float]) -> DragStatus:
        """Set the radius to the distance from the center to ``point``."""
        self.circle.radius = math.dist(_point3d(point), self.circle.center)
        return DragStatus.NORMAL

    def preview(self, renders: MutableSequence[object]) -> bool:
        """Add the dragged circle to the temporary ``renders``."""
        renders.append(self.circle)
        return True


class LineJig:
    """Drags the end point of a line with a fixed start point."""

    def __init__(self, start: Sequence[float] = (0.0, 0.0, 0.0)) -> None:
        self.line = Line(start=_point3d(start))

    def sampler(self) -> DragStatus:
        """Return CANCEL while the end coincides with the start, NORMAL otherwise."""
        if _points_equal(self.line.start, self.line.end):
            return DragStatus.CANCEL
        return DragStatus.NORMAL

    def acquire_point(self, point: Sequence[float]) -> DragStatus:
        """Move the end of the line to ``point``."""
        self.line.end = _point3d(point)
        return DragStatus.NORMAL

    def preview(self, renders: MutableSequence[object]) -> bool:
        """Add the dragged line to the temporary ``renders``."""
        renders.append(self.line)
        return True