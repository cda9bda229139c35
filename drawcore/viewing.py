"""Camera placement, projection matrices, picking rays and reference grids."""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence

import numpy as np

Point3d = tuple[float, float, float]
Segment = tuple[Point3d, Point3d]

DEFAULT_ZOOM = 45.0
FIELD_OF_VIEW = math.radians(45.0)
NEAR_PLANE = 0.1
FAR_PLANE = 100.0


class ViewportType(Enum):
    """Preset direction from which the camera looks at the origin."""

    TL = 0
    TM = 1
    TR = 2
    ML = 3
    TMM = 4
    BMM = 5
    MR = 6
    BL = 7
    BM = 8
    BR = 9


_BASE_POSITIONS: dict[ViewportType, Point3d] = {
    ViewportType.TL: (-1.0, 1.0, 1.0),
    ViewportType.TM: (0.0, 1.0, 1.0),
    ViewportType.TR: (1.0, 1.0, 1.0),
    ViewportType.ML: (-1.0, 0.0, 1.0),
    ViewportType.TMM: (0.0, 0.0, 1.0),
    ViewportType.BMM: (0.0, 0.0, -1.0),
    ViewportType.MR: (1.0, 0.0, 1.0),
    ViewportType.BL: (-1.0, -1.0, 1.0),
    ViewportType.BM: (0.0, -1.0, 1.0),
    ViewportType.BR: (10.0, -1.0, 1.0),
}


def camera_position(viewport_type: ViewportType, zoom_factor: float) -> Point3d:
    """Return the camera position for a preset, pushed out by ``zoom_factor``.

    The top-down TMM preset stays at (0, 0, 1) regardless of the zoom.
    """
    base = np.array(_BASE_POSITIONS[viewport_type], dtype=float)
    if viewport_type is ViewportType.TMM:
        return tuple(float(c) for c in base)
    position = base + base / np.linalg.norm(base) * zoom_factor
    return tuple(float(c) for c in position)


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed perspective projection (clip z in [-1, 1])."""
    if aspect == 0 or near == far:
        raise ValueError("degenerate perspective parameters")
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def _normalize(v: np.ndarray, what: str) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError(f"{what} has zero length")
    return v / length


def look_at(
    eye: Sequence[float], target: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Return a right-handed view matrix looking from ``eye`` at ``target``.

    Raises ValueError when the eye sits on the target or ``up`` is parallel
    to the view direction.
    """
    e = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(target, dtype=float) - e, "view direction")
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)), "side vector")
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(s @ e)
    m[1, 3] = -float(u @ e)
    m[2, 3] = float(f @ e)
    return m


def matrix_from_gl(values: Sequence[float]) -> np.ndarray:
    """Return the 4x4 matrix stored column by column in 16 ``values``."""
    flat = np.asarray(values, dtype=float)
    if flat.shape != (16,):
        raise ValueError("a matrix needs exactly 16 values")
    return flat.reshape(4, 4).T.copy()


def calculate_ray(
    mouse_x: float,
    mouse_y: float,
    screen_width: float,
    screen_height: float,
    view: np.ndarray,
    projection: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Return the world-space origin and unit direction of the ray under the mouse."""
    if screen_width <= 0 or screen_height <= 0:
        raise ValueError("screen size must be positive")
    x = (2.0 * mouse_x) / screen_width - 1.0
    y = 1.0 - (2.0 * mouse_y) / screen_height
    ray_clip = np.array([x, y, -1.0, 1.0])
    ray_eye = np.linalg.inv(projection) @ ray_clip
    ray_eye = np.array([ray_eye[0], ray_eye[1], -1.0, 0.0])
    inverse_view = np.linalg.inv(view)
    ray_world = inverse_view @ ray_eye
    direction = _normalize(ray_world[:3], "ray direction")
    origin = inverse_view[:3, 3].copy()
    return origin, direction


def ray_intersects_sphere(
    origin: Sequence[float],
    direction: Sequence[float],
    center: Sequence[float],
    radius: float,
) -> float | None:
    """Return the smaller ray parameter where the ray meets the sphere, or None."""
    o = np.asarray(origin, dtype=float)
    d = np.asarray(direction, dtype=float)
    oc = o - np.asarray(center, dtype=float)
    a = float(d @ d)
    b = 2.0 * float(oc @ d)
    c = float(oc @ oc) - radius * radius
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2.0 * a)
    t2 = (-b + root) / (2.0 * a)
    return min(t1, t2)


def grid_xy_lines(size: float = 10.0, step: float = 1.0) -> list[Segment]:
    """Return the grid segments of the XY plane, ending with the X and Y axes."""
    if step <= 0:
        raise ValueError("grid step must be positive")
    segments: list[Segment] = []
    i = step
    while i <= size:
        segments.append(((-size, i, 0.0), (size, i, 0.0)))
        segments.append(((-size, -i, 0.0), (size, -i, 0.0)))
        segments.append(((i, -size, 0.0), (i, size, 0.0)))
        segments.append(((-i, -size, 0.0), (-i, size, 0.0)))
        i += step
    segments.append(((-size, 0.0, 0.0), (size, 0.0, 0.0)))
    segments.append(((0.0, -size, 0.0), (0.0, size, 0.0)))
    return segments


class Camera:
    """A camera orbiting the origin from one of the preset viewport directions."""

    target: Point3d = (0.0, 0.0, 0.0)
    up: Point3d = (0.0, 0.0, 1.0)

    def __init__(
        self,
        viewport_type: ViewportType = ViewportType.TL,
        zoom_factor: float = DEFAULT_ZOOM,
    ) -> None:
        self.viewport_type = viewport_type
        self.zoom_factor = zoom_factor
        self.position: Point3d = (0.0, 0.0, 0.0)
        self.view: np.ndarray = np.identity(4)
        self.projection: np.ndarray = np.identity(4)

    def move(self, dx: float, dy: float) -> Point3d:
        """Shift the camera in X and Y and return the new position."""
        x, y, z = self.position
        self.position = (x + dx, y + dy, z)
        return self.position

    def zoom(self, wheel_delta: int) -> float:
        """Step the zoom factor: a forward wheel turn zooms in, any other zooms out."""
        if wheel_delta > 0:
            self.zoom_factor -= 1.0
        else:
            self.zoom_factor += 1.0
        return self.zoom_factor

    def set_viewport(self, viewport_type: ViewportType) -> None:
        """Switch to a preset direction and reset the zoom."""
        self.zoom_factor = DEFAULT_ZOOM
        self.viewport_type = viewport_type

    def setup(self, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
        """Place the camera and return the (view, projection) matrices in use.

        The top-down TMM preset only moves the camera; the matrices stay as
        they were.
        """
        self.position = camera_position(self.viewport_type, self.zoom_factor)
        if self.viewport_type is not ViewportType.TMM:
            self.projection = self.projection_matrix(width, height)
            self.view = self.view_matrix()
        return self.view, self.projection

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix looking from the current position at the origin."""
        return look_at(self.position, self.target, self.up)

    def projection_matrix(self, width: int, height: int) -> np.ndarray:
        """Return the perspective projection for a viewport of the given size."""
        if height == 0:
            raise ValueError("viewport height must not be zero")
        return perspective(FIELD_OF_VIEW, width / height, NEAR_PLANE, FAR_PLANE)