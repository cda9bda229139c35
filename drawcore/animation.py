"""Frame stepping, easing, interpolation and motion helpers for animation."""

from __future__ import annotations

import math
from enum import Enum
from numbers import Real
from typing import Sequence

import numpy as np

_EPSILON = 0.001


class AnimationMode(Enum):
    """Easing curve applied to an interpolation parameter."""

    LINEAR = 0
    EASE_IN = 1
    EASE_IN2 = 2
    EASE_OUT = 3
    EASE_OUT2 = 4
    EASE_IN_OUT = 5
    EASE_IN_OUT2 = 6
    BOUNCE = 7
    ELASTIC = 8


def _value(x):
    if isinstance(x, Real):
        return x
    return np.asarray(x, dtype=float)


def get_frame(
    frame_start: int,
    frame_end: int,
    elapsed_time: float,
    frame_rate: float = 30,
    loop: bool = True,
) -> int:
    """Return the frame shown after ``elapsed_time`` seconds at ``frame_rate``.

    With ``loop`` the frame wraps over the frame count; otherwise it stops at
    ``frame_end``.
    """
    frame = frame_start + int(frame_rate * elapsed_time + 0.5)
    if loop:
        frame = int(math.fmod(frame, frame_end - frame_start + 1))
    elif frame > frame_end:
        frame = frame_end
    return frame


def lerp(start, end, alpha: float):
    """Return the linear blend of ``start`` and ``end`` at ``alpha``."""
    a, b = _value(start), _value(end)
    return a + alpha * (b - a)


def _ease(alpha: float, mode: AnimationMode) -> float:
    if mode is AnimationMode.EASE_IN:
        return alpha * alpha * alpha
    if mode is AnimationMode.EASE_IN2:
        return 1 - math.sqrt(1 - alpha * alpha)
    if mode is AnimationMode.EASE_OUT:
        beta = 1 - alpha
        return 1 - beta * beta * beta
    if mode is AnimationMode.EASE_OUT2:
        return math.sqrt(1 - (1 - alpha) * (1 - alpha))
    if mode is AnimationMode.EASE_IN_OUT:
        beta = 1 - alpha
        if alpha < 0.5:
            return alpha * alpha * alpha * 4.0
        return 1 - beta * beta * beta * 4.0
    if mode is AnimationMode.EASE_IN_OUT2:
        if alpha < 0.5:
            return 0.5 * (1 - math.sqrt(1 - alpha * alpha))
        return 0.5 * math.sqrt(1 - (1 - alpha) * (1 - alpha)) + 0.5
    return alpha


def interpolate(start, end, alpha: float, mode: AnimationMode = AnimationMode.LINEAR):
    """Return ``start`` moved towards ``end`` by ``alpha`` eased with ``mode``."""
    a, b = _value(start), _value(end)
    return a + (b - a) * _ease(alpha, mode)


def move(
    start: Sequence[float], end: Sequence[float], elapsed_time: float, speed: float
) -> tuple[np.ndarray, bool]:
    """Move from ``start`` towards ``end`` at ``speed`` for ``elapsed_time``.

    Returns the new position and whether the target was reached.
    """
    a = np.asarray(start, dtype=float)
    b = np.asarray(end, dtype=float)
    if np.array_equal(a, b):
        return b.copy(), True
    delta = b - a
    length1 = float(np.linalg.norm(delta))
    step = delta / length1 * (elapsed_time * speed)
    length2 = float(np.linalg.norm(step))
    if length2 > length1:
        return b.copy(), True
    return a + step, False


def accelerate(
    is_moving: bool, speed: float, max_speed: float, accel: float, delta_time: float
) -> float:
    """Return the speed after accelerating (or braking) for ``delta_time``.

    The speed never passes ``max_speed`` while moving and never crosses zero
    while braking; the sign of ``max_speed`` gives the direction.
    """
    sign = 1.0 if max_speed > 0 else -1.0
    if is_moving:
        speed += sign * accel * delta_time
        if sign * speed > sign * max_speed:
            speed = max_speed
    else:
        speed -= sign * accel * delta_time
        if sign * speed < 0:
            speed = 0.0
    return speed


def _clamp_unit(x: float) -> float:
    return max(-1.0, min(1.0, x))


def slerp_vector(
    start: Sequence[float],
    end: Sequence[float],
    alpha: float,
    mode: AnimationMode = AnimationMode.LINEAR,
) -> np.ndarray:
    """Spherically interpolate between two 3D vectors.

    Raises ValueError for a zero vector or parallel vectors, where the
    rotation plane is undefined.
    """
    a = np.asarray(start, dtype=float)
    b = np.asarray(end, dtype=float)
    t = interpolate(0.0, 1.0, alpha, mode)
    norms = float(np.linalg.norm(a) * np.linalg.norm(b))
    if norms == 0.0:
        raise ValueError("cannot interpolate a zero-length vector")
    angle = math.acos(_clamp_unit(float(a @ b) / norms))
    sine = math.sin(angle)
    if abs(sine) < 1e-12:
        raise ValueError("cannot interpolate parallel vectors")
    scale1 = math.sin((1 - t) * angle) / sine
    scale2 = math.sin(t * angle) / sine
    return a * scale1 + b * scale2


def slerp_quaternion(
    start: Sequence[float],
    end: Sequence[float],
    alpha: float,
    mode: AnimationMode = AnimationMode.LINEAR,
) -> tuple[float, float, float, float]:
    """Spherically interpolate between quaternions given as ``(s, x, y, z)``."""
    q0 = np.asarray(start, dtype=float)
    q1 = np.asarray(end, dtype=float)
    t = interpolate(0.0, 1.0, alpha, mode)
    dot = float(q0 @ q1)

    if 1 - dot < _EPSILON:
        result = q0 + (q1 - q0) * t
    elif abs(1 + dot) < _EPSILON:
        v1 = q0[1:]
        length = float(np.linalg.norm(v1))
        if length:
            v1 = v1 / length
        up = np.array([1.0, 0.0, 0.0]) if abs(q0[1]) < _EPSILON else np.array([0.0, 1.0, 0.0])
        v2 = np.cross(v1, up)
        length = float(np.linalg.norm(v2))
        if length:
            v2 = v2 / length
        angle = math.acos(_clamp_unit(dot)) * t
        v3 = v1 * math.cos(angle) + v2 * math.sin(angle)
        result = np.concatenate(([0.0], v3))
    else:
        angle = math.acos(dot)
        inv_sine = 1.0 / math.sqrt(1 - dot * dot)
        scale1 = math.sin((1 - t) * angle) * inv_sine
        scale2 = math.sin(t * angle) * inv_sine
        result = q0 * scale1 + q1 * scale2
    return tuple(float(c) for c in result)