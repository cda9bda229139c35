"""Plain-text call logging: formats a function name and its arguments into a daily log file."""

from __future__ import annotations

import os
from datetime import datetime
from numbers import Real
from pathlib import Path

_LOG_DIR_NAME = "MathLog"


def _indent(level: int) -> str:
    return "\t" * max(level, 0)


def _is_coords(value: object, size: int) -> bool:
    return (
        isinstance(value, (tuple, list))
        and len(value) == size
        and all(isinstance(c, Real) and not isinstance(c, bool) for c in value)
    )


def format_value(value: object, indent_level: int) -> str:
    """Return one indented line describing ``value`` with its kind.

    Booleans, integers, floats, 2D and 3D points (sequences of two or three
    numbers) and ``None`` (a null pointer) are supported; anything else raises
    TypeError.
    """
    prefix = _indent(indent_level)
    if isinstance(value, bool):
        return f"{prefix}bool: {'true' if value else 'false'}"
    if isinstance(value, int):
        return f"{prefix}int: {value}"
    if isinstance(value, float):
        return f"{prefix}double: {value:f}"
    if value is None:
        return f"{prefix}void*: 0"
    if _is_coords(value, 3):
        x, y, z = value
        return f"{prefix}OdGePoint3d: {{ {x:f}, {y:f}, {z:f} }}"
    if _is_coords(value, 2):
        x, y = value
        return f"{prefix}OdGePoint2d: {{ {x:f}, {y:f} }}"
    raise TypeError(f"cannot log a value of type {type(value).__name__}")


def format_call(function_name: str, *args: object) -> str:
    """Return the log block for a call: the name, then each argument in braces."""
    lines = "".join("\n" + format_value(arg, 1) for arg in args)
    return f"{function_name}\n{{{lines}\n}}\n"


def _log_root() -> str | None:
    return os.environ.get("LOCALAPPDATA") or os.environ.get("localappdata")


def log_function(function_name: str, *args: object) -> Path | None:
    """Append a time-stamped call block to today's log file.

    The file lives in ``MathLog`` under the local application data directory.
    Returns the path written to, or None when that directory is not configured.
    """
    root = _log_root()
    if root is None:
        return None
    content = format_call(function_name, *args)
    now = datetime.now()
    date_str = f"{now.year}-{now.month}-{now.day}"
    time_str = f"[{now.hour}:{now.minute}:{now.second}]\n"

    directory = Path(root) / _LOG_DIR_NAME
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{date_str}.log"
    with path.open("a", encoding="utf-8") as handle:
        handle.write(time_str + content)
    return path