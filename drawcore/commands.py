"""Drawing commands that parse prompt tokens and add entities to a drawing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import MutableSequence, Sequence

from drawcore.shapes import Box, Circle, Line


def _coords(text: str, count: int) -> tuple[float, ...]:
    parts = text.split(",")
    if len(parts) != count:
        raise ValueError(f"expected {count} comma-separated coordinates, got {text!r}")
    try:
        return tuple(float(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"invalid coordinates: {text!r}") from exc


def _number(text: str) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"invalid number: {text!r}") from exc


class Command(ABC):
    """A named drawing action; the first token is the command name."""

    @abstractmethod
    def parse(self, tokens: Sequence[str]) -> None:
        """Read the command's arguments from ``tokens``; raise ValueError if they are bad."""

    @abstractmethod
    def execute(self, entities: MutableSequence[object]) -> object:
        """Add the command's entity to ``entities`` and return it."""


class LineCommand(Command):
    """``LINE x,y,z x,y,z``: a line segment between two points."""

    def __init__(self) -> None:
        self.start: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.end: tuple[float, ...] = (0.0, 0.0, 0.0)

    def parse(self, tokens: Sequence[str]) -> None:
        if len(tokens) < 3:
            raise ValueError("LINE needs a start and an end point")
        start = _coords(tokens[1], 3)
        end = _coords(tokens[2], 3)
        self.start, self.end = start, end

    def execute(self, entities: MutableSequence[object]) -> Line:
        line = Line(self.start, self.end)
        entities.append(line)
        return line


class CircleCommand(Command):
    """``CIRCLE x,y,z radius``: a circle around a center point."""

    def __init__(self) -> None:
        self.center: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.radius: float = 0.0

    def parse(self, tokens: Sequence[str]) -> None:
        if len(tokens) < 3:
            raise ValueError("CIRCLE needs a center and a radius")
        center = _coords(tokens[1], 3)
        radius = _number(tokens[2])
        self.center, self.radius = center, radius

    def execute(self, entities: MutableSequence[object]) -> Circle:
        circle = Circle(center=self.center, radius=self.radius)
        entities.append(circle)
        return circle


class SquareCommand(Command):
    """``SQUARE x,y x,y height``: a rectangle extruded to a height."""

    def __init__(self) -> None:
        self.min_pnt: tuple[float, ...] = (0.0, 0.0)
        self.max_pnt: tuple[float, ...] = (1.0, 1.0)
        self.height: float = 1.0

    def parse(self, tokens: Sequence[str]) -> None:
        if len(tokens) != 4:
            raise ValueError("SQUARE needs two corners and a height")
        min_pnt = _coords(tokens[1], 2)
        max_pnt = _coords(tokens[2], 2)
        height = _number(tokens[3])
        self.min_pnt, self.max_pnt, self.height = min_pnt, max_pnt, height

    def execute(self, entities: MutableSequence[object]) -> Box:
        box = Box(self.min_pnt, self.max_pnt, self.height)
        entities.append(box)
        return box