"""Drawing engine state: entities, registered commands, picked points and callbacks."""

from __future__ import annotations

from typing import Callable, MutableSequence, Sequence

from drawcore.commands import CircleCommand, Command, LineCommand, SquareCommand
from drawcore.jigs import CircleJig, LineJig
from drawcore.shapes import Line
from drawcore.viewing import Camera

Point2d = tuple[float, float]
Point3d = tuple[float, float, float]
PointPickedCallback = Callable[[list[Point2d]], None]
EntityPickedCallback = Callable[[], None]


class Engine:
    """Holds the drawing's entities and runs the commands registered by name.

    The LINE, CIRCLE and SQUARE commands are registered from the start.
    """

    def __init__(self) -> None:
        self.entities: list[object] = []
        self.temp_renders: list[object] = []
        self.jigs: list[CircleJig | LineJig] = []
        self.points: list[Point2d] = []
        self.camera = Camera()
        self.point_picked_callback: PointPickedCallback | None = None
        self.entity_picked_callback: EntityPickedCallback | None = None
        self._commands: dict[str, Command] = {}
        self.register_command("LINE", LineCommand())
        self.register_command("CIRCLE", CircleCommand())
        self.register_command("SQUARE", SquareCommand())

    @property
    def commands(self) -> tuple[str, ...]:
        """Names of the registered commands, in registration order."""
        return tuple(self._commands)

    def register_command(self, name: str, command: Command) -> None:
        """Make ``command`` available under ``name`` (case-insensitive)."""
        if not name:
            raise ValueError("a command needs a name")
        self._commands[name.upper()] = command

    def run(self, tokens: Sequence[str] | str) -> object:
        """Parse and execute a command line; return the entity it added.

        ``tokens`` is either a list whose first item is the command name, or a
        whitespace-separated string. Raises KeyError for an unknown command and
        ValueError for bad arguments, leaving the drawing unchanged.
        """
        parts = tokens.split() if isinstance(tokens, str) else list(tokens)
        if not parts:
            raise ValueError("empty command")
        name = parts[0].upper()
        try:
            command = self._commands[name]
        except KeyError:
            raise KeyError(f"unknown command: {parts[0]!r}") from None
        command.parse(parts)
        return command.execute(self.entities)

    def add_line(self, start: Sequence[float], end: Sequence[float]) -> Line:
        """Add a line segment between two 3D points and return it."""
        sx, sy, sz = start
        ex, ey, ez = end
        line = Line((float(sx), float(sy), float(sz)), (float(ex), float(ey), float(ez)))
        self.entities.append(line)
        return line

    def add_point(self, point: Sequence[float]) -> Point2d:
        """Record a picked point, keeping only its X and Y, and return it."""
        if len(point) < 2:
            raise ValueError("a point needs at least X and Y")
        picked = (float(point[0]), float(point[1]))
        self.points.append(picked)
        return picked

    def last_point(self) -> Point3d:
        """Return the latest picked point on the z=0 plane, or the origin if none."""
        if not self.points:
            return (0.0, 0.0, 0.0)
        x, y = self.points[-1]
        return (x, y, 0.0)

    def trigger_point_picked(self) -> bool:
        """Hand the picked points to the point callback; return whether one was set."""
        if self.point_picked_callback is None:
            return False
        self.point_picked_callback(list(self.points))
        return True

    def trigger_entity_picked(self) -> bool:
        """Call the entity callback; return whether one was set."""
        if self.entity_picked_callback is None:
            return False
        self.entity_picked_callback()
        return True

    def _preview_jigs(self, renders: MutableSequence[object]) -> None:
        for jig in self.jigs:
            jig.preview(renders)