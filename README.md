# drawcore

The drawing-independent core of a small 3D drawing editor: tolerance
checks, error texts, call logging, animation helpers, shape geometry,
text commands, interactive jigs, camera and picking maths, and an
engine that holds entities and runs commands.

Shapes hand out the vertices, faces and edges to draw; the viewing
module produces the matrices and rays; any renderer can consume them.

## Installation

```
pip install drawcore
```

For running the tests:

```
pip install "drawcore[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `drawcore.tolerance` | `is_positive`, `is_negative`, `is_nonzero` with a tolerance (default `1e-10`) |
| `drawcore.error_texts` | `error_names()` in code order and `error_text(name)` for every error name |
| `drawcore.mathlog` | `format_value`, `format_call` and `log_function` for dated call logs |
| `drawcore.animation` | `AnimationMode`, `get_frame`, `lerp`, `interpolate`, `move`, `accelerate`, `slerp_vector`, `slerp_quaternion` |
| `drawcore.shapes` | `Circle`, `Line` and `Box` with their drawable geometry |
| `drawcore.commands` | `Command` and the `LineCommand`, `CircleCommand`, `SquareCommand` parsers |
| `drawcore.jigs` | `DragStatus`, `CircleJig` and `LineJig` for rubber-band previews |
| `drawcore.viewing` | `ViewportType`, `Camera`, `camera_position`, `perspective`, `look_at`, `matrix_from_gl`, `calculate_ray`, `ray_intersects_sphere`, `grid_xy_lines` |
| `drawcore.engine` | `Engine`: registered commands, entities, picked points and callbacks |

## Examples

Tolerant sign checks:

```python
from drawcore.tolerance import is_positive, is_nonzero

is_positive(1e-12, 1e-10)   # False: within tolerance of zero
is_nonzero(-0.5, 1e-10)     # True
```

Error texts, looked up by name; the position in `error_names()` is the
code value, and an unknown name raises `KeyError`:

```python
from drawcore.error_texts import error_names, error_text

error_text("eInvalidInput")   # "Invalid input"
error_names()[0]              # "eOk"
```

Easing and frame selection:

```python
from drawcore.animation import AnimationMode, get_frame, interpolate

interpolate(0.0, 1.0, 0.5, AnimationMode.LINEAR)   # 0.5
get_frame(0, 9, 1.0, 30, True)                     # 0: frame 30 wrapped into 0..9
```

`slerp_vector` raises `ValueError` for zero-length or parallel vectors;
`slerp_quaternion` takes and returns quaternions as `(s, x, y, z)`.

Commands take tokens with the command name first and comma-separated
coordinates after it, then add their entity to a list. Bad arguments
raise `ValueError`:

```python
from drawcore.commands import LineCommand

command = LineCommand()
command.parse(["LINE", "0,0,0", "1,2,0"])
entities = []
line = command.execute(entities)   # a drawcore.shapes.Line
```

The engine registers `LINE`, `CIRCLE` and `SQUARE` at start-up. Its
`run` accepts a token list or a whitespace-separated string, matches
the name case-insensitively, and raises `KeyError` for unknown
commands:

```python
from drawcore.engine import Engine

engine = Engine()
engine.run("CIRCLE 1,2,0 5")
engine.run(["SQUARE", "0,0", "2,3", "4"])
engine.add_point((3.0, 4.0, 9.0))
engine.last_point()   # (3.0, 4.0, 0.0)
```

`Engine.trigger_point_picked()` and `Engine.trigger_entity_picked()`
call `point_picked_callback` and `entity_picked_callback` when they are
set and return whether they were.

For viewing, a `Camera` is switched with `set_viewport` (one of the
`ViewportType` members, which also resets the zoom to 45), moved with
`move(dx, dy)`, zoomed with `zoom(wheel_delta)` and placed with
`setup(width, height)`; `view_matrix()` and
`projection_matrix(width, height)` return 4×4 numpy arrays.
`calculate_ray` together with `ray_intersects_sphere` supports picking,
and `grid_xy_lines(size, step)` gives the segments of a reference grid.

`log_function(name, *args)` appends a time-stamped block to
`MathLog/<year>-<month>-<day>.log` under the directory named by the
`LOCALAPPDATA` environment variable, and does nothing (returning
`None`) when that variable is not set.

## What this package does not do

- It opens no window, draws nothing and handles no mouse or keyboard
  input; rendering is left to whatever consumes the geometry and
  matrices.
- The engine keeps no drawing files, sessions, command history, or
  undo and redo; entities live only in `Engine.entities` in memory.
- Error codes are available as names and texts only; there is no
  enumeration of result codes or of audit and progress messages.