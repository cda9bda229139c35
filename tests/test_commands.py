import pytest

from drawcore.commands import CircleCommand, LineCommand, SquareCommand
from drawcore.shapes import Box, Circle, Line


def test_line_command_round_trip():
    command = LineCommand()
    command.parse(["LINE", "1,2,3", "4,5,6"])
    entities = []
    line = command.execute(entities)
    assert entities == [line]
    assert line == Line((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))


@pytest.mark.parametrize(
    "tokens",
    [["LINE", "1,2,3"], ["LINE", "1,2", "4,5,6"], ["LINE", "1,2,3", "a,b,c"]],
)
def test_line_command_bad_tokens(tokens):
    with pytest.raises(ValueError):
        LineCommand().parse(tokens)


def test_line_command_keeps_values_after_failed_parse():
    command = LineCommand()
    command.parse(["LINE", "1,1,1", "2,2,2"])
    with pytest.raises(ValueError):
        command.parse(["LINE", "3,3,3", "x"])
    assert command.execute([]) == Line((1.0, 1.0, 1.0), (2.0, 2.0, 2.0))


def test_circle_command_round_trip():
    command = CircleCommand()
    command.parse(["CIRCLE", "0,1,2", "2.5"])
    entities = []
    circle = command.execute(entities)
    assert entities == [circle]
    assert circle.center == (0.0, 1.0, 2.0)
    assert circle.radius == 2.5


@pytest.mark.parametrize(
    "tokens",
    [["CIRCLE", "0,0,0"], ["CIRCLE", "0,0", "1"], ["CIRCLE", "0,0,0", "big"]],
)
def test_circle_command_bad_tokens(tokens):
    with pytest.raises(ValueError):
        CircleCommand().parse(tokens)


def test_circle_command_default():
    circle = CircleCommand().execute([])
    assert circle == Circle(center=(0.0, 0.0, 0.0), radius=0.0)


def test_square_command_round_trip():
    command = SquareCommand()
    command.parse(["SQUARE", "0,0", "2,3", "4"])
    entities = []
    box = command.execute(entities)
    assert entities == [box]
    assert box == Box((0.0, 0.0), (2.0, 3.0), 4.0)


def test_square_command_default():
    assert SquareCommand().execute([]) == Box((0.0, 0.0), (1.0, 1.0), 1.0)


@pytest.mark.parametrize(
    "tokens",
    [
        ["SQUARE", "0,0", "1,1"],
        ["SQUARE", "0,0", "1,1", "2", "extra"],
        ["SQUARE", "0,0,0", "1,1", "2"],
        ["SQUARE", "0,0", "1,1", "tall"],
    ],
)
def test_square_command_bad_tokens(tokens):
    with pytest.raises(ValueError):
        SquareCommand().parse(tokens)


def test_execute_appends_in_order():
    entities = []
    LineCommand().execute(entities)
    CircleCommand().execute(entities)
    SquareCommand().execute(entities)
    assert [type(e) for e in entities] == [Line, Circle, Box]