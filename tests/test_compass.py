import pytest

from toyrobot.compass import Direction, left, parse_direction, right


def test_edge_left():
    assert left(Direction.NORTH) is Direction.WEST


def test_edge_right():
    assert right(Direction.WEST) is Direction.NORTH


def test_180_right():
    assert right(right(Direction.NORTH)) is Direction.SOUTH


def test_180_left():
    assert left(left(Direction.NORTH)) is Direction.SOUTH


def test_450_left():
    direction = Direction.NORTH
    for _ in range(5):
        direction = left(direction)
    assert direction is Direction.WEST


def test_450_right():
    direction = Direction.NORTH
    for _ in range(5):
        direction = right(direction)
    assert direction is Direction.EAST


@pytest.mark.parametrize("direction", list(Direction))
def test_left_then_right_is_identity(direction):
    assert right(left(direction)) is direction


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.NORTH, "NORTH"),
        (Direction.EAST, "EAST"),
        (Direction.SOUTH, "SOUTH"),
        (Direction.WEST, "WEST"),
    ],
)
def test_string_output(direction, expected):
    assert str(direction) == expected
    assert f"{direction}" == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("NORTH", Direction.NORTH),
        ("EAST", Direction.EAST),
        ("SOUTH", Direction.SOUTH),
        ("WEST", Direction.WEST),
    ],
)
def test_parse_direction(text, expected):
    assert parse_direction(text) is expected


def test_parse_direction_invalid():
    with pytest.raises(ValueError) as excinfo:
        parse_direction("WESTwe")
    assert str(excinfo.value) == "Can not parse direction [WESTwe]"


def test_parse_direction_is_case_sensitive():
    with pytest.raises(ValueError):
        parse_direction("north")