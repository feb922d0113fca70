"""The toy robot: a position on the table and a facing."""

from __future__ import annotations

from dataclasses import dataclass

from toyrobot.compass import Direction

_MAX_COORDINATE = 255


def _check_coordinate(name: str, value: int) -> None:
    if not 0 <= value <= _MAX_COORDINATE:
        raise ValueError(f"{name} must be between 0 and {_MAX_COORDINATE}, got {value}")


@dataclass
class Robot:
    """A robot at ``(x, y)`` facing ``facing``; coordinates are 0 to 255."""

    x: int = 0
    y: int = 0
    facing: Direction = Direction.NORTH

    def __post_init__(self) -> None:
        _check_coordinate("x", self.x)
        _check_coordinate("y", self.y)

    def update(self, x: int, y: int, facing: Direction) -> None:
        """Move the robot to ``(x, y)`` facing ``facing``."""
        _check_coordinate("x", x)
        _check_coordinate("y", y)
        self.x = x
        self.y = y
        self.facing = facing