"""The table top the robot moves on, and the rules for moving on it."""

from __future__ import annotations

from toyrobot.compass import Direction, left, right
from toyrobot.robot import Robot

ROBOT_NOT_PLACED = "Robot has not been placed"

TABLE_WIDTH = 5
TABLE_HEIGHT = 5

_STEPS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


class Table:
    """A square table top that holds at most one robot.

    Commands other than a valid placement are ignored until the robot
    has been placed, and no command may take the robot off the table.
    """

    def __init__(self, width: int = TABLE_WIDTH, height: int = TABLE_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.robot: Robot | None = None

    def _on_table(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def place(self, x: int, y: int, facing: Direction) -> Robot | None:
        """Put the robot at ``(x, y)`` facing ``facing`` if that is on the table.

        Returns the robot, which is None if it has never been placed.
        """
        if not self._on_table(x, y):
            return self.robot
        if self.robot is None:
            self.robot = Robot()
        self.robot.update(x, y, facing)
        return self.robot

    def move(self) -> None:
        """Move the robot one unit forward, unless that would leave the table."""
        if self.robot is None:
            return
        dx, dy = _STEPS[self.robot.facing]
        x, y = self.robot.x + dx, self.robot.y + dy
        if self._on_table(x, y):
            self.robot.x, self.robot.y = x, y

    def left(self) -> None:
        """Turn the robot 90 degrees counter-clockwise, if it has been placed."""
        if self.robot is not None:
            self.robot.facing = left(self.robot.facing)

    def right(self) -> None:
        """Turn the robot 90 degrees clockwise, if it has been placed."""
        if self.robot is not None:
            self.robot.facing = right(self.robot.facing)

    def report(self) -> str:
        """Return ``"x,y,FACING"`` for the robot, or a note that it is not placed."""
        if self.robot is None:
            return ROBOT_NOT_PLACED
        return f"{self.robot.x},{self.robot.y},{self.robot.facing}"