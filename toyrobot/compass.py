"""Compass directions the robot can face, and 90 degree rotations."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """A facing, numbered clockwise starting from NORTH."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __str__(self) -> str:
        return self.name


def left(direction: Direction) -> Direction:
    """Return the direction after turning 90 degrees counter-clockwise."""
    return Direction((direction.value - 1) % len(Direction))


def right(direction: Direction) -> Direction:
    """Return the direction after turning 90 degrees clockwise."""
    return Direction((direction.value + 1) % len(Direction))


def parse_direction(text: str) -> Direction:
    """Return the direction named by ``text``; raise ValueError if unknown."""
    try:
        return Direction.__members__[text]
    except KeyError:
        raise ValueError(f"Can not parse direction [{text}]") from None