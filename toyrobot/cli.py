"""Interactive command line for the toy robot simulator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from toyrobot.commands import parse_input
from toyrobot.compass import parse_direction
from toyrobot.table import Table

WELCOME = "\n-- Toy Robot Simulator -- \n\nPlease enter your commands:\n"
GOODBYE = "Goodbye\n"

_ACTIONS: dict[str, Callable[[Table], None]] = {
    "MOVE": Table.move,
    "LEFT": Table.left,
    "RIGHT": Table.right,
}


def display_intro(out: TextIO) -> None:
    """Write the welcome message to ``out``."""
    out.write(WELCOME)


def _do_command(board: Table, parts: list[str], out: TextIO) -> None:
    name = parts[0]
    if name == "PLACE":
        _, x, y, facing = parts
        board.place(int(x), int(y), parse_direction(facing))
    elif name == "REPORT":
        out.write(f"Output: {board.report()}\n")
    else:
        _ACTIONS[name](board)


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    """Read commands from ``stdin`` until ``q`` or end of input, and act on them.

    Reports go to ``stdout``; lines that are not valid commands are
    reported on ``stderr``.
    """
    display_intro(stdout)
    board = Table()
    for line in stdin:
        text = line.removesuffix("\n")
        if not text:
            continue
        if text.lower() == "q":
            break
        parts = parse_input(text)
        if parts is None:
            stderr.write(f"Output: Invalid input [{text}]\n")
            continue
        _do_command(board, parts, stdout)
    stdout.write(GOODBYE)


def main(argv: list[str] | None = None) -> int:
    """Run the simulator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="toyrobot",
        description=(
            "Toy robot simulator. Commands: PLACE X,Y,F, MOVE, LEFT, RIGHT, "
            "REPORT; enter q to quit."
        ),
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout, sys.stderr)
    return 0