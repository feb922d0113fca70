"""Parsing of the text commands the simulator accepts."""

from __future__ import annotations

import re

_PLACE = re.compile(r"PLACE (?P<x>[0-4]),(?P<y>[0-4]),(?P<f>NORTH|EAST|SOUTH|WEST)")
_OTHER = re.compile(r"(?P<cmd>MOVE|LEFT|RIGHT|REPORT)")


def parse_input(text: str) -> list[str] | None:
    """Split a valid command line into its parts, or return None if invalid.

    ``"PLACE 0,1,SOUTH"`` gives ``["PLACE", "0", "1", "SOUTH"]`` and
    ``"MOVE"`` gives ``["MOVE"]``.
    """
    match = _PLACE.fullmatch(text)
    if match:
        return ["PLACE", match["x"], match["y"], match["f"]]
    match = _OTHER.fullmatch(text)
    if match:
        return [match["cmd"]]
    return None