"""The player and reading their name from input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from pocmon.team import Team


@dataclass
class Player:
    """A named trainer with a team and a position on the map."""

    name: str
    team: Team
    x: int = 0
    y: int = 0


def read_name(stream: TextIO) -> str:
    """Read one line from `stream` and return it without its newline."""
    line = stream.readline()
    if not line:
        raise EOFError("no name was entered")
    return line.removesuffix("\n")