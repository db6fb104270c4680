"""The overworld map: generation, movement and drawing."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import TextIO

from pocmon.perlin import perlin2d
from pocmon.player import Player

ROWS = 26
COLUMNS = 29
WALK_ROWS = 24
WALK_COLUMNS = 29

GRASS = "W"
PATH = "."
ROCK = "@"

_RED = "\033[1;31m"
_GREEN = "\033[1;32m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"
_PLAYER_MARK = f"{_RED}X{_RESET}"

_MOVES = {"z": (-1, 0), "s": (1, 0), "q": (0, -1), "d": (0, 1)}
_QUIT = frozenset("pP")
_VIEW_ROWS = 4
_VIEW_COLUMNS = 6
_WALKABLE = (PATH, GRASS)


def clear_screen() -> str:
    """Return the terminal sequence that clears the screen."""
    return "\033[1;1H\033[2J"


def _paint(cell: str) -> str:
    if cell == GRASS:
        return f"{_GREEN}{GRASS}{_RESET}"
    if cell == ROCK:
        return f"{_BLUE}{ROCK}{_RESET}"
    return cell


def _terrain(value: float) -> str:
    if value > 0.65:
        return GRASS
    if value > 0.5:
        return PATH
    return ROCK


@dataclass(frozen=True)
class WorldMap:
    """A grid of terrain: rows of '.', 'W' (tall grass) and '@' (rock)."""

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))

    def cell(self, row: int, column: int) -> str:
        """Return the terrain at a position, or '' outside the grid."""
        if 0 <= row < len(self.rows) and 0 <= column < len(self.rows[row]):
            return self.rows[row][column]
        return ""

    def move_player(self, player: Player, movement: str) -> bool:
        """Move the player one step with z/q/s/d; return whether it moved."""
        step = _MOVES.get(movement.lower())
        if step is None:
            return False
        dx, dy = step
        new_x, new_y = player.x + dx, player.y + dy
        if not (0 <= new_x < WALK_ROWS and 0 <= new_y < WALK_COLUMNS):
            return False
        if ROCK in (self.cell(new_x, player.y), self.cell(player.x, new_y)):
            return False
        player.x, player.y = new_x, new_y
        return True

    def render(self, player: Player) -> str:
        """Draw the whole map with the player marked."""
        lines = []
        for i, row in enumerate(self.rows):
            cells = (
                _PLAYER_MARK if (i, j) == (player.x, player.y) else _paint(cell)
                for j, cell in enumerate(row)
            )
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def render_around(self, player: Player) -> str:
        """Draw the 9 by 13 window centred on the player."""
        width = 2 * _VIEW_COLUMNS + 1
        lines = []
        for i in range(-_VIEW_ROWS, _VIEW_ROWS + 1):
            row = player.x + i
            if not 0 <= row < WALK_ROWS:
                lines.append("_" * width + "\n")
                continue
            cells = []
            for j in range(-_VIEW_COLUMNS, _VIEW_COLUMNS + 1):
                column = player.y + j
                if not 0 <= column < WALK_COLUMNS:
                    cells.append("|")
                elif i == 0 and j == 0:
                    cells.append(_PLAYER_MARK)
                else:
                    cells.append(_paint(self.cell(row, column)))
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def place_player(self, player: Player, rng: random.Random | None = None) -> None:
        """Put the player at a random spot whose 5 by 5 surroundings are walkable."""
        rng = random.Random() if rng is None else rng
        candidates = [
            (x, y)
            for x in range(2, 23)
            for y in range(2, 28)
            if all(
                self.cell(x + i, y + j) in _WALKABLE
                for i in range(-2, 3)
                for j in range(-2, 3)
            )
        ]
        if not candidates:
            raise ValueError("no open area to place the player")
        player.x, player.y = rng.choice(candidates)


def generate_map() -> WorldMap:
    """Build the terrain from fractal noise."""
    rows = tuple(
        "".join(_terrain(perlin2d(x, y, 0.1, 4)) for x in range(COLUMNS))
        for y in range(ROWS)
    )
    return WorldMap(rows)


def run_map(
    player: Player,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    rng: random.Random | None = None,
) -> WorldMap:
    """Let the player walk around until 'p' or end of input; return the map."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(clear_screen())
    stdout.write("Game is Launching......")
    world = generate_map()
    world.place_player(player, rng)
    stdout.write(clear_screen())
    stdout.write("Move around with ZQSD or zqsd and 'p' to exit game !\n\n")
    while True:
        movement = stdin.read(1)
        if not movement:
            break
        stdout.write(clear_screen())
        world.move_player(player, movement)
        stdout.write(world.render_around(player))
        if movement in _QUIT:
            break
    stdout.flush()
    return world