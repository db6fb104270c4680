"""Game start-up: the welcome screen, choosing a starter and the main loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from pocmon.database import GameDatabase
from pocmon.player import Player, read_name
from pocmon.pokemon import Pokemon
from pocmon.team import Team
from pocmon.worldmap import run_map

DEFAULT_DATABASE = "DATABASE/pocmon.db"


def welcome_banner() -> str:
    """Return the title banner."""
    return (
        "                        ##########################\n"
        "                        ##       Po-C-mon       ##\n"
        "                        ##########################\n\n\n"
    )


def _starters() -> list[Pokemon]:
    return [
        Pokemon("Bulbizarre", 90, 49, 24, 45, "Plante"),
        Pokemon("Salamèche", 78, 52, 21, 65, "Feu"),
        Pokemon("Carapuce", 88, 48, 32, 43, "Eau"),
    ]


def first_game(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Player:
    """Ask for the player's name and starter; return the new player."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    starters = _starters()
    stdout.write(
        ">>??? : ...\n"
        ">>??? :........\n"
        ">>??? : OH !\n"
        ">>??? : Welcome ! I see you are new here !\n"
        ">>Pr Shen : What's your name ?\n"
    )
    stdout.flush()
    name = read_name(stdin)
    stdout.write(
        f">>Pr Shen : Nice to meet you, {name}. I am Pr Shen and I have a mission for you.\n"
        ">>Pr Shen : I'd like you to explore the world of Unys and catch all the Pokemon you see.\n"
        ">>Pr Shen : I already know you are gonna accept your mission.\n"
        ">>Pr Shen : To get started, why don't you choose one of three specimens i have here ?\n"
    )
    choices = {str(i): pokemon for i, pokemon in enumerate(starters, start=1)}
    while True:
        stdout.write("1 : Bulbizarre 2 : Salamèche 3 : Carapuce\n")
        stdout.flush()
        choice = stdin.read(1)
        if not choice:
            raise EOFError("no starter was chosen")
        if choice in choices:
            starter = choices[choice]
            break
        stdout.write("You can only choose 1, 2, 3\n")
    stdout.write(f"{starter.name} has been added to your team !\n")
    return Player(name, Team(starter))


def main(argv: list[str] | None = None) -> int:
    """Run the game."""
    parser = argparse.ArgumentParser(prog="pocmon", description="A small creature-catching game.")
    parser.add_argument("--database", default=DEFAULT_DATABASE, help="path of the save database")
    args = parser.parse_args(argv)

    path = Path(args.database)
    path.parent.mkdir(parents=True, exist_ok=True)
    with GameDatabase(path) as db:
        db.create_tables()
        is_first = db.is_first_game()

    out = sys.stdout
    out.write(welcome_banner())
    try:
        if is_first:
            player = first_game(sys.stdin, out)
            run_map(player, sys.stdin, out)
        else:
            out.write("You already played but you can do it again !.\n")
            first_game(sys.stdin, out)
    except EOFError:
        out.write("ERROR")
        out.flush()
        return 1
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())