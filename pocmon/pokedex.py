"""The catalogue of every creature available in the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterator

from pocmon.pokemon import Pokemon

_NAME_LIMIT = 49
_TYPE_LIMIT = 19


@dataclass
class Pokedex:
    """An ordered collection of creatures."""

    pokemons: list[Pokemon] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pokemons)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self.pokemons)

    def describe(self) -> str:
        """Return the stat sheets of every entry, in order."""
        return "".join(p.describe() for p in self.pokemons)


def _parse_line(line: str, number: int) -> Pokemon:
    parts = line.split(";", 5)
    if len(parts) != 6:
        raise ValueError(f"line {number}: expected 6 fields separated by ';'")
    name, hp_max, attack, defense, speed, kind = parts
    if not name:
        raise ValueError(f"line {number}: empty name")
    if len(name) > _NAME_LIMIT:
        raise ValueError(f"line {number}: name longer than {_NAME_LIMIT} characters")
    try:
        stats = [int(v) for v in (hp_max, attack, defense, speed)]
    except ValueError as exc:
        raise ValueError(f"line {number}: invalid number") from exc
    if not kind:
        raise ValueError(f"line {number}: empty type")
    return Pokemon(name, *stats, type=kind[:_TYPE_LIMIT])


def read_pokedex(path: str | PathLike[str]) -> Pokedex:
    """Load a pokedex from a ';'-separated file whose first line is a header.

    Each row is name;hp_max;attack;defense;speed;type. Blank lines are skipped.
    """
    pokedex = Pokedex()
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for number, raw in enumerate(handle, start=2):
            line = raw.rstrip("\n")
            if not line.strip():
                continue
            pokedex.pokemons.append(_parse_line(line, number))
    return pokedex