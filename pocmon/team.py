"""The player's team of creatures."""

from __future__ import annotations

from typing import Callable, Iterator

from pocmon.pokemon import Pokemon

TEAM_SIZE = 6


class TeamFullError(Exception):
    """Raised when adding to a full team without naming a slot to replace."""


class Team:
    """Up to `max_size` creatures, starting with a single starter."""

    def __init__(self, starter: Pokemon, max_size: int = TEAM_SIZE) -> None:
        self.max_size = max_size
        self.pokemons: list[Pokemon] = [starter]

    def __len__(self) -> int:
        return len(self.pokemons)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self.pokemons)

    @property
    def is_full(self) -> bool:
        return len(self.pokemons) >= self.max_size

    @property
    def alive_pokemons(self) -> int:
        """Number of members with hit points left."""
        return sum(1 for p in self.pokemons if p.hp > 0)

    def add(self, pokemon: Pokemon, replace_index: int | None = None) -> Pokemon | None:
        """Add a member; a full team needs `replace_index`, the slot to swap out.

        Returns the member that was replaced, if any.
        """
        if not self.is_full:
            self.pokemons.append(pokemon)
            return None
        if replace_index is None:
            raise TeamFullError(f"the team already holds {self.max_size} pokemons")
        removed = self.remove(replace_index)
        self.pokemons.insert(replace_index, pokemon)
        return removed

    def remove(self, index: int) -> Pokemon:
        """Remove and return the member at `index`."""
        if not 0 <= index < len(self.pokemons):
            raise IndexError(f"no pokemon at position {index}")
        return self.pokemons.pop(index)

    def describe(self) -> str:
        """Return the stat sheets of every member, in order."""
        return "".join(p.describe() for p in self.pokemons)


def choose_replacement(
    team: Team, read: Callable[[], str], write: Callable[[str], object]
) -> int:
    """Ask which member to replace and return its position.

    `read` returns one character at a time, an empty string at end of input.
    """
    write(
        f"Oh-ho ! You already have {team.max_size} pokemons in your team. "
        "Which one should you replace with this new one ?\n"
    )
    valid = {str(i): i for i in range(len(team.pokemons))}
    while True:
        for i, pokemon in enumerate(team.pokemons):
            write(f"{i} : {pokemon.name}\n")
        choice = read()
        while choice and choice.isspace():
            choice = read()
        if not choice:
            raise EOFError("no choice was made")
        if choice in valid:
            index = valid[choice]
            write(f"...{team.pokemons[index].name} has been removed from your team !\n")
            return index
        write("You can only choose the digits above.\n")