"""A single creature and its battle statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Pokemon:
    """A creature; `hp` starts at `hp_max` unless given."""

    name: str
    hp_max: int
    attack: int
    defense: int
    speed: int
    type: str
    is_seen: bool = False
    hp: int | None = None

    def __post_init__(self) -> None:
        if self.hp is None:
            self.hp = self.hp_max

    def describe(self) -> str:
        """Return the stat sheet as printed in game."""
        return (
            f"Name: {self.name}\n"
            f"HP: {self.hp}/{self.hp_max}\n"
            f"Attack: {self.attack}\n"
            f"Defense: {self.defense}\n"
            f"Speed: {self.speed}\n"
            f"Type: {self.type}\n"
        )