"""Persistent storage of players and teams in SQLite."""

from __future__ import annotations

import sqlite3
from os import PathLike
from typing import Any

from pocmon.player import Player

_CREATE_PLAYERS = (
    "CREATE TABLE IF NOT EXISTS PLAYERS ("
    "ID INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,"
    "NAME VARCHAR(30) NOT NULL,"
    "FIRST_GAME INTEGER DEFAULT 0"
    ");"
)

_CREATE_TEAMS = (
    "CREATE TABLE IF NOT EXISTS TEAMS("
    "ID                INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,"
    "FIRST_POKEMON  VARCHAR(30) NOT NULL,"
    "SECOND_POKEMON  VARCHAR(30) ,"
    "THIRD_POKEMON  VARCHAR(30) ,"
    "FOURTH_POKEMON  VARCHAR(30) ,"
    "FIFTH_POKEMON  VARCHAR(30) ,"
    "SIXTH_POKEMON  VARCHAR(30) ,"
    "PLAYER_ID       INTEGER NOT NULL,"
    "FOREIGN KEY (PLAYER_ID) REFERENCES PLAYERS (ID));"
)


class GameDatabase:
    """A connection to the game's database file."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self._connection = sqlite3.connect(path)

    def create_tables(self) -> None:
        """Create the PLAYERS and TEAMS tables if they do not exist."""
        with self._connection:
            self._connection.execute(_CREATE_PLAYERS)
            self._connection.execute(_CREATE_TEAMS)

    def is_first_game(self) -> bool:
        """True unless the first player has already played."""
        try:
            row = self._connection.execute(
                "SELECT FIRST_GAME FROM PLAYERS WHERE ID = 1"
            ).fetchone()
        except sqlite3.OperationalError:
            return True
        if row is None:
            return True
        return bool(row[0])

    def save_player(self, player: Player) -> int:
        """Store the player and return its row id."""
        with self._connection:
            cursor = self._connection.execute(
                "INSERT INTO PLAYERS(NAME, FIRST_GAME) VALUES (:name, :first_game)",
                {"name": player.name, "first_game": 0},
            )
        return cursor.lastrowid

    def player_rows(self) -> list[dict[str, Any]]:
        """Return every row of PLAYERS as a column-to-value mapping."""
        cursor = self._connection.execute("SELECT * FROM PLAYERS")
        columns = [description[0] for description in cursor.description]
        return [dict(zip(columns, row)) for row in cursor]

    def close(self) -> None:
        """Close the connection."""
        self._connection.close()

    def __enter__(self) -> GameDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()