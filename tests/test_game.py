import io
import sys

import pytest

from pocmon.database import GameDatabase
from pocmon.game import first_game, main, welcome_banner
from pocmon.player import Player
from pocmon.pokemon import Pokemon
from pocmon.team import Team


def test_welcome_banner():
    banner = welcome_banner()
    assert "##       Po-C-mon       ##" in banner
    assert banner.endswith("\n\n\n")


@pytest.mark.parametrize(
    "choice,name", [("1", "Bulbizarre"), ("2", "Salamèche"), ("3", "Carapuce")]
)
def test_first_game_picks_starter(choice, name):
    out = io.StringIO()
    player = first_game(io.StringIO(f"Ash\n{choice}"), out)
    assert player.name == "Ash"
    assert [p.name for p in player.team] == [name]
    assert f"{name} has been added to your team !" in out.getvalue()
    assert "Nice to meet you, Ash." in out.getvalue()


def test_first_game_starter_stats():
    player = first_game(io.StringIO("Misty\n3"), io.StringIO())
    starter = player.team.pokemons[0]
    assert (starter.hp, starter.hp_max, starter.attack, starter.defense, starter.speed) == (
        88, 88, 48, 32, 43
    )
    assert starter.type == "Eau"


def test_first_game_rejects_other_choices():
    out = io.StringIO()
    player = first_game(io.StringIO("Ash\n9\n1"), out)
    assert player.team.pokemons[0].name == "Bulbizarre"
    assert out.getvalue().count("You can only choose 1, 2, 3\n") == 2


def test_first_game_without_choice_raises():
    with pytest.raises(EOFError):
        first_game(io.StringIO("Ash\n"), io.StringIO())


def test_first_game_without_name_raises():
    with pytest.raises(EOFError):
        first_game(io.StringIO(""), io.StringIO())


def test_main_first_game(tmp_path, monkeypatch, capsys):
    path = tmp_path / "data" / "pocmon.db"
    monkeypatch.setattr(sys, "stdin", io.StringIO("Ash\n3p"))
    assert main(["--database", str(path)]) == 0
    text = capsys.readouterr().out
    assert "Po-C-mon" in text
    assert "Carapuce has been added to your team !" in text
    assert "'p' to exit game !" in text
    with GameDatabase(path) as db:
        assert db.player_rows() == []


def test_main_returning_player(tmp_path, monkeypatch, capsys):
    path = tmp_path / "pocmon.db"
    with GameDatabase(path) as db:
        db.create_tables()
        db.save_player(Player("Ash", Team(Pokemon("Carapuce", 88, 48, 32, 43, "Eau"))))
    monkeypatch.setattr(sys, "stdin", io.StringIO("Ash\n1"))
    assert main(["--database", str(path)]) == 0
    text = capsys.readouterr().out
    assert "You already played but you can do it again !." in text
    assert "Bulbizarre has been added to your team !" in text


def test_main_without_input_reports_error(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--database", str(tmp_path / "pocmon.db")]) == 1
    assert capsys.readouterr().out.endswith("ERROR")