import pytest

from pocmon.pokedex import Pokedex, read_pokedex
from pocmon.pokemon import Pokemon

HEADER = "Name;HP;Attack;Defense;Speed;Type\n"


def _write(tmp_path, body):
    path = tmp_path / "pokedex.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return path


def test_reads_rows_after_header(tmp_path):
    path = _write(tmp_path, "Bulbizarre;90;49;24;45;Plante\nCarapuce;88;48;32;43;Eau\n")
    pokedex = read_pokedex(path)
    assert len(pokedex) == 2
    first, second = pokedex
    assert first == Pokemon("Bulbizarre", 90, 49, 24, 45, "Plante")
    assert second.name == "Carapuce"
    assert second.type == "Eau"
    assert second.hp == second.hp_max == 88
    assert second.is_seen is False


def test_header_only_gives_empty(tmp_path):
    assert len(read_pokedex(_write(tmp_path, ""))) == 0


def test_blank_lines_skipped(tmp_path):
    path = _write(tmp_path, "Carapuce;88;48;32;43;Eau\n\n")
    assert [p.name for p in read_pokedex(path)] == ["Carapuce"]


def test_type_truncated(tmp_path):
    path = _write(tmp_path, "Carapuce;88;48;32;43;" + "A" * 25 + "\n")
    assert read_pokedex(path).pokemons[0].type == "A" * 19


def test_type_may_hold_separator(tmp_path):
    path = _write(tmp_path, "Carapuce;88;48;32;43;Eau;Glace\n")
    assert read_pokedex(path).pokemons[0].type == "Eau;Glace"


@pytest.mark.parametrize(
    "row",
    [
        ";88;48;32;43;Eau\n",
        "Carapuce;88;x;32;43;Eau\n",
        "Carapuce;88;48\n",
        "B" * 50 + ";88;48;32;43;Eau\n",
    ],
)
def test_malformed_rows_rejected(tmp_path, row):
    with pytest.raises(ValueError):
        read_pokedex(_write(tmp_path, row))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_pokedex(tmp_path / "absent.csv")


def test_describe_concatenates_entries():
    a = Pokemon("Bulbizarre", 90, 49, 24, 45, "Plante")
    b = Pokemon("Carapuce", 88, 48, 32, 43, "Eau")
    assert Pokedex([a, b]).describe() == a.describe() + b.describe()