# pocmon

A small terminal game: meet the professor, choose a starter monster, then
wander a world map generated from Perlin noise.

## Installing

```
pip install .
```

## Playing

```
pocmon
pocmon --database path/to/save.db
```

On start the game opens its SQLite file (by default `DATABASE/pocmon.db`
relative to the current directory; `--database` chooses another path, and
missing parent directories are created), creates the `PLAYERS` and `TEAMS`
tables if needed, shows a banner and asks for your name. Pick one of three
starters (Bulbizarre, Salamèche, Carapuce) by typing `1`, `2` or `3`.

If the database says this is a first game, you are then placed on the map at
a random spot with open ground all around you:

- `z` / `Z` move up, `s` / `S` move down
- `q` / `Q` move left, `d` / `D` move right
- `p` / `P` leaves the game

Every character read redraws a 9 × 13 window around you. `X` is you, `W` is
tall grass, `@` is rock you cannot walk through, and `.` is open ground.
Rows outside the walkable area are drawn as `_`, columns outside it as `|`.

If the input ends before a name or a starter is given, the game prints
`ERROR` and exits with status 1.

## Using it as a library

- `pocmon.perlin.perlin2d(x, y, freq, depth)` gives deterministic noise in
  `[0, 1)`; `depth` must be positive. `noise2`, `noise2d`, `lin_inter` and
  `smooth_inter` are the building blocks.
- `pocmon.pokemon.Pokemon` is a dataclass of name, `hp_max`, attack,
  defense, speed and type; `hp` starts at `hp_max`. `describe()` returns its
  stat sheet.
- `pocmon.pokedex.read_pokedex(path)` loads a `Pokedex` from a
  semicolon-separated file with one header line and rows of
  `name;hp_max;attack;defense;speed;type`. Blank lines are skipped; a
  malformed row raises `ValueError` naming its line number.
- `pocmon.team.Team` holds up to six `Pokemon` (`max_size`). `Team.add`
  appends while there is room; on a full team it needs `replace_index` and
  returns the member it replaced, otherwise it raises `TeamFullError`.
  `Team.remove(index)` raises `IndexError` for an empty slot.
  `choose_replacement(team, read, write)` asks which member to swap out.
- `pocmon.player.Player` holds a name, a `Team` and a map position;
  `read_name(stream)` reads one line and raises `EOFError` at end of input.
- `pocmon.worldmap.generate_map()` builds the world as a `WorldMap` with
  `move_player`, `render`, `render_around` and `place_player`;
  `run_map(player, stdin, stdout, rng)` runs the movement loop over any
  streams. `clear_screen()` returns the terminal clear sequence.
- `pocmon.database.GameDatabase(path)` is a context manager around the
  SQLite file with `create_tables`, `is_first_game`, `save_player` and
  `player_rows`.
- `pocmon.game.first_game(stdin, stdout)` runs the introduction and returns
  the new `Player`; `pocmon.game.main(argv)` runs the whole game.

## What the game does not do

- Players are not saved by the game itself, so every run counts as a first
  game unless a `PLAYERS` row with `ID = 1` and a non-zero `FIRST_GAME` was
  put there by other means. The `TEAMS` table is created but never written.
- Walking through tall grass does nothing: there are no wild encounters and
  no battles.
- The pokedex reader is not used by the game; no pokedex file ships with
  the package.

## Running the tests

```
pip install .[test]
pytest
```