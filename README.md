# snakegrid

A grid-based snake game engine. The playing field is surrounded by a one-cell
wall. The snake moves one cell each time its move interval has passed. Food
appears on a random empty cell; when traps are enabled, a trap appears on a
random empty cell each time the score reaches a new multiple of three. The
game ends when the snake runs into a wall, a trap or itself, and it is
completed when no empty cell is left for food or a trap.

## Installation

```
pip install .
```

## Playing from the terminal

```
snakegrid
```

The game is driven one line at a time. Each line you enter is a command,
after which the snake takes one step and the grid is printed again together
with the score and elapsed time:

- `w` / `s`: steer up / down
- `a` / `d`: steer left / right
- `r`: start a new game
- `q`: quit
- anything else (including an empty line): step without changing direction

Reversing straight back on the current direction is ignored. When the game is
over, the hint `press <r> to reset` is printed.

Options:

- `--grid WIDTHxHEIGHT`: playing field size, e.g. `30x10`
- `--speed SECONDS`: seconds between moves
- `--snake-size N`: initial snake length (default 5); it must be at most half
  the grid width, otherwise the command exits with status 2
- `--settings PATH`: settings file to read (default
  `~/.snakegrid/SG_SaveSettings.json`)
- `--seed N`: seed for food and trap placement

If neither `--grid` nor `--speed` is given, grid size, speed and traps come
from the settings file; if either is given, the grid defaults to 10x10, the
speed to 1 second and traps are off.

## Using the engine

```python
from snakegrid.game import Game
from snakegrid.grid import Grid
from snakegrid.types import Dimension, GameplayEvent, Input, Settings, SnakeSettings

settings = Settings(
    grid_size=Dimension(30, 10),
    snake=SnakeSettings(default_size=4, start_position=Grid.center(30, 10)),
    game_speed=0.1,
    has_traps=True,
)
game = Game(settings)
game.subscribe(lambda event: print(event))

game.update(0.1, Input(0, 1))   # one step down once 0.1 s has accumulated
print(game.grid.render())
print(game.score, game.game_time, game.game_over)
```

`Game` raises `ValueError` if the snake's initial length is more than half
the grid width. Events are reported through `GameplayEvent`: `GAME_OVER`,
`GAME_COMPLETED` and `FOOD_TAKEN`.

Food and trap placement goes through a `PositionRandomizer`; the default
`RandomPositionRandomizer` starts at a random interior cell and scans row by
row for an empty one. Pass your own to `Game` for deterministic placement.

## Settings

`snakegrid.settings.UserSettings` holds the player's choices and saves them
as JSON:

- speeds: `Worm` (0.3 s), `Snake` (0.1 s, default), `Python` (0.05 s)
- grid sizes: `30x10`, `50x15` (default), `80x20`
- traps: on or off (default off)

`try_save(SettingsData(...))` applies the choices and writes the file,
returning `False` if it cannot be written. An unreadable file is ignored.
Unknown option names passed to `game_speed_by_name` / `grid_size_by_name`
fall back to the defaults.

## Modules

- `snakegrid.types`: positions, dimensions, directions, cell types, settings and events.
- `snakegrid.randomizer`: strategies that choose empty cells.
- `snakegrid.grid`: the walled grid, its cell bookkeeping and a text rendering.
- `snakegrid.snake`: snake movement and growth.
- `snakegrid.items`: food and traps.
- `snakegrid.game`: the game rules, score, timing and events.
- `snakegrid.settings`: selectable speed, grid size and traps, saved between runs.
- `snakegrid.world`: world coordinates of cells, mesh scaling, camera placement,
  colour schemes and time/score formatting.
- `snakegrid.hud`: score/time and game-over display state (`Hud`) and the
  start-menu option state (`StartMenu`).
- `snakegrid.session`: `GameSession`, tying the game, input, colour schemes and
  HUD together, and the `main` terminal command.

## What it does not do

There is no graphical display and no real-time keyboard input: the terminal
command is line-based and prints the grid as text. `snakegrid.world`,
`Hud`, `StartMenu` and the colour schemes in `GameSession` compute and hold
display state, but nothing draws it.

## Tests

```
pip install .[test]
pytest
```