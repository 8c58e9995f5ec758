"""A playing session: drives the game model, tracks what is shown and handles input."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence

from .game import Game
from .grid import Grid
from .hud import Hud
from .items import Trap
from .randomizer import PositionRandomizer, RandomPositionRandomizer
from .settings import UserSettings
from .types import Dimension, GameplayEvent, Input, Settings, SnakeSettings
from .world import SnakeColors, format_score, format_seconds

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = Dimension(10, 10)
DEFAULT_CELL_SIZE = 10
DEFAULT_SNAKE_SIZE = 5


class GameSession:
    """Owns the running game, the HUD and the state of everything drawn for it."""

    def __init__(
        self,
        user_settings: UserSettings | None = None,
        *,
        override_user_settings: bool = False,
        grid_size: Dimension = DEFAULT_GRID_SIZE,
        game_speed: float = 1.0,
        snake_default_size: int = DEFAULT_SNAKE_SIZE,
        cell_size: int = DEFAULT_CELL_SIZE,
        colors: Sequence[SnakeColors] | None = None,
        randomizer: PositionRandomizer | None = None,
        rng: random.Random | None = None,
        reset_key_name: str = "None",
    ) -> None:
        self._colors = list(colors) if colors is not None else [SnakeColors()]
        if not self._colors:
            raise ValueError("the colour table has no rows")

        self._user_settings = user_settings
        self._override = override_user_settings
        self._grid_size = grid_size
        self._game_speed = game_speed
        self._snake_default_size = snake_default_size
        self.cell_size = cell_size
        self._randomizer = randomizer
        self._rng = rng if rng is not None else random.Random()

        self.snake_input = Input.DEFAULT
        self.trap_views: list[Trap] = []
        self.snake_exploded = False
        self.food_visible = True
        self.food_explosions = 0

        self._settings = self.make_settings()
        self._game = Game(self._settings, self._randomizer)
        self._subscribe_on_game_events()

        self._color_index = self._rng.randrange(len(self._colors))

        self.hud = Hud()
        self.hud.set_model(self._game)
        self.hud.set_reset_key_name(reset_key_name)
        self.ui_input_enabled = False

    @property
    def game(self) -> Game:
        return self._game

    @property
    def settings(self) -> Settings:
        """Settings the current game was started with."""
        return self._settings

    @property
    def color_index(self) -> int:
        return self._color_index

    @property
    def colors(self) -> SnakeColors:
        """The colour scheme currently in use."""
        return self._colors[self._color_index]

    def make_settings(self) -> Settings:
        """Build game settings from the overrides or, failing that, the user settings."""
        settings = Settings()
        if self._override:
            settings.grid_size = self._grid_size
            settings.game_speed = self._game_speed
        elif self._user_settings is not None:
            settings.grid_size = self._user_settings.grid_size
            settings.game_speed = self._user_settings.game_speed
            settings.has_traps = self._user_settings.use_traps

        settings.snake = SnakeSettings(
            default_size=self._snake_default_size,
            start_position=Grid.center(settings.grid_size.width, settings.grid_size.height),
        )
        return settings

    def tick(self, delta_seconds: float) -> None:
        """Advance the game by ``delta_seconds`` and pick up any new trap."""
        self._game.update(delta_seconds, self.snake_input)
        traps = self._game.traps
        if len(traps) != len(self.trap_views):
            self.trap_views.append(traps[-1])
        self.hud.tick()

    def on_move_forward(self, value: float) -> None:
        """Steer along the grid's vertical axis; a zero value is ignored."""
        if value == 0.0:
            return
        self.snake_input = Input(0, int(value))

    def on_move_right(self, value: float) -> None:
        """Steer along the grid's horizontal axis; a zero value is ignored."""
        if value == 0.0:
            return
        self.snake_input = Input(int(value), 0)

    def reset(self) -> None:
        """Start a fresh game with current settings and move to the next colour scheme."""
        self._settings = self.make_settings()
        self._game = Game(self._settings, self._randomizer)
        self._subscribe_on_game_events()
        self.hud.set_model(self._game)

        self.snake_exploded = False
        self.food_visible = True
        self.trap_views = list(self._game.traps)

        self.snake_input = Input.DEFAULT
        self.next_color()
        self.ui_input_enabled = False

    def next_color(self) -> None:
        """Switch to the next row of the colour table, wrapping around."""
        self._color_index = (self._color_index + 1) % len(self._colors)

    def _subscribe_on_game_events(self) -> None:
        def on_event(event: GameplayEvent) -> None:
            if event is GameplayEvent.GAME_OVER:
                logger.info("------------------ GAME OVER ------------------")
                logger.info("------------------ SCORE: %i ------------------", self._game.score)
                self.snake_exploded = True
                self.food_visible = False
                self.ui_input_enabled = True
            elif event is GameplayEvent.GAME_COMPLETED:
                logger.info("------------------ GAME COMPLETED ------------------")
                logger.info("------------------ SCORE: %i ------------------", self._game.score)
            elif event is GameplayEvent.FOOD_TAKEN:
                logger.info("------------------ FOOD TAKEN ------------------")
                self.food_explosions += 1

        self._game.subscribe(on_event)


def _parse_grid(text: str) -> Dimension:
    try:
        width_text, height_text = text.lower().split("x")
        width, height = int(width_text), int(height_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"grid must look like WIDTHxHEIGHT, got {text!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError("grid sides must be positive")
    return Dimension(width, height)


def _frame(session: GameSession) -> str:
    game = session.game
    status = f"score: {format_score(game.score)}  time: {format_seconds(game.game_time)}"
    return f"{game.grid.render()}\n{status}"


_MOVES = {
    "w": ("forward", -1.0),
    "s": ("forward", 1.0),
    "a": ("right", -1.0),
    "d": ("right", 1.0),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Play in the terminal: one command per line (w/a/s/d, r to reset, q to quit)."""
    parser = argparse.ArgumentParser(prog="snakegrid", description="Play snake in the terminal.")
    parser.add_argument("--grid", type=_parse_grid, help="playing field size, e.g. 30x10")
    parser.add_argument("--speed", type=float, help="seconds between moves")
    parser.add_argument("--snake-size", type=int, default=DEFAULT_SNAKE_SIZE)
    parser.add_argument("--settings", help="path of the settings file")
    parser.add_argument("--seed", type=int, help="seed for food and trap placement")
    args = parser.parse_args(argv)

    user_settings = UserSettings(args.settings)
    override = args.grid is not None or args.speed is not None
    rng = random.Random(args.seed)
    try:
        session = GameSession(
            user_settings,
            override_user_settings=override,
            grid_size=args.grid if args.grid is not None else DEFAULT_GRID_SIZE,
            game_speed=args.speed if args.speed is not None else 1.0,
            snake_default_size=args.snake_size,
            randomizer=RandomPositionRandomizer(rng),
            rng=rng,
            reset_key_name="R",
        )
    except ValueError as error:
        print(f"snakegrid: {error}", file=sys.stderr)
        return 2

    print(_frame(session))
    for line in sys.stdin:
        command = line.strip().lower()
        if command == "q":
            break
        if command == "r":
            session.reset()
        elif command in _MOVES:
            axis, value = _MOVES[command]
            if axis == "forward":
                session.on_move_forward(value)
            else:
                session.on_move_right(value)
        session.tick(session.settings.game_speed)
        print(_frame(session))
        if session.game.game_over:
            print(session.hud.game_over_widget.reset_game_text)
    return 0