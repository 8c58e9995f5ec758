"""The game model: snake, food, traps and the rules that tie them together."""

from __future__ import annotations

from collections.abc import Callable

from .grid import Grid
from .items import Food, Trap
from .randomizer import PositionRandomizer
from .snake import Snake
from .types import CellType, GameplayEvent, Input, Position, Settings

GameplayEventCallback = Callable[[GameplayEvent], None]

_TRAP_SCORE_STEP = 3


class Game:
    """One round of snake, advanced by calling :meth:`update` every frame."""

    def __init__(
        self, settings: Settings, randomizer: PositionRandomizer | None = None
    ) -> None:
        if settings.grid_size.width // 2 < settings.snake.default_size:
            raise ValueError(
                f"snake initial length {settings.snake.default_size} does not fit "
                f"grid width {settings.grid_size.width}"
            )
        self._settings = settings
        self._grid = Grid(settings.grid_size, randomizer)
        self._snake = Snake(settings.snake)
        self._food = Food()
        self._traps: list[Trap] = []
        self._using_traps = settings.has_traps
        self._callbacks: list[GameplayEventCallback] = []

        self._score = 0
        self._last_score_step = 0
        self._game_time = 0.0
        self._move_seconds = 0.0
        self._game_over = False

        self._update_grid()
        self._generate_food()

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def snake(self) -> Snake:
        return self._snake

    @property
    def food(self) -> Food:
        return self._food

    @property
    def traps(self) -> list[Trap]:
        return list(self._traps)

    @property
    def score(self) -> int:
        return self._score

    @property
    def game_time(self) -> float:
        return self._game_time

    @property
    def game_over(self) -> bool:
        return self._game_over

    def update(self, delta_seconds: float, direction: Input) -> None:
        """Advance the clock and, once a step is due, move the snake."""
        if self._game_over or not self._update_time(delta_seconds):
            return

        prev_tail = self._snake.tail
        self._snake.move(direction)

        if self._died(prev_tail):
            self._finish()
            return

        if self._food_taken():
            self._score += 1
            self._snake.increase_tail()
            self._dispatch(GameplayEvent.FOOD_TAKEN)
            self._generate_food()

        if self._can_spawn_trap():
            self._last_score_step = self._score
            self._generate_trap()

        self._update_grid()

    def subscribe(self, callback: GameplayEventCallback) -> None:
        """Register a callable to be told about gameplay events."""
        self._callbacks.append(callback)

    def _finish(self) -> None:
        self._game_over = True
        self._dispatch(GameplayEvent.GAME_OVER)

    def _complete(self) -> None:
        self._game_over = True
        self._dispatch(GameplayEvent.GAME_COMPLETED)

    def _update_grid(self) -> None:
        self._grid.update_links(self._snake.links, CellType.SNAKE)

    def _update_time(self, delta_seconds: float) -> bool:
        self._game_time += delta_seconds
        self._move_seconds += delta_seconds
        if self._move_seconds < self._settings.game_speed:
            return False
        self._move_seconds = 0.0
        return True

    def _died(self, prev_tail: Position) -> bool:
        head = self._snake.head
        if self._grid.hit_test(head, CellType.WALL):
            return True
        if self._grid.hit_test(head, CellType.TRAP):
            return True
        if head == prev_tail:
            return False
        return self._grid.hit_test(head, CellType.SNAKE)

    def _generate_food(self) -> None:
        position = self._grid.random_empty_position()
        if position is None:
            self._complete()
            return
        self._food.position = position
        self._grid.update(position, CellType.FOOD)

    def _food_taken(self) -> bool:
        return self._grid.hit_test(self._snake.head, CellType.FOOD)

    def _generate_trap(self) -> None:
        position = self._grid.random_empty_position()
        if position is None:
            self._complete()
            return
        trap = Trap(position)
        self._traps.append(trap)
        self._grid.update(position, CellType.TRAP, reset_cells=False)

    def _can_spawn_trap(self) -> bool:
        return (
            self._using_traps
            and self._score > self._last_score_step
            and self._score % _TRAP_SCORE_STEP == 0
        )

    def _dispatch(self, event: GameplayEvent) -> None:
        for callback in self._callbacks:
            if callback:
                callback(event)