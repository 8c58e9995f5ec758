"""Player-chosen game options and their persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TypeVar

from .types import Dimension

logger = logging.getLogger(__name__)

DEFAULT_SAVE_PATH = Path.home() / ".snakegrid" / "SG_SaveSettings.json"


class GameSpeed(Enum):
    WORM = 0
    SNAKE = 1
    PYTHON = 2


class GridSize(Enum):
    SIZE_30X10 = 0
    SIZE_50X15 = 1
    SIZE_80X20 = 2


@dataclass(frozen=True)
class _SpeedOption:
    name: str
    value: float


@dataclass(frozen=True)
class _GridOption:
    name: str
    value: Dimension


GAME_SPEEDS: dict[GameSpeed, _SpeedOption] = {
    GameSpeed.WORM: _SpeedOption("Worm", 0.3),
    GameSpeed.SNAKE: _SpeedOption("Snake", 0.1),
    GameSpeed.PYTHON: _SpeedOption("Python", 0.05),
}

GRID_SIZES: dict[GridSize, _GridOption] = {
    GridSize.SIZE_30X10: _GridOption("30x10", Dimension(30, 10)),
    GridSize.SIZE_50X15: _GridOption("50x15", Dimension(50, 15)),
    GridSize.SIZE_80X20: _GridOption("80x20", Dimension(80, 20)),
}

_E = TypeVar("_E", bound=Enum)


def _find_by_name(options: dict, name: str, default: _E) -> _E:
    return next((key for key, option in options.items() if option.name == name), default)


@dataclass(frozen=True)
class SettingsData:
    """A full set of choices made in the start menu."""

    game_speed: GameSpeed
    grid_size: GridSize
    use_traps: bool


class UserSettings:
    """Current game options, loaded from and saved to a settings file."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_SAVE_PATH
        self._speed = GAME_SPEEDS[GameSpeed.SNAKE]
        self._grid = GRID_SIZES[GridSize.SIZE_50X15]
        self._use_traps = False
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def current_game_speed_option(self) -> str:
        return self._speed.name

    @property
    def current_grid_size_option(self) -> str:
        return self._grid.name

    @property
    def use_traps(self) -> bool:
        return self._use_traps

    @property
    def game_speed(self) -> float:
        """Seconds between snake moves."""
        return self._speed.value

    @property
    def grid_size(self) -> Dimension:
        return self._grid.value

    def game_speed_options(self) -> list[str]:
        return [option.name for option in GAME_SPEEDS.values()]

    def grid_size_options(self) -> list[str]:
        return [option.name for option in GRID_SIZES.values()]

    def game_speed_by_name(self, name: str) -> GameSpeed:
        return _find_by_name(GAME_SPEEDS, name, GameSpeed.SNAKE)

    def grid_size_by_name(self, name: str) -> GridSize:
        return _find_by_name(GRID_SIZES, name, GridSize.SIZE_50X15)

    def try_save(self, data: SettingsData) -> bool:
        """Apply ``data`` and write it to the settings file; False if writing failed."""
        self._apply(data)
        record = {
            "game_speed": data.game_speed.value,
            "grid_size": data.grid_size.value,
            "use_traps": data.use_traps,
        }
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(record), encoding="utf-8")
        except OSError as error:
            logger.error("cannot save settings to %s: %s", self._path, error)
            return False
        return True

    def _apply(self, data: SettingsData) -> None:
        self._speed = GAME_SPEEDS[data.game_speed]
        self._grid = GRID_SIZES[data.grid_size]
        self._use_traps = data.use_traps

    def _load(self) -> None:
        if not self._path.is_file():
            return
        try:
            record = json.loads(self._path.read_text(encoding="utf-8"))
            data = SettingsData(
                GameSpeed(record["game_speed"]),
                GridSize(record["grid_size"]),
                bool(record["use_traps"]),
            )
        except (OSError, ValueError, KeyError, TypeError) as error:
            logger.warning("ignoring unreadable settings file %s: %s", self._path, error)
            return
        self._apply(data)