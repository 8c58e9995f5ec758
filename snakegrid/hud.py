"""Heads-up display and start menu state driven by the game model."""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from enum import Enum

from .game import Game
from .settings import SettingsData, UserSettings
from .types import GameplayEvent
from .world import format_score, format_seconds

logger = logging.getLogger(__name__)


class UIGameState(Enum):
    """Which screen the HUD shows."""

    START_GAME = 0
    GAME_IN_PROGRESS = 1
    GAME_OVER = 2
    GAME_COMPLETED = 3


@dataclass
class GameplayWidget:
    """Time and score shown while playing."""

    time_text: str = ""
    score_text: str = ""
    visible: bool = False


@dataclass
class GameOverWidget:
    """Final score and the hint on how to restart."""

    score_text: str = ""
    reset_game_text: str = ""
    visible: bool = False


class Hud:
    """Tracks a game and keeps the in-game widgets up to date."""

    def __init__(self) -> None:
        self.gameplay_widget = GameplayWidget()
        self.game_over_widget = GameOverWidget()
        self._widgets: dict[UIGameState, GameplayWidget | GameOverWidget] = {
            UIGameState.GAME_IN_PROGRESS: self.gameplay_widget,
            UIGameState.GAME_OVER: self.game_over_widget,
        }
        self._game: weakref.ReferenceType[Game] | None = None
        self._current_widget: GameplayWidget | GameOverWidget | None = None
        self._state = UIGameState.START_GAME

    @property
    def state(self) -> UIGameState:
        return self._state

    @property
    def current_widget(self) -> GameplayWidget | GameOverWidget | None:
        return self._current_widget

    def set_model(self, game: Game | None) -> None:
        """Start showing ``game`` and follow its events."""
        if game is None:
            return
        self._game = weakref.ref(game)

        self._set_state(UIGameState.GAME_IN_PROGRESS)
        self.gameplay_widget.score_text = format_score(game.score)
        self.game_over_widget.score_text = format_score(game.score)

        def on_event(event: GameplayEvent) -> None:
            if event is GameplayEvent.FOOD_TAKEN:
                self.gameplay_widget.score_text = format_score(game.score)
            elif event is GameplayEvent.GAME_OVER:
                self._set_state(UIGameState.GAME_OVER)
                self.game_over_widget.score_text = format_score(game.score)

        game.subscribe(on_event)

    def set_reset_key_name(self, key_name: str) -> None:
        """Show which key restarts the game."""
        self.game_over_widget.reset_game_text = f"press <{key_name.lower()}> to reset"

    def tick(self) -> None:
        """Refresh the clock while a game is in progress."""
        game = self._game() if self._game is not None else None
        if game is not None and self._state is UIGameState.GAME_IN_PROGRESS:
            self.gameplay_widget.time_text = format_seconds(game.game_time)

    def _set_state(self, state: UIGameState) -> None:
        self._state = state
        if self._current_widget is not None:
            self._current_widget.visible = False
        widget = self._widgets.get(state)
        if widget is not None:
            self._current_widget = widget
            widget.visible = True


class StartMenu:
    """Start screen options, saved to the user settings whenever the player changes one."""

    def __init__(self, user_settings: UserSettings | None) -> None:
        self._settings = user_settings
        if user_settings is None:
            logger.error("user settings are missing")
            self.game_speed_options: list[str] = []
            self.grid_size_options: list[str] = []
            self.selected_game_speed = ""
            self.selected_grid_size = ""
            self.use_traps = False
            return
        self.game_speed_options = user_settings.game_speed_options()
        self.grid_size_options = user_settings.grid_size_options()
        self.selected_game_speed = user_settings.current_game_speed_option
        self.selected_grid_size = user_settings.current_grid_size_option
        self.use_traps = user_settings.use_traps

    def select_game_speed(self, name: str) -> bool:
        """Pick a speed option by name and save; False if saving failed."""
        self.selected_game_speed = name
        return self._save()

    def select_grid_size(self, name: str) -> bool:
        """Pick a grid size option by name and save; False if saving failed."""
        self.selected_grid_size = name
        return self._save()

    def set_use_traps(self, enabled: bool) -> bool:
        """Turn traps on or off and save; False if saving failed."""
        self.use_traps = enabled
        return self._save()

    def _save(self) -> bool:
        if self._settings is None:
            return False
        data = SettingsData(
            self._settings.game_speed_by_name(self.selected_game_speed),
            self._settings.grid_size_by_name(self.selected_grid_size),
            self.use_traps,
        )
        if not self._settings.try_save(data):
            logger.error("cannot save settings to file")
            return False
        return True