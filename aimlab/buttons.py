"""Button click listeners for the main menu and the game-over screen."""

from __future__ import annotations

from .events import ButtonObserver

MM_PLAY_BUTTON = "MM_PLAY_BUTTON"
MM_EXIT_BUTTON = "MM_EXIT_BUTTON"
EXIT_BUTTON = "EXIT_BUTTON"
RESTART_BUTTON = "RESTART_BUTTON"


class MainMenuButtons(ButtonObserver):
    """Remembers which main-menu buttons were clicked."""

    def __init__(self) -> None:
        self.clicked_play = False
        self.clicked_exit = False

    def on_notify(self, button_id: str) -> None:
        if button_id == MM_PLAY_BUTTON:
            self.clicked_play = True
        elif button_id == MM_EXIT_BUTTON:
            self.clicked_exit = True


class GameOverButtons(ButtonObserver):
    """Remembers which game-over buttons were clicked."""

    def __init__(self) -> None:
        self.clicked_exit = False
        self.clicked_restart = False

    def on_notify(self, button_id: str) -> None:
        if button_id == EXIT_BUTTON:
            self.clicked_exit = True
        elif button_id == RESTART_BUTTON:
            self.clicked_restart = True