"""Game states (menu, warm-up, play, game over) and the machine that runs them."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Protocol

import pygame

from .buttons import GameOverButtons, MainMenuButtons
from .canvas import Canvas
from .events import InputEvent, InputKind
from .gamedata import RoundStatistics
from .render import Cursor
from .scoring import ScoreManager
from .sound import DEFAULT_RESOURCES, SoundManager
from .world import World

logger = logging.getLogger(__name__)

COUNTDOWN_MS = 5000
PLAY_TIME_MS = 60000

Clock = Callable[[], int]
MousePosition = Callable[[], tuple[float, float]]


class Drawer(Protocol):
    def clear(self) -> Any: ...
    def draw_world(self, world: World) -> Any: ...
    def draw_canvas(self, canvas: Canvas) -> Any: ...
    def draw_cursor(self, cursor: Cursor) -> Any: ...


def _ticks() -> int:
    return time.monotonic_ns() // 1_000_000


def _mouse_position() -> tuple[float, float]:
    try:
        return pygame.mouse.get_pos()
    except pygame.error:
        return (0.0, 0.0)


class GameState(ABC):
    """One screen of the game. Transitions are returned as new states."""

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        mouse: MousePosition | None = None,
        resources: Path | str = DEFAULT_RESOURCES,
    ) -> None:
        self.clock = clock if clock is not None else _ticks
        self.mouse = mouse if mouse is not None else _mouse_position
        self.resources = Path(resources)

    def _shared(self) -> dict[str, Any]:
        return {"clock": self.clock, "mouse": self.mouse, "resources": self.resources}

    @abstractmethod
    def enter(self) -> None:
        """Set the state up when it becomes current."""

    @abstractmethod
    def handle_input(self, event: InputEvent) -> GameState | None:
        """React to input; return the next state to switch to, if any."""

    @abstractmethod
    def change_state(self) -> GameState | None:
        """The next state when one is due without input, if any."""

    @abstractmethod
    def update(self) -> None:
        """Advance one frame."""

    @abstractmethod
    def render(self, renderer: Drawer) -> None:
        """Draw the state."""

    @abstractmethod
    def quit_game(self) -> bool:
        """Whether the game should end."""


class MainMenuState(GameState):
    """Title screen with a play button."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.canvas = Canvas()
        self.buttons = MainMenuButtons()
        self.cursor = Cursor()
        logger.debug("entering main menu state")

    def enter(self) -> None:
        self.canvas.add_text_box("AIM LABS", 300.0, 500.0, 1.0, (0.5, 0.8, 0.2), "TITLE")
        self.canvas.add_ui_box(300.0, 300.0, 0.0, 1.0, 1.0, "MM_PLAY_BUTTON")
        self.canvas.add_listener(self.buttons)

    def handle_input(self, event: InputEvent) -> GameState | None:
        self.canvas.handle_input(event)
        if self.buttons.clicked_play:
            return StartState(**self._shared())
        return None

    def change_state(self) -> GameState | None:
        return None

    def update(self) -> None:
        self.cursor.update_position(*self.mouse())

    def render(self, renderer: Drawer) -> None:
        renderer.draw_canvas(self.canvas)
        renderer.draw_cursor(self.cursor)

    def quit_game(self) -> bool:
        return False


class StartState(GameState):
    """The world is shown; a click starts the round."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.world = World()
        self.canvas = Canvas()
        logger.debug("entering start state")

    def enter(self) -> None:
        self.world.initialize()
        self.canvas.add_text_box(
            "CLICK TO START", 400.0, 580.0, 1.0, (0.5, 0.8, 0.2), "PROMPT"
        )

    def handle_input(self, event: InputEvent) -> GameState | None:
        if event.kind is InputKind.MOUSE_BUTTON_DOWN:
            return PlayState(self.world, **self._shared())
        return None

    def change_state(self) -> GameState | None:
        return None

    def update(self) -> None:
        pass

    def render(self, renderer: Drawer) -> None:
        renderer.clear()
        renderer.draw_world(self.world)
        renderer.draw_canvas(self.canvas)

    def quit_game(self) -> bool:
        return False


class PlayState(GameState):
    """A countdown followed by a timed round of shooting."""

    def __init__(self, world: World, sound: SoundManager | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.world = world
        self.score = ScoreManager()
        self.sound = sound if sound is not None else SoundManager(self.resources)
        self.canvas = Canvas()
        self.start_time = 0
        logger.debug("entering play state")

    def enter(self) -> None:
        self.start_time = self.clock()
        self.sound.initialize_sounds()
        self.world.target_shot.add_observer(self.score)
        self.world.target_shot.add_observer(self.sound)
        self.canvas.add_text_box("--", 50.0, 550.0, 0.9, (0.3, 0.5, 0.1), "TIMER")
        self.canvas.add_text_box("0", 50.0, 510.0, 0.9, (0.3, 0.5, 0.1), "SCORE")

    def _counting_down(self, now: int) -> bool:
        return now <= self.start_time + COUNTDOWN_MS

    def handle_input(self, event: InputEvent) -> GameState | None:
        if not self._counting_down(self.clock()):
            self.world.handle_input(event)
        return None

    def change_state(self) -> GameState | None:
        if self.clock() - self.start_time > COUNTDOWN_MS + PLAY_TIME_MS:
            stats = RoundStatistics(self.score.score, self.score.missed)
            return GameOverState(stats, **self._shared())
        return None

    def update(self) -> None:
        now = self.clock()
        if self._counting_down(now):
            remaining = max(0, COUNTDOWN_MS + self.start_time - now)
            self.canvas.update_text(str(remaining // 1000), "TIMER")
            return
        self.world.update()
        remaining = max(0, PLAY_TIME_MS + COUNTDOWN_MS + self.start_time - now)
        self.canvas.update_text(str(remaining // 1000), "TIMER")
        self.canvas.update_text(str(self.score.score), "SCORE")

    def render(self, renderer: Drawer) -> None:
        renderer.draw_world(self.world)
        renderer.draw_canvas(self.canvas)

    def quit_game(self) -> bool:
        return False


class GameOverState(GameState):
    """End screen holding the round's statistics, with an exit button."""

    def __init__(self, stats: RoundStatistics, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.stats = stats
        self.canvas = Canvas()
        self.buttons = GameOverButtons()
        self.cursor = Cursor()
        self._quit = False

    def enter(self) -> None:
        self.canvas.add_text_box("GAME OVER!", 100.0, 100.0, 1.0, (0.0, 0.0, 0.0), "GAMEOVER")
        self.canvas.add_ui_box(300.0, 300.0, 0.0, 1.0, 1.0, "EXIT_BUTTON")
        self.canvas.add_listener(self.buttons)

    def handle_input(self, event: InputEvent) -> GameState | None:
        self.canvas.handle_input(event)
        if self.buttons.clicked_exit:
            self._quit = True
        return None

    def change_state(self) -> GameState | None:
        return None

    def update(self) -> None:
        self.cursor.update_position(*self.mouse())

    def render(self, renderer: Drawer) -> None:
        renderer.draw_canvas(self.canvas)
        renderer.draw_cursor(self.cursor)

    def quit_game(self) -> bool:
        return self._quit


class StateManager:
    """Holds the current state, starting at the main menu, and switches between states."""

    def __init__(self, **kwargs: Any) -> None:
        self.current: GameState = MainMenuState(**kwargs)
        self.current.enter()

    def update_state(self, new_state: GameState) -> None:
        self.current = new_state
        self.current.enter()

    def change_state(self) -> None:
        new_state = self.current.change_state()
        if new_state is not None:
            self.update_state(new_state)

    def handle_input(self, event: InputEvent) -> None:
        new_state = self.current.handle_input(event)
        if new_state is not None:
            self.update_state(new_state)

    def update(self) -> None:
        self.current.update()

    def render(self, renderer: Drawer) -> None:
        renderer.clear()
        self.current.render(renderer)

    def quit_game(self) -> bool:
        return self.current.quit_game()