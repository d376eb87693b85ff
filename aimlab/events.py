"""Observer plumbing for game events, button clicks and input events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto


class Event(Enum):
    """Things that happen in the world that observers care about."""

    TARGET_SHOT = auto()
    TARGETS_MISSED = auto()


class Observer(ABC):
    """Receives world events from a Subject."""

    @abstractmethod
    def on_notify(self, event: Event) -> None:
        """Handle an event."""


class Subject:
    """Broadcasts events to registered observers in registration order."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove every registration of this observer."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self, event: Event) -> None:
        for observer in list(self._observers):
            observer.on_notify(event)


class ButtonObserver(ABC):
    """Receives the id of a clicked button."""

    @abstractmethod
    def on_notify(self, button_id: str) -> None:
        """Handle a click on the button with this id."""


class ButtonEvent:
    """Broadcasts button clicks to registered button observers."""

    def __init__(self) -> None:
        self._observers: list[ButtonObserver] = []

    def add_observer(self, observer: ButtonObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: ButtonObserver) -> None:
        """Remove every registration of this observer."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self, button_id: str) -> None:
        for observer in list(self._observers):
            observer.on_notify(button_id)


class InputKind(Enum):
    """Kinds of user input the game reacts to."""

    MOUSE_MOTION = auto()
    MOUSE_BUTTON_DOWN = auto()
    MOUSE_BUTTON_UP = auto()
    KEY_DOWN = auto()
    KEY_UP = auto()
    QUIT = auto()


@dataclass(frozen=True)
class InputEvent:
    """A single input event.

    ``x`` and ``y`` are the mouse position in window pixels (origin top-left);
    ``rel_x`` and ``rel_y`` are the relative mouse motion.
    """

    kind: InputKind
    x: float = 0.0
    y: float = 0.0
    rel_x: float = 0.0
    rel_y: float = 0.0