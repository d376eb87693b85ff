"""Sound effects played in response to world events."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Protocol

import pygame

from .events import Event, Observer

logger = logging.getLogger(__name__)

DEFAULT_RESOURCES = Path("resources")
GUNSHOT = "GUNSHOT"
GUNSHOT_FILE = "sounds/Gunshot.mp3"


class Playable(Protocol):
    def play(self) -> Any: ...


def _load_with_mixer(path: Path) -> Playable:
    return pygame.mixer.Sound(str(path))


class SoundManager(Observer):
    """Loads sound effects and plays the gunshot when a target is shot."""

    def __init__(
        self,
        resources: Path | str = DEFAULT_RESOURCES,
        loader: Callable[[Path], Playable] = _load_with_mixer,
    ) -> None:
        self.resources = Path(resources)
        self._loader = loader
        self.sounds: dict[str, Playable] = {}

    def initialize_sounds(self) -> bool:
        """Load every effect; False if any failed to load."""
        return self._initialize_sound(self.resources / GUNSHOT_FILE, GUNSHOT)

    def _initialize_sound(self, path: Path, sound_id: str) -> bool:
        try:
            chunk = self._loader(path)
        except (pygame.error, OSError) as exc:
            logger.warning("failed to load sound effect for <%s>: %s", sound_id, exc)
            return False
        self.sounds.setdefault(sound_id, chunk)
        return True

    def on_notify(self, event: Event) -> None:
        if event is Event.TARGET_SHOT:
            chunk = self.sounds.get(GUNSHOT)
            if chunk is not None:
                chunk.play()