"""Score keeping driven by world events."""

from __future__ import annotations

import logging

from .events import Event, Observer

logger = logging.getLogger(__name__)


class ScoreManager(Observer):
    """Counts hits in ``score``; ``missed`` counts every shot reported, hit or not."""

    def __init__(self) -> None:
        self.score = 0
        self.missed = 0

    def on_notify(self, event: Event) -> None:
        if event is Event.TARGET_SHOT:
            self.score += 1
            self.missed += 1
        elif event is Event.TARGETS_MISSED:
            self.missed += 1
        logger.debug("score: %d, missed: %d", self.score, self.missed)