"""Shootable targets and the pool of positions they may occupy."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Iterator

import numpy as np

from .collision import AABB
from .transform import identity, translate
from .vector import Vec3

logger = logging.getLogger(__name__)

DEFAULT_TARGET_POSITIONS: tuple[Vec3, ...] = (
    Vec3(-3.0, -3.0, -10.0),
    Vec3(0.0, -3.0, -10.0),
    Vec3(3.0, -3.0, -10.0),
    Vec3(-3.0, 0.0, -10.0),
    Vec3(0.0, 0.0, -10.0),
    Vec3(3.0, 0.0, -10.0),
    Vec3(-3.0, 3.0, -10.0),
    Vec3(0.0, 3.0, -10.0),
    Vec3(3.0, 3.0, -10.0),
)

_HALF_EXTENT = Vec3(0.5, 0.5, 0.5)


def generate_random_number(start: int, end: int) -> int:
    """A uniformly random integer in ``[start, end)``; ValueError if the range is empty."""
    return random.randrange(start, end)


class TargetSlots:
    """The positions not currently occupied by a target."""

    def __init__(self, positions: Iterable[Vec3] | None = None) -> None:
        source = DEFAULT_TARGET_POSITIONS if positions is None else positions
        self._positions: list[Vec3] = list(source)

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Vec3]:
        return iter(self._positions)

    def __contains__(self, position: object) -> bool:
        return position in self._positions

    def take(self, index: int) -> Vec3:
        """Remove and return the free position at ``index``."""
        if not 0 <= index < len(self._positions):
            raise IndexError(f"no free target position at index {index}")
        return self._positions.pop(index)

    def take_random(self) -> Vec3:
        """Remove and return a randomly chosen free position."""
        if not self._positions:
            raise IndexError("no free target positions left")
        return self.take(generate_random_number(0, len(self._positions)))

    def give_back(self, position: Vec3) -> None:
        """Return a position to the free pool."""
        self._positions.append(position)


class Target:
    """A unit cube at a fixed position that can be shot."""

    def __init__(self, position: Vec3, slots: TargetSlots) -> None:
        self.position = position
        self.slots = slots
        self.is_destroyed = False
        self.model_matrix: np.ndarray = translate(identity(), position)
        self.collision_box = AABB(position - _HALF_EXTENT, position + _HALF_EXTENT)

    def on_mouse_click(self, origin: Vec3, direction: Vec3) -> bool:
        """Whether a shot along the ray hits this target."""
        return self.collision_box.check_collision(origin, direction)

    def clone(self) -> Target:
        """A new target at a random free position, taken from the pool."""
        position = self.slots.take_random()
        logger.debug("spawning target at %s", position)
        return Target(position, self.slots)

    def destroy(self) -> None:
        """Mark this target destroyed and free its position."""
        self.slots.give_back(self.position)
        self.is_destroyed = True