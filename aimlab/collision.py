"""Axis-aligned box raycasting and 2D rectangle hit tests."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from .vector import Vec3

logger = logging.getLogger(__name__)


@dataclass
class AABB:
    """An axis-aligned bounding box given by its minimum and maximum corners."""

    min_corner: Vec3 = field(default_factory=Vec3)
    max_corner: Vec3 = field(default_factory=Vec3)

    def raycast(self, origin: Vec3, direction: Vec3) -> float | None:
        """Distance along the ray to the box, or None when the ray misses.

        When the origin lies inside the box the distance to the exit point
        is returned.
        """
        t_near = -math.inf
        t_far = math.inf
        for lo, hi, o, d in zip(self.min_corner, self.max_corner, origin, direction):
            if d == 0:
                if o < lo or o > hi:
                    return None
                continue
            t1 = (lo - o) / d
            t2 = (hi - o) / d
            if t1 > t2:
                t1, t2 = t2, t1
            t_near = max(t_near, t1)
            t_far = min(t_far, t2)

        if t_far < 0.0 or t_near > t_far:
            return None
        return t_far if t_near < 0.0 else t_near

    def check_collision(self, origin: Vec3, direction: Vec3) -> bool:
        """Whether the ray hits the box."""
        hit = self.raycast(origin, direction) is not None
        logger.debug("ray collision check: %s", hit)
        return hit


@dataclass
class BoxCollider2D:
    """A screen rectangle; points strictly inside it collide."""

    start_x: float
    start_y: float
    end_x: float
    end_y: float

    def check_collision(self, x: float, y: float) -> bool:
        result = self.start_x < x < self.end_x and self.start_y < y < self.end_y
        logger.debug(
            "box (%s, %s)-(%s, %s) vs point (%s, %s): %s",
            self.start_x,
            self.start_y,
            self.end_x,
            self.end_y,
            x,
            y,
            result,
        )
        return result