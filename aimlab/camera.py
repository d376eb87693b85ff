"""First-person camera driven by mouse look and movement keys."""

from __future__ import annotations

import math
from enum import Enum, auto

import numpy as np

from .transform import look_at
from .vector import Vec3

PITCH_LIMIT = 89.0


class MovementDirection(Enum):
    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()


class Camera:
    """A yaw/pitch camera; angles are in degrees."""

    def __init__(self, initial_position: Vec3, sensitivity: float, speed: float) -> None:
        self._position = initial_position
        self.velocity = Vec3()
        self.front = Vec3(0.0, 0.0, -1.0)
        self.up = Vec3(0.0, 1.0, 0.0)
        self.right = Vec3(1.0, 0.0, 0.0)
        self.world_up = Vec3(0.0, 1.0, 0.0)
        self.front_projection = Vec3(0.0, 0.0, -1.0)
        self.sensitivity = sensitivity
        self.speed = speed
        self.yaw = -90.0
        self.pitch = 0.0

    def set_direction(self, direction: MovementDirection) -> None:
        """Set the velocity for moving in ``direction`` on the ground plane."""
        if direction is MovementDirection.FORWARD:
            self.velocity = self.speed * self.front_projection
        elif direction is MovementDirection.BACKWARD:
            self.velocity = -(self.speed * self.front_projection)
        else:
            sideways = self.up.cross(self.front_projection).normalize() * self.speed
            self.velocity = sideways if direction is MovementDirection.LEFT else -sideways

    def reset_direction(self, direction: MovementDirection) -> None:
        """Stop moving; any direction stops all movement."""
        self.velocity = Vec3()

    def move(self) -> None:
        self._position = self._position + self.velocity

    def look(self, offset_x: float, offset_y: float) -> None:
        """Turn by a relative mouse motion; pitch is clamped to avoid flipping."""
        self.yaw += offset_x * self.sensitivity
        self.pitch += -offset_y * self.sensitivity
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        direction = Vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = direction.normalize()
        self.front_projection = Vec3(self.front.x, 0.0, self.front.z).normalize()
        self.right = self.front.cross(self.world_up).normalize()
        self.up = self.right.cross(self.front).normalize()

    def view_matrix(self) -> np.ndarray:
        return look_at(self._position, self._position + self.front, self.up)

    def look_direction(self) -> Vec3:
        return self.front

    def position(self) -> Vec3:
        return self._position