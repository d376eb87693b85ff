"""The 3D play field: scenery, targets, the camera and shooting."""

from __future__ import annotations

import logging
from typing import Iterable

from .camera import Camera
from .events import Event, InputEvent, InputKind, Subject
from .targets import Target, TargetSlots
from .transform import Transform, identity, scale, translate
from .vector import Vec3

logger = logging.getLogger(__name__)

CAMERA_SENSITIVITY = 0.1
CAMERA_SPEED = 0.01
INITIAL_TARGET_COUNT = 3


def _default_environment() -> list[Transform]:
    model = translate(identity(), (0.0, 0.2, 0.0))
    model = scale(model, (100.0, 100.0, 100.0))
    return [Transform(model)]


class World:
    """Holds the scene and turns mouse input into shots at targets.

    ``target_shot`` broadcasts ``Event.TARGET_SHOT`` on a hit and
    ``Event.TARGETS_MISSED`` on a miss.
    """

    def __init__(
        self,
        environment: Iterable[Transform] | None = None,
        targets: Iterable[Target] | None = None,
        slots: TargetSlots | None = None,
        camera: Camera | None = None,
    ) -> None:
        self.environment = (
            list(environment) if environment is not None else _default_environment()
        )
        self.targets: list[Target] = list(targets) if targets is not None else []
        self.slots = slots if slots is not None else TargetSlots()
        self.camera = (
            camera if camera is not None else Camera(Vec3(), CAMERA_SENSITIVITY, CAMERA_SPEED)
        )
        self.target_shot = Subject()
        self.pressed_down = False

    def initialize(self) -> None:
        """Spawn the initial targets unless some were supplied."""
        if not self.targets:
            self._initialize_targets()

    def _initialize_targets(self) -> None:
        first = Target(self.slots.take_random(), self.slots)
        logger.debug("first target at %s", first.position)
        self.targets.append(first)
        for _ in range(INITIAL_TARGET_COUNT - 1):
            self.targets.append(first.clone())

    def handle_input(self, event: InputEvent) -> None:
        if event.kind is InputKind.MOUSE_MOTION:
            self.camera.look(float(event.rel_x), float(event.rel_y))
        elif event.kind is InputKind.MOUSE_BUTTON_DOWN:
            if not self.pressed_down:
                self._shoot()
            self.pressed_down = True
        elif event.kind is InputKind.MOUSE_BUTTON_UP:
            self.pressed_down = False

    def _shoot(self) -> None:
        origin = self.camera.position()
        direction = self.camera.look_direction()
        for target in self.targets:
            if target.on_mouse_click(origin, direction):
                self.target_shot.notify(Event.TARGET_SHOT)
                self.targets.append(target.clone())
                target.destroy()
                return
        self.target_shot.notify(Event.TARGETS_MISSED)

    def update(self) -> None:
        """Drop destroyed targets."""
        remaining = [t for t in self.targets if not t.is_destroyed]
        if len(remaining) != len(self.targets):
            logger.debug("removing %d destroyed targets", len(self.targets) - len(remaining))
        self.targets = remaining