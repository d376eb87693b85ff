"""Screen-space text and clickable boxes, grouped on a canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .collision import BoxCollider2D
from .events import ButtonEvent, ButtonObserver, InputEvent, InputKind
from .transform import identity, rotate, scale, translate

BUTTON_TEXTURE = "media/play_button.jpg"
UI_UNIT = 100.0


@dataclass
class TextBox:
    """A line of text placed at a screen position with a scale and colour."""

    text: str
    x: float
    y: float
    scale: float
    colour: tuple[float, float, float]

    def update_string(self, text: str) -> None:
        self.text = text


@dataclass
class UIBox:
    """A textured, clickable rectangle centred on (x, y); rotation is in degrees."""

    x: float
    y: float
    rotation: float
    scale_x: float
    scale_y: float
    texture: str = BUTTON_TEXTURE
    collider: BoxCollider2D = field(init=False)

    def __post_init__(self) -> None:
        half_w = 0.5 * self.scale_x * UI_UNIT
        half_h = 0.5 * self.scale_y * UI_UNIT
        self.collider = BoxCollider2D(
            self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h
        )

    def check_collision(self, x: float, y: float) -> bool:
        return self.collider.check_collision(x, y)

    def model_matrix(self) -> np.ndarray:
        """Places the unit quad on screen."""
        m = translate(identity(), (self.x, self.y, 0.0))
        m = scale(m, (self.scale_x * UI_UNIT, self.scale_y * UI_UNIT, 1.0))
        return rotate(m, math.radians(self.rotation), (0.0, 0.0, 1.0))


class Canvas:
    """Named text boxes and UI boxes; clicks on UI boxes notify listeners by id.

    Adding an element under an id already in use keeps the existing element.
    """

    def __init__(self) -> None:
        self.text_boxes: dict[str, TextBox] = {}
        self.ui_boxes: dict[str, UIBox] = {}
        self._on_click = ButtonEvent()

    def add_text_box(
        self,
        text: str,
        x: float,
        y: float,
        scale: float,
        colour: tuple[float, float, float],
        box_id: str,
    ) -> TextBox:
        return self.text_boxes.setdefault(box_id, TextBox(text, x, y, scale, tuple(colour)))

    def add_ui_box(
        self,
        x: float,
        y: float,
        rotation: float,
        scale_x: float,
        scale_y: float,
        box_id: str,
    ) -> UIBox:
        return self.ui_boxes.setdefault(box_id, UIBox(x, y, rotation, scale_x, scale_y))

    def update_text(self, text: str, box_id: str) -> None:
        """Replace the text of an existing box; KeyError for an unknown id."""
        self.text_boxes[box_id].update_string(text)

    def handle_input(self, event: InputEvent) -> None:
        """On a mouse press, notify listeners of every UI box under the pointer, in id order."""
        if event.kind is not InputKind.MOUSE_BUTTON_DOWN:
            return
        for box_id, box in sorted(self.ui_boxes.items()):
            if box.check_collision(float(event.x), float(event.y)):
                self._on_click.notify(box_id)

    def add_listener(self, observer: ButtonObserver) -> None:
        self._on_click.add_observer(observer)