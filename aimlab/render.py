"""Drawing of the world, the canvas and pointers onto a pygame surface."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable

import numpy as np
import pygame

from .canvas import UI_UNIT, Canvas, TextBox, UIBox
from .gamedata import CROSSHAIR_VERTICES
from .sound import DEFAULT_RESOURCES
from .transform import identity, perspective, scale, translate
from .world import World

FIELD_OF_VIEW = math.radians(45.0)
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
CURSOR_SCALE = 1000.0
FONT_PIXEL_SIZE = 48

BACKGROUND = (51, 76, 76)
TARGET_COLOUR = (200, 40, 40)
TARGET_OUTLINE = (120, 20, 20)
ENVIRONMENT_COLOUR = (110, 110, 120)
ENVIRONMENT_OUTLINE = (70, 70, 80)
CROSSHAIR_COLOUR = (255, 255, 255)
CURSOR_COLOUR = (240, 240, 40)
BUTTON_COLOUR = (90, 140, 200)

Point = tuple[float, float]


def _segments(vertices: Iterable[float]) -> list[tuple[Point, Point]]:
    values = list(vertices)
    points = list(zip(values[0::2], values[1::2]))
    return list(zip(points[0::2], points[1::2]))


_POINTER_SEGMENTS = _segments(CROSSHAIR_VERTICES)

# Corner i has x = bit 0, y = bit 1, z = bit 2 of i.
_CUBE_CORNERS = np.array(
    [[x, y, z, 1.0] for z in (-0.5, 0.5) for y in (-0.5, 0.5) for x in (-0.5, 0.5)]
)
_CUBE_FACES = (
    (0, 2, 6, 4),
    (1, 3, 7, 5),
    (0, 1, 5, 4),
    (2, 3, 7, 6),
    (0, 1, 3, 2),
    (4, 5, 7, 6),
)
_QUAD_CORNERS = ((-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5))


class Cursor:
    """A small cross that follows the mouse in window pixels."""

    def __init__(self) -> None:
        self.position: Point = (0.0, 0.0)
        self.model_matrix = identity()

    def update_position(self, x: float, y: float) -> None:
        self.position = (float(x), float(y))
        model = translate(identity(), (x, y, 0.0))
        self.model_matrix = scale(model, (CURSOR_SCALE, CURSOR_SCALE, 1.0))

    def segments(self) -> list[tuple[Point, Point]]:
        """The cursor's line segments in window pixels."""
        placed = []
        for start, end in _POINTER_SEGMENTS:
            a = self.model_matrix @ np.array([start[0], start[1], 0.0, 1.0])
            b = self.model_matrix @ np.array([end[0], end[1], 0.0, 1.0])
            placed.append(((float(a[0]), float(a[1])), (float(b[0]), float(b[1]))))
        return placed


def project(
    point: Iterable[float],
    view: np.ndarray,
    projection: np.ndarray,
    width: float,
    height: float,
) -> Point | None:
    """Window position (origin top-left) of a world point, or None behind the camera."""
    clip = (
        np.asarray(projection, dtype=float)
        @ np.asarray(view, dtype=float)
        @ np.array([*point, 1.0], dtype=float)
    )
    w = float(clip[3])
    if w <= 0.0:
        return None
    ndc_x = float(clip[0]) / w
    ndc_y = float(clip[1]) / w
    return ((ndc_x + 1.0) / 2.0 * width, (1.0 - ndc_y) / 2.0 * height)


class Renderer:
    """Draws game objects onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, resources: Path | str = DEFAULT_RESOURCES) -> None:
        self.surface = surface
        self.resources = Path(resources)
        self._fonts: dict[int, pygame.font.Font] = {}
        self._textures: dict[str, pygame.Surface | None] = {}

    def clear(self) -> None:
        self.surface.fill(BACKGROUND)

    def _projection(self) -> np.ndarray:
        width, height = self.surface.get_size()
        return perspective(FIELD_OF_VIEW, width / height, NEAR_PLANE, FAR_PLANE)

    def draw_world(self, world: World) -> None:
        """Scenery, then targets, then the crosshair."""
        view = world.camera.view_matrix()
        projection = self._projection()
        for piece in world.environment:
            self._draw_box(
                piece.model_matrix, view, projection, ENVIRONMENT_COLOUR, ENVIRONMENT_OUTLINE
            )
        for target in world.targets:
            self._draw_box(target.model_matrix, view, projection, TARGET_COLOUR, TARGET_OUTLINE)
        self.draw_crosshair()

    def _draw_box(
        self,
        model: np.ndarray,
        view: np.ndarray,
        projection: np.ndarray,
        colour: tuple[int, int, int],
        outline: tuple[int, int, int],
    ) -> None:
        width, height = self.surface.get_size()
        corners = (np.asarray(model, dtype=float) @ _CUBE_CORNERS.T).T
        screen = [project(c[:3], view, projection, width, height) for c in corners]
        if any(p is None for p in screen):
            return
        depths = [-float((view @ c)[2]) for c in corners]
        faces = sorted(_CUBE_FACES, key=lambda face: -sum(depths[i] for i in face))
        for face in faces:
            points = [screen[i] for i in face]
            pygame.draw.polygon(self.surface, colour, points)
            pygame.draw.polygon(self.surface, outline, points, width=1)

    def draw_crosshair(self) -> None:
        width, height = self.surface.get_size()

        def to_screen(p: Point) -> Point:
            return ((p[0] + 1.0) / 2.0 * width, (1.0 - p[1]) / 2.0 * height)

        for start, end in _POINTER_SEGMENTS:
            pygame.draw.line(self.surface, CROSSHAIR_COLOUR, to_screen(start), to_screen(end))

    def draw_cursor(self, cursor: Cursor) -> None:
        for start, end in cursor.segments():
            pygame.draw.line(self.surface, CURSOR_COLOUR, start, end)

    def draw_canvas(self, canvas: Canvas) -> None:
        """Text boxes, then UI boxes, each in id order; canvas y grows upwards."""
        for _, box in sorted(canvas.text_boxes.items()):
            self._draw_text(box)
        for _, ui_box in sorted(canvas.ui_boxes.items()):
            self._draw_ui_box(ui_box)

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def _draw_text(self, box: TextBox) -> None:
        font = self._font(max(1, round(FONT_PIXEL_SIZE * box.scale)))
        colour = tuple(max(0, min(255, round(c * 255))) for c in box.colour)
        image = font.render(box.text, True, colour)
        top = self.surface.get_height() - box.y - font.get_ascent()
        self.surface.blit(image, (box.x, top))

    def _texture(self, name: str) -> pygame.Surface | None:
        if name not in self._textures:
            path = self.resources / name
            texture = None
            if path.is_file():
                try:
                    texture = pygame.image.load(str(path))
                except pygame.error:
                    texture = None
            self._textures[name] = texture
        return self._textures[name]

    def _draw_ui_box(self, box: UIBox) -> None:
        height = self.surface.get_height()
        texture = self._texture(box.texture)
        if texture is not None:
            size = (
                max(1, round(box.scale_x * UI_UNIT)),
                max(1, round(box.scale_y * UI_UNIT)),
            )
            image = pygame.transform.rotate(pygame.transform.scale(texture, size), box.rotation)
            self.surface.blit(image, image.get_rect(center=(box.x, height - box.y)))
            return
        model = box.model_matrix()
        points = []
        for x, y in _QUAD_CORNERS:
            placed = model @ np.array([x, y, 0.0, 1.0])
            points.append((float(placed[0]), height - float(placed[1])))
        pygame.draw.polygon(self.surface, BUTTON_COLOUR, points)