"""Window setup and the main loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from .events import InputEvent, InputKind
from .render import Renderer
from .sound import DEFAULT_RESOURCES
from .states import StateManager

WINDOW_TITLE = "Aim Lab"
WINDOW_SIZE = (800, 600)

_KINDS = {
    pygame.MOUSEMOTION: InputKind.MOUSE_MOTION,
    pygame.MOUSEBUTTONDOWN: InputKind.MOUSE_BUTTON_DOWN,
    pygame.MOUSEBUTTONUP: InputKind.MOUSE_BUTTON_UP,
    pygame.KEYDOWN: InputKind.KEY_DOWN,
    pygame.KEYUP: InputKind.KEY_UP,
    pygame.QUIT: InputKind.QUIT,
}


def translate_event(event: pygame.event.Event) -> InputEvent | None:
    """The game's view of a pygame event, or None for events it ignores."""
    kind = _KINDS.get(event.type)
    if kind is None:
        return None
    x, y = getattr(event, "pos", (0, 0))
    rel_x, rel_y = getattr(event, "rel", (0, 0))
    return InputEvent(kind, float(x), float(y), float(rel_x), float(rel_y))


def _capture_mouse() -> None:
    pygame.mouse.set_visible(False)
    pygame.event.set_grab(True)


def _mouse_position() -> tuple[float, float]:
    return pygame.mouse.get_pos()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aimlab", description="First-person aim trainer.")
    parser.add_argument(
        "--resources",
        type=Path,
        default=DEFAULT_RESOURCES,
        help="directory holding sounds and media",
    )
    parser.add_argument("--fps", type=int, default=60, help="frame rate cap")
    args = parser.parse_args(argv)

    try:
        pygame.display.init()
    except pygame.error as exc:
        print(f"SDL initialization failed: {exc}", file=sys.stderr)
        return 1
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
    except pygame.error as exc:
        print(f"Mixer initialization failed: {exc}", file=sys.stderr)
        pygame.quit()
        return 1

    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        _capture_mouse()

        state_manager = StateManager(mouse=_mouse_position, resources=args.resources)
        renderer = Renderer(screen, args.resources)
        frame_clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    renderer.surface = pygame.display.get_surface()
                elif event.type == pygame.WINDOWFOCUSGAINED:
                    _capture_mouse()
                else:
                    game_event = translate_event(event)
                    if game_event is None:
                        continue
                    state_manager.handle_input(game_event)
                    if state_manager.quit_game():
                        running = False

            state_manager.change_state()
            state_manager.update()
            state_manager.render(renderer)
            pygame.display.flip()
            frame_clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())