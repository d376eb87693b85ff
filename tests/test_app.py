import pygame
import pytest

from aimlab.app import main, translate_event
from aimlab.events import InputEvent, InputKind


def test_mouse_motion_carries_position_and_relative_motion():
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 20), rel=(3, -4), buttons=(0, 0, 0))
    assert translate_event(event) == InputEvent(InputKind.MOUSE_MOTION, 10.0, 20.0, 3.0, -4.0)


def test_mouse_button_down_carries_position():
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(300, 250), button=1)
    result = translate_event(event)
    assert result.kind is InputKind.MOUSE_BUTTON_DOWN
    assert (result.x, result.y) == (300.0, 250.0)


def test_mouse_button_up_kind():
    event = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(1, 2), button=1)
    assert translate_event(event).kind is InputKind.MOUSE_BUTTON_UP


def test_key_and_quit_events():
    assert translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)).kind is (
        InputKind.KEY_DOWN
    )
    assert translate_event(pygame.event.Event(pygame.QUIT)).kind is InputKind.QUIT


def test_unknown_event_is_ignored():
    assert translate_event(pygame.event.Event(pygame.USEREVENT)) is None


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--resources" in capsys.readouterr().out