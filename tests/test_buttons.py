from aimlab.buttons import GameOverButtons, MainMenuButtons
from aimlab.events import ButtonEvent


def test_main_menu_starts_unclicked():
    buttons = MainMenuButtons()
    assert (buttons.clicked_play, buttons.clicked_exit) == (False, False)


def test_main_menu_play_click():
    buttons = MainMenuButtons()
    buttons.on_notify("MM_PLAY_BUTTON")
    assert buttons.clicked_play is True
    assert buttons.clicked_exit is False


def test_main_menu_exit_click():
    buttons = MainMenuButtons()
    buttons.on_notify("MM_EXIT_BUTTON")
    assert buttons.clicked_exit is True
    assert buttons.clicked_play is False


def test_main_menu_ignores_other_ids():
    buttons = MainMenuButtons()
    buttons.on_notify("EXIT_BUTTON")
    assert (buttons.clicked_play, buttons.clicked_exit) == (False, False)


def test_game_over_exit_click():
    buttons = GameOverButtons()
    buttons.on_notify("EXIT_BUTTON")
    assert buttons.clicked_exit is True
    assert buttons.clicked_restart is False


def test_game_over_restart_click():
    buttons = GameOverButtons()
    buttons.on_notify("RESTART_BUTTON")
    assert buttons.clicked_restart is True
    assert buttons.clicked_exit is False


def test_game_over_ignores_menu_ids():
    buttons = GameOverButtons()
    buttons.on_notify("MM_EXIT_BUTTON")
    assert (buttons.clicked_exit, buttons.clicked_restart) == (False, False)


def test_buttons_receive_clicks_through_button_event():
    clicks = ButtonEvent()
    buttons = MainMenuButtons()
    clicks.add_observer(buttons)
    clicks.notify("MM_PLAY_BUTTON")
    assert buttons.clicked_play is True