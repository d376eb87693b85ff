import pytest

from aimlab.events import (
    ButtonEvent,
    ButtonObserver,
    Event,
    InputEvent,
    InputKind,
    Observer,
    Subject,
)


class RecordingObserver(Observer):
    def __init__(self):
        self.seen = []

    def on_notify(self, event):
        self.seen.append(event)


class RecordingButtons(ButtonObserver):
    def __init__(self):
        self.seen = []

    def on_notify(self, button_id):
        self.seen.append(button_id)


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        Observer()


def test_button_observer_is_abstract():
    with pytest.raises(TypeError):
        ButtonObserver()


def test_subject_notifies_all_observers_in_order():
    subject = Subject()
    first, second = RecordingObserver(), RecordingObserver()
    subject.add_observer(first)
    subject.add_observer(second)
    subject.notify(Event.TARGET_SHOT)
    subject.notify(Event.TARGETS_MISSED)
    assert first.seen == [Event.TARGET_SHOT, Event.TARGETS_MISSED]
    assert second.seen == first.seen


def test_subject_remove_stops_notifications():
    subject = Subject()
    kept, removed = RecordingObserver(), RecordingObserver()
    subject.add_observer(kept)
    subject.add_observer(removed)
    subject.add_observer(removed)
    subject.remove_observer(removed)
    subject.notify(Event.TARGET_SHOT)
    assert removed.seen == []
    assert kept.seen == [Event.TARGET_SHOT]


def test_subject_remove_unknown_observer_is_harmless():
    subject = Subject()
    observer = RecordingObserver()
    subject.add_observer(observer)
    subject.remove_observer(RecordingObserver())
    subject.notify(Event.TARGETS_MISSED)
    assert observer.seen == [Event.TARGETS_MISSED]


def test_button_event_notifies_with_id():
    clicks = ButtonEvent()
    listener = RecordingButtons()
    clicks.add_observer(listener)
    clicks.notify("MM_PLAY_BUTTON")
    assert listener.seen == ["MM_PLAY_BUTTON"]


def test_button_event_remove_observer():
    clicks = ButtonEvent()
    listener = RecordingButtons()
    clicks.add_observer(listener)
    clicks.remove_observer(listener)
    clicks.notify("EXIT_BUTTON")
    assert listener.seen == []


def test_input_event_defaults():
    event = InputEvent(InputKind.MOUSE_BUTTON_DOWN)
    assert event.kind is InputKind.MOUSE_BUTTON_DOWN
    assert (event.x, event.y, event.rel_x, event.rel_y) == (0.0, 0.0, 0.0, 0.0)


def test_input_event_is_frozen():
    event = InputEvent(InputKind.MOUSE_MOTION, rel_x=3.0, rel_y=-2.0)
    assert event.rel_x == 3.0 and event.rel_y == -2.0
    with pytest.raises(AttributeError):
        event.rel_x = 1.0  # type: ignore[misc]