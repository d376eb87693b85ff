import pytest

from aimlab.timer import Timer


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(1000)


def test_not_started_reports_zero(clock):
    timer = Timer(clock)
    assert timer.ticks() == 0
    assert timer.is_started() is False
    assert timer.is_paused() is False


def test_running_timer_measures_elapsed(clock):
    timer = Timer(clock)
    timer.start()
    start = clock.now
    clock.now += 250
    assert timer.ticks() == clock.now - start
    assert timer.is_started() is True


def test_pause_freezes_ticks(clock):
    timer = Timer(clock)
    timer.start()
    clock.now += 100
    timer.pause()
    frozen = timer.ticks()
    clock.now += 5000
    assert timer.ticks() == frozen
    assert timer.is_paused() is True


def test_unpause_resumes_from_paused_value(clock):
    timer = Timer(clock)
    timer.start()
    clock.now += 100
    timer.pause()
    frozen = timer.ticks()
    clock.now += 5000
    timer.unpause()
    clock.now += 40
    assert timer.ticks() == frozen + 40
    assert timer.is_paused() is False


def test_stop_resets(clock):
    timer = Timer(clock)
    timer.start()
    clock.now += 100
    timer.stop()
    assert timer.ticks() == 0
    assert timer.is_started() is False


def test_pause_without_start_does_nothing(clock):
    timer = Timer(clock)
    timer.pause()
    assert timer.is_paused() is False
    assert timer.ticks() == 0


def test_restart_resets_origin(clock):
    timer = Timer(clock)
    timer.start()
    clock.now += 300
    timer.start()
    assert timer.ticks() == 0


def test_default_clock_is_monotonic():
    timer = Timer()
    timer.start()
    first = timer.ticks()
    second = timer.ticks()
    assert 0 <= first <= second