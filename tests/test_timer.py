from servercore.timer import (
    IntervalTimer,
    ShortIntervalTimer,
    ShortTimeTracker,
    TimeTracker,
    WorldTimer,
    get_ms_time_diff,
)


def test_diff_forward():
    assert get_ms_time_diff(100, 250) == 150


def test_diff_wraparound_takes_smaller():
    assert get_ms_time_diff(0xFFFFFFFF - 5, 10) == 15
    assert get_ms_time_diff(300, 200) == 100


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_world_timer_ticks():
    clock = FakeClock()
    timer = WorldTimer(clock)
    assert timer.get_ms_time() == 0
    clock.now += 0.5
    assert timer.tick() == 500
    assert timer.tick_time() == 500
    assert timer.tick_prev_time() == 0
    clock.now += 0.25
    assert timer.tick() == 250
    assert timer.tick_prev_time() == 500
    assert timer.tick_time() == 750


def test_interval_timer_clamps_and_resets():
    t = IntervalTimer(interval=100)
    t.update(-50)
    assert t.current == 0
    t.update(250)
    assert t.passed()
    t.reset()
    assert t.current == 150
    t.reset()
    t.reset()
    assert t.current == 50
    assert not t.passed()


def test_short_interval_timer_wraps():
    t = ShortIntervalTimer(interval=10, current=0xFFFFFFFF)
    t.update(1)
    assert t.current == 0
    assert not t.passed()
    t.update(25)
    t.reset()
    assert t.current == 15


def test_time_tracker():
    t = TimeTracker(100)
    t.update(60)
    assert not t.passed()
    t.update(40)
    assert t.passed()
    t.reset(30)
    assert t.expiry == 30
    assert not t.passed()


def test_short_time_tracker_default_passed_and_int32():
    t = ShortTimeTracker()
    assert t.passed()
    t.reset(-0x80000000)
    t.update(1)
    assert t.expiry == 0x7FFFFFFF
    assert not t.passed()