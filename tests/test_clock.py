from nightshift.clock import FRAMES_PER_HOUR, ClockTick, NightClock


def _next_hour(clock):
    clock.frames_per_update = 0
    return clock.tick()


def test_starts_at_midnight():
    clock = NightClock()
    assert clock.hour == 0
    assert clock.frames_per_update == 5100
    assert clock.display_hour == 12


def test_tick_counts_down_frames():
    clock = NightClock()
    tick = clock.tick()
    assert tick == ClockTick(hour=0)
    assert clock.frames_per_update == FRAMES_PER_HOUR - 1


def test_hour_advances_after_full_count():
    clock = NightClock()
    ticks = [clock.tick() for _ in range(FRAMES_PER_HOUR + 1)]
    assert [t.advanced for t in ticks].count(True) == 1
    assert ticks[-1].advanced is True
    assert ticks[-1].hour == 1
    assert clock.hour == 1
    assert clock.display_hour == 1
    assert clock.frames_per_update == FRAMES_PER_HOUR


def test_first_hour_raises_nobody():
    clock = NightClock()
    tick = _next_hour(clock)
    assert tick.raise_bonnie is False
    assert tick.raise_chica is False
    assert tick.six_am is False


def test_difficulty_raises_through_the_night():
    clock = NightClock()
    ticks = [_next_hour(clock) for _ in range(6)]
    assert [t.hour for t in ticks] == [1, 2, 3, 4, 5, 6]
    assert [t.raise_bonnie for t in ticks] == [False, True, True, True, True, False]
    assert [t.raise_chica for t in ticks] == [False, False, True, True, True, False]
    assert [t.six_am for t in ticks] == [False] * 5 + [True]


def test_six_am_returns_to_midnight():
    clock = NightClock()
    for _ in range(6):
        _next_hour(clock)
    assert clock.hour == 0
    assert clock.display_hour == 12


def test_reset():
    clock = NightClock()
    _next_hour(clock)
    clock.tick()
    clock.reset()
    assert clock.hour == 0
    assert clock.frames_per_update == FRAMES_PER_HOUR