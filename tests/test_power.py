import pytest

from nightshift.power import PowerMeter, drain_time_for


@pytest.mark.parametrize(
    "night, time",
    [(1, 600), (2, 540), (3, 540), (4, 480), (5, 420), (6, 420), (7, 420)],
)
def test_drain_time_for(night, time):
    assert drain_time_for(night) == time


@pytest.mark.parametrize("night", [0, 8, -1])
def test_drain_time_unknown_night(night):
    assert drain_time_for(night) is None


def test_new_meter_is_full():
    meter = PowerMeter(night=2)
    assert meter.total == 99
    assert (meter.tenths, meter.ones) == (9, 9)
    assert meter.drain_time == 540


def test_usage_idle():
    meter = PowerMeter(1)
    assert meter.update_usage(False, False, False, False, False) is False
    assert meter.usage == 0


def test_usage_counts_each_item():
    meter = PowerMeter(1)
    meter.update_usage(True, False, True, False, False)
    assert meter.light_usage == 1
    assert meter.door_usage == 1
    assert meter.usage == meter.light_usage + meter.door_usage + meter.cam_usage


def test_usage_capped_at_four():
    meter = PowerMeter(1)
    meter.update_usage(True, True, True, True, True)
    assert meter.usage == 4


def test_update_usage_reports_power_out():
    meter = PowerMeter(1)
    meter.total = 0
    assert meter.update_usage(False, False, False, False, False) is True


def test_idle_drain_counts_down_one_frame():
    meter = PowerMeter(1)
    start = meter.drain_time
    meter.drain(1)
    assert meter.drain_time == start - 1
    assert meter.total == 99


def test_losing_a_percent_restarts_countdown():
    meter = PowerMeter(1)
    for _ in range(1000):
        meter.drain(1)
        if meter.total != 99:
            break
    assert meter.total == 98
    assert meter.ones == 8
    assert meter.tenths == 9
    assert meter.drain_time == 600


def test_ones_roll_over_into_tenths():
    meter = PowerMeter(1)
    meter.ones = 0
    meter.tenths = 5
    meter.drain_time = 0
    meter.drain(1)
    assert meter.ones == 9
    assert meter.tenths == 4


def test_ones_do_not_roll_over_below_ten():
    meter = PowerMeter(1)
    meter.ones = 0
    meter.tenths = 0
    meter.total = 1
    meter.drain_time = 0
    meter.drain(1)
    assert meter.total == 0
    assert meter.tenths == 0
    assert meter.ones < 0


def test_usage_shortens_countdown():
    meter = PowerMeter(1)
    meter.update_usage(True, True, False, False, False)
    meter.drain(1)
    assert meter.drain_time == 149


def test_higher_usage_drains_faster():
    idle, busy = PowerMeter(3), PowerMeter(3)
    busy.update_usage(True, True, True, True, True)
    for _ in range(200):
        idle.drain(3)
        busy.drain(3)
    assert busy.total < idle.total


def test_reset_refills():
    meter = PowerMeter(1)
    meter.total = 10
    meter.ones = 0
    meter.tenths = 1
    meter.update_usage(True, True, True, True, True)
    meter.reset(4)
    assert meter.total == 99
    assert meter.usage == 0
    assert (meter.tenths, meter.ones) == (9, 9)
    assert meter.drain_time == 480


def test_reset_without_night_keeps_countdown():
    meter = PowerMeter(5)
    meter.drain_time = 12
    meter.reset()
    assert meter.drain_time == 12