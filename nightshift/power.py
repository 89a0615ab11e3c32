"""The office's power supply and how fast it runs down."""

from __future__ import annotations

from typing import Optional

FULL_POWER = 99
MAX_USAGE = 4

_DRAIN_TIMES = {1: 600.0, 2: 540.0, 3: 540.0, 4: 480.0, 5: 420.0, 6: 420.0, 7: 420.0}
_BASE_TIMES = frozenset(_DRAIN_TIMES.values())
_USAGE_DIVISORS = {1: 2, 2: 4, 3: 6, 4: 8}


def drain_time_for(night: int) -> Optional[float]:
    """Frames per percent of power at idle on ``night``; None for other nights."""
    return _DRAIN_TIMES.get(night)


class PowerMeter:
    """Power left, current usage and the countdown to the next lost percent."""

    def __init__(self, night: Optional[int] = None) -> None:
        self.drain_time = 600.0
        self.reset(night)

    def reset(self, night: Optional[int] = None) -> None:
        """Refill the power; with ``night`` given, also restart its drain countdown."""
        self.usage = 0
        self.total = FULL_POWER
        self.light_usage = 0
        self.door_usage = 0
        self.cam_usage = 0
        self.tenths = 9
        self.ones = 9
        if night is not None:
            self._set_drain_time(night)

    def _set_drain_time(self, night: int) -> None:
        time = drain_time_for(night)
        if time is not None:
            self.drain_time = time

    def update_usage(
        self,
        left_on: bool,
        right_on: bool,
        left_closed: bool,
        right_closed: bool,
        camera_in_use: bool,
    ) -> bool:
        """Recount usage from what is switched on; return True once power is out."""
        self.light_usage = int(left_on) + int(right_on)
        self.door_usage = int(left_closed) + int(right_closed)
        self.cam_usage = int(camera_in_use)
        self.usage = min(self.light_usage + self.door_usage + self.cam_usage, MAX_USAGE)
        return self.total == 0

    def drain(self, night: int) -> None:
        """Advance the drain countdown by one frame, losing a percent when it runs out."""
        divisor = _USAGE_DIVISORS.get(self.usage)
        if divisor is not None and self.drain_time in _BASE_TIMES:
            self.drain_time /= divisor

        if self.drain_time <= 0:
            self.total -= 1
            self.ones -= 1
            if self.ones < 0 and self.tenths > 0:
                self.ones = 9
                self.tenths -= 1
            self._set_drain_time(night)
        else:
            self.drain_time -= 1