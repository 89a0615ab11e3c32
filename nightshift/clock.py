"""The in-game clock that runs from 12 AM to 6 AM."""

from __future__ import annotations

from dataclasses import dataclass

FRAMES_PER_HOUR = 5100
"""At sixty frames a second an in-game hour lasts 85 seconds."""

LAST_HOUR = 6


@dataclass(frozen=True)
class ClockTick:
    """What one frame of the clock brought about."""

    hour: int
    advanced: bool = False
    raise_bonnie: bool = False
    raise_chica: bool = False
    six_am: bool = False


class NightClock:
    """Counts frames into hours and reports when the animatronics get harder."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Go back to midnight."""
        self.hour = 0
        self.frames_per_update = float(FRAMES_PER_HOUR)

    @property
    def display_hour(self) -> int:
        """The hour as shown on screen; midnight reads 12."""
        return 12 if self.hour == 0 else self.hour

    def tick(self) -> ClockTick:
        """Advance one frame.

        On reaching 6 AM the clock returns to midnight and the tick is
        marked ``six_am`` with ``hour`` 6.
        """
        if self.frames_per_update > 0:
            self.frames_per_update -= 1
            return ClockTick(hour=self.hour)

        self.hour += 1
        self.frames_per_update = float(FRAMES_PER_HOUR)
        hour = self.hour
        raise_bonnie = 2 <= hour <= 5
        raise_chica = 3 <= hour <= 5
        six_am = hour >= LAST_HOUR
        if six_am:
            self.hour = 0
        return ClockTick(
            hour=hour,
            advanced=True,
            raise_bonnie=raise_bonnie,
            raise_chica=raise_chica,
            six_am=six_am,
        )