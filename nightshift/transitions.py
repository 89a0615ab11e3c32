"""Timed in-between screens: newspaper, night intro, 6 AM, power-out and jumpscare."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from .state import Scene

NEWSPAPER_FRAMES = 400
NIGHTINFO_FRAMES = 400

SIX_AM_CHANGE_FRAMES = 150
SIX_AM_RELOAD_FRAMES = 500

POWER_OUT_FRAMES = 1020
POWER_OUT_DARK_AT = 310
POWER_OUT_FLICKER_FRAMES = 15

FREDDY_JUMPSCARE = 1
JUMPSCARE_LAST_FRAME = 8
JUMPSCARE_FRAME_TIME = 1.3
JUMPSCARE_LOAD_DELAY = 2
JUMPSCARE_SOUND_FRAME = 1


def _nothing() -> None:
    return None


class NewspaperScene:
    """The newspaper shown before the first night."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.countdown = float(NEWSPAPER_FRAMES)
        self.deactivated = False

    @property
    def visible(self) -> bool:
        """Whether the paper is still drawn."""
        return not self.deactivated

    def tick(self) -> bool:
        """Advance one frame; True on the frame the night intro should begin."""
        if self.countdown <= 0 and not self.deactivated:
            self.deactivated = True
            return True
        self.countdown -= 1
        return False


class NightInfoScene:
    """The "Night N" card, during which the office is loaded."""

    def __init__(self, preload: Optional[Callable[[], None]] = None) -> None:
        self._preload = preload if preload is not None else _nothing
        self.reset()

    def reset(self) -> None:
        self.countdown = float(NIGHTINFO_FRAMES)
        self.office_loaded = False
        self.is_loading = False
        self.deactivated = False

    def tick(self) -> bool:
        """Load the office once, then count down; True when the office may start."""
        if not self.office_loaded and not self.is_loading:
            self.is_loading = True
            self._preload()
            self.office_loaded = True

        if self.countdown <= 0 and self.office_loaded and not self.deactivated:
            self.deactivated = True
            return True
        self.countdown -= 1
        return False


class SixAmScene:
    """The clock rolling from 5 to 6 AM at the end of a night."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.shown_hour = 5
        self.delay_change = float(SIX_AM_CHANGE_FRAMES)
        self.delay_reload = float(SIX_AM_RELOAD_FRAMES)

    def tick(self, night: int) -> Optional[Scene]:
        """Advance one frame; once the wait is over return where ``night`` leads."""
        if self.delay_change <= 0:
            self.shown_hour = 6
        else:
            self.delay_change -= 1

        if self.delay_reload > 0:
            self.delay_reload -= 1
            return None
        if night < 5:
            return Scene.NIGHTINFO
        if night == 6:
            return Scene.MENU
        if night in (5, 7):
            return Scene.ENDING
        return None


class PowerOutScene:
    """Freddy's face flickering in the dark after the power has gone."""

    def __init__(self, stop_music: Optional[Callable[[], None]] = None) -> None:
        self._stop_music = stop_music if stop_music is not None else _nothing
        self.reset()

    def reset(self) -> None:
        self.which_frame = 0
        self.frame_wait = float(POWER_OUT_FLICKER_FRAMES)
        self.total_wait = float(POWER_OUT_FRAMES)
        self.dark = False
        self.music_stopped = False

    def tick(self) -> bool:
        """Advance one frame; True when Freddy's jumpscare should start."""
        self.total_wait -= 1
        if self.total_wait == POWER_OUT_DARK_AT:
            self.dark = True

        if not self.dark:
            if self.frame_wait <= 0:
                self.which_frame = 0 if self.which_frame == 1 else 1
                self.frame_wait = float(POWER_OUT_FLICKER_FRAMES)
            else:
                self.frame_wait -= 1
            return False

        self.which_frame = 0
        if not self.music_stopped:
            self._stop_music()
            self.music_stopped = True
        if self.total_wait <= 0:
            self.total_wait = float(POWER_OUT_FRAMES)
            return True
        return False


class JumpscareScene:
    """A nine-frame jumpscare whose images load after a short delay.

    ``load`` is called with the number of the jumpscare (1 Freddy .. 4 Foxy);
    ``play`` receives ``"jumpscare"`` when the scream starts.
    """

    def __init__(
        self,
        which: int = FREDDY_JUMPSCARE,
        load: Optional[Callable[[int], None]] = None,
        play: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.which = which
        self._load = load if load is not None else (lambda _which: None)
        self._play = play if play is not None else (lambda _name: None)
        self.loaded = False
        self.wait_before_loading = float(JUMPSCARE_LOAD_DELAY)
        self.reset()

    def reset(self) -> None:
        self.which_frame = 0
        self.time_per_frame = JUMPSCARE_FRAME_TIME

    def _load_with_delay(self) -> None:
        if self.loaded:
            return
        if self.wait_before_loading <= 0:
            self._load(self.which)
            self.loaded = True
            self.wait_before_loading = float(JUMPSCARE_LOAD_DELAY)
        else:
            self.wait_before_loading -= 1

    def tick(self) -> bool:
        """Advance one frame; True when the animation is over and the player is dead."""
        self._load_with_delay()

        if self.time_per_frame > 0:
            self.time_per_frame -= 1
            return False

        self.time_per_frame = JUMPSCARE_FRAME_TIME
        if self.which_frame == JUMPSCARE_SOUND_FRAME:
            self._play("jumpscare")
        if self.which_frame < JUMPSCARE_LAST_FRAME:
            self.which_frame += 1
            return False
        self.which_frame = 0
        self.loaded = False
        return True