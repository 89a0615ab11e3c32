"""The security office: panning view, door lights and the two doors."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Optional

SoundPlayer = Callable[[str], None]

START_POSITIONS = (0.0, 480.0, -5.0, 550.0, 30.0, 480.0)
"""Starting x of the two office halves, the two button panels and the two doors."""

LEFT_LIMIT = -120.0
RIGHT_LIMIT = 0.0
SECOND_HALF_STOP = 364.0
LAST_DOOR_FRAME = 6
ANIMATRONIC_AT_DOOR = 6


class Direction(Enum):
    """Which way the view is being panned."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"


class OfficeFrame(int, Enum):
    """Which picture of the office is shown."""

    DARK = 0
    RIGHT_LIT_EMPTY = 1
    LEFT_LIT_EMPTY = 2
    LEFT_LIT_BONNIE = 3
    RIGHT_LIT_CHICA = 4


def _silent(_name: str) -> None:
    return None


class Office:
    """State of the office view, its lights and its doors.

    Sound effects are reported by name through ``play``: ``"light_on"``,
    ``"light_off"``, ``"door"`` and ``"scare"``.
    """

    def __init__(self, play: Optional[SoundPlayer] = None) -> None:
        self._play = play if play is not None else _silent
        self.speed = 1.0
        self.speed_multiplier = 5.0
        self.left_edge = False
        self.right_edge = True
        self.x_positions: list[float] = []
        self.reset()

    def reset(self) -> None:
        """Return lights, doors, buttons and view to the start of a night."""
        self.frame = OfficeFrame.DARK
        self.set_x()
        self.direction = Direction.NONE
        self.light_button_down = False

        self.left_on = False
        self.right_on = False
        self.left_closed = False
        self.right_closed = False
        self.closing_left = False
        self.opening_left = False
        self.closing_right = False
        self.opening_right = False

        self.left_button_frame = 0
        self.right_button_frame = 0

        self.door_anim_time = 1.0
        self.left_door_frame = 0
        self.right_door_frame = 0

    def set_x(self) -> None:
        """Put every part of the view back at its starting position."""
        self.x_positions = list(START_POSITIONS)

    def move(self) -> None:
        """Pan the view one step in ``direction`` and update the edge flags."""
        step = self.speed * self.speed_multiplier
        if self.direction is Direction.LEFT:
            if self.x_positions[1] > SECOND_HALF_STOP:
                self.x_positions = [x - step for x in self.x_positions]
                self.right_edge = True
        elif self.direction is Direction.RIGHT:
            if self.x_positions[0] < RIGHT_LIMIT:
                self.x_positions = [x + step for x in self.x_positions]

        first = self.x_positions[0]
        if first == LEFT_LIMIT:
            self.left_edge = True
            self.right_edge = False
        if first == RIGHT_LIMIT:
            self.right_edge = True
            self.left_edge = False
        if LEFT_LIMIT < first < RIGHT_LIMIT:
            self.left_edge = False
            self.right_edge = False

    def lights(self, chica_position: float, bonnie_position: float) -> None:
        """Light the door the view faces while the light button is held."""
        if self.light_button_down:
            # At the left edge of the panorama the right door is in view, and
            # at the right edge the left door.
            if self.left_edge:
                if chica_position != ANIMATRONIC_AT_DOOR:
                    self.frame = OfficeFrame.RIGHT_LIT_EMPTY
                else:
                    self.frame = OfficeFrame.RIGHT_LIT_CHICA
                    if not self.right_closed:
                        self._play("scare")
                self.right_on = True
                self._play("light_on")
            if self.right_edge:
                if bonnie_position != ANIMATRONIC_AT_DOOR:
                    self.frame = OfficeFrame.LEFT_LIT_EMPTY
                else:
                    self.frame = OfficeFrame.LEFT_LIT_BONNIE
                    if not self.left_closed:
                        self._play("scare")
                self.left_on = True
                self._play("light_on")
        else:
            self.frame = OfficeFrame.DARK
            if self.left_on:
                self.left_on = False
                self._play("light_off")
            if self.right_on:
                self.right_on = False
                self._play("light_off")

    def update_button_frames(self) -> None:
        """Pick the button panel pictures from the light and door states."""
        self.left_button_frame = 2 * self.left_on + self.left_closed
        self.right_button_frame = 2 * self.right_on + self.right_closed

    def toggle_door(self) -> None:
        """Start closing or opening the door the view faces."""
        if self.right_edge:
            if not self.closing_left and not self.left_closed:
                self.closing_left = True
                self._play("door")
            elif not self.opening_left and self.left_closed:
                self.opening_left = True
                self._play("door")
        elif self.left_edge:
            if not self.closing_right and not self.right_closed:
                self.closing_right = True
                self._play("door")
            elif not self.opening_right and self.right_closed:
                self.opening_right = True
                self._play("door")

    def _tick_anim(self) -> bool:
        if self.door_anim_time <= 0:
            return True
        self.door_anim_time -= 1
        return False

    def close_left(self) -> None:
        """Advance the left door's closing animation by one frame."""
        if self._tick_anim():
            if self.left_door_frame < LAST_DOOR_FRAME:
                self.left_door_frame += 1
                self.door_anim_time = 1.0
            else:
                self.closing_left = False
                self.left_closed = True

    def open_left(self) -> None:
        """Advance the left door's opening animation by one frame."""
        if self._tick_anim():
            if self.left_door_frame > 0:
                self.left_door_frame -= 1
                self.door_anim_time = 1.0
            else:
                self.opening_left = False
                self.left_closed = False

    def close_right(self) -> None:
        """Advance the right door's closing animation by one frame."""
        if self._tick_anim():
            if self.right_door_frame < LAST_DOOR_FRAME:
                self.right_door_frame += 1
                self.door_anim_time = 1.0
            else:
                self.closing_right = False
                self.right_closed = True

    def open_right(self) -> None:
        """Advance the right door's opening animation by one frame."""
        if self._tick_anim():
            if self.right_door_frame > 0:
                self.right_door_frame -= 1
                self.door_anim_time = 1.0
            else:
                self.opening_right = False
                self.right_closed = False

    def step_doors(self) -> None:
        """Run whichever door animations are in progress for one frame."""
        if self.closing_left:
            self.close_left()
        elif self.opening_left:
            self.open_left()
        if self.closing_right:
            self.close_right()
        elif self.opening_right:
            self.open_right()