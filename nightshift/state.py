"""Which screen of the game is currently running."""

from __future__ import annotations

from enum import Enum


class Scene(Enum):
    """Every screen the main loop can be showing."""

    MENU = "menu"
    NEWSPAPER = "newspaper"
    NIGHTINFO = "nightinfo"
    OFFICE = "office"
    CUSTOM_NIGHT = "custom_night"
    SIX_AM = "six_am"
    POWER_OUT = "power_out"
    DEAD = "dead"
    ENDING = "ending"
    JUMPSCARE = "jumpscare"


class SceneManager:
    """Tracks the single active scene; the game starts on the menu."""

    def __init__(self, initial: Scene = Scene.MENU) -> None:
        self.current = Scene(initial)

    def enter(self, scene: Scene | str) -> Scene:
        """Switch to ``scene`` and return it; unknown scenes raise ValueError."""
        self.current = Scene(scene)
        return self.current

    def is_active(self, scene: Scene | str) -> bool:
        """Return True if ``scene`` is the one being shown."""
        return self.current is Scene(scene)

    def __repr__(self) -> str:
        return f"SceneManager(current={self.current!r})"