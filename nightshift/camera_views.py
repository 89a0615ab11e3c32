"""Chooses the picture each security camera shows for the animatronics' positions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

_MAIN = "romfs/gfx/office/camera/main/"
_ANIM = "romfs/gfx/office/camera/animatronic/"

CAMERA_COUNT = 11


@dataclass(frozen=True)
class AnimatronicPositions:
    """Route positions of the four animatronics; 0 is the starting room."""

    freddy: float = 0
    bonnie: float = 0
    chica: float = 0
    foxy: float = 0


def normalize_freddy(positions: AnimatronicPositions) -> AnimatronicPositions:
    """Keep Freddy on the stage until both Bonnie and Chica have left it."""
    f, b, c = positions.freddy, positions.bonnie, positions.chica
    if f > 0 and ((b == 0 and c == 0) or (b > 0 and c == 0) or (b == 0 and c > 0)):
        return replace(positions, freddy=0)
    return positions


def _show_stage(p: AnimatronicPositions, night: int) -> Optional[str]:
    f, b, c = p.freddy, p.bonnie, p.chica
    if f == 0 and b == 0 and c == 0:
        return _MAIN + "cam1a.png"
    if f == 0 and b > 0 and c == 0:
        return _ANIM + "cam1a/cam1a-freddy&chica.png"
    if f == 0 and b == 0 and c > 0:
        return _ANIM + "cam1a/cam1a-freddy&bonnie.png"
    if f == 0 and b > 0 and c > 0:
        if night < 4:
            return _ANIM + "cam1a/cam1a-freddy.png"
        return _ANIM + "cam1a/cam1a-freddystare.png"
    if f > 0 and b > 0 and c > 0:
        return _ANIM + "cam1a/cam1a-empty.png"
    return None


def _dining_area(p: AnimatronicPositions) -> Optional[str]:
    b1, b2 = p.bonnie == 1, p.bonnie == 2
    c1, c2 = p.chica == 1, p.chica == 2
    f1 = p.freddy == 1
    prefix = _ANIM + "cam1b/"

    if not b2 and not c2:
        if f1:
            return prefix + "cam1b-freddy.png"
        if b1:
            return prefix + "cam1b-bonnie.png"
        if c1:
            return prefix + "cam1b-chica.png"
        return _MAIN + "cam1b.png"
    if b2 and c2:
        return prefix + ("cam1b-freddy.png" if f1 else "cam1b-bonnieclose.png")
    if b2:
        if c1 or not f1:
            return prefix + "cam1b-bonnieclose.png"
        return None
    if b1 or not f1:
        return prefix + "cam1b-chicaclose.png"
    return None


def _pirate_cove(p: AnimatronicPositions) -> Optional[str]:
    if p.foxy == 0:
        return _MAIN + "cam1c.png"
    if p.foxy == 1:
        return _ANIM + "cam1c/cam1c-foxy1.png"
    if p.foxy == 2:
        return _ANIM + "cam1c/cam1c-foxy2.png"
    if p.foxy >= 3:
        return _ANIM + "cam1c/cam1c-foxy3.png"
    return None


def _single(present: bool, main: str, occupied: str) -> str:
    return _ANIM + occupied if present else _MAIN + main


def _east_hall(p: AnimatronicPositions) -> str:
    if p.freddy == 3:
        return _ANIM + "cam4a/cam4a-freddy.png"
    if p.chica == 3:
        return _ANIM + "cam4a/cam4a-chica.png"
    if p.chica == 4:
        return _ANIM + "cam4a/cam4a-chicaclose.png"
    return _MAIN + "cam4a.png"


def _east_corner(p: AnimatronicPositions) -> str:
    if p.freddy == 4:
        return _ANIM + "cam4b/cam4b-freddy.png"
    if p.chica == 5:
        return _ANIM + "cam4b/cam4b-chica.png"
    return _MAIN + "cam4b.png"


def _backstage(p: AnimatronicPositions, night: int) -> str:
    if p.bonnie != 7:
        return _MAIN + "cam5.png"
    if night > 4:
        return _ANIM + "cam5/cam5-bonnieclose.png"
    return _ANIM + "cam5/cam5-bonnie.png"


def _restrooms(p: AnimatronicPositions) -> str:
    if p.freddy == 2:
        return _ANIM + "cam7/cam7-freddy.png"
    if p.chica == 7:
        return _ANIM + "cam7/cam7-chica.png"
    if p.chica == 8:
        return _ANIM + "cam7/cam7-chicaclose.png"
    return _MAIN + "cam7.png"


def camera_images(positions: AnimatronicPositions, night: int) -> tuple[Optional[str], ...]:
    """Return the image path for each of the eleven cameras, in camera order.

    Freddy is normalised first. ``None`` marks a camera whose picture the
    combination of positions does not decide.
    """
    p = normalize_freddy(positions)
    return (
        _show_stage(p, night),
        _dining_area(p),
        _pirate_cove(p),
        _single(p.bonnie == 3, "cam2a.png", "cam2a/cam2a-bonnie.png"),
        _single(p.bonnie == 5, "cam2b.png", "cam2b/cam2b-bonnie.png"),
        _single(p.bonnie == 4, "cam3.png", "cam3/cam3-bonnie.png"),
        _east_hall(p),
        _east_corner(p),
        _backstage(p, night),
        _MAIN + "cam6.png",
        _restrooms(p),
    )