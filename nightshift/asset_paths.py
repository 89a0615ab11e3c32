"""Image files that make up each group of graphics the game loads together."""

from __future__ import annotations

from typing import Optional

_GFX = "romfs/gfx/"


def _numbered(template: str, numbers) -> tuple[str, ...]:
    return tuple(template.format(n) for n in numbers)


_CAM_NAMES = (
    "ShowStage", "DiningArea", "PirateCove", "W-Hall", "W-Hall-corner", "Closet",
    "E-Hall", "E-Hall-corner", "BackStage", "Kitchen", "Restrooms",
)
_CAM_IDS = ("cam1a", "cam1b", "cam1c", "cam2a", "cam2b", "cam3", "cam4a", "cam4b", "cam5", "cam6", "cam7")
_OFFICE_CHUNKS = ("nothing", "left-empty", "right-empty", "left-bonnie", "right-chika")
_CUSTOM_CAST = ("freddy", "bonnie", "chika", "foxy")

_GROUPS: dict[str, tuple[str, ...]] = {
    "menu_background": _numbered(_GFX + "menu/frame_{}.png", range(1, 5)),
    "logo": (_GFX + "menu/logo.png",),
    "copyright": (_GFX + "menu/copyright.png",),
    "text_and_cursor": (
        _GFX + "menu/selection/continue.png",
        _GFX + "menu/selection/newGame.png",
        _GFX + "menu/selection/6thNight.png",
        _GFX + "menu/selection/customNight.png",
        _GFX + "menu/selection/arrow.png",
    ),
    "static": _numbered(_GFX + "menu/static/image{}_480x272.png", range(1, 5)),
    "newspaper": (_GFX + "newspaper/paper.png",),
    "no_power": (_GFX + "powerout/freddy1.png", _GFX + "powerout/freddy2.png"),
    "star": (_GFX + "menu/star.png",),
    "nightinfo": (_GFX + "nightinfo/info.png", _GFX + "nightinfo/clock.png"),
    "buttons": _numbered(_GFX + "office/buttons/left/left_{}.png", range(4))
    + _numbered(_GFX + "office/buttons/right/right_{}.png", range(4)),
    "doors": _numbered(_GFX + "office/doors/left/door_{}.png", range(1, 8))
    + _numbered(_GFX + "office/doors/right/door_{}.png", range(1, 8)),
    "power_info": _numbered(_GFX + "office/ui/bar_{}.png", range(1, 6))
    + (_GFX + "office/ui/usage.png", _GFX + "office/ui/powerLeft.png"),
    "time_info": (_GFX + "office/ui/AM.png", _GFX + "office/ui/Night.png"),
    "cam_flip": _numbered(_GFX + "office/camera/animation/flip_{}.png", range(4)),
    "cam_ui": (
        _GFX + "office/ui/camera_border.png",
        _GFX + "office/ui/camera-map.png",
        _GFX + "office/ui/recording.png",
    )
    + tuple(f"{_GFX}office/ui/cam-names/{name}.png" for name in _CAM_NAMES)
    + tuple(f"{_GFX}office/camera/main/buttons/{cam}.png" for cam in _CAM_IDS)
    + (_GFX + "office/camera/main/buttons/reticle.png",),
    "customnight_icons": tuple(f"{_GFX}customnight/icons/{who}.png" for who in _CUSTOM_CAST),
    "customnight_reticle": (_GFX + "customnight/icons/reticle.png",),
    "customnight_instructions": (_GFX + "customnight/ui/L.png", _GFX + "customnight/ui/R.png"),
    "customnight_title": (_GFX + "customnight/ui/title.png",),
    "customnight_arrows": (_GFX + "customnight/ui/left.png", _GFX + "customnight/ui/right.png"),
    "customnight_text": (_GFX + "customnight/ui/AI.png", _GFX + "customnight/ui/difficulty.png"),
    "customnight_names": tuple(f"{_GFX}customnight/ui/{who}.png" for who in _CUSTOM_CAST),
    "customnight_actions": (_GFX + "customnight/ui/create.png", _GFX + "customnight/ui/exit.png"),
    "customnight_gold": (_GFX + "customnight/ui/gold.png",),
    "office1": tuple(f"{_GFX}office/chuncks/{chunk}/office_1.png" for chunk in _OFFICE_CHUNKS),
    "office2": tuple(f"{_GFX}office/chuncks/{chunk}/office_2.png" for chunk in _OFFICE_CHUNKS),
    "night_text": (_GFX + "global/numbers/normal/0-2.png",)
    + _numbered(_GFX + "global/numbers/normal/{}.png", range(1, 10))
    + _numbered(_GFX + "global/numbers/pixel/{}.png", range(10))
    + (_GFX + "global/numbers/symbols/%.png",),
}

GROUP_NAMES = tuple(_GROUPS)

_JUMPSCARERS = {1: "freddy", 2: "bonnie", 3: "chica", 4: "foxy"}


def group_paths(name: str) -> tuple[str, ...]:
    """Paths of the images in the group ``name``, in load order.

    Unknown group names raise KeyError.
    """
    try:
        return _GROUPS[name]
    except KeyError:
        raise KeyError(f"unknown image group: {name!r}") from None


def jumpscare_paths(which: float) -> tuple[str, ...]:
    """The nine animation frames for jumpscare ``which`` (1 Freddy .. 4 Foxy).

    Any other value selects no animation and gives an empty tuple.
    """
    who = _JUMPSCARERS.get(which)
    if who is None:
        return ()
    return _numbered(_GFX + "jumpscare/" + who + "/{}.png", range(9))


def ending_path(night: int) -> Optional[str]:
    """The ending picture after ``night``; only nights 5 and 7 have one."""
    if night == 5:
        return _GFX + "ending/good.png"
    if night == 7:
        return _GFX + "ending/bad.png"
    return None