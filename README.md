# nightshift

Game logic for a night-watch survival game. The player sits in a security
office from midnight until 6 AM. The doors can be closed, the hall lights
switched on and the cameras watched, and each of these uses power. When the
power runs out, the lights go dark.

The package holds the rules and timers of the game. It does no drawing and
plays no sound. Everything advances one frame per call, and sound effects are
reported by name through callbacks that you supply.

## Modules

- `nightshift.state`: the `Scene` enum and a `SceneManager` that tracks the
  active scene. It starts on `Scene.MENU`. `enter(scene)` switches scenes and
  `is_active(scene)` reports which one is active. Unknown scenes raise
  `ValueError`.
- `nightshift.save`: `SaveData` (night, two unlocked extras, stars) and
  `SaveStore`, which keeps progress in four files in a directory (`saves` by
  default). Each file holds text spelled out in eight-bit groups
  (`encode_text` / `decode_text`).
  - `load()` reads the files and recreates them if they are all missing.
  - `save_progress(night)` records a survived night.
  - `clear()` writes a fresh save.
- `nightshift.office`: the `Office`, which holds the panning view, the door
  lights, the button panel frames and the door animations.
  - The methods are `move()`, `lights(chica_position, bonnie_position)`,
    `update_button_frames()`, `toggle_door()` and `step_doors()`.
  - Sounds are reported as `"light_on"`, `"light_off"`, `"door"` and
    `"scare"`.
- `nightshift.power`: the `PowerMeter`.
  - `update_usage(...)` counts lights, doors and the camera, caps usage at 4,
    and returns `True` once the power is at 0.
  - `drain(night)` runs the countdown to the next lost percent.
  - `drain_time_for(night)` gives the idle frames per percent for nights 1–7.
- `nightshift.clock`: the `NightClock`. It counts 5100 frames per hour. Each
  `tick()` returns a `ClockTick` that says whether the hour advanced, whether
  Bonnie or Chica should get harder, and whether 6 AM was reached.
- `nightshift.camera_views`: `AnimatronicPositions`, `normalize_freddy` and
  `camera_images(positions, night)`. The last returns the image path shown by
  each of the eleven cameras. An entry is `None` where the positions do not
  decide the picture.
- `nightshift.asset_paths`: the image paths of each named group
  (`group_paths`), the nine frames of each jumpscare (`jumpscare_paths`) and
  the ending picture for nights 5 and 7 (`ending_path`).
- `nightshift.assets`: an `AssetCache` that loads groups of images by name.
  By default it reads file bytes under a root directory; you can pass your
  own loader and releaser instead. Its methods are `load`, `unload`,
  `is_loaded` and `get`.
- `nightshift.vram`: `PixelFormat`, `memory_size(width, height, psm)` and a
  `VramAllocator` that hands out consecutive buffer offets
  (`static_buffer`) and absolute addresses (`static_texture`).
- `nightshift.transitions`: the timed screens between nights. These are
  `NewspaperScene`, `NightInfoScene`, `SixAmScene`, `PowerOutScene` and
  `JumpscareScene`.
  - Each has `reset()` and a `tick()` that reports when the scene is over.
  - `SixAmScene.tick(night)` returns the `Scene` that comes next.

## Installing

```
pip install .
```

## Example

```python
from nightshift.clock import NightClock
from nightshift.office import Office
from nightshift.power import PowerMeter

office = Office(play=print)
power = PowerMeter(night=1)
clock = NightClock()

office.toggle_door()            # start closing the left door
for _ in range(60):             # one second of game time
    office.step_doors()
    out = power.update_usage(office.left_on, office.right_on,
                             office.left_closed, office.right_closed, False)
    power.drain(night=1)
    tick = clock.tick()

print(office.left_closed, power.total, clock.display_hour)
```

## What the package does not do

- There is no command to run and no main loop that joins the scenes into a
  playable game. You drive the parts yourself, one frame at a time.
- Some parts of the game are not included:
  - the main menu
  - the custom-night screen
  - the camera switching controls
  - the animatronics' movement
- Nothing is drawn to a screen and no audio is played.

## Tests

```
pip install .[test]
pytest
```