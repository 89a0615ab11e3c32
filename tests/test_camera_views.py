import pytest

from nightshift.camera_views import (
    CAMERA_COUNT,
    AnimatronicPositions,
    camera_images,
    normalize_freddy,
)

MAIN = "romfs/gfx/office/camera/main/"


def test_empty_positions_show_main_images():
    images = camera_images(AnimatronicPositions(), 1)
    assert len(images) == CAMERA_COUNT
    names = ["cam1a", "cam1b", "cam1c", "cam2a", "cam2b", "cam3",
             "cam4a", "cam4b", "cam5", "cam6", "cam7"]
    assert images == tuple(f"{MAIN}{n}.png" for n in names)


@pytest.mark.parametrize(
    "positions",
    [
        AnimatronicPositions(freddy=2),
        AnimatronicPositions(freddy=2, bonnie=3),
        AnimatronicPositions(freddy=2, chica=3),
    ],
)
def test_freddy_held_on_stage(positions):
    assert normalize_freddy(positions).freddy == 0


def test_freddy_free_when_stage_empty():
    positions = AnimatronicPositions(freddy=2, bonnie=3, chica=3)
    assert normalize_freddy(positions) == positions
    assert camera_images(positions, 1)[0] == (
        "romfs/gfx/office/camera/animatronic/cam1a/cam1a-empty.png"
    )


def test_held_freddy_does_not_appear_elsewhere():
    images = camera_images(AnimatronicPositions(freddy=2), 1)
    assert images[10] == MAIN + "cam7.png"


def test_show_stage_stare_depends_on_night():
    positions = AnimatronicPositions(bonnie=1, chica=1)
    assert camera_images(positions, 3)[0].endswith("cam1a-freddy.png")
    assert camera_images(positions, 4)[0].endswith("cam1a-freddystare.png")


def test_dining_area_close_wins():
    images = camera_images(AnimatronicPositions(bonnie=2, chica=1), 1)
    assert images[1] == "romfs/gfx/office/camera/animatronic/cam1b/cam1b-bonnieclose.png"


def test_dining_area_undecided_case():
    positions = AnimatronicPositions(freddy=1, bonnie=2, chica=3)
    assert camera_images(positions, 1)[1] is None


def test_foxy_stages():
    paths = [camera_images(AnimatronicPositions(foxy=f), 1)[2] for f in (1, 2, 3, 4)]
    assert paths[0].endswith("cam1c-foxy1.png")
    assert paths[1].endswith("cam1c-foxy2.png")
    assert paths[2] == paths[3]
    assert paths[2].endswith("cam1c-foxy3.png")


def test_backstage_close_after_night_four():
    positions = AnimatronicPositions(bonnie=7)
    assert camera_images(positions, 4)[8].endswith("cam5-bonnie.png")
    assert camera_images(positions, 5)[8].endswith("cam5-bonnieclose.png")


def test_freddy_overrides_chica_in_east_hall():
    positions = AnimatronicPositions(freddy=3, bonnie=1, chica=4)
    assert camera_images(positions, 1)[6].endswith("cam4a-freddy.png")


def test_kitchen_is_always_plain():
    for positions in (AnimatronicPositions(), AnimatronicPositions(freddy=4, bonnie=5, chica=6, foxy=2)):
        assert camera_images(positions, 2)[9] == MAIN + "cam6.png"