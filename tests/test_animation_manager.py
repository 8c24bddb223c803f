import pytest
from PIL import Image

from golemstage.animation import Animation
from golemstage.animation_manager import AnimationManager
from golemstage.clip import Point
from golemstage.structures import AnimationClipInfo


class _Loader:
    def __init__(self):
        self.calls = []

    def __call__(self, file_name):
        self.calls.append(file_name)
        return Image.new("RGB", (40, 40))


@pytest.fixture
def loader():
    return _Loader()


@pytest.fixture
def manager(loader):
    return AnimationManager(loader)


def test_get_animation_returns_distinct_copy(manager):
    proto = manager.add_animation("hero", "hero.bmp", Point(4, 4))
    first = manager.get_animation("hero")
    second = manager.get_animation("hero")
    assert first is not proto
    assert first is not second
    assert first.file_name == "hero.bmp"
    assert first.image is proto.image


def test_duplicate_key_keeps_first(manager, loader):
    manager.add_animation("hero", "hero.bmp", Point(4, 4))
    again = manager.add_animation("hero", "other.bmp", Point(2, 2))
    assert again.file_name == "hero.bmp"
    assert loader.calls == ["hero.bmp"]
    assert manager.keys == ["hero"]


def test_clips_are_added(manager):
    clips = [
        AnimationClipInfo("default", Point(0, 0), 2, 0.3),
        AnimationClipInfo("move", Point(0, 1), 3, 0.2),
    ]
    manager.add_animation("mob", "mob.bmp", Point(4, 4), clips)
    copy = manager.get_animation("mob")
    assert copy.clip_names == ["default", "move"]
    assert copy.clip("move").start_frame == Point(0, 1)


def test_set_clips_on_existing(manager):
    manager.add_animation("mob", "mob.bmp", Point(4, 4))
    manager.set_clips("mob", [AnimationClipInfo("die", Point(0, 3), 4, 0.3)])
    assert "die" in manager.get_animation("mob")


def test_set_clips_unknown_key(manager):
    with pytest.raises(KeyError):
        manager.set_clips("missing", [])


def test_get_unknown_is_none(manager):
    assert manager.get_animation("missing") is None


def test_copies_have_independent_clips(manager):
    clips = [AnimationClipInfo("default", Point(0, 0), 4, 0.1)]
    manager.add_animation("mob", "mob.bmp", Point(4, 4), clips)
    first = manager.get_animation("mob")
    second = manager.get_animation("mob")
    first.clip("default").update(0.2)
    assert first.clip("default").frame_pos == Point(1, 0)
    assert second.clip("default").frame_pos == Point(0, 0)


def test_find_by_file(manager):
    manager.add_animation("a", "a.bmp", Point(1, 1))
    manager.add_animation("b", "b.bmp", Point(1, 1))
    probe = Animation(None, "b.bmp", Point(1, 1))
    found = manager.find_by_file(probe)
    assert found.file_name == "b.bmp"
    assert manager.find_by_file(Animation(None, "zzz.bmp", Point(1, 1))) is None
    assert manager.find_by_file(None) is None