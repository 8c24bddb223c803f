import io
import struct

import pytest
from PIL import Image

from golemstage.animation_manager import AnimationManager
from golemstage.button import Button
from golemstage.clip import Point, Size
from golemstage.structures import MoveDir, World

RED = (255, 0, 0)
WHITE = (255, 255, 255)
BLUE = (0, 0, 255)


def _sheet(name):
    image = Image.new("RGB", (120, 20), WHITE)
    image.paste(Image.new("RGB", (60, 20), RED), (0, 0))
    return image


@pytest.fixture
def animations():
    return AnimationManager(_sheet)


def test_starts_with_disable_clip(animations):
    button = Button(animations, Point(100, 100))
    assert button.clip is button.animation.clip("disable")
    assert button.alive and not button.dying


def test_attack_presses_button(animations):
    button = Button(animations, Point(100, 100))
    start_bottom = button.hit_rect.bottom
    button.attacked(5, MoveDir.LEFT)
    assert button.dying and not button.alive
    assert button.hit_rect.height == 10
    assert button.hit_rect.bottom == start_bottom
    assert button.clip is button.animation.clip("enable")


def test_attack_while_dying_is_ignored(animations):
    button = Button(animations, Point(100, 100))
    button.attacked(5, MoveDir.LEFT)
    pressed = button.pt
    button.attacked(5, MoveDir.LEFT)
    assert button.pt == pressed


def test_revives_after_ten_seconds(animations):
    button = Button(animations, Point(100, 100))
    button.attacked(5, MoveDir.LEFT)
    button.update(5.0)
    assert not button.alive
    button.update(5.0)
    assert button.alive and not button.dying
    assert button.pt == Point(100, 100)
    assert button.hit_rect.height == 20
    assert button.clip is button.animation.clip("disable")


def test_invincibility_expires(animations):
    button = Button(animations, Point(100, 100))
    button.make_invincible(1.0)
    button.update(0.5)
    assert button.invincible
    button.update(0.6)
    assert not button.invincible


def test_on_ground_rests_on_top(animations):
    button = Button(animations, Point(100, 0))
    button.on_ground(100)
    assert button.grounded
    assert button.hit_rect.bottom == 100


def test_on_ground_without_top_keeps_position(animations):
    button = Button(animations, Point(100, 7))
    button.on_ground()
    assert button.grounded
    assert button.pt == Point(100, 7)


def test_save_writes_two_int32(animations):
    button = Button(animations, Point(30, 40))
    stream = io.BytesIO()
    button.save(stream)
    assert stream.getvalue() == struct.pack("<ii", 30, 40)


def test_save_load_round_trip(animations):
    stream = io.BytesIO()
    Button(animations, Point(-12, 345)).save(stream)
    stream.seek(0)
    other = Button(animations)
    other.load(stream)
    assert other.pt == Point(-12, 345)


def test_load_short_stream(animations):
    with pytest.raises(EOFError):
        Button(animations).load(io.BytesIO(b"\x01\x02"))


def test_unknown_special_animation(animations):
    with pytest.raises(KeyError):
        Button(animations).set_special_animation(False, 1, "missing")


def test_special_animation_ends_after_loops(animations):
    button = Button(animations, Point(100, 100))
    button.set_special_animation(False, 1, "disable")
    assert not button.check_special_animation_end(0.5)
    assert button.check_special_animation_end(0.5)
    button.special_animation_end()
    assert not button.special
    assert button.clip is button.animation.clip("enable")


def test_enable_special_end_kills(animations):
    button = Button(animations, Point(100, 100))
    button.set_special_animation(False, 1, "enable")
    button.special_animation_end()
    assert not button.alive


def test_render_raised_and_pressed(animations):
    dest = Image.new("RGB", (200, 200), BLUE)
    button = Button(animations, Point(100, 100))
    button.render(dest)
    assert dest.getpixel((100, 100)) == RED
    pressed_dest = Image.new("RGB", (200, 200), BLUE)
    button.die()
    button.render(pressed_dest)
    assert pressed_dest.getpixel((100, 105)) == BLUE


def test_render_out_of_view(animations):
    world = World(Size(1000, 1000), Size(100, 100), Point(800, 800))
    dest = Image.new("RGB", (200, 200), BLUE)
    Button(animations, Point(100, 100), world).render(dest)
    assert dest.getpixel((100, 100)) == BLUE