"""A floor button that is pressed by an attack and springs back after a while."""

from __future__ import annotations

import struct
from typing import BinaryIO

from PIL import Image

from .animation import Animation
from .animation_manager import AnimationManager
from .clip import AnimationClip, Point, Rect, Size
from .structures import World

BUTTON_ANIMATION = "ButtonAnimation"
BUTTON_SHEET = "Button.bmp"
BUTTON_GRID = Point(2, 1)
BUTTON_SIZE = Size(60, 20)
PRESSED_HIT_BOX = Size(60, 10)
RAISED_HIT_BOX = Size(60, 20)
REVIVE_TIME = 10.0
WHITE = 0xFFFFFF

_POINT = struct.Struct("<ii")


class Button:
    """A button that sinks when hit and pops up again after ``REVIVE_TIME`` seconds.

    Without a ``world`` the button is always drawn.
    """

    def __init__(self, animations: AnimationManager, pt: Point = Point(), world: World | None = None) -> None:
        animations.add_animation(BUTTON_ANIMATION, BUTTON_SHEET, BUTTON_GRID)
        animation = animations.get_animation(BUTTON_ANIMATION)
        if animation is None:
            raise KeyError(f"no animation registered under {BUTTON_ANIMATION!r}")
        self.animation: Animation = animation
        animation.add_clip("disable", Point(0, 0), 1, 1.0)
        animation.add_clip("enable", Point(1, 0), 1, 1.0)
        self.clip: AnimationClip = self._clip("disable")

        self.pt = pt
        self.prev_pt = Point()
        self.size = BUTTON_SIZE
        self.hit_box_size = RAISED_HIT_BOX
        self.world = world
        self.hp = 1000
        self.time = 0.0
        self.revive_time = REVIVE_TIME

        self.special_time = 0.0
        self.special_limit_time = 0.0
        self.special_loop = 0
        self.special_loop_count = 0
        self.special = False
        self.no_move = False
        self.special_name = ""
        self.dying = False

        self.invincible = False
        self.invincible_time = 0.0
        self.invincible_end_time = 0.0

        self.power = 0.0
        self.gravity_time = 0.0
        self.grounded = False
        self.alive = True

    def _clip(self, name: str) -> AnimationClip:
        clip = self.animation.clip(name)
        if clip is None:
            raise KeyError(f"no clip named {name!r}")
        return clip

    @property
    def hit_rect(self) -> Rect:
        return Rect.centered(self.pt, self.hit_box_size)

    @property
    def render_rect(self) -> Rect:
        return Rect.centered(self.pt, self.size)

    @property
    def prev_rect(self) -> Rect:
        return Rect.centered(self.prev_pt, self.hit_box_size)

    def on_ground(self, ground_top: int | None = None) -> None:
        """Mark as standing; with ``ground_top``, rest the hit box on it."""
        self.grounded = True
        if ground_top is None:
            return
        self.pt = Point(self.pt.x, ground_top - self.hit_box_size.height // 2)
        self.power = 0.0
        self.gravity_time = 0.0

    def attacked(
        self,
        damage: int,
        direction: int,
        attack_time: float = -1.0,
        knock_back_power: int = 0,
    ) -> None:
        """Any hit presses the button unless it is already going down."""
        if self.dying:
            return
        self.die()

    def make_invincible(self, duration: float) -> None:
        self.invincible_time = 0.0
        self.invincible_end_time = duration
        self.invincible = True

    def invincible_end(self) -> None:
        if self.invincible_end_time <= self.invincible_time:
            self.invincible = False

    def update(self, delta_time: float) -> None:
        self.clip.update(delta_time)
        if self.invincible:
            self.invincible_time += delta_time
            self.invincible_end()
        if not self.alive:
            self.time += delta_time
            if self.time >= self.revive_time:
                self.revive()
                self.time = 0.0
        if self.check_special_animation_end(delta_time):
            self.special_animation_end()

    def render(self, dest: Image.Image) -> None:
        """Draw the current frame, white being transparent, when in view."""
        if self.world is not None and not self.world.is_visible(self.hit_rect):
            return
        self.animation.render(dest, self.render_rect, self.clip.image_rect, WHITE)

    def set_default_animation(self) -> None:
        self.clip.reset()
        self.clip = self._clip("disable")
        self.special = False
        self.no_move = False
        self.special_limit_time = self.clip.loop_time

    def set_special_animation(self, no_move: bool, loop_count: int, name: str) -> None:
        """Play clip ``name`` for ``loop_count`` passes unless one is already playing."""
        if self.special:
            return
        clip = self._clip(name)
        self.clip.reset()
        self.clip = clip
        self.special = True
        self.no_move = no_move
        self.special_time = 0.0
        self.special_limit_time = clip.loop_time
        self.special_loop = 0
        self.special_loop_count = loop_count
        self.special_name = name

    def check_special_animation_end(self, delta_time: float) -> bool:
        if self.special:
            self.special_time += delta_time
            if self.special_limit_time <= self.special_time:
                self.special_loop += 1
                self.special_time = 0.0
                if self.special_loop == self.special_loop_count:
                    return True
        return False

    def special_animation_end(self) -> None:
        if not self.special:
            return
        if self.special_name == "enable":
            self.alive = False
            return
        self.clip.reset()
        self.clip = self._clip("enable")
        self.special = False
        self.no_move = False
        self.special_time = 0.0
        self.special_limit_time = 0.0
        self.special_loop = 0
        self.special_loop_count = 0
        self.special_name = "enable"

    def die(self) -> None:
        """Press the button down."""
        self.dying = True
        self.alive = False
        self.hit_box_size = PRESSED_HIT_BOX
        self.pt = Point(self.pt.x, self.pt.y + 10)
        self.set_special_animation(False, 0, "enable")

    def revive(self) -> None:
        """Raise the button again."""
        self.dying = False
        self.alive = True
        self.hit_box_size = RAISED_HIT_BOX
        self.pt = Point(self.pt.x, self.pt.y - 10)
        self.set_default_animation()

    def save(self, stream: BinaryIO) -> None:
        """Write the position as two little-endian 32-bit integers."""
        stream.write(_POINT.pack(self.pt.x, self.pt.y))

    def load(self, stream: BinaryIO) -> None:
        data = stream.read(_POINT.size)
        if len(data) < _POINT.size:
            raise EOFError("stream ended before the button position")
        self.pt = Point(*_POINT.unpack(data))