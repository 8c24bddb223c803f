"""Projectiles that fly in a direction, along an angle, or toward a target."""

from __future__ import annotations

import math

from PIL import Image

from .animation import Animation
from .animation_manager import AnimationManager
from .clip import AnimationClip, Point, Rect, Size
from .structures import MoveDir, World

BULLET_ANIMATION = "BulletAnimation"
BULLET_SHEET = "BulletBlue.png"
BULLET_GRID = Point(8, 8)
DEFAULT_SIZE = Size(150, 150)
HIT_BOX_SIZE = Size(80, 50)
SPEED = 700.0
LIMIT_MOVE_DIST = 500
LIMIT_TIME = 7.0

_STEPS = {
    MoveDir.UP: (0, -1),
    MoveDir.DOWN: (0, 1),
    MoveDir.LEFT: (-1, 0),
    MoveDir.RIGHT: (1, 0),
}


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


class Bullet:
    """A bullet with an animated sprite and a rectangular hit box.

    Without a ``world`` the bullet never leaves the level and is always drawn.
    """

    def __init__(
        self,
        animations: AnimationManager,
        tag: str,
        pt: Point,
        move_dir: MoveDir | int,
        angle: float = 0.0,
        size: Size | None = None,
        world: World | None = None,
    ) -> None:
        animations.add_animation(BULLET_ANIMATION, BULLET_SHEET, BULLET_GRID)
        animation = animations.get_animation(BULLET_ANIMATION)
        if animation is None:
            raise KeyError(f"no animation registered under {BULLET_ANIMATION!r}")
        self.animation: Animation = animation
        self.clip: AnimationClip = animation.add_clip("default", Point(0, 0), 60, 0.05)

        self.tag = tag
        self.pt = pt
        self.size = size if size is not None else DEFAULT_SIZE
        self.world = world
        self.move_dir = MoveDir(move_dir)
        self.moves_by_angle = self.move_dir is MoveDir.ANGLE
        self.targeting = self.move_dir is MoveDir.TARGET
        self.angle = float(angle) if self.moves_by_angle else 0.0

        self.speed = SPEED
        self.hit_box_size = HIT_BOX_SIZE
        self.move_dist = 0
        self.limit_move_dist = LIMIT_MOVE_DIST
        self.time = 0.0
        self.limit_time = LIMIT_TIME
        self.alive = True

    @property
    def render_rect(self) -> Rect:
        """Box the sprite is drawn into."""
        return Rect.centered(self.pt, self.size)

    @property
    def hit_rect(self) -> Rect:
        """Box used for collisions."""
        return Rect.centered(self.pt, self.hit_box_size)

    def check_out(self) -> None:
        """Kill the bullet once it has left the level."""
        if self.world is None:
            return
        half = self.hit_box_size.width // 2
        world_width = self.world.size.width
        if self.pt.x + half <= 0 or self.pt.x - half >= world_width:
            self.die()
        # The vertical bound is also measured against the level's width.
        if self.pt.y + half <= 0 or self.pt.y - half >= world_width:
            self.die()

    def update(self, delta_time: float, target: Point | None = None) -> None:
        """Advance animation and movement; with a target, steer toward it."""
        self.clip.update(delta_time)
        if target is not None:
            self.angle = math.atan2(float(target.y - self.pt.y), float(target.x - self.pt.x))
            self.move_angle(delta_time, self.angle)
            self.time += delta_time
            if self.limit_time <= self.time:
                self.die()
        elif self.moves_by_angle or self.targeting:
            self.move_angle(delta_time, self.angle)
        else:
            self.move(delta_time)
        self.check_out()

    def render(self, dest: Image.Image) -> None:
        """Draw the bullet when it is in view."""
        if self.world is not None and not self.world.is_visible(self.hit_rect):
            return
        if not self.moves_by_angle and not self.targeting:
            self.animation.render(dest, self.render_rect, self.clip.image_rect, 0)
        else:
            self.animation.render_rotated(
                dest, self.render_rect, self.clip.image_rect, self.clip.frame_size, self.angle
            )

    def move(self, delta_time: float) -> None:
        """Step in the fixed direction, dying after the distance limit."""
        step = _STEPS.get(self.move_dir)
        if step is None:
            return
        dist = int(self.speed * delta_time)
        self.pt = Point(self.pt.x + step[0] * dist, self.pt.y + step[1] * dist)
        self.move_dist += dist
        if self.move_dist >= self.limit_move_dist:
            self.die()

    def move_toward(self, delta_time: float, target: Point) -> None:
        """Step diagonally toward ``target`` at half speed."""
        step = int(round(self.speed / 2) * delta_time)
        dx = -step if target.x < self.pt.x else step
        dy = -step if target.y < self.pt.y else step
        self.pt = Point(self.pt.x + dx, self.pt.y + dy)

    def move_angle(self, delta_time: float, angle: float) -> None:
        """Step along ``angle`` at a quarter of the speed."""
        reach = (self.speed / 4) * delta_time
        self.pt = Point(
            self.pt.x + _round_half_away(math.cos(angle) * reach),
            self.pt.y + _round_half_away(math.sin(angle) * reach),
        )

    def die(self) -> None:
        self.alive = False