"""The stone golem boss: a random pattern picker, bullet fans and a targeted laser."""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from enum import Enum

from PIL import Image, ImageDraw

from .animation import Animation
from .animation_manager import AnimationManager
from .clip import AnimationClip, Point, Rect, Size
from .effect import Effect
from .effect_manager import EffectManager
from .hpbar import HPBar
from .structures import AttackInfo, MoveDir, World

BOSS_ANIMATION = "BossAnimation"
BOSS_SHEET = "StoneGolem.png"
BOSS_GRID = Point(10, 9)
BOSS_SIZE = Size(800, 800)
HIT_BOX_ORIGIN = Size(48, 46)
MAX_HP = 1000
BULLET_TAG = "Boss"
FIRE_LIMIT_TIME = 1.25
LIMIT_POWER = -200
TIME_SCALE = 1.5
SPEED = 300.0
HP_COLOR = 0x0000FF
SHIELD_SIZE = Size(500, 500)

_CLIPS = (
    ("default", Point(0, 0), 4, 0.25),
    ("ready", Point(0, 1), 8, 0.2),
    ("fireArm", Point(0, 2), 9, 0.1),
    ("defence", Point(0, 3), 8, 0.1),
    ("defencing", Point(6, 3), 2, 1.0),
    ("attackGround", Point(0, 4), 7, 0.2),
    ("chargingLazer", Point(0, 5), 7, 3.5 / 7.0),
    ("fireLazer", Point(0, 5), 1, 2.5),
    ("die", Point(0, 7), 14, 0.1),
)

SpawnBullet = Callable[[str, Point, MoveDir, float], None]


class BossState(Enum):
    DEFAULT = 0
    MOVE = 1
    PATTERN = 2
    DOWN = 3
    DIE = 4
    CHARGING = 5
    LAZER = 6
    ATTACK = 7
    FIRE_READY = 8


class BossAI:
    """Waits a random while, then either idles again or picks one of two attack patterns."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.state = BossState.DEFAULT
        self.state_time = 0.0
        self.state_end_time = 0.0
        self.pattern_num = 0

    def choose_state(self) -> BossState:
        """Draw the next waiting time and state; four times in five a pattern."""
        self.state_end_time = float(self._rng.uniform(0.5, 3.0))
        if self._rng.randint(0, 4) == 0:
            return BossState.DEFAULT
        self.pattern_num = self._rng.randint(0, 1)
        return BossState.PATTERN

    def state_end(self) -> None:
        self.state_time = 0.0
        self.state = self.choose_state()

    def update(self, delta_time: float) -> None:
        self.state_time += delta_time
        if self.state_time >= self.state_end_time:
            self.state_end()


class Boss:
    """The boss of the last stage.

    Bullets are handed to ``spawn_bullet(tag, point, move_dir, angle)``. When the
    boss is not flying it falls with ``gravity`` and is held inside ``world``.
    """

    def __init__(
        self,
        animations: AnimationManager,
        effects: EffectManager | None,
        pt: Point,
        world: World | None = None,
        spawn_bullet: SpawnBullet | None = None,
        rng: random.Random | None = None,
    ) -> None:
        animations.add_animation(BOSS_ANIMATION, BOSS_SHEET, BOSS_GRID)
        animation = animations.get_animation(BOSS_ANIMATION)
        if animation is None:
            raise KeyError(f"no animation registered under {BOSS_ANIMATION!r}")
        self.animation: Animation = animation
        for name, start, length, frame_time in _CLIPS:
            animation.add_clip(name, start, length, frame_time)
        self.clip: AnimationClip = self._clip("default")

        self.effects = effects
        self.world = world
        self._spawn_bullet = spawn_bullet
        self._rng = rng if rng is not None else random.Random()
        self.ai = BossAI(self._rng)

        self.pt = pt
        self.prev_pt = Point()
        self.player_pt = Point()
        self.size = BOSS_SIZE
        self.hp = MAX_HP

        frame = self.clip.frame_size
        if frame.width <= 0:
            raise ValueError("the boss sprite sheet is too narrow for its frame grid")
        scale = self.size.width / frame.width
        self.hit_box_size = Size(int(HIT_BOX_ORIGIN.width * scale), int(HIT_BOX_ORIGIN.height * scale))
        self.hit_box_origin = self.hit_box_size
        self.hp_bar = HPBar(pt, HIT_BOX_ORIGIN, MAX_HP, HP_COLOR)

        self.warning = False
        self.targeting = True
        self._pattern_started = False
        self._pattern_ready = False
        self.fire_time = 0.0
        self.angle = 0.0

        self.power = 0
        self.limit_power = LIMIT_POWER
        self.time_scale = TIME_SCALE
        self.gravity = 0.0
        self.gravity_time = 0.0
        self.grounded = False
        self.flying = True

        self.move_effect: Effect | None = None
        self.skill_effect: Effect | None = None
        self._barrier_effect: Effect | None = None
        self._shield_started = False
        self._shield_shown = False

        self.special_time = 0.0
        self.special_limit_time = 0.0
        self.special_loop = 0
        self.special_loop_count = 0
        self.no_move = False
        self.special = False
        self.special_name = ""
        self.dying = False

        self.speed_origin = SPEED
        self.speed = SPEED
        self.dash = False
        self.alive = True

        self.invincible = False
        self.invincible_time = 0.0
        self.invincible_end_time = 0.0

        self.attack_info = AttackInfo()

    def _clip(self, name: str) -> AnimationClip:
        clip = self.animation.clip(name)
        if clip is None:
            raise KeyError(f"no clip named {name!r}")
        return clip

    @property
    def rect(self) -> Rect:
        """Hit box centred on the boss."""
        return Rect.centered(self.pt, self.hit_box_size)

    @property
    def render_rect(self) -> Rect:
        """Box the sprite is drawn into."""
        return Rect.centered(self.pt, self.size)

    def reset_jump_power(self) -> None:
        self.power = 0
        self.gravity_time = 0.0

    def set_power(self, power: int, time_clear: bool = False) -> None:
        self.power = power
        if time_clear:
            self.gravity_time = 0.0

    def on_ground(self, ground_top: int) -> None:
        self.set_power(0, True)
        self.grounded = True
        self.pt = Point(self.pt.x, ground_top)

    def hp_down(self, amount: int) -> None:
        """Take damage; at zero hit points the death animation starts."""
        self.hp -= amount
        if self.hp <= 0:
            self._die()

    def make_invincible(self, duration: float) -> None:
        self.invincible_time = 0.0
        self.invincible = True
        self.invincible_end_time = duration

    def invincible_end(self) -> None:
        if self.invincible_time >= self.invincible_end_time:
            self.invincible = False

    def _set_special_animation(self, no_move: bool, loop_count: int, name: str) -> None:
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

    def _check_special_animation_end(self, delta_time: float) -> bool:
        if self.special:
            self.special_time += delta_time
            if self.special_limit_time <= self.special_time:
                self.special_loop += 1
                self.special_time = 0.0
                if self.special_loop == self.special_loop_count:
                    return True
        return False

    def _back_to_default(self) -> None:
        self.skill_effect = None
        self.attack_info.reset()
        self.speed = self.speed_origin
        self.clip.reset()
        self.clip = self._clip("default")
        self.special = False
        self.no_move = False
        self.special_time = 0.0
        self.special_limit_time = 0.0
        self.special_loop = 0
        self.special_loop_count = 0
        self.special_name = "default"

    def _animation_cancel(self) -> None:
        if self.skill_effect is not None:
            self.skill_effect.end()
        self._back_to_default()

    def _special_animation_end(self) -> None:
        if not self.special:
            return
        if self.special_name == "die":
            self.alive = False
            return
        if self.skill_effect is not None:
            self.skill_effect.end()
        elif self.move_effect is not None:
            self.move_effect.end()
        self.dash = False
        self._back_to_default()

    def _apply_gravity(self, delta_time: float) -> None:
        if self.grounded and self.flying:
            return
        self.gravity_time += delta_time * self.time_scale
        self.power -= int(self.gravity * self.gravity_time * self.gravity_time * self.time_scale)
        if self.power <= self.limit_power:
            self.power = int(self.limit_power)
        self.prev_pt = self.pt
        dist = int(math.floor(self.power * delta_time * self.time_scale))
        self.pt = Point(self.pt.x, self.pt.y - dist)
        if self.world is not None:
            half = self.hit_box_size.height // 2
            if self.pt.y + half > self.world.size.height:
                self.set_power(0)
                self.pt = Point(self.pt.x, self.world.size.height - half)

    def _update_effect_pt(self) -> None:
        if self.move_effect is not None:
            self.move_effect.pt = self.pt

    def _spawn(self, pt: Point, move_dir: MoveDir, angle: float = 0.0) -> None:
        if self._spawn_bullet is not None:
            self._spawn_bullet(BULLET_TAG, pt, move_dir, angle)

    def _attack_ground(self, delta_time: float) -> None:
        if self.special_name != "attackGround" and not self._pattern_started:
            self._set_special_animation(True, 1, "attackGround")
            self._pattern_started = True
        if self._check_special_animation_end(delta_time):
            self._special_animation_end()
            self.attack_info.attack_start = Point(self.pt.x, self.pt.y + self.hit_box_size.height // 2)
            self.attack_info.attack_box_size = Size(100, 100)

    def _fire_bullet(self, delta_time: float) -> None:
        if self.special_name != "defence" and not self._pattern_started:
            self._pattern_started = True
            self._set_special_animation(True, 1, "defence")

        if self._check_special_animation_end(delta_time):
            self._pattern_ready = True
            self._special_animation_end()
            if self.special_name != "defencing":
                self._set_special_animation(True, 5, "defencing")
                self.fire_time = 2.5

        if not self._pattern_ready:
            return
        self.fire_time += delta_time
        if FIRE_LIMIT_TIME <= self.fire_time:
            count = self._rng.randint(8, 10)
            base = math.radians(360)
            step = math.radians(180) / count
            muzzle = Point(self.pt.x, self.pt.y - 100)
            for i in range(count + 1):
                self._spawn(muzzle, MoveDir.ANGLE, base + step * i)
            self.fire_time = 0.0

        if self._check_special_animation_end(delta_time):
            self._special_animation_end()
            self.fire_time = 0.0
            self._pattern_ready = False
            self._pattern_started = False
            self.ai.state_end()
            self.ai.state = BossState.DEFAULT

    def _attack_lazer(self, delta_time: float) -> None:
        if self.special_name != "chargingLazer" and not self._pattern_started:
            self._pattern_started = True
            self.warning = True
            self.targeting = True
            self._set_special_animation(True, 1, "chargingLazer")

        if self._check_special_animation_end(delta_time):
            self._pattern_ready = True
            self._special_animation_end()
            if self.special_name != "chargingLazer":
                self._set_special_animation(True, 2, "chargingLazer")
                self.fire_time = 2.5

        if not self._pattern_ready:
            return
        self.fire_time += delta_time
        if 1.0 <= self.fire_time:
            self._spawn(Point(self.pt.x, self.pt.y - 120), MoveDir.TARGET)
            self.fire_time = 0.0

        if self._check_special_animation_end(delta_time):
            self._special_animation_end()
            self.fire_time = 0.0
            self._pattern_ready = False
            self._pattern_started = False
            self.warning = False
            self.targeting = False

    def _die(self) -> None:
        self.dying = True
        self._animation_cancel()
        self._set_special_animation(True, 1, "die")

    def update(self, delta_time: float, player_pt: Point) -> None:
        """Advance timers, the AI and the current attack pattern."""
        if self.invincible:
            self.invincible_time += delta_time
            self.invincible_end()

        self.clip.update(delta_time)

        if self.targeting:
            self.player_pt = player_pt
        if not self.flying:
            self._apply_gravity(delta_time)

        self.angle = math.atan2(float(self.player_pt.y - self.pt.y), float(self.player_pt.x - self.pt.x))

        if not self._shield_started:
            if self.effects is not None:
                self._barrier_effect = self.effects.create_effect("CreateShieldEffect", SHIELD_SIZE, self.pt, 1)
            self._shield_started = True

        if self._barrier_effect is not None:
            if self._barrier_effect.check_end() and not self._shield_shown:
                if self.effects is not None:
                    self.effects.create_effect("ShieldEffect", SHIELD_SIZE, self.pt, 5)
                self._shield_shown = True
            self._barrier_effect = None

        if self.ai.state is BossState.DEFAULT:
            self.ai.update(delta_time)

        if self.ai.state is BossState.PATTERN:
            if self.ai.pattern_num == 0:
                self._fire_bullet(delta_time)
            elif self.ai.pattern_num == 1:
                self._attack_lazer(delta_time)

        self.grounded = False

        if self.ai.state is BossState.DEFAULT and self._check_special_animation_end(delta_time):
            self._special_animation_end()

    def render(self, dest: Image.Image) -> None:
        """Draw the golem facing the player, and the laser sight while charging."""
        reverse = self.player_pt.x < self.pt.x
        half = self.size.width // 2
        box = Rect(self.pt.x - half, self.pt.y - half, self.pt.x + half, self.pt.y + half)
        self.animation.render_scaled(dest, box, self.clip.image_rect, reverse, 0, 255)

        if self.warning:
            draw = ImageDraw.Draw(dest)
            draw.line(
                [(self.pt.x, self.pt.y - 100), (self.player_pt.x, self.player_pt.y)],
                fill=(255, 0, 0),
                width=3,
            )