"""Shared game records: directions, simple monster AI, colours, attacks and the world view."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, fields
from enum import Enum, IntEnum

from .clip import Point, Rect, Size


class MoveDir(IntEnum):
    NULL = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    ANGLE = 5
    TARGET = 6


class MonsterState(Enum):
    DEFAULT = 0
    MOVE = 1
    JUMP = 2
    TRACE = 3
    ATTACK = 4


_STATE_BY_CHOICE = {state.value: state for state in MonsterState}


class MonsterAI:
    """Picks a new random state every one to three seconds."""

    def __init__(self, max_state: int, rng: random.Random | None = None) -> None:
        self.max_state = max(max_state, 1)
        self._rng = rng if rng is not None else random.Random()
        self.state = MonsterState.DEFAULT
        self.move_dir: MoveDir | None = None
        self._state_time = 0.0
        self._state_end_time = 3.0

    def update(self, delta_time: float) -> MonsterState:
        """Advance the clock and return the current state."""
        if self._state_time >= self._state_end_time:
            self._state_end_time = float(self._rng.uniform(1.0, 3.0))
            choice = self._rng.randint(0, self.max_state)
            if choice == MonsterState.MOVE.value:
                self.move_dir = MoveDir.LEFT if self._rng.randint(0, 1) == 0 else MoveDir.RIGHT
            self.state = _STATE_BY_CHOICE.get(choice, self.state)
            self._state_time = 0.0
        self._state_time += delta_time
        return self.state

    def can_move(self, ground_rect: Rect, monster_rect: Rect, move_dist: int) -> bool:
        """Whether moving by ``move_dist`` keeps the monster over the ground."""
        if move_dist > 0:
            return monster_rect.right + move_dist < ground_rect.right
        return monster_rect.left + move_dist > ground_rect.left


@dataclass(frozen=True)
class Pixel:
    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def from_colorref(cls, color: int) -> "Pixel":
        """Unpack a 0x00BBGGRR colour value."""
        return cls(color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF)

    def to_colorref(self) -> int:
        return self.r | (self.g << 8) | (self.b << 16)


@dataclass
class AttackInfo:
    attack_img_size: Size = Size()
    attack_box_size: Size = Size()
    attack_start: Point = Point()
    attack_box: Rect = Rect()
    attacked_effect_tag: str = ""
    effect_size: Size = Size()
    attack_damage: int = 0
    attack_time: float = 0.0
    knock_back_power: int = 0
    attack_count_max: int = 0
    attack_object: int = 0
    attack_object_max: int = 0

    def set_attack_box_corners(self, left_top: Point, right_bottom: Point) -> None:
        self.attack_box = Rect(left_top.x, left_top.y, right_bottom.x, right_bottom.y)

    def set_attack_box(self, size: Size, center: Point) -> None:
        """Place the box from half a size before the centre to a full size after it."""
        self.attack_box = Rect(
            center.x - size.width // 2,
            center.y - size.height // 2,
            center.x + size.width,
            center.y + size.height,
        )

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)


@dataclass
class AnimationClipInfo:
    key: str = ""
    start_pt: Point = Point()
    frame_length: int = 0
    frame_time: float = 0.0


@dataclass
class BuffInfo:
    hp_heal: int = 0
    hp_up: int = 0
    hp_up_percent: float = 0.0
    mp_heal: int = 0
    mp_up: int = 0
    mp_up_percent: float = 0.0
    jump_power_up: int = 0
    jump_power_up_percent: float = 0.0
    damage_up: int = 0
    damage_up_percent: float = 0.0


@dataclass
class World:
    """The extent of the level and the part of it the camera shows."""

    size: Size
    client: Size
    camera: Point = field(default_factory=Point)

    def is_visible(self, rect: Rect) -> bool:
        half_w = self.client.width // 2
        half_h = self.client.height // 2
        if rect.left > self.camera.x + half_w or rect.right < self.camera.x - half_w:
            return False
        if rect.top > self.camera.y + half_h or rect.bottom < self.camera.y - half_h:
            return False
        return True