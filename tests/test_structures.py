import random

from golemstage.clip import Point, Rect, Size
from golemstage.structures import (
    AnimationClipInfo,
    AttackInfo,
    BuffInfo,
    MonsterAI,
    MonsterState,
    MoveDir,
    Pixel,
    World,
)


class ScriptedRng:
    def __init__(self, ints, real=2.0):
        self._ints = list(ints)
        self._real = real
        self.int_calls = []

    def uniform(self, a, b):
        return self._real

    def randint(self, a, b):
        self.int_calls.append((a, b))
        return self._ints.pop(0)


def run_to_switch(ai):
    ai.update(3.0)
    return ai.update(0.0)


def test_ai_move_directions_carry_source_values():
    left = MonsterAI(4, ScriptedRng([1, 0]))
    run_to_switch(left)
    right = MonsterAI(4, ScriptedRng([1, 1]))
    run_to_switch(right)
    assert left.move_dir == 3
    assert right.move_dir == 4


def test_ai_starts_default():
    ai = MonsterAI(4, ScriptedRng([]))
    assert ai.update(0.5) is MonsterState.DEFAULT


def test_ai_switches_to_move_with_direction():
    ai = MonsterAI(4, ScriptedRng([1, 0]))
    assert run_to_switch(ai) is MonsterState.MOVE
    assert ai.move_dir is MoveDir.LEFT


def test_ai_move_right():
    ai = MonsterAI(4, ScriptedRng([1, 1]))
    run_to_switch(ai)
    assert ai.move_dir is MoveDir.RIGHT


def test_ai_jump():
    ai = MonsterAI(4, ScriptedRng([2]))
    assert run_to_switch(ai) is MonsterState.JUMP
    assert ai.move_dir is None


def test_ai_clamps_max_state():
    rng = ScriptedRng([0])
    ai = MonsterAI(0, rng)
    run_to_switch(ai)
    assert ai.max_state == 1
    assert rng.int_calls[0] == (0, 1)


def test_ai_with_real_rng_stays_in_range():
    ai = MonsterAI(1, random.Random(7))
    seen = {run_to_switch(ai)}
    for _ in range(20):
        ai.update(3.0)
        seen.add(ai.update(0.0))
    assert seen <= {MonsterState.DEFAULT, MonsterState.MOVE}


def test_can_move():
    ai = MonsterAI(1)
    ground = Rect(0, 100, 200, 120)
    monster = Rect(90, 60, 110, 100)
    assert ai.can_move(ground, monster, 10) is True
    assert ai.can_move(ground, monster, -10) is True
    assert ai.can_move(ground, monster, 90) is False
    assert ai.can_move(ground, monster, -90) is False


def test_pixel_from_colorref():
    pixel = Pixel.from_colorref(0xFF00FF)
    assert pixel == Pixel(255, 0, 255)


def test_pixel_round_trip():
    for color in (0x0000FF, 0x123456, 0xFFFFFF, 0):
        assert Pixel.from_colorref(color).to_colorref() == color


def test_attack_box_corners():
    info = AttackInfo()
    info.set_attack_box_corners(Point(1, 2), Point(30, 40))
    assert info.attack_box == Rect(1, 2, 30, 40)


def test_attack_box_from_center():
    info = AttackInfo()
    center = Point(100, 100)
    size = Size(20, 20)
    info.set_attack_box(size, center)
    assert info.attack_box.right - center.x == size.width
    assert info.attack_box.bottom - center.y == size.height
    assert info.attack_box.left < center.x


def test_attack_reset():
    info = AttackInfo()
    info.attack_damage = 10
    info.attacked_effect_tag = "hit"
    info.set_attack_box_corners(Point(1, 2), Point(3, 4))
    info.reset()
    assert info == AttackInfo()


def test_records_keep_values():
    clip_info = AnimationClipInfo("move", Point(0, 1), 3, 0.2)
    assert clip_info.start_pt == Point(0, 1)
    assert BuffInfo(hp_heal=5).hp_heal == 5


def test_world_visibility():
    world = World(Size(2000, 1000), Size(800, 600), Point(400, 300))
    assert world.is_visible(Rect(100, 100, 200, 200)) is True
    assert world.is_visible(Rect(1000, 100, 1100, 200)) is False
    assert world.is_visible(Rect(100, 700, 200, 800)) is False