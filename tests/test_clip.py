import pytest

from golemstage.clip import AnimationClip, Point, Rect, Size


def make_clip(start=Point(0, 0), length=2, grid=Point(4, 4), image=Size(400, 200), frame_time=0.3):
    return AnimationClip(start, length, grid, image, frame_time)


def test_rect_centered_keeps_size_and_center():
    rect = Rect.centered(Point(50, 40), Size(20, 10))
    assert rect.width == 20
    assert rect.height == 10
    assert (rect.left + rect.right) // 2 == 50
    assert (rect.top + rect.bottom) // 2 == 40


def test_frame_size_divides_image_by_grid():
    clip = make_clip(grid=Point(4, 2), image=Size(400, 200))
    assert clip.frame_size.width * 4 == 400
    assert clip.frame_size.height * 2 == 200


def test_starts_at_start_frame():
    start = Point(1, 2)
    clip = make_clip(start=start)
    assert clip.frame_pos == start


def test_no_advance_before_frame_time():
    start = Point(0, 1)
    clip = make_clip(start=start, frame_time=0.3)
    clip.update(0.1)
    assert clip.frame_pos == start


def test_advances_and_loops():
    start = Point(0, 0)
    clip = make_clip(start=start, length=2)
    clip.update(0.3)
    assert clip.frame_pos == Point(start.x + 1, start.y)
    clip.update(0.3)
    assert clip.frame_pos == start


def test_wraps_to_next_row():
    start = Point(3, 0)
    clip = make_clip(start=start, length=3, grid=Point(4, 4))
    clip.update(0.3)
    assert clip.frame_pos == Point(0, start.y + 1)


def test_stop_and_resume():
    start = Point(0, 0)
    clip = make_clip(start=start)
    clip.stop()
    clip.update(1.0)
    assert clip.frame_pos == start
    clip.resume()
    clip.update(1.0)
    assert clip.frame_pos == Point(start.x + 1, start.y)


def test_reset_rewinds():
    start = Point(0, 0)
    clip = make_clip(start=start, length=3)
    clip.update(0.3)
    clip.reset()
    assert clip.frame_pos == start


def test_loop_time_is_length_times_frame_time():
    clip = make_clip(length=5, frame_time=0.2)
    assert clip.loop_time == pytest.approx(5 * 0.2)


def test_image_rect_matches_frame():
    clip = make_clip(start=Point(2, 1))
    rect = clip.image_rect
    size = clip.frame_size
    assert rect.width == size.width
    assert rect.height == size.height
    assert rect.left == clip.frame_pos.x * size.width
    assert rect.top == clip.frame_pos.y * size.height


def test_copy_is_rewound_and_independent():
    start = Point(0, 0)
    clip = make_clip(start=start, length=3)
    clip.update(0.3)
    clone = clip.copy()
    assert clone.frame_pos == start
    assert clone.loop_time == pytest.approx(clip.loop_time)
    clone.update(0.3)
    clone.update(0.3)
    assert clip.frame_pos == Point(start.x + 1, start.y)


def test_empty_grid_is_rejected():
    with pytest.raises(ValueError):
        make_clip(grid=Point(0, 4))