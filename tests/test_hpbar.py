import pytest
from PIL import Image

from golemstage.clip import Point, Size
from golemstage.hpbar import HPBar
from golemstage.structures import Pixel

RED = 0x0000FF


def _colored(bar):
    return sum(1 for row in bar.pixels for p in row if p != Pixel())


@pytest.fixture
def bar():
    return HPBar(Point(100, 100), Size(20, 20), 1000, RED)


def test_initially_black(bar):
    assert _colored(bar) == 0
    assert len(bar.pixels) == 5


def test_full_hp_fills_inner_rows(bar):
    bar.update(1000, Point(100, 100))
    assert bar.pixels[1][1] == Pixel(255, 0, 0)
    assert bar.pixels[0][1] == Pixel()
    assert bar.pixels[-1][1] == Pixel()
    assert bar.pixels[1][0] == Pixel()
    assert bar.pixels[1][-1] == Pixel()


def test_zero_and_negative_hp_empty(bar):
    bar.update(0, Point(100, 100))
    assert _colored(bar) == 0
    bar.update(-50, Point(100, 100))
    assert _colored(bar) == 0
    assert bar.percentage == 0.0


def test_fill_grows_with_hp(bar):
    bar.update(250, Point(0, 0))
    quarter = _colored(bar)
    bar.update(500, Point(0, 0))
    half = _colored(bar)
    bar.update(1000, Point(0, 0))
    full = _colored(bar)
    assert 0 < quarter < half < full


def test_position_follows_object(bar):
    bar.update(1000, Point(100, 100))
    assert bar.position == Point(100, 80)


def test_reset_color(bar):
    bar.update(1000, Point(0, 0))
    bar.reset_color()
    assert _colored(bar) == 0


def test_set_color(bar):
    bar.set_color(0x00FF00)
    bar.update(1000, Point(0, 0))
    assert bar.pixels[2][2] == Pixel.from_colorref(0x00FF00)


def test_render_paints_colored_pixels(bar):
    bar.update(500, Point(100, 100))
    dest = Image.new("RGB", (200, 200))
    bar.render(dest)
    assert list(dest.getdata()).count((255, 0, 0)) == _colored(bar)


def test_invalid_max_hp():
    with pytest.raises(ValueError):
        HPBar(Point(0, 0), Size(10, 10), 0, RED)