"""A small health bar drawn above an object."""

from __future__ import annotations

from PIL import Image

from .clip import Point, Size
from .structures import Pixel

BAR_SIZE = Size(50, 5)
_BLACK = Pixel()


def _half(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


class HPBar:
    """A pixel grid filled in proportion to the remaining hit points."""

    def __init__(self, obj_pt: Point, hit_box_size: Size, max_hp: int, color: int) -> None:
        if max_hp <= 0:
            raise ValueError(f"max_hp must be positive, got {max_hp}")
        self.max_hp = max_hp
        self.hit_box_size = hit_box_size
        self.position = Point(obj_pt.x, obj_pt.y - 10)
        self.percentage = 1.0
        self.color = Pixel.from_colorref(color)
        self.pixels = [[_BLACK] * (BAR_SIZE.width + 2) for _ in range(BAR_SIZE.height)]

    def set_color(self, color: int) -> None:
        self.color = Pixel.from_colorref(color)

    def reset_color(self) -> None:
        self.pixels = [[_BLACK] * len(row) for row in self.pixels]

    def update(self, hp: int, obj_pt: Point) -> None:
        """Follow the object and refill the bar for ``hp``."""
        self.position = Point(obj_pt.x, obj_pt.y - _half(self.hit_box_size.height) - 10)
        hp = max(hp, 0)
        self.percentage = hp / self.max_hp
        self.reset_color()
        width = min(int((BAR_SIZE.width - 1) * self.percentage), BAR_SIZE.width + 2)
        for row in self.pixels[1:-1]:
            row[1:max(width, 1)] = [self.color] * (max(width, 1) - 1)

    def render(self, dest: Image.Image) -> None:
        """Draw the bar centred on its position."""
        bar = Image.new("RGB", (BAR_SIZE.width + 2, BAR_SIZE.height))
        for y, row in enumerate(self.pixels[1:-1], start=1):
            for x, pixel in enumerate(row[1:], start=1):
                bar.putpixel((x, y), (pixel.r, pixel.g, pixel.b))
        left = self.position.x - (BAR_SIZE.width + 2) // 2
        top = self.position.y - BAR_SIZE.height // 2
        dest.paste(bar, (left, top))