"""Sprite-sheet geometry and frame-by-frame animation clips."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, replace


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


@dataclass(frozen=True)
class Point:
    """An integer position."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Size:
    """An integer extent."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its edges."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @classmethod
    def centered(cls, center: Point, size: Size) -> "Rect":
        """Build the rectangle of ``size`` centred on ``center``."""
        half_w = _half(size.width)
        half_h = _half(size.height)
        return cls(center.x - half_w, center.y - half_h, center.x + half_w, center.y + half_h)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


class AnimationClip:
    """A run of frames on a sprite sheet laid out as a grid."""

    def __init__(
        self,
        start_frame: Point,
        frame_length: int,
        max_frame_length: Point,
        image_size: Size,
        frame_time: float,
    ) -> None:
        if max_frame_length.x <= 0 or max_frame_length.y <= 0:
            raise ValueError("the sprite sheet grid must have at least one column and one row")
        self.start_frame = start_frame
        self.frame_length = frame_length
        self.frame_time = frame_time
        self.max_frame_length = max_frame_length
        self._frame_size = Size(
            image_size.width // max_frame_length.x,
            image_size.height // max_frame_length.y,
        )
        self._current = start_frame
        self._elapsed = 0.0
        self._loop_time = frame_length * frame_time
        self.stopped = False

    @property
    def frame_pos(self) -> Point:
        """Grid position of the frame currently shown."""
        return self._current

    @property
    def frame_size(self) -> Size:
        """Pixel size of one frame."""
        return self._frame_size

    @property
    def image_rect(self) -> Rect:
        """Pixel rectangle of the current frame on the sheet."""
        w, h = self._frame_size.width, self._frame_size.height
        x, y = self._current.x, self._current.y
        return Rect(x * w, y * h, (x + 1) * w, (y + 1) * h)

    @property
    def loop_time(self) -> float:
        """Time one pass through the clip takes."""
        return self._loop_time

    def stop(self) -> None:
        self.stopped = True

    def resume(self) -> None:
        self.stopped = False

    def update(self, delta_time: float) -> None:
        """Advance the clock, stepping to the next frame when it is due."""
        if self.stopped:
            return
        self._elapsed += delta_time
        if self._elapsed < self.frame_time:
            return

        x, y = self._current.x + 1, self._current.y
        if x == self.max_frame_length.x:
            x, y = 0, y + 1
        advance = (y - self.start_frame.y) * self.max_frame_length.x + x - self.start_frame.x
        self._current = self.start_frame if advance == self.frame_length else Point(x, y)
        self._elapsed = 0.0

    def reset(self) -> None:
        """Rewind to the first frame."""
        self._elapsed = 0.0
        self._current = self.start_frame

    def copy(self) -> "AnimationClip":
        """Return a fresh, rewound clip with the same settings."""
        clone = _copy.copy(self)
        clone._elapsed = 0.0
        clone._current = self.start_frame
        clone._loop_time = self.frame_length * self.frame_time
        clone.stopped = False
        return clone

    def __repr__(self) -> str:
        return (
            f"AnimationClip(start={self.start_frame}, length={self.frame_length}, "
            f"current={self._current})"
        )


__all__ = ["Point", "Size", "Rect", "AnimationClip", "replace"]