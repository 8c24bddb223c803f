"""A sprite sheet with named clips, and drawing of its frames onto images."""

from __future__ import annotations

import math

from PIL import Image, ImageChops

from .clip import AnimationClip, Point, Rect, Size


def _colorref_rgb(color: int) -> tuple[int, int, int]:
    return color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF


def _blit(dest: Image.Image, frame: Image.Image, dest_rect: Rect, color_key: int, alpha: int) -> None:
    """Stretch ``frame`` into ``dest_rect``, skipping colour-key pixels."""
    if not 0 <= alpha <= 255:
        raise ValueError(f"alpha must lie in 0..255, got {alpha}")
    width, height = dest_rect.width, dest_rect.height
    if width <= 0 or height <= 0 or frame.width == 0 or frame.height == 0:
        return
    scaled = frame.resize((width, height), Image.Resampling.NEAREST)
    key_image = Image.new("RGB", scaled.size, _colorref_rgb(color_key))
    red, green, blue = ImageChops.difference(scaled, key_image).split()
    differs = ImageChops.lighter(ImageChops.lighter(red, green), blue)
    mask = differs.point(lambda v: alpha if v else 0)
    dest.paste(scaled, (dest_rect.left, dest_rect.top), mask)


class Animation:
    """A source image cut into a grid of frames, holding named clips."""

    def __init__(self, image: Image.Image | None, file_name: str, max_frame_length: Point) -> None:
        self.image = image
        self.file_name = file_name
        self.max_frame_length = max_frame_length
        self._clips: dict[str, AnimationClip] = {}

    @property
    def clip_names(self) -> list[str]:
        return sorted(self._clips)

    def __contains__(self, name: object) -> bool:
        return name in self._clips

    def add_clip(self, name: str, start_frame: Point, frame_length: int, frame_time: float) -> AnimationClip:
        """Register a clip; a name already present keeps its existing clip."""
        if self.image is None:
            raise ValueError("animation has no source image")
        existing = self._clips.get(name)
        if existing is not None:
            return existing
        width, height = self.image.size
        clip = AnimationClip(start_frame, frame_length, self.max_frame_length, Size(width, height), frame_time)
        self._clips[name] = clip
        return clip

    def clip(self, name: str) -> AnimationClip | None:
        return self._clips.get(name)

    def copy(self) -> "Animation":
        """Share the image but give the copy its own rewound clips."""
        clone = Animation(self.image, self.file_name, self.max_frame_length)
        clone.copy_clips(self)
        return clone

    def copy_clips(self, other: "Animation") -> None:
        """Take copies of the other animation's clips under names not yet used."""
        for name, clip in other._clips.items():
            if name not in self._clips:
                self._clips[name] = clip.copy()

    def _frame(self, src_rect: Rect) -> Image.Image:
        if self.image is None:
            raise ValueError("animation has no source image")
        box = (src_rect.left, src_rect.top, src_rect.right, src_rect.bottom)
        return self.image.crop(box).convert("RGB")

    def render(self, dest: Image.Image, dest_rect: Rect, src_rect: Rect, color_key: int = 0) -> None:
        """Draw a region of the sheet into ``dest_rect`` with a transparent colour."""
        _blit(dest, self._frame(src_rect), dest_rect, color_key, 255)

    def render_scaled(
        self,
        dest: Image.Image,
        dest_rect: Rect,
        src_rect: Rect,
        reverse: bool = False,
        color_key: int = 0,
        alpha: int = 255,
    ) -> None:
        """Draw a region, optionally mirrored left to right and blended by ``alpha``."""
        frame = self._frame(src_rect)
        if reverse:
            frame = frame.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
        _blit(dest, frame, dest_rect, color_key, alpha)

    def render_rotated(
        self,
        dest: Image.Image,
        dest_rect: Rect,
        src_rect: Rect,
        src_size: Size,
        angle: float,
        color_key: int = 0,
        alpha: int = 255,
    ) -> None:
        """Draw a region mirrored and then turned clockwise on screen by ``angle`` radians."""
        key_rgb = _colorref_rgb(color_key)
        frame = self._frame(src_rect).transpose(Image.Transpose.FLIP_LEFT_RIGHT)
        rotated = frame.rotate(-math.degrees(angle), resample=Image.Resampling.NEAREST, fillcolor=key_rgb)
        if rotated.size != (src_size.width, src_size.height):
            canvas = Image.new("RGB", (src_size.width, src_size.height), key_rgb)
            offset = ((src_size.width - rotated.width) // 2, (src_size.height - rotated.height) // 2)
            canvas.paste(rotated, offset)
            rotated = canvas
        _blit(dest, rotated, dest_rect, color_key, alpha)