"""A timed visual effect played from an animation clip."""

from __future__ import annotations

from PIL import Image

from .animation import Animation
from .animation_manager import AnimationManager
from .clip import AnimationClip, Point, Rect, Size


class Effect:
    """An animation instance placed in the world that ends after a number of loops."""

    def __init__(
        self,
        manager: AnimationManager,
        animation_name: str,
        frame_length: int | None = None,
        frame_time: float | None = None,
        color_key: int = 0,
        alpha_blend: int = 255,
    ) -> None:
        animation = manager.get_animation(animation_name)
        if animation is None:
            raise KeyError(f"no animation registered under {animation_name!r}")
        self._manager = manager
        self.animation: Animation = animation
        self.clip: AnimationClip | None = None
        self.clip_key = ""
        self.pt = Point()
        self.image_size = Size()
        self.box_size = Size()
        self.time = 0.0
        self.limit_time = 0.0
        self.loop = 0
        self.loop_count = 0
        self.color_key = color_key
        self.alpha_blend = alpha_blend
        self.reverse = False
        self.rotate = False
        self.angle = 0.0
        if frame_length is not None and frame_time is not None:
            self.clip = animation.add_clip(animation_name, Point(0, 0), frame_length, frame_time)
            self.clip_key = animation_name
            self.limit_time = self.clip.loop_time

    @property
    def rect(self) -> Rect:
        """Box the effect occupies, centred on its position."""
        return Rect.centered(self.pt, self.box_size)

    def copy(self) -> "Effect":
        """Make a new effect from the same source with the same timing and placement."""
        animation = self._manager.find_by_file(self.animation)
        if animation is None:
            raise KeyError(f"no animation registered for file {self.animation.file_name!r}")
        animation.copy_clips(self.animation)
        clone = object.__new__(Effect)
        clone._manager = self._manager
        clone.animation = animation
        clone.clip_key = self.clip_key
        clone.clip = animation.clip(self.clip_key)
        clone.pt = self.pt
        clone.image_size = self.image_size
        clone.box_size = self.box_size
        clone.time = self.time
        clone.limit_time = self.limit_time
        clone.loop = self.loop
        clone.loop_count = self.loop_count
        clone.color_key = self.color_key
        clone.alpha_blend = self.alpha_blend
        clone.reverse = False
        clone.rotate = False
        clone.angle = 0.0
        return clone

    def add_clip(self, key: str, start_pt: Point, frame_length: int, frame_time: float) -> None:
        clip = self.animation.add_clip(key, start_pt, frame_length, frame_time)
        self.limit_time = clip.loop_time

    def set_effect_info(self, pt: Point, image_size: Size, box_size: Size, loop_count: int) -> None:
        self.pt = pt
        self.image_size = image_size
        self.box_size = box_size
        self.loop_count = loop_count

    def set_clip(self, key: str) -> None:
        if self.clip is not None:
            self.clip.reset()
        self.clip = self.animation.clip(key)

    def has_clip(self) -> bool:
        return self.clip is not None

    def set_rotate_angle(self, angle: float) -> None:
        self.angle = angle
        self.rotate = True

    def check_end(self) -> bool:
        """Count a finished pass; True once all loops have played."""
        if self.time >= self.limit_time:
            self.loop += 1
            self.time = 0.0
            if self.loop >= self.loop_count:
                return True
        return False

    def end(self) -> None:
        """Force the effect to count as finished."""
        self.time = self.limit_time + 0.1
        self.loop = self.loop_count

    def reset(self) -> None:
        self.time = 0.0
        self.loop_count = 0
        if self.clip is not None:
            self.clip.reset()

    def clear_clip(self) -> None:
        if self.clip is not None:
            self.clip.reset()
        self.time = 0.0
        self.loop = 0
        self.clip = None

    def update(self, delta_time: float) -> None:
        self.time += delta_time
        if self.clip is not None:
            self.clip.update(delta_time)

    def render(self, dest: Image.Image) -> None:
        """Draw the current frame, rotated or mirrored as set."""
        if self.clip is None:
            raise RuntimeError("effect has no clip to render")
        if self.rotate:
            self.animation.render_rotated(
                dest,
                self.rect,
                self.clip.image_rect,
                self.clip.frame_size,
                self.angle,
                self.color_key,
                self.alpha_blend,
            )
        else:
            self.animation.render_scaled(
                dest,
                self.rect,
                self.clip.image_rect,
                self.reverse,
                self.color_key,
                self.alpha_blend,
            )