"""A registry of prototype animations that hands out independent copies."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from PIL import Image

from .animation import Animation
from .clip import Point
from .structures import AnimationClipInfo

Loader = Callable[[str], Image.Image]


class AnimationManager:
    """Loads sprite sheets once per key and keeps one prototype animation for each."""

    def __init__(self, loader: Loader) -> None:
        self._loader = loader
        self._textures: dict[str, Image.Image] = {}
        self._animations: dict[str, Animation] = {}
        self._files: list[tuple[str, str]] = []

    def __contains__(self, key: object) -> bool:
        return key in self._animations

    @property
    def keys(self) -> list[str]:
        """Registered keys in the order they were added."""
        return [key for key, _ in self._files]

    def _texture(self, key: str, file_name: str) -> Image.Image:
        texture = self._textures.get(key)
        if texture is None:
            texture = self._loader(file_name)
            self._textures[key] = texture
        return texture

    def add_animation(
        self,
        key: str,
        file_name: str,
        max_frame_length: Point,
        clips: Iterable[AnimationClipInfo] = (),
    ) -> Animation:
        """Register a prototype; a key already present keeps its first animation."""
        image = self._texture(key, file_name)
        existing = self._animations.get(key)
        if existing is not None:
            return existing
        animation = Animation(image, file_name, max_frame_length)
        for info in clips:
            animation.add_clip(info.key, info.start_pt, info.frame_length, info.frame_time)
        self._animations[key] = animation
        self._files.append((key, file_name))
        return animation

    def set_clips(self, key: str, clips: Iterable[AnimationClipInfo]) -> None:
        """Add clips to the prototype registered under ``key``."""
        try:
            animation = self._animations[key]
        except KeyError:
            raise KeyError(f"no animation registered under {key!r}") from None
        for info in clips:
            animation.add_clip(info.key, info.start_pt, info.frame_length, info.frame_time)

    def get_animation(self, key: str) -> Animation | None:
        """Return a fresh copy of the prototype, or None when the key is unknown."""
        prototype = self._animations.get(key)
        if prototype is None:
            return None
        return prototype.copy()

    def find_by_file(self, other: Animation | None) -> Animation | None:
        """Return a copy of the prototype drawn from the same file as ``other``."""
        if other is None:
            return None
        for key, file_name in self._files:
            if file_name == other.file_name:
                return self.get_animation(key)
        return None