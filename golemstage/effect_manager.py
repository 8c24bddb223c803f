"""Prototype effects loaded from a description file and the live effects made from them."""

from __future__ import annotations

import os
from collections.abc import Iterator

from PIL import Image

from .animation_manager import AnimationManager
from .clip import Point, Rect, Size
from .effect import Effect

_FIELD_COUNT = 8


class EffectManager:
    """Holds effect prototypes by key and the effects currently playing in the world.

    The description file holds one effect per line, fields separated by whitespace:
    ``key file columns rows frame_length frame_time color_key alpha``.
    """

    def __init__(self, animations: AnimationManager) -> None:
        self._animations = animations
        self._prototypes: dict[str, Effect] = {}
        self._effects: list[Effect] = []

    @property
    def effects(self) -> list[Effect]:
        return list(self._effects)

    def __iter__(self) -> Iterator[Effect]:
        return iter(list(self._effects))

    def __contains__(self, key: object) -> bool:
        return key in self._prototypes

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read effect prototypes from a description file."""
        with open(path, encoding="utf-8") as handle:
            for number, line in enumerate(handle, start=1):
                parts = line.split()
                if not parts:
                    continue
                if len(parts) != _FIELD_COUNT:
                    raise ValueError(f"line {number}: expected {_FIELD_COUNT} fields, got {len(parts)}")
                key, file_name, columns, rows, length, frame_time, color_key, alpha = parts
                try:
                    grid = Point(int(columns), int(rows))
                    frame_length = int(length)
                    seconds = float(frame_time)
                    color = int(color_key)
                    blend = int(alpha)
                except ValueError as exc:
                    raise ValueError(f"line {number}: {exc}") from None
                self._animations.add_animation(key, file_name, grid)
                if key not in self._prototypes:
                    self._prototypes[key] = Effect(self._animations, key, frame_length, seconds, color, blend)

    def create_effect(self, key: str, image_size: Size, pt: Point, loop_count: int) -> Effect | None:
        """Start a copy of a prototype at ``pt``; None when the key is unknown."""
        prototype = self._prototypes.get(key)
        if prototype is None:
            return None
        effect = prototype.copy()
        effect.set_effect_info(pt, image_size, image_size, loop_count)
        self._effects.append(effect)
        return effect

    def effect_rect(self, key: str) -> Rect:
        try:
            return self._prototypes[key].rect
        except KeyError:
            raise KeyError(f"no effect registered under {key!r}") from None

    def reset(self) -> None:
        """Finish every live effect and drop them."""
        for effect in self._effects:
            effect.end()
        self.delete_finished()

    def update(self, delta_time: float) -> None:
        for effect in self._effects:
            effect.update(delta_time)

    def delete_finished(self) -> None:
        remaining = []
        for effect in self._effects:
            if effect.check_end():
                effect.reset()
            else:
                remaining.append(effect)
        self._effects = remaining

    def render(self, dest: Image.Image) -> None:
        for effect in self._effects:
            effect.render(dest)