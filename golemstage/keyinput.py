"""Keyboard state tracking: key down, held, released and double presses."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KEY_COUNT = 256


@dataclass
class KeyState:
    """What one key did on the most recent polls."""

    down: bool = False
    pressed: bool = False
    up: bool = False
    double_click: bool = False
    double_click_start: bool = False
    down_start: float = 0.0
    double_click_time: float = 0.2


class KeyInput:
    """Tracks all key codes by polling a function that says whether a key is held."""

    def __init__(self, is_pressed: Callable[[int], bool]) -> None:
        self._is_pressed = is_pressed
        self._keys = [KeyState() for _ in range(KEY_COUNT)]

    def poll(self, delta_time: float) -> None:
        """Read every key once and update its state."""
        for code, key in enumerate(self._keys):
            if self._is_pressed(code):
                if key.down:
                    key.pressed = True
                    key.down = False
                elif not key.pressed:
                    if key.double_click_start:
                        key.double_click = True
                    else:
                        key.double_click_start = True
                    key.down = True
            elif key.up:
                key.up = False
            elif key.down or key.pressed:
                key.up = True
                key.pressed = False
                key.down = False

    def update(self, delta_time: float) -> None:
        """Expire double-press windows that have run out."""
        for key in self._keys:
            if key.double_click_start:
                key.down_start += delta_time
                if key.down_start >= key.double_click_time:
                    key.down_start = 0.0
                    key.double_click_start = False
                    key.double_click = False

    def reset(self) -> None:
        self._keys = [KeyState() for _ in range(KEY_COUNT)]

    def __getitem__(self, key: int) -> KeyState:
        if not 0 <= key < KEY_COUNT:
            raise IndexError(f"key code {key} out of range")
        return self._keys[key]