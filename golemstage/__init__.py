"""Sprite animation, effects and stage objects for a side-scrolling boss fight."""

__version__ = "0.1.0"
__all__ = [
    "animation",
    "animation_manager",
    "barigate",
    "boss",
    "bullet",
    "button",
    "clip",
    "effect",
    "effect_manager",
    "hpbar",
    "keyinput",
    "structures",
]