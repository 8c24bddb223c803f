"""Static barriers placed in a stage, optionally drawn from a texture."""

from __future__ import annotations

import struct
from collections.abc import Mapping
from typing import BinaryIO

from PIL import Image

from .animation import Animation
from .clip import AnimationClip, Point, Rect, Size

WHITE = 0xFFFFFF
_EMPTY_TAG = "NULL"
_PAIR = struct.Struct("<ii")
_LENGTH = struct.Struct("<I")


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) < count:
        raise EOFError("stream ended inside a barrier record")
    return data


class Barigate:
    """A barrier box; with an image tag its size comes from the texture.

    Saved records hold the position and image size as little-endian 32-bit
    integers, then the tag as a 32-bit length and UTF-8 text, ``NULL`` when empty.
    """

    def __init__(
        self,
        pt: Point = Point(),
        size: Size = Size(),
        image_tag: str = "",
        textures: Mapping[str, Image.Image] | None = None,
    ) -> None:
        self.textures = textures
        self.pt = pt
        self.image_tag = image_tag
        self.image: Image.Image | None = None
        self.clip: AnimationClip | None = None
        if image_tag:
            self.image = self._texture(image_tag)
            self.image_size = Size(self.image.width, self.image.height)
        else:
            self.image_size = size
        self.hit_box_size = self.image_size

    def _texture(self, tag: str) -> Image.Image:
        if self.textures is None:
            raise ValueError(f"no textures available to look up {tag!r}")
        return self.textures[tag]

    @property
    def rect(self) -> Rect:
        return Rect.centered(self.pt, self.hit_box_size)

    def update(self, delta_time: float) -> None:
        if self.clip is not None:
            self.clip.update(delta_time)

    def render(self, dest: Image.Image) -> None:
        """Stretch the texture over the box, white being transparent."""
        if self.image is None:
            return
        sheet = Animation(self.image, self.image_tag, Point(1, 1))
        whole = Rect(0, 0, self.image.width, self.image.height)
        sheet.render(dest, self.rect, whole, WHITE)

    def save(self, stream: BinaryIO) -> None:
        stream.write(_PAIR.pack(self.pt.x, self.pt.y))
        stream.write(_PAIR.pack(self.image_size.width, self.image_size.height))
        tag = (self.image_tag or _EMPTY_TAG).encode("utf-8")
        stream.write(_LENGTH.pack(len(tag)))
        stream.write(tag)

    def load(self, stream: BinaryIO) -> None:
        self.pt = Point(*_PAIR.unpack(_read_exact(stream, _PAIR.size)))
        self.image_size = Size(*_PAIR.unpack(_read_exact(stream, _PAIR.size)))
        self.hit_box_size = self.image_size
        (length,) = _LENGTH.unpack(_read_exact(stream, _LENGTH.size))
        tag = _read_exact(stream, length).decode("utf-8")
        if tag == _EMPTY_TAG:
            self.image_tag = ""
            self.image = None
        else:
            self.image_tag = tag
            self.image = self._texture(tag)