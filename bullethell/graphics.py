"""Drawing surface, textures, colours and per-frame input state."""

from __future__ import annotations

import itertools
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from .geometry import Rect, Vec2

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
RED: Color = (230, 41, 55, 255)
GREEN: Color = (0, 228, 48, 255)
YELLOW: Color = (253, 249, 0, 255)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def fade(color: Color, alpha: float) -> Color:
    """Return color with its alpha replaced by alpha (0..1) of full opacity."""
    alpha = min(max(float(alpha), 0.0), 1.0)
    return (color[0], color[1], color[2], int(255 * alpha))


def read_png_size(path: Union[str, Path]) -> Optional[tuple[int, int]]:
    """Width and height stored in a PNG header, or None if not a PNG."""
    try:
        with open(path, "rb") as handle:
            header = handle.read(24)
    except OSError:
        return None
    if len(header) < 24 or header[:8] != PNG_SIGNATURE or header[12:16] != b"IHDR":
        return None
    width, height = struct.unpack(">II", header[16:24])
    return width, height


@dataclass(frozen=True)
class Texture:
    """An image usable for drawing; id 0 means nothing is loaded."""

    id: int = 0
    width: int = 0
    height: int = 0
    path: str = ""
    surface: Any = field(default=None, compare=False, repr=False)

    @property
    def loaded(self) -> bool:
        return self.id != 0


@dataclass
class Controls:
    """The player's input for one frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    shoot: bool = False
    precision: bool = False
    confirm: bool = False


class Canvas(ABC):
    """Something the game can draw on and load textures for."""

    @abstractmethod
    def clear(self, color: Color) -> None:
        """Fill the whole surface with color."""

    @abstractmethod
    def draw_sprite(self, texture: Texture, source: Rect, dest: Rect, tint: Color) -> None:
        """Draw the source part of texture stretched over dest."""

    @abstractmethod
    def draw_texture_scaled(
        self, texture: Texture, position: Vec2, scale: float, tint: Color
    ) -> None:
        """Draw a whole texture at position, scaled uniformly."""

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        """Draw text with its top-left corner at (x, y)."""

    @abstractmethod
    def draw_rect_lines(self, rect: Rect, color: Color) -> None:
        """Draw the outline of a rectangle."""

    @abstractmethod
    def measure_text(self, text: str, size: int) -> int:
        """Width in pixels of text drawn at the given size."""

    @abstractmethod
    def load_texture(self, path: Union[str, Path]) -> Texture:
        """Load an image file as a texture."""

    @abstractmethod
    def unload_texture(self, texture: Texture) -> None:
        """Release a texture loaded by this canvas."""


class NullCanvas(Canvas):
    """A headless canvas that records draw commands for the current frame.

    Texture sizes are read from PNG headers; files that cannot be read get
    ``default_size``.
    """

    def __init__(self, default_size: tuple[int, int] = (0, 0)) -> None:
        self.default_size = default_size
        self.commands: list[tuple] = []
        self.loaded_textures: dict[int, Texture] = {}
        self._ids = itertools.count(1)

    def clear(self, color: Color) -> None:
        self.commands = [("clear", color)]

    def draw_sprite(self, texture: Texture, source: Rect, dest: Rect, tint: Color) -> None:
        self.commands.append(("sprite", texture, source, dest, tint))

    def draw_texture_scaled(
        self, texture: Texture, position: Vec2, scale: float, tint: Color
    ) -> None:
        self.commands.append(("texture", texture, position, scale, tint))

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        self.commands.append(("text", text, x, y, size, color))

    def draw_rect_lines(self, rect: Rect, color: Color) -> None:
        self.commands.append(("rect_lines", rect, color))

    def measure_text(self, text: str, size: int) -> int:
        """Each character counts as half the font size wide."""
        return len(text) * size // 2

    def load_texture(self, path: Union[str, Path]) -> Texture:
        width, height = read_png_size(path) or self.default_size
        texture = Texture(next(self._ids), width, height, str(path))
        self.loaded_textures[texture.id] = texture
        return texture

    def unload_texture(self, texture: Texture) -> None:
        self.loaded_textures.pop(texture.id, None)