"""Window, input and drawing on top of pygame, and the game's entry point."""

from __future__ import annotations

import argparse
import itertools
import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

import pygame

from .audio import get_audio
from .config import get_config
from .geometry import Rect, Vec2
from .graphics import WHITE, Canvas, Color, Controls, Texture
from .scores import ScoreManager
from .states import MenuState, StateManager

logger = logging.getLogger(__name__)

MENU_MUSIC = "assets/music/16_bit_space.ogg"
TARGET_FPS = 240


def _tinted(image: pygame.Surface, tint: Color) -> pygame.Surface:
    if tuple(tint) == WHITE:
        return image
    image.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)
    if not image.get_flags() & pygame.SRCALPHA:
        image.set_alpha(tint[3])
    return image


class PygameCanvas(Canvas):
    """Draws on a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        pygame.font.init()
        self.surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}
        self._ids = itertools.count(1)

    def _font(self, size: int) -> pygame.font.Font:
        size = max(1, int(size))
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def draw_sprite(self, texture: Texture, source: Rect, dest: Rect, tint: Color) -> None:
        image = texture.surface
        if image is None:
            return
        area = pygame.Rect(
            int(source.x), int(source.y), int(source.width), int(source.height)
        ).clip(image.get_rect())
        size = (int(dest.width), int(dest.height))
        if area.width <= 0 or area.height <= 0 or size[0] <= 0 or size[1] <= 0:
            return
        piece = pygame.transform.scale(image.subsurface(area), size)
        self.surface.blit(_tinted(piece, tint), (int(dest.x), int(dest.y)))

    def draw_texture_scaled(
        self, texture: Texture, position: Vec2, scale: float, tint: Color
    ) -> None:
        image = texture.surface
        if image is None:
            return
        size = (int(texture.width * scale), int(texture.height * scale))
        if size[0] <= 0 or size[1] <= 0:
            return
        scaled = pygame.transform.scale(image, size)
        self.surface.blit(_tinted(scaled, tint), (int(position.x), int(position.y)))

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        rendered = self._font(size).render(text, True, tuple(color[:3]))
        if len(color) > 3 and color[3] < 255:
            rendered.set_alpha(color[3])
        self.surface.blit(rendered, (int(x), int(y)))

    def draw_rect_lines(self, rect: Rect, color: Color) -> None:
        outline = pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
        pygame.draw.rect(self.surface, color, outline, 1)

    def measure_text(self, text: str, size: int) -> int:
        return self._font(size).size(text)[0]

    def load_texture(self, path: Union[str, Path]) -> Texture:
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            logger.warning("could not load texture %s: %s", path, exc)
            return Texture()
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        width, height = image.get_size()
        return Texture(next(self._ids), width, height, str(path), image)

    def unload_texture(self, texture: Texture) -> None:
        """Textures are plain surfaces; dropping references frees them."""


def read_controls(
    pressed_keys: Sequence[bool],
    mouse_buttons: Sequence[bool],
    events: Iterable[pygame.event.Event],
) -> Controls:
    """Turn pygame key, mouse and event state into one frame of controls."""
    confirm = any(
        event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER)
        for event in events
    )
    return Controls(
        up=bool(pressed_keys[pygame.K_w]),
        down=bool(pressed_keys[pygame.K_s]),
        left=bool(pressed_keys[pygame.K_a]),
        right=bool(pressed_keys[pygame.K_d]),
        shoot=bool(pressed_keys[pygame.K_SPACE]),
        precision=bool(mouse_buttons[0]) if mouse_buttons else False,
        confirm=confirm,
    )


def _should_close(events: Iterable[pygame.event.Event]) -> bool:
    return any(
        event.type == pygame.QUIT
        or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE)
        for event in events
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(description="Vertical bullet-hell shooter.")
    parser.add_argument(
        "--fps", type=int, default=TARGET_FPS, help="frame rate limit (default: %(default)s)"
    )
    args = parser.parse_args(argv)

    config = get_config()
    pygame.init()
    screen = pygame.display.set_mode((config.screen_width, config.screen_height))
    pygame.display.set_caption("")
    canvas = PygameCanvas(screen)

    scores = ScoreManager()
    manager = StateManager(scores=scores)
    manager.set_state(MenuState(manager))
    scores.load()

    audio = get_audio()
    audio.init()
    audio.play_music(MENU_MUSIC)

    clock = pygame.time.Clock()
    try:
        while True:
            dt = clock.tick(args.fps) / 1000.0
            events = pygame.event.get()
            if _should_close(events):
                break
            controls = read_controls(
                pygame.key.get_pressed(), pygame.mouse.get_pressed(), events
            )
            manager.update(dt, canvas, controls)
            pygame.display.flip()
    finally:
        audio.unload()
        pygame.quit()
    return 0