"""Screen and grid settings shared across the game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameConfig:
    """Resolution of the play field and the size of collision grid cells."""

    screen_width: int = 720
    screen_height: int = 1280
    grid_cell_size: int = 128

    def set_resolution(self, width: int, height: int) -> None:
        """Change the screen resolution."""
        self.screen_width = width
        self.screen_height = height


_CONFIG = GameConfig()


def get_config() -> GameConfig:
    """Return the configuration shared by the whole game."""
    return _CONFIG