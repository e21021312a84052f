"""Game-wide registry of the current player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class GameWorld:
    """Holds the player that enemies aim at."""

    player: Optional[Any] = None


_WORLD = GameWorld()


def get_world() -> GameWorld:
    """Return the world shared by the whole game."""
    return _WORLD