"""Level descriptions read from JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


@dataclass
class EnemyWave:
    """A batch of enemies of one type spawned at a fixed interval."""

    type: str = ""
    count: int = 0
    delay: float = 1.0
    start_time: float = 0.0


@dataclass
class LevelData:
    """Background, music and enemy waves of one level."""

    background_texture: str = ""
    music_track: str = ""
    waves: list[EnemyWave] = field(default_factory=list)


def load_level(path: Union[str, Path]) -> LevelData:
    """Read a level file; an unreadable file gives an empty level."""
    try:
        with open(path, encoding="utf-8") as handle:
            raw = json.load(handle)
    except OSError:
        logger.error("Error: file not open %s", path)
        return LevelData()

    waves = [
        EnemyWave(
            type=str(entry.get("enemyType", "")),
            count=int(entry.get("count", 0)),
            delay=float(entry.get("spawnDelay", 1.0)),
            start_time=float(entry.get("startTime", 0.0)),
        )
        for entry in raw.get("enemyWaves", [])
    ]
    return LevelData(
        background_texture=str(raw.get("backgroundTexture", "")),
        music_track=str(raw.get("musicTrack", "")),
        waves=waves,
    )