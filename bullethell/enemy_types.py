"""Enemy type definitions read from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Union


@dataclass
class EnemyTypeData:
    """Stats and behaviours of one kind of enemy."""

    health: int = 10
    speed: float = 200.0
    scale: float = 2.0
    target_y: float = 100.0
    bullet_delay: float = 0.1
    damage: float = 20.0
    bullet_speed: float = 1000.0
    pool_size: int = 10
    score: int = 1000
    movement_type: str = "RandomMovement"
    attack_type: str = "BasicAttackBehavior"
    retreat_type: str = "BasicRetreatBehavior"
    texture_path: str = ""
    bullet_texture_path: str = ""


def load_enemy_type(data: Mapping[str, Any]) -> EnemyTypeData:
    """Build an enemy type from a JSON object, filling in defaults."""
    defaults = EnemyTypeData()
    return EnemyTypeData(
        health=int(data.get("health", defaults.health)),
        speed=float(data.get("speed", defaults.speed)),
        scale=float(data.get("scale", defaults.scale)),
        target_y=float(data.get("initialY", defaults.target_y)),
        bullet_delay=float(data.get("bulletDelay", defaults.bullet_delay)),
        damage=float(data.get("damage", defaults.damage)),
        bullet_speed=float(data.get("bulletSpeed", defaults.bullet_speed)),
        score=int(data.get("score", defaults.score)),
        pool_size=int(data.get("poolSize", defaults.pool_size)),
        movement_type=str(data.get("movement", defaults.movement_type)),
        attack_type=str(data.get("attack", defaults.attack_type)),
        retreat_type=str(data.get("retreat", defaults.retreat_type)),
        texture_path=str(data.get("texture", defaults.texture_path)),
        bullet_texture_path=str(data.get("bulletTexture", defaults.bullet_texture_path)),
    )


def load_enemy_types(path: Union[str, Path]) -> dict[str, EnemyTypeData]:
    """Read a JSON file mapping type names to enemy definitions."""
    with open(path, encoding="utf-8") as handle:
        raw = json.load(handle)
    return {name: load_enemy_type(entry) for name, entry in raw.items()}