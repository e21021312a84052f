"""Builds enemies from their type definitions."""

from __future__ import annotations

import random
from typing import Callable, Mapping

from .behaviors import (
    AttackBehavior,
    BasicAttack,
    BasicRetreat,
    EnterTop,
    LateralMovement,
    MovementBehavior,
    PrecisionAttack,
    RandomMovement,
    StaticMovement,
    TurretAttack,
)
from .berserker import BerserkerAttack, BerserkerMovement
from .config import get_config
from .enemy import Enemy
from .enemy_types import EnemyTypeData
from .geometry import Vec2
from .graphics import Canvas, Texture

SPAWN_Y = -100.0

_MOVEMENTS: dict[str, Callable[[random.Random], MovementBehavior]] = {
    "RandomMovement": RandomMovement,
    "LateralMovement": LateralMovement,
    "StaticMovement": lambda rng: StaticMovement(),
    "BerserkerMovement": BerserkerMovement,
}

_ATTACKS: dict[str, Callable[[float], AttackBehavior]] = {
    "BasicAttackBehavior": BasicAttack,
    "PrecisionAttack": PrecisionAttack,
    "TurretAttack": TurretAttack,
    "Berserker": BerserkerAttack,
}


class EnemyFactory:
    """Creates enemies of named types, sharing their textures."""

    def __init__(self, types: Mapping[str, EnemyTypeData]) -> None:
        self.types: dict[str, EnemyTypeData] = dict(types)
        self.textures: dict[str, Texture] = {}
        self.bullet_textures: dict[str, Texture] = {}
        self.rng = random.Random()

    def create(self, type_name: str) -> Enemy:
        """Build a new enemy of the named type just above the screen."""
        try:
            data = self.types[type_name]
        except KeyError:
            raise KeyError(f"unknown enemy type: {type_name}") from None
        make_movement = _MOVEMENTS.get(data.movement_type)
        if make_movement is None:
            raise ValueError(f"unknown movement behaviour: {data.movement_type}")
        make_attack = _ATTACKS.get(data.attack_type)
        if make_attack is None:
            raise ValueError(f"unknown attack behaviour: {data.attack_type}")

        enemy = Enemy(data.pool_size)
        enemy.health = data.health
        enemy.speed = data.speed
        enemy.scale = data.scale
        enemy.texture = self.textures.get(data.texture_path, Texture())
        enemy.bullet_texture = self.bullet_textures.get(data.bullet_texture_path, Texture())
        enemy.width = enemy.texture.width // enemy.x_rows
        enemy.height = enemy.texture.height // enemy.y_rows

        right = int(get_config().screen_width - enemy.texture.width * enemy.scale)
        x = self.rng.randint(min(0, right), max(0, right))
        enemy.world_pos = Vec2(float(x), SPAWN_Y)

        enemy.damage = data.damage
        enemy.bullet_speed = data.bullet_speed
        enemy.score = data.score

        enemy.enter_behavior = EnterTop(data.target_y)
        enemy.movement_behavior = make_movement(self.rng)
        enemy.retreat_behavior = BasicRetreat()
        enemy.attack_behavior = make_attack(data.bullet_delay)
        return enemy

    def load_textures(self, canvas: Canvas) -> None:
        """Load every texture the known types use, each path once."""
        for data in self.types.values():
            if data.texture_path not in self.textures:
                self.textures[data.texture_path] = canvas.load_texture(data.texture_path)
            if data.bullet_texture_path not in self.bullet_textures:
                self.bullet_textures[data.bullet_texture_path] = canvas.load_texture(
                    data.bullet_texture_path
                )

    def unload_textures(self, canvas: Canvas) -> None:
        """Release every shared texture."""
        for texture in self.textures.values():
            canvas.unload_texture(texture)
        for texture in self.bullet_textures.values():
            canvas.unload_texture(texture)
        self.textures.clear()
        self.bullet_textures.clear()