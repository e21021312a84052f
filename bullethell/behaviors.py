"""Movement and attack behaviours that drive enemies."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Optional

from .config import get_config
from .geometry import Rect, Vec2
from .world import get_world

if TYPE_CHECKING:
    from .graphics import Canvas


def _random_value(rng: random.Random, low: float, high: float) -> int:
    """Whole number in [low, high]; bounds are truncated and swapped if crossed."""
    low, high = int(low), int(high)
    if low > high:
        low, high = high, low
    return rng.randint(low, high)


class AttackBehavior(ABC):
    """Decides when and where an enemy fires."""

    @abstractmethod
    def update(self, enemy: Any, dt: float) -> None:
        """Advance the attack by dt seconds, shooting through enemy."""


class MovementBehavior(ABC):
    """Moves an enemy around the play field."""

    @abstractmethod
    def update(self, enemy: Any, dt: float, canvas: Optional[Canvas] = None) -> None:
        """Advance the movement by dt seconds."""

    @abstractmethod
    def is_finished(self) -> bool:
        """True once the behaviour has run its course."""

    @abstractmethod
    def new_pos(self, enemy: Any) -> None:
        """Choose a new target for the enemy."""


class BasicAttack(AttackBehavior):
    """Fires straight down at a fixed interval."""

    def __init__(self, delay: float) -> None:
        self.bullet_delay = delay
        self.actual_delay = 0.0

    def update(self, enemy: Any, dt: float) -> None:
        self.actual_delay += dt
        if self.actual_delay < self.bullet_delay:
            return
        enemy.shoot(Vec2(0.0, 1.0))
        self.actual_delay = 0.0


class PrecisionAttack(AttackBehavior):
    """Fires at the player at a fixed interval."""

    def __init__(self, delay: float) -> None:
        self.bullet_delay = delay
        self.actual_delay = 0.0
        self.player: Optional[Any] = None

    def update(self, enemy: Any, dt: float) -> None:
        self.actual_delay += dt
        if self.player is None:
            self.player = get_world().player
        player = self.player
        if self.actual_delay < self.bullet_delay or player is None or not player.active:
            return

        enemy_center = Vec2(
            enemy.world_pos.x + enemy.width * enemy.scale / 2,
            enemy.world_pos.y + enemy.height * enemy.scale / 2,
        )
        # The aim point is offset vertically by the player's health, not height.
        player_center = Vec2(
            player.world_pos.x + player.width * player.scale / 2,
            player.world_pos.y + player.health * player.scale / 2,
        )
        enemy.shoot((player_center - enemy_center).normalized())
        self.actual_delay = 0.0


class TurretAttack(AttackBehavior):
    """Fires one bullet at a time, sweeping round a full circle."""

    number_of_bullets = 24

    def __init__(self, delay: float) -> None:
        self.bullet_delay = delay
        self.actual_delay = 0.0
        self.current_bullet = 0

    def update(self, enemy: Any, dt: float) -> None:
        self.actual_delay += dt
        if self.actual_delay < self.bullet_delay:
            return
        step = 360.0 / self.number_of_bullets
        angle = math.radians(step * self.current_bullet)
        enemy.shoot(Vec2(math.cos(angle), math.sin(angle)).normalized())
        self.current_bullet += 1
        if self.current_bullet >= self.number_of_bullets:
            self.current_bullet = 0
        self.actual_delay = 0.0


class EnterTop(MovementBehavior):
    """Flies down from above the screen until reaching target_y."""

    def __init__(self, target_y: float = 200.0) -> None:
        self.target_y = float(target_y)
        self.finished = False

    def update(self, enemy: Any, dt: float, canvas: Optional[Canvas] = None) -> None:
        pos = enemy.world_pos
        if pos.y < self.target_y:
            enemy.world_pos = Vec2(pos.x, pos.y + enemy.speed * dt)
        else:
            self.finished = True

    def is_finished(self) -> bool:
        return self.finished

    def new_pos(self, enemy: Any) -> None:
        """Entering has a single fixed target; nothing to choose."""


class BasicRetreat(MovementBehavior):
    """Flies up and off the top of the screen."""

    def __init__(self) -> None:
        self.target_y = -100.0
        self.finished = False

    def update(self, enemy: Any, dt: float, canvas: Optional[Canvas] = None) -> None:
        pos = enemy.world_pos
        if pos.y > self.target_y:
            enemy.world_pos = Vec2(pos.x, pos.y - enemy.speed * dt)
        else:
            self.finished = True

    def is_finished(self) -> bool:
        return self.finished

    def new_pos(self, enemy: Any) -> None:
        """Retreating has a single fixed target; nothing to choose."""


class RandomMovement(MovementBehavior):
    """Wanders between random points in the upper part of the field."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.finished = False
        self.max_active_sec = 20.0
        self.mov_bounds = Rect(0.0, 0.0, 720.0, 400.0)
        self.target_pos = Vec2()
        self.direction = Vec2()

    def update(self, enemy: Any, dt: float, canvas: Optional[Canvas] = None) -> None:
        enemy.world_pos = enemy.world_pos + self.direction * (enemy.speed * dt)
        if enemy.world_pos.distance_sqr(self.target_pos) < 10.0:
            self.new_pos(enemy)
        self.max_active_sec -= dt
        if self.max_active_sec <= 0:
            self.finished = True

    def is_finished(self) -> bool:
        return self.finished

    def new_pos(self, enemy: Any) -> None:
        bounds = self.mov_bounds
        self.target_pos = Vec2(
            bounds.x + _random_value(self.rng, 0, bounds.width),
            bounds.y + _random_value(self.rng, 0, bounds.height),
        )
        self.direction = (self.target_pos - enemy.world_pos).normalized()


class LateralMovement(MovementBehavior):
    """Moves side to side between random points at a fixed height."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.finished = False
        self.max_active_sec = 40.0
        self.target_pos = Vec2()
        self.direction = Vec2()

    def update(self, enemy: Any, dt: float, canvas: Optional[Canvas] = None) -> None:
        new_position = enemy.world_pos + self.direction * (enemy.speed * dt)
        passed_target = (self.direction.x > 0 and new_position.x >= self.target_pos.x) or (
            self.direction.x < 0 and new_position.x <= self.target_pos.x
        )
        if passed_target:
            enemy.world_pos = self.target_pos
            self.new_pos(enemy)
        else:
            enemy.world_pos = new_position

        self.max_active_sec -= dt
        if self.max_active_sec <= 0:
            self.finished = True

    def is_finished(self) -> bool:
        return self.finished

    def new_pos(self, enemy: Any) -> None:
        right_limit = get_config().screen_width - enemy.width * enemy.scale
        target_x = float(_random_value(self.rng, 10.0, right_limit))
        self.target_pos = Vec2(target_x, enemy.world_pos.y)
        self.direction = (self.target_pos - enemy.world_pos).normalized()


class _Side(Enum):
    LEFT = auto()
    RIGHT = auto()


class StaticMovement(MovementBehavior):
    """Holds still until badly damaged, then charges sideways."""

    def __init__(self) -> None:
        self.finished = False
        self.max_active_sec = 30.0
        self.target_pos = Vec2()
        self.direction = Vec2()
        self.side = _Side.RIGHT
        self.initialized = False

    def update(self, enemy: Any, dt: float, canvas: Optional[Canvas] = None) -> None:
        if enemy.health <= 40:
            if not self.initialized:
                self.new_pos(enemy)
                self.initialized = True
            enemy.world_pos = enemy.world_pos + self.direction * (enemy.speed * dt)

        self.max_active_sec -= dt
        if self.max_active_sec <= 0:
            self.finished = True

    def is_finished(self) -> bool:
        return self.finished

    def new_pos(self, enemy: Any) -> None:
        if self.side is _Side.RIGHT:
            right_edge = get_config().screen_width - enemy.width * enemy.scale
            self.target_pos = Vec2(right_edge, enemy.world_pos.y)
            self.side = _Side.LEFT
        else:
            self.target_pos = Vec2(10.0, enemy.world_pos.y)
            self.side = _Side.RIGHT
        self.direction = (self.target_pos - enemy.world_pos).normalized()