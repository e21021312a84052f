"""The berserker boss: a movement cycle of four phases and matching attacks."""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING, Any, Optional

from .behaviors import AttackBehavior, MovementBehavior
from .config import get_config
from .enemy import BerserkerMovementMode
from .geometry import Rect, Vec2, clamp
from .graphics import WHITE, fade
from .world import get_world

if TYPE_CHECKING:
    from .graphics import Canvas


def _random_value(rng: random.Random, low: float, high: float) -> int:
    low, high = int(low), int(high)
    if low > high:
        low, high = high, low
    return rng.randint(low, high)


def _center(obj: Any) -> Vec2:
    return Vec2(
        obj.world_pos.x + obj.width * obj.scale / 2,
        obj.world_pos.y + obj.height * obj.scale / 2,
    )


class BerserkerAttack(AttackBehavior):
    """Picks its firing pattern from the enemy's current movement phase."""

    def __init__(self, delay: float) -> None:
        self.bullet_delay = delay
        self.actual_delay = 0.0
        self.burst_cooldown = 0.0
        self.burst_count = 0
        self.direction = Vec2(0.0, 1.0)
        self.player: Optional[Any] = get_world().player

    def update(self, enemy: Any, dt: float) -> None:
        if self.player is None:
            self.player = get_world().player
        if self.player is None or not self.player.active:
            return

        self.actual_delay += dt
        self.burst_cooldown -= dt
        mode = enemy.current_movement_mode()

        if mode is BerserkerMovementMode.RANDOM:
            if self.burst_cooldown > 0.0:
                return
            if self.burst_count < 10 and self.actual_delay >= 0.05:
                self.direction = Vec2(0.0, 1.0)
                enemy.shoot(self.direction)
                self.actual_delay = 0.0
                self.burst_count += 1
            elif self.burst_count >= 10:
                self.burst_count = 0
                self.burst_cooldown = 1.0
        elif mode is BerserkerMovementMode.TELEPORTING:
            if self.burst_cooldown > 0.0:
                return
            if self.burst_count < 5 and self.actual_delay >= 0.1:
                self._precision_shot(enemy)
                self.actual_delay = 0.0
                self.burst_count += 1
            elif self.burst_count >= 5:
                self.burst_count = 0
                self.burst_cooldown = 1.0
        elif mode is BerserkerMovementMode.STALKING:
            if self.actual_delay >= self.bullet_delay:
                self._precision_shot(enemy)
                self.actual_delay = 0.0
        elif mode is BerserkerMovementMode.LATERAL:
            if self.burst_cooldown <= 0.0:
                self._circular_shot(enemy, 12)
                self.burst_cooldown = 1.0

    def _precision_shot(self, enemy: Any) -> None:
        self.direction = (_center(self.player) - _center(enemy)).normalized()
        enemy.shoot(self.direction)

    def _circular_shot(self, enemy: Any, bullets: int) -> None:
        step = 360.0 / bullets
        for index in range(bullets):
            angle = math.radians(step * index)
            self.direction = Vec2(math.cos(angle), math.sin(angle))
            enemy.shoot(self.direction)


class BerserkerMovement(MovementBehavior):
    """Cycles random, lateral, teleporting and stalking phases.

    The phase changes every cycle_time seconds, or sooner when the enemy
    loses damage_threshold health within one phase.
    """

    stalking_speed = 500.0
    speed = 300.0
    damage_threshold = 80.0
    radius = 250.0
    tp_delay = 2.0
    cycle_time = 10.0

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player: Optional[Any] = get_world().player
        self.last_health = 0.0
        self.finished = False
        self.current_cycle = self.cycle_time
        self.tp_time = self.tp_delay
        self.max_active_sec = 240.0
        self.mode = BerserkerMovementMode.RANDOM
        self.target_pos = Vec2()
        self.direction = Vec2()
        self.mov_bounds = Rect(0.0, 0.0, 720.0, 400.0)
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.target_x = 0.0

    def update(self, enemy: Any, dt: float, canvas: Optional[Canvas] = None) -> None:
        if self.player is None:
            self.player = get_world().player
        if self.last_health <= 0:
            self.last_health = enemy.health

        if self.mode is not BerserkerMovementMode.TELEPORTING:
            new_position = enemy.world_pos + self.direction * (enemy.speed * dt)
            passed_x = (self.direction.x > 0 and new_position.x >= self.target_pos.x) or (
                self.direction.x < 0 and new_position.x <= self.target_pos.x
            )
            passed_y = (self.direction.y > 0 and new_position.y >= self.target_pos.y) or (
                self.direction.y < 0 and new_position.y <= self.target_pos.y
            )
            if passed_x and passed_y:
                enemy.world_pos = self.target_pos
                self.new_pos(enemy)
            else:
                enemy.world_pos = new_position
        else:
            if self.tp_time <= 1.0 and canvas is not None:
                self.draw_new_pos(enemy, canvas)
            if self.tp_time <= 0 or enemy.is_out_of_bounds():
                enemy.world_pos = self.target_pos
                self.new_pos(enemy)
                self.tp_time = self.tp_delay

        if (
            self.current_cycle <= 0
            or self.last_health - enemy.health >= self.damage_threshold
        ):
            self.change_cycle(enemy)
            self.current_cycle = self.cycle_time
            self.last_health = enemy.health

        self.current_cycle -= dt
        self.tp_time -= dt
        self.max_active_sec -= dt
        if self.max_active_sec <= 0:
            self.finished = True

    def is_finished(self) -> bool:
        return self.finished

    def new_pos(self, enemy: Any) -> None:
        size = enemy.width * enemy.scale
        screen_width = get_config().screen_width
        if self.mode in (BerserkerMovementMode.RANDOM, BerserkerMovementMode.TELEPORTING):
            bounds = self.mov_bounds
            self.target_pos = Vec2(
                bounds.x + _random_value(self.rng, 0, bounds.width - size),
                bounds.y + _random_value(self.rng, 0, bounds.height - size),
            )
        elif self.mode is BerserkerMovementMode.STALKING:
            if self.player is None:
                self.player = get_world().player
            if self.player is not None:
                radius = int(self.radius)
                self.offset_x = float(_random_value(self.rng, -radius, radius))
                self.offset_y = float(_random_value(self.rng, -radius, 0))
                player_pos = self.player.world_pos
                wanted = player_pos + Vec2(self.offset_x, self.offset_y)
                self.target_pos = Vec2(
                    clamp(wanted.x, 0, screen_width - size),
                    clamp(wanted.y, 0, player_pos.y - self.offset_y),
                )
        elif self.mode is BerserkerMovementMode.LATERAL:
            self.target_x = float(_random_value(self.rng, 10.0, screen_width - size))
            self.target_pos = Vec2(self.target_x, enemy.world_pos.y)
        self.direction = (self.target_pos - enemy.world_pos).normalized()

    def change_cycle(self, enemy: Any) -> None:
        """Move to the next phase and set the enemy's speed for it."""
        following = {
            BerserkerMovementMode.RANDOM: BerserkerMovementMode.LATERAL,
            BerserkerMovementMode.LATERAL: BerserkerMovementMode.TELEPORTING,
            BerserkerMovementMode.TELEPORTING: BerserkerMovementMode.STALKING,
            BerserkerMovementMode.STALKING: BerserkerMovementMode.RANDOM,
        }
        self.mode = following[self.mode]
        enemy.speed = (
            self.stalking_speed
            if self.mode is BerserkerMovementMode.STALKING
            else self.speed
        )

    def draw_new_pos(self, enemy: Any, canvas: Canvas) -> None:
        """Draw a pulsing ghost of the enemy where it will teleport to."""
        alpha = (math.sin(self.tp_time * 10) + 1) * 0.25
        dest = Rect(
            self.target_pos.x,
            self.target_pos.y,
            enemy.width * enemy.scale,
            enemy.height * enemy.scale,
        )
        source = Rect(0.0, 0.0, enemy.width, enemy.height)
        canvas.draw_sprite(enemy.texture, source, dest, fade(WHITE, alpha))