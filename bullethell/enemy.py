"""Enemy ships driven by pluggable movement and attack behaviours."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Optional

from .audio import get_audio
from .game_object import BaseCharacter, Bullet
from .geometry import Vec2
from .graphics import RED, WHITE, Canvas, Color, fade
from .world import get_world


class BerserkerMovementMode(Enum):
    """Phases the berserker boss cycles through."""

    RANDOM = auto()
    TELEPORTING = auto()
    STALKING = auto()
    LATERAL = auto()


class EnemyState(Enum):
    """Life stages of an enemy."""

    ENTERING = auto()
    ACTIVE = auto()
    RETREATING = auto()


class Enemy(BaseCharacter):
    """An enemy that enters, fights and retreats using its behaviours."""

    max_damaged = 0.5

    def __init__(self, bullet_count: int) -> None:
        super().__init__(bullet_count)
        self.active = True
        self.x_rows = 4
        self.y_rows = 1
        self.update_time = 0.15
        self.state = EnemyState.ENTERING
        self.enter_behavior: Optional[Any] = None
        self.movement_behavior: Optional[Any] = None
        self.retreat_behavior: Optional[Any] = None
        self.attack_behavior: Optional[Any] = None
        self.active_damaged = 0.0
        self.damage = 0.0
        self.bullet_speed = 0.0
        self.score = 0

    def tick(self, dt: float, canvas: Canvas) -> None:
        """Run the behaviour for the current stage, then bullets and drawing."""
        if self.health > 0:
            if self.state is EnemyState.ENTERING:
                self.enter_behavior.update(self, dt, canvas)
                if self.enter_behavior.is_finished():
                    self.state = EnemyState.ACTIVE
                    self.enter_behavior = None
                    self.movement_behavior.new_pos(self)
            elif self.state is EnemyState.ACTIVE:
                self.movement_behavior.update(self, dt, canvas)
                self.attack_behavior.update(self, dt)
                if self.is_out_of_bounds():
                    self.undo_movement()
                if self.movement_behavior.is_finished():
                    self.state = EnemyState.RETREATING
                    self.movement_behavior = None
            elif self.state is EnemyState.RETREATING:
                self.retreat_behavior.update(self, dt, canvas)
                self.attack_behavior.update(self, dt)
                if self.retreat_behavior.is_finished():
                    self.active = False

            if self.is_damaged():
                self.active_damaged -= dt

        super().tick(dt, canvas)

    def draw(self, dt: float, canvas: Canvas, tint: Color = WHITE) -> None:
        """Draw the ship, blinking red while it is recovering from a hit."""
        if self.health <= 0:
            return
        if not self.is_damaged():
            super().draw(dt, canvas)
        elif int(self.active_damaged * 10) % 2 == 0:
            super().draw(dt, canvas, fade(RED, 0.9))

    def undo_movement(self) -> None:
        """Pick a new target instead of leaving the field."""
        if self.movement_behavior is not None:
            self.movement_behavior.new_pos(self)

    def shoot(self, direction: Vec2) -> Optional[Bullet]:
        """Fire a bullet from the ship's centre; None when the pool is empty."""
        get_audio().play_sound("laser2")
        bullet = self.bullet_pool.acquire()
        if bullet is not None:
            position = Vec2(
                self.world_pos.x + self.width / 2, self.world_pos.y + self.height / 2
            )
            bullet.initialize(
                self.bullet_texture,
                position,
                self.bullet_speed,
                4,
                1,
                int(self.damage),
                direction.normalized(),
            )
        return bullet

    def take_damage(self, damage: int) -> None:
        """Take a hit; a kill adds this enemy's score to the player."""
        self.active_damaged = self.max_damaged
        super().take_damage(damage)
        if self.health <= 0:
            player = get_world().player
            if player is not None:
                player.score += self.score

    def is_damaged(self) -> bool:
        """True while the hit flash is running."""
        return self.active_damaged > 0.0

    def current_movement_mode(self) -> BerserkerMovementMode:
        """The berserker phase of the movement behaviour, RANDOM otherwise."""
        mode = getattr(self.movement_behavior, "mode", None)
        if isinstance(mode, BerserkerMovementMode):
            return mode
        return BerserkerMovementMode.RANDOM