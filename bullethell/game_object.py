"""Drawable game objects, bullets and characters that fire them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .audio import get_audio
from .geometry import Rect, Vec2
from .graphics import WHITE, Canvas, Color, Texture
from .pool import Pool

FIELD_WIDTH = 720
FIELD_HEIGHT = 1280
DEAD_HITBOX = Rect(-1000, -1000, 1, 1)


class GameObject:
    """An animated sprite with a position, speed and size."""

    def __init__(self) -> None:
        self.texture = Texture()
        self.world_pos = Vec2()
        self.speed = 0.0
        self.width = 0.0
        self.height = 0.0
        self.scale = 0.0
        self.x_rows = 1
        self.y_rows = 1
        self.running_time = 0.0
        self.frame = 0
        self.update_time = 0.0
        self.active = False

    def tick(self, dt: float, canvas: Canvas) -> None:
        """Advance one frame: draw the object if it is active."""
        if not self.active:
            return
        self.draw(dt, canvas)

    def draw(self, dt: float, canvas: Canvas, tint: Color = WHITE) -> None:
        """Advance the sprite animation and draw the current frame."""
        self.running_time += dt
        if self.running_time >= self.update_time:
            self.frame += 1
            self.running_time = 0.0
            if self.frame > self.x_rows:
                self.frame = 0
        source = Rect(self.frame * self.width, 0.0, self.width, self.height)
        dest = Rect(
            self.world_pos.x,
            self.world_pos.y,
            self.scale * self.width,
            self.scale * self.height,
        )
        canvas.draw_sprite(self.texture, source, dest, tint)

    def is_out_of_bounds(self) -> bool:
        """True when any edge touches or leaves the play field."""
        return (
            self.world_pos.x <= 0
            or self.world_pos.y <= 0
            or self.world_pos.x + self.width * self.scale > FIELD_WIDTH
            or self.world_pos.y + self.height * self.scale > FIELD_HEIGHT
        )

    def hitbox(self) -> Rect:
        """The scaled rectangle the object occupies."""
        return Rect(
            self.world_pos.x,
            self.world_pos.y,
            self.width * self.scale,
            self.height * self.scale,
        )


class Bullet(GameObject):
    """A projectile travelling in a straight line."""

    def __init__(self) -> None:
        super().__init__()
        self.damage = 0
        self.direction = Vec2()

    def tick(self, dt: float, canvas: Canvas) -> None:
        if not self.active:
            return
        self.world_pos = self.world_pos + self.direction * (self.speed * dt)
        super().tick(dt, canvas)

    def check_collision(self, other: GameObject) -> bool:
        """True when this bullet overlaps other."""
        return self.hitbox().collides(other.hitbox())

    def initialize(
        self,
        texture: Texture,
        position: Vec2,
        speed: float,
        x_rows: int,
        y_rows: int,
        damage: int,
        direction: Vec2,
    ) -> None:
        """Activate the bullet with a fresh texture, position and heading."""
        self.active = True
        self.texture = texture
        self.world_pos = position
        self.speed = speed
        self.x_rows = x_rows
        self.y_rows = y_rows
        self.width = texture.width // x_rows
        self.height = texture.height // y_rows
        self.scale = 1
        self.direction = direction.normalized()
        self.running_time = 0.0
        self.frame = 0
        self.damage = int(damage)

    def reset(self) -> None:
        """Deactivate the bullet and clear its motion and damage."""
        self.active = False
        self.direction = Vec2()
        self.damage = 0
        self.speed = 0


class BaseCharacter(GameObject, ABC):
    """A game object with health and a pool of bullets."""

    def __init__(self, bullet_pool_size: int) -> None:
        super().__init__()
        self.bullet_pool: Pool[Bullet] = Pool(bullet_pool_size, Bullet)
        self.bullet_texture = Texture()
        self.health = 0

    def tick(self, dt: float, canvas: Canvas) -> None:
        """Move the fired bullets, recycle stray ones, then draw."""
        for bullet in self.bullet_pool.active():
            bullet.tick(dt, canvas)
            if bullet.is_out_of_bounds():
                bullet.reset()
                self.bullet_pool.release(bullet)
        super().tick(dt, canvas)

    @abstractmethod
    def undo_movement(self) -> None:
        """React to leaving the play field."""

    @abstractmethod
    def shoot(self, direction: Vec2) -> Optional[Bullet]:
        """Fire a bullet in direction."""

    def take_damage(self, damage: int) -> None:
        """Lose health; at zero the character explodes and deactivates."""
        if self.health > 0:
            self.health -= damage
        if self.health <= 0:
            get_audio().play_sound("explosion")
            self.active = False

    def bullet_collision(self, bullet: Bullet) -> None:
        """Be hit by bullet, which is spent."""
        self.take_damage(bullet.damage)
        bullet.active = False

    def hitbox(self) -> Rect:
        if self.health <= 0:
            return DEAD_HITBOX
        return super().hitbox()