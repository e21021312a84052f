"""The ship steered by the player."""

from __future__ import annotations

from typing import Optional

from .audio import get_audio
from .config import get_config
from .game_object import BaseCharacter, Bullet
from .geometry import Vec2
from .graphics import RED, WHITE, Canvas, Color, Controls, Texture, fade

PLAYER_TEXTURE_PATH = "assets/ships/Player/Ship-Nebula - Sprite Sheet.png"
PLAYER_BULLET_TEXTURE_PATH = (
    "assets/ships/Player/Nebula Shot Levels - Sprite Sheet 32x32.png"
)


class Player(BaseCharacter):
    """Moves with the controls, shoots upwards and loses score over time."""

    max_invincibility = 0.75
    shoot_delay = 0.15

    def __init__(
        self, texture: Optional[Texture] = None, bullet_texture: Optional[Texture] = None
    ) -> None:
        super().__init__(20)
        config = get_config()
        self.active = True
        self.world_pos = Vec2(config.screen_width // 2, config.screen_height // 2)
        self.base_speed = 700.0
        self.precision_speed = self.base_speed / 4
        self.speed = self.base_speed
        self.texture = texture if texture is not None else Texture()
        self.bullet_texture = bullet_texture if bullet_texture is not None else Texture()
        self.x_rows = 4
        self.y_rows = 1
        self.width = self.texture.width // self.x_rows
        self.height = self.texture.height // self.y_rows
        self.update_time = 0.15
        self.scale = 2
        self.health = 250
        self.last_frame_pos = Vec2()
        self.active_invincibility = 0.0
        self.shoot_cooldown = 0.0
        self.score = 10000
        self.score_penalty = 10.0
        self.penalty_accumulator = 0.0

    def tick(self, dt: float, canvas: Canvas, controls: Optional[Controls] = None) -> None:
        """Apply one frame of input, timers and drawing."""
        if not self.active:
            return
        controls = controls if controls is not None else Controls()

        step = self.speed * dt
        x, y = self.world_pos.x, self.world_pos.y
        if controls.up:
            y -= step
        if controls.down:
            y += step
        if controls.left:
            x -= step
        if controls.right:
            x += step
        self.world_pos = Vec2(x, y)

        self.shoot_cooldown -= dt
        if controls.shoot and self.shoot_cooldown <= 0.0:
            self.shoot(Vec2(0.0, -1.0))
            self.shoot_cooldown = self.shoot_delay

        if controls.precision:
            self.speed = self.precision_speed
            canvas.draw_rect_lines(self.hitbox(), RED)
        else:
            self.speed = self.base_speed

        if self.is_out_of_bounds():
            self.undo_movement()
        self.last_frame_pos = self.world_pos

        if self.is_invincible():
            self.active_invincibility -= dt

        self._subtract_score(dt)
        self._draw_interface(canvas)
        super().tick(dt, canvas)

    def draw(self, dt: float, canvas: Canvas, tint: Color = WHITE) -> None:
        """Draw the ship, blinking faintly while invincible."""
        if not self.is_invincible():
            super().draw(dt, canvas)
        elif int(self.active_invincibility * 10) % 2 == 0:
            super().draw(dt, canvas, fade(WHITE, 0.4))

    def undo_movement(self) -> None:
        """Return to the position of the previous frame."""
        self.world_pos = self.last_frame_pos

    def shoot(self, direction: Vec2) -> Optional[Bullet]:
        """Fire a bullet from the ship; None when the pool is empty."""
        get_audio().play_sound("laser")
        bullet = self.bullet_pool.acquire()
        if bullet is not None:
            position = Vec2(
                self.world_pos.x + self.width / 2, self.world_pos.y + self.height / 2
            )
            bullet.initialize(
                self.bullet_texture, position, 800.0, 4, 1, 20, direction.normalized()
            )
        return bullet

    def take_damage(self, damage: int) -> None:
        """Take a hit unless still invincible from the previous one."""
        if self.is_invincible():
            return
        self.active_invincibility = self.max_invincibility
        super().take_damage(damage)

    def is_invincible(self) -> bool:
        """True while the post-hit grace period runs."""
        return self.active_invincibility > 0.0

    def unload(self, canvas: Canvas) -> None:
        """Play the death sound and release the ship's textures."""
        get_audio().play_sound("death")
        if self.texture.loaded:
            canvas.unload_texture(self.texture)
        if self.bullet_texture.loaded:
            canvas.unload_texture(self.bullet_texture)

    def _draw_interface(self, canvas: Canvas) -> None:
        canvas.draw_text(f"Health: {self.health}", 10, 10, 20, WHITE)
        canvas.draw_text(f"Score: {self.score}", 10, 30, 20, WHITE)

    def _subtract_score(self, dt: float) -> None:
        self.penalty_accumulator += self.score_penalty * dt
        while self.penalty_accumulator >= 1.0:
            self.score -= 1
            self.penalty_accumulator -= 1.0
            if self.score < 0:
                self.score = 0
                self.penalty_accumulator = 0.0
                break