"""Screens of the game and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .audio import get_audio
from .config import get_config
from .enemy import Enemy
from .enemy_types import load_enemy_types
from .factory import EnemyFactory
from .geometry import Vec2
from .graphics import BLACK, GREEN, RED, WHITE, Canvas, Controls, Texture, fade
from .levels import EnemyWave, LevelData
from .levels import load_level as read_level
from .player import PLAYER_BULLET_TEXTURE_PATH, PLAYER_TEXTURE_PATH, Player
from .scores import ScoreManager
from .spatial_grid import SpatialGrid
from .world import get_world

LEVEL_PATHS = (
    "json/lvl1.json",
    "json/lvl2.json",
    "json/lvl3.json",
    "json/lvl4.json",
    "json/lvl5.json",
)
ENEMY_TYPES_PATH = "json/enemy_types.json"
MAX_PLAYER_HEALTH = 250
_FPS_COLOR = (0, 158, 47, 255)


class GameState(ABC):
    """One screen of the game, owned by a state manager."""

    def __init__(self, manager: "StateManager") -> None:
        self.manager = manager

    def enter(self) -> None:
        """Called when the state becomes current."""

    def exit(self) -> None:
        """Called when the state is replaced."""

    @abstractmethod
    def update(self, dt: float, canvas: Canvas, controls: Controls) -> None:
        """Run and draw one frame."""


@dataclass
class StateManager:
    """Holds the current state and the score table shared by the states."""

    scores: ScoreManager = field(default_factory=ScoreManager)
    current: Optional[GameState] = None

    def set_state(self, state: GameState) -> None:
        """Leave the current state and enter the new one."""
        if self.current is not None:
            self.current.exit()
        self.current = state
        state.enter()

    def update(self, dt: float, canvas: Canvas, controls: Controls) -> None:
        """Advance the audio and the current state by one frame."""
        if self.current is None:
            raise RuntimeError("no state has been set")
        get_audio().update()
        self.current.update(dt, canvas, controls)


def _draw_centered(canvas: Canvas, text: str, y: int, size: int, color) -> None:
    x = get_config().screen_width // 2 - canvas.measure_text(text, size) // 2
    canvas.draw_text(text, x, y, size, color)


class MenuState(GameState):
    """Title screen with the controls; confirm starts a game."""

    def update(self, dt: float, canvas: Canvas, controls: Controls) -> None:
        canvas.clear(WHITE)
        height = get_config().screen_height
        _draw_centered(canvas, "Main Menu", height // 6, 30, BLACK)
        _draw_centered(canvas, "Controls:", height // 4, 30, BLACK)
        _draw_centered(canvas, "WASD for movement", height // 4 + 40, 30, BLACK)
        _draw_centered(canvas, "Space for shooting", height // 4 + 80, 30, BLACK)
        _draw_centered(canvas, "Press intro to start", height // 2, 30, BLACK)
        if controls.confirm:
            self.manager.set_state(LevelState(self.manager, canvas))


class GameOverState(GameState):
    """Shown after the player dies; confirm returns to the menu."""

    def update(self, dt: float, canvas: Canvas, controls: Controls) -> None:
        canvas.clear(BLACK)
        _draw_centered(canvas, "Game Over", get_config().screen_height // 6, 30, RED)
        if controls.confirm:
            self.manager.set_state(MenuState(self.manager))


class WinState(GameState):
    """Shown after the last level; confirm returns to the menu."""

    def update(self, dt: float, canvas: Canvas, controls: Controls) -> None:
        canvas.clear(BLACK)
        _draw_centered(canvas, "You Won!", get_config().screen_height // 6, 30, GREEN)
        if controls.confirm:
            self.manager.set_state(MenuState(self.manager))


class TestState(GameState):
    """A bare scene for trying things out; confirm returns to the menu."""

    __test__ = False

    def update(self, dt: float, canvas: Canvas, controls: Controls) -> None:
        canvas.clear(WHITE)
        canvas.draw_text("Test Scene", 720 // 2 - 80, 200, 30, BLACK)
        if controls.confirm:
            self.manager.set_state(MenuState(self.manager))


@dataclass
class ActiveWave:
    """Spawning progress of one enemy wave."""

    wave: EnemyWave
    time_since_last_spawn: float = 0.0
    spawned_count: int = 0


class LevelState(GameState):
    """Plays the levels in order: spawns waves, resolves hits, tracks progress."""

    background_scale = 1.25
    level_transition_delay = 5.0

    def __init__(self, manager: StateManager, canvas: Canvas) -> None:
        super().__init__(manager)
        config = get_config()
        self.canvas = canvas
        self.player = Player(
            canvas.load_texture(PLAYER_TEXTURE_PATH),
            canvas.load_texture(PLAYER_BULLET_TEXTURE_PATH),
        )
        self.background = Texture()
        self.b_pos = Vec2()
        self.b2_pos = Vec2()
        self.grid = SpatialGrid(
            config.screen_width, config.screen_height, config.grid_cell_size
        )
        self.enemies: list[Enemy] = []
        self.waves: list[ActiveWave] = []
        self.time_since_level_start = 0.0
        self.remaining_enemies = 0
        self.level = LevelData()
        self.current_level_index = 0
        self.level_completed = False
        self.is_transitioning = False
        self.level_transition_timer = 0.0
        self.level_paths: list[str] = list(LEVEL_PATHS)
        self.enemy_types_path = ENEMY_TYPES_PATH
        self.factory = EnemyFactory({})

    def enter(self) -> None:
        """Load the first level and the enemy types, and register the player."""
        self.load_level(self.level_paths[self.current_level_index])
        self.factory = EnemyFactory(load_enemy_types(self.enemy_types_path))
        self.factory.load_textures(self.canvas)
        get_world().player = self.player
        get_audio().play_sound("startgame")

    def exit(self) -> None:
        """Record the score and release everything the level loaded."""
        self.manager.scores.add_score(
            "Player1", self.player.score, self.current_level_index
        )
        self.player.unload(self.canvas)
        self.enemies.clear()
        self.factory.unload_textures(self.canvas)
        get_audio().stop_music()
        self.canvas.unload_texture(self.background)

    def update(self, dt: float, canvas: Canvas, controls: Controls) -> None:
        canvas.clear(WHITE)
        self._draw_background(dt, canvas)

        self.grid.clear()
        self.insert_into_grid()
        self.check_collisions()

        self._spawn_waves(dt)

        if self.player.active:
            self.player.tick(dt, canvas, controls)
        else:
            get_audio().play_sound("gameover")
            self.manager.set_state(GameOverState(self.manager))
            return

        for enemy in self.enemies:
            enemy.tick(dt, canvas)
        self.enemies = [
            enemy for enemy in self.enemies if enemy.active or enemy.bullet_pool.active()
        ]

        if self.is_transitioning:
            self.level_transition_timer -= dt
            x = get_config().screen_width // 2 - 200
            height = get_config().screen_height
            canvas.draw_text("Level cleared!", x, height // 6, 40, WHITE)
            canvas.draw_text("Loading next level...", x, height // 4, 40, WHITE)
            get_audio().stop_music()
            if self.level_transition_timer <= 0.0:
                self.is_transitioning = False
                self.reset_level()
            return

        if not self.level_completed and self.remaining_enemies == 0 and not self.enemies:
            self.current_level_index += 1
            if self.current_level_index < len(self.level_paths):
                self.is_transitioning = True
                self.level_transition_timer = self.level_transition_delay
                self.level_completed = True
            else:
                get_audio().play_sound("win")
                self.manager.set_state(WinState(self.manager))
                return

        fps = round(1.0 / dt) if dt > 0 else 0
        canvas.draw_text(f"{fps} FPS", 680, 10, 20, _FPS_COLOR)

    def _draw_background(self, dt: float, canvas: Canvas) -> None:
        span = self.background.height * self.background_scale
        y = self.b_pos.y + 120.0 * dt
        if y >= span:
            y = 0.0
        self.b_pos = Vec2(self.b_pos.x, y)
        self.b2_pos = Vec2(self.b2_pos.x, y - span)
        tint = fade(WHITE, 0.99)
        canvas.draw_texture_scaled(self.background, self.b_pos, self.background_scale, tint)
        canvas.draw_texture_scaled(self.background, self.b2_pos, self.background_scale, tint)

    def _spawn_waves(self, dt: float) -> None:
        self.time_since_level_start += dt
        for active in self.waves:
            if self.time_since_level_start < active.wave.start_time:
                continue
            active.time_since_last_spawn += dt
            if (
                active.spawned_count < active.wave.count
                and active.time_since_last_spawn >= active.wave.delay
            ):
                self.spawn_enemy(active.wave.type)
                active.time_since_last_spawn = 0.0
                active.spawned_count += 1
                self.remaining_enemies -= 1

    def insert_into_grid(self) -> None:
        """Put the player, the enemies and all fired bullets in the grid."""
        if self.player.active:
            self.grid.insert(self.player)
            for bullet in self.player.bullet_pool.active():
                self.grid.insert(bullet)
        for enemy in self.enemies:
            self.grid.insert(enemy)
            for bullet in enemy.bullet_pool.active():
                self.grid.insert(bullet)

    def check_collisions(self) -> None:
        """Apply enemy bullets to the player and player bullets to enemies."""
        for enemy in self.enemies:
            for bullet in enemy.bullet_pool.active():
                for obj in self.grid.nearby(bullet):
                    if isinstance(obj, Player) and bullet.check_collision(obj):
                        obj.bullet_collision(bullet)
                        enemy.bullet_pool.release(bullet)
                        break

        for bullet in self.player.bullet_pool.active():
            for obj in self.grid.nearby(bullet):
                if isinstance(obj, Enemy) and bullet.check_collision(obj):
                    obj.bullet_collision(bullet)
                    self.player.bullet_pool.release(bullet)
                    break

    def spawn_enemy(self, type_name: str) -> Enemy:
        """Create an enemy of the named type and add it to the level."""
        enemy = self.factory.create(type_name)
        self.enemies.append(enemy)
        return enemy

    def load_level(self, path: str) -> None:
        """Read a level file, load its background and music, queue its waves."""
        self.level = read_level(path)
        if self.level.background_texture:
            self.background = self.canvas.load_texture(self.level.background_texture)
        else:
            self.background = Texture()
        get_audio().play_music(self.level.music_track)
        self.waves = [ActiveWave(wave) for wave in self.level.waves]
        self.remaining_enemies += sum(wave.count for wave in self.level.waves)

    def reset_level(self) -> None:
        """Start the level at current_level_index, healing the player a little."""
        get_audio().play_sound("nextLevel")
        self.enemies.clear()
        self.canvas.unload_texture(self.background)
        self.background = Texture()
        self.level_completed = False
        self.time_since_level_start = 0.0
        self.remaining_enemies = 0

        healed = self.player.health + 40.0 + 20.0 * self.current_level_index
        self.player.health = int(min(healed, MAX_PLAYER_HEALTH))

        self.load_level(self.level_paths[self.current_level_index])