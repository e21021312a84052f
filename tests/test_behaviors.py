import math
import random

import pytest

from bullethell.behaviors import (
    BasicAttack,
    BasicRetreat,
    EnterTop,
    LateralMovement,
    PrecisionAttack,
    RandomMovement,
    StaticMovement,
    TurretAttack,
)
from bullethell.enemy import Enemy
from bullethell.geometry import Vec2
from bullethell.graphics import NullCanvas
from bullethell.player import Player
from bullethell.world import get_world


class _Shooter:
    def __init__(self, pos=Vec2(0.0, 0.0)):
        self.world_pos = pos
        self.width = 0.0
        self.height = 0.0
        self.scale = 1.0
        self.shots = []

    def shoot(self, direction):
        self.shots.append(direction)


def _enemy(x=100.0, y=100.0, speed=100.0, health=100):
    enemy = Enemy(5)
    enemy.world_pos = Vec2(x, y)
    enemy.speed = speed
    enemy.width = 32
    enemy.height = 32
    enemy.scale = 2
    enemy.health = health
    return enemy


@pytest.fixture
def canvas():
    return NullCanvas()


def test_basic_attack_waits_for_delay():
    attack = BasicAttack(0.5)
    shooter = _Shooter()
    attack.update(shooter, 0.25)
    assert shooter.shots == []
    attack.update(shooter, 0.25)
    assert shooter.shots == [Vec2(0.0, 1.0)]
    attack.update(shooter, 0.25)
    assert len(shooter.shots) == 1


def test_precision_attack_aims_at_player(monkeypatch):
    player = Player()
    monkeypatch.setattr(get_world(), "player", player)
    attack = PrecisionAttack(0.1)
    shooter = _Shooter(Vec2(10.0, 10.0))
    attack.update(shooter, 0.2)
    assert len(shooter.shots) == 1
    direction = shooter.shots[0]
    assert math.hypot(direction.x, direction.y) == pytest.approx(1.0)
    assert direction.x > 0 and direction.y > 0


def test_precision_attack_holds_fire_for_inactive_player(monkeypatch):
    player = Player()
    player.active = False
    monkeypatch.setattr(get_world(), "player", player)
    attack = PrecisionAttack(0.1)
    shooter = _Shooter()
    attack.update(shooter, 0.5)
    assert shooter.shots == []


def test_turret_sweeps_full_circle():
    attack = TurretAttack(0.1)
    shooter = _Shooter()
    for _ in range(25):
        attack.update(shooter, 0.1)
    assert len(shooter.shots) == 25
    assert shooter.shots[0].x == pytest.approx(1.0)
    assert shooter.shots[0].y == pytest.approx(0.0)
    assert shooter.shots[6].x == pytest.approx(0.0, abs=1e-9)
    assert shooter.shots[6].y == pytest.approx(1.0)
    assert shooter.shots[24] == shooter.shots[0]
    for shot in shooter.shots:
        assert math.hypot(shot.x, shot.y) == pytest.approx(1.0)


def test_enter_top_moves_down_until_target(canvas):
    enemy = _enemy(y=0.0)
    behaviour = EnterTop(50)
    behaviour.update(enemy, 0.1, canvas)
    assert enemy.world_pos.y == pytest.approx(10.0)
    assert not behaviour.is_finished()
    for _ in range(20):
        behaviour.update(enemy, 0.1, canvas)
    assert behaviour.is_finished()
    assert enemy.world_pos.y >= 50


def test_basic_retreat_leaves_top(canvas):
    enemy = _enemy(y=0.0)
    behaviour = BasicRetreat()
    behaviour.update(enemy, 0.1, canvas)
    assert enemy.world_pos.y == pytest.approx(-10.0)
    for _ in range(20):
        behaviour.update(enemy, 0.1, canvas)
    assert behaviour.is_finished()
    assert enemy.world_pos.y <= -100


def test_random_movement_targets_inside_bounds(canvas):
    enemy = _enemy()
    behaviour = RandomMovement(random.Random(3))
    for _ in range(20):
        behaviour.new_pos(enemy)
        assert 0 <= behaviour.target_pos.x <= 720
        assert 0 <= behaviour.target_pos.y <= 400
        direction = behaviour.direction
        if behaviour.target_pos != enemy.world_pos:
            assert math.hypot(direction.x, direction.y) == pytest.approx(1.0)


def test_random_movement_finishes_after_twenty_seconds(canvas):
    enemy = _enemy()
    behaviour = RandomMovement(random.Random(1))
    behaviour.new_pos(enemy)
    behaviour.update(enemy, 19.0, canvas)
    assert not behaviour.is_finished()
    behaviour.update(enemy, 1.0, canvas)
    assert behaviour.is_finished()


def test_lateral_movement_keeps_height(canvas):
    enemy = _enemy(y=150.0)
    behaviour = LateralMovement(random.Random(7))
    for _ in range(20):
        behaviour.new_pos(enemy)
        assert behaviour.target_pos.y == 150.0
        assert 10 <= behaviour.target_pos.x <= 720 - 64


def test_lateral_movement_snaps_to_passed_target(canvas):
    enemy = _enemy(x=100.0, y=150.0, speed=1000.0)
    behaviour = LateralMovement(random.Random(5))
    behaviour.new_pos(enemy)
    target = behaviour.target_pos
    behaviour.update(enemy, 10.0, canvas)
    assert enemy.world_pos == target
    assert behaviour.target_pos.y == 150.0
    for _ in range(3):
        behaviour.update(enemy, 10.0, canvas)
    assert behaviour.is_finished()


def test_static_movement_waits_while_healthy(canvas):
    enemy = _enemy(health=100)
    behaviour = StaticMovement()
    behaviour.update(enemy, 0.5, canvas)
    assert enemy.world_pos == Vec2(100.0, 100.0)


def test_static_movement_charges_when_hurt(canvas):
    enemy = _enemy(health=40)
    behaviour = StaticMovement()
    behaviour.update(enemy, 0.5, canvas)
    assert enemy.world_pos.x > 100.0
    assert enemy.world_pos.y == 100.0
    assert behaviour.target_pos == Vec2(720 - 64, 100.0)


def test_static_movement_alternates_sides(canvas):
    enemy = _enemy()
    behaviour = StaticMovement()
    behaviour.new_pos(enemy)
    first = behaviour.target_pos
    behaviour.new_pos(enemy)
    second = behaviour.target_pos
    behaviour.new_pos(enemy)
    assert first.x == 720 - 64
    assert second.x == 10.0
    assert behaviour.target_pos == first


def test_static_movement_finishes_after_thirty_seconds(canvas):
    behaviour = StaticMovement()
    enemy = _enemy()
    behaviour.update(enemy, 29.0, canvas)
    assert not behaviour.is_finished()
    behaviour.update(enemy, 1.0, canvas)
    assert behaviour.is_finished()