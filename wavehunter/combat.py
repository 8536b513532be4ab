"""Player movement and attacks, bullets, hits, kills and level ups."""

from __future__ import annotations

import math
from collections.abc import Collection

from wavehunter.model import (
    BULLET_SPEED,
    PLAYER_SPEED,
    WORLD_HEIGHT,
    WORLD_WIDTH,
    Bullet,
    Direction,
    Enemy,
    UpgradeOption,
    Vec2,
    World,
)

BULLET_RADIUS = 8.0
PLAYER_EDGE_MARGIN = 16.0
ENEMY_KILL_SCORE = 10
BOSS_KILL_SCORE = 100

# Movement keys in the order they are read; a later key wins the facing.
_MOVE_KEYS = (
    ("w", Vec2(0.0, 1.0), Direction.UP),
    ("s", Vec2(0.0, -1.0), Direction.DOWN),
    ("a", Vec2(-1.0, 0.0), Direction.LEFT),
    ("d", Vec2(1.0, 0.0), Direction.RIGHT),
)


def required_kills(level: int) -> int:
    """Total kills needed to leave the given level."""
    return level * level * 5


def player_movement(world: World, held: Collection[str], dt: float) -> None:
    """Move the player by the held keys ("w", "a", "s", "d") and keep it in the world."""
    player = world.player
    if world.upgrade.show or player is None:
        return
    direction = Vec2()
    facing = player.facing
    for key, step, key_facing in _MOVE_KEYS:
        if key in held:
            direction = direction + step
            facing = key_facing
    position = player.position
    if direction:
        position = position + direction.normalized() * (PLAYER_SPEED * dt)
        player.facing = facing
    half_w = WORLD_WIDTH / 2.0 - PLAYER_EDGE_MARGIN
    half_h = WORLD_HEIGHT / 2.0 - PLAYER_EDGE_MARGIN
    player.position = Vec2(
        min(max(position.x, -half_w), half_w),
        min(max(position.y, -half_h), half_h),
    )


def player_attack(world: World, dt: float) -> list[Bullet]:
    """Fire an even ring of bullets from the player whenever the attack timer fires."""
    if world.upgrade.show:
        return []
    world.attack_timer.tick(dt)
    if not world.attack_timer.just_finished or world.player is None:
        return []
    count = world.stats.bullet_count
    origin = world.player.position
    fired = []
    for i in range(count):
        angle = i * math.tau / count
        fired.append(Bullet(position=origin, direction=Vec2(math.cos(angle), math.sin(angle))))
    world.bullets.extend(fired)
    return fired


def update_attack_timer(world: World) -> None:
    """Keep the attack timer's period equal to the player's attack speed."""
    world.attack_timer.set_duration(world.stats.attack_speed)


def check_health(world: World) -> bool:
    """End the game when the player has no health left. Returns True if it ended."""
    player = world.player
    if world.game_over or player is None or player.health.current > 0:
        return False
    if world.score > world.high_score:
        world.high_score = world.score
        print(f"NEW HIGH SCORE: {world.score}")
    print("Game Over!")
    world.game_over = True
    world.player = None
    return True


def bullet_movement(world: World, dt: float) -> None:
    """Fly bullets along their directions and drop those that leave the world."""
    if world.upgrade.show:
        return
    half_w = WORLD_WIDTH / 2.0
    half_h = WORLD_HEIGHT / 2.0
    remaining = []
    for bullet in world.bullets:
        bullet.position = bullet.position + bullet.direction.normalized() * (BULLET_SPEED * dt)
        x, y = bullet.position.x, bullet.position.y
        if -half_w <= x <= half_w and -half_h <= y <= half_h:
            remaining.append(bullet)
    world.bullets = remaining


def _level_up(world: World) -> None:
    world.stats.level += 1
    options = list(UpgradeOption)
    world.rng.shuffle(options)
    world.upgrade.options = options[:3]
    world.upgrade.show = True
    print("Level up! Choose one upgrade!")


def _kill(world: World, enemy: Enemy) -> None:
    world.enemies.remove(enemy)
    world.wave.enemies_remaining = max(world.wave.enemies_remaining - 1, 0)
    world.score += BOSS_KILL_SCORE if enemy.is_boss else ENEMY_KILL_SCORE
    world.stats.kills += 1
    if world.stats.kills >= required_kills(world.stats.level):
        _level_up(world)


def bullet_hit_enemy(world: World) -> None:
    """Let each bullet strike the first enemy it touches, killing it at zero health."""
    if world.upgrade.show:
        return
    remaining = []
    for bullet in world.bullets:
        target = next(
            (
                enemy
                for enemy in world.enemies
                if bullet.position.distance(enemy.position) < enemy.radius + BULLET_RADIUS
            ),
            None,
        )
        if target is None:
            remaining.append(bullet)
            continue
        target.health.current -= world.stats.damage
        if target.health.current <= 0:
            _kill(world, target)
    world.bullets = remaining