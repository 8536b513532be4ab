"""Enemy spawning, pursuit, contact damage, wave progression and crowd spacing."""

from __future__ import annotations

import math

from wavehunter.model import ENEMY_SPEED, Direction, Enemy, Health, Vec2, World

PLAYER_RADIUS = 20.0
FOLLOW_STOP_DISTANCE = 10.0
AVOIDANCE_PUSH = 10.0

WAVE_ENEMY_RADIUS = 25.0
STREAM_ENEMY_RADIUS = 16.0
BOSS_RADIUS = 48.0
BOSS_WAVE_PERIOD = 5


def _enemy_health(wave: int) -> Health:
    value = 4 + wave
    return Health(value, value)


def _boss_health(wave: int) -> Health:
    value = 100 + 10 * wave
    return Health(value, value)


def facing_for(vector: Vec2) -> Direction:
    """Pick the facing that best matches a movement vector; the larger axis wins."""
    if abs(vector.y) > abs(vector.x):
        return Direction.UP if vector.y > 0.0 else Direction.DOWN
    return Direction.RIGHT if vector.x > 0.0 else Direction.LEFT


def spawn_wave_enemies(world: World) -> list[Enemy]:
    """Spawn the enemies of the current wave, plus a boss every fifth wave."""
    rng = world.rng
    wave = world.wave
    base = 5 + (wave.current_wave * wave.current_wave) // 2
    wave.enemies_remaining = base
    spawned = [
        Enemy(
            position=Vec2(rng.uniform(-300.0, 300.0), rng.uniform(-200.0, 200.0)),
            health=_enemy_health(wave.current_wave),
            radius=WAVE_ENEMY_RADIUS,
        )
        for _ in range(base)
    ]
    if wave.current_wave % BOSS_WAVE_PERIOD == 0:
        boss = Enemy(
            position=Vec2(rng.uniform(-200.0, 200.0), rng.uniform(100.0, 300.0)),
            health=_boss_health(wave.current_wave),
            radius=BOSS_RADIUS,
            is_boss=True,
        )
        spawned.append(boss)
        print(f"Spawned Boss with HP {boss.health.current}/{boss.health.max}")
        wave.enemies_remaining += 1
    world.enemies.extend(spawned)
    print(f"Wave {wave.current_wave} started with {wave.enemies_remaining} enemies")
    return spawned


def continuous_enemy_spawn(world: World, dt: float) -> list[Enemy]:
    """Every spawn interval, drop a ring of enemies around the player."""
    if world.upgrade.show:
        return []
    world.enemy_spawn_timer.tick(dt)
    if not world.enemy_spawn_timer.just_finished or world.player is None:
        return []
    rng = world.rng
    wave = world.wave
    centre = world.player.position
    spawned = []
    for _ in range(2 + wave.current_wave):
        angle = rng.uniform(0.0, math.tau)
        radius = rng.uniform(300.0, 500.0)
        offset = Vec2(radius * math.cos(angle), radius * math.sin(angle))
        spawned.append(
            Enemy(
                position=centre + offset,
                health=_enemy_health(wave.current_wave),
                radius=STREAM_ENEMY_RADIUS,
            )
        )
        wave.enemies_remaining += 1
    world.enemies.extend(spawned)
    return spawned


def enemy_follow(world: World, dt: float) -> None:
    """Move every enemy toward the player and turn it to face its heading."""
    if world.upgrade.show or world.player is None:
        return
    target = world.player.position
    for enemy in world.enemies:
        offset = target - enemy.position
        if offset.length() > FOLLOW_STOP_DISTANCE:
            heading = offset.normalized()
            enemy.facing = facing_for(heading)
            enemy.position = enemy.position + heading * (ENEMY_SPEED * dt)


def enemy_damage_player(world: World, dt: float) -> bool:
    """Hurt the player by one point if touching an enemy when the hurt timer fires.

    Returns True when damage was dealt.
    """
    if world.upgrade.show:
        return False
    world.hurt_timer.tick(dt)
    player = world.player
    if player is None or not world.hurt_timer.finished:
        return False
    for enemy in world.enemies:
        if player.position.distance(enemy.position) < PLAYER_RADIUS + enemy.radius:
            player.health.current -= 1
            world.hurt_timer.reset()
            return True
    return False


def wave_timer_advance(world: World, dt: float) -> bool:
    """Advance to the next wave when the wave timer fires. Returns True if it did."""
    world.wave.wave_timer.tick(dt)
    if not world.wave.wave_timer.just_finished:
        return False
    world.wave.current_wave += 1
    print(f"Wave advanced to {world.wave.current_wave}")
    spawn_wave_enemies(world)
    return True


def enemy_avoidance(world: World, dt: float) -> None:
    """Push each enemy away from earlier enemies that it overlaps."""
    if world.upgrade.show:
        return
    seen: list[Vec2] = []
    for enemy in world.enemies:
        for other in seen:
            diff = enemy.position - other
            if diff and diff.length() < enemy.radius * 2.0:
                enemy.position = enemy.position + diff.normalized() * (AVOIDANCE_PUSH * dt)
        seen.append(enemy.position)