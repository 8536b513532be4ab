"""Camera placement and the heads-up display text."""

from __future__ import annotations

from wavehunter.model import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    WORLD_HEIGHT,
    WORLD_WIDTH,
    Enemy,
    PlayerStats,
    Vec2,
    World,
)

BOSS_LABEL = "Boss HP: "


def camera_follow(position: Vec2) -> Vec2:
    """Camera centre for a player position, kept so the view stays inside the world."""
    limit_x = WORLD_WIDTH / 2.0 - WINDOW_WIDTH / 2.0
    limit_y = WORLD_HEIGHT / 2.0 - WINDOW_HEIGHT / 2.0
    return Vec2(
        min(max(position.x, -limit_x), limit_x),
        min(max(position.y, -limit_y), limit_y),
    )


def nearest_boss(world: World) -> Enemy | None:
    """The boss closest to the player, or None without a player or a boss."""
    if world.player is None:
        return None
    origin = world.player.position
    bosses = (enemy for enemy in world.enemies if enemy.is_boss)
    return min(bosses, key=lambda boss: boss.position.distance(origin), default=None)


def format_stats(stats: PlayerStats) -> str:
    """Attribute summary line."""
    return (
        f"攻击 {stats.damage} | 攻速 {stats.attack_speed:.2f}s"
        f" | 弹幕数 {stats.bullet_count}"
    )


def hud_text(world: World) -> dict[str, tuple[str, str]]:
    """Label and value of every HUD line, keyed by line name.

    Without a player the health value and the boss line are empty; the boss
    line is also empty when there is no boss.
    """
    player = world.player
    health = f"{player.health.current}/{player.health.max}" if player is not None else ""
    boss = nearest_boss(world)
    boss_line = (
        (BOSS_LABEL, f"{boss.health.current}/{boss.health.max}") if boss is not None else ("", "")
    )
    return {
        "health": ("生命值: ", health),
        "score": ("得分: ", str(world.score)),
        "wave": ("波次: ", str(world.wave.current_wave)),
        "boss": boss_line,
        "stats": ("属性: ", format_stats(world.stats)),
        "high_score": ("最高分: ", str(world.high_score)),
    }