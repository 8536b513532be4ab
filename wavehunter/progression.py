"""Level-up choices and restarting after a game over."""

from __future__ import annotations

from wavehunter.enemies import spawn_wave_enemies
from wavehunter.model import UpgradeOption, UpgradeSelection, World

ATTACK_SPEED_FACTOR = 0.8
DAMAGE_STEP = 2
BULLET_COUNT_STEP = 2
UPGRADE_HEAL = 1

_LABELS = {
    UpgradeOption.INCREASE_DAMAGE: "提升攻击力",
    UpgradeOption.INCREASE_ATTACK_SPEED: "提升攻速",
    UpgradeOption.INCREASE_BULLET_COUNT: "增加弹幕数量",
}


def upgrade_label(option: UpgradeOption) -> str:
    """Text shown for an upgrade option."""
    return _LABELS[option]


def upgrade_prompts(selection: UpgradeSelection) -> list[str]:
    """One prompt line per offered option, numbered from 1; empty when hidden."""
    if not selection.show:
        return []
    return [
        f"按下 {number}：{upgrade_label(option)}"
        for number, option in enumerate(selection.options, start=1)
    ]


def apply_upgrade(world: World, index: int) -> UpgradeOption | None:
    """Take the option at ``index`` (counted from 0) and close the selection.

    Choosing an upgrade heals the player by one point up to its maximum. An
    index past the offered options closes the selection without any upgrade.
    Returns the upgrade applied, or None.
    """
    if index < 0:
        raise ValueError(f"upgrade index must not be negative, got {index}")
    selection = world.upgrade
    if not selection.show:
        return None
    chosen = selection.options[index] if index < len(selection.options) else None
    if chosen is not None:
        stats = world.stats
        if chosen is UpgradeOption.INCREASE_DAMAGE:
            stats.damage += DAMAGE_STEP
        elif chosen is UpgradeOption.INCREASE_ATTACK_SPEED:
            stats.attack_speed *= ATTACK_SPEED_FACTOR
        else:
            stats.bullet_count += BULLET_COUNT_STEP
        if world.player is not None:
            health = world.player.health
            health.current = min(health.current + UPGRADE_HEAL, health.max)
    selection.clear()
    return chosen


def restart_game(world: World) -> bool:
    """Start over after a game over. Returns True if the game was restarted."""
    if not world.game_over:
        return False
    world.player = None
    world.enemies.clear()
    world.bullets.clear()
    world.wave.current_wave = 1
    world.wave.enemies_remaining = 0
    world.game_over = False
    world.score = 0
    world.stats.reset()
    world.upgrade.clear()
    world.spawn_player()
    spawn_wave_enemies(world)
    return True