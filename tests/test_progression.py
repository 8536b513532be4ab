import random

import pytest

from wavehunter.model import (
    ATTACK_INTERVAL,
    Enemy,
    Health,
    PlayerStats,
    UpgradeOption,
    UpgradeSelection,
    Vec2,
    World,
)
from wavehunter.progression import (
    apply_upgrade,
    restart_game,
    upgrade_label,
    upgrade_prompts,
)


def _world_with_choice(*options):
    world = World(rng=random.Random(7))
    world.spawn_player()
    world.upgrade.options = list(options)
    world.upgrade.show = True
    return world


def test_labels():
    assert upgrade_label(UpgradeOption.INCREASE_DAMAGE) == "提升攻击力"
    assert upgrade_label(UpgradeOption.INCREASE_ATTACK_SPEED) == "提升攻速"
    assert upgrade_label(UpgradeOption.INCREASE_BULLET_COUNT) == "增加弹幕数量"


def test_prompts_numbered_from_one():
    selection = UpgradeSelection(
        options=[UpgradeOption.INCREASE_DAMAGE, UpgradeOption.INCREASE_BULLET_COUNT],
        show=True,
    )
    prompts = upgrade_prompts(selection)
    assert prompts[0] == "按下 1：提升攻击力"
    assert len(prompts) == 2
    assert prompts[1].endswith(upgrade_label(UpgradeOption.INCREASE_BULLET_COUNT))


def test_prompts_empty_when_hidden():
    selection = UpgradeSelection(options=[UpgradeOption.INCREASE_DAMAGE], show=False)
    assert upgrade_prompts(selection) == []


def test_damage_upgrade():
    world = _world_with_choice(UpgradeOption.INCREASE_DAMAGE)
    before = world.stats.damage
    assert apply_upgrade(world, 0) is UpgradeOption.INCREASE_DAMAGE
    assert world.stats.damage == before + 2
    assert world.upgrade.show is False
    assert world.upgrade.options == []


def test_attack_speed_upgrade():
    world = _world_with_choice(
        UpgradeOption.INCREASE_DAMAGE, UpgradeOption.INCREASE_ATTACK_SPEED
    )
    apply_upgrade(world, 1)
    assert world.stats.attack_speed == pytest.approx(ATTACK_INTERVAL * 0.8)
    assert world.stats.damage == PlayerStats().damage


def test_bullet_count_upgrade():
    world = _world_with_choice(
        UpgradeOption.INCREASE_DAMAGE,
        UpgradeOption.INCREASE_ATTACK_SPEED,
        UpgradeOption.INCREASE_BULLET_COUNT,
    )
    apply_upgrade(world, 2)
    assert world.stats.bullet_count == PlayerStats().bullet_count + 2


def test_upgrade_heals_up_to_max():
    world = _world_with_choice(UpgradeOption.INCREASE_DAMAGE)
    world.player.health.current = 2
    apply_upgrade(world, 0)
    assert world.player.health.current == 3

    world.upgrade.options = [UpgradeOption.INCREASE_DAMAGE]
    world.upgrade.show = True
    world.player.health.current = world.player.health.max
    apply_upgrade(world, 0)
    assert world.player.health.current == world.player.health.max


def test_index_past_options_only_closes():
    world = _world_with_choice(UpgradeOption.INCREASE_DAMAGE)
    world.player.health.current = 1
    assert apply_upgrade(world, 2) is None
    assert world.stats == PlayerStats()
    assert world.player.health.current == 1
    assert world.upgrade.show is False


def test_nothing_happens_when_hidden():
    world = World()
    world.spawn_player()
    world.upgrade.options = [UpgradeOption.INCREASE_DAMAGE]
    assert apply_upgrade(world, 0) is None
    assert world.stats == PlayerStats()
    assert world.upgrade.options == [UpgradeOption.INCREASE_DAMAGE]


def test_negative_index_rejected():
    world = _world_with_choice(UpgradeOption.INCREASE_DAMAGE)
    with pytest.raises(ValueError):
        apply_upgrade(world, -1)


def test_restart_requires_game_over():
    world = World()
    world.score = 30
    assert restart_game(world) is False
    assert world.score == 30
    assert world.player is None


def test_restart_resets_everything():
    world = World(rng=random.Random(3))
    world.game_over = True
    world.score = 120
    world.high_score = 120
    world.wave.current_wave = 4
    world.stats.damage = 10
    world.stats.level = 3
    world.upgrade.options = [UpgradeOption.INCREASE_DAMAGE]
    world.upgrade.show = True
    world.enemies.append(
        Enemy(position=Vec2(1000.0, 1000.0), health=Health(1, 1), radius=16.0)
    )

    assert restart_game(world) is True
    assert world.game_over is False
    assert world.score == 0
    assert world.high_score == 120
    assert world.wave.current_wave == 1
    assert world.stats == PlayerStats()
    assert world.upgrade.show is False
    assert world.upgrade.options == []
    assert world.bullets == []
    assert world.player is not None
    assert world.player.health.current == world.player.health.max
    assert all(e.position != Vec2(1000.0, 1000.0) for e in world.enemies)
    assert world.wave.enemies_remaining == len(world.enemies)
    assert not any(e.is_boss for e in world.enemies)