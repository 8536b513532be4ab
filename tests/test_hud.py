from wavehunter.hud import camera_follow, format_stats, hud_text, nearest_boss
from wavehunter.model import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    WORLD_HEIGHT,
    WORLD_WIDTH,
    Enemy,
    Health,
    PlayerStats,
    Vec2,
    World,
)


def _boss(x, y, hp):
    return Enemy(position=Vec2(x, y), health=Health(hp, hp), radius=48.0, is_boss=True)


def test_camera_follows_inside_bounds():
    assert camera_follow(Vec2(0.0, -200.0)) == Vec2(0.0, -200.0)


def test_camera_clamped_at_world_edges():
    far = camera_follow(Vec2(1e6, -1e6))
    assert far.x == WORLD_WIDTH / 2.0 - WINDOW_WIDTH / 2.0
    assert far.y == -(WORLD_HEIGHT / 2.0 - WINDOW_HEIGHT / 2.0)
    other = camera_follow(Vec2(-1e6, 1e6))
    assert other == -far


def test_nearest_boss_picks_closest():
    world = World()
    world.spawn_player()
    far = _boss(0.0, 1000.0, 150)
    near = _boss(0.0, -150.0, 120)
    world.enemies = [
        far,
        Enemy(position=Vec2(0.0, -200.0), health=Health(5, 5), radius=25.0),
        near,
    ]
    assert nearest_boss(world) is near


def test_nearest_boss_none_cases():
    world = World()
    world.enemies = [_boss(0.0, 0.0, 150)]
    assert nearest_boss(world) is None
    world.spawn_player()
    world.enemies = [Enemy(position=Vec2(), health=Health(5, 5), radius=25.0)]
    assert nearest_boss(world) is None


def test_format_stats_default():
    assert format_stats(PlayerStats()) == "攻击 2 | 攻速 1.00s | 弹幕数 8"


def test_format_stats_rounds_speed():
    stats = PlayerStats(damage=6, attack_speed=0.64, bullet_count=12)
    assert format_stats(stats) == "攻击 6 | 攻速 0.64s | 弹幕数 12"


def test_hud_text_values():
    world = World()
    world.spawn_player()
    world.player.health.current = 3
    world.score = 40
    world.high_score = 90
    world.wave.current_wave = 5
    world.enemies = [_boss(10.0, 10.0, 150)]
    text = hud_text(world)
    assert text["health"] == ("生命值: ", "3/5")
    assert text["score"] == ("得分: ", "40")
    assert text["wave"] == ("波次: ", "5")
    assert text["boss"] == ("Boss HP: ", "150/150")
    assert text["stats"] == ("属性: ", format_stats(world.stats))
    assert text["high_score"] == ("最高分: ", "90")


def test_hud_text_without_boss_or_player():
    world = World()
    text = hud_text(world)
    assert text["boss"] == ("", "")
    assert text["health"][1] == ""
    world.spawn_player()
    assert hud_text(world)["boss"] == ("", "")