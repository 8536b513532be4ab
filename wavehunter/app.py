"""Frame scheduling, asset loading, rendering and the game window."""

from __future__ import annotations

import argparse
from collections.abc import Collection, Mapping, Sequence
from pathlib import Path

import pygame

from wavehunter.combat import (
    bullet_hit_enemy,
    bullet_movement,
    check_health,
    player_attack,
    player_movement,
    update_attack_timer,
)
from wavehunter.enemies import (
    continuous_enemy_spawn,
    enemy_avoidance,
    enemy_damage_player,
    enemy_follow,
    spawn_wave_enemies,
    wave_timer_advance,
)
from wavehunter.hud import camera_follow, hud_text
from wavehunter.model import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Direction,
    GameState,
    Vec2,
    World,
)
from wavehunter.progression import apply_upgrade, restart_game, upgrade_prompts

TITLE = "Wavehunter"
FONT_NAME = "SourceHanSansSC-Bold.otf"
TEXTURE_KINDS = ("player", "enemy", "boss")
UPGRADE_KEYS = ("1", "2", "3")
START_KEY = "space"
RESTART_KEY = "r"
FRAME_RATE = 60

CLEAR_COLOR = (25, 25, 25)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
CYAN = (0, 255, 255)
ORANGE = (255, 165, 0)
GOLD = (255, 214, 0)
PURPLE = (128, 0, 128)
PLAYER_COLOR = (80, 160, 255)
ENEMY_COLOR = (200, 60, 60)
BOSS_COLOR = (170, 60, 200)
UPGRADE_PANEL_COLOR = (20, 20, 20, 235)

MENU_TEXT = "按下空格开始游戏"
GAME_OVER_LINES = ("游戏结束", "按下R键重新开始")

PLAYER_SCALE = 1.0
ENEMY_SCALE = 1.5
BOSS_SCALE = 2.5
BULLET_SIZE = 10
PLAYER_DRAW_RADIUS = 20

Textures = Mapping[str, Sequence[pygame.Surface]]

# HUD lines: key, position, font size, label colour, value colour.
_HUD_LAYOUT = (
    ("health", (10, 10), 24, WHITE, GREEN),
    ("score", (10, 40), 24, WHITE, YELLOW),
    ("wave", (10, 70), 24, CYAN, WHITE),
    ("stats", (10, 120), 24, WHITE, ORANGE),
    ("high_score", (400, 10), 24, WHITE, GOLD),
)
_BOSS_FONT_SIZE = 28
_BOSS_LEFT_FRACTION = 0.4

_MOVE_CODES = (
    ("w", pygame.K_w),
    ("a", pygame.K_a),
    ("s", pygame.K_s),
    ("d", pygame.K_d),
)


def _start_playing(world: World) -> None:
    world.stats.reset()
    world.spawn_player()
    spawn_wave_enemies(world)
    world.state = GameState.PLAYING
    print("Game Start!")


def _upgrade_input(world: World, pressed: Collection[str]) -> None:
    index = next((i for i, key in enumerate(UPGRADE_KEYS) if key in pressed), None)
    if index is not None:
        apply_upgrade(world, index)


def _run_playing(
    world: World, dt: float, held: Collection[str], pressed: Collection[str]
) -> None:
    # Each step says whether it also needs the game not to be over.
    steps = (
        (True, lambda: player_movement(world, held, dt)),
        (True, lambda: wave_timer_advance(world, dt)),
        (True, lambda: enemy_follow(world, dt)),
        (True, lambda: continuous_enemy_spawn(world, dt)),
        (True, lambda: player_attack(world, dt)),
        (True, lambda: bullet_movement(world, dt)),
        (True, lambda: bullet_hit_enemy(world)),
        (True, lambda: enemy_damage_player(world, dt)),
        (True, lambda: update_attack_timer(world)),
        (False, lambda: _upgrade_input(world, pressed)),
        (False, lambda: check_health(world)),
        (True, lambda: enemy_avoidance(world, dt)),
    )
    for needs_running, step in steps:
        if needs_running and not world.is_running():
            continue
        step()


def update_frame(
    world: World,
    dt: float,
    held: Collection[str] = frozenset(),
    pressed: Collection[str] = frozenset(),
) -> None:
    """Advance the world by one frame.

    ``held`` holds the names of keys kept down, ``pressed`` those pressed
    this frame ("space", "r", "1" and so on).
    """
    if world.state is GameState.MENU:
        if START_KEY in pressed:
            _start_playing(world)
        return
    if world.state is GameState.PLAYING:
        _run_playing(world, dt, held, pressed)
    if RESTART_KEY in pressed:
        restart_game(world)


def load_textures(directory: str | Path) -> dict[str, tuple[pygame.Surface, ...]]:
    """Load the four facing images of the player, the enemy and the boss.

    Each kind maps to a tuple indexed by ``Direction``.
    """
    root = Path(directory)
    converting = pygame.display.get_init() and pygame.display.get_surface() is not None
    textures: dict[str, tuple[pygame.Surface, ...]] = {}
    for kind in TEXTURE_KINDS:
        images = []
        for direction in Direction:
            path = root / f"{kind}_{direction.name.lower()}.png"
            if not path.is_file():
                raise FileNotFoundError(f"missing texture: {path}")
            image = pygame.image.load(str(path))
            images.append(image.convert_alpha() if converting else image)
        textures[kind] = tuple(images)
    return textures


class GameApp:
    """Holds the world, the camera and the render resources of one game."""

    def __init__(
        self,
        world: World | None = None,
        textures: Textures | None = None,
        font_path: str | Path | None = None,
    ) -> None:
        self.world = world if world is not None else World()
        self.textures = textures
        self.font_path = Path(font_path) if font_path is not None else None
        self.camera = Vec2()
        self._fonts: dict[int, pygame.font.Font] = {}

    def update(
        self,
        dt: float,
        held: Collection[str] = frozenset(),
        pressed: Collection[str] = frozenset(),
    ) -> None:
        """Advance the game by one frame and move the camera after the player."""
        update_frame(self.world, dt, held, pressed)
        if self.world.is_running() and self.world.player is not None:
            self.camera = camera_follow(self.world.player.position)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            path = str(self.font_path) if self.font_path is not None else None
            self._fonts[size] = pygame.font.Font(path, size)
        return self._fonts[size]

    def _to_screen(self, position: Vec2, surface: pygame.Surface) -> tuple[int, int]:
        width, height = surface.get_size()
        return (
            round(position.x - self.camera.x + width / 2),
            round(height / 2 - (position.y - self.camera.y)),
        )

    def _blit_sprite(
        self,
        surface: pygame.Surface,
        kind: str,
        facing: Direction,
        scale: float,
        position: Vec2,
        fallback_color: tuple[int, int, int],
        fallback_radius: float,
    ) -> None:
        centre = self._to_screen(position, surface)
        if self.textures is None:
            pygame.draw.circle(surface, fallback_color, centre, round(fallback_radius))
            return
        image = self.textures[kind][facing]
        if scale != 1.0:
            width, height = image.get_size()
            image = pygame.transform.scale(image, (round(width * scale), round(height * scale)))
        surface.blit(image, image.get_rect(center=centre))

    def _draw_world(self, surface: pygame.Surface) -> None:
        world = self.world
        for enemy in world.enemies:
            if enemy.is_boss:
                self._blit_sprite(
                    surface, "boss", enemy.facing, BOSS_SCALE, enemy.position,
                    BOSS_COLOR, enemy.radius,
                )
            else:
                self._blit_sprite(
                    surface, "enemy", enemy.facing, ENEMY_SCALE, enemy.position,
                    ENEMY_COLOR, enemy.radius,
                )
        for bullet in world.bullets:
            rect = pygame.Rect(0, 0, BULLET_SIZE, BULLET_SIZE)
            rect.center = self._to_screen(bullet.position, surface)
            pygame.draw.rect(surface, GOLD, rect)
        if world.player is not None:
            self._blit_sprite(
                surface, "player", world.player.facing, PLAYER_SCALE,
                world.player.position, PLAYER_COLOR, PLAYER_DRAW_RADIUS,
            )

    def _draw_line(
        self,
        surface: pygame.Surface,
        position: tuple[int, int],
        size: int,
        parts: Sequence[tuple[str, tuple[int, int, int]]],
    ) -> None:
        font = self._font(size)
        x, y = position
        for text, color in parts:
            if not text:
                continue
            rendered = font.render(text, True, color)
            surface.blit(rendered, (x, y))
            x += rendered.get_width()

    def _draw_hud(self, surface: pygame.Surface) -> None:
        lines = hud_text(self.world)
        for key, position, size, label_color, value_color in _HUD_LAYOUT:
            label, value = lines[key]
            self._draw_line(surface, position, size, ((label, label_color), (value, value_color)))
        label, value = lines["boss"]
        left = round(surface.get_width() * _BOSS_LEFT_FRACTION)
        self._draw_line(surface, (left, 10), _BOSS_FONT_SIZE, ((label, PURPLE), (value, WHITE)))

    def _draw_centered_lines(
        self,
        surface: pygame.Surface,
        lines: Sequence[str],
        size: int,
        color: tuple[int, int, int],
    ) -> None:
        font = self._font(size)
        rendered = [font.render(line, True, color) for line in lines]
        total = sum(image.get_height() for image in rendered)
        width, height = surface.get_size()
        y = (height - total) // 2
        for image in rendered:
            surface.blit(image, image.get_rect(midtop=(width // 2, y)))
            y += image.get_height()

    def _draw_upgrade_panel(self, surface: pygame.Surface) -> None:
        prompts = upgrade_prompts(self.world.upgrade)
        if not prompts:
            return
        panel = pygame.Surface((480, 80 * len(prompts)), pygame.SRCALPHA)
        panel.fill(UPGRADE_PANEL_COLOR)
        width, height = surface.get_size()
        surface.blit(panel, panel.get_rect(center=(width // 2, height // 2)))
        self._draw_centered_lines(surface, prompts, 36, YELLOW)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current screen onto ``surface``."""
        surface.fill(CLEAR_COLOR)
        world = self.world
        if world.state is GameState.MENU:
            self._draw_centered_lines(surface, (MENU_TEXT,), 44, WHITE)
            return
        self._draw_world(surface)
        self._draw_hud(surface)
        if world.game_over:
            self._draw_centered_lines(surface, GAME_OVER_LINES, 56, RED)
        else:
            self._draw_upgrade_panel(surface)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="wavehunter", description="Survive the waves.")
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"),
        help="directory holding textures/ and fonts/",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(WINDOW_WIDTH), int(WINDOW_HEIGHT)))
        pygame.display.set_caption(TITLE)
        try:
            textures = load_textures(args.assets / "textures")
        except FileNotFoundError:
            textures = None
        font = args.assets / "fonts" / FONT_NAME
        app = GameApp(textures=textures, font_path=font if font.is_file() else None)
        clock = pygame.time.Clock()
        while True:
            pressed = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    pressed.add(pygame.key.name(event.key))
            keys = pygame.key.get_pressed()
            held = {name for name, code in _MOVE_CODES if keys[code]}
            dt = clock.tick(FRAME_RATE) / 1000.0
            app.update(dt, held, pressed)
            app.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()