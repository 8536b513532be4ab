"""Core game data: vectors, timers, entities, resources and the world state."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum

PLAYER_SPEED = 200.0
ENEMY_SPEED = 165.0
BULLET_SPEED = 300.0
ATTACK_INTERVAL = 1.0
WINDOW_WIDTH = 1280.0
WINDOW_HEIGHT = 720.0
WORLD_WIDTH = WINDOW_WIDTH * 2.0
WORLD_HEIGHT = WINDOW_HEIGHT * 2.0

PLAYER_START_X = 0.0
PLAYER_START_Y = -200.0
PLAYER_START_HEALTH = 5

ENEMY_SPAWN_INTERVAL = 3.0
HURT_INTERVAL = 1.0
WAVE_INTERVAL = 15.0


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __bool__(self) -> bool:
        return self.x != 0.0 or self.y != 0.0

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; a zero vector has none."""
        size = self.length()
        if size == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / size

    def distance(self, other: Vec2) -> float:
        """Distance to another point."""
        return (self - other).length()


class Direction(IntEnum):
    """Facing of a sprite; the value indexes its texture set."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class UpgradeOption(Enum):
    """Upgrades offered on level up."""

    INCREASE_DAMAGE = "increase_damage"
    INCREASE_ATTACK_SPEED = "increase_attack_speed"
    INCREASE_BULLET_COUNT = "increase_bullet_count"


class GameState(Enum):
    """Top-level screen the game is on."""

    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Timer:
    """A countdown that either fires once or repeats.

    ``finished`` tells whether the timer has reached its duration (for a
    repeating timer only on the tick it did so); ``just_finished`` tells
    whether the last tick crossed the duration.
    """

    duration: float
    repeating: bool = True
    elapsed: float = 0.0
    finished: bool = False
    times_finished_this_tick: int = 0

    @property
    def just_finished(self) -> bool:
        return self.times_finished_this_tick > 0

    def tick(self, dt: float) -> Timer:
        """Advance by ``dt`` seconds."""
        if self.finished:
            if self.repeating:
                self.times_finished_this_tick = 0
            else:
                self.times_finished_this_tick = 0
                return self
        self.elapsed += dt
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
        elif self.repeating:
            if self.duration > 0.0:
                self.times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed = math.fmod(self.elapsed, self.duration)
            else:
                self.times_finished_this_tick = 1
                self.elapsed = 0.0
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def reset(self) -> None:
        """Start counting again from zero."""
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    def set_duration(self, seconds: float) -> None:
        """Change the duration without touching the elapsed time."""
        self.duration = seconds


@dataclass
class Health:
    current: int
    max: int


@dataclass(eq=False)
class Player:
    position: Vec2 = field(default_factory=lambda: Vec2(PLAYER_START_X, PLAYER_START_Y))
    health: Health = field(
        default_factory=lambda: Health(PLAYER_START_HEALTH, PLAYER_START_HEALTH)
    )
    facing: Direction = Direction.DOWN


@dataclass(eq=False)
class Enemy:
    position: Vec2
    health: Health
    radius: float
    is_boss: bool = False
    facing: Direction = Direction.DOWN


@dataclass(eq=False)
class Bullet:
    position: Vec2
    direction: Vec2


@dataclass
class PlayerStats:
    damage: int = 2
    attack_speed: float = ATTACK_INTERVAL
    kills: int = 0
    level: int = 1
    bullet_count: int = 8

    def reset(self) -> None:
        """Return to the starting attributes."""
        self.damage = 2
        self.attack_speed = ATTACK_INTERVAL
        self.kills = 0
        self.level = 1
        self.bullet_count = 8


@dataclass
class WaveState:
    current_wave: int = 1
    enemies_remaining: int = 0
    wave_timer: Timer = field(default_factory=lambda: Timer(WAVE_INTERVAL))


@dataclass
class UpgradeSelection:
    options: list[UpgradeOption] = field(default_factory=list)
    show: bool = False

    def clear(self) -> None:
        """Hide the selection and drop its options."""
        self.options.clear()
        self.show = False


@dataclass
class World:
    """Everything the game simulation reads and changes."""

    player: Player | None = None
    enemies: list[Enemy] = field(default_factory=list)
    bullets: list[Bullet] = field(default_factory=list)
    score: int = 0
    high_score: int = 0
    game_over: bool = False
    state: GameState = GameState.MENU
    stats: PlayerStats = field(default_factory=PlayerStats)
    wave: WaveState = field(default_factory=WaveState)
    upgrade: UpgradeSelection = field(default_factory=UpgradeSelection)
    enemy_spawn_timer: Timer = field(default_factory=lambda: Timer(ENEMY_SPAWN_INTERVAL))
    hurt_timer: Timer = field(default_factory=lambda: Timer(HURT_INTERVAL))
    attack_timer: Timer = field(default_factory=lambda: Timer(ATTACK_INTERVAL))
    rng: random.Random = field(default_factory=random.Random)

    def spawn_player(self) -> Player:
        """Place a fresh player at the starting point."""
        self.player = Player()
        return self.player

    def is_running(self) -> bool:
        """True while the game is being played and is not over."""
        return self.state is GameState.PLAYING and not self.game_over