from __future__ import annotations

from dataclasses import dataclass

from desertdash.domain.game_objects import (
    PLATFORM_THICKNESS,
    Coin,
    Enemy,
    Flag,
    Platform,
    new_coin,
    new_enemy,
)
from desertdash.domain.rng import RandomSource


DEFAULT_THEME_COLOR = "#3b82f6"

# Layout shared by generated levels: full-width ground, flag near the far end.
GENERATED_LENGTH = 3000.0
GROUND_Y = 550.0
GROUND_THICKNESS = 50.0
FLAG_X = 2800.0
FLAG_W = 40.0
FLAG_H = 100.0


@dataclass(frozen=True)
class LevelData:
    """
    Level template. Never mutated by a round: the world deep-copies it.
    Sequence order is significant (platform resolution order, stable indices).
    """
    platforms: tuple[Platform, ...]
    enemies: tuple[Enemy, ...]
    coins: tuple[Coin, ...]
    flag: Flag
    theme_color: str = DEFAULT_THEME_COLOR


def ground_platform(length: float = GENERATED_LENGTH) -> Platform:
    return Platform(x=0.0, y=GROUND_Y, w=length, h=GROUND_THICKNESS)


def end_flag(x: float = FLAG_X) -> Flag:
    return Flag(x=x, y=GROUND_Y - FLAG_H, w=FLAG_W, h=FLAG_H)


FALLBACK_LEVEL = LevelData(
    platforms=(
        ground_platform(2000.0),
        Platform(x=300.0, y=450.0, w=100.0, h=PLATFORM_THICKNESS),
        Platform(x=500.0, y=350.0, w=100.0, h=PLATFORM_THICKNESS),
        Platform(x=700.0, y=250.0, w=100.0, h=PLATFORM_THICKNESS),
        Platform(x=900.0, y=450.0, w=100.0, h=PLATFORM_THICKNESS),
    ),
    enemies=(
        new_enemy(600.0, 510.0),
        new_enemy(920.0, 410.0),
    ),
    coins=(
        new_coin(320.0, 400.0),
        new_coin(520.0, 300.0),
        new_coin(720.0, 200.0),
        new_coin(920.0, 350.0),
    ),
    flag=end_flag(1800.0),
    theme_color=DEFAULT_THEME_COLOR,
)

_THEME_COLORS = ("#3b82f6", "#f59e0b", "#ef4444", "#8b5cf6", "#10b981", "#f97316")


def generate_level(rng: RandomSource, *, length: float = GENERATED_LENGTH) -> LevelData:
    # Platforms stay within a single jump of the ground (apex ~160px).
    # Keep the start area clear of enemies.
    safe_prefix = 400.0
    enemy_prob = 0.45
    coin_prob = 0.8
    flag_x = length - (GENERATED_LENGTH - FLAG_X)
    last_x = flag_x - 200.0

    platforms: list[Platform] = [ground_platform(length)]
    enemies: list[Enemy] = []
    coins: list[Coin] = []

    x = 250.0
    while x < last_x:
        # Whole pixels keep "standing exactly on top" exact.
        w = float(round(rng.uniform(80.0, 160.0)))
        y = float(round(rng.uniform(400.0, 470.0)))
        plat = Platform(x=x, y=y, w=w, h=PLATFORM_THICKNESS)
        platforms.append(plat)

        if rng.random() < coin_prob:
            coins.append(new_coin(plat.x + plat.w / 2.0 - 10.0, plat.y - 50.0))

        gap = float(round(rng.uniform(150.0, 260.0)))
        # Enemy patrols the ground in the gap after this platform.
        enemy_x = plat.right + gap / 2.0
        if enemy_x > safe_prefix and enemy_x < last_x and rng.random() < enemy_prob:
            enemies.append(new_enemy(enemy_x, GROUND_Y - 40.0))

        x = plat.right + gap

    theme = _THEME_COLORS[int(rng.random() * len(_THEME_COLORS)) % len(_THEME_COLORS)]
    return LevelData(
        platforms=tuple(platforms),
        enemies=tuple(enemies),
        coins=tuple(coins),
        flag=end_flag(flag_x),
        theme_color=theme,
    )
