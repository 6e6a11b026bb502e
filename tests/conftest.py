from __future__ import annotations

import pytest

from desertdash.domain.game_objects import Coin, Enemy, Flag, Platform
from desertdash.domain.game_state import WorldState, new_world
from desertdash.domain.level import LevelData
from desertdash.domain.world import World

# Out of reach for every test that does not place the player on it.
FAR_FLAG = Flag(x=5000.0, y=0.0, w=40.0, h=100.0)


def make_level(
    platforms: tuple[Platform, ...] = (),
    enemies: tuple[Enemy, ...] = (),
    coins: tuple[Coin, ...] = (),
    flag: Flag = FAR_FLAG,
) -> LevelData:
    return LevelData(platforms=platforms, enemies=enemies, coins=coins, flag=flag)


@pytest.fixture
def world() -> World:
    return World()


@pytest.fixture
def make_state():
    def _make(*, player_at: tuple[float, float] | None = None, vx: float = 0.0, vy: float = 0.0, **level_kw) -> WorldState:
        state = new_world(make_level(**level_kw))
        if player_at is not None:
            state.player.x, state.player.y = player_at
        state.player.vx = vx
        state.player.vy = vy
        return state

    return _make
