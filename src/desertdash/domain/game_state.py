from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum

from desertdash.domain.game_objects import Coin, Enemy, Flag, Platform, Player, new_player
from desertdash.domain.level import LevelData
from desertdash.domain.physics import DEFAULT_PHYSICS, PhysicsConfig


class Outcome(str, Enum):
    NONE = "none"
    LOST = "lost"
    WON = "won"


@dataclass
class WorldState:
    """
    Live, mutable copy of a level plus the player. Owned by the frame step;
    presentation code only reads it.
    """
    level: LevelData
    physics: PhysicsConfig

    player: Player
    platforms: list[Platform]
    enemies: list[Enemy]
    coins: list[Coin]
    flag: Flag

    camera_x: float = 0.0
    score: int = 0
    outcome: Outcome = Outcome.NONE
    frame: int = 0

    @property
    def game_over(self) -> bool:
        return self.outcome is not Outcome.NONE

    @property
    def theme_color(self) -> str:
        return self.level.theme_color


def new_world(level: LevelData, physics: PhysicsConfig = DEFAULT_PHYSICS) -> WorldState:
    # Deep copies so a round never mutates the template it was started from.
    return WorldState(
        level=level,
        physics=physics,
        player=new_player(),
        platforms=copy.deepcopy(list(level.platforms)),
        enemies=copy.deepcopy(list(level.enemies)),
        coins=copy.deepcopy(list(level.coins)),
        flag=copy.deepcopy(level.flag),
    )
