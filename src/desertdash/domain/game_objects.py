from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ObjectKind(str, Enum):
    PLATFORM = "platform"
    PLAYER = "player"
    ENEMY = "enemy"
    COIN = "coin"
    FLAG = "flag"


PLAYER_W = 30.0
PLAYER_H = 40.0
PLAYER_START_X = 50.0
PLAYER_START_Y = 400.0

ENEMY_SIZE = 30.0
ENEMY_SPEED = -2.0
COIN_SIZE = 20.0
PLATFORM_THICKNESS = 20.0


@dataclass
class Body:
    """
    Axis-aligned box in world pixels. (x, y) is the top-left corner.
    w/h are fixed for the object's lifetime.
    """
    kind: ClassVar[ObjectKind]

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


@dataclass
class Platform(Body):
    kind: ClassVar[ObjectKind] = ObjectKind.PLATFORM


@dataclass
class Flag(Body):
    kind: ClassVar[ObjectKind] = ObjectKind.FLAG


@dataclass
class Player(Body):
    kind: ClassVar[ObjectKind] = ObjectKind.PLAYER

    vx: float = 0.0
    vy: float = 0.0
    grounded: bool = False


@dataclass
class Enemy(Body):
    kind: ClassVar[ObjectKind] = ObjectKind.ENEMY

    vx: float = ENEMY_SPEED
    neutralized: bool = False


@dataclass
class Coin(Body):
    kind: ClassVar[ObjectKind] = ObjectKind.COIN

    collected: bool = False


def new_player(x: float = PLAYER_START_X, y: float = PLAYER_START_Y) -> Player:
    return Player(x=x, y=y, w=PLAYER_W, h=PLAYER_H)


def new_enemy(x: float, y: float) -> Enemy:
    return Enemy(x=x, y=y, w=ENEMY_SIZE, h=ENEMY_SIZE)


def new_coin(x: float, y: float) -> Coin:
    return Coin(x=x, y=y, w=COIN_SIZE, h=COIN_SIZE)
