from __future__ import annotations

from collections.abc import Sequence

from desertdash.domain.collision import hits_any
from desertdash.domain.game_objects import ENEMY_SPEED, Enemy, Platform


def patrol(enemy: Enemy, platforms: Sequence[Platform]) -> None:
    """
    Walk horizontally and turn around on any platform contact.

    Contact with the supporting platform counts too, and enemies get no
    gravity, so one walking off a ledge keeps floating at its height.
    """
    if not enemy.vx:
        enemy.vx = ENEMY_SPEED

    enemy.x += enemy.vx

    if hits_any(enemy, platforms):
        enemy.vx *= -1
        enemy.x += enemy.vx * 2  # unstick
