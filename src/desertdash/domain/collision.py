from __future__ import annotations

from collections.abc import Iterable

from desertdash.domain.game_objects import Body, Platform, Player


def overlaps(a: Body, b: Body) -> bool:
    # Strict AABB test: boxes that only touch along an edge do not overlap.
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def hits_any(body: Body, platforms: Iterable[Platform]) -> bool:
    return any(overlaps(body, plat) for plat in platforms)


def move_x(p: Player, platforms: Iterable[Platform]) -> None:
    p.x += p.vx

    # Sequential, in input order. Once vx is zeroed by the first hit, later
    # overlaps only zero it again without moving the player.
    for plat in platforms:
        if overlaps(p, plat):
            if p.vx > 0:
                p.x = plat.x - p.w
            elif p.vx < 0:
                p.x = plat.x + plat.w
            p.vx = 0.0


def move_y(p: Player, platforms: Iterable[Platform]) -> bool:
    """Apply vy and resolve against platforms. Returns True if a fall was arrested."""
    p.y += p.vy
    grounded = False

    for plat in platforms:
        if overlaps(p, plat):
            if p.vy > 0:  # falling
                p.y = plat.y - p.h
                grounded = True
            elif p.vy < 0:  # rising
                p.y = plat.y + plat.h
            p.vy = 0.0

    return grounded
