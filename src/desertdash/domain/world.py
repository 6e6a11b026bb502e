from __future__ import annotations

import logging

from desertdash.domain.camera import follow
from desertdash.domain.collision import move_x, move_y, overlaps
from desertdash.domain.enemy_ai import patrol
from desertdash.domain.exceptions import LevelCompleted, PlayerDied, RoundEnded
from desertdash.domain.game_objects import Enemy, Player
from desertdash.domain.game_state import Outcome, WorldState
from desertdash.domain.input_state import InputState
from desertdash.domain.physics import COIN_VALUE, NEUTRALIZED_Y, STOMP_VALUE, PhysicsConfig

logger = logging.getLogger(__name__)


class World:
    def step(self, state: WorldState, inp: InputState) -> WorldState:
        """
        Advance the world by one frame, mutating ``state`` in place.

        Raises PlayerDied or LevelCompleted when the round ends; the outcome
        is recorded on the state first. Once the round is over this is a no-op.
        """
        if state.game_over:
            return state

        p = state.player
        phys = state.physics
        state.frame += 1

        # ----- Horizontal input -----
        _apply_horizontal_input(p, inp, phys)

        # ----- Gravity -----
        p.vy += phys.gravity

        # ----- Move + resolve, one axis at a time -----
        move_x(p, state.platforms)
        p.grounded = move_y(p, state.platforms)

        # ----- Jump -----
        if p.grounded and inp.jump:
            p.vy = phys.jump_force
            p.grounded = False

        # ----- Fall death -----
        if p.y > phys.world_bottom:
            self._end(state, PlayerDied(state.score, cause="fall"))

        # ----- Enemies -----
        for enemy in state.enemies:
            if enemy.neutralized:
                continue
            patrol(enemy, state.platforms)

            if overlaps(p, enemy):
                if _is_stomp(p, enemy):
                    enemy.neutralized = True
                    enemy.y = NEUTRALIZED_Y
                    state.score += STOMP_VALUE
                    p.vy = phys.stomp_bounce
                    logger.debug("frame %d: stomped enemy at x=%.1f", state.frame, enemy.x)
                else:
                    self._end(state, PlayerDied(state.score, cause="enemy"))

        # ----- Coins -----
        for coin in state.coins:
            if not coin.collected and overlaps(p, coin):
                coin.collected = True
                state.score += COIN_VALUE
                logger.debug("frame %d: coin collected, score=%d", state.frame, state.score)

        # ----- Win condition -----
        if overlaps(p, state.flag):
            self._end(state, LevelCompleted(state.score))

        # ----- Camera -----
        state.camera_x = follow(state.camera_x, p.x, phys)

        return state

    def _end(self, state: WorldState, ending: RoundEnded) -> None:
        state.outcome = Outcome.WON if isinstance(ending, LevelCompleted) else Outcome.LOST
        logger.info(
            "round ended after %d frames: %s (score=%d)",
            state.frame,
            state.outcome.value,
            ending.score,
        )
        raise ending


def _apply_horizontal_input(p: Player, inp: InputState, phys: PhysicsConfig) -> None:
    # Ramp by one unit per frame, snapping to full speed from rest.
    # Right wins when both are held.
    if inp.right:
        if p.vx and p.vx < phys.speed:
            p.vx += 1
        else:
            p.vx = phys.speed
    elif inp.left:
        if p.vx and p.vx > -phys.speed:
            p.vx -= 1
        else:
            p.vx = -phys.speed
    else:
        # Exponential decay, never hard-zeroed.
        p.vx *= phys.friction


def _is_stomp(p: Player, enemy: Enemy) -> bool:
    # Previous-frame bottom at or above the enemy's midpoint, while falling.
    previous_bottom = p.bottom - p.vy
    return previous_bottom <= enemy.y + enemy.h * 0.5 and p.vy > 0
