from __future__ import annotations

from enum import Enum

from desertdash.domain.exceptions import LevelCompleted, RoundEnded
from desertdash.domain.game_state import WorldState, new_world
from desertdash.domain.input_state import InputState
from desertdash.domain.level import LevelData
from desertdash.domain.physics import DEFAULT_PHYSICS, PhysicsConfig
from desertdash.domain.world import World


class GameStatus(str, Enum):
    MENU = "menu"
    LOADING = "loading"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    VICTORY = "victory"


class SessionError(Exception):
    """Raised on an invalid screen transition."""


class GameSession:
    """
    Screen state machine around one world:
    MENU -> LOADING -> PLAYING -> GAME_OVER | VICTORY -> (LOADING | MENU).
    """

    def __init__(self, *, world: World | None = None, physics: PhysicsConfig = DEFAULT_PHYSICS) -> None:
        self.world = world or World()
        self.physics = physics

        self.status = GameStatus.MENU
        self.level: LevelData | None = None
        self.state: WorldState | None = None
        self.notice: str | None = None

        self.final_score = 0
        self.won = False

    @property
    def playing(self) -> bool:
        return self.status is GameStatus.PLAYING

    @property
    def round_over(self) -> bool:
        return self.status in (GameStatus.GAME_OVER, GameStatus.VICTORY)

    def begin_loading(self) -> None:
        if self.status is GameStatus.PLAYING:
            raise SessionError("cannot load a level while a round is running")
        self.status = GameStatus.LOADING

    def start_round(self, level: LevelData, *, notice: str | None = None) -> WorldState:
        if self.status is not GameStatus.LOADING:
            raise SessionError(f"start_round requires LOADING, not {self.status.value}")

        self.level = level
        self.notice = notice
        self.state = new_world(level, self.physics)
        self.final_score = 0
        self.won = False
        self.status = GameStatus.PLAYING
        return self.state

    def restart(self) -> WorldState:
        """New round on a fresh copy of the current level."""
        if self.level is None:
            raise SessionError("no level to restart")
        self.status = GameStatus.LOADING
        return self.start_round(self.level, notice=self.notice)

    def advance(self, inp: InputState) -> None:
        """Simulate one frame. No-op outside PLAYING."""
        if self.status is not GameStatus.PLAYING or self.state is None:
            return

        try:
            self.world.step(self.state, inp)
        except RoundEnded as ended:
            self.final_score = ended.score
            self.won = isinstance(ended, LevelCompleted)
            self.status = GameStatus.VICTORY if self.won else GameStatus.GAME_OVER

    def to_menu(self) -> None:
        self.status = GameStatus.MENU
        self.state = None
