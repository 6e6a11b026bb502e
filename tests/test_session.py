from __future__ import annotations

import pytest

from desertdash.app.session import GameSession, GameStatus, SessionError
from desertdash.domain.input_state import InputState
from desertdash.domain.level import FALLBACK_LEVEL

from conftest import make_level


def test_starts_in_menu():
    session = GameSession()
    assert session.status is GameStatus.MENU
    assert session.state is None
    assert not session.playing


def test_menu_to_playing():
    session = GameSession()
    session.begin_loading()
    assert session.status is GameStatus.LOADING

    state = session.start_round(FALLBACK_LEVEL, notice="offline")

    assert session.playing
    assert session.state is state
    assert session.notice == "offline"


def test_start_round_requires_loading():
    with pytest.raises(SessionError):
        GameSession().start_round(FALLBACK_LEVEL)


def test_cannot_load_mid_round():
    session = GameSession()
    session.begin_loading()
    session.start_round(FALLBACK_LEVEL)
    with pytest.raises(SessionError):
        session.begin_loading()


def test_advance_outside_playing_is_noop():
    session = GameSession()
    session.advance(InputState(right=True))
    assert session.status is GameStatus.MENU


def test_fall_ends_in_game_over():
    session = GameSession()
    session.begin_loading()
    session.start_round(make_level())  # nothing to stand on

    for _ in range(100):
        session.advance(InputState())

    assert session.status is GameStatus.GAME_OVER
    assert session.round_over
    assert not session.won
    assert session.final_score == 0


def test_flag_ends_in_victory():
    session = GameSession()
    session.begin_loading()
    state = session.start_round(FALLBACK_LEVEL)
    state.player.x, state.player.y = 1790.0, 460.0
    state.score = 110

    session.advance(InputState())

    assert session.status is GameStatus.VICTORY
    assert session.won
    assert session.final_score == 110


def test_advance_after_round_end_changes_nothing():
    session = GameSession()
    session.begin_loading()
    state = session.start_round(make_level())
    for _ in range(100):
        session.advance(InputState())
    frame = state.frame

    session.advance(InputState(jump=True))

    assert state.frame == frame
    assert session.status is GameStatus.GAME_OVER


def test_restart_uses_fresh_copy_of_same_level():
    session = GameSession()
    session.begin_loading()
    first = session.start_round(FALLBACK_LEVEL)
    first.coins[0].collected = True
    first.score = 10

    second = session.restart()

    assert second is not first
    assert session.playing
    assert session.level is FALLBACK_LEVEL
    assert not second.coins[0].collected
    assert second.score == 0


def test_restart_without_level():
    with pytest.raises(SessionError):
        GameSession().restart()


def test_to_menu_discards_world():
    session = GameSession()
    session.begin_loading()
    session.start_round(FALLBACK_LEVEL)
    session.to_menu()
    assert session.status is GameStatus.MENU
    assert session.state is None
