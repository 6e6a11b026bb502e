from __future__ import annotations

import pytest

from desertdash.domain.collision import move_x, move_y, overlaps
from desertdash.domain.game_objects import Platform, Player


def _box(x, y, w, h) -> Platform:
    return Platform(x=x, y=y, w=w, h=h)


def test_overlapping_boxes():
    assert overlaps(_box(0, 0, 10, 10), _box(5, 5, 10, 10))


@pytest.mark.parametrize(
    "other",
    [
        _box(10, 0, 10, 10),  # touching right edge
        _box(-10, 0, 10, 10),  # touching left edge
        _box(0, 10, 10, 10),  # touching bottom edge
        _box(0, -10, 10, 10),  # touching top edge
        _box(50, 50, 5, 5),
    ],
)
def test_touching_or_apart_is_not_overlap(other):
    assert not overlaps(_box(0, 0, 10, 10), other)


def test_move_x_pushes_out_to_left_edge_when_moving_right():
    p = Player(x=68.0, y=400.0, w=30.0, h=40.0, vx=5.0)
    move_x(p, [_box(100, 350, 20, 200)])
    assert p.x == 70.0
    assert p.vx == 0.0


def test_move_x_pushes_out_to_right_edge_when_moving_left():
    p = Player(x=24.0, y=400.0, w=30.0, h=40.0, vx=-5.0)
    move_x(p, [_box(0, 350, 20, 200)])
    assert p.x == 20.0
    assert p.vx == 0.0


def test_move_x_second_overlap_only_zeroes_velocity():
    # Both walls overlap after the move; the first fixes position, the second
    # sees vx == 0 and leaves x alone.
    p = Player(x=68.0, y=400.0, w=30.0, h=40.0, vx=5.0)
    move_x(p, [_box(100, 350, 20, 200), _box(95, 350, 20, 200)])
    assert p.x == 70.0
    assert p.vx == 0.0


def test_move_y_lands_on_top():
    p = Player(x=50.0, y=405.6, w=30.0, h=40.0, vy=5.0)
    grounded = move_y(p, [_box(0, 450, 200, 20)])
    assert grounded
    assert p.y == 410.0
    assert p.vy == 0.0


def test_move_y_bumps_head_on_underside():
    p = Player(x=50.0, y=325.0, w=30.0, h=40.0, vy=-9.4)
    grounded = move_y(p, [_box(0, 300, 200, 20)])
    assert not grounded
    assert p.y == 320.0
    assert p.vy == 0.0


def test_move_y_free_fall():
    p = Player(x=50.0, y=100.0, w=30.0, h=40.0, vy=3.0)
    assert not move_y(p, [_box(0, 450, 200, 20)])
    assert p.y == 103.0
    assert p.vy == 3.0
