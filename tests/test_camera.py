from __future__ import annotations

import pytest

from desertdash.domain.camera import follow
from desertdash.domain.physics import DEFAULT_PHYSICS


def test_smooths_toward_third_of_viewport():
    # target = 1000 - 800 / 3
    assert follow(0.0, 1000.0, DEFAULT_PHYSICS) == pytest.approx((1000.0 - 800.0 / 3.0) * 0.1)


def test_clamps_at_level_start():
    assert follow(0.0, 50.0, DEFAULT_PHYSICS) == 0.0


def test_clamps_at_level_end():
    assert follow(2200.0, 100_000.0, DEFAULT_PHYSICS) == 2200.0


@pytest.mark.parametrize("player_x", [-1e9, -500.0, 0.0, 123.4, 2500.0, 1e9])
def test_stays_in_range(player_x):
    cam = 0.0
    for _ in range(200):
        cam = follow(cam, player_x, DEFAULT_PHYSICS)
        assert 0.0 <= cam <= DEFAULT_PHYSICS.camera_max


def test_converges_on_target():
    cam = 0.0
    for _ in range(300):
        cam = follow(cam, 1000.0, DEFAULT_PHYSICS)
    assert cam == pytest.approx(1000.0 - 800.0 / 3.0, abs=1e-6)
