from __future__ import annotations

from desertdash.domain.physics import PhysicsConfig


def follow(camera_x: float, player_x: float, physics: PhysicsConfig) -> float:
    # Single-pole smoothing toward a point one third into the viewport.
    target = player_x - physics.viewport_width / 3.0
    camera_x += (target - camera_x) * physics.camera_smoothing

    if camera_x < 0.0:
        return 0.0
    if camera_x > physics.camera_max:
        return physics.camera_max
    return camera_x
