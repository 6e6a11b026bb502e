from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicsConfig:
    gravity: float = 0.6
    friction: float = 0.85
    speed: float = 5.0
    jump_force: float = -14.0
    stomp_bounce: float = -7.0

    # Player dies once its top passes this y (canvas height).
    world_bottom: float = 600.0

    # Camera
    viewport_width: float = 800.0
    camera_max: float = 2200.0
    camera_smoothing: float = 0.1


DEFAULT_PHYSICS = PhysicsConfig()

COIN_VALUE = 10
STOMP_VALUE = 100

# Stomped enemies are parked here instead of being removed.
NEUTRALIZED_Y = 10000.0
