from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    # Held state for the current frame, not edges.
    left: bool = False
    right: bool = False
    jump: bool = False
