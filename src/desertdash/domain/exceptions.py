class RoundEnded(Exception):
    """Base for the terminal outcomes of a round. Carries the final score."""

    def __init__(self, score: int) -> None:
        super().__init__(score)
        self.score = score


class PlayerDied(RoundEnded):
    """Raised by the domain when the player falls out of the world or touches an enemy."""

    def __init__(self, score: int, cause: str) -> None:
        super().__init__(score)
        self.cause = cause  # "fall" | "enemy"


class LevelCompleted(RoundEnded):
    """Raised when the player reaches the flag."""
