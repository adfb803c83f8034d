"""Score, level and game speed bookkeeping for a running game."""

from dataclasses import dataclass

SCORE_THRESHOLD_FOR_LEVEL_UP = 5
INITIAL_DELAY_MS = 120
DELAY_CHANGE_PER_LEVEL_MS = 20
MINIMUM_DELAY_MS = 40

_BYTE_MASK = 0xFF


@dataclass
class LevelTracker:
    """Tracks the score, the level and the frame delay that follows from it.

    Score and level are single bytes and wrap around at 256.
    """

    score: int = 0
    level: int = 0
    delay_ms: int = INITIAL_DELAY_MS

    def reset(self) -> None:
        """Start a fresh game: no score, level one, initial speed."""
        self.score = 0
        self.level = 1
        self.delay_ms = INITIAL_DELAY_MS

    def increase_score(self) -> None:
        """Add one point; every few points raise the level and the speed."""
        self.score = (self.score + 1) & _BYTE_MASK
        if self.score % SCORE_THRESHOLD_FOR_LEVEL_UP != 0:
            return
        self.level = (self.level + 1) & _BYTE_MASK
        if self.delay_ms > MINIMUM_DELAY_MS + DELAY_CHANGE_PER_LEVEL_MS:
            self.delay_ms -= DELAY_CHANGE_PER_LEVEL_MS
        else:
            self.delay_ms = MINIMUM_DELAY_MS