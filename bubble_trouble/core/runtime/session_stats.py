"""
session_stats.py
----------------
Tracks statistics for the current game session.
Separated from entity management and round state.
"""


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-specific statistics."""

    def __init__(self):
        self.score = 0
        self.bubbles_popped = 0
        self.shots_fired = 0
        self.damage_taken = 0
        self.ticks = 0
        self.max_level_reached = 1

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_score(self, amount: int):
        """Add to current score. Score never decreases."""
        if amount < 0:
            raise ValueError(f"Score can only increase, got {amount}")
        self.score += amount

    def add_pop(self):
        """Count one bubble hit by a bullet."""
        self.bubbles_popped += 1

    def add_shot(self):
        """Count one fired bullet."""
        self.shots_fired += 1

    def add_damage(self, amount: int = 1):
        """Count health lost to bubble contact."""
        self.damage_taken += amount

    def add_tick(self):
        """Count one simulation step."""
        self.ticks += 1

    def set_level(self, level: int):
        """Update max level if higher."""
        if level > self.max_level_reached:
            self.max_level_reached = level

    @property
    def accuracy(self) -> float:
        """Fraction of fired bullets that hit a bubble."""
        if self.shots_fired == 0:
            return 0.0
        return self.bubbles_popped / self.shots_fired

    def summary(self) -> str:
        return (
            f"score={self.score} popped={self.bubbles_popped} "
            f"shots={self.shots_fired} damage={self.damage_taken} "
            f"accuracy={self.accuracy:.0%} "
            f"level={self.max_level_reached} ticks={self.ticks}"
        )
