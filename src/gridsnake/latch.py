# src/gridsnake/latch.py
from .config import Direction, is_opposite


class InputLatch:
    """
    Holds the most recent directional intent between ticks.
    Input handlers write here; only the tick reads it, so the engine never
    sees a direction change in the middle of a step.
    """

    def __init__(self, committed: Direction):
        self.committed = committed
        self.latched = committed

    def record_direction(self, candidate: Direction) -> bool:
        """Latch `candidate` unless it reverses the committed direction (no 180° turns)."""
        if is_opposite(candidate, self.committed):
            return False
        self.latched = candidate
        return True

    def consume_latched(self) -> Direction:
        """Commit and return the latched direction. The latch keeps its value."""
        self.committed = self.latched
        return self.latched

    def __repr__(self):
        return f"<InputLatch committed={self.committed.name} latched={self.latched.name}>"
