# src/gridsnake/rng.py
import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Deterministic RNG when seeded; each game owns its own instance."""
    return random.Random(seed)


def random_range(rng: random.Random, low: int, high: int) -> int:
    """Return a random int in [low, high)."""
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return rng.randrange(low, high)


def random_select(rng: random.Random, items: Sequence[T]) -> T:
    """Select a uniformly random element of items."""
    if len(items) == 0:
        raise ValueError("cannot select from an empty sequence")
    return items[random_range(rng, 0, len(items))]
