# app/domain/randomness.py
"""
Random source helpers shared by the apportioner and the assigner.

Every allocation gets its own random.Random instance, so concurrent calls never
share generator state.
"""
import random
from typing import List, Optional, TypeVar

T = TypeVar("T")


def make_rng(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> random.Random:
    """Return `rng` if given, otherwise a fresh generator (seeded when `seed` is set)."""
    if rng is not None:
        return rng
    return random.Random(seed)


def shuffle_in_place(items: List[T], rng: random.Random) -> List[T]:
    """Uniform Fisher-Yates shuffle of `items` drawn from `rng`. Returns the same list."""
    rng.shuffle(items)
    return items
