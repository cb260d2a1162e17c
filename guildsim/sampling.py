"""Injectable randomness for the simulation core.

Every stochastic function in guildsim takes its random source as an explicit
``rng`` argument. Nothing draws from the module-level ``random`` functions, so
a campaign replayed from the same seed and state produces the same weeks.

``random.Random`` satisfies ``RandomSource``; tests can pass a scripted
source that implements the same methods.
"""

from __future__ import annotations

import random
import uuid
from typing import Any, Mapping, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of ``random.Random`` the core relies on."""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def randrange(self, stop: int) -> int: ...

    def choice(self, seq: Sequence[Any]) -> Any: ...

    def sample(self, population: Sequence[Any], k: int) -> list: ...

    def getrandbits(self, k: int) -> int: ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create a seeded random source (unseeded when ``seed`` is None)."""
    return random.Random(seed)


def weighted_choice(weights: Mapping[T, int], rng: RandomSource) -> T:
    """Pick one option from an option→weight table.

    Draws a uniform integer in ``[0, total)`` and walks the table in insertion
    order, subtracting each weight until the remainder goes negative. The walk
    order is part of the contract: the same table and seed always select the
    same option. Zero-weight options are never selected.

    Raises:
        ValueError: If the table is empty or its weights sum to zero or less.
    """
    total = sum(weights.values())
    if total <= 0:
        raise ValueError("weighted_choice requires at least one positive weight")

    roll = rng.randrange(total)
    for option, weight in weights.items():
        roll -= weight
        if roll < 0:
            return option

    # Unreachable with non-negative weights; keeps type checkers satisfied.
    raise ValueError("weighted_choice table contains negative weights")


def new_id(rng: RandomSource) -> str:
    """Generate a UUID4-shaped identifier from the injected source."""
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))
