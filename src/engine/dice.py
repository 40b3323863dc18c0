"""
Dice 10000 - Die Sources

The engine never calls the random module directly; it asks an injected
source for one face at a time so tests can script every roll.
"""

import random
from typing import Protocol, runtime_checkable

from src.engine.base import DIE_FACES, NUM_DICE


@runtime_checkable
class DieSource(Protocol):
    """Supplies independent, uniform die faces 1-6."""

    def roll(self) -> int:
        ...


class RandomDieSource:
    """DieSource backed by a (optionally seeded) random.Random."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def roll(self) -> int:
        return self._rng.randint(1, DIE_FACES)


def roll_dice(source: DieSource, count: int = NUM_DICE) -> tuple[int, ...]:
    """Roll `count` dice from the source, in position order."""
    return tuple(source.roll() for _ in range(count))
