"""Random sources used to resolve dice terms."""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    """Uniform integer generator over an inclusive range.

    ``random.Random`` satisfies this directly. Tests substitute a scripted
    source to make rolls deterministic.
    """

    def randint(self, a: int, b: int) -> int:
        """Return an integer N such that ``a <= N <= b``."""
        ...


def make_random_source(seed: int | None = None) -> RandomSource:
    """Return a fresh generator, seeded from OS entropy when ``seed`` is None."""
    return random.Random(seed)
