"""Test doubles shared across the dieroll test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable


class ScriptedRandom:
    """Random source that returns queued values in order."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError(f"Unexpected extra roll randint({a}, {b})")
        return self._values.pop(0)


ScriptedRandomFactory = Callable[..., ScriptedRandom]
