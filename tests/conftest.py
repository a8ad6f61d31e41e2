"""Shared test fixtures for the dieroll test suite.

scripted_rng
    Factory for a random source that replays a fixed list of rolls and
    records every ``randint`` call. Use it wherever a test needs exact dice
    results or needs to count draws.

No other fixtures are needed: parsing and evaluation are pure apart from
the injected random source.
"""

from __future__ import annotations

import pytest

from tests.helpers import ScriptedRandom, ScriptedRandomFactory


@pytest.fixture
def scripted_rng() -> ScriptedRandomFactory:
    def _make(*values: int) -> ScriptedRandom:
        return ScriptedRandom(values)

    return _make
