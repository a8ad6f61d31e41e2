"""Value tokens: integer constants and dice terms.

A token is either a plain integer (``10``) or a dice term in ``NdM``
notation (``2d6``: roll two six-sided dice and sum them). The token is split
at its first ``d`` and both halves must be integers.
Examples: 4, 1d20, 3d10, 0d6.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from dieroll.errors import InvalidDice, MalformedNumber
from dieroll.rng import RandomSource

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_MAX_DICE = 1_000_000

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def saturate(value: int) -> int:
    """Clamp ``value`` into the signed 64-bit range."""
    return max(INT64_MIN, min(INT64_MAX, value))


def parse_int(token: str) -> int:
    """Parse a signed 64-bit decimal integer.

    Args:
        token: Text to parse. Surrounding whitespace is not stripped here.

    Returns:
        The integer value.

    Raises:
        MalformedNumber: If the token is empty, has non-digit characters, or
            does not fit in 64 bits.
    """
    if not _INTEGER_RE.fullmatch(token):
        raise MalformedNumber(token)
    value = int(token)
    if value != saturate(value):
        raise MalformedNumber(token)
    return value


@dataclass(frozen=True)
class Constant:
    """A literal integer."""

    value: int

    def resolve(self, rng: RandomSource) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Dice:
    """``count`` dice with faces numbered ``1..sides``."""

    count: int
    sides: int

    def resolve(self, rng: RandomSource) -> int:
        return roll(self.count, self.sides, rng)

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"


Value = Constant | Dice


def parse_value(source: str) -> Value:
    """Parse a single value token into a ``Constant`` or ``Dice``.

    Args:
        source: Token text, e.g. "2d6" or " 12 ".

    Raises:
        MalformedNumber: If either side of the token is not an integer.
    """
    token = source.strip()
    count, sep, sides = token.partition("d")
    if sep:
        return Dice(parse_int(count), parse_int(sides))
    return Constant(parse_int(token))


def roll(count: int, sides: int, rng: RandomSource) -> int:
    """Roll ``count`` dice of ``sides`` faces and return the saturated total.

    Every die is a separate ``rng.randint(1, sides)`` call. Zero dice sum to
    zero without drawing.

    Raises:
        InvalidDice: If ``count`` is negative or above the dice limit, or
            ``sides`` is below one while there are dice to roll.
    """
    if count < 0:
        raise InvalidDice(f"Negative dice count: {count}d{sides}")
    if count > _MAX_DICE:
        raise InvalidDice(f"Too many dice: {count} (max {_MAX_DICE})")
    if count == 0:
        return 0
    if sides < 1:
        raise InvalidDice(f"Dice need at least one side: {count}d{sides}")

    total = saturate(sum(rng.randint(1, sides) for _ in range(count)))
    logger.debug("Rolled %dd%d: %d", count, sides, total)
    return total
