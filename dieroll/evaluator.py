"""Stack-machine evaluation of compiled dice expressions."""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable

from dieroll.dice import saturate
from dieroll.errors import StackImbalance, StackUnderflow
from dieroll.expression import BinaryOp, Expression, PushValue
from dieroll.parser import parse
from dieroll.rng import RandomSource, make_random_source

logger = logging.getLogger(__name__)

_APPLY: dict[BinaryOp, Callable[[int, int], int]] = {
    BinaryOp.ADD: operator.add,
    BinaryOp.SUBTRACT: operator.sub,
    BinaryOp.MULTIPLY: operator.mul,
}


def evaluate(expr: Expression, rng: RandomSource | None = None) -> int:
    """Run ``expr`` against a fresh operand stack.

    Args:
        expr: A compiled expression.
        rng: Source for dice rolls. Defaults to an unseeded generator.

    Returns:
        The single value left on the stack. Arithmetic saturates at the
        signed 64-bit bounds instead of overflowing.

    Raises:
        StackUnderflow: If an operator finds fewer than two operands.
        StackImbalance: If the stack does not end with exactly one value.
        InvalidDice: If a dice term cannot be rolled.
    """
    if rng is None:
        rng = make_random_source()

    stack: list[int] = []
    for position, op in enumerate(expr.ops):
        if isinstance(op, PushValue):
            stack.append(op.value.resolve(rng))
            continue
        if len(stack) < 2:
            raise StackUnderflow(
                f"Operator {op.value!r} at position {position} needs two operands, "
                f"found {len(stack)}"
            )
        right = stack.pop()
        left = stack.pop()
        stack.append(saturate(_APPLY[op](left, right)))

    if len(stack) != 1:
        raise StackImbalance(f"Expected one value after evaluation, found {len(stack)}")
    logger.debug("Evaluated %s to %d", expr, stack[0])
    return stack[0]


def roll(source: str, rng: RandomSource | None = None) -> int:
    """Parse and evaluate ``source`` in one step."""
    return evaluate(parse(source), rng)
