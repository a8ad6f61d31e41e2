"""Parse dice expressions into postfix operation sequences.

Grammar, by scan position rather than precedence climbing:

1. Split at the first ``*``; parse both halves, then multiply.
2. Otherwise split at the first ``+`` or ``-``; parse both halves, then
   add or subtract.
3. Otherwise the text is a single value token (``12`` or ``2d6``).

Whitespace is trimmed at every split. Because the split is always at the
*first* operator, chains group to the right: ``5-2-1`` is ``5-(2-1)`` and
``1+2*3`` is ``(1+2)*3``.
"""

from __future__ import annotations

import logging
import re

from dieroll.dice import parse_value
from dieroll.errors import InternalConsistencyError
from dieroll.expression import BinaryOp, Expression, Operation, PushValue

logger = logging.getLogger(__name__)

_ADDITIVE_RE = re.compile(r"[+-]")

_ADDITIVE_OPS: dict[str, BinaryOp] = {
    "+": BinaryOp.ADD,
    "-": BinaryOp.SUBTRACT,
}


def parse(source: str) -> Expression:
    """Compile ``source`` into an ``Expression``.

    Args:
        source: Expression text, e.g. "2d6 + 3 * 2".

    Returns:
        The compiled, immutable expression.

    Raises:
        MalformedNumber: If a value token is not an integer or ``NdM`` term.
        InternalConsistencyError: If an additive split lands on any other
            character.
    """
    ops: list[Operation] = []
    _parse_into(source, ops)
    expr = Expression(tuple(ops))
    logger.debug("Parsed %r as %s", source, expr)
    return expr


def _parse_into(source: str, ops: list[Operation]) -> None:
    # The left side of a split never holds the operator being split on, so
    # only the right side can chain. It is walked in this loop and its
    # operators are emitted after it, innermost first.
    pending: list[BinaryOp] = []
    while True:
        source = source.strip()

        left, sep, right = source.partition("*")
        if sep:
            _parse_into(left, ops)
            pending.append(BinaryOp.MULTIPLY)
            source = right
            continue

        match = _ADDITIVE_RE.search(source)
        if match is None:
            ops.append(PushValue(parse_value(source)))
            break

        _parse_into(source[: match.start()], ops)
        pending.append(_additive_op(source, match.start()))
        source = source[match.end() :]

    ops.extend(reversed(pending))


def _additive_op(source: str, index: int) -> BinaryOp:
    op = _ADDITIVE_OPS.get(source[index])
    if op is None:
        raise InternalConsistencyError(
            f"Unexpected operator {source[index]!r} at position {index} in {source!r}"
        )
    return op
