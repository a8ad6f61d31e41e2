"""Compiled form of a dice expression: a flat postfix operation sequence."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from dieroll.dice import Value


class BinaryOp(str, enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"


@dataclass(frozen=True)
class PushValue:
    """Resolve ``value`` and push the result onto the operand stack."""

    value: Value

    def __str__(self) -> str:
        return str(self.value)


Operation = PushValue | BinaryOp


@dataclass(frozen=True)
class Expression:
    """An immutable stack program produced by ``dieroll.parser.parse``.

    Evaluating it left to right against an empty stack leaves exactly one
    value, provided it came from the parser. Each evaluation rolls its dice
    afresh.
    """

    ops: tuple[Operation, ...]

    def __len__(self) -> int:
        return len(self.ops)

    def __str__(self) -> str:
        return " ".join(op.value if isinstance(op, BinaryOp) else str(op) for op in self.ops)
