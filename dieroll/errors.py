"""Failures raised while parsing or evaluating a dice expression.

None of these are recovered inside the library. The CLI catches
``ExpressionError``, reports the message, and exits non-zero.
"""

from __future__ import annotations


class ExpressionError(ValueError):
    """Base class for every dice expression failure."""


class MalformedNumber(ExpressionError):
    """Raised when a token that must be an integer is not one."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Malformed number: {token!r}")
        self.token = token


class InternalConsistencyError(ExpressionError):
    """Raised when the parser lands on an operator it never splits on."""


class StackUnderflow(ExpressionError):
    """Raised when an operator runs with fewer than two operands."""


class StackImbalance(ExpressionError):
    """Raised when evaluation ends with anything other than one value."""


class InvalidDice(ExpressionError):
    """Raised when a dice term has a negative count or no sides to roll."""
