"""Error kinds reported by the calculator."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """The ways a calculation can fail."""

    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    INVALID_INPUT = "invalid_input"
    OUT_OF_RANGE = "out_of_range"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_EXPRESSION = "invalid_expression"
    UNBALANCED_PARENTHESES = "unbalanced_parentheses"
    UNKNOWN_OPERATOR = "unknown_operator"
    DOMAIN_ERROR = "domain_error"


class CalcError(ArithmeticError):
    """Raised when parsing or evaluating an expression fails."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __repr__(self) -> str:
        return f"CalcError({self.kind})"