"""Evaluation of token streams with operator precedence."""

from __future__ import annotations

from collections.abc import Iterable

from safecalc.errors import CalcError, ErrorKind
from safecalc.operations import Operation, OpType
from safecalc.parser import Token, TokenType, tokenize

_LEFT_PAREN = Operation(OpType.LEFT_PAREN)


def _apply_top(values: list[float], ops: list[Operation]) -> None:
    """Pop the top operation, apply it to its operands and push the result."""
    if not ops:
        raise CalcError(ErrorKind.INVALID_EXPRESSION)
    op = ops.pop()
    if op.is_unary():
        if not values:
            raise CalcError(ErrorKind.INVALID_EXPRESSION)
        values.append(op.apply(values.pop()))
    else:
        if len(values) < 2:
            raise CalcError(ErrorKind.INVALID_EXPRESSION)
        b = values.pop()
        a = values.pop()
        values.append(op.apply(a, b))


def _should_reduce(top: Operation, current: Operation) -> bool:
    if top.is_left_associative():
        return top.precedence() >= current.precedence()
    return top.precedence() > current.precedence()


def evaluate(tokens: Iterable[Token]) -> float:
    """Evaluate tokens produced by :func:`tokenize`."""
    values: list[float] = []
    ops: list[Operation] = []

    for token in tokens:
        if token.type is TokenType.NUMBER:
            values.append(token.value)
        elif token.type is TokenType.OPERATOR:
            op = token.value
            if not op.is_unary():
                while ops and ops[-1] != _LEFT_PAREN and _should_reduce(ops[-1], op):
                    _apply_top(values, ops)
            ops.append(op)
        elif token.type is TokenType.LEFT_PAREN:
            ops.append(_LEFT_PAREN)
        elif token.type is TokenType.RIGHT_PAREN:
            while ops and ops[-1] != _LEFT_PAREN:
                _apply_top(values, ops)
            if not ops:
                raise CalcError(ErrorKind.UNBALANCED_PARENTHESES)
            ops.pop()
        else:
            raise CalcError(ErrorKind.INVALID_EXPRESSION)

    while ops:
        if ops[-1] == _LEFT_PAREN:
            raise CalcError(ErrorKind.UNBALANCED_PARENTHESES)
        _apply_top(values, ops)

    if len(values) != 1:
        raise CalcError(ErrorKind.INVALID_EXPRESSION)
    return values[0]


def calculate(expression: str) -> float:
    """Parse and evaluate an expression, raising :class:`CalcError` on failure."""
    try:
        return evaluate(tokenize(expression))
    except CalcError:
        raise
    except (ValueError, ZeroDivisionError, OverflowError, RecursionError) as exc:
        raise CalcError(ErrorKind.INVALID_EXPRESSION) from exc