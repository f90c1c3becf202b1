"""Turning an expression string into tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from safecalc.errors import CalcError, ErrorKind
from safecalc.numbers import parse_number
from safecalc.operations import Operation, OpType, find_operation

_BINARY_CHARS = "+-*/^"


class TokenType(enum.Enum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    FUNCTION = enum.auto()


@dataclass(frozen=True)
class Token:
    """A number, an operation or a parenthesis."""

    type: TokenType
    value: float | Operation | None = None


def _is_word_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalpha()) or ch in "!~"


def _is_number_char(ch: str) -> bool:
    return (ch.isascii() and ch.isdigit()) or ch in ".,"


def tokenize(expression: str) -> list[Token]:
    """Split an expression into tokens, turning a leading minus into negation."""
    tokens: list[Token] = []
    expect_operand = True
    i = 0
    size = len(expression)

    while i < size:
        ch = expression[i]
        if ch == " ":
            i += 1
            continue

        if expect_operand and ch in "+-":
            if ch == "-":
                tokens.append(Token(TokenType.OPERATOR, Operation(OpType.NEGATE)))
            i += 1
            continue

        if ch == "(":
            tokens.append(Token(TokenType.LEFT_PAREN))
            expect_operand = True
            i += 1
            continue
        if ch == ")":
            tokens.append(Token(TokenType.RIGHT_PAREN))
            expect_operand = False
            i += 1
            continue

        start = i
        while i < size and _is_word_char(expression[i]):
            i += 1
        if i > start:
            op = find_operation(expression[start:i])
            if op is not None:
                tokens.append(Token(TokenType.OPERATOR, op))
                expect_operand = True
                continue
            i = start

        if not expect_operand and ch in _BINARY_CHARS:
            op = find_operation(ch)
            if op is None:
                raise CalcError(ErrorKind.UNKNOWN_OPERATOR)
            tokens.append(Token(TokenType.OPERATOR, op))
            expect_operand = True
            i += 1
        elif expect_operand:
            end = start
            while end < size and _is_number_char(expression[end]):
                end += 1
            if end == start:
                raise CalcError(ErrorKind.INVALID_INPUT)
            tokens.append(Token(TokenType.NUMBER, parse_number(expression[start:end])))
            expect_operand = False
            i = end
        else:
            raise CalcError(ErrorKind.INVALID_EXPRESSION)

    return tokens