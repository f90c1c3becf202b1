"""Operators and functions understood by the calculator."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from safecalc import approx
from safecalc.errors import CalcError, ErrorKind


class OpType(enum.Enum):
    """Every operator, function and the grouping marker used on the operator stack."""

    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    POW = enum.auto()
    SIN = enum.auto()
    COS = enum.auto()
    TAN = enum.auto()
    COT = enum.auto()
    SEC = enum.auto()
    CSC = enum.auto()
    ASIN = enum.auto()
    ACOS = enum.auto()
    ATAN = enum.auto()
    ACOT = enum.auto()
    ASEC = enum.auto()
    ACSC = enum.auto()
    LOG = enum.auto()
    LN = enum.auto()
    SQRT = enum.auto()
    FACTORIAL = enum.auto()
    NEGATE = enum.auto()
    LEFT_PAREN = enum.auto()


_BINARY: dict[OpType, Callable[[float, float], float]] = {
    OpType.ADD: approx.safe_add,
    OpType.SUB: approx.safe_sub,
    OpType.MUL: approx.safe_mul,
    OpType.DIV: approx.safe_div,
    OpType.POW: approx.pow_approx,
}

_UNARY: dict[OpType, Callable[[float], float]] = {
    OpType.SIN: approx.sin_approx,
    OpType.COS: approx.cos_approx,
    OpType.TAN: approx.tan_approx,
    OpType.COT: approx.cot_approx,
    OpType.SEC: approx.sec_approx,
    OpType.CSC: approx.csc_approx,
    OpType.ASIN: approx.asin_approx,
    OpType.ACOS: approx.acos_approx,
    OpType.ATAN: approx.atan_approx,
    OpType.ACOT: approx.acot_approx,
    OpType.ASEC: approx.asec_approx,
    OpType.ACSC: approx.acsc_approx,
    OpType.LOG: approx.log10_approx,
    OpType.LN: approx.ln_approx,
    OpType.SQRT: approx.sqrt_approx,
    OpType.FACTORIAL: approx.factorial_approx,
    OpType.NEGATE: lambda a: -float(a),
}

_NAMES: dict[str, OpType] = {
    "+": OpType.ADD,
    "-": OpType.SUB,
    "*": OpType.MUL,
    "/": OpType.DIV,
    "^": OpType.POW,
    "sin": OpType.SIN,
    "cos": OpType.COS,
    "tan": OpType.TAN,
    "cot": OpType.COT,
    "sec": OpType.SEC,
    "csc": OpType.CSC,
    "asin": OpType.ASIN,
    "acos": OpType.ACOS,
    "atan": OpType.ATAN,
    "acot": OpType.ACOT,
    "asec": OpType.ASEC,
    "acsc": OpType.ACSC,
    "log": OpType.LOG,
    "ln": OpType.LN,
    "sqrt": OpType.SQRT,
    "!": OpType.FACTORIAL,
    "~": OpType.NEGATE,
}

_PRECEDENCE: dict[OpType, int] = {
    OpType.ADD: 2,
    OpType.SUB: 2,
    OpType.MUL: 3,
    OpType.DIV: 3,
    OpType.POW: 4,
    **{op: 5 for op in _UNARY},
}


@dataclass(frozen=True)
class Operation:
    """An operator or function together with its evaluation rules."""

    type: OpType

    def apply(self, a: float, b: float = 0.0) -> float:
        """Apply the operation; unary operations ignore ``b``."""
        unary = _UNARY.get(self.type)
        if unary is not None:
            return unary(a)
        binary = _BINARY.get(self.type)
        if binary is not None:
            return binary(a, b)
        raise CalcError(ErrorKind.UNKNOWN_OPERATOR)

    def is_unary(self) -> bool:
        return self.type in _UNARY

    def precedence(self) -> int:
        try:
            return _PRECEDENCE[self.type]
        except KeyError:
            raise CalcError(ErrorKind.UNKNOWN_OPERATOR) from None

    def is_left_associative(self) -> bool:
        return self.type is not OpType.POW


def find_operation(name: str) -> Operation | None:
    """Look up an operator or function by its spelling."""
    op_type = _NAMES.get(name)
    return Operation(op_type) if op_type is not None else None