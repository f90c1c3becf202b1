import math

import pytest

from safecalc.errors import CalcError, ErrorKind
from safecalc.operations import Operation, OpType, find_operation

UNARY_NAMES = [
    "sin", "cos", "tan", "cot", "sec", "csc", "asin", "acos", "atan",
    "acot", "asec", "acsc", "log", "ln", "sqrt", "!", "~",
]
BINARY_NAMES = ["+", "-", "*", "/", "^"]


@pytest.mark.parametrize(
    "name, expected",
    [("+", OpType.ADD), ("^", OpType.POW), ("sin", OpType.SIN),
     ("!", OpType.FACTORIAL), ("~", OpType.NEGATE), ("sqrt", OpType.SQRT)],
)
def test_find_operation(name, expected):
    assert find_operation(name) == Operation(expected)


@pytest.mark.parametrize("name", ["foo", "", "(", "SIN", "sinx"])
def test_find_unknown_operation(name):
    assert find_operation(name) is None


@pytest.mark.parametrize("name", UNARY_NAMES)
def test_unary_names(name):
    assert find_operation(name).is_unary() is True


@pytest.mark.parametrize("name", BINARY_NAMES)
def test_binary_names(name):
    assert find_operation(name).is_unary() is False


def test_left_paren_is_not_unary():
    assert Operation(OpType.LEFT_PAREN).is_unary() is False


def test_precedence_ordering():
    add = find_operation("+").precedence()
    sub = find_operation("-").precedence()
    mul = find_operation("*").precedence()
    div = find_operation("/").precedence()
    power = find_operation("^").precedence()
    assert add == sub < mul == div < power
    assert all(find_operation(n).precedence() > power for n in UNARY_NAMES)


def test_left_paren_has_no_precedence():
    with pytest.raises(CalcError) as info:
        Operation(OpType.LEFT_PAREN).precedence()
    assert info.value.kind is ErrorKind.UNKNOWN_OPERATOR


def test_associativity():
    assert Operation(OpType.POW).is_left_associative() is False
    assert all(
        Operation(t).is_left_associative() for t in OpType if t is not OpType.POW
    )


def test_apply_binary():
    assert Operation(OpType.ADD).apply(2, 3) == 2 + 3
    assert Operation(OpType.SUB).apply(2, 3) == 2 - 3
    assert Operation(OpType.MUL).apply(2, 3) == 2 * 3
    assert Operation(OpType.DIV).apply(3, 2) == 3 / 2
    assert Operation(OpType.POW).apply(2, 10) == 2.0**10


def test_apply_unary():
    assert Operation(OpType.NEGATE).apply(7) == -7
    assert Operation(OpType.FACTORIAL).apply(5) == math.factorial(5)
    assert Operation(OpType.SQRT).apply(9) == pytest.approx(math.sqrt(9))
    assert Operation(OpType.SIN).apply(0.5) == pytest.approx(math.sin(0.5), abs=1e-9)
    assert Operation(OpType.COS).apply(0.5) == pytest.approx(math.cos(0.5), abs=1e-9)


def test_apply_division_by_zero():
    with pytest.raises(CalcError) as info:
        Operation(OpType.DIV).apply(1, 0)
    assert info.value.kind is ErrorKind.DIVISION_BY_ZERO


def test_apply_domain_error():
    with pytest.raises(CalcError) as info:
        Operation(OpType.SQRT).apply(-1)
    assert info.value.kind is ErrorKind.DOMAIN_ERROR


def test_apply_left_paren_is_unknown():
    with pytest.raises(CalcError) as info:
        Operation(OpType.LEFT_PAREN).apply(1, 2)
    assert info.value.kind is ErrorKind.UNKNOWN_OPERATOR