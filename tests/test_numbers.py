import math

import pytest

from safecalc.errors import CalcError, ErrorKind
from safecalc.numbers import parse_number


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42.0),
        ("-2.5", -2.5),
        (" \t3.25\t ", 3.25),
        ("1,5", 1.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1e3),
        ("2.5E-2", 2.5e-2),
    ],
)
def test_valid_numbers(text, expected):
    assert parse_number(text) == expected


def test_comma_and_dot_agree():
    assert parse_number("12,75") == parse_number("12.75")


def test_infinity_literals():
    assert parse_number("inf") == math.inf
    assert parse_number("-Infinity") == -math.inf


def test_nan_literal():
    result = parse_number("nan")
    assert repr(result) == "nan"


@pytest.mark.parametrize(
    "text", ["", "   ", "\t", "abc", "1.2.3", "+5", "1e", "-", ".", "12a", "1,2,3", "1 2"]
)
def test_invalid_input(text):
    with pytest.raises(CalcError) as info:
        parse_number(text)
    assert info.value.kind is ErrorKind.INVALID_INPUT


@pytest.mark.parametrize("text", ["1e400", "-1e400", "1e-400"])
def test_out_of_range(text):
    with pytest.raises(CalcError) as info:
        parse_number(text)
    assert info.value.kind is ErrorKind.OUT_OF_RANGE


def test_zero_is_not_out_of_range():
    assert parse_number("0e-400") == 0.0


@pytest.mark.parametrize("value", [0.1, 123.456, -7.0, 1e-5])
def test_round_trip_through_repr(value):
    assert parse_number(repr(value)) == value