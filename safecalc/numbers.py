"""Parsing of numeric literals."""

from __future__ import annotations

import math
import re

from safecalc.errors import CalcError, ErrorKind

_NUMBER = re.compile(
    r"""
    -?
    (?:
        (?P<mantissa>\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | inf(?:inity)?
      | nan(?:\([A-Za-z0-9_]*\))?
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def parse_number(text: str) -> float:
    """Parse a decimal number; a comma is accepted as the decimal separator."""
    trimmed = text.strip(" \t")
    if not trimmed:
        raise CalcError(ErrorKind.INVALID_INPUT)

    normalized = trimmed.replace(",", ".")
    match = _NUMBER.fullmatch(normalized)
    if match is None:
        raise CalcError(ErrorKind.INVALID_INPUT)

    mantissa = match.group("mantissa")
    if mantissa is None:
        literal = normalized.lower().lstrip("-")
        sign = -1.0 if normalized.startswith("-") else 1.0
        if literal.startswith("inf"):
            return sign * math.inf
        return math.copysign(math.nan, sign)

    value = float(normalized)
    if math.isinf(value):
        raise CalcError(ErrorKind.OUT_OF_RANGE)
    if value == 0.0 and any(ch in "123456789" for ch in mantissa):
        raise CalcError(ErrorKind.OUT_OF_RANGE)
    return value