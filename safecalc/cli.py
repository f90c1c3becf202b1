"""Interactive calculator prompt."""

from __future__ import annotations

import argparse
import math
import sys

from safecalc.errors import CalcError, ErrorKind
from safecalc.evaluator import calculate

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_MESSAGES = {
    ErrorKind.OVERFLOW: "Error: Arithmetic overflow",
    ErrorKind.UNDERFLOW: "Error: Arithmetic underflow",
    ErrorKind.INVALID_INPUT: "Error: Invalid number format",
    ErrorKind.OUT_OF_RANGE: "Error: Number out of range",
    ErrorKind.DIVISION_BY_ZERO: "Error: Division by zero",
    ErrorKind.INVALID_EXPRESSION: "Error: Invalid expression format",
    ErrorKind.UNBALANCED_PARENTHESES: "Error: Unbalanced parentheses",
    ErrorKind.UNKNOWN_OPERATOR: "Error: Unknown operator",
}

_BANNER = (
    "Safe Calculator (type 'exit' to quit)",
    "Supported operations: + - * / () !",
    "Supported math functions: sin cos tan cot sec csc asin acos atan acot "
    "asec acsc log ln sqrt ",
    "Example: (2 + 3) * 4 - 10 / 2",
    "         -5 + 3",
    "         2 * -3",
)


def error_message(kind: ErrorKind) -> str:
    """Return the message shown for a failed calculation."""
    return _MESSAGES.get(kind, "Error: Unknown error")


def format_result(value: float) -> str:
    """Format a result as an integer when it is one, else with six significant digits."""
    value = float(value)
    if math.isfinite(value) and value.is_integer() and _INT_MIN <= value <= _INT_MAX:
        return f"= {int(value)}"
    return f"= {value:.6g}"


def main(argv: list[str] | None = None) -> int:
    """Run the read-evaluate-print loop on standard input."""
    argparse.ArgumentParser(
        prog="safecalc", description="Interactive safe calculator."
    ).parse_args(argv)

    for line in _BANNER:
        print(line)

    while True:
        sys.stdout.write("> ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            break
        text = line.strip()
        if not text:
            continue
        if text in ("exit", "quit"):
            break
        try:
            print(format_result(calculate(text)))
        except CalcError as exc:
            print(error_message(exc.kind))

    print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())