# safecalc

safecalc is an interactive calculator that evaluates arithmetic expressions
safely. Overflow, underflow, division by zero, malformed numbers, unbalanced
parentheses and out-of-domain function arguments are reported as errors. They
are not turned into meaningless results.

## Installation

```
pip install .
```

## Interactive use

```
safecalc
```

The prompt reads one expression per line and prints the result. Type `exit`
or `quit` to leave. The prompt also ends at end of input. Blank lines are
ignored.

```
Safe Calculator (type 'exit' to quit)
> (2 + 3) * 4 - 10 / 2
= 15
> -5 + 3
= -2
> 2 * -3
= -6
> 1 / 0
Error: Division by zero
> exit
Goodbye!
```

### Expressions

- **Binary operators:** `+ - * / ^` and parentheses.
  - `^` is right-associative.
  - `*` and `/` bind tighter than `+` and `-`.
- **Signs:** a `+` or `-` in front of an operand is a sign, so `2 * -3` works.
- **Factorial:** `!` is the factorial, written before its operand, as in
  `! 5`. It accepts whole numbers from 0 to 20.
- **Functions:** `sin cos tan cot sec csc asin acos atan acot asec acsc log ln
  sqrt`.
  - Each is written before its argument, as in `sqrt 16` or `sin(0)`.
  - `log` is base 10 and `ln` is the natural logarithm.
- **Numbers:** either `.` or `,` may be the decimal separator.

### Results and errors

A whole result that fits in a 32-bit signed integer is printed without a
fractional part. Any other result is printed to six significant digits.

Failures are printed as one of these messages:

- `Error: Arithmetic overflow`
- `Error: Arithmetic underflow`
- `Error: Invalid number format`
- `Error: Number out of range`
- `Error: Division by zero`
- `Error: Invalid expression format`
- `Error: Unbalanced parentheses`
- `Error: Unknown operator`

An argument outside a function's domain, such as `sqrt -1` or `ln 0`, is
reported as `Error: Unknown error`.

## Library use

```python
from safecalc.evaluator import calculate
from safecalc.errors import CalcError, ErrorKind

calculate("(2 + 3) * 4 - 10 / 2")   # 15.0

try:
    calculate("(1 + 2")
except CalcError as exc:
    assert exc.kind is ErrorKind.UNBALANCED_PARENTHESES
```

Every failure raises `CalcError`, which is a subclass of `ArithmeticError`. Its
`kind` attribute is an `ErrorKind` member:

- `OVERFLOW`
- `UNDERFLOW`
- `INVALID_INPUT`
- `OUT_OF_RANGE`
- `DIVISION_BY_ZERO`
- `INVALID_EXPRESSION`
- `UNBALANCED_PARENTHESES`
- `UNKNOWN_OPERATOR`
- `DOMAIN_ERROR`

### Lower-level pieces

- `safecalc.parser.tokenize(expression)` turns text into a list of `Token`
  objects. Each `Token` has a `TokenType` and a value: a number, an
  `Operation` or `None`.
- `safecalc.evaluator.evaluate(tokens)` evaluates those tokens with operator
  precedence.
- `safecalc.operations.find_operation(name)` looks up an `Operation` by its
  spelling, for example `"+"` or `"sqrt"`. `Operation.apply(a, b)` applies it.
- `safecalc.numbers.parse_number(text)` parses a single number.
- `safecalc.approx` holds:
  - the series-based math functions, such as `sin_approx`, `ln_approx`,
    `sqrt_approx` and `pow_approx`;
  - the checked arithmetic: `safe_add`, `safe_sub`, `safe_mul` and
    `safe_div`.
- `safecalc.cli.format_result(value)` and `safecalc.cli.error_message(kind)`
  produce the text that the prompt prints.

The trigonometric, logarithmic and power functions are computed from truncated
series and Newton iteration. Their results are close to the exact values but
can differ from `math` in the last digits.