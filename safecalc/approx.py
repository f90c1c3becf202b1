"""Series approximations of math functions and overflow-checked arithmetic."""

from __future__ import annotations

import math
import sys

from safecalc.errors import CalcError, ErrorKind

PI = 3.14159265358979323846
E = 2.71828182845904523536
LN10 = 2.30258509299404568402

_MAX = sys.float_info.max
_LOWEST = -sys.float_info.max
_EPS = 1e-10


def _domain_error() -> CalcError:
    return CalcError(ErrorKind.DOMAIN_ERROR)


def factorial(n: int) -> float:
    """Return n! as a float; 0 for negative n."""
    if n < 0:
        return 0.0
    result = 1.0
    for i in range(2, n + 1):
        result *= i
    return result


def sin_approx(x: float) -> float:
    """Taylor series sine after reducing x into [0, 2*pi)."""
    x = math.fmod(float(x), 2 * PI)
    if x < 0:
        x += 2 * PI
    result = 0.0
    term = x
    x2 = x * x
    n = 1
    while abs(term) > _EPS and n < 20:
        result += term
        n += 2
        term *= -x2 / (n * (n - 1))
    return result


def cos_approx(x: float) -> float:
    """Taylor series cosine after reducing x into [-pi, pi]."""
    x = float(x)
    if not math.isfinite(x):
        return math.nan
    if abs(x) > 1e6:
        x = math.fmod(x, 2 * PI)
    while x > PI:
        x -= 2 * PI
    while x < -PI:
        x += 2 * PI
    result = 0.0
    term = 1.0
    x2 = x * x
    n = 0
    while abs(term) > _EPS and n < 20:
        result += term
        n += 2
        term *= -x2 / (n * (n - 1))
    return result


def tan_approx(x: float) -> float:
    cos_val = cos_approx(x)
    if abs(cos_val) < _EPS:
        raise _domain_error()
    return sin_approx(x) / cos_val


def cot_approx(x: float) -> float:
    tan_val = tan_approx(x)
    if abs(tan_val) < _EPS:
        raise _domain_error()
    return 1.0 / tan_val


def sec_approx(x: float) -> float:
    cos_val = cos_approx(x)
    if abs(cos_val) < _EPS:
        raise _domain_error()
    return 1.0 / cos_val


def csc_approx(x: float) -> float:
    sin_val = sin_approx(x)
    if abs(sin_val) < _EPS:
        raise _domain_error()
    return 1.0 / sin_val


def asin_approx(x: float) -> float:
    x = float(x)
    if x < -1.0 or x > 1.0:
        raise _domain_error()
    result = 0.0
    term = x
    x2 = x * x
    n = 1
    while abs(term) > _EPS and n < 20:
        result += term
        n += 2
        term *= (x2 * (n - 2)) / n * (n - 1) / (n + 1)
    return result


def acos_approx(x: float) -> float:
    return PI / 2.0 - asin_approx(x)


def atan_approx(x: float) -> float:
    x = float(x)
    if abs(x) > 1.0:
        inner = atan_approx(1.0 / x)
        return PI / 2.0 - inner if x > 0 else -PI / 2.0 - inner
    result = 0.0
    term = x
    x2 = x * x
    n = 1
    while abs(term) > _EPS and n < 20:
        result += term
        n += 2
        term *= -x2 * (n - 2) / n
    return result


def acot_approx(x: float) -> float:
    if x == 0:
        raise _domain_error()
    return PI / 2.0 - atan_approx(x)


def _reciprocal(x: float) -> float:
    # Division by zero yields an infinity, which every caller rejects as out of domain.
    if x == 0:
        return math.copysign(math.inf, x)
    return 1.0 / x


def asec_approx(x: float) -> float:
    x = float(x)
    if -1.0 < x < 1.0 and x != 0:
        raise _domain_error()
    return acos_approx(_reciprocal(x))


def acsc_approx(x: float) -> float:
    x = float(x)
    if -1.0 < x < 1.0 and x != 0:
        raise _domain_error()
    return asin_approx(_reciprocal(x))


def _log_series(x: float) -> float:
    z = (x - 1.0) / (x + 1.0)
    z2 = z * z
    result = 0.0
    term = z
    n = 1
    while abs(term) > _EPS and n < 50:
        result += term / n
        n += 2
        term *= z2 * (n - 2)
    return result


def log10_approx(x: float) -> float:
    x = float(x)
    if x <= 0:
        raise _domain_error()
    return _log_series(x) * 2.0 / LN10


def ln_approx(x: float) -> float:
    x = float(x)
    if x <= 0:
        raise _domain_error()
    return 2.0 * _log_series(x)


def sqrt_approx(x: float) -> float:
    """Square root by twenty Newton steps."""
    x = float(x)
    if x < 0:
        raise _domain_error()
    if x == 0:
        return 0.0
    guess = x
    for _ in range(20):
        guess = 0.5 * (guess + x / guess)
    return guess


def factorial_approx(x: float) -> float:
    x = float(x)
    if x < 0 or not x.is_integer():
        raise _domain_error()
    if x > 20:
        raise CalcError(ErrorKind.OVERFLOW)
    return factorial(int(x))


def pow_approx(a: float, b: float) -> float:
    a = float(a)
    b = float(b)
    if a == 0 and b <= 0:
        raise _domain_error()
    if b.is_integer():
        result = 1.0
        n = int(b)
        if n < 0:
            a = 1.0 / a
            n = -n
        while n > 0:
            if n % 2 == 1:
                result *= a
            a *= a
            n //= 2
        return result

    exp_arg = b * ln_approx(a)
    result = 1.0
    term = 1.0
    n = 1
    while abs(term) > _EPS and n < 50:
        result += term
        term *= exp_arg / n
        n += 1
    return result


def safe_add(a: float, b: float) -> float:
    if a > 0 and b > _MAX - a:
        raise CalcError(ErrorKind.OVERFLOW)
    if a < 0 and b < _LOWEST - a:
        raise CalcError(ErrorKind.UNDERFLOW)
    return float(a + b)


def safe_sub(a: float, b: float) -> float:
    if b > 0 and a < _LOWEST + b:
        raise CalcError(ErrorKind.UNDERFLOW)
    if b < 0 and a > _MAX + b:
        raise CalcError(ErrorKind.OVERFLOW)
    return float(a - b)


def safe_mul(a: float, b: float) -> float:
    if abs(a) > 1 and abs(b) > _MAX / abs(a):
        raise CalcError(ErrorKind.OVERFLOW)
    return float(a * b)


def safe_div(a: float, b: float) -> float:
    if abs(b) < _EPS:
        raise CalcError(ErrorKind.DIVISION_BY_ZERO)
    return float(a / b)