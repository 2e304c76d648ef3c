"""Fixed-width arithmetic helpers.

Integers are signed 64-bit and wrap on overflow; floats are IEEE-754
doubles, including division by zero.
"""

from __future__ import annotations

import math

from minilisp.errors import DivisionByZero

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def wrap_int64(n: int) -> int:
    """Reduce `n` to the signed 64-bit range (two's complement)."""
    if INT64_MIN <= n <= INT64_MAX:
        return n
    return ((n - INT64_MIN) % 2 ** 64) + INT64_MIN


def int_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise DivisionByZero(f"Integer division of {a} by zero")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return wrap_int64(q)


def float_div(a: float, b: float) -> float:
    if b != 0.0:
        return a / b
    if math.isnan(a) or a == 0.0:
        return math.nan
    # sign of a zero divisor matters: 1.0 / -0.0 is -inf
    return math.copysign(math.inf, a) * math.copysign(1.0, b)
