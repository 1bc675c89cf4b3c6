"""Equality and numeric coercion rules shared by the arithmetic forms.

Integers are signed 64-bit values: an Integer result outside that range wraps
around two's-complement. Integers pair with Floats by promoting to Float. Any other operand pairing
produces an Error value with an operation-specific message instead of
raising, so a failed result can itself be fed into another operation.
"""

from __future__ import annotations

import math

from kappa import LispValue
from kappa.types.error import Error
from kappa.types.nil import NilType

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def is_int(x: LispValue) -> bool:
    # bool is an int subclass in Python but a separate variant here
    return isinstance(x, int) and not isinstance(x, bool)


def is_float(x: LispValue) -> bool:
    return isinstance(x, float)


def is_number(x: LispValue) -> bool:
    return is_int(x) or is_float(x)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Equality as seen by `=`.

    Defined for number/number (with Integer/Float cross-coercion),
    string/string, boolean/boolean and nil/nil. Every other pairing is
    unequal, never an error.
    """
    if is_number(a) and is_number(b):
        if is_int(a) and is_int(b):
            return a == b
        return float(a) == float(b)
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, bool) and isinstance(b, bool):
        return a == b
    return isinstance(a, NilType) and isinstance(b, NilType)


def wrap_int(n: int) -> int:
    """Reduce an int to the signed 64-bit range, two's-complement."""
    if INT_MIN <= n <= INT_MAX:
        return n
    return (n - INT_MIN) % 2**64 + INT_MIN


def _ieee_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def add(a: LispValue, b: LispValue) -> LispValue:
    if is_int(a) and is_int(b):
        return wrap_int(a + b)
    if is_number(a) and is_number(b):
        return float(a) + float(b)
    return Error("Can only add numbers")


def subtract(a: LispValue, b: LispValue) -> LispValue:
    if is_int(a) and is_int(b):
        return wrap_int(a - b)
    if is_number(a) and is_number(b):
        return float(a) - float(b)
    return Error("Can only subtract numbers")


def multiply(a: LispValue, b: LispValue) -> LispValue:
    if is_int(a) and is_int(b):
        return wrap_int(a * b)
    if is_number(a) and is_number(b):
        return float(a) * float(b)
    return Error("Can only multiply numbers")


def divide(a: LispValue, b: LispValue) -> LispValue:
    """Divide; two Integers give an Integer only when the quotient is exact.

    Exactness is decided on the real-number values (float remainder), not by
    integer truncation. A zero divisor follows IEEE float division.
    """
    if is_int(a) and is_int(b):
        fa, fb = float(a), float(b)
        if fb != 0.0 and math.fmod(fa, fb) == 0.0:
            q = abs(a) // abs(b)
            return wrap_int(-q if (a < 0) != (b < 0) else q)
        return _ieee_div(fa, fb)
    if is_number(a) and is_number(b):
        return _ieee_div(float(a), float(b))
    return Error("Can only divide numbers")


def remainder(a: LispValue, b: LispValue) -> LispValue:
    """Integer remainder truncated toward zero (sign follows the dividend)."""
    if not (is_int(a) and is_int(b)):
        return Error("Expected numbers as arguments to modulo")
    if b == 0:
        return Error("Division by zero in modulo")
    r = abs(a) % abs(b)
    return wrap_int(-r if a < 0 else r)
