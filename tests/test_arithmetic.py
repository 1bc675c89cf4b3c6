import math

import pytest

from kappa.types import ops
from kappa.types.error import Error
from kappa.types.nil import Nil
from kappa.types.vector import Vector


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 1 2.0)", 3.0),
        ("(+ 1 2 3 4)", 10),
        ("(- 10 3 2)", 5),
        ("(- 5)", 5),
        ("(* 2 3 4)", 24),
        ("(* 2 1.5)", 3.0),
        ("(/ 6 3)", 2),
        ("(/ 7 2)", 3.5),
        ("(/ -6 3)", -2),
        ("(/ -7 2)", -3.5),
        ("(/ 0 5)", 0),
        ("(/ 6.0 3)", 2.0),
        ("(/ 12 2 3)", 2),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
    ],
)
def test_arithmetic(run, source, expected):
    result = run(source)
    assert type(result) is type(expected)
    assert result == expected


def test_division_by_zero_follows_float_division(run):
    assert run("(/ 1 0)") == math.inf
    assert run("(/ -1 0)") == -math.inf
    assert math.isnan(run("(/ 0 0)"))
    assert run("(/ 1.5 0)") == math.inf


@pytest.mark.parametrize(
    "source,message",
    [
        ("(+ 1 true)", "Can only add numbers"),
        ('(+ "a" 1)', "Can only add numbers"),
        ("(- [1] 1)", "Can only subtract numbers"),
        ("(* nil 2)", "Can only multiply numbers"),
        ("(/ 1 false)", "Can only divide numbers"),
        # an Error operand is just another non-number
        ("(* (+ 1 nil) 2)", "Can only multiply numbers"),
        ("(+)", "+ requires at least 1 argument"),
        ("(/)", "/ requires at least 1 argument"),
    ],
)
def test_arithmetic_errors_are_values(run, source, message):
    assert run(source) == Error(message)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(mod 7 3)", 1),
        ("(mod -7 3)", -1),
        ("(mod 7 -3)", 1),
        ("(mod 6 3)", 0),
        ("(mod 7 0)", Error("Division by zero in modulo")),
        ("(mod 7.0 2)", Error("Expected numbers as arguments to modulo")),
        ("(mod 7)", Error("mod requires exactly 2 arguments")),
    ],
)
def test_mod(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 9223372036854775807 1)", -9223372036854775808),
        ("(- -9223372036854775808 1)", 9223372036854775807),
        ("(* 9223372036854775807 2)", -2),
        ("(/ -9223372036854775808 -1)", -9223372036854775808),
        ("(mod -9223372036854775808 -1)", 0),
        # 2**64 divides every product past 66!
        ("(reduce * 1 (range 1 200))", 0),
        ("(+ (reduce * 1 (range 1 200)) 0.5)", 0.5),
        ("(/ (reduce * 1 (range 1 2000)) 7)", 0),
    ],
)
def test_integers_wrap_at_64_bits(run, source, expected):
    result = run(source)
    assert type(result) is type(expected)
    assert result == expected


@pytest.mark.parametrize(
    "n,expected",
    [
        (0, 0),
        (2**63 - 1, 2**63 - 1),
        (-(2**63), -(2**63)),
        (2**63, -(2**63)),
        (2**64 + 5, 5),
        (-(2**63) - 1, 2**63 - 1),
    ],
)
def test_wrap_int(n, expected):
    assert ops.wrap_int(n) == expected


def test_divide_checks_the_real_quotient():
    assert ops.divide(7, 2) == 3.5
    assert ops.divide(-7, 2) == -3.5
    assert ops.divide(9, -3) == -3
    assert isinstance(ops.divide(9, -3), int)


def test_booleans_are_not_numbers():
    assert ops.add(True, 1) == Error("Can only add numbers")
    assert not ops.is_number(False)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (1, 1, True),
        (1, 1.0, True),
        (1.0, 1, True),
        (2.5, 2.5, True),
        (1, 2, False),
        ("a", "a", True),
        ("a", "b", False),
        (True, True, True),
        (True, False, False),
        (Nil, Nil, True),
        (1, True, False),
        (0, False, False),
        (Vector([1]), Vector([1]), False),
        ([1], [1], False),
        (Error("x"), Error("x"), False),
        (Nil, False, False),
    ],
)
def test_is_equal(a, b, expected):
    assert ops.is_equal(a, b) is expected
