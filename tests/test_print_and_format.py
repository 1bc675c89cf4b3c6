import pytest

from kappa.printer import to_string
from kappa.types.error import Error
from kappa.types.lambda_fn import Lambda
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol
from kappa.types.vector import Vector


@pytest.mark.parametrize(
    "value,text",
    [
        (3, "3"),
        (-3, "-3"),
        (2.5, "2.5"),
        (3.0, "3.0"),
        (True, "true"),
        (False, "false"),
        ("hi", '"hi"'),
        (Symbol("x"), "x"),
        (Nil, "nil"),
        (Vector([1, 2, Vector()]), "[1, 2, []]"),
        (Vector(), "[]"),
        (Error("boom"), "Error: boom"),
        ([Symbol("+"), 1], "(List + 1)"),
        (Lambda(["a"], [Symbol("+"), Symbol("a"), 1]), "(fn [a] (List + a 1))"),
    ],
)
def test_to_string(value, text):
    assert to_string(value) == text


def test_println_prints_and_returns_nil(run, capsys):
    assert run('(println 1 "a" [1 (+ 1 1)] nil)') is Nil
    assert capsys.readouterr().out == '1 "a" [1, 2] nil\n'


def test_println_without_arguments(run, capsys):
    run("(println)")
    assert capsys.readouterr().out == "\n"
