from __future__ import annotations

from functools import reduce
from typing import Callable

from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError
from kappa.types.environment import Environment
from kappa.types import ops


def _fold(name: str, op: Callable[[LispValue, LispValue], LispValue]):
    def fold_form(
        tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
    ) -> LispValue:
        # Every operand is evaluated, even after an operand has produced an Error
        if not tail:
            raise KappaArityError(f"{name} requires at least 1 argument")
        start = evaluate_fn(tail[0], env)
        return reduce(lambda acc, e: op(acc, evaluate_fn(e, env)), tail[1:], start)

    fold_form.__name__ = f"{op.__name__}_form"
    return fold_form


add_form = _fold("+", ops.add)
subtract_form = _fold("-", ops.subtract)
multiply_form = _fold("*", ops.multiply)
divide_form = _fold("/", ops.divide)


def mod_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(mod n d) => remainder of n / d, truncated toward zero."""
    if len(tail) < 2:
        raise KappaArityError("mod requires exactly 2 arguments")
    dividend = evaluate_fn(tail[0], env)
    divisor = evaluate_fn(tail[1], env)
    return ops.remainder(dividend, divisor)
