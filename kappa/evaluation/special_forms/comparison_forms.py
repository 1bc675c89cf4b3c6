from __future__ import annotations

import operator
from typing import Callable

from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError, KappaTypeError
from kappa.types.environment import Environment
from kappa.types.ops import is_equal, is_int


def _evaluate_pair(
    name: str, tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> tuple[LispValue, LispValue]:
    if len(tail) < 2:
        raise KappaArityError(f"{name} requires exactly 2 arguments")
    return evaluate_fn(tail[0], env), evaluate_fn(tail[1], env)


def _compare(name: str, op: Callable[[int, int], bool]):
    def compare_form(
        tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
    ) -> LispValue:
        first, second = _evaluate_pair(name, tail, env, evaluate_fn)
        # Ordering is only defined on Integers
        if not (is_int(first) and is_int(second)):
            raise KappaTypeError(f"Expected numbers as arguments to {name}")
        return op(first, second)

    return compare_form


gt_form = _compare(">", operator.gt)
lt_form = _compare("<", operator.lt)
ge_form = _compare(">=", operator.ge)
le_form = _compare("<=", operator.le)


def equal_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    first, second = _evaluate_pair("=", tail, env, evaluate_fn)
    return is_equal(first, second)
