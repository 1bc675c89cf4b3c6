"""Vector operations: conj, nth, count, range, for and reduce."""

from __future__ import annotations

from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError, KappaIndexError, KappaTypeError
from kappa.evaluation.special_forms.do_form import do_form
from kappa.types.environment import Environment
from kappa.types.nil import NilType
from kappa.types.ops import is_int
from kappa.types.symbol import Symbol
from kappa.types.vector import Vector


def _require(name: str, tail: list[SExpression], n: int) -> None:
    if len(tail) < n:
        plural = "argument" if n == 1 else "arguments"
        raise KappaArityError(f"{name} requires exactly {n} {plural}")


def conj_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(conj v x) => a new vector with x appended; v itself is unchanged."""
    _require("conj", tail, 2)
    v = evaluate_fn(tail[0], env)
    x = evaluate_fn(tail[1], env)
    if not isinstance(v, Vector):
        raise KappaTypeError("Expected vector as first argument to conj")
    return Vector([*v, x])


def nth_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    _require("nth", tail, 2)
    v = evaluate_fn(tail[0], env)
    i = evaluate_fn(tail[1], env)
    match (isinstance(v, Vector), is_int(i)):
        case (True, True):
            if not 0 <= i < len(v):
                raise KappaIndexError(f"Index {i} out of bounds for vector of length {len(v)}")
            return v[i]
        case (False, True):
            raise KappaTypeError("Expected vector as first argument to nth")
        case (True, False):
            raise KappaTypeError("Expected number as second argument to nth")
        case _:
            raise KappaTypeError("Expected vector and number as arguments to nth")


def count_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    _require("count", tail, 1)
    v = evaluate_fn(tail[0], env)
    if not isinstance(v, Vector):
        raise KappaTypeError("Expected vector as argument to count")
    return len(v)


def range_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(range from to) => [from, from+1, ..., to-1]; empty when from >= to."""
    _require("range", tail, 2)
    start = evaluate_fn(tail[0], env)
    stop = evaluate_fn(tail[1], env)
    if not (is_int(start) and is_int(stop)):
        raise KappaTypeError("Expected numbers as arguments to range")
    return Vector(range(start, stop))


def for_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (for [name seq] body...)
    Runs body as a `do` once per element of seq with name bound to the
    element, and collects the non-nil results into a vector. All iterations
    share one copy of the caller's environment.
    """
    if not tail:
        raise KappaArityError("for requires a binding vector")
    binding, body = tail[0], tail[1:]
    if not isinstance(binding, Vector):
        raise KappaTypeError("Expected binding vector as first argument to for")
    if len(binding) < 2 or not isinstance(binding[0], Symbol):
        raise KappaTypeError("Expected first item in binding vector to be a symbol")
    if not body:
        raise KappaArityError("for requires a body")

    name = binding[0]
    seq = evaluate_fn(binding[1], env)
    if isinstance(seq, Vector):
        # elements are evaluated once more, as a vector literal would be
        seq = evaluate_fn(seq, env)
    if not isinstance(seq, Vector):
        raise KappaTypeError("Expected vector as second item in binding vector")

    results = Vector()
    new_env = env.copy()
    for item in seq:
        new_env.define(name, item)
        result = do_form(body, new_env, evaluate_fn)
        if not isinstance(result, NilType):
            results.append(result)
    return results


def reduce_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (reduce f init seq)
    Left fold: acc = (f acc item) for each item of seq, applied through the
    normal list evaluation path.
    """
    from kappa.evaluation.special_forms import SPECIAL_FORMS

    _require("reduce", tail, 3)
    f_expr = tail[0]
    if isinstance(f_expr, Symbol) and f_expr.name in SPECIAL_FORMS:
        # (reduce + 0 v): keep the form name as the operator
        reducer = f_expr
    else:
        reducer = evaluate_fn(f_expr, env)
    acc = evaluate_fn(tail[1], env)
    seq = evaluate_fn(tail[2], env)
    if not isinstance(seq, Vector):
        raise KappaTypeError("Expected vector as third argument to reduce")

    for item in seq:
        acc = evaluate_fn([reducer, acc, item], env)
    return acc
