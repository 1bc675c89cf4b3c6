from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError, KappaTypeError
from kappa.evaluation.special_forms.lambda_form import make_lambda
from kappa.types.environment import Environment
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name expr)
    Binds in the caller's environment itself; expr is evaluated in a copy so
    anything it defines along the way stays local.
    """
    if len(tail) < 2:
        raise KappaArityError("def requires exactly 2 arguments")

    name, val_expr = tail[0], tail[1]
    if not isinstance(name, Symbol):
        raise KappaTypeError("Expected symbol as first argument to def")
    value = evaluate_fn(val_expr, env.copy())
    env.define(name, value)
    return Nil


def defn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(defn name [params] body) == (def name (fn [params] body))"""
    if len(tail) < 3:
        raise KappaArityError("defn requires a name, a parameter vector and a body")
    name, params, body = tail[0], tail[1], tail[2]
    if not isinstance(name, Symbol):
        raise KappaTypeError("Expected symbol as first argument to defn")
    env.define(name, make_lambda(params, body))
    return Nil
