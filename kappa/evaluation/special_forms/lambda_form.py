from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError, KappaTypeError
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda
from kappa.types.symbol import Symbol
from kappa.types.vector import Vector


def make_lambda(params: SExpression, body: SExpression) -> Lambda:
    if not isinstance(params, Vector):
        raise KappaTypeError("Expected vector as first argument to fn")
    if not all(isinstance(p, Symbol) for p in params):
        raise KappaTypeError("Expected symbols as function parameters")
    return Lambda([p.name for p in params], body)


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn [params] body); the body is kept unevaluated
    if len(tail) < 2:
        raise KappaArityError("fn requires a parameter vector and a body")
    return make_lambda(tail[0], tail[1])
