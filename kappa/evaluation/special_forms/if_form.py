from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError
from kappa.types.environment import Environment
from kappa.types.nil import Nil, NilType


def is_truthy(val: LispValue) -> bool:
    """Only false and nil are falsey; 0, "" and [] are truthy."""
    return not (val is False or isinstance(val, NilType))


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) < 2:
        raise KappaArityError("if requires a condition and a then-expression")

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
