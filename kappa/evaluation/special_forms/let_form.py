from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError, KappaTypeError
from kappa.evaluation.special_forms.do_form import do_form
from kappa.types.environment import Environment
from kappa.types.symbol import Symbol
from kappa.types.vector import Vector


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let [name1 expr1 name2 expr2 ...] body...)
    Bindings are sequential: each expr sees the names bound before it. The
    body runs as a `do` in a copy of the caller's environment.
    """
    if not tail:
        raise KappaArityError("let requires a binding vector")
    bindings, body = tail[0], tail[1:]
    if not isinstance(bindings, Vector):
        raise KappaTypeError("Expected vector as first argument to let")
    if len(bindings) % 2 != 0:
        raise KappaTypeError("Expected binding vector to contain an even number of forms")

    new_env = env.copy()
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise KappaTypeError("Expected odd items in binding vector to be symbols")
        new_env.define(name, evaluate_fn(val_expr, new_env.copy()))

    return do_form(body, new_env, evaluate_fn)
