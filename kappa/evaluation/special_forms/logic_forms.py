from kappa import SExpression, LispValue, EvaluatorFn
from kappa.types.environment import Environment
from kappa.types.nil import Nil, NilType


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates operands left-to-right until false or nil is
    found, which is returned immediately. Otherwise returns the value of the
    last operand. With zero operands, returns true.
    """
    if not tail:
        return True

    for expr in tail[:-1]:
        val = evaluate_fn(expr, env)
        if val is False or isinstance(val, NilType):
            return val
    return evaluate_fn(tail[-1], env)


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates operands left-to-right and returns the first
    value that is neither false nor nil. If none is found, returns the value
    of the last operand. With zero operands, returns nil.
    """
    if not tail:
        return Nil

    for expr in tail[:-1]:
        val = evaluate_fn(expr, env)
        if val is False or isinstance(val, NilType):
            continue
        return val
    return evaluate_fn(tail[-1], env)
