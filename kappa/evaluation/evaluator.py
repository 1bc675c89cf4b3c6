"""Core evaluator for the Kappa interpreter.

Walks a form against an Environment. Lists are applications: the head is a
special-form name, a symbol bound to a Lambda, a Lambda, or a nested list
whose value is applied. Special forms receive their arguments unevaluated
and decide for themselves what to evaluate.

Every KappaError raised while handling one step is turned into an Error
value at that step, so failures are returned rather than raised.
"""

from __future__ import annotations

from kappa import SExpression, LispValue
from kappa.errors import KappaError, KappaInvokeError, KappaUnboundSymbol
from kappa.evaluation.apply import apply_lambda
from kappa.evaluation.special_forms import SPECIAL_FORMS
from kappa.types.environment import Environment
from kappa.types.error import Error
from kappa.types.lambda_fn import Lambda
from kappa.types.symbol import Symbol
from kappa.types.vector import Vector


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    try:
        return evaluate0(expr, env)
    except KappaError as e:
        return Error(str(e))


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """Single evaluation step; may raise KappaError for this step's own failure."""
    match expr:
        case Vector():
            return Vector(evaluate(e, env) for e in expr)

        case []:
            return expr

        case [head, *tail]:
            if isinstance(head, Symbol):
                # --- Special forms handling ---
                handler = SPECIAL_FORMS.get(head.name)
                if handler is not None:
                    return handler(tail, env, evaluate)
                try:
                    bound = env.lookup(head)
                except KappaUnboundSymbol:
                    raise KappaUnboundSymbol("Could not resolve symbol") from None
                fn = evaluate(bound, env.copy())
                if isinstance(fn, Lambda):
                    return evaluate([fn, *tail], env.copy())
                raise KappaInvokeError("Could not invoke")

            if isinstance(head, Lambda):
                return apply_lambda(head, tail, env, evaluate)

            # Evaluate head if it is a list and re-dispatch with its value.
            if isinstance(head, list) and not isinstance(head, Vector):
                head_value = evaluate(head, env)
                if isinstance(head_value, list) and not isinstance(head_value, Vector):
                    raise KappaInvokeError("Could not invoke")
                return evaluate([head_value, *tail], env)

            raise KappaInvokeError("Could not invoke")

        case Symbol():
            try:
                bound = env.lookup(expr)
            except KappaUnboundSymbol:
                raise KappaUnboundSymbol("Could not resolve symbol") from None
            # Bound values are evaluated again, so a name bound to an
            # unevaluated form (a call argument) resolves through it.
            return evaluate(bound, env)

    # --- Atoms return as-is ---
    return expr
