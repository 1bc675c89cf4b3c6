from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.printer import to_string
from kappa.types.environment import Environment
from kappa.types.nil import Nil


def println_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # Values are printed in their display form, so strings keep their quotes
    print(" ".join(to_string(evaluate_fn(e, env)) for e in tail))
    return Nil
