"""Lambda application.

Arguments arrive unevaluated and are bound as-is to the parameter names in a
copy of the caller's environment; they are evaluated when the body refers to
them. The body therefore also sees the caller's bindings for any free names.
"""

from kappa import SExpression, LispValue, EvaluatorFn
from kappa.errors import KappaArityError
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda


def apply_lambda(
    fn: Lambda,
    args: list[SExpression],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind `args` positionally to `fn.params` and evaluate the body.

    Too few arguments raise KappaArityError; extra arguments are ignored.
    """
    if len(args) < len(fn.params):
        raise KappaArityError(
            f"Too few arguments to function: expected {len(fn.params)}, got {len(args)}"
        )
    new_env = caller_env.copy()
    for name, arg in zip(fn.params, args):
        new_env.define(name, arg)
    return evaluate_fn(fn.body, new_env)
