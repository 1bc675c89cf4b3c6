# Core type aliases for Kappa's data model.
# Code and data share one representation: plain Python values (int, float,
# str, bool, list) plus the small set of classes in kappa.types
# (Symbol, Vector, Lambda, Error, Nil).
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]
