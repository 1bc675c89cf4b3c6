"""Canonical textual rendering of Kappa values.

Integers, floats and booleans print as their literal form, strings are
wrapped in double quotes, symbols print bare, Nil prints `nil` and vectors
print as `[a, b, c]`. Lists and lambdas get a debug rendering that is not
meant to be read back.
"""

from __future__ import annotations

from io import StringIO

from kappa import LispValue
from kappa.types.error import Error
from kappa.types.lambda_fn import Lambda
from kappa.types.nil import NilType
from kappa.types.symbol import Symbol
from kappa.types.vector import Vector


def to_string(value: LispValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # repr keeps the decimal point, so the text reads back as a Float
        return repr(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (Symbol, Error, Lambda)):
        return str(value)
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, Vector):
        return "[" + ", ".join(to_string(v) for v in value) + "]"
    if isinstance(value, list):
        with StringIO() as buffer:
            buffer.write("(List")
            for v in value:
                buffer.write(" ")
                buffer.write(to_string(v))
            buffer.write(")")
            return buffer.getvalue()
    return repr(value)
