"""
  Kappa Reader: tokenizer and structural parser

- The whole input is read as one unit; there is no streaming parse.
- Emits plain Python values, the same representation the evaluator uses:

    - integers -> int (only when the digits fit a signed 64-bit range)
    - floats -> float
    - "text" -> str (every double quote stripped)
    - true / false -> bool
    - nil -> Nil
    - other atoms -> Symbol
    - ( ... ) -> list
    - [ ... ] -> Vector

  n.b. tokenizing is purely lexical: a string literal containing a space or
  a bracket is split like any other text.
"""

from __future__ import annotations

import re

from kappa import SExpression
from kappa.errors import KappaSyntaxError
from kappa.types.error import Error
from kappa.types.nil import Nil
from kappa.types.ops import INT_MIN, INT_MAX
from kappa.types.symbol import Symbol
from kappa.types.vector import Vector


BRACKET_RE = re.compile(r"([()\[\]])")
INT_RE = re.compile(r"[+-]?[0-9]+")

LITERALS = {
    "true": True,
    "false": False,
    "nil": Nil,
}


class _VectorMark:
    """Marks an open frame that was started by `[`."""

    __slots__ = ()

    def __repr__(self):
        return "<vector>"


VECTOR_MARK = _VectorMark()


def tokenize(source: str) -> list[str]:
    """Pad every bracket with spaces, then split on whitespace."""
    return BRACKET_RE.sub(r" \1 ", source).split()


def atom(token: str) -> SExpression:
    """Classify a single non-bracket token."""
    if INT_RE.fullmatch(token):
        n = int(token)
        if INT_MIN <= n <= INT_MAX:
            return n
    if "_" not in token:
        try:
            return float(token)
        except ValueError:
            pass
    if token in LITERALS:
        return LITERALS[token]
    if token.startswith('"') and token.endswith('"'):
        return token.replace('"', "")
    return Symbol(token)


def _close(stack: list[list], held: bool, vector: bool) -> bool:
    """Close the innermost open frame; returns the new `held` flag.

    `held` is True when the only frame left is a finished outermost form that
    is kept open so trailing forms can still be appended to it.
    """
    if not stack or (held and len(stack) == 1):
        raise KappaSyntaxError("Could not parse")
    top = stack.pop()
    is_vector = bool(top) and top[0] is VECTOR_MARK
    if is_vector != vector:
        raise KappaSyntaxError("Could not parse")
    if stack:
        stack[-1].append(Vector(top[1:]) if vector else top)
        return held
    stack.append(top)
    return True


def read(tokens: list[str]) -> SExpression:
    """Parse a token sequence into one form, raising KappaSyntaxError."""
    if not tokens:
        raise KappaSyntaxError("Unexpected end of input")

    stack: list[list] = []
    held = False
    for token in tokens:
        if token == "(":
            stack.append([])
        elif token == "[":
            stack.append([VECTOR_MARK])
        elif token == ")":
            held = _close(stack, held, vector=False)
        elif token == "]":
            held = _close(stack, held, vector=True)
        elif stack:
            stack[-1].append(atom(token))
        else:
            # a bare atom at the outermost level ends the read
            return atom(token)

    # the outermost form must have been closed
    if len(stack) != 1 or not held:
        raise KappaSyntaxError("Could not parse")
    top = stack.pop()
    if top and top[0] is VECTOR_MARK:
        return Vector(top[1:])
    return top


def parse(tokens: list[str]) -> SExpression:
    """Parse a token sequence into one form; failures come back as Error values."""
    try:
        return read(tokens)
    except KappaSyntaxError as e:
        return Error(str(e))
