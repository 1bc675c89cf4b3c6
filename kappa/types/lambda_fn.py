"""Lambda function representation for Kappa."""

from __future__ import annotations

from io import StringIO

from kappa import SExpression


class Lambda:
    """A user-defined callable: parameter names plus one body form.

    A Lambda does not capture the environment it was created in. Calls are
    evaluated against a copy of the caller's environment (dynamic scope).
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[str] | tuple[str, ...], body: SExpression):
        object.__setattr__(self, "params", tuple(params))
        object.__setattr__(self, "body", body)

    def __setattr__(self, name, value):
        raise AttributeError("Lambda values are immutable")

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and self.body == other.body
        )

    def __hash__(self) -> int:
        return hash(self.params)

    def __str__(self) -> str:
        from kappa.printer import to_string

        with StringIO() as buffer:
            buffer.write("(fn [")
            buffer.write(" ".join(self.params))
            buffer.write("] ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda(params={list(self.params)!r}, body={self.body!r})"
