from __future__ import annotations


class Error:
    """A failure produced by evaluation.

    Errors are ordinary values: they are returned, printed, and can flow into
    further forms (which typically produce a new Error of their own).
    """

    __slots__ = ("message",)

    def __init__(self, message: str):
        object.__setattr__(self, "message", message)

    def __setattr__(self, name, value):
        raise AttributeError("Error values are immutable")

    def __eq__(self, other) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(("Error", self.message))

    def __repr__(self) -> str:
        return f"Error({self.message!r})"

    def __str__(self) -> str:
        return f"Error: {self.message}"
