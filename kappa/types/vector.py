from __future__ import annotations


class Vector(list):
    """Data sequence written `[a b c]`.

    Shares list storage with the List variant (a plain Python list) but is a
    distinct type: a Vector is never applied as a call, and it only compares
    equal to another Vector.
    """

    __slots__ = ()

    def __eq__(self, other) -> bool:
        return isinstance(other, Vector) and list.__eq__(self, other)

    def __ne__(self, other) -> bool:
        return not self == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({list.__repr__(self)})"
