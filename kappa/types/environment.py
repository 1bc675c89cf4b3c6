"""Runtime environment for Kappa.

The Environment stores bindings of names to Lisp values. There is no chain of
outer frames: a nested scope (let, for, a Lambda call) starts from a full
`copy()` of the current environment, so bindings made in the child can never
leak back into the parent.
"""

from __future__ import annotations

from kappa import LispValue
from kappa.errors import KappaUnboundSymbol, KappaTypeError
from kappa.types.symbol import Symbol


def _key(name: Symbol | str) -> str:
    if isinstance(name, Symbol):
        return name.name
    if isinstance(name, str):
        return name
    raise KappaTypeError(f"Cannot bind {name!r} as a name")


class Environment:
    """Flat mapping from names to Lisp values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, LispValue] = {}

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this environment, replacing any old binding."""
        self.vars[_key(name)] = value

    def lookup(self, name: Symbol | str) -> LispValue:
        """Look up the value bound to `name`.

        Raises KappaUnboundSymbol if not found.
        """
        key = _key(name)
        try:
            return self.vars[key]
        except KeyError:
            raise KappaUnboundSymbol(f"Cannot lookup unbound symbol {key}") from None

    def copy(self) -> Environment:
        """Independent snapshot: later defines on either side are not shared."""
        env = Environment()
        env.vars = dict(self.vars)
        return env

    def __contains__(self, name: object) -> bool:
        if isinstance(name, (Symbol, str)):
            return _key(name) in self.vars
        return False

    def __len__(self) -> int:
        return len(self.vars)
