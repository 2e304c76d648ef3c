from __future__ import annotations
import sys


class Symbol:
    """A name in source code: a variable, a function name or an operator.

    Names are interned, so equal symbols share one string and compare cheaply.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise TypeError(f"Symbol name must be a non-empty str, got {name!r}")
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
