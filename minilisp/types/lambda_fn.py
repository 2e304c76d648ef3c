"""Lambda representation for minilisp."""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from minilisp import SExpression
from minilisp.types.symbol import Symbol


class Lambda:
    """Parameters and body of a function; no environment is captured.

    Application parents the call frame to the caller's environment, so free
    symbols in the body are resolved where the function is called.
    """

    __slots__ = ("formals", "body")

    def __init__(self, formals: Iterable[Symbol], body: Iterable[SExpression]):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        # Body items of a single expression, e.g. (+ x 1) -> (+, x, 1)
        self.body: tuple[SExpression, ...] = tuple(body)

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        from minilisp.printer import to_lisp_string

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_lisp_string(list(self.body)))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
