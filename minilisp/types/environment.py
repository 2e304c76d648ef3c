"""Runtime environment for minilisp.

An Environment is one frame: its own Symbol -> value bindings plus an
optional `outer` link to the parent frame. Frames only ever point at their
parent, so frames form a tree and plain reference counting reclaims them.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from minilisp import LispValue
from minilisp.errors import SymbolNotFound
from minilisp.types.symbol import Symbol


def _as_symbol(name: Symbol | str) -> Symbol:
    return name if isinstance(name, Symbol) else Symbol(name)


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any existing binding.

        Ancestor frames are never touched; a binding of the same name further
        up the chain is shadowed, not replaced.
        """
        self.vars[_as_symbol(name)] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        name = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def resolve(self, name: Symbol | str) -> LispValue:
        """Return the value bound to `name` in the nearest frame that binds it.

        Raises SymbolNotFound once the root frame has been searched.
        """
        name = _as_symbol(name)
        env = self.find(name)
        if env is None:
            raise SymbolNotFound(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol | str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def names(self) -> Iterator[Symbol]:
        """Names bound in this frame only, in definition order."""
        return iter(self.vars)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def depth(self) -> int:
        """Number of ancestors above this frame (0 for a root)."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
