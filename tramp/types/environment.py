"""Runtime environment for tramp.

The Environment stores bindings of Symbols to evaluated values and supports
nested lexical scopes via an `outer` link. A frame only ever writes to its own
`vars`; outer frames are read, never modified, through a child.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from tramp import LispValue
from tramp.types.errors import InvalidSymbol, UndefinedVariable
from tramp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any existing binding.

        Raises InvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise InvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name` in the nearest enclosing frame.

        Raises UndefinedVariable if no frame in the chain binds it.
        """
        env: Optional[Environment] = self
        while env is not None:
            vars_ = env.vars
            if name in vars_:
                return vars_[name]
            env = env.outer
        raise UndefinedVariable(name)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            if not isinstance(k, Symbol):
                raise InvalidSymbol(f"Cannot define {k!r} as a symbol")
            self.vars[k] = v

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
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf: StringIO = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
