"""Procedure values: host primitives and user closures."""

from __future__ import annotations

from typing import Callable

from tramp import SExpression, LispValue
from tramp.types.environment import Environment
from tramp.types.symbol import Symbol

# Primitive implementation: (calling environment, evaluated arguments) -> value
PrimitiveFn = Callable[[Environment, list[LispValue]], LispValue]


class Procedure:
    """Base class for everything that can appear in operator position."""

    __slots__ = ()


class Primitive(Procedure):
    """A procedure implemented in Python with a fixed number of arguments."""

    __slots__ = ("name", "fn", "arity")

    def __init__(self, name: str, fn: PrimitiveFn, arity: int):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __repr__(self) -> str:
        return f"#<primitive {self.name}>"


class Closure(Procedure):
    """A lambda: ordered parameters, one body expression and the defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def name(self) -> str:
        return "lambda"

    @property
    def arity(self) -> int:
        return len(self.params)

    def bind(self, args: list[LispValue]) -> Environment:
        """Return a new frame under the captured env with params bound to `args`."""
        frame = Environment(outer=self.env)
        frame.update(dict(zip(self.params, args)))
        return frame

    def __repr__(self) -> str:
        return f"#<lambda ({' '.join(self.params)})>"
