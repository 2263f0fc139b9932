from __future__ import annotations
import math
import operator
from typing import Any, Callable
from tramp.types.empty import Empty
from tramp.types.environment import Environment
from tramp.types.errors import WrongType
from tramp.types.pair import Pair
from tramp.types.procedure import Primitive
from tramp.types.symbol import Symbol

# -------------------------------
# Helpers
# -------------------------------
def _numbers(name: str, expr: list[Any]) -> list[float]:
    for x in expr:
        if not isinstance(x, float):
            from tramp.printer import to_string
            raise WrongType(f"{name} expects numbers, got {to_string(x)}")
    return expr

def _numeric(name: str, op: Callable[[float, float], Any]):
    def primitive(env: Environment, expr: list[Any]) -> Any:
        a, b = _numbers(name, expr)
        return op(a, b)
    primitive.__name__ = name
    return primitive

# -------------------------------
# Arithmetic
# -------------------------------
def div(env: Environment, expr: list[Any]) -> float:
    a, b = _numbers("/", expr)
    if b == 0:
        # IEEE-754 semantics instead of ZeroDivisionError
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b

add = _numeric("+", operator.add)
sub = _numeric("-", operator.sub)
mul = _numeric("*", operator.mul)

# -------------------------------
# Comparison
# -------------------------------
equals = _numeric("=", operator.eq)
lt = _numeric("<", operator.lt)
gt = _numeric(">", operator.gt)
lte = _numeric("<=", operator.le)
gte = _numeric(">=", operator.ge)

# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(env: Environment, expr: list[Any]) -> bool:
    return expr[0] is False

# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, expr: list[Any]) -> Pair:
    head, tail = expr
    return Pair(head, tail)

def car(env: Environment, expr: list[Any]) -> Any:
    if not isinstance(expr[0], Pair):
        raise WrongType("car expects a pair")
    return expr[0].car

def cdr(env: Environment, expr: list[Any]) -> Any:
    if not isinstance(expr[0], Pair):
        raise WrongType("cdr expects a pair")
    return expr[0].cdr

def is_null(env: Environment, expr: list[Any]) -> bool:
    return expr[0] is Empty

def is_pair(env: Environment, expr: list[Any]) -> bool:
    return isinstance(expr[0], Pair)

# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: list[tuple[str, Callable[[Environment, list[Any]], Any], int]] = [
    ('+', add, 2),
    ('-', sub, 2),
    ('*', mul, 2),
    ('/', div, 2),
    ('=', equals, 2),
    ('<', lt, 2),
    ('>', gt, 2),
    ('<=', lte, 2),
    ('>=', gte, 2),
    ('not', logical_not, 1),
    ('cons', cons, 2),
    ('car', car, 1),
    ('cdr', cdr, 1),
    ('null?', is_null, 1),
    ('pair?', is_pair, 1),
]

def register(env: Environment):
    env.update({
        Symbol(name): Primitive(name, fn, arity)
        for name, fn, arity in PRIMITIVES
    })

def global_environment() -> Environment:
    """Create a top-level environment seeded with the primitives."""
    env = Environment()
    register(env)
    return env
