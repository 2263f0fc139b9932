"""Render values back to source-like text."""

from __future__ import annotations

import math
from io import StringIO

from tramp import LispValue
from tramp.types.empty import Empty
from tramp.types.pair import Pair
from tramp.types.procedure import Procedure
from tramp.types.symbol import Symbol

# Integral floats at or above this magnitude are printed with repr()
_INTEGRAL_LIMIT = 1e16


def format_number(x: float) -> str:
    if math.isnan(x):
        return "+nan.0"
    if math.isinf(x):
        return "+inf.0" if x > 0 else "-inf.0"
    if x.is_integer() and abs(x) < _INTEGRAL_LIMIT:
        return str(int(x))
    return repr(x)


def _write(value: LispValue, buffer: StringIO) -> None:
    # Explicit work stack of (is_text, item): nesting depth never reaches the Python stack.
    stack: list[tuple[bool, LispValue]] = [(False, value)]
    while stack:
        is_text, item = stack.pop()
        if is_text:
            buffer.write(item)
            continue
        if not isinstance(item, Pair):
            buffer.write(to_string(item))
            continue
        pending: list[tuple[bool, LispValue]] = [(True, "(")]
        node = item
        while isinstance(node, Pair):
            if node is not item:
                pending.append((True, " "))
            pending.append((False, node.car))
            node = node.cdr
        if node is not Empty:
            pending.append((True, " . "))
            pending.append((False, node))
        pending.append((True, ")"))
        stack.extend(reversed(pending))


def to_string(value: LispValue) -> str:
    """Return the printed form of `value`."""
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if value is None:
        return "#<unspecified>"
    if value is Empty:
        return "()"
    if isinstance(value, Symbol):
        return str(value)
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, Procedure):
        return repr(value)
    if isinstance(value, Pair):
        with StringIO() as buffer:
            _write(value, buffer)
            return buffer.getvalue()
    return str(value)
