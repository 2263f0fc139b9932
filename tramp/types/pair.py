"""Cons cells.

Lists are right-nested chains of Pair terminated by Empty. The reader only
builds chains bottom-up from a finite token stream and no primitive mutates a
pair, so chains are always finite and acyclic.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from tramp import LispValue
from tramp.types.empty import Empty
from tramp.types.errors import MalformedForm


class Pair:
    """A two-slot node (car, cdr)."""

    __slots__ = ("car", "cdr")
    __match_args__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Empty):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        """Yield the elements of the chain; an improper tail is not yielded."""
        node = self
        while isinstance(node, Pair):
            yield node.car
            node = node.cdr

    def __eq__(self, other: object) -> bool:
        # Spines are walked in place; nested cars wait on an explicit stack.
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            while isinstance(a, Pair):
                if not isinstance(b, Pair):
                    return False
                if isinstance(a.car, Pair):
                    pending.append((a.car, b.car))
                # Compare types first so #t never equals 1.
                elif type(a.car) is not type(b.car) or a.car != b.car:
                    return False
                a, b = a.cdr, b.cdr
            if type(a) is not type(b) or a != b:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from tramp.printer import to_string
        return to_string(self)


def from_iterable(items: Iterable[LispValue], tail: LispValue = Empty) -> LispValue:
    """Chain `items` into pairs in order, ending in `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_list(chain: LispValue, what: str = "list") -> list[LispValue]:
    """Return the elements of a proper list, raising MalformedForm otherwise."""
    items = []
    node = chain
    while isinstance(node, Pair):
        items.append(node.car)
        node = node.cdr
    if node is not Empty:
        raise MalformedForm(f"Expected a proper {what}")
    return items
