from __future__ import annotations


class EmptyType:
    """The empty list. Truthy: only #f is false."""

    __slots__ = ()

    def __repr__(self): return "()"


Empty = EmptyType()
