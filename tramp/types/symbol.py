from __future__ import annotations
import sys


class Symbol(str):
    """An interned name. Subclassing str keeps hashing and equality in C."""

    __slots__ = ()

    def __new__(cls, name: str) -> Symbol:
        return str.__new__(cls, sys.intern(name))

    def __repr__(self):
        return f"Symbol({str.__repr__(self)})"

    def __str__(self):
        return str.__str__(self)
