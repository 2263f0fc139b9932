"""
  Reader: lexer and recursive-descent parser

- Surface syntax: parenthesised lists, decimal numbers, #t/#f, symbols, and
  the ' abbreviation for (quote ...)
- Emits the runtime representation directly:

    - lists -> Pair chains ending in Empty ("()" reads as Empty)
    - numbers -> float
    - #t / #f -> True / False
    - symbols -> Symbol
    - 'expr -> (quote expr)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from tramp import SExpression
from tramp.types.empty import Empty
from tramp.types.pair import Pair, from_iterable
from tramp.types.symbol import Symbol
from tramp.types.errors import (
    UnexpectedEndOfInput,
    UnmatchedParenthesis,
    UnexpectedClosingParenthesis,
    TrailingInput,
)


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # ' at the start of a token
    r"|(?P<atom>[^\s()]+)"  # everything else up to whitespace or a paren
    r")"
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

QUOTE = Symbol("quote")

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#f": False,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples.

    Never raises: every non-whitespace character starts one of the token kinds.
    """
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only whitespace remains
            break
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                break
        pos = m.end()


def parse_atom(token: str) -> SExpression:
    """Classify an atom token as a boolean, a number or a symbol."""
    if token in BOOLEANS:
        return BOOLEANS[token]
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    """A token sequence with a single cursor."""

    def __init__(self, tokens: Iterable[tuple[str, str]]):
        self.tokens: list[tuple[str, str]] = list(tokens)
        self.pos = 0

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None, None

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        tok = self.peek()
        if tok[0] is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise UnexpectedEndOfInput()

        if tok_type == "atom":
            return parse_atom(tok_val)

        # 'expr => (quote expr)
        if tok_type == "quote":
            return Pair(QUOTE, Pair(self.parse_expr(), Empty))

        if tok_type == "rparen":
            raise UnexpectedClosingParenthesis()

        # List
        items = []
        while True:
            next_type, _ = self.peek()
            if next_type == "rparen":
                self.advance()
                break
            if next_type is None:
                raise UnmatchedParenthesis()
            items.append(self.parse_expr())
        return from_iterable(items)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def read_one(source: str) -> SExpression:
    """Read exactly one expression from `source`.

    Raises a ReaderError if the text is empty, malformed, or holds more than
    one top-level expression.
    """
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if not stream.at_end():
        raise TrailingInput()
    return expr


def read_all(source: str) -> Iterator[SExpression]:
    """Lazily read every top-level expression in `source`, in order."""
    return TokenStream(lex(source)).parse_all()
