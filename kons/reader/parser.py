"""
  Lisp Reader, Lexer and Parser

- Streaming lexer, recursive-descent parser over a token stream
- Emits kons values directly, so code and data share one representation:

    - integers -> int
    - other atoms -> Symbol
    - () -> Nil
    - lists -> chains of Pair ending in Nil
    - 'expr -> (quote expr)

Reading never touches an Environment.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from kons import SExpression
from kons.types.errors import KonsSyntaxError
from kons.types.symbol import Symbol
from kons.types.value import make_list


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<symbol>[^\s()\';"]+)'  # everything else up to a delimiter
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z")

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise KonsSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def parse_atom(token: str) -> SExpression:
    """An atom is an integer when the whole token is a signed integer, else a symbol."""
    if INTEGER_RE.match(token):
        return int(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()

        if tok_type is None:
            raise KonsSyntaxError("Unexpected end of input")

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise KonsSyntaxError("Expected an expression after quote")
            expr = self.parse_expr()
            return make_list([QUOTE, expr])

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise KonsSyntaxError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return make_list(items)
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise KonsSyntaxError("Unmatched ')'")

        raise KonsSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_all(text: str) -> list[SExpression]:
    """Parse every expression in `text`. Raises KonsSyntaxError before returning
    anything if any part of the text is malformed or nested past the stack."""
    try:
        return list(TokenStream(lex(text)).parse_all())
    except RecursionError as exc:
        raise KonsSyntaxError("Expression nesting too deep") from exc
