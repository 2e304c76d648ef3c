"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits the evaluator's own values; there is no separate syntax tree:

    - lists -> Python list
    - true / false -> bool
    - integers -> int (signed 64-bit range)
    - decimals with '.' or an exponent -> float ("1." and ".5" included)
    - everything else -> Symbol (so "+." and "-" are symbols)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from minilisp import SExpression
from minilisp.errors import ReaderError, IncompleteInput
from minilisp.types.numeric import INT64_MIN, INT64_MAX
from minilisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s();]+)"  # atoms
    r")",
)

INTEGER_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+(?=[eE]))(?:[eE][+-]?\d+)?")

BOOLEANS = {"true": True, "false": False}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace left
            break
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("lparen", "rparen", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def parse_atom(text: str) -> SExpression:
    """Classify a single atom token."""
    if text in BOOLEANS:
        return BOOLEANS[text]
    if INTEGER_RE.fullmatch(text):
        value = int(text)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ReaderError(f"Integer literal out of 64-bit range: {text}")
        return value
    if FLOAT_RE.fullmatch(text):
        return float(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
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

    def parse_expr(self) -> Optional[SExpression]:
        """Read one form, or return None at end of input."""
        try:
            return self._parse_expr()
        except RecursionError:
            raise ReaderError("Input nested too deeply") from None

    def _parse_expr(self) -> Optional[SExpression]:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "rparen":
            self.advance()
            raise ReaderError("Unexpected ')'")

        # List
        self.advance()
        items = []
        while True:
            next_type = self.peek()[0]
            if next_type == "rparen":
                self.advance()
                return items
            if next_type is None:
                raise IncompleteInput("Unmatched '('")
            items.append(self._parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
