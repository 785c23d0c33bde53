"""
  Theta Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of Cons cells:

    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - #t / #f -> True / False
    - 'x -> [quote, x]
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional

from theta import SExpression
from theta.errors import ThetaIncompleteInput, ThetaSyntaxError
from theta.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: atoms
    r")",
    re.DOTALL,
)

QUOTE = Symbol("quote")

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#true": True,
    "#f": False,
    "#false": False,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            if source[pos] == "\"":
                raise ThetaIncompleteInput("Unterminated string", source[pos:pos + 20])
            raise ThetaSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}", source[pos:pos + 20])
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "lparen", "rparen", "string", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def parse_string(text: str) -> str:
    """Decode a double-quoted token; raw newlines are kept as newlines."""
    try:
        return ast.literal_eval(text.replace("\r", "\\r").replace("\n", "\\n"))
    except (SyntaxError, ValueError) as e:
        raise ThetaSyntaxError(f"Invalid string literal {text}", text) from e


def parse_atom(text: str) -> SExpression:
    if text in BOOLEANS:
        return BOOLEANS[text]
    # keeps inf/nan/infinity as symbols
    if not any(c.isdigit() for c in text):
        return Symbol(text)
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return Symbol(text)


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
        """Parse the next form, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "string":
            self.advance()
            return parse_string(tok_val)

        if tok_type == "quote":
            self.advance()
            if self.peek()[0] is None:
                raise ThetaIncompleteInput("Unexpected EOF after quote")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type == "rparen":
                    self.advance()
                    break
                if next_type is None:
                    raise ThetaIncompleteInput("Unmatched '('")
                items.append(self.parse_expr())
            return items

        if tok_type == "rparen":
            raise ThetaSyntaxError("Unexpected ')'")

        raise ThetaSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
