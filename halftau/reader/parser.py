"""
  Parser: tokens -> expressions

Recursive descent with a single token of lookahead. Emits Python values
directly rather than cons cells:

    - lists      -> Python list
    - vectors    -> Vector
    - symbols    -> Symbol
    - strings    -> str
    - numbers    -> int / float
    - 'expr      -> [Symbol("quote"), expr]

Nothing is resolved or expanded here; the output is a pure syntax tree.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from halftau import SExpression
from halftau.errors import ParseError
from halftau.reader.lexer import Token, lex
from halftau.types.symbol import Symbol
from halftau.types.vector import Vector

QUOTE = Symbol("quote")

CLOSERS = {"rparen": ")", "rbracket": "]"}


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens = list(tokens)
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.index += 1
        return tok

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise ParseError("unexpected end of input")

        kind, text, line = tok

        if kind == "lparen":
            return self._parse_sequence("rparen", "list", line)

        if kind == "lbracket":
            return Vector(self._parse_sequence("rbracket", "vector", line))

        if kind == "quote":
            return [QUOTE, self.parse_expr()]

        if kind == "int":
            try:
                return int(text)
            except ValueError:
                raise ParseError(f"bad integer literal on line {line}: {text!r}", line)

        if kind == "double":
            try:
                return float(text)
            except ValueError:
                raise ParseError(f"bad double literal on line {line}: {text!r}", line)

        if kind == "string":
            return text

        if kind == "symbol":
            return Symbol(text)

        if kind in CLOSERS:
            raise ParseError(
                f"unexpected closing delimiter {CLOSERS[kind]!r} on line {line}", line
            )

        raise ParseError(f"unknown token {kind} {text!r} on line {line}", line)

    def _parse_sequence(self, closer: str, what: str, start_line: int) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise ParseError(
                    f"unterminated {what} starting on line {start_line}", start_line
                )
            if tok.kind == closer:
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> list[SExpression]:
    """Parse every top-level expression in `tokens`."""
    return list(TokenStream(tokens).parse_all())


def read(source: str) -> list[SExpression]:
    """Lex and parse `source` in one step."""
    return parse(lex(source))
