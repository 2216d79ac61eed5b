"""
  Lexer for halftau source text.

Turns text into a list of Tokens. Whitespace and `;` comments produce no
tokens. Every token records the 1-based line it started on.

Token kinds:

    - lparen / rparen      ( )
    - lbracket / rbracket  [ ]
    - quote                '
    - symbol               identifiers, e.g. foo, empty?, +, don't
    - int / double         123, 3.14
    - string               "text" (text is stored already unescaped)
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from halftau.errors import LexError


class Token(NamedTuple):
    kind: str
    text: str
    line: int


PUNCTUATION: dict[str, str] = {
    "(": "lparen",
    ")": "rparen",
    "[": "lbracket",
    "]": "rbracket",
    "'": "quote",
}

IDENT_START_CHARS = frozenset("+-*/=?")
IDENT_EXTRA_CHARS = frozenset("-'?")

ESCAPES: dict[str, str] = {
    '"': '"',
    "n": "\n",
    "t": "\t",
}

WHITESPACE = frozenset(" \t\r")


def _is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch in IDENT_START_CHARS


def _is_ident_part(ch: str) -> bool:
    return ch.isalnum() or ch in IDENT_EXTRA_CHARS


def scan(source: str) -> Iterator[Token]:
    """Token generator. Raises LexError at the first bad character."""
    pos = 0
    n = len(source)
    line = 1

    while pos < n:
        ch = source[pos]

        if ch in WHITESPACE:
            pos += 1
            continue

        if ch == "\n":
            line += 1
            pos += 1
            continue

        # Line comment: drop everything through the next newline
        if ch == ";":
            end = source.find("\n", pos)
            if end == -1:
                break
            line += 1
            pos = end + 1
            continue

        if ch in PUNCTUATION:
            yield Token(PUNCTUATION[ch], ch, line)
            pos += 1
            continue

        if _is_ident_start(ch):
            start = pos
            pos += 1
            while pos < n and _is_ident_part(source[pos]):
                pos += 1
            yield Token("symbol", source[start:pos], line)
            continue

        if ch == '"':
            start_line = line
            pos += 1
            chars: list[str] = []
            while True:
                if pos >= n:
                    raise LexError(
                        f"unterminated string literal starting on line {start_line}",
                        start_line,
                    )
                c = source[pos]
                if c == '"':
                    pos += 1
                    break
                if c == "\\":
                    if pos + 1 >= n:
                        raise LexError(
                            f"unterminated string literal starting on line {start_line}",
                            start_line,
                        )
                    esc = source[pos + 1]
                    if esc not in ESCAPES:
                        raise LexError(
                            f"unknown escape sequence \\{esc} on line {line}", line
                        )
                    chars.append(ESCAPES[esc])
                    pos += 2
                    continue
                if c == "\n":
                    line += 1
                chars.append(c)
                pos += 1
            yield Token("string", "".join(chars), start_line)
            continue

        if ch.isdigit():
            start = pos
            is_double = False
            pos += 1
            while pos < n:
                c = source[pos]
                if c == ".":
                    if is_double:
                        raise LexError(
                            f"multiple decimal places in float literal on line {line}",
                            line,
                        )
                    is_double = True
                elif not c.isdigit():
                    break
                pos += 1
            yield Token("double" if is_double else "int", source[start:pos], line)
            continue

        raise LexError(f"unrecognized character {ch!r} on line {line}", line)


def lex(source: str) -> list[Token]:
    """Tokenize all of `source`; fails as a whole on the first LexError."""
    return list(scan(source))
