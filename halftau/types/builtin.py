"""The closed set of primitive tags.

Every member must have a handler in `halftau.evaluation.dispatch.HANDLERS`;
that module checks coverage at import time, so adding a primitive means
adding both a member here and a handler there.
"""

from __future__ import annotations

from enum import Enum


class Builtin(Enum):
    DEF = "def"
    FN = "fn"
    MACRO = "macro"
    QUOTE = "quote"
    IF = "if"
    CAR = "car"
    CDR = "cdr"
    CONS = "cons"
    EMPTY = "empty?"
    NTH = "nth"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQUALS = "="
    PRINT = "print"
    PRINTLN = "println"

    @property
    def lisp_name(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"<builtin {self.value}>"
