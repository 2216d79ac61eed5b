"""Error hierarchy for halftau.

Three independent kinds are reported to the user: LexError, ParseError and
EvalError. Each carries a human-readable message and, where known, the
1-based source line.
"""

from __future__ import annotations


class HalftauError(Exception):
    """ Base class for all halftau errors"""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return self.message


class LexError(HalftauError):
    """ Raised when source text cannot be tokenized"""


class ParseError(HalftauError):
    """ Raised when a token sequence is not a well-formed expression"""


class EvalError(HalftauError):
    """ Raised when evaluation of a form fails"""


class UnboundSymbolError(EvalError):
    """ Raised when a symbol is used before it is bound"""


class ArityError(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class TypeMismatchError(EvalError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""


class IndexOutOfRangeError(EvalError):
    """ Raised when nth is given an index outside the list"""


class NotCallableError(EvalError):
    """ Raised when the head of a call form is not a function, macro or builtin"""
