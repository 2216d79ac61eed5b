"""User-defined callables: Function (from `fn`) and Macro (from `macro`)."""

from __future__ import annotations

from halftau import SExpression
from halftau.types.symbol import Symbol


class Function:
    """A first-class function with positional parameters and a single body.

    No defining scope is captured: the body is evaluated against a copy of
    the caller's scope extended with the parameter bindings.
    """

    __slots__ = ("params", "body")
    kind = "fn"

    def __init__(self, params: list[Symbol], body: SExpression):
        self.params: list[Symbol] = list(params)
        self.body: SExpression = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is type(self)
            and self.params == other.params
            and self.body == other.body
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"<{self.kind} [{' '.join(str(p) for p in self.params)}]>"


class Macro(Function):
    """Same shape as Function, but applied to unevaluated argument syntax by
    substituting parameter symbols in the body."""

    __slots__ = ()
    kind = "macro"
