from halftau import SExpression
from halftau.types.scope import Scope


class TailCall:
    """An expression left to evaluate in tail position.

    Returned by application and `if` instead of recursing; the evaluator's
    loop picks it up, so tail calls do not grow the Python stack.
    """

    __slots__ = ("expr", "scope")

    def __init__(self, expr: SExpression, scope: Scope):
        self.expr = expr
        self.scope = scope
