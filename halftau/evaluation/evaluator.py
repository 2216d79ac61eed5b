"""Core evaluator and trampoline for the halftau interpreter.

A recursive tree walk: symbols are looked up, non-empty lists are calls,
everything else (numbers, strings, booleans, nil, vectors, functions,
macros, builtins) evaluates to itself. Application and `if` hand their
tail expression back as a TailCall, which the loop below continues with
instead of recursing.
"""

from __future__ import annotations

from halftau import SExpression, LispValue
from halftau.errors import EvalError
from halftau.evaluation.apply import apply
from halftau.runtime import Runtime
from halftau.types.scope import Scope
from halftau.types.symbol import Symbol
from halftau.types.tail_call import TailCall


def evaluate(
    expr: SExpression, runtime: Runtime, scope: Scope | None = None
) -> LispValue:
    """Evaluate `expr` in `scope` (the runtime's root scope by default)."""
    if scope is None:
        scope = runtime.global_scope()

    while True:
        match expr:
            case Symbol():
                return scope.lookup(expr)
            case list() if not expr:
                raise EvalError("attempt to evaluate empty list as function")
            case [head, *tail_args]:
                fn = evaluate(head, runtime, scope)
                result = apply(fn, tail_args, runtime, scope, evaluate)
                if isinstance(result, TailCall):
                    expr, scope = result.expr, result.scope
                    continue
                return result

        # --- Atoms and vectors return as-is ---
        return expr
