from halftau import EvaluatorFn
from halftau import SExpression, LispValue
from halftau.errors import ArityError, TypeMismatchError
from halftau.runtime import Runtime
from halftau.types.scope import Scope
from halftau.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    runtime: Runtime,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    The value is evaluated in the current scope but always bound in the root
    scope, however deeply the def is nested. Returns the bound value.
    """
    if len(tail) != 2:
        raise ArityError(f"expected 2 arguments to def; {len(tail)} found")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise TypeMismatchError("first parameter to def must be a symbol")
    value = evaluate_fn(val_expr, runtime, scope)
    return runtime.define(name, value)
