from halftau import EvaluatorFn
from halftau import SExpression, LispValue
from halftau.errors import ArityError, TypeMismatchError
from halftau.printer import format_value
from halftau.types.callables import Function, Macro
from halftau.runtime import Runtime
from halftau.types.scope import Scope
from halftau.types.symbol import Symbol
from halftau.types.vector import Vector


def _param_names(form_name: str, params: SExpression) -> list[Symbol]:
    if not isinstance(params, Vector):
        raise TypeMismatchError(
            f"{form_name} expects a vector of parameter names, got {format_value(params)}"
        )
    for p in params:
        if not isinstance(p, Symbol):
            raise TypeMismatchError(
                f"{form_name} parameter names must be symbols, got {format_value(p)}"
            )
    return list(params)


def lambda_form(
    tail: list[SExpression],
    runtime: Runtime,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(fn [params...] body): neither the parameters nor the body are evaluated."""
    if len(tail) != 2:
        raise ArityError(f"expected 2 arguments to fn; {len(tail)} found")
    params, body = tail
    return Function(_param_names("fn", params), body)


def macro_form(
    tail: list[SExpression],
    runtime: Runtime,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(macro [params...] body)"""
    if len(tail) != 2:
        raise ArityError(f"expected 2 arguments to macro; {len(tail)} found")
    params, body = tail
    return Macro(_param_names("macro", params), body)
