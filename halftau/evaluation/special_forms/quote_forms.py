from halftau import EvaluatorFn, SExpression, LispValue
from halftau.errors import ArityError
from halftau.runtime import Runtime
from halftau.types.scope import Scope


def quote_form(
    tail: list[SExpression],
    runtime: Runtime,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise ArityError(f"quote accepts only one parameter; {len(tail)} found")
    return tail[0]
