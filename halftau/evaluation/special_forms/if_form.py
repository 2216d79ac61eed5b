from halftau import EvaluatorFn
from halftau import SExpression, LispValue
from halftau.errors import ArityError
from halftau.types.nil import Nil
from halftau.runtime import Runtime
from halftau.types.scope import Scope
from halftau.types.tail_call import TailCall


def is_truthy(value: LispValue) -> bool:
    # Only nil and false are falsy; 0, "" and () are all true
    return value is not Nil and value is not False


def if_form(
    tail: list[SExpression],
    runtime: Runtime,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) not in (2, 3):
        raise ArityError(f"if expects 2 or 3 arguments; {len(tail)} found")

    cond = evaluate_fn(tail[0], runtime, scope)

    if is_truthy(cond):
        return TailCall(tail[1], scope)
    elif len(tail) > 2:
        return TailCall(tail[2], scope)
    else:
        return False
