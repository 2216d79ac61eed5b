"""Application engine for halftau.

Centralizes what happens once the head of a call form has been evaluated:
- Function: evaluate arguments eagerly, check arity, bind parameters in a
  copy of the call-site scope, evaluate the body there.
- Macro: substitute the raw arguments into the body and evaluate the
  expansion in the caller's scope.
- Builtin: exhaustive dispatch on the tag.
Anything else is not callable.
"""

from __future__ import annotations

from halftau import EvaluatorFn, SExpression, LispValue
from halftau.errors import ArityError, NotCallableError
from halftau.evaluation.dispatch import call_builtin
from halftau.evaluation.macro_expand import expand_1
from halftau.printer import format_value
from halftau.runtime import Runtime
from halftau.types.builtin import Builtin
from halftau.types.callables import Function, Macro
from halftau.types.scope import Scope
from halftau.types.tail_call import TailCall


def apply_function(
    fn: Function,
    args: list[LispValue],
    runtime: Runtime,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """Apply a user Function to already-evaluated arguments.

    Too few or too many arguments raise ArityError; nothing is padded or
    dropped. The body is returned as a TailCall for the evaluator to run.
    """
    if len(args) != fn.arity:
        raise ArityError(
            f"function expects {fn.arity} parameters, received {len(args)}"
        )
    return TailCall(fn.body, scope.extend(fn.params, args))


def apply(
    head: LispValue,
    tail: list[SExpression],
    runtime: Runtime,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    """Apply an evaluated call head to the raw operand syntax in `tail`.

    Function bodies and macro expansions come back as TailCalls; only
    `evaluate` consumes them."""
    # Macro before Function: Macro is a Function subclass
    if isinstance(head, Macro):
        return TailCall(expand_1(head, tail), scope)
    if isinstance(head, Function):
        args = [evaluate_fn(arg, runtime, scope) for arg in tail]
        return apply_function(head, args, runtime, scope, evaluate_fn)
    if isinstance(head, Builtin):
        return call_builtin(head, tail, runtime, scope, evaluate_fn)
    raise NotCallableError(f"attempt to call a non-function: {format_value(head)}")
