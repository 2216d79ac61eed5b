"""Exhaustive dispatch table for built-in tags.

Special forms get their raw operand syntax; primitives get the operands
evaluated left to right in the caller's scope. Every Builtin member must
appear in exactly one of the two tables.
"""

from __future__ import annotations

from halftau import EvaluatorFn, SExpression, LispValue
from halftau.builtin.env_builtin import PRIMITIVES
from halftau.evaluation.special_forms import SPECIAL_FORMS
from halftau.runtime import Runtime
from halftau.types.builtin import Builtin
from halftau.types.scope import Scope

_missing = set(Builtin) - set(SPECIAL_FORMS) - set(PRIMITIVES)
_overlap = set(SPECIAL_FORMS) & set(PRIMITIVES)
if _missing or _overlap:
    raise RuntimeError(
        f"builtin dispatch is not exhaustive: missing={sorted(t.value for t in _missing)} "
        f"duplicated={sorted(t.value for t in _overlap)}"
    )


def call_builtin(
    tag: Builtin,
    tail: list[SExpression],
    runtime: Runtime,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    form = SPECIAL_FORMS.get(tag)
    if form is not None:
        return form(tail, runtime, scope, evaluate_fn)
    args = [evaluate_fn(arg, runtime, scope) for arg in tail]
    return PRIMITIVES[tag](runtime, args)
