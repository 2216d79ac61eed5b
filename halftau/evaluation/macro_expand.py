"""Non-hygienic macro expansion by symbol substitution."""

from __future__ import annotations

from halftau import SExpression
from halftau.errors import ArityError
from halftau.types.callables import Macro
from halftau.types.symbol import Symbol
from halftau.types.vector import Vector


def substitute(form: SExpression, bindings: dict[Symbol, SExpression]) -> SExpression:
    """Return a copy of `form` with every bare Symbol found in `bindings`
    replaced by its binding. All replacements happen in one pass, so a
    replacement is never itself rewritten. `form` is not modified."""
    if isinstance(form, Symbol):
        return bindings.get(form, form)
    if isinstance(form, list):
        return [substitute(x, bindings) for x in form]
    if isinstance(form, Vector):
        return Vector(substitute(x, bindings) for x in form)
    return form


def expand_1(macro: Macro, args: list[SExpression]) -> SExpression:
    """Expand one macro call given its raw, unevaluated argument syntax."""
    if len(args) != macro.arity:
        raise ArityError(
            f"macro expects {macro.arity} parameters, received {len(args)}"
        )
    return substitute(macro.body, dict(zip(macro.params, args)))
