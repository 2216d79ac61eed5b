# Core type aliases for halftau's data model.
# Parsed syntax and runtime values share one representation: plain Python
# int, float, bool, str and list, plus the small classes in halftau.types
# (Symbol, Vector, Function, Macro, Builtin, Nil).
#
# Naming guidance:
# - SExpression: use in reader/parser/macro code for syntactic forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue)
SExpression = LispValue

# Evaluator function type: passed into special forms so they can evaluate
# their operands without importing the evaluator module.
EvaluatorFn = Callable[..., LispValue]
