from halftau.types.symbol import Symbol
from halftau.types.nil import Nil, NilType
from halftau.types.vector import Vector
from halftau.types.builtin import Builtin
from halftau.types.callables import Function, Macro
from halftau.types.scope import Scope

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Vector",
    "Builtin",
    "Function",
    "Macro",
    "Scope",
]
