"""Runtime state shared by every evaluation call.

The Runtime owns the root scope. It is an explicit value threaded through
`evaluate`, never a module-level singleton; `define` is the only path that
mutates the root scope. Single-threaded use only: callers running several
evaluations at once must serialize access to a Runtime.
"""

from __future__ import annotations

from halftau import LispValue
from halftau.types.scope import Scope
from halftau.types.symbol import Symbol


class Runtime:
    __slots__ = ("root",)

    def __init__(self, register_builtins: bool = True):
        self.root = Scope()
        if register_builtins:
            # Local import: builtin registration pulls in the evaluator
            from halftau.builtin.env_builtin import register
            register(self.root)

    def define(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` in the root scope and return the bound value."""
        self.root.define(name, value)
        return value

    def lookup(self, name: Symbol) -> LispValue:
        return self.root.lookup(name)

    def global_scope(self) -> Scope:
        """The scope each top-level form starts from."""
        return self.root

    def __repr__(self) -> str:
        return f"<Runtime {len(self.root.vars)} globals>"
