"""Name-to-value scopes for halftau.

A Scope is a flat mapping from Symbols to values. There is no chain of
parent frames: a function application copies the caller's local bindings
into a new Scope and adds its parameters. Every Scope other than the root
also holds a reference to the root scope, which is consulted when a name is
not bound locally. The root scope is the only one `def` writes to.
"""

from __future__ import annotations

from typing import Iterable, Optional

from halftau import LispValue
from halftau.errors import UnboundSymbolError
from halftau.types.symbol import Symbol


class Scope:
    """Flat mapping from Symbols to Lisp values, layered over the root."""

    __slots__ = ("vars", "root")

    def __init__(
        self,
        bindings: Optional[dict[Symbol, LispValue]] = None,
        root: Optional[Scope] = None,
    ):
        self.vars: dict[Symbol, LispValue] = dict(bindings) if bindings else {}
        # None marks this scope as the root
        self.root: Scope | None = root

    def root_scope(self) -> Scope:
        return self if self.root is None else self.root

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame."""
        if not isinstance(name, Symbol):
            raise TypeError(f"Cannot bind non-symbol {name!r}")
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def lookup(self, name: Symbol) -> LispValue:
        """Look up `name` locally, then in the root scope.

        Raises UnboundSymbolError if not found.
        """
        if name in self.vars:
            return self.vars[name]
        if self.root is not None and name in self.root.vars:
            return self.root.vars[name]
        raise UnboundSymbolError(f"undefined variable {name}")

    def __contains__(self, name: Symbol) -> bool:
        if name in self.vars:
            return True
        return self.root is not None and name in self.root.vars

    def extend(self, names: Iterable[Symbol], values: Iterable[LispValue]) -> Scope:
        """Return a new scope: this scope's local bindings plus `names` bound
        to `values`. The root's bindings are not copied, they stay live."""
        bindings = {} if self.root is None else dict(self.vars)
        bindings.update(zip(names, values))
        return Scope(bindings, self.root_scope())

    def __repr__(self) -> str:
        kind = "root" if self.root is None else "local"
        return f"<Scope {kind} {len(self.vars)} bindings>"
