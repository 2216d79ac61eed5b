"""Bracketed vector literal.

A Vector is data only: the evaluator returns it unchanged and never treats
it as a call form. It is kept as its own type (not a `list` subclass) so that
`isinstance(x, list)` checks in the evaluator and builtins never match it.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from halftau import LispValue


class Vector:
    __slots__ = ("items",)

    def __init__(self, items: Iterable[LispValue] = ()):
        self.items: list[LispValue] = list(items)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Vector) and self.items == other.items

    __hash__ = None  # mutable container

    def __repr__(self) -> str:
        return f"Vector({self.items!r})"
