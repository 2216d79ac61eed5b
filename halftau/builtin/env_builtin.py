"""Built-in functions for the halftau runtime.

This module defines the primitives that receive already-evaluated arguments
(list processing, arithmetic, equality, printing) and the registration
helper that binds every built-in tag, plus the `true`/`false`/`nil`
constants, into a root scope.
"""
from __future__ import annotations

from typing import Callable

from halftau import LispValue
from halftau.errors import (
    ArityError,
    EvalError,
    IndexOutOfRangeError,
    TypeMismatchError,
)
from halftau.printer import format_value
from halftau.runtime import Runtime
from halftau.types.builtin import Builtin
from halftau.types.nil import Nil
from halftau.types.scope import Scope
from halftau.types.symbol import Symbol
from halftau.types.vector import Vector

Primitive = Callable[[Runtime, list[LispValue]], LispValue]


def _check_arity(name: str, args: list[LispValue], expected: int) -> None:
    if len(args) != expected:
        raise ArityError(
            f"{name} expects {expected} argument{'s' if expected != 1 else ''}; "
            f"received {len(args)}"
        )


def _expect_list(name: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise TypeMismatchError(f"{name} expects a list, got {format_value(value)}")
    return value


def is_number(value: LispValue) -> bool:
    # bool is an int subclass but is not numeric here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# -------------------------------
# List operations
# -------------------------------
def car(runtime: Runtime, expr: list[LispValue]) -> LispValue:
    """First element of a non-empty list."""
    _check_arity("car", expr, 1)
    lst = _expect_list("car", expr[0])
    if not lst:
        raise EvalError("car of empty list")
    return lst[0]


def cdr(runtime: Runtime, expr: list[LispValue]) -> list[LispValue]:
    """All but the first element; the cdr of () is ()."""
    _check_arity("cdr", expr, 1)
    return _expect_list("cdr", expr[0])[1:]


def cons(runtime: Runtime, expr: list[LispValue]) -> list[LispValue]:
    _check_arity("cons", expr, 2)
    head, tail = expr
    return [head] + _expect_list("cons", tail)


def is_empty(runtime: Runtime, expr: list[LispValue]) -> bool:
    _check_arity("empty?", expr, 1)
    return len(_expect_list("empty?", expr[0])) == 0


def nth(runtime: Runtime, expr: list[LispValue]) -> LispValue:
    """(nth lst i) => 0-based element i of lst."""
    _check_arity("nth", expr, 2)
    lst = _expect_list("nth", expr[0])
    index = expr[1]
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeMismatchError(f"nth expects an integer index, got {format_value(index)}")
    if not 0 <= index < len(lst):
        raise IndexOutOfRangeError(
            f"index {index} out of range for list of length {len(lst)}"
        )
    return lst[index]


# -------------------------------
# Arithmetic
# -------------------------------
def _numeric_args(name: str, expr: list[LispValue]) -> list[int | float]:
    if not expr:
        raise ArityError(f"{name} requires at least 1 argument")
    for x in expr:
        if not is_number(x):
            raise TypeMismatchError(
                f"cannot apply {name} to non-number {format_value(x)}"
            )
    return expr


def add(runtime: Runtime, expr: list[LispValue]) -> int | float:
    """Left fold of +. Stays int until a float operand is seen."""
    nums = _numeric_args("+", expr)
    result = nums[0]
    for x in nums[1:]:
        result += x
    return result


def sub(runtime: Runtime, expr: list[LispValue]) -> int | float:
    """Subtract every later argument from the first. (- x) is x."""
    nums = _numeric_args("-", expr)
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul(runtime: Runtime, expr: list[LispValue]) -> int | float:
    nums = _numeric_args("*", expr)
    result = nums[0]
    for x in nums[1:]:
        result *= x
    return result


def div(runtime: Runtime, expr: list[LispValue]) -> float:
    """Divide left-to-right. The result is always a float."""
    nums = _numeric_args("/", expr)
    result = float(nums[0])
    for x in nums[1:]:
        if x == 0:
            raise EvalError("division by zero")
        result /= x
    return result


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality. Numbers compare by value, bools only equal bools,
    lists and vectors never equal each other."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Vector) and isinstance(b, Vector):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def equals(runtime: Runtime, expr: list[LispValue]) -> bool:
    if not expr:
        raise ArityError("= requires at least 1 argument")
    first = expr[0]
    return all(is_equal(first, other) for other in expr[1:])


# -------------------------------
# Output
# -------------------------------
def print_(runtime: Runtime, expr: list[LispValue]) -> LispValue:
    print(" ".join(format_value(x) for x in expr), end="", flush=True)
    return Nil


def println(runtime: Runtime, expr: list[LispValue]) -> LispValue:
    print(" ".join(format_value(x) for x in expr))
    return Nil


PRIMITIVES: dict[Builtin, Primitive] = {
    Builtin.CAR: car,
    Builtin.CDR: cdr,
    Builtin.CONS: cons,
    Builtin.EMPTY: is_empty,
    Builtin.NTH: nth,
    Builtin.ADD: add,
    Builtin.SUB: sub,
    Builtin.MUL: mul,
    Builtin.DIV: div,
    Builtin.EQUALS: equals,
    Builtin.PRINT: print_,
    Builtin.PRINTLN: println,
}

CONSTANTS: dict[Symbol, LispValue] = {
    Symbol("true"): True,
    Symbol("false"): False,
    Symbol("nil"): Nil,
}


# -------------------------------
# Registration
# -------------------------------
def register(scope: Scope) -> None:
    """Bind every built-in under its Lisp name, plus the constants."""
    scope.update({Symbol(tag.lisp_name): tag for tag in Builtin})
    scope.update(CONSTANTS)
