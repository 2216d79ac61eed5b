"""Display formatting for halftau values.

Used for `print`/`println`, REPL echo and error messages. The output is for
people, not for the reader: strings are not quoted and callables render as
opaque placeholders.
"""

from __future__ import annotations

from io import StringIO

from halftau import LispValue
from halftau.types.builtin import Builtin
from halftau.types.callables import Function, Macro
from halftau.types.nil import NilType
from halftau.types.symbol import Symbol
from halftau.types.vector import Vector


def format_value(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()


def _write(buffer: StringIO, value: LispValue) -> None:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        buffer.write("true" if value else "false")
    elif isinstance(value, float):
        buffer.write(repr(value))
    elif isinstance(value, (int, str, Symbol)):
        buffer.write(str(value))
    elif isinstance(value, NilType):
        buffer.write("nil")
    elif isinstance(value, list):
        _write_seq(buffer, "(", value, ")")
    elif isinstance(value, Vector):
        _write_seq(buffer, "[", value, "]")
    elif isinstance(value, Macro):
        buffer.write("<macro>")
    elif isinstance(value, Function):
        buffer.write("<function>")
    elif isinstance(value, Builtin):
        buffer.write(f"<builtin {value.lisp_name}>")
    else:
        buffer.write(repr(value))


def _write_seq(buffer: StringIO, open_: str, items, close: str) -> None:
    buffer.write(open_)
    first = True
    for item in items:
        if not first:
            buffer.write(" ")
        _write(buffer, item)
        first = False
    buffer.write(close)
