import pytest

from halftau.printer import format_value
from halftau.reader.parser import read
from halftau.types.builtin import Builtin
from halftau.types.callables import Function, Macro
from halftau.types.nil import Nil
from halftau.types.symbol import Symbol
from halftau.types.vector import Vector


@pytest.mark.parametrize(
    "value,expected",
    [
        (42, "42"),
        (0, "0"),
        (-3, "-3"),
        (2.0, "2.0"),
        (0.25, "0.25"),
        (True, "true"),
        (False, "false"),
        ("hello world", "hello world"),
        ('say "hi"', 'say "hi"'),
        (Symbol("foo"), "foo"),
        (Nil, "nil"),
        ([], "()"),
        ([1, 2, 3], "(1 2 3)"),
        ([1, [2, [3]], "s"], "(1 (2 (3)) s)"),
        (Vector([1, Symbol("a")]), "[1 a]"),
        (Vector(), "[]"),
        ([Vector([1]), Vector([])], "([1] [])"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_callables_are_opaque():
    assert format_value(Function([Symbol("x")], Symbol("x"))) == "<function>"
    assert format_value(Macro([Symbol("x")], Symbol("x"))) == "<macro>"
    assert format_value(Builtin.CAR) == "<builtin car>"
    assert format_value(Builtin.EMPTY) == "<builtin empty?>"


@pytest.mark.parametrize("source", ["(a (b c) [d])", "(1 2.5 x)", "[]"])
def test_format_matches_source_for_plain_data(source):
    [expr] = read(source)
    assert format_value(expr) == source


def test_format_evaluated_values(run):
    assert format_value(run("(fn [x] x)")) == "<function>"
    assert format_value(run("(/ 4 2)")) == "2.0"
    assert format_value(run("(cons 1 '(2))")) == "(1 2)"
