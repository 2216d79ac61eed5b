import pytest

from halftau.errors import ArityError, TypeMismatchError, UnboundSymbolError
from halftau.types.callables import Function, Macro
from halftau.types.nil import Nil
from halftau.types.symbol import Symbol


# ------------------ fn ------------------

def test_fn_returns_function(run):
    fn = run("(fn [x y] (+ x y))")
    assert isinstance(fn, Function)
    assert not isinstance(fn, Macro)
    assert fn.params == [Symbol("x"), Symbol("y")]
    assert fn.body == [Symbol("+"), Symbol("x"), Symbol("y")]


def test_fn_application(run):
    run("(def add (fn [a b] (+ a b)))")
    assert run("(add 2 3)") == 5


def test_zero_parameter_function(run):
    run("(def five (fn [] 5))")
    assert run("(five)") == 5


@pytest.mark.parametrize("call", ["(add 1)", "(add 1 2 3)", "(add)"])
def test_wrong_argument_count(run, call):
    run("(def add (fn [a b] (+ a b)))")
    with pytest.raises(ArityError) as excinfo:
        run(call)
    received = len(call.split()) - 1 if call != "(add)" else 0
    assert "expects 2" in str(excinfo.value)
    assert f"received {received}" in str(excinfo.value)


@pytest.mark.parametrize(
    "source",
    ["(fn (x) x)", "(fn x x)", "(fn [1] x)", '(fn ["a"] a)'],
)
def test_fn_parameter_list_must_be_vector_of_symbols(run, source):
    with pytest.raises(TypeMismatchError):
        run(source)


@pytest.mark.parametrize("source", ["(fn [x])", "(fn [x] x x)", "(macro [x])"])
def test_fn_and_macro_arity(run, source):
    with pytest.raises(ArityError):
        run(source)


def test_recursion(run):
    run("(def fact (fn [n] (if (= n 0) 1 (* n (fact (- n 1))))))")
    assert run("(fact 10)") == 3628800


def test_parameters_do_not_leak(run):
    run("(def f (fn [secret] secret))")
    run("(f 1)")
    with pytest.raises(UnboundSymbolError):
        run("secret")


# ------------------ def ------------------

def test_def_requires_symbol(run):
    with pytest.raises(TypeMismatchError, match="symbol"):
        run('(def "x" 1)')


def test_def_arity(run):
    with pytest.raises(ArityError):
        run("(def x)")


def test_def_inside_function_writes_root(run, runtime):
    run("(def x 1)")
    run("(def set-x (fn [v] (def x v)))")
    assert run("(set-x 42)") == 42
    assert runtime.lookup(Symbol("x")) == 42
    assert run("x") == 42


def test_def_inside_function_is_visible_later_in_the_call(run):
    run("(def f (fn [] (if (def fresh 3) (+ fresh 1))))")
    assert run("(f)") == 4
    assert run("fresh") == 3


def test_def_inside_function_does_not_touch_locals(run):
    run("(def g (fn [x] (if (def x 99) x)))")
    # the parameter x shadows the new global inside the call
    assert run("(g 1)") == 1
    assert run("x") == 99


# ------------------ scoping ------------------

def test_free_variables_resolve_against_the_caller(run):
    # dynamic scoping: show-n sees the n bound by its caller
    run("(def show-n (fn [] n))")
    run("(def call-with-n (fn [n] (show-n)))")
    assert run("(call-with-n 7)") == 7


def test_free_variables_fall_back_to_globals(run):
    run("(def n 1)")
    run("(def show-n (fn [] n))")
    assert run("(show-n)") == 1


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", 1),
        ("(if false 1 2)", 2),
        ("(if nil 1 2)", 2),
        ("(if 0 1 2)", 1),
        ("(if (quote ()) 1 2)", 1),
        ('(if "" 1 2)', 1),
        ("(if [] 1 2)", 1),
        ("(if (= 1 1) 1 2)", 1),
    ],
)
def test_if_truthiness(run, source, expected):
    assert run(source) == expected


def test_if_without_else_returns_false(run):
    assert run("(if false 1)") is False
    assert run("(if nil 1)") is False


def test_if_only_evaluates_taken_branch(run):
    assert run("(if true 1 (car (quote ())))") == 1
    assert run("(if false undefined-name 2)") == 2


@pytest.mark.parametrize("source", ["(if true)", "(if true 1 2 3)", "(if)"])
def test_if_arity(run, source):
    with pytest.raises(ArityError):
        run(source)


# ------------------ print ------------------

def test_print_and_println(run, capsys):
    assert run('(print "a" 1 2.5)') is Nil
    assert run('(println "b" (quote (x y)) [1 2])') is Nil
    assert run("(println)") is Nil
    assert capsys.readouterr().out == "a 1 2.5b (x y) [1 2]\n\n"
