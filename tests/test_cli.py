import io

import pytest

from halftau.__main__ import main
from halftau.interpreter import Interpreter
from halftau.repl import Shell


@pytest.fixture
def write_file(tmp_path):
    def _write(name, text):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


# -------------------------------
# Batch mode
# -------------------------------

def test_run_source_reports_eval_error_and_stops(capsys):
    itp = Interpreter(prelude=None)
    ok = itp.run_source('(println "one") (car (quote ())) (println "two")', "prog.ht")
    out = capsys.readouterr().out
    assert ok is False
    assert out.startswith("one\nError in prog.ht: ")
    assert "two" not in out


def test_run_source_lexer_error_runs_nothing(capsys):
    itp = Interpreter(prelude=None)
    assert itp.run_source('(println "x") #', "bad.ht") is False
    out = capsys.readouterr().out
    assert out.startswith("Lexer error in bad.ht: unrecognized character '#'")
    assert "x\n" not in out


def test_run_source_parser_error(capsys):
    itp = Interpreter(prelude=None)
    assert itp.run_source("(+ 1 2", "open.ht") is False
    assert capsys.readouterr().out.startswith("Parser error in open.ht: unterminated list")


def test_main_runs_files_in_order_with_shared_runtime(write_file, capsys):
    a = write_file("a.ht", "(def x 20)")
    b = write_file("b.ht", "(println (+ x 1))")
    assert main([str(a), str(b)]) == 0
    assert capsys.readouterr().out == "21\n"


def test_main_continues_after_failing_file(write_file, capsys):
    bad = write_file("bad.ht", "(println undefined-name)")
    good = write_file("good.ht", '(println "still running")')
    assert main([str(bad), str(good)]) == 0
    out = capsys.readouterr().out
    assert f"Error in {bad}: undefined variable undefined-name" in out
    assert out.endswith("still running\n")


def test_main_uses_prelude(write_file, capsys):
    src = write_file("p.ht", "(defn sq [x] (* x x)) (println (map sq '(1 2 3)))")
    assert main([str(src)]) == 0
    assert capsys.readouterr().out == "(1 4 9)\n"


def test_main_without_prelude(write_file, capsys):
    src = write_file("p.ht", "(defn sq [x] (* x x))")
    assert main(["--no-prelude", str(src)]) == 0
    assert "undefined variable defn" in capsys.readouterr().out


def test_main_missing_file_is_fatal(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ht")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_main_stack_exhaustion_is_fatal(write_file, capsys):
    # Non-tail recursion with no base case
    src = write_file("loop.ht", "(def f (fn [] (+ 1 (f)))) (f)")
    assert main([str(src)]) == 2
    assert "recursion" in capsys.readouterr().err


def test_main_runs_deep_non_tail_recursion(write_file, capsys):
    src = write_file("deep.ht", "(defn count-down [n] (if (= n 0) 0 (+ 1 (count-down (- n 1)))))\n(println (count-down 3000))")
    assert main([str(src)]) == 0
    assert capsys.readouterr().out == "3000\n"


# -------------------------------
# Interactive mode
# -------------------------------

def _session(lines, prelude=None):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    shell = Shell(Interpreter(prelude=prelude), stdin=stdin, stdout=stdout)
    shell.use_rawinput = False
    shell.cmdloop(intro="")
    return stdout.getvalue()


def test_shell_prints_results():
    out = _session(["(+ 1 2)", "(def x 5)", "(* x 2)", "'(a [b])"])
    assert "3\n" in out
    assert "5\n" in out
    assert "10\n" in out
    assert "(a [b])\n" in out


def test_shell_reports_errors_and_continues():
    out = _session(["(car '())", "(+ 1", "\"\\q\"", "(+ 2 2)"])
    assert "Error: car of empty list" in out
    assert "Parser error: unterminated list" in out
    assert "Lexer error: unknown escape sequence \\q" in out
    assert "4\n" in out


def test_shell_keeps_state_between_lines():
    out = _session(["(def n 1)", "(def n (+ n 1))", "n"])
    assert out.count("2\n") == 2


def test_shell_ignores_blank_lines_and_command_words():
    out = _session(["", "help", "(def help 3)", "help"])
    assert "Error: undefined variable help" in out
    assert "3\n" in out


def test_shell_treats_eof_line_as_a_symbol():
    out = _session(["EOF", "(def EOF 9)", "EOF", "(+ 1 1)"])
    assert "Error: undefined variable EOF" in out
    assert out.count("9\n") == 2
    assert "2\n" in out


def test_shell_stops_at_end_of_input():
    shell = Shell(Interpreter(prelude=None), stdin=io.StringIO("(+ 1 2)"), stdout=io.StringIO())
    shell.use_rawinput = False
    shell.cmdloop(intro="")
    assert shell.stdout.getvalue() == "halftau> 3\nhalftau> \n"
