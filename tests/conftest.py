import pytest

from halftau.evaluation.evaluator import evaluate
from halftau.interpreter import Interpreter
from halftau.reader.parser import read
from halftau.runtime import Runtime


@pytest.fixture
def runtime():
    """Fresh runtime with builtins registered."""
    return Runtime()


@pytest.fixture
def run(runtime):
    """Evaluate every form in a source string; return the last result."""
    def _run(source):
        result = None
        for expr in read(source):
            result = evaluate(expr, runtime)
        return result
    return _run


@pytest.fixture
def interp():
    """Interpreter with the core prelude loaded."""
    return Interpreter()
