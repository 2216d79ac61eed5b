from __future__ import annotations
import logging
from pathlib import Path
from typing import Literal

from halftau import SExpression, LispValue
from halftau.errors import EvalError, LexError, ParseError
from halftau.evaluation.deep_stack import call_with_deep_stack
from halftau.evaluation.evaluator import evaluate
from halftau.modules.prelude_loader import load_prelude
from halftau.reader.lexer import lex
from halftau.reader.parser import parse
from halftau.runtime import Runtime
from halftau.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating halftau code.
    Keeps one Runtime (and so one root scope) alive across calls.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        runtime: Runtime | None = None,
    ):
        self.runtime: Runtime = runtime if runtime is not None else Runtime()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                load_prelude(self)
            except FileNotFoundError as e:
                # Be permissive: no prelude found -> proceed without it
                logger.warning("%s; continuing without prelude", e)
        elif prelude:
            self.eval_prelude(prelude)

    @staticmethod
    def read(code: str) -> list[SExpression]:
        """Lex and parse `code`. Raises LexError or ParseError."""
        return parse(lex(code))

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate one parsed form against the root scope, on a worker
        thread with room for deep recursion."""
        return call_with_deep_stack(evaluate, expr, self.runtime)

    def eval_prelude(self, code: str) -> None:
        for expr in self.read(code):
            self.eval_expr(expr)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every form in `code`, returning each result in order.
        The first error propagates and later forms are not run."""
        return [self.eval_expr(expr) for expr in self.read(code)]

    def eval(self, code: str) -> LispValue:
        """Evaluate `code` and return the value of its last form (nil if
        there are none)."""
        results = self.eval_all(code)
        if not results:
            return Nil
        return results[-1]

    def run_source(self, code: str, origin: str = "<input>") -> bool:
        """Batch-mode evaluation of one source unit.

        A lex or parse failure means nothing in the unit runs. An evaluation
        failure is reported and the unit's remaining forms are skipped.
        Errors are printed, not raised. Returns True if every form ran.
        """
        try:
            tokens = lex(code)
        except LexError as e:
            print(f"Lexer error in {origin}: {e}")
            return False
        try:
            exprs = parse(tokens)
        except ParseError as e:
            print(f"Parser error in {origin}: {e}")
            return False

        logger.debug("evaluating %d forms from %s", len(exprs), origin)
        for expr in exprs:
            try:
                self.eval_expr(expr)
            except EvalError as e:
                logger.debug("evaluation of %s stopped: %s", origin, e)
                print(f"Error in {origin}: {e}")
                return False
        return True

    def run_file(self, path: str | Path) -> bool:
        """Read and run a file. OSError from reading it propagates."""
        path = Path(path)
        logger.debug("running %s", path)
        code = path.read_text(encoding='utf-8')
        return self.run_source(code, str(path))
