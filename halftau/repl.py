"""Interactive mode for the halftau interpreter. Uses cmd as backend."""

import cmd

from halftau.errors import EvalError, LexError, ParseError
from halftau.interpreter import Interpreter
from halftau.printer import format_value


class Shell(cmd.Cmd):
    """halftau read-eval-print loop: one line of input per evaluation."""
    intro = "halftau interpreter\nCtrl-D to exit."
    prompt = "halftau> "

    def __init__(self, interpreter: Interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter

    def cmdloop(self, intro=None):
        """Repeatedly read a line and evaluate it until end of input.

        cmd.Cmd reports end of input as the line "EOF", which would make a
        line consisting of the symbol EOF end the session, so the loop reads
        lines itself and only stops on a real end of input.
        """
        self.preloop()
        if self.use_rawinput:
            try:
                import readline  # noqa: F401  (line editing for input())
            except ImportError:
                pass
        if intro is not None:
            self.intro = intro
        if self.intro:
            print(self.intro, file=self.stdout)
        stop = False
        while not stop:
            line = self._read_line()
            if line is None:
                stop = self.do_EOF("")
            else:
                stop = self.onecmd(line)
        self.postloop()

    def _read_line(self):
        """Next input line without its newline, or None at end of input."""
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def onecmd(self, line):
        # Every line is source code
        if not line.strip():
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Evaluates each form on the line and prints its value."""
        try:
            exprs = self.interpreter.read(line)
        except LexError as e:
            print(f"Lexer error: {e}", file=self.stdout)
            return
        except ParseError as e:
            print(f"Parser error: {e}", file=self.stdout)
            return

        for expr in exprs:
            try:
                result = self.interpreter.eval_expr(expr)
            except EvalError as e:
                print(f"Error: {e}", file=self.stdout)
                return
            print(format_value(result), file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return True
