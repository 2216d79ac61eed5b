"""Command-line entry point: `halftau [FILE ...]`.

With file arguments, each file is evaluated in order against one shared
runtime; errors in one file are reported and the next file still runs.
Without arguments, starts the interactive shell.
"""

import argparse
import logging
import sys

from halftau import __version__
from halftau.config import get_log_level
from halftau.interpreter import Interpreter
from halftau.repl import Shell

logger = logging.getLogger("halftau")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="halftau", description="halftau Lisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to run (if empty, starts the interactive shell)")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the core prelude")
    parser.add_argument("--log-level", default=None, help="log level for diagnostics (default: $HALFTAU_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logger.setLevel(get_log_level(args.log_level))

    try:
        interpreter = Interpreter(prelude=None if args.no_prelude else 'auto')

        if not args.files:
            Shell(interpreter).cmdloop()
            return 0

        for path in args.files:
            try:
                interpreter.run_file(path)
            except OSError as e:
                print(f"halftau: cannot read {path}: {e.strerror or e}", file=sys.stderr)
                return 1
    except RecursionError:
        print("halftau: fatal: maximum recursion depth exceeded", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
