"""Run evaluation on a worker thread with a large stack.

Non-tail recursion in user code (e.g. `(+ 1 (length (cdr xs)))`) nests
several Python frames per Lisp call, so the interpreter's default limits
would stop ordinary programs a few hundred levels deep. Evaluation entry
points run through `call_with_deep_stack` instead, so only genuinely
runaway recursion raises RecursionError.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Callable

RECURSION_LIMIT = 100_000
STACK_SIZE = 512 * 1024 * 1024


def call_with_deep_stack(fn: Callable[..., Any], *args: Any) -> Any:
    """Call `fn(*args)` on a fresh thread and return its result.

    Exceptions raised by `fn` (including RecursionError) are re-raised in
    the calling thread.
    """
    outcome: dict[str, Any] = {}

    def target() -> None:
        try:
            outcome["value"] = fn(*args)
        except BaseException as e:  # re-raised below, in the caller's thread
            outcome["error"] = e

    old_limit = sys.getrecursionlimit()
    old_size = threading.stack_size()
    sys.setrecursionlimit(max(old_limit, RECURSION_LIMIT))
    try:
        threading.stack_size(STACK_SIZE)
        try:
            worker = threading.Thread(target=target, name="halftau-eval")
            worker.start()
        finally:
            threading.stack_size(old_size)
        worker.join()
    finally:
        sys.setrecursionlimit(old_limit)

    if "error" in outcome:
        raise outcome["error"]
    return outcome.get("value")
