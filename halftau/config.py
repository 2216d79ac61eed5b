from __future__ import annotations
import logging
import os
from pathlib import Path


# Resolve installation dir (halftau package directory)
_HALFTAU_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _HALFTAU_DIR / 'prelude'
_DEFAULT_LOG_LEVEL = 'WARNING'

PRELUDE_FILE = 'core.lisp'


def get_prelude_root() -> Path:
    """Directory holding the prelude: $HALFTAU_PRELUDE_PATH or the packaged one.

    The variable names a single directory; if it names a file, that file's
    directory is used.
    """
    raw = (os.environ.get('HALFTAU_PRELUDE_PATH') or '').strip()
    p = Path(raw) if raw else _DEFAULT_PRELUDE_DIR
    return p if p.is_dir() else p.parent


def get_log_level(override: str | None = None) -> int:
    name = (override or os.environ.get('HALFTAU_LOG_LEVEL') or _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level
