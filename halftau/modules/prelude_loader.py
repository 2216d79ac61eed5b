from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from halftau.config import PRELUDE_FILE, get_prelude_root

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_path() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate the prelude source into `itp`.

    Raises FileNotFoundError when HALFTAU_PRELUDE_PATH points somewhere with
    no prelude file.
    """
    path = prelude_path()
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find prelude {path}")
    logger.debug("loading prelude from %s", path)
    itp.eval_prelude(path.read_text(encoding='utf-8'))
