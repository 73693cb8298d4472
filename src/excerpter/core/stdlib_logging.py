from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_EXCERPTER_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None
_JSON_MODE_NULL_HANDLER: logging.Handler | None = None

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Install a single Excerpter handler on the ``excerpter`` logger.

    Writes to stderr, or to ``log_path`` when given. Idempotent per target:
    reconfiguring for the same target only updates the level.
    """
    global _EXCERPTER_HANDLER, _CONFIGURED_TARGET, _JSON_MODE_NULL_HANDLER

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    logger = logging.getLogger("excerpter")
    logger.setLevel(_level_from_name(level))

    # Leaving JSON mode within the same process.
    if _JSON_MODE_NULL_HANDLER is not None:
        logger.removeHandler(_JSON_MODE_NULL_HANDLER)
        _JSON_MODE_NULL_HANDLER = None
        logger.propagate = True

    if _CONFIGURED_TARGET == target and _EXCERPTER_HANDLER is not None:
        _EXCERPTER_HANDLER.setLevel(_level_from_name(level))
        return

    if _EXCERPTER_HANDLER is not None:
        logger.removeHandler(_EXCERPTER_HANDLER)
        _EXCERPTER_HANDLER.close()
        _EXCERPTER_HANDLER = None

    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _EXCERPTER_HANDLER = handler
    _CONFIGURED_TARGET = target


def suppress_lastresort_in_json_mode() -> None:
    """Keep stdlib logging off stdout/stderr for `--json` output.

    Removes the Excerpter stream handler (if installed) and gives the
    ``excerpter`` logger a NullHandler with propagation off, so neither the
    root handlers nor logging's implicit lastResort handler print warnings.
    """
    global _EXCERPTER_HANDLER, _CONFIGURED_TARGET, _JSON_MODE_NULL_HANDLER

    logger = logging.getLogger("excerpter")
    if _EXCERPTER_HANDLER is not None and _CONFIGURED_TARGET == "<stderr>":
        logger.removeHandler(_EXCERPTER_HANDLER)
        _EXCERPTER_HANDLER.close()
        _EXCERPTER_HANDLER = None
        _CONFIGURED_TARGET = None
    if _JSON_MODE_NULL_HANDLER is None:
        _JSON_MODE_NULL_HANDLER = logging.NullHandler()
        logger.addHandler(_JSON_MODE_NULL_HANDLER)
    logger.propagate = False


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove Excerpter handlers."""
    global _EXCERPTER_HANDLER, _CONFIGURED_TARGET, _JSON_MODE_NULL_HANDLER
    logger = logging.getLogger("excerpter")
    if _EXCERPTER_HANDLER is not None:
        logger.removeHandler(_EXCERPTER_HANDLER)
        _EXCERPTER_HANDLER.close()
    if _JSON_MODE_NULL_HANDLER is not None:
        logger.removeHandler(_JSON_MODE_NULL_HANDLER)
    logger.propagate = True
    _JSON_MODE_NULL_HANDLER = None
    logger.setLevel(logging.NOTSET)
    _EXCERPTER_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = [
    "configure_stdlib_logging",
    "suppress_lastresort_in_json_mode",
    "reset_stdlib_logging_for_tests",
    "LOG_FORMAT",
]
