"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from excerpter.core.config import ExcerptConfig
from excerpter.core.exceptions import ExcerpterError
from excerpter.core.excerpts import LoggingSink, WeaveResult, weave
from excerpter.core.stdlib_logging import (
    configure_stdlib_logging,
    suppress_lastresort_in_json_mode,
)


def load_cli_config(args: argparse.Namespace) -> ExcerptConfig:
    """Load config from ``--config`` (or env/defaults) and set up logging.

    With ``--json`` no stream handler is installed: stdout carries the JSON
    payload and stderr stays free of log records.
    """
    config_arg = getattr(args, "config", None)
    cfg = ExcerptConfig(Path(config_arg) if config_arg else None)
    if getattr(args, "json", False):
        suppress_lastresort_in_json_mode()
    else:
        configure_stdlib_logging(level=cfg.log_level)
    return cfg


def read_source(path: str) -> str:
    """Read a UTF-8 source file, wrapping I/O failures in ExcerpterError."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ExcerpterError(
            f"Cannot read {path}: {err}", context={"path": path}
        ) from err


def weave_source(
    args: argparse.Namespace,
    cfg: ExcerptConfig,
    *,
    log_diagnostics: bool = True,
) -> WeaveResult:
    """Read ``args.source`` and weave it.

    Diagnostics are logged as warnings only when ``log_diagnostics`` is set
    and the command is not in JSON mode; commands that report diagnostics
    in their own output pass ``log_diagnostics=False``.
    """
    text = read_source(args.source)
    sink = LoggingSink() if log_diagnostics and not getattr(args, "json", False) else None
    return weave(args.source, text, wrappers=cfg.comment_wrappers, sink=sink)


__all__ = ["load_cli_config", "read_source", "weave_source"]
