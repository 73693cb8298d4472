"""Diagnostic sinks.

The weaver never logs diagnostics itself; callers pass a sink to choose
between collecting, logging, or ignoring them.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .types import Diagnostic

DiagnosticSink = Callable[[Diagnostic], None]


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render as ``source:line: message`` (1-based line)."""
    if diagnostic.line is None:
        return f"{diagnostic.source_id}: {diagnostic.message}"
    return f"{diagnostic.source_id}:{diagnostic.line + 1}: {diagnostic.message}"


class CollectingSink:
    """Keeps every diagnostic it receives, in order."""

    def __init__(self) -> None:
        self.records: List[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.records.append(diagnostic)

    def __len__(self) -> int:
        return len(self.records)

    def clear(self) -> None:
        self.records.clear()


class LoggingSink:
    """Forwards diagnostics to a stdlib logger at WARNING level."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("excerpter")

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.logger.warning(
            format_diagnostic(diagnostic),
            extra={
                "source_id": diagnostic.source_id,
                "region": diagnostic.region,
                "line_index": diagnostic.line,
                "diagnostic_kind": diagnostic.kind.value,
            },
        )


__all__ = ["DiagnosticSink", "format_diagnostic", "CollectingSink", "LoggingSink"]
