"""Single forward pass turning classified lines into per-region ranges.

Each region name carries a small state record:

- CLOSED:  not open, nothing pending
- OPEN:    open, waiting for its next content line
- PENDING: open with a range in progress starting at ``start``

Content lines move OPEN regions to PENDING. Any directive line ends every
pending range (a directive is never part of a range), then applies its
opens or closes. The implicit ``"(full)"`` region is always open and
never closes, so its ranges are exactly the runs of content lines.

Ranges only end on directive lines or at end of file, so two content
lines with no directive between them always land in the same range.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .types import (
    ContiguousRange,
    Diagnostic,
    DiagnosticKind,
    Directive,
    DirectiveKind,
    Line,
)


class RegionStatus(Enum):
    CLOSED = "closed"
    OPEN = "open"
    PENDING = "pending"


@dataclass(frozen=True)
class RegionState:
    """Immutable per-name state; transitions return a new record."""

    status: RegionStatus = RegionStatus.CLOSED
    start: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.status is not RegionStatus.CLOSED

    def open(self) -> "RegionState":
        return RegionState(RegionStatus.OPEN)

    def close(self) -> "RegionState":
        return RegionState(RegionStatus.CLOSED)

    def extend(self, index: int) -> "RegionState":
        """Account for content line ``index``; starts a range if none is pending."""
        if self.status is RegionStatus.OPEN:
            return RegionState(RegionStatus.PENDING, index)
        return self

    def interrupt(self, index: int) -> Tuple["RegionState", Optional[ContiguousRange]]:
        """End the pending range (if any) just before line ``index``."""
        if self.status is RegionStatus.PENDING and self.start is not None:
            return RegionState(RegionStatus.OPEN), ContiguousRange(self.start, index)
        return self, None


CLOSED = RegionState()


@dataclass
class TrackedRegions:
    """Raw tracker output: range lists in first-open order plus diagnostics."""

    full: List[ContiguousRange] = field(default_factory=list)
    regions: Dict[str, List[ContiguousRange]] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)


class RegionTracker:
    """Reducer over classified lines.

    Feed every line in order with ``feed()``, then call ``finish()`` with
    the line count. Works on synthetic ``Line`` lists; no comment syntax
    is involved at this stage.
    """

    def __init__(self, source_id: str = "") -> None:
        self.source_id = source_id
        self._full = RegionState(RegionStatus.OPEN)
        # Insertion order doubles as first-open order.
        self._states: Dict[str, RegionState] = {}
        self._result = TrackedRegions()
        self._finished = False

    def feed(self, line: Line) -> None:
        if self._finished:
            raise RuntimeError("RegionTracker.feed() called after finish()")
        if line.directive is not None:
            self._interrupt_all(line.index)
            self._apply(line.directive)
        else:
            self._full = self._full.extend(line.index)
            for name, state in self._states.items():
                if state.is_open:
                    self._states[name] = state.extend(line.index)

    def finish(self, line_count: int) -> TrackedRegions:
        """Close out pending ranges at ``line_count`` and report unclosed regions."""
        if self._finished:
            return self._result
        self._interrupt_all(line_count)
        for name, state in self._states.items():
            if state.is_open:
                self._report(
                    DiagnosticKind.REGION_NEVER_CLOSED,
                    name,
                    f'region "{name}" was never closed',
                    None,
                )
                self._states[name] = state.close()
        self._finished = True
        return self._result

    def _interrupt_all(self, index: int) -> None:
        self._full, full_range = self._full.interrupt(index)
        if full_range is not None:
            self._result.full.append(full_range)
        for name, state in self._states.items():
            state, pending = state.interrupt(index)
            self._states[name] = state
            if pending is not None:
                self._result.regions[name].append(pending)

    def _apply(self, directive: Directive) -> None:
        for name in directive.names:
            state = self._states.get(name, CLOSED)
            if directive.kind is DirectiveKind.OPEN:
                if state.is_open:
                    self._report(
                        DiagnosticKind.REGION_ALREADY_OPEN,
                        name,
                        f'region "{name}" already opened',
                        directive.line,
                    )
                    continue
                if name not in self._states:
                    self._result.regions[name] = []
                self._states[name] = state.open()
            else:
                if not state.is_open:
                    self._report(
                        DiagnosticKind.REGION_NOT_OPEN,
                        name,
                        f'cannot close region "{name}", it is not open',
                        directive.line,
                    )
                    continue
                self._states[name] = state.close()

    def _report(
        self, kind: DiagnosticKind, name: str, message: str, line: Optional[int]
    ) -> None:
        self._result.diagnostics.append(
            Diagnostic(
                kind=kind,
                source_id=self.source_id,
                region=name,
                message=message,
                line=line,
            )
        )


def track(source_id: str, lines: Iterable[Line]) -> TrackedRegions:
    """Run a fresh ``RegionTracker`` over ``lines``."""
    tracker = RegionTracker(source_id)
    count = 0
    for line in lines:
        tracker.feed(line)
        count = line.index + 1
    return tracker.finish(count)


__all__ = [
    "RegionStatus",
    "RegionState",
    "RegionTracker",
    "TrackedRegions",
    "track",
]
