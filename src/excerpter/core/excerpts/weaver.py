"""Weave source text into named excerpts.

Entry point of the library::

    result = weave("lib/main.dart", text)
    for name, excerpt in result.excerpts.items():
        ...

``weave`` never raises for malformed markup; sequencing problems come
back as ``result.diagnostics`` and are also handed, in order, to the
optional ``sink``.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence

from .diagnostics import DiagnosticSink
from .directives import DEFAULT_WRAPPERS, CommentWrapper, classify, split_lines
from .tracker import TrackedRegions, track
from .types import FULL_REGION, Excerpt, WeaveResult

logger = logging.getLogger(__name__)


def assemble(tracked: TrackedRegions) -> Mapping[str, Excerpt]:
    """Package tracked ranges as excerpts, ``"(full)"`` first."""
    excerpts: Dict[str, Excerpt] = {
        FULL_REGION: Excerpt(FULL_REGION, tuple(tracked.full)),
    }
    for name, ranges in tracked.regions.items():
        excerpts[name] = Excerpt(name, tuple(ranges))
    return MappingProxyType(excerpts)


def weave(
    source_id: str,
    text: str,
    *,
    wrappers: Optional[Sequence[CommentWrapper]] = None,
    sink: Optional[DiagnosticSink] = None,
) -> WeaveResult:
    """Compute the excerpts of ``text``.

    Args:
        source_id: Opaque identifier used only to tag diagnostics
        text: Source text
        wrappers: Comment wrappers to recognise (default: ``DEFAULT_WRAPPERS``)
        sink: Optional callable receiving each diagnostic

    Returns:
        WeaveResult with excerpts and diagnostics
    """
    lines = split_lines(text)
    classified = classify(lines, wrappers if wrappers is not None else DEFAULT_WRAPPERS)
    tracked = track(source_id, classified)

    result = WeaveResult(
        source_id=source_id,
        lines=tuple(lines),
        excerpts=assemble(tracked),
        diagnostics=tuple(tracked.diagnostics),
    )
    if sink is not None:
        for diagnostic in result.diagnostics:
            sink(diagnostic)

    logger.debug(
        "Wove %s: %d lines, %d excerpts, %d diagnostics",
        source_id,
        len(lines),
        len(result.excerpts),
        len(result.diagnostics),
    )
    return result


class Excerpter:
    """Holds one source text and its most recent weave."""

    def __init__(
        self,
        source_id: str,
        text: str,
        *,
        wrappers: Optional[Sequence[CommentWrapper]] = None,
    ) -> None:
        self.source_id = source_id
        self.text = text
        self.wrappers = wrappers
        self._result: Optional[WeaveResult] = None

    def weave(self, sink: Optional[DiagnosticSink] = None) -> WeaveResult:
        self._result = weave(self.source_id, self.text, wrappers=self.wrappers, sink=sink)
        return self._result

    @property
    def result(self) -> WeaveResult:
        if self._result is None:
            raise RuntimeError("Excerpter.weave() has not been called")
        return self._result

    @property
    def excerpts(self) -> Mapping[str, Excerpt]:
        return self.result.excerpts


__all__ = ["assemble", "weave", "Excerpter"]
