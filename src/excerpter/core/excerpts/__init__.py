"""Docregion excerpts.

- directives: classify lines as content or ``#docregion`` directives
- tracker: one forward pass computing ranges per region name
- weaver: assemble excerpts; ``weave()`` entry point
- diagnostics: sinks for sequencing problems
- render: slice excerpt text out of a weave result
"""
from .types import (
    FULL_REGION,
    ContiguousRange,
    Diagnostic,
    DiagnosticKind,
    Directive,
    DirectiveKind,
    Excerpt,
    Line,
    Severity,
    WeaveResult,
)
from .directives import DEFAULT_WRAPPERS, CommentWrapper, classify, parse_directive, split_lines
from .tracker import RegionState, RegionStatus, RegionTracker, TrackedRegions, track
from .diagnostics import CollectingSink, DiagnosticSink, LoggingSink, format_diagnostic
from .weaver import Excerpter, assemble, weave
from .render import excerpt_lines, render_markdown, render_text

__all__ = [
    "FULL_REGION",
    "ContiguousRange",
    "Diagnostic",
    "DiagnosticKind",
    "Directive",
    "DirectiveKind",
    "Excerpt",
    "Line",
    "Severity",
    "WeaveResult",
    "DEFAULT_WRAPPERS",
    "CommentWrapper",
    "classify",
    "parse_directive",
    "split_lines",
    "RegionState",
    "RegionStatus",
    "RegionTracker",
    "TrackedRegions",
    "track",
    "CollectingSink",
    "DiagnosticSink",
    "LoggingSink",
    "format_diagnostic",
    "Excerpter",
    "assemble",
    "weave",
    "excerpt_lines",
    "render_markdown",
    "render_text",
]
