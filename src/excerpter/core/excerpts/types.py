"""Data model for woven excerpts.

All values are immutable; a weave builds them fresh and hands them out
read-only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

FULL_REGION = "(full)"


class DirectiveKind(str, Enum):
    """Which marker a directive line carries."""

    OPEN = "docregion"
    CLOSE = "enddocregion"


@dataclass(frozen=True)
class Directive:
    """A parsed ``#docregion``/``#enddocregion`` line.

    ``names`` keeps the names as written, duplicates included, so the
    tracker can report a name listed twice.
    """

    kind: DirectiveKind
    names: Tuple[str, ...]
    line: int


@dataclass(frozen=True)
class Line:
    """A single source line, classified as content or directive."""

    index: int
    text: str
    directive: Optional[Directive] = None

    @property
    def is_directive(self) -> bool:
        return self.directive is not None


@dataclass(frozen=True)
class ContiguousRange:
    """Half-open run of line indices ``[start, end)``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.start >= self.end:
            raise ValueError(
                f"start ({self.start}) must be less than end ({self.end})"
            )

    def __len__(self) -> int:
        return self.end - self.start

    def indices(self) -> range:
        return range(self.start, self.end)

    def to_list(self) -> List[int]:
        return [self.start, self.end]


@dataclass(frozen=True)
class Excerpt:
    """Finalized ranges for one region name, ascending and non-adjacent."""

    name: str
    ranges: Tuple[ContiguousRange, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.ranges

    def line_indices(self) -> Iterator[int]:
        for r in self.ranges:
            yield from r.indices()


class DiagnosticKind(str, Enum):
    """Sequencing problems found while tracking regions."""

    REGION_ALREADY_OPEN = "region_already_open"
    REGION_NOT_OPEN = "region_not_open"
    REGION_NEVER_CLOSED = "region_never_closed"


class Severity(str, Enum):
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found during a weave.

    ``line`` is zero-based and ``None`` for problems detected at end of file.
    """

    kind: DiagnosticKind
    source_id: str
    region: str
    message: str
    line: Optional[int] = None
    severity: Severity = Severity.WARNING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "source_id": self.source_id,
            "region": self.region,
            "line": self.line,
            "message": self.message,
        }


@dataclass(frozen=True)
class WeaveResult:
    """Excerpts and diagnostics for one source text.

    ``excerpts`` iterates ``"(full)"`` first, then every other region in
    the order its first open directive appeared.
    """

    source_id: str
    lines: Tuple[str, ...]
    excerpts: Mapping[str, Excerpt] = field(default_factory=lambda: MappingProxyType({}))
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def full(self) -> Excerpt:
        return self.excerpts[FULL_REGION]

    @property
    def names(self) -> List[str]:
        return list(self.excerpts)

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)

    def __getitem__(self, name: str) -> Excerpt:
        return self.excerpts[name]

    def __contains__(self, name: object) -> bool:
        return name in self.excerpts

    def get(self, name: str) -> Optional[Excerpt]:
        return self.excerpts.get(name)


__all__ = [
    "FULL_REGION",
    "DirectiveKind",
    "Directive",
    "Line",
    "ContiguousRange",
    "Excerpt",
    "DiagnosticKind",
    "Severity",
    "Diagnostic",
    "WeaveResult",
]
