"""Recognize ``#docregion`` / ``#enddocregion`` directive lines.

A directive is a whole line: after trimming and stripping one comment
wrapper, the remaining text must be exactly::

    #docregion <name>, <name>, ...
    #enddocregion <name>, ...

Supported wrappers (see ``DEFAULT_WRAPPERS``):
- bare:           #docregion a
- line comment:   // #docregion a
- block comment:  /* #docregion a */
- hash comment:   # #docregion a
- HTML comment:   <!-- #docregion a -->

Anything else, including a marker embedded in a longer comment, is a
content line.
"""
from __future__ import annotations

import re
from typing import Iterable, List, NamedTuple, Optional, Sequence

from .types import Directive, DirectiveKind, Line


class CommentWrapper(NamedTuple):
    """Delimiters framing a directive: ``prefix`` and optional ``suffix``."""

    prefix: str
    suffix: str = ""


DEFAULT_WRAPPERS: tuple[CommentWrapper, ...] = (
    CommentWrapper("", ""),
    CommentWrapper("//", ""),
    CommentWrapper("/*", "*/"),
    CommentWrapper("#", ""),
    CommentWrapper("<!--", "-->"),
)

# Inner grammar, matched against the whole unwrapped text. A stray
# comment-close ("*/" or "-->") after the names is not part of them.
DIRECTIVE_PATTERN = re.compile(
    r"\s*#(?P<kind>docregion|enddocregion)(?:\s+(?P<names>.*?))?\s*(?:\*/|-->)?\s*",
    re.DOTALL,
)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split ``text`` on ``\\r\\n``, ``\\r`` or ``\\n``.

    A terminator at the very end does not produce a trailing empty line.
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _unwrap(trimmed: str, wrapper: CommentWrapper) -> Optional[str]:
    prefix, suffix = wrapper
    if not trimmed.startswith(prefix):
        return None
    inner = trimmed[len(prefix):]
    if suffix:
        if not inner.endswith(suffix):
            return None
        inner = inner[: -len(suffix)]
    return inner


def _parse_names(raw: Optional[str]) -> Optional[tuple[str, ...]]:
    if raw is None or not raw.strip():
        return ()
    names = tuple(part.strip() for part in raw.split(","))
    if any(not name for name in names):
        # "a,,b" or a trailing comma
        return None
    return names


def parse_directive(
    text: str,
    line: int,
    wrappers: Sequence[CommentWrapper] = DEFAULT_WRAPPERS,
) -> Optional[Directive]:
    """Parse ``text`` as a directive, or return None for a content line."""
    trimmed = text.strip()
    if "#" not in trimmed:
        return None

    for wrapper in wrappers:
        inner = _unwrap(trimmed, wrapper)
        if inner is None:
            continue
        match = DIRECTIVE_PATTERN.fullmatch(inner)
        if match is None:
            continue
        names = _parse_names(match.group("names"))
        if names is None:
            continue
        return Directive(
            kind=DirectiveKind(match.group("kind")),
            names=names,
            line=line,
        )
    return None


def classify(
    lines: Iterable[str],
    wrappers: Sequence[CommentWrapper] = DEFAULT_WRAPPERS,
) -> List[Line]:
    """Classify each line as content or directive."""
    return [
        Line(index=i, text=text, directive=parse_directive(text, i, wrappers))
        for i, text in enumerate(lines)
    ]


__all__ = [
    "CommentWrapper",
    "DEFAULT_WRAPPERS",
    "DIRECTIVE_PATTERN",
    "split_lines",
    "parse_directive",
    "classify",
]
