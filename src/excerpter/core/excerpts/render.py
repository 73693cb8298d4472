"""Materialize excerpt text from a weave result.

Slices ``result.lines`` by an excerpt's ranges. Optional "plaster" text
marks places where content lines were skipped between two ranges; gaps
made only of directive lines are not plastered.
"""
from __future__ import annotations

from typing import List, Optional

from jinja2 import Environment

from excerpter.core.exceptions import RegionNotFoundError
from excerpter.data import read_text

from .types import FULL_REGION, ContiguousRange, Excerpt, WeaveResult

DEFAULT_MARKDOWN_TEMPLATE = "excerpt.md.j2"


def _lookup(result: WeaveResult, name: str) -> Excerpt:
    excerpt = result.get(name)
    if excerpt is None:
        raise RegionNotFoundError(name, available=result.names)
    return excerpt


def _skips_content(result: WeaveResult, left: ContiguousRange, right: ContiguousRange) -> bool:
    """True if a content line lies strictly between ``left`` and ``right``."""
    for r in result.full.ranges:
        if r.start < right.start and r.end > left.end:
            return True
    return False


def excerpt_lines(
    result: WeaveResult,
    name: str = FULL_REGION,
    *,
    plaster: Optional[str] = None,
) -> List[str]:
    """Return the content lines covered by excerpt ``name``, in order."""
    excerpt = _lookup(result, name)
    out: List[str] = []
    previous: Optional[ContiguousRange] = None
    for r in excerpt.ranges:
        if plaster is not None and previous is not None and _skips_content(result, previous, r):
            out.append(plaster)
        out.extend(result.lines[r.start:r.end])
        previous = r
    return out


def render_text(
    result: WeaveResult,
    name: str = FULL_REGION,
    *,
    plaster: Optional[str] = None,
) -> str:
    """Join the excerpt's lines with newlines (trailing newline when non-empty)."""
    lines = excerpt_lines(result, name, plaster=plaster)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def render_markdown(
    result: WeaveResult,
    name: str = FULL_REGION,
    *,
    language: str = "",
    plaster: Optional[str] = None,
    template: Optional[str] = None,
) -> str:
    """Render the excerpt as a fenced Markdown code block.

    Args:
        result: Weave result holding the source lines
        name: Excerpt name
        language: Info string for the code fence
        plaster: Optional marker line for skipped content
        template: Jinja2 template source; defaults to the bundled template

    Returns:
        Rendered Markdown, ending with a newline
    """
    excerpt = _lookup(result, name)
    lines = excerpt_lines(result, name, plaster=plaster)
    source = template if template is not None else read_text("templates", DEFAULT_MARKDOWN_TEMPLATE)

    first_line = excerpt.ranges[0].start + 1 if excerpt.ranges else None
    last_line = excerpt.ranges[-1].end if excerpt.ranges else None

    # Control blocks sit on their own lines in templates.
    env = Environment(trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)
    rendered = env.from_string(source).render(
        name=name,
        source_id=result.source_id,
        language=language,
        code="\n".join(lines),
        first_line=first_line,
        last_line=last_line,
    )
    return rendered if rendered.endswith("\n") else rendered + "\n"


__all__ = [
    "DEFAULT_MARKDOWN_TEMPLATE",
    "excerpt_lines",
    "render_text",
    "render_markdown",
]
