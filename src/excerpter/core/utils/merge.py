"""Overlay merging for ``defaults.yaml`` plus a project config file.

Mappings such as ``render`` merge key by key, so an overlay only names the
settings it changes. Lists such as ``excerpts.commentWrappers`` are
replaced, unless the overlay list starts with "+", which appends to the
bundled wrappers instead.
"""
from __future__ import annotations

from typing import Any, Dict, List


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``override`` applied; neither input is mutated.

    Example:
        >>> deep_merge({"render": {"plaster": None, "markdownTemplate": "excerpt.md.j2"}},
        ...            {"render": {"plaster": "..."}})
        {'render': {'plaster': '...', 'markdownTemplate': 'excerpt.md.j2'}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if key in result:
            if isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            elif isinstance(result[key], list) and isinstance(value, list):
                result[key] = merge_arrays(result[key], value)
            else:
                result[key] = value
        else:
            result[key] = value
    return result


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Merge ``commentWrappers``-style lists.

    Example:
        >>> merge_arrays([{"prefix": "//", "suffix": ""}], [{"prefix": "--", "suffix": ""}])
        [{'prefix': '--', 'suffix': ''}]
        >>> merge_arrays([{"prefix": "//", "suffix": ""}], ["+", {"prefix": "--", "suffix": ""}])
        [{'prefix': '//', 'suffix': ''}, {'prefix': '--', 'suffix': ''}]
    """
    if not override:
        return list(override)
    if override[0] == "+":
        return [*base, *override[1:]]
    return list(override)


__all__ = ["deep_merge", "merge_arrays"]
