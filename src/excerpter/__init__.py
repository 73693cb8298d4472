"""
Excerpter - named code excerpts from docregion markers

Excerpter reads line-oriented source text, finds the ``#docregion`` /
``#enddocregion`` markers embedded in its comments, and reports the line
ranges each named region covers so documentation can show just a part of
a file while keeping its original line numbers.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
