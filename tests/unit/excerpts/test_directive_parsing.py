"""Tests for recognizing #docregion / #enddocregion directive lines."""
from __future__ import annotations

import pytest

from excerpter.core.excerpts.directives import (
    DEFAULT_WRAPPERS,
    CommentWrapper,
    classify,
    parse_directive,
    split_lines,
)
from excerpter.core.excerpts.types import Directive, DirectiveKind


# =============================================================================
# split_lines
# =============================================================================


class TestSplitLines:
    """Tests for splitting source text into lines."""

    def test_trailing_terminator_adds_no_phantom_line(self) -> None:
        assert split_lines("foo\nbar\n") == ["foo", "bar"]

    def test_missing_trailing_terminator(self) -> None:
        assert split_lines("foo\nbar") == ["foo", "bar"]

    def test_interior_and_trailing_blank_lines_are_kept(self) -> None:
        """Only the final terminator is dropped; real empty lines stay."""
        assert split_lines("a\n\nb\n\n") == ["a", "", "b", ""]

    def test_empty_text_has_no_lines(self) -> None:
        assert split_lines("") == []

    def test_single_newline_is_one_empty_line(self) -> None:
        assert split_lines("\n") == [""]

    def test_mixed_terminators(self) -> None:
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_form_feed_is_not_a_terminator(self) -> None:
        assert split_lines("a\x0cb\n") == ["a\x0cb"]


# =============================================================================
# parse_directive - recognized forms
# =============================================================================


class TestRecognizedDirectives:
    """Lines that must parse as directives."""

    def test_line_comment_open(self) -> None:
        d = parse_directive("// #docregion imports", 3)
        assert d == Directive(DirectiveKind.OPEN, ("imports",), 3)

    def test_line_comment_close_with_indent(self) -> None:
        d = parse_directive("  // #enddocregion main-stub", 6)
        assert d is not None
        assert d.kind is DirectiveKind.CLOSE
        assert d.names == ("main-stub",)

    def test_block_comment(self) -> None:
        d = parse_directive("/* #docregion q1 */", 0)
        assert d == Directive(DirectiveKind.OPEN, ("q1",), 0)

    def test_block_comment_close(self) -> None:
        d = parse_directive("/* #enddocregion q1 */", 2)
        assert d == Directive(DirectiveKind.CLOSE, ("q1",), 2)

    def test_bare_directive(self) -> None:
        d = parse_directive("#docregion A,B", 0)
        assert d == Directive(DirectiveKind.OPEN, ("A", "B"), 0)

    def test_hash_comment(self) -> None:
        d = parse_directive("# #enddocregion setup", 9)
        assert d == Directive(DirectiveKind.CLOSE, ("setup",), 9)

    def test_html_comment(self) -> None:
        d = parse_directive("<!-- #docregion header -->", 1)
        assert d == Directive(DirectiveKind.OPEN, ("header",), 1)

    def test_names_are_trimmed(self) -> None:
        d = parse_directive("// #docregion  main ,  main-stub  ", 0)
        assert d is not None
        assert d.names == ("main", "main-stub")

    def test_names_are_case_sensitive(self) -> None:
        d = parse_directive("// #docregion Main,main", 0)
        assert d is not None
        assert d.names == ("Main", "main")

    def test_duplicate_names_are_kept(self) -> None:
        """Duplicates are reported later by the tracker, so they are kept here."""
        d = parse_directive("#docregion A,A", 0)
        assert d is not None
        assert d.names == ("A", "A")

    @pytest.mark.parametrize(
        "text",
        ["#docregion", "// #enddocregion", "/* #docregion */", "// #docregion   "],
    )
    def test_empty_name_list_is_a_directive(self, text: str) -> None:
        d = parse_directive(text, 0)
        assert d is not None
        assert d.names == ()

    @pytest.mark.parametrize(
        "text, names",
        [
            ("// #docregion a */", ("a",)),
            ("// #docregion a*/", ("a",)),
            ("#enddocregion a, b -->", ("a", "b")),
            ("# #docregion setup -->", ("setup",)),
        ],
    )
    def test_stray_comment_close_is_not_a_name(self, text: str, names: tuple) -> None:
        """A leftover "*/" or "-->" after the names is dropped."""
        d = parse_directive(text, 0)
        assert d is not None
        assert d.names == names


# =============================================================================
# parse_directive - content lines
# =============================================================================


class TestContentLines:
    """Lines that look similar but are content."""

    @pytest.mark.parametrize(
        "text",
        [
            "void main() {}",
            "",
            "// just a comment",
            "/// #docregion doc",
            "print('#docregion x');",
            "// see #docregion above",
            "// #docregionfoo",
            "// #docregion a,,b",
            "// #docregion a,",
            "/* #docregion q1",
            "#endregion x",
        ],
    )
    def test_not_a_directive(self, text: str) -> None:
        assert parse_directive(text, 0) is None

    def test_custom_wrappers_replace_defaults(self) -> None:
        """Only configured wrappers are tried."""
        sql_only = (CommentWrapper("--", ""),)
        assert parse_directive("-- #docregion q", 0, sql_only) is not None
        assert parse_directive("// #docregion q", 0, sql_only) is None

    def test_default_wrappers_include_bare_form_first(self) -> None:
        assert DEFAULT_WRAPPERS[0] == CommentWrapper("", "")


class TestClassify:
    """Tests for classify()."""

    def test_classify_indexes_and_flags(self) -> None:
        lines = classify(["/* #docregion q */", "X;", "/* #enddocregion q */"])
        assert [line.index for line in lines] == [0, 1, 2]
        assert [line.is_directive for line in lines] == [True, False, True]
        assert lines[1].text == "X;"
        assert lines[2].directive is not None
        assert lines[2].directive.line == 2
