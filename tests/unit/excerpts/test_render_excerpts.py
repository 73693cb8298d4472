"""Tests for materializing excerpt text from a weave result."""
from __future__ import annotations

import pytest

from excerpter.core.exceptions import RegionNotFoundError
from excerpter.core.excerpts import FULL_REGION, excerpt_lines, render_markdown, render_text, weave


class TestExcerptLines:
    """Round trip: ranges slice exactly the lines open for a region."""

    def test_full_drops_directives(self, dart_sample: str) -> None:
        result = weave("t", dart_sample)
        lines = excerpt_lines(result)
        assert not any("docregion" in line for line in lines)
        assert len(lines) == 13

    def test_main_stub(self, dart_sample: str) -> None:
        result = weave("t", dart_sample)
        assert excerpt_lines(result, "main-stub") == ["void main() async {", "}"]

    def test_round_trip_matches_open_lines(self, dart_sample: str) -> None:
        """Concatenated ranges equal the content lines while the region was open."""
        result = weave("t", dart_sample)
        assert excerpt_lines(result, "main") == [
            "void main() async {",
            "  print('Compute π using the Monte Carlo method.');",
            "  await for (var estimate in computePi().take(500)) {",
            "    print('π ≅ $estimate');",
            "  }",
            "}",
        ]

    def test_unknown_region_raises(self) -> None:
        result = weave("t", "a\n")
        with pytest.raises(RegionNotFoundError) as excinfo:
            excerpt_lines(result, "nope")
        assert excinfo.value.context["available"] == [FULL_REGION]
        assert isinstance(excinfo.value, KeyError)


class TestRenderText:
    """Tests for render_text()."""

    def test_plain(self) -> None:
        result = weave("t", "#docregion a\nx\ny\n#enddocregion a\nz\n")
        assert render_text(result, "a") == "x\ny\n"

    def test_empty_excerpt_renders_empty_string(self) -> None:
        result = weave("t", "#docregion a\n#enddocregion a\n")
        assert render_text(result, "a") == ""

    def test_plaster_marks_skipped_content(self, dart_sample: str) -> None:
        result = weave("t", dart_sample)
        assert render_text(result, "main-stub", plaster="  // ...") == (
            "void main() async {\n  // ...\n}\n"
        )

    def test_no_plaster_across_directive_only_gaps(self, dart_sample: str) -> None:
        """main's gaps contain only directive lines, so nothing is inserted."""
        result = weave("t", dart_sample)
        assert "  // ..." not in excerpt_lines(result, "main", plaster="  // ...")


class TestRenderMarkdown:
    """Tests for render_markdown() with the bundled Jinja2 template."""

    def test_fenced_block_with_header(self, dart_sample: str) -> None:
        result = weave("lib/main.dart", dart_sample)
        rendered = render_markdown(result, "imports", language="dart")
        assert rendered == (
            "<!-- lib/main.dart#imports (lines 2-2) -->\n"
            "```dart\n"
            "import 'dart:async';\n"
            "```\n"
        )

    def test_custom_template(self) -> None:
        result = weave("t", "#docregion a\nx\n#enddocregion a\n")
        rendered = render_markdown(result, "a", template="{{ name }}: {{ code }}")
        assert rendered == "a: x\n"
