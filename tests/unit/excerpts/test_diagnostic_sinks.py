"""Tests for diagnostic formatting and sinks."""
from __future__ import annotations

import logging

import pytest

from excerpter.core.excerpts import (
    CollectingSink,
    Diagnostic,
    DiagnosticKind,
    LoggingSink,
    format_diagnostic,
    weave,
)


def _diag(line=None) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.REGION_NOT_OPEN,
        source_id="lib/a.dart",
        region="r",
        message='cannot close region "r", it is not open',
        line=line,
    )


class TestFormatDiagnostic:
    def test_with_line_is_one_based(self) -> None:
        assert format_diagnostic(_diag(line=4)) == (
            'lib/a.dart:5: cannot close region "r", it is not open'
        )

    def test_without_line(self) -> None:
        assert format_diagnostic(_diag()).startswith("lib/a.dart: ")

    def test_to_dict(self) -> None:
        assert _diag(line=0).to_dict() == {
            "kind": "region_not_open",
            "severity": "warning",
            "source_id": "lib/a.dart",
            "region": "r",
            "line": 0,
            "message": 'cannot close region "r", it is not open',
        }


class TestSinks:
    def test_collecting_sink_clear(self) -> None:
        sink = CollectingSink()
        sink(_diag())
        assert len(sink) == 1
        sink.clear()
        assert sink.records == []

    def test_logging_sink_emits_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="excerpter")
        weave("x.dart", "// #docregion open-forever\ncode\n", sink=LoggingSink())
        records = [r for r in caplog.records if r.name == "excerpter"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].region == "open-forever"
        assert "never closed" in records[0].getMessage()
