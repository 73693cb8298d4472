"""
Excerpter weave command.

SUMMARY: Report the line ranges of every excerpt in a source file
"""

from __future__ import annotations

import argparse
import sys

from excerpter.cli import (
    OutputFormatter,
    add_config_flag,
    add_json_flag,
    add_source_arg,
    load_cli_config,
    weave_source,
)
from excerpter.core.excerpts import format_diagnostic

SUMMARY = "Report the line ranges of every excerpt in a source file"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_source_arg(parser)
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any diagnostic is reported",
    )
    add_config_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        cfg = load_cli_config(args)
        result = weave_source(args, cfg, log_diagnostics=False)
    except Exception as e:
        formatter.error(e, error_code="weave_error")
        return 1

    if formatter.json_mode:
        formatter.json_output({
            "source": result.source_id,
            "lineCount": len(result.lines),
            "excerpts": {
                name: [r.to_list() for r in excerpt.ranges]
                for name, excerpt in result.excerpts.items()
            },
            "diagnostics": [d.to_dict() for d in result.diagnostics],
        })
    else:
        for name, excerpt in result.excerpts.items():
            ranges = ", ".join(f"[{r.start}, {r.end})" for r in excerpt.ranges)
            formatter.text(f"{name}: {ranges or '(empty)'}")
        for diagnostic in result.diagnostics:
            formatter.text(f"warning: {format_diagnostic(diagnostic)}")

    strict = bool(getattr(args, "strict", False)) or cfg.strict
    if strict and result.has_diagnostics:
        return 1
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
