"""
Excerpter list command.

SUMMARY: List excerpt names found in a source file
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

SUMMARY = "List excerpt names found in a source file"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_source_arg(parser)
    add_config_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        cfg = load_cli_config(args)
        result = weave_source(args, cfg)
    except Exception as e:
        formatter.error(e, error_code="list_error")
        return 1

    if formatter.json_mode:
        formatter.json_output({
            "source": result.source_id,
            "names": result.names,
            "diagnostics": [d.to_dict() for d in result.diagnostics],
        })
    else:
        for name in result.names:
            formatter.text(name)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
