"""
Excerpter render command.

SUMMARY: Print the text of one excerpt (default: the whole file without markers)
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
from excerpter.core.excerpts import FULL_REGION, render_markdown, render_text

SUMMARY = "Print the text of one excerpt (default: the whole file without markers)"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_source_arg(parser)
    parser.add_argument(
        "region",
        nargs="?",
        default=FULL_REGION,
        help=f"Region name (default: {FULL_REGION})",
    )
    parser.add_argument(
        "--format",
        choices=["text", "markdown"],
        default="text",
        help="Output format",
    )
    parser.add_argument(
        "--language",
        type=str,
        default="",
        help="Code fence language for markdown output",
    )
    parser.add_argument(
        "--plaster",
        type=str,
        default=None,
        help="Line inserted where content was skipped (overrides config)",
    )
    add_config_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        cfg = load_cli_config(args)
        result = weave_source(args, cfg)
        plaster = args.plaster if args.plaster is not None else cfg.plaster

        if args.format == "markdown":
            content = render_markdown(
                result,
                args.region,
                language=args.language,
                plaster=plaster,
                template=cfg.markdown_template_source(),
            )
        else:
            content = render_text(result, args.region, plaster=plaster)
    except Exception as e:
        formatter.error(e, error_code="render_error")
        return 1

    if formatter.json_mode:
        excerpt = result[args.region]
        formatter.json_output({
            "source": result.source_id,
            "region": args.region,
            "format": args.format,
            "ranges": [r.to_list() for r in excerpt.ranges],
            "content": content,
            "diagnostics": [d.to_dict() for d in result.diagnostics],
        })
    else:
        formatter.text(content, end="")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
