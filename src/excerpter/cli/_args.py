"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag pointing at a YAML overlay."""
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config overlay (default: $EXCERPTER_CONFIG, then bundled defaults)",
    )


def add_source_arg(parser: argparse.ArgumentParser) -> None:
    """Add positional source file argument."""
    parser.add_argument(
        "source",
        type=str,
        help="Source file containing #docregion markers",
    )


__all__ = ["add_json_flag", "add_config_flag", "add_source_arg"]
