"""
Excerpter CLI package.

Commands are auto-discovered from ``cli/commands/*.py``; each module
exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args)``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import add_config_flag, add_json_flag, add_source_arg
from ._utils import load_cli_config, read_source, weave_source

__all__ = [
    "OutputFormatter",
    "add_config_flag",
    "add_json_flag",
    "add_source_arg",
    "load_cli_config",
    "read_source",
    "weave_source",
]
