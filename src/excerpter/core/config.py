"""Layered configuration for Excerpter.

Resolution order (highest priority first):
1) Explicit overlay file (``--config PATH``)
2) ``EXCERPTER_CONFIG`` environment variable pointing at an overlay file
3) Bundled defaults: ``excerpter/data/config/defaults.yaml``

The merged document is validated against
``excerpter/data/schemas/config.schema.yaml`` (JSON Schema in YAML).
"""
from __future__ import annotations

import logging
import os
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from jsonschema import Draft202012Validator

from excerpter.core.excerpts.directives import CommentWrapper
from excerpter.core.exceptions import ConfigurationError
from excerpter.core.utils.merge import deep_merge
from excerpter.data import read_text, read_yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EXCERPTER_CONFIG"


def _read_overlay(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as err:
        raise ConfigurationError(
            f"Config file not found: {path}", context={"path": str(path)}
        ) from err
    except yaml.YAMLError as err:
        raise ConfigurationError(
            f"Invalid YAML in {path}: {err}", context={"path": str(path)}
        ) from err
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}",
            context={"path": str(path)},
        )
    return data


def validate_config(config: Dict[str, Any], *, source: str = "<merged>") -> None:
    """Validate ``config`` against the bundled schema.

    Raises:
        ConfigurationError: listing every schema violation
    """
    schema = read_yaml("schemas", "config.schema.yaml")
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(config), key=lambda e: [str(p) for p in e.path])
    if not errors:
        return
    details = []
    for err in errors:
        location = "/".join(str(p) for p in err.path) or "<root>"
        details.append(f"{location}: {err.message}")
    raise ConfigurationError(
        f"Invalid configuration ({source}):\n  " + "\n  ".join(details),
        context={"source": source, "errors": details},
    )


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load defaults, apply the overlay (if any), and validate."""
    config = dict(read_yaml("config", "defaults.yaml"))
    source = "defaults"

    overlay_path = config_path
    if overlay_path is None and os.environ.get(CONFIG_ENV_VAR):
        overlay_path = Path(os.environ[CONFIG_ENV_VAR])

    if overlay_path is not None:
        overlay_path = Path(overlay_path)
        config = deep_merge(config, _read_overlay(overlay_path))
        source = str(overlay_path)
        logger.debug("Applied config overlay %s", overlay_path)

    validate_config(config, source=source)
    return config


class ExcerptConfig:
    """Typed accessor over the merged configuration.

    Usage:
        cfg = ExcerptConfig(config_path=Path("excerpter.yaml"))
        result = weave(path, text, wrappers=cfg.comment_wrappers)
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        *,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        if data is not None:
            validate_config(data, source="<data>")
            self._config = data
        else:
            self._config = load_config(config_path)

    def section(self, key: str) -> Dict[str, Any]:
        return self._config.get(key, {}) or {}

    @cached_property
    def comment_wrappers(self) -> Tuple[CommentWrapper, ...]:
        wrappers = self.section("excerpts").get("commentWrappers") or []
        return tuple(CommentWrapper(str(w["prefix"]), str(w["suffix"])) for w in wrappers)

    @cached_property
    def strict(self) -> bool:
        return bool(self.section("excerpts").get("strict", False))

    @cached_property
    def plaster(self) -> Optional[str]:
        return self.section("render").get("plaster")

    @cached_property
    def markdown_template(self) -> str:
        return str(self.section("render").get("markdownTemplate") or "excerpt.md.j2")

    def markdown_template_source(self) -> str:
        """Template text: a file path if it exists, else a bundled template name."""
        name = self.markdown_template
        path = Path(name)
        if path.is_file():
            return path.read_text(encoding="utf-8")
        try:
            return read_text("templates", name)
        except FileNotFoundError as err:
            raise ConfigurationError(
                f"Markdown template not found: {name}", context={"template": name}
            ) from err

    @cached_property
    def log_level(self) -> str:
        return str(self.section("logging").get("level") or "WARNING")


__all__ = ["CONFIG_ENV_VAR", "ExcerptConfig", "load_config", "validate_config"]
