"""
Configuration loader.
Reads directive settings from mcpgen.yaml.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .paths import config_path
from ..directives.model import DEFAULT_DIRECTIVE_CONFIG, DirectiveConfig
from ..errors import ConfigError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def read_yaml(path: Path):
    """Read a YAML document, wrapping I/O and syntax problems in ConfigError."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    try:
        return _yaml.load(text)
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def _read_yaml_map(path: Path) -> dict:
    raw = read_yaml(path) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_directive_config(path: Path) -> DirectiveConfig:
    """
    Load directive settings from an explicit config file.

    Args:
        path: Path to a YAML file with an optional top-level 'directives' mapping

    Returns:
        Parsed DirectiveConfig (defaults for absent keys)
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    raw = _read_yaml_map(path)
    section = raw.get("directives")
    if section is None:
        logger.debug("No 'directives' section in %s, using defaults", path)
        return DEFAULT_DIRECTIVE_CONFIG

    try:
        cfg = DirectiveConfig.from_dict(section)
    except ConfigError as e:
        raise type(e)(f"{path}: {e}") from e

    logger.info("Loaded directive config from %s (marker @%s, %d literal prefixes)",
                path, cfg.marker_tag, len(cfg.literal_prefixes))
    return cfg


def resolve_directive_config(explicit: Optional[Path] = None, root: Optional[Path] = None) -> DirectiveConfig:
    """
    Pick the directive configuration for a run.

    An explicit path must exist. Otherwise <root>/mcpgen.yaml is used
    when present, and built-in defaults when not.
    """
    if explicit is not None:
        return load_directive_config(explicit)

    candidate = config_path(root if root is not None else Path.cwd())
    if candidate.is_file():
        return load_directive_config(candidate)

    logger.debug("No %s found, using default directive config", candidate)
    return DEFAULT_DIRECTIVE_CONFIG


__all__ = ["read_yaml", "load_directive_config", "resolve_directive_config"]
