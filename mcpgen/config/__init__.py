"""
Configuration loading for mcpgen.
"""

from __future__ import annotations

from .load import load_directive_config, read_yaml, resolve_directive_config
from .paths import CONFIG_FILE, config_path

__all__ = [
    "CONFIG_FILE",
    "config_path",
    "read_yaml",
    "load_directive_config",
    "resolve_directive_config",
]
