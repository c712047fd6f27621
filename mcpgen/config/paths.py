from __future__ import annotations

from pathlib import Path

# Single source of truth for configuration file location.
CONFIG_FILE = "mcpgen.yaml"


def config_path(root: Path) -> Path:
    """Path to the project configuration file <root>/mcpgen.yaml."""
    return (root / CONFIG_FILE).resolve()


__all__ = ["CONFIG_FILE", "config_path"]
