"""
Shared test infrastructure for mcpgen tests.
"""

from .cli_utils import run_cli
from .file_utils import write, write_config

__all__ = ["run_cli", "write", "write_config"]
