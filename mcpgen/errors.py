"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from MCPGenUserError.

Programming errors and bugs should NOT inherit from MCPGenUserError;
they propagate with full tracebacks.
"""

from __future__ import annotations


class MCPGenUserError(Exception):
    """
    Base class for all user-facing errors in mcpgen.

    These errors indicate problems that the user can fix:
    unreadable config files, malformed YAML, invalid directive settings.
    """
    pass


class ConfigError(MCPGenUserError):
    """Configuration or input file could not be loaded."""
    pass


class DirectiveConfigError(ConfigError):
    """Directive configuration contains an invalid value."""
    pass


__all__ = ["MCPGenUserError", "ConfigError", "DirectiveConfigError"]
