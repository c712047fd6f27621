"""
mcpgen: directive comments for MCP tool generation.

Detects the @mcp marker in schema element comments and strips
directive lines to produce documentation text.
"""

from __future__ import annotations

from .directives import (
    DEFAULT_DIRECTIVE_CONFIG,
    MCP_TAG,
    CleanedComment,
    CommentCleaner,
    DirectiveConfig,
    clean_comment,
    has_mcp_tag,
    has_tag,
)
from .errors import ConfigError, DirectiveConfigError, MCPGenUserError
from .selection import SchemaElement, ToolSpec, select_tools

__all__ = [
    "has_tag",
    "has_mcp_tag",
    "clean_comment",
    "CommentCleaner",
    "CleanedComment",
    "DirectiveConfig",
    "DEFAULT_DIRECTIVE_CONFIG",
    "MCP_TAG",
    "SchemaElement",
    "ToolSpec",
    "select_tools",
    "MCPGenUserError",
    "ConfigError",
    "DirectiveConfigError",
]
