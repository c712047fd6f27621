"""
Directive comments: marker detection and directive stripping.
"""

from __future__ import annotations

from .cleaner import CleanedComment, CommentCleaner, clean_comment
from .detector import has_mcp_tag, has_tag
from .lines import is_directive_line, is_tag_line
from .model import (
    DEFAULT_DIRECTIVE_CONFIG,
    DEFAULT_LITERAL_PREFIXES,
    MCP_TAG,
    DirectiveConfig,
)

__all__ = [
    "CleanedComment",
    "CommentCleaner",
    "clean_comment",
    "has_tag",
    "has_mcp_tag",
    "is_directive_line",
    "is_tag_line",
    "DirectiveConfig",
    "DEFAULT_DIRECTIVE_CONFIG",
    "DEFAULT_LITERAL_PREFIXES",
    "MCP_TAG",
]
