"""
Marker tag detection in element comments.
"""

from __future__ import annotations

from .lines import is_tag_line, is_valid_tag_name, split_lines
from .model import MCP_TAG


def has_tag(comment: str, tag: str = MCP_TAG) -> bool:
    """
    Check whether any line of the comment starts with the "@<tag>" marker.

    The marker must open the trimmed line and be followed by end of line
    or whitespace. Mentions elsewhere in a line do not count.

    Args:
        comment: Raw comment text, possibly multi-line
        tag: Tag name without the leading "@"

    Returns:
        True if at least one line carries the marker

    Raises:
        ValueError: If tag is not a valid tag name (e.g. "" or "@mcp")
    """
    if not is_valid_tag_name(tag):
        raise ValueError(f"Invalid tag name: {tag!r}")
    return any(is_tag_line(line, tag) for line in split_lines(comment))


def has_mcp_tag(comment: str) -> bool:
    """Shorthand for has_tag(comment, "mcp")."""
    return has_tag(comment, MCP_TAG)


__all__ = ["has_tag", "has_mcp_tag"]
