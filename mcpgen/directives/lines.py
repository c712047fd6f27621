"""
Line classification shared by the tag detector and the comment cleaner.

A comment is a sequence of lines separated by "\n". Every decision here
looks at one line only, after trimming surrounding whitespace.
"""

from __future__ import annotations

import re
from typing import Iterable, List

LINE_SEPARATOR = "\n"

# Tag name right after "@": @mcp, @ignore-comment, @deprecated.since
TAG_NAME_PATTERN = r"[A-Za-z_][\w.:-]*"
_TAG_DIRECTIVE_RE = re.compile(rf"@{TAG_NAME_PATTERN}")
_TAG_NAME_RE = re.compile(rf"{TAG_NAME_PATTERN}")


def split_lines(comment: str) -> List[str]:
    """Split comment text into raw (untrimmed) lines."""
    return comment.split(LINE_SEPARATOR)


def join_lines(lines: Iterable[str]) -> str:
    return LINE_SEPARATOR.join(lines)


def is_valid_tag_name(name: str) -> bool:
    return _TAG_NAME_RE.fullmatch(name) is not None


def is_tag_line(line: str, tag: str) -> bool:
    """
    Check whether a line carries the given tag marker.

    The trimmed line must be exactly "@<tag>" or start with "@<tag>"
    followed by whitespace. "@mcpextra" is not an "@mcp" line.

    Args:
        line: Raw line text (trimmed internally)
        tag: Tag name without the leading "@"

    Returns:
        True if the line starts with the tag marker token
    """
    marker = "@" + tag
    trimmed = line.strip()
    if not trimmed.startswith(marker):
        return False
    rest = trimmed[len(marker):]
    return not rest or rest[0].isspace()


def is_directive_line(
    line: str,
    literal_prefixes: Iterable[str] = (),
    marker_tag: str | None = None,
) -> bool:
    """
    Check whether a line is machine-readable directive metadata.

    A line is a directive when its trimmed text:
    - is a marker_tag line (see is_tag_line);
    - starts with "@" immediately followed by a tag name;
    - equals or starts with one of literal_prefixes.

    Args:
        line: Raw line text (trimmed internally)
        literal_prefixes: Non-"@" directive prefixes, e.g. "buf:lint:ignore"
        marker_tag: Tag that must always be treated as a directive

    Returns:
        True if the line should be dropped from documentation text
    """
    if marker_tag is not None and is_tag_line(line, marker_tag):
        return True

    trimmed = line.strip()
    if not trimmed:
        return False

    if _TAG_DIRECTIVE_RE.match(trimmed):
        return True

    return any(prefix and trimmed.startswith(prefix) for prefix in literal_prefixes)


__all__ = [
    "LINE_SEPARATOR",
    "TAG_NAME_PATTERN",
    "split_lines",
    "join_lines",
    "is_valid_tag_name",
    "is_tag_line",
    "is_directive_line",
]
