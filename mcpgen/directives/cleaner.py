"""
Directive stripping for documentation text.
Removes directive lines from element comments, keeping prose lines verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .lines import is_directive_line, join_lines, split_lines
from .model import DEFAULT_DIRECTIVE_CONFIG, DirectiveConfig


@dataclass(frozen=True)
class CleanedComment:
    """Result of splitting a comment into documentation text and directives."""
    text: str
    directives: List[str] = field(default_factory=list)  # trimmed, in input order

    @property
    def is_empty(self) -> bool:
        return not self.text


class CommentCleaner:
    """Strips directive lines from comments according to a DirectiveConfig."""

    def __init__(self, config: DirectiveConfig = DEFAULT_DIRECTIVE_CONFIG):
        self.config = config

    def is_directive(self, line: str) -> bool:
        return is_directive_line(
            line,
            literal_prefixes=self.config.literal_prefixes,
            marker_tag=self.config.marker_tag,
        )

    def split(self, comment: str) -> CleanedComment:
        """
        Separate documentation lines from directive lines.

        Args:
            comment: Raw comment text

        Returns:
            CleanedComment with the retained text and the removed directives
        """
        kept: List[str] = []
        directives: List[str] = []
        for line in split_lines(comment):
            if self.is_directive(line):
                directives.append(line.strip())
            else:
                kept.append(line)
        return CleanedComment(text=join_lines(kept), directives=directives)

    def clean(self, comment: str) -> str:
        """Return the comment without directive lines."""
        return self.split(comment).text


_DEFAULT_CLEANER = CommentCleaner()


def clean_comment(comment: str, config: Optional[DirectiveConfig] = None) -> str:
    """
    Strip all directive lines from a comment.

    Non-directive lines keep their original text and order.
    A comment made only of directives becomes "".

    Args:
        comment: Raw comment text
        config: Directive configuration (defaults to DEFAULT_DIRECTIVE_CONFIG)

    Returns:
        Cleaned documentation text
    """
    cleaner = _DEFAULT_CLEANER if config is None else CommentCleaner(config)
    return cleaner.clean(comment)


__all__ = ["CleanedComment", "CommentCleaner", "clean_comment"]
