"""
Directive configuration model.
Holds the marker tag and the literal directive prefixes recognized in comments.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Tuple

from .lines import is_valid_tag_name
from ..errors import DirectiveConfigError

MCP_TAG = "mcp"
DEFAULT_LITERAL_PREFIXES: Tuple[str, ...] = ("buf:lint:ignore",)


def _normalize_prefixes(prefixes: Iterable[str] | str) -> Tuple[str, ...]:
    # A bare string is one prefix, not a sequence of one-letter prefixes
    if isinstance(prefixes, str):
        prefixes = (prefixes,)
    result = []
    for prefix in prefixes:
        if not isinstance(prefix, str):
            raise DirectiveConfigError(
                f"literal_prefixes: expected string, got {type(prefix).__name__}"
            )
        prefix = prefix.strip()
        if prefix and prefix not in result:
            result.append(prefix)
    return tuple(result)


@dataclass(frozen=True)
class DirectiveConfig:
    """
    Which comment lines count as directives.

    Passed explicitly to the cleaner, so new directive types
    are added by configuration rather than code changes.
    """

    marker_tag: str = MCP_TAG
    """Tag that marks an element for exposure (without the leading '@')."""

    literal_prefixes: Tuple[str, ...] = DEFAULT_LITERAL_PREFIXES
    """Non-'@' directive prefixes, matched against the start of a trimmed line."""

    def __post_init__(self) -> None:
        if not isinstance(self.marker_tag, str) or not is_valid_tag_name(self.marker_tag):
            raise DirectiveConfigError(f"marker_tag: invalid tag name {self.marker_tag!r}")
        object.__setattr__(self, "literal_prefixes", _normalize_prefixes(self.literal_prefixes))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DirectiveConfig":
        """Create an instance from a mapping (from YAML)."""
        if not isinstance(data, dict):
            raise DirectiveConfigError(
                f"directives: expected mapping, got {type(data).__name__}"
            )
        unknown = set(data) - {"marker_tag", "literal_prefixes"}
        if unknown:
            raise DirectiveConfigError(f"directives: unknown keys {sorted(unknown)}")

        prefixes = data.get("literal_prefixes", DEFAULT_LITERAL_PREFIXES)
        if isinstance(prefixes, str):
            prefixes = [prefixes]
        elif prefixes is None:
            prefixes = []
        elif not isinstance(prefixes, (list, tuple)):
            raise DirectiveConfigError(
                f"literal_prefixes: expected list, got {type(prefixes).__name__}"
            )

        return cls(
            marker_tag=data.get("marker_tag", MCP_TAG),
            literal_prefixes=tuple(prefixes),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a mapping for YAML."""
        return {
            "marker_tag": self.marker_tag,
            "literal_prefixes": list(self.literal_prefixes),
        }

    def with_prefixes(self, *extra: str) -> "DirectiveConfig":
        """Copy of this config with additional literal prefixes."""
        return replace(self, literal_prefixes=self.literal_prefixes + tuple(extra))


DEFAULT_DIRECTIVE_CONFIG = DirectiveConfig()


__all__ = [
    "MCP_TAG",
    "DEFAULT_LITERAL_PREFIXES",
    "DirectiveConfig",
    "DEFAULT_DIRECTIVE_CONFIG",
]
