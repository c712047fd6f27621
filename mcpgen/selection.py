"""
Selective generation.

Picks the schema elements whose comments carry the marker tag and
builds the tool descriptors a code emitter needs for them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .config.load import read_yaml
from .directives.cleaner import CommentCleaner
from .directives.detector import has_tag
from .directives.model import DEFAULT_DIRECTIVE_CONFIG, DirectiveConfig
from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaElement:
    """A schema node (method, field) together with its leading comment."""
    name: str
    comment: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchemaElement":
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigError(f"element: 'name' must be a non-empty string, got {name!r}")
        comment = data.get("comment") or ""
        if not isinstance(comment, str):
            raise ConfigError(f"element {name}: 'comment' must be a string")
        return cls(name=name, comment=comment)


@dataclass(frozen=True)
class ToolSpec:
    """Descriptor of one exposed tool."""
    name: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "description": self.description}


def select_tools(
    elements: Iterable[SchemaElement],
    config: Optional[DirectiveConfig] = None,
) -> List[ToolSpec]:
    """
    Build tool descriptors for every element tagged with the marker.

    Args:
        elements: Schema elements in declaration order
        config: Directive configuration (defaults to DEFAULT_DIRECTIVE_CONFIG)

    Returns:
        ToolSpec list in input order; untagged elements are skipped
    """
    cfg = config or DEFAULT_DIRECTIVE_CONFIG
    cleaner = CommentCleaner(cfg)

    tools: List[ToolSpec] = []
    for element in elements:
        if not has_tag(element.comment, cfg.marker_tag):
            logger.debug("Skipping %s: no @%s tag", element.name, cfg.marker_tag)
            continue
        tools.append(ToolSpec(
            name=element.name,
            description=cleaner.clean(element.comment).strip(),
        ))

    logger.debug("Selected %d tool(s) for @%s", len(tools), cfg.marker_tag)
    return tools


def load_elements(path: Path) -> List[SchemaElement]:
    """
    Load schema elements from YAML.

    Accepts either a list of {name, comment} mappings or a
    mapping of name -> comment.
    """
    if not path.is_file():
        raise ConfigError(f"Elements file not found: {path}")

    raw = read_yaml(path)
    if raw is None:
        return []
    if isinstance(raw, dict):
        return [SchemaElement.from_dict({"name": k, "comment": v}) for k, v in raw.items()]
    if isinstance(raw, list):
        result = []
        for item in raw:
            if not isinstance(item, dict):
                raise ConfigError(f"{path}: each element must be a mapping, got {type(item).__name__}")
            result.append(SchemaElement.from_dict(item))
        return result
    raise ConfigError(f"{path}: expected a list or mapping of elements")


__all__ = ["SchemaElement", "ToolSpec", "select_tools", "load_elements"]
