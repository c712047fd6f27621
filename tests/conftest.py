from pathlib import Path

import pytest

from mcpgen.directives import CommentCleaner, DirectiveConfig
from tests.infrastructure.file_utils import write


@pytest.fixture
def cleaner() -> CommentCleaner:
    """Cleaner with the default directive configuration."""
    return CommentCleaner()


@pytest.fixture
def custom_config() -> DirectiveConfig:
    """Configuration with an extra literal prefix and a non-default marker."""
    return DirectiveConfig(
        marker_tag="tool",
        literal_prefixes=("buf:lint:ignore", "nolint"),
    )


@pytest.fixture
def elements_file(tmp_path: Path) -> Path:
    """YAML list of schema elements, two of them tagged."""
    return write(
        tmp_path / "elements.yaml",
        """\
- name: CreateItem
  comment: |-
    CreateItem creates a new item
    @mcp
    Returns the created item with ID
- name: DeleteItem
  comment: DeleteItem removes an item
- name: ListItems
  comment: |-
    buf:lint:ignore RPC_RESPONSE_STANDARD_NAME
    @mcp Enable listing
    ListItems lists all items
""",
    )


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    # CLI log level must not depend on the developer's shell
    monkeypatch.delenv("MCPGEN_DEBUG", raising=False)
