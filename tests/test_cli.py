import json
from pathlib import Path

import pytest

from mcpgen.cli import main
from tests.infrastructure.cli_utils import run_cli
from tests.infrastructure.file_utils import write, write_config


class TestHasTagCommand:

    def test_tagged_comment(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        rc = main(["has-tag", "Doc\n@mcp"])
        assert rc == 0
        assert json.loads(capsys.readouterr().out) == {"has_tag": True, "tag": "mcp"}

    def test_untagged_comment_exits_1(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        rc = main(["has-tag", "This has @mcp in the middle"])
        assert rc == 1
        assert json.loads(capsys.readouterr().out)["has_tag"] is False

    def test_explicit_tag(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["has-tag", "@internal", "--tag", "internal"]) == 0
        assert json.loads(capsys.readouterr().out)["tag"] == "internal"

    def test_tag_from_project_config(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        write_config(tmp_path, marker_tag="tool")
        assert main(["has-tag", "@tool enable"]) == 0
        assert json.loads(capsys.readouterr().out)["tag"] == "tool"

    def test_comment_from_file(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = write(tmp_path / "c.txt", "  @mcp\n  Enable this endpoint\n")
        assert main(["has-tag", "--file", str(path)]) == 0

    def test_tag_with_at_sign_rejected(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["has-tag", "@mcp", "--tag", "@mcp"]) == 2
        assert "Invalid tag name" in capsys.readouterr().err

    def test_comment_and_file_are_exclusive(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = write(tmp_path / "c.txt", "@mcp\n")
        with pytest.raises(SystemExit) as exc:
            main(["has-tag", "Doc", "--file", str(path)])
        assert exc.value.code == 2
        assert "mutually exclusive" in capsys.readouterr().err

    def test_unreadable_comment_file(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = write(tmp_path / "c.txt", "@mcp\n")

        def deny(self, *args, **kwargs):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_text", deny)
        assert main(["has-tag", "--file", str(path)]) == 2
        assert "Cannot read comment file" in capsys.readouterr().err

    def test_non_utf8_comment_file(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "c.txt"
        path.write_bytes(b"\xff\xfe\x00@mcp")
        assert main(["clean", "--file", str(path)]) == 2
        assert "Cannot read comment file" in capsys.readouterr().err

    def test_missing_comment_file(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["has-tag", "--file", str(tmp_path / "none.txt")]) == 2
        assert "not found" in capsys.readouterr().err


class TestCleanCommand:

    def test_clean_literal(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        rc = main(["clean", "buf:lint:ignore\n@mcp Enable this endpoint\n@ignore-comment some other tag\nActual description here"])
        assert rc == 0
        assert capsys.readouterr().out == "Actual description here\n"

    def test_clean_all_directives_prints_nothing(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["clean", "@mcp"]) == 0
        assert capsys.readouterr().out == ""

    def test_clean_with_config(self, capsys, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        cfg = write_config(tmp_path, literal_prefixes=["nolint"], filename="custom.yaml")
        assert main(["clean", "nolint\nDoc", "--config", str(cfg)]) == 0
        assert capsys.readouterr().out == "Doc\n"

    def test_bad_config_exit_code(self, capsys, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        write(tmp_path / "mcpgen.yaml", "- not a mapping\n")
        assert main(["clean", "Doc"]) == 2
        assert "mapping" in capsys.readouterr().err


class TestSelectCommand:

    def test_select(self, capsys, elements_file: Path, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["select", str(elements_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [t["name"] for t in data] == ["CreateItem", "ListItems"]
        assert data[1]["description"] == "ListItems lists all items"

    def test_select_missing_file(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["select", str(tmp_path / "none.yaml")]) == 2


def test_module_entrypoint_reads_stdin(tmp_path: Path):
    cp = run_cli(tmp_path, "clean", stdin="This is a method description\n@mcp\nAdditional details here")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == "This is a method description\nAdditional details here\n"


def test_module_entrypoint_version(tmp_path: Path):
    cp = run_cli(tmp_path, "--version")
    assert cp.returncode == 0
    assert cp.stdout.startswith("mcpgen ")
