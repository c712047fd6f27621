from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import resolve_directive_config
from .directives import CommentCleaner, has_tag
from .errors import MCPGenUserError
from .selection import load_elements, select_tools
from .version import tool_version


def _setup_logging() -> None:
    level = logging.DEBUG if os.environ.get("MCPGEN_DEBUG") else logging.WARNING
    root = logging.getLogger("mcpgen")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mcpgen",
        description="Directive comments: @mcp detection and documentation cleanup",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common comment source arguments
    def add_source(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "comment",
            nargs="?",
            default="-",
            help="comment text; '-' or omitted reads stdin",
        )
        sp.add_argument(
            "-f", "--file",
            metavar="PATH",
            help="read the comment from a file instead",
        )

    def add_config(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            metavar="PATH",
            help="directive config (default: ./mcpgen.yaml if present)",
        )

    sp_tag = sub.add_parser("has-tag", help="JSON: does the comment carry the marker tag (exit 1 if not)")
    add_source(sp_tag)
    sp_tag.add_argument("--tag", help="tag name without '@' (default: configured marker tag)")
    add_config(sp_tag)

    sp_clean = sub.add_parser("clean", help="Print the comment without directive lines")
    add_source(sp_clean)
    add_config(sp_clean)

    sp_select = sub.add_parser("select", help="JSON: tools for tagged elements of a YAML file")
    sp_select.add_argument("elements", help="YAML list of {name, comment} or mapping name -> comment")
    add_config(sp_select)

    return p


def _read_comment(ns: argparse.Namespace) -> str:
    """
    Resolve the comment text from CLI arguments.

    Supports three forms:
    - --file PATH
    - '-' (or omitted): stdin
    - literal text argument
    """
    if ns.file:
        path = Path(ns.file)
        if not path.is_file():
            raise ValueError(f"Comment file not found: {path}")
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MCPGenUserError(f"Cannot read comment file {path}: {e}") from e

    if ns.comment == "-":
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise MCPGenUserError(f"Cannot read comment from stdin: {e}") from e

    return ns.comment


def _config_arg(ns: argparse.Namespace) -> Optional[Path]:
    return Path(ns.config) if getattr(ns, "config", None) else None


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    ns = parser.parse_args(argv)
    if getattr(ns, "file", None) and ns.comment != "-":
        parser.error("COMMENT and --file are mutually exclusive")
    _setup_logging()

    try:
        cfg = resolve_directive_config(_config_arg(ns))

        if ns.cmd == "has-tag":
            tag = ns.tag or cfg.marker_tag
            found = has_tag(_read_comment(ns), tag)
            sys.stdout.write(json.dumps({"has_tag": found, "tag": tag}, ensure_ascii=False) + "\n")
            return 0 if found else 1

        if ns.cmd == "clean":
            text = CommentCleaner(cfg).clean(_read_comment(ns))
            sys.stdout.write(text)
            if text and not text.endswith("\n"):
                sys.stdout.write("\n")
            return 0

        if ns.cmd == "select":
            tools = select_tools(load_elements(Path(ns.elements)), cfg)
            sys.stdout.write(json.dumps([t.to_dict() for t in tools], ensure_ascii=False) + "\n")
            return 0

    except MCPGenUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
