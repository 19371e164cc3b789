"""Command line entry point: tidy a URL, file or stdin and print the tree."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Sequence
from xml.etree import ElementTree

from .config import Flavor, Settings
from .diagnostics import DiagnosticsLog
from .errors import TidyDomError
from .parsing import parse_string
from .retrieval import fetch_and_parse
from .utils.logging import configure_logging


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tidy-dom",
        description="Clean HTML with tidy and print it as a parsed XML tree.",
    )
    parser.add_argument("source", help="URL, file path, or '-' to read stdin.")
    parser.add_argument("--tool", help="Path to the tidy executable.")
    parser.add_argument(
        "--flavor",
        choices=[flavor.value for flavor in Flavor],
        help="Output flavor requested from tidy (default: xhtml). "
        "html output is not well-formed XML and will not parse.",
    )
    parser.add_argument(
        "--no-indent",
        dest="indent",
        action="store_false",
        default=None,
        help="Do not ask tidy to indent its output.",
    )
    wrap = parser.add_mutually_exclusive_group()
    wrap.add_argument("--wrap", type=int, metavar="N", help="Wrap output at column N.")
    wrap.add_argument(
        "--no-wrap", action="store_true", help="Disable line wrapping."
    )
    parser.add_argument(
        "--keep-namespaces",
        action="store_true",
        help="Leave {namespace} prefixes on element names.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Retain fetched page buffers for inspection.",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Echo tidy's warnings to stderr after the run.",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides: Dict[str, Any] = {}
    if args.tool:
        overrides["tool_path"] = args.tool
    if args.flavor:
        overrides["flavor"] = args.flavor
    if args.indent is not None:
        overrides["indent"] = args.indent
    if args.no_wrap:
        overrides["wrap_column"] = None
    elif args.wrap is not None:
        overrides["wrap_column"] = args.wrap
    if args.keep_namespaces:
        overrides["strip_namespaces"] = False
    if args.debug:
        overrides["debug"] = True
    return Settings(**overrides)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8", errors="replace")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    try:
        settings = _settings_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(settings)

    diagnostics = DiagnosticsLog()
    try:
        if args.source.startswith(("http://", "https://")):
            root = fetch_and_parse(args.source, settings=settings, diagnostics=diagnostics)
        else:
            root = parse_string(
                _read_source(args.source), settings=settings, diagnostics=diagnostics
            )
    except (TidyDomError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        if args.diagnostics and diagnostics.text:
            sys.stderr.write(diagnostics.text)

    print(ElementTree.tostring(root, encoding="unicode"))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI helper
    sys.exit(main())
