"""``up-parse`` command: parse a UP file and print what it contains.

Also runnable as ``python -m uplang.cli``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO

from .document import Document, Node
from .errors import ParseError, UnexpectedEof
from .parser import parse
from .values import Value, VBlock, VList, VString, VTable

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Debug rendering
# ---------------------------------------------------------------------------

def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _fmt_value(value: Value, indent: int) -> list[str]:
    """Render *value* as lines; the first line continues its header."""
    pad = "  " * indent
    if isinstance(value, VBlock):
        if not value.entries:
            return ["VBlock {}"]
        lines = ["VBlock {"]
        for key, item in value.entries.items():
            sub = _fmt_value(item, indent + 1)
            lines.append(f"{pad}  {key}: {sub[0]}")
            lines.extend(sub[1:])
        lines.append(f"{pad}}}")
        return lines
    if isinstance(value, VList):
        if not value.items:
            return ["VList []"]
        lines = ["VList ["]
        for i, item in enumerate(value.items, 1):
            sub = _fmt_value(item, indent + 1)
            lines.append(f"{pad}  {i}: {sub[0]}")
            lines.extend(sub[1:])
        lines.append(f"{pad}]")
        return lines
    if isinstance(value, VTable):
        return [str(value)]
    return [f"VString({_quote(value.text)})"]


def format_node(node: Node) -> str:
    header = node.key if node.type_annotation is None else f"{node.key}!{node.type_annotation}"
    lines = _fmt_value(node.value, 0)
    return "\n".join([f"{header}: {lines[0]}", *lines[1:]])


def format_document(doc: Document) -> str:
    """Debug dump of *doc*, one entry per top-level node."""
    if not doc.nodes:
        return "Document (no nodes)"
    body = [format_node(node) for node in doc]
    return f"Document ({len(doc)} nodes)\n" + "\n".join(body)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Report usage errors with exit status 1 like every other failure."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="up-parse", description="Parse a UP file and print its nodes")
    parser.add_argument("file", help="path to a .up file")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail on unterminated blocks, lists and multiline text",
    )
    parser.add_argument("--json", action="store_true", help="print the document as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="log parser activity to stderr")
    return parser


def run(path: str, *, strict: bool = False, as_json: bool = False, dest: IO[str] | None = None) -> int:
    """Parse *path* and print the result to *dest*. Returns the exit status."""
    dest = dest if dest is not None else sys.stdout
    try:
        with open(path, encoding="utf-8") as fh:
            content = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading file '{path}': {exc}", file=sys.stderr)
        return 1

    try:
        doc = parse(content, strict=strict)
    except ParseError as exc:
        logger.debug("parse of %s failed at line %s", path, exc.line)
        detail = f" ({exc.message})" if isinstance(exc, UnexpectedEof) and exc.message else ""
        print(f"Parse error: {exc}{detail}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(doc.to_python(), indent=2, ensure_ascii=False), file=dest)
    else:
        print(format_document(doc), file=dest)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return run(args.file, strict=args.strict, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
