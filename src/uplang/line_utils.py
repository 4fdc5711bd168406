"""Line-level helpers: key splitting, inline lists and dedent."""

from __future__ import annotations

import re

from .values import VString

_DEDENT_RE = re.compile(r"^[0-9]+$")

FENCE = "```"


def is_skippable(stripped: str) -> bool:
    """Blank and ``#`` comment lines never produce nodes or elements."""
    return not stripped or stripped.startswith("#")


def split_key_line(line: str) -> tuple[str, str]:
    """Split a line into ``(key_part, value_part)`` at the first whitespace.

    The value part is stripped; it is empty when the line has no whitespace.
    """
    parts = line.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def split_type_annotation(key_part: str) -> tuple[str, str | None]:
    """Split ``key!type`` at the first ``!``.

    ``"age!int"`` → ``("age", "int")``; ``"age"`` → ``("age", None)``.
    The annotation is kept verbatim and may be empty (``"age!"``).
    """
    key, sep, annotation = key_part.partition("!")
    if not sep:
        return key, None
    return key, annotation


def is_inline_list(text: str) -> bool:
    return text.startswith("[") and text.endswith("]") and text != "["


def parse_inline_list(text: str) -> list[VString]:
    """``[a, b, c]`` → ``[VString("a"), VString("b"), VString("c")]``.

    Segments are split on every comma; there is no quoting or nesting.
    """
    inner = text
    if inner.startswith("["):
        inner = inner[1:]
    if inner.endswith("]"):
        inner = inner[:-1]
    inner = inner.strip()
    if not inner:
        return []
    return [VString(segment.strip()) for segment in inner.split(",")]


def dedent_amount(annotation: str | None) -> int | None:
    """Return the dedent width encoded in a multiline annotation, if any."""
    if annotation is None or not _DEDENT_RE.match(annotation):
        return None
    return int(annotation)


def dedent(lines: list[str], amount: int) -> list[str]:
    """Drop *amount* leading characters from each line long enough to lose them.

    Lines shorter than *amount* are returned unchanged, not emptied.
    """
    return [line[amount:] if len(line) >= amount else line for line in lines]
