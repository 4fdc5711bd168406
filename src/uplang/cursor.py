"""Forward-only line cursor shared by every level of a parse."""

from __future__ import annotations

from typing import Iterator


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n``, dropping a trailing ``\\r`` from each line.

    A final newline ends the last line rather than starting an empty one.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LineCursor:
    """Forward-only enumeration of ``(line_number, raw_line)`` pairs.

    Line numbers are 1-based. The cursor never moves backwards; nested
    block/list/multiline parsers consume from the same instance the
    top-level loop continues from.
    """

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._pos = 0

    @classmethod
    def from_text(cls, text: str) -> "LineCursor":
        return cls(split_lines(text))

    @property
    def line_number(self) -> int:
        """Number of the last consumed line (0 before the first)."""
        return self._pos

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return self

    def __next__(self) -> tuple[int, str]:
        if self._pos >= len(self._lines):
            raise StopIteration
        self._pos += 1
        return self._pos, self._lines[self._pos - 1]
