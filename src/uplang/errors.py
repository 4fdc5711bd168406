"""Parse errors raised by uplang."""

from __future__ import annotations


class ParseError(Exception):
    """Base class for every failure of :func:`uplang.parse`.

    ``line`` is the 1-based source line the error is attributed to, or
    ``None`` when it has not been located yet.
    """

    def __init__(self, message: str = "", line: int | None = None) -> None:
        self.message = message
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message and self.line == other.line

    __hash__ = Exception.__hash__


class InvalidSyntax(ParseError):
    def __str__(self) -> str:
        return f"Invalid syntax: {self.message}"


class UnexpectedEof(ParseError):
    """Input ended inside a block, list or multiline text (strict mode)."""

    def __str__(self) -> str:
        return "Unexpected end of input"


class InvalidList(ParseError):
    """A list element opens an inline list without closing it (strict mode)."""

    def __str__(self) -> str:
        return f"Invalid list: {self.message}"
