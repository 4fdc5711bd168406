"""uplang — parser for the line-oriented UP configuration format."""

from .cursor import LineCursor
from .document import Document, Node
from .errors import InvalidList, InvalidSyntax, ParseError, UnexpectedEof
from .parser import Parser, parse
from .values import Value, VBlock, VList, VString, VTable

__all__ = [
    "parse",
    "Parser",
    "Document",
    "Node",
    "Value",
    "VString",
    "VBlock",
    "VList",
    "VTable",
    "ParseError",
    "InvalidSyntax",
    "UnexpectedEof",
    "InvalidList",
    "LineCursor",
]
