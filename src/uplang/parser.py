"""Parser: turns UP text into a Document in a single forward pass.

Every nested form (block, list, multiline text) consumes lines from the
same :class:`LineCursor`, so when a nested parser returns, the caller
continues right after the closing delimiter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .cursor import LineCursor
from .document import Document, Node
from .errors import InvalidList, InvalidSyntax, ParseError, UnexpectedEof
from .line_utils import (
    FENCE,
    dedent,
    dedent_amount,
    is_inline_list,
    is_skippable,
    parse_inline_list,
    split_key_line,
    split_type_annotation,
)
from .values import Value, VBlock, VList, VString

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: str, *, strict: bool = False) -> Document:
    """Parse UP *text* and return a Document.

    Raises :class:`ParseError` on the first error; nothing partial is
    returned.
    """
    return Parser(strict=strict).parse_document(text)


@dataclass
class Parser:
    """Parser configuration.

    ``strict``: treat end of input before ``}``, ``]`` or a closing fence as
    :class:`UnexpectedEof`, an unclosed inline list inside a bracketed
    list as :class:`InvalidList`, and a key line with an empty key (it starts
    with ``!``) as :class:`InvalidSyntax`. The default is lenient: input
    running out closes whatever is open, and ``!int 5`` is a node whose key
    is the empty string.
    """

    strict: bool = False

    def parse_document(self, text: str) -> Document:
        cursor = LineCursor.from_text(text)
        doc = Document()

        for lineno, line in cursor:
            if is_skippable(line.strip()):
                continue
            try:
                node = self._parse_key_line(line, cursor)
            except InvalidSyntax as exc:
                raise InvalidSyntax(f"line {lineno}: {exc.message}", line=lineno) from exc
            except ParseError as exc:
                if exc.line is None:
                    exc.line = lineno
                raise
            logger.debug("line %d: parsed node %r", lineno, node.key)
            doc.nodes.append(node)

        return doc

    # -- Key line -------------------------------------------------------

    def _parse_key_line(self, line: str, cursor: LineCursor) -> Node:
        key_part, value_part = split_key_line(line)
        key, annotation = split_type_annotation(key_part)
        if self.strict and not key:
            raise InvalidSyntax("empty key")
        value = self._parse_value(value_part, annotation, cursor)
        return Node(key=key, type_annotation=annotation, value=value)

    def _parse_value(self, text: str, annotation: str | None, cursor: LineCursor) -> Value:
        if text == "{":
            return self._parse_block(cursor)
        if text == "[":
            return self._parse_list(cursor)
        if text.startswith(FENCE):
            return self._parse_multiline(annotation, cursor)
        if is_inline_list(text):
            return VList(parse_inline_list(text))
        return VString(text)

    # -- Block ----------------------------------------------------------

    def _parse_block(self, cursor: LineCursor) -> VBlock:
        opened_at = cursor.line_number
        block = VBlock()
        logger.debug("line %d: block opened", opened_at)

        for lineno, line in cursor:
            stripped = line.strip()
            if stripped == "}":
                logger.debug("line %d: block closed with %d entries", lineno, len(block.entries))
                return block
            if is_skippable(stripped):
                continue
            node = self._parse_key_line(line, cursor)
            block.entries[node.key] = node.value

        self._end_of_input("block", opened_at, cursor)
        return block

    # -- Bracketed list -------------------------------------------------

    def _parse_list(self, cursor: LineCursor) -> VList:
        opened_at = cursor.line_number
        items: list[Value] = []
        logger.debug("line %d: list opened", opened_at)

        for lineno, line in cursor:
            stripped = line.strip()
            if stripped == "]":
                logger.debug("line %d: list closed with %d items", lineno, len(items))
                return VList(items)
            if is_skippable(stripped):
                continue
            if is_inline_list(stripped):
                items.append(VList(parse_inline_list(stripped)))
            elif stripped.startswith("{"):
                items.append(self._parse_block(cursor))
            else:
                if self.strict and stripped.startswith("["):
                    raise InvalidList(f"unterminated inline list {stripped!r}", line=lineno)
                items.append(VString(stripped))

        self._end_of_input("list", opened_at, cursor)
        return VList(items)

    # -- Multiline text -------------------------------------------------

    def _parse_multiline(self, annotation: str | None, cursor: LineCursor) -> VString:
        opened_at = cursor.line_number
        content: list[str] = []
        closed = False
        logger.debug("line %d: multiline text opened", opened_at)

        for lineno, line in cursor:
            if line.strip() == FENCE:
                logger.debug("line %d: multiline text closed after %d lines", lineno, len(content))
                closed = True
                break
            content.append(line)

        if not closed:
            self._end_of_input("multiline text", opened_at, cursor)

        amount = dedent_amount(annotation)
        if amount is not None:
            content = dedent(content, amount)
        return VString("\n".join(content))

    def _end_of_input(self, what: str, opened_at: int, cursor: LineCursor) -> None:
        if self.strict:
            raise UnexpectedEof(
                f"{what} opened at line {opened_at} is not closed",
                line=cursor.line_number,
            )
        logger.debug("%s opened at line %d closed by end of input", what, opened_at)
