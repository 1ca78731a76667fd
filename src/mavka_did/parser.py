from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from .ast import (
    AstNode,
    DictionaryEntryNode,
    DictionaryNode,
    EmptyNode,
    ListNode,
    LogicalNode,
    NumberNode,
    ObjectEntryNode,
    ObjectNode,
    TextNode,
)
from .errors import Expectation, NestingLimitError, ParseError
from .lexer import make_info, scan_digits, scan_identifier, scan_text, skip_whitespace
from .spans import Offset, Position


logger = logging.getLogger(__name__)

E = TypeVar("E")

Parsed = tuple[E, Position]

EMPTY_KEYWORD = "пусто"
FALSE_KEYWORD = "ні"
TRUE_KEYWORD = "так"

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1
# Longest digit run that can still fit in 64 bits.
_INT_MAX_DIGITS = len(str(INT_MAX))

DEFAULT_MAX_DEPTH = 128

_ONE_CHAR = Offset.chars(1)


@dataclass(slots=True)
class Parser:
    """Recursive-descent parser over one source text.

    Every ``parse_*`` method takes the position to start at and returns the
    parsed node together with the position just after it, or raises
    ``ParseError`` positioned where the attempt started failing. Positions
    always index into ``src`` directly, nothing is sliced off.
    """

    src: str
    max_depth: int = DEFAULT_MAX_DEPTH
    _depth: int = field(default=0, init=False, repr=False)

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def parse(self) -> AstNode:
        pos = Position() + skip_whitespace(self.src)
        node, pos = self.parse_value(pos)
        pos += skip_whitespace(self.src, pos.index)
        self._expect_eof(pos)
        return node

    def parse_as(self, node_type: type) -> AstNode:
        """Like ``parse`` but the document must be exactly one ``node_type`` value."""
        try:
            method, expectation = _NODE_PARSERS[node_type]
        except KeyError:
            raise TypeError(f"not a node type: {node_type!r}") from None
        pos = Position() + skip_whitespace(self.src)
        try:
            node, pos = method(self, pos)
        except ParseError as e:
            raise self._error(expectation, pos, cause=e) from e
        pos += skip_whitespace(self.src, pos.index)
        self._expect_eof(pos)
        return node

    def _expect_eof(self, pos: Position) -> None:
        if pos.index < len(self.src):
            raise self._error(Expectation.EOF, pos)

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------

    def parse_value(self, pos: Position) -> Parsed[AstNode]:
        alternatives: tuple[Callable[[Position], Parsed[AstNode]], ...] = (
            self.parse_empty,
            self.parse_logical,
            self.parse_number,
            self.parse_text,
            self.parse_dictionary,
            self.parse_object,
            self.parse_list,
        )
        errors: list[ParseError] = []
        for alt in alternatives:
            try:
                return alt(pos)
            except ParseError as e:
                errors.append(e)
        # max() keeps the first of equally advanced failures, i.e. priority order.
        furthest = max(errors, key=lambda e: e.index)
        if furthest.index == pos.index:
            # No alternative got past the first character.
            raise self._error(Expectation.AST_NODE, pos)
        raise self._error(Expectation.AST_NODE, pos, cause=furthest) from furthest

    # ------------------------------------------------------------------
    # Leaf nodes
    # ------------------------------------------------------------------

    def parse_empty(self, pos: Position) -> Parsed[EmptyNode]:
        if not self.src.startswith(EMPTY_KEYWORD, pos.index):
            raise self._error(Expectation.EMPTY_NODE, pos)
        return EmptyNode(context=pos), pos + Offset.chars(len(EMPTY_KEYWORD))

    def parse_logical(self, pos: Position) -> Parsed[LogicalNode]:
        for keyword, value in ((FALSE_KEYWORD, False), (TRUE_KEYWORD, True)):
            if self.src.startswith(keyword, pos.index):
                return LogicalNode(value=value, context=pos), pos + Offset.chars(len(keyword))
        raise self._error(Expectation.LOGICAL_NODE, pos)

    def parse_number(self, pos: Position) -> Parsed[NumberNode]:
        negative = self.src.startswith("-", pos.index)
        start = pos.index + 1 if negative else pos.index
        scanned = scan_digits(self.src, start)
        if scanned is None:
            raise self._error(Expectation.NUMBER_NODE, pos)

        lexeme, is_float = scanned
        value: int | float
        if is_float:
            value = float(lexeme)
            if not math.isfinite(value):
                # Too large for a 64-bit float.
                raise self._error(Expectation.NUMBER_NODE, pos)
        else:
            if len(lexeme.lstrip("0")) > _INT_MAX_DIGITS:
                raise self._error(Expectation.NUMBER_NODE, pos)
            value = int(lexeme)
        if negative:
            value = -value
        if not is_float and not INT_MIN <= value <= INT_MAX:
            raise self._error(Expectation.NUMBER_NODE, pos)

        width = len(lexeme) + (1 if negative else 0)
        return NumberNode(value=value, context=pos), pos + Offset.chars(width)

    def parse_text(self, pos: Position) -> Parsed[TextNode]:
        body = scan_text(self.src, pos.index)
        if body is None:
            raise self._error(Expectation.TEXT_NODE, pos)
        return TextNode(value=body, context=pos), pos + Offset.chars(len(body) + 2)

    def parse_identifier(self, pos: Position) -> Parsed[TextNode]:
        ident = scan_identifier(self.src, pos.index)
        if ident is None:
            raise self._error(Expectation.IDENTIFIER, pos)
        return TextNode(value=ident, context=pos), pos + Offset.chars(len(ident))

    # ------------------------------------------------------------------
    # Composite nodes
    # ------------------------------------------------------------------

    def parse_list(self, pos: Position) -> Parsed[ListNode]:
        start = pos
        pos = self._open(pos, "[", Expectation.LEFT_BRACKET)
        self._enter(start)
        try:
            entries, pos = self._entries(pos, self.parse_value)
        finally:
            self._depth -= 1
        pos = self._close(pos, "]", Expectation.RIGHT_BRACKET)
        return ListNode(entries=tuple(entries), context=start), pos

    def parse_dictionary(self, pos: Position) -> Parsed[DictionaryNode]:
        start = pos
        pos = self._open(pos, "(", Expectation.LEFT_PARENTHESIS)
        self._enter(start)
        try:
            entries, pos = self._entries(pos, self._dictionary_entry)
        finally:
            self._depth -= 1
        pos = self._close(pos, ")", Expectation.RIGHT_PARENTHESIS)
        return DictionaryNode(entries=tuple(entries), context=start), pos

    def parse_object(self, pos: Position) -> Parsed[ObjectNode]:
        start = pos
        name, pos = self.parse_identifier(pos)
        pos = self._open(pos, "(", Expectation.LEFT_PARENTHESIS)
        self._enter(start)
        try:
            entries, pos = self._entries(pos, self._object_entry)
        finally:
            self._depth -= 1
        pos = self._close(pos, ")", Expectation.RIGHT_PARENTHESIS)
        return ObjectNode(name=name, entries=tuple(entries), context=start), pos

    def _entries(
        self,
        pos: Position,
        parse_entry: Callable[[Position], Parsed[E]],
    ) -> Parsed[list[E]]:
        entries: list[E] = []
        while True:
            try:
                entry, pos = parse_entry(pos)
            except ParseError:
                if not entries:
                    # Nothing matched at all: the collection is empty.
                    return entries, pos
                # A separator was consumed, so another entry is mandatory.
                raise
            entries.append(entry)

            ws_before = skip_whitespace(self.src, pos.index)
            comma_at = pos.index + ws_before.index
            if not self.src.startswith(",", comma_at):
                return entries, pos
            ws_after = skip_whitespace(self.src, comma_at + 1)
            pos = pos + ws_before + _ONE_CHAR + ws_after

    def _dictionary_entry(self, pos: Position) -> Parsed[DictionaryEntryNode]:
        start = pos
        key, pos = self._dictionary_key(pos)
        value, pos = self._entry_value(pos)
        return DictionaryEntryNode(key=key, value=value, context=start), pos

    def _dictionary_key(self, pos: Position) -> Parsed[TextNode | NumberNode]:
        # A bare word is always an identifier key, never implicit text.
        for parse_key in (self.parse_identifier, self.parse_text, self.parse_number):
            try:
                return parse_key(pos)
            except ParseError:
                continue
        raise self._error(Expectation.DICTIONARY_ENTRY_KEY, pos)

    def _object_entry(self, pos: Position) -> Parsed[ObjectEntryNode]:
        start = pos
        key, pos = self.parse_identifier(pos)
        value, pos = self._entry_value(pos)
        return ObjectEntryNode(key=key, value=value, context=start), pos

    def _entry_value(self, pos: Position) -> Parsed[AstNode]:
        """Parse ``ws* "=" ws* value`` following an entry key."""
        pos += skip_whitespace(self.src, pos.index)
        if not self.src.startswith("=", pos.index):
            raise self._error(Expectation.EQUALS_SIGN, pos)
        pos += _ONE_CHAR
        pos += skip_whitespace(self.src, pos.index)
        try:
            return self.parse_value(pos)
        except ParseError as e:
            raise self._error(Expectation.ENTRY_VALUE, pos, cause=e) from e

    # ------------------------------------------------------------------
    # Delimiters
    # ------------------------------------------------------------------

    def _open(self, pos: Position, delimiter: str, expectation: Expectation) -> Position:
        if not self.src.startswith(delimiter, pos.index):
            raise self._error(expectation, pos)
        # If the whitespace crosses a line, the delimiter's column is absorbed.
        return pos + (_ONE_CHAR + skip_whitespace(self.src, pos.index + 1))

    def _close(self, pos: Position, delimiter: str, expectation: Expectation) -> Position:
        pos += skip_whitespace(self.src, pos.index)
        if not self.src.startswith(delimiter, pos.index):
            raise self._error(expectation, pos)
        return pos + _ONE_CHAR

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _enter(self, pos: Position) -> None:
        if self._depth >= self.max_depth:
            logger.debug("nesting limit %d reached at %s", self.max_depth, pos.format())
            raise NestingLimitError(pos, self.max_depth)
        self._depth += 1

    def _error(
        self,
        expectation: Expectation,
        pos: Position,
        *,
        cause: ParseError | None = None,
    ) -> ParseError:
        return ParseError.at(expectation, pos, info=make_info(self.src, pos.index), cause=cause)


_NODE_PARSERS: dict[type, tuple[Callable[[Parser, Position], Parsed[AstNode]], Expectation]] = {
    EmptyNode: (Parser.parse_empty, Expectation.EMPTY_NODE),
    LogicalNode: (Parser.parse_logical, Expectation.LOGICAL_NODE),
    NumberNode: (Parser.parse_number, Expectation.NUMBER_NODE),
    TextNode: (Parser.parse_text, Expectation.TEXT_NODE),
    ListNode: (Parser.parse_list, Expectation.LIST_NODE),
    DictionaryNode: (Parser.parse_dictionary, Expectation.DICTIONARY_NODE),
    ObjectNode: (Parser.parse_object, Expectation.OBJECT_NODE),
}
