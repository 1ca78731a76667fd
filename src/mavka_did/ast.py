from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union

from .spans import Position


class NodeKind(str, Enum):
    EMPTY = "empty"
    LOGICAL = "logical"
    NUMBER = "number"
    TEXT = "text"
    LIST = "list"
    DICTIONARY = "dictionary"
    OBJECT = "object"


def _context() -> Position:
    # Where the node's first character is; not part of the node's value.
    return field(default_factory=Position, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class EmptyNode:
    context: Position = _context()

    kind = NodeKind.EMPTY


@dataclass(frozen=True, slots=True)
class LogicalNode:
    value: bool
    context: Position = _context()

    kind = NodeKind.LOGICAL


@dataclass(frozen=True, slots=True)
class NumberNode:
    value: int | float  # int always fits in 64 signed bits
    context: Position = _context()

    kind = NodeKind.NUMBER

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)


@dataclass(frozen=True, slots=True)
class TextNode:
    value: str  # escape pairs are kept as written, e.g. "\\n" stays two characters
    context: Position = _context()

    kind = NodeKind.TEXT


@dataclass(frozen=True, slots=True)
class ListNode:
    entries: tuple["AstNode", ...] = ()
    context: Position = _context()

    kind = NodeKind.LIST

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator["AstNode"]:
        return iter(self.entries)


@dataclass(frozen=True, slots=True)
class DictionaryEntryNode:
    key: TextNode | NumberNode
    value: "AstNode"
    context: Position = _context()


@dataclass(frozen=True, slots=True)
class DictionaryNode:
    entries: tuple[DictionaryEntryNode, ...] = ()
    context: Position = _context()

    kind = NodeKind.DICTIONARY

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[DictionaryEntryNode]:
        return iter(self.entries)


@dataclass(frozen=True, slots=True)
class ObjectEntryNode:
    key: TextNode
    value: "AstNode"
    context: Position = _context()


@dataclass(frozen=True, slots=True)
class ObjectNode:
    name: TextNode
    entries: tuple[ObjectEntryNode, ...] = ()
    context: Position = _context()

    kind = NodeKind.OBJECT

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ObjectEntryNode]:
        return iter(self.entries)


AstNode = Union[
    EmptyNode,
    LogicalNode,
    NumberNode,
    TextNode,
    ListNode,
    DictionaryNode,
    ObjectNode,
]

NODE_TYPES: tuple[type, ...] = (
    EmptyNode,
    LogicalNode,
    NumberNode,
    TextNode,
    ListNode,
    DictionaryNode,
    ObjectNode,
)
