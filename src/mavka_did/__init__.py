from __future__ import annotations

from .api import parse, parse_file, parse_node
from .ast import (
    AstNode,
    DictionaryEntryNode,
    DictionaryNode,
    EmptyNode,
    ListNode,
    LogicalNode,
    NodeKind,
    NumberNode,
    ObjectEntryNode,
    ObjectNode,
    TextNode,
)
from .errors import DidError, Expectation, NestingLimitError, ParseError
from .format import display
from .spans import Offset, Position

__all__ = [
    "AstNode",
    "DictionaryEntryNode",
    "DictionaryNode",
    "DidError",
    "EmptyNode",
    "Expectation",
    "ListNode",
    "LogicalNode",
    "NestingLimitError",
    "NodeKind",
    "NumberNode",
    "ObjectEntryNode",
    "ObjectNode",
    "Offset",
    "ParseError",
    "Position",
    "TextNode",
    "display",
    "parse",
    "parse_file",
    "parse_node",
]
