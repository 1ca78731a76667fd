from __future__ import annotations

import logging
from pathlib import Path

from .ast import AstNode
from .errors import ParseError
from .parser import DEFAULT_MAX_DEPTH, Parser


logger = logging.getLogger(__name__)


def parse(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> AstNode:
    """Parse a whole Did document into a tree of nodes.

    Raises ``ParseError`` at the first structural error and
    ``NestingLimitError`` if containers nest deeper than ``max_depth``.
    """
    logger.debug("parsing %d characters", len(text))
    try:
        return Parser(text, max_depth=max_depth).parse()
    except ParseError as e:
        logger.debug("parse failed: %s at %s", e.expectation.value, e.position.format())
        raise


def parse_node(text: str, node_type: type, *, max_depth: int = DEFAULT_MAX_DEPTH) -> AstNode:
    """Parse a document that must consist of exactly one ``node_type`` value.

    ``node_type`` is one of the node classes, e.g. ``ListNode``.
    """
    return Parser(text, max_depth=max_depth).parse_as(node_type)


def parse_file(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> AstNode:
    p = Path(path).expanduser().resolve()
    # Decoded without newline translation so indices match the file.
    src = p.read_bytes().decode(encoding)
    logger.debug("read %s", p)
    return parse(src, max_depth=max_depth)
