from __future__ import annotations

import math
from decimal import Decimal

from . import ast as A
from .lexer import scan_identifier
from .parser import EMPTY_KEYWORD, FALSE_KEYWORD, TRUE_KEYWORD


def display(node: A.AstNode, *, pretty: bool = True, indent: int = 2) -> str:
    """Render a tree back to Did text.

    The output always parses back to a structurally equal tree; layout and
    positions of the parsed text are not preserved.
    """
    if pretty:
        return "\n".join(_format_lines(node, step=indent))
    return _format_compact(node)


def _format_lines(node: A.AstNode, *, step: int) -> list[str]:
    if isinstance(node, A.ListNode):
        items = [_format_lines(v, step=step) for v in node.entries]
        return _block("[", items, "]", step=step)
    if isinstance(node, A.DictionaryNode):
        items = [
            _prefix(_format_key(e.key) + "=", _format_lines(e.value, step=step))
            for e in node.entries
        ]
        return _block("(", items, ")", step=step)
    if isinstance(node, A.ObjectNode):
        items = [
            _prefix(_format_ident(e.key) + "=", _format_lines(e.value, step=step))
            for e in node.entries
        ]
        return _block(_format_ident(node.name) + "(", items, ")", step=step)
    return [_format_scalar(node)]


def _block(open_: str, items: list[list[str]], close: str, *, step: int) -> list[str]:
    if not items:
        return [open_ + close]
    out = [open_]
    for i, lines in enumerate(items):
        if i < len(items) - 1:
            lines = lines[:-1] + [lines[-1] + ","]
        out.extend(_indent(line, step) for line in lines)
    out.append(close)
    return out


def _prefix(head: str, lines: list[str]) -> list[str]:
    return [head + lines[0], *lines[1:]]


def _format_compact(node: A.AstNode) -> str:
    if isinstance(node, A.ListNode):
        inner = ", ".join(_format_compact(v) for v in node.entries)
        return f"[{inner}]"
    if isinstance(node, A.DictionaryNode):
        inner = ", ".join(f"{_format_key(e.key)}={_format_compact(e.value)}" for e in node.entries)
        return f"({inner})"
    if isinstance(node, A.ObjectNode):
        inner = ", ".join(f"{_format_ident(e.key)}={_format_compact(e.value)}" for e in node.entries)
        return f"{_format_ident(node.name)}({inner})"
    return _format_scalar(node)


def _format_scalar(node: A.AstNode) -> str:
    if isinstance(node, A.EmptyNode):
        return EMPTY_KEYWORD
    if isinstance(node, A.LogicalNode):
        return TRUE_KEYWORD if node.value else FALSE_KEYWORD
    if isinstance(node, A.NumberNode):
        return _format_number(node.value)
    if isinstance(node, A.TextNode):
        return f'"{node.value}"'
    raise TypeError(f"not a node: {type(node).__name__}")


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"{value!r} has no Did representation")
    # No exponent notation in Did; expand the shortest repr positionally.
    s = format(Decimal(repr(value)), "f")
    if "." not in s:
        s += ".0"
    return s


def _format_key(key: A.TextNode | A.NumberNode) -> str:
    if isinstance(key, A.NumberNode):
        return _format_number(key.value)
    if scan_identifier(key.value, 0) == key.value:
        return key.value
    return f'"{key.value}"'


def _format_ident(ident: A.TextNode) -> str:
    if scan_identifier(ident.value, 0) != ident.value:
        raise ValueError(f"{ident.value!r} is not an identifier")
    return ident.value


def _indent(s: str, n: int) -> str:
    return (" " * n) + s
