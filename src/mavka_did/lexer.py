from __future__ import annotations

import re

from .spans import Offset


APOSTROPHES = "'ʼ"
ESCAPABLE = '\\nrtbf"'

INFO_MAX_CHARS = 10

_LETTER = "A-Za-zА-Яа-яІіЇїЄєҐґ"
_WHITESPACE_RE = re.compile(r"[ \t\r\n]*")
# Apostrophes only ever join two letter segments.
_IDENT_RE = re.compile(rf"[_{_LETTER}][_{_LETTER}]*(?:[{APOSTROPHES}][{_LETTER}][_{_LETTER}]*)*")
_FLOAT_RE = re.compile(r"[0-9]+\.[0-9]+")
_INT_RE = re.compile(r"[0-9]+")


def skip_whitespace(src: str, index: int = 0) -> Offset:
    """Measure the whitespace run starting at ``index``."""
    m = _WHITESPACE_RE.match(src, index)
    ws = m.group(0)
    if not ws:
        return Offset()
    lines = ws.count("\n")
    if lines:
        column = len(ws) - ws.rindex("\n") - 1
    else:
        column = len(ws)
    return Offset(line=lines, column=column, index=len(ws))


def scan_identifier(src: str, index: int) -> str | None:
    m = _IDENT_RE.match(src, index)
    return m.group(0) if m else None


def scan_digits(src: str, index: int) -> tuple[str, bool] | None:
    """Match a float (``12.5``) or, failing that, an integer digit run.

    Returns the lexeme and whether it is a float.
    """
    m = _FLOAT_RE.match(src, index)
    if m:
        return m.group(0), True
    m = _INT_RE.match(src, index)
    if m:
        return m.group(0), False
    return None


def scan_text(src: str, index: int) -> str | None:
    """Scan a ``"..."`` literal and return its body with escapes kept as-is."""
    if not src.startswith('"', index):
        return None
    i = index + 1
    n = len(src)
    while i < n:
        c = src[i]
        if c == '"':
            return src[index + 1 : i]
        if c == "\n":
            return None
        if c == "\\":
            if i + 1 >= n or src[i + 1] not in ESCAPABLE:
                return None
            i += 2
            continue
        i += 1
    return None


def make_info(src: str, index: int) -> str:
    """Preview of the unconsumed input for diagnostics."""
    head = src[index : index + INFO_MAX_CHARS]
    if len(src) - index > INFO_MAX_CHARS:
        return head + "..."
    return head
