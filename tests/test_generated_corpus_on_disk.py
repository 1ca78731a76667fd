from __future__ import annotations

import os
from pathlib import Path

from mavka_did import (
    DictionaryNode,
    ListNode,
    ObjectNode,
    Position,
    TextNode,
    display,
    parse,
    parse_file,
)
from mavka_did.testing import generate_corpus_files, generate_did_sources


def _walk(node):
    """Yield every node of a tree, including entry keys and object names."""
    yield node
    if isinstance(node, ListNode):
        for child in node:
            yield from _walk(child)
    elif isinstance(node, (DictionaryNode, ObjectNode)):
        if isinstance(node, ObjectNode):
            yield node.name
        for entry in node:
            yield entry.key
            yield from _walk(entry.value)


def _position_by_walking(src: str, index: int) -> Position:
    line = src.count("\n", 0, index) + 1
    column = index - (src.rfind("\n", 0, index) + 1) + 1
    return Position(line=line, column=column, index=index)


def _starts_like(node, first: str) -> bool:
    if isinstance(node, TextNode):
        # Quoted text, or an identifier key / object name.
        return first == '"' or first == node.value[:1]
    return display(node, pretty=False)[0] == first


def test_generated_corpus_on_disk_parse_and_roundtrip(tmp_path: Path) -> None:
    seed = int(os.environ.get("DID_CORPUS_SEED", "1"))
    count = int(os.environ.get("DID_CORPUS_CASES", "300"))

    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir(parents=True, exist_ok=True)

    files = generate_corpus_files(seed=seed, count=count)
    for rel, src in files:
        (corpus_dir / rel).write_text(src, encoding="utf-8")

    for rel, src in files:
        tree = parse_file(corpus_dir / rel)
        formatted = display(tree)
        assert parse(formatted) == tree, rel
        assert parse(display(tree, pretty=False)) == tree, rel


def test_contexts_agree_with_a_character_walk() -> None:
    for src in generate_did_sources(seed=7, count=200):
        for node in _walk(parse(src)):
            pos = node.context
            assert pos == _position_by_walking(src, pos.index), src
            first = src[pos.index]
            if first != "-":
                assert _starts_like(node, first), src


def test_corpus_is_deterministic() -> None:
    assert generate_did_sources(seed=3, count=20) == generate_did_sources(seed=3, count=20)
    names = [rel for rel, _ in generate_corpus_files(seed=3, count=3)]
    assert names == ["case_000000.did", "case_000001.did", "case_000002.did"]


def _nesting(node) -> int:
    if isinstance(node, ListNode):
        return 1 + max((_nesting(v) for v in node), default=0)
    if isinstance(node, (DictionaryNode, ObjectNode)):
        return 1 + max((_nesting(e.value) for e in node), default=0)
    return 0


def test_corpus_respects_max_depth() -> None:
    flat = generate_corpus_files(seed=5, count=40, max_depth=0)
    assert all(_nesting(parse(src)) == 0 for _, src in flat)

    nested = generate_corpus_files(seed=5, count=200, max_depth=2)
    depths = [_nesting(parse(src, max_depth=2)) for _, src in nested]
    assert max(depths) == 2
