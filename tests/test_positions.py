from __future__ import annotations

from mavka_did import DictionaryNode, ListNode, ObjectNode, Position, parse


def test_list_entry_contexts() -> None:
    tree = parse("[1, -2, 3.14159264]")
    assert isinstance(tree, ListNode)
    assert tree.context == Position(1, 1, 0)
    assert [n.context for n in tree] == [
        Position(1, 2, 1),
        Position(1, 5, 4),
        Position(1, 9, 8),
    ]


def test_leading_zeros_count_towards_width() -> None:
    tree = parse("[007, 1]")
    assert [n.context for n in tree] == [Position(1, 2, 1), Position(1, 7, 6)]


def test_leading_whitespace_moves_root_context() -> None:
    assert parse("\n\n  так").context == Position(3, 3, 4)


def test_multiline_dictionary_contexts() -> None:
    src = "(\n  a = 1,\n  b = [\n    так\n  ]\n)"
    tree = parse(src)
    assert isinstance(tree, DictionaryNode)
    a, b = tree.entries
    assert a.context == Position(2, 3, 4)
    assert a.key.context == Position(2, 3, 4)
    assert a.value.context == Position(2, 7, 8)
    assert b.context == Position(3, 3, 13)
    assert b.value.context == Position(3, 7, 17)
    (logical,) = b.value.entries
    assert logical.context == Position(4, 5, 23)


def test_object_contexts() -> None:
    src = "Точка(x=1,\n      y=2)"
    tree = parse(src)
    assert isinstance(tree, ObjectNode)
    assert tree.context == Position(1, 1, 0)
    assert tree.name.context == Position(1, 1, 0)
    x, y = tree.entries
    assert x.context == Position(1, 7, 6)
    assert x.value.context == Position(1, 9, 8)
    assert y.context == Position(2, 7, 17)
    assert y.value.context == Position(2, 9, 19)


def test_multibyte_characters_count_once() -> None:
    src = '["ґїєі", "ok"]'
    tree = parse(src)
    assert [n.context for n in tree] == [Position(1, 2, 1), Position(1, 10, 9)]


def test_escapes_count_as_two_characters() -> None:
    src = r'["a\"b", 1]'
    tree = parse(src)
    assert tree.entries[1].context == Position(1, 10, 9)
    assert src[tree.entries[1].context.index] == "1"


def test_opening_delimiter_followed_by_newline() -> None:
    src = "[\n1]"
    tree = parse(src)
    assert tree.entries[0].context == Position(2, 1, 2)
