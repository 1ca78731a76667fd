from __future__ import annotations

import pytest

from mavka_did import NumberNode, ObjectNode, TextNode, display, parse


def test_compact() -> None:
    src = 'Людина(імʼя="Давид", вік=0, теги=["a", так], дані=(1=пусто, "x y"=-1.5))'
    assert display(parse(src), pretty=False) == src


def test_pretty() -> None:
    tree = parse('O(a=[1, 2], b=(), c=[])')
    assert display(tree) == "\n".join(
        [
            "O(",
            "  a=[",
            "    1,",
            "    2",
            "  ],",
            "  b=(),",
            "  c=[]",
            ")",
        ]
    )
    assert display(tree, indent=4).splitlines()[1] == "    a=["


def test_scalars() -> None:
    assert display(parse("пусто")) == "пусто"
    assert display(parse("так")) == "так"
    assert display(parse("ні")) == "ні"
    assert display(parse(r'"a\tb"')) == r'"a\tb"'


def test_floats_have_no_exponent() -> None:
    assert display(NumberNode(1e20)) == "100000000000000000000.0"
    assert display(NumberNode(1e-7)) == "0.0000001"
    assert display(NumberNode(2.5)) == "2.5"
    assert display(NumberNode(3.0)) == "3.0"
    with pytest.raises(ValueError):
        display(NumberNode(float("inf")))


def test_keys_are_quoted_only_when_needed() -> None:
    assert display(parse('("a"=1, "b c"=2)'), pretty=False) == '(a=1, "b c"=2)'


def test_object_names_must_be_identifiers() -> None:
    with pytest.raises(ValueError):
        display(ObjectNode(TextNode("not an ident")))
