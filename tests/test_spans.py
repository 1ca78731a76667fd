from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mavka_did import Offset, Position


offsets = st.builds(
    Offset,
    line=st.integers(min_value=0, max_value=50),
    column=st.integers(min_value=0, max_value=50),
    index=st.integers(min_value=0, max_value=500),
)
positions = st.builds(
    Position,
    line=st.integers(min_value=1, max_value=50),
    column=st.integers(min_value=1, max_value=50),
    index=st.integers(min_value=0, max_value=500),
)


def test_default_position_is_start_of_input() -> None:
    assert Position() == Position(line=1, column=1, index=0)
    assert Offset() == Offset(line=0, column=0, index=0)


def test_same_line_offset_advances_column() -> None:
    assert Position(2, 5, 10) + Offset(line=0, column=3, index=3) == Position(2, 8, 13)


def test_new_line_offset_resets_column() -> None:
    assert Position(2, 5, 10) + Offset(line=2, column=3, index=7) == Position(4, 4, 17)
    assert Position(2, 5, 10) + Offset(line=1, column=0, index=1) == Position(3, 1, 11)


@given(positions, offsets)
def test_add_and_inplace_add_agree(p: Position, o: Offset) -> None:
    q = p
    q += o
    assert q == p + o


@given(positions, offsets, offsets)
def test_merged_offsets_apply_like_consecutive_ones(p: Position, a: Offset, b: Offset) -> None:
    assert p + (a + b) == (p + a) + b


def test_offsets_are_never_negative() -> None:
    with pytest.raises(ValueError):
        Offset(line=0, column=-1, index=0)


def test_positions_are_immutable() -> None:
    p = Position()
    with pytest.raises(AttributeError):
        p.line = 3  # type: ignore[misc]
