from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Offset:
    """A relative advance over consumed source text.

    ``line`` counts the newlines crossed, ``column`` the characters consumed
    after the last of them, ``index`` every character consumed.
    """

    line: int = 0
    column: int = 0
    index: int = 0

    def __post_init__(self) -> None:
        if self.line < 0 or self.column < 0 or self.index < 0:
            raise ValueError(f"offset components must be non-negative: {self!r}")

    @classmethod
    def chars(cls, n: int) -> "Offset":
        """Advance over ``n`` characters on the current line."""
        return cls(line=0, column=n, index=n)

    def __add__(self, other: object) -> "Offset":
        if not isinstance(other, Offset):
            return NotImplemented
        if other.line:
            column = other.column
        else:
            column = self.column + other.column
        return Offset(line=self.line + other.line, column=column, index=self.index + other.index)


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Index is 0-based (in characters); line/column are 1-based for user-facing messages.
    """

    line: int = 1
    column: int = 1
    index: int = 0

    def __add__(self, other: object) -> "Position":
        if not isinstance(other, Offset):
            return NotImplemented
        if other.line:
            # Moved to a new line: the column restarts there.
            return Position(
                line=self.line + other.line,
                column=1 + other.column,
                index=self.index + other.index,
            )
        return Position(
            line=self.line,
            column=self.column + other.column,
            index=self.index + other.index,
        )

    def format(self) -> str:
        return f"{self.line}:{self.column}"
