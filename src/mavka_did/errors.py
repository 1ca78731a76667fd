from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .spans import Position


class Expectation(str, Enum):
    """What the parser required at the position where it failed."""

    # Nodes
    EMPTY_NODE = "empty-node"
    LOGICAL_NODE = "logical-node"
    NUMBER_NODE = "number-node"
    TEXT_NODE = "text-node"
    LIST_NODE = "list-node"
    DICTIONARY_NODE = "dictionary-node"
    DICTIONARY_ENTRY = "dictionary-entry"
    DICTIONARY_ENTRY_KEY = "dictionary-entry-key"
    OBJECT_NODE = "object-node"
    OBJECT_ENTRY = "object-entry"
    AST_NODE = "ast-node"

    # Pieces
    IDENTIFIER = "identifier"
    EQUALS_SIGN = "="
    LEFT_PARENTHESIS = "("
    RIGHT_PARENTHESIS = ")"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    ENTRY_VALUE = "entry-value"

    EOF = "eof"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[Expectation, str] = {
    Expectation.EMPTY_NODE: "Очікувався вузол `пусто`",
    Expectation.LOGICAL_NODE: "Очікувався логічний вузол (`так` або `ні`)",
    Expectation.NUMBER_NODE: "Очікувався числовий вузол (ціле число в межах 64 бітів або дріб)",
    Expectation.TEXT_NODE: "Очікувався текстовий вузол. Явні перенесення рядків не дозволені",
    Expectation.LIST_NODE: "Очікувався список",
    Expectation.DICTIONARY_NODE: "Очікувався словник",
    Expectation.DICTIONARY_ENTRY: "Очікувався запис словника",
    Expectation.DICTIONARY_ENTRY_KEY: "Очікувався ключ словника (ідентифікатор, текст або число)",
    Expectation.OBJECT_NODE: "Очікувався об'єкт",
    Expectation.OBJECT_ENTRY: "Очікувався запис об'єкта",
    Expectation.AST_NODE: "Очікувалось значення",
    Expectation.IDENTIFIER: "Очікувався ідентифікатор",
    Expectation.EQUALS_SIGN: "Очікувався знак `=`",
    Expectation.LEFT_PARENTHESIS: "Очікувалась відкривна дужка `(`",
    Expectation.RIGHT_PARENTHESIS: "Очікувалась закривна дужка `)`",
    Expectation.LEFT_BRACKET: "Очікувалась відкривна квадратна дужка `[`",
    Expectation.RIGHT_BRACKET: "Очікувалась закривна квадратна дужка `]`",
    Expectation.ENTRY_VALUE: "Очікувалось значення запису",
    Expectation.EOF: "Очікувався кінець файлу",
}


class DidError(Exception):
    """Base exception for all mavka-did errors."""


@dataclass(slots=True)
class ParseError(DidError):
    expectation: Expectation
    line: int
    column: int
    index: int
    info: str = ""
    # Most advanced failure among the alternatives that were tried here.
    cause: ParseError | None = field(default=None, compare=False, repr=False)

    @classmethod
    def at(
        cls,
        expectation: Expectation,
        pos: Position,
        info: str = "",
        cause: ParseError | None = None,
    ) -> ParseError:
        return cls(
            expectation=expectation,
            line=pos.line,
            column=pos.column,
            index=pos.index,
            info=info,
            cause=cause,
        )

    @property
    def position(self) -> Position:
        return Position(line=self.line, column=self.column, index=self.index)

    def deepest(self) -> ParseError:
        """Follow the ``cause`` chain down to the most specific diagnostic."""
        err = self
        while err.cause is not None:
            err = err.cause
        return err

    def __str__(self) -> str:
        out = [
            f"Тип помилки: {self.expectation.description}",
            f"Рядок: {self.line}, Стовпчик: {self.column}, Індекс: {self.index}",
        ]
        if self.info:
            out.append(f"Наступні символи були введені: {self.info!r}")
        return "\n".join(out)


class NestingLimitError(DidError):
    """Raised when containers nest deeper than the configured ``max_depth``."""

    def __init__(self, position: Position, max_depth: int) -> None:
        super().__init__(
            f"{position.format()}: nesting deeper than {max_depth} containers"
        )
        self.position = position
        self.max_depth = max_depth
