"""Token definitions shared by the lexer, the reader and the structural formatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    COMMENT = auto()
    STRING = auto()
    SYMBOL = auto()
    INT = auto()
    FLOAT = auto()
    ANNOTATION = auto()
    QUOTE = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()


@dataclass(slots=True, frozen=True)
class Position:
    index: int = 0
    line: int = 1
    column: int = 1


@dataclass(slots=True, frozen=True)
class Range:
    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)


@dataclass(slots=True)
class Token:
    type: TokenType
    value: str | int | float | None = None
    range: Range = field(default_factory=Range)

    @property
    def line(self) -> int:
        return self.range.start.line

    @property
    def column(self) -> int:
        return self.range.start.column


CLOSER_OF: dict[TokenType, TokenType] = {
    TokenType.LEFT_PAREN: TokenType.RIGHT_PAREN,
    TokenType.LEFT_BRACKET: TokenType.RIGHT_BRACKET,
    TokenType.LEFT_BRACE: TokenType.RIGHT_BRACE,
}

OPENER_OF: dict[TokenType, TokenType] = {closer: opener for opener, closer in CLOSER_OF.items()}

DELIMITER_TEXT: dict[TokenType, str] = {
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_BRACKET: "[",
    TokenType.RIGHT_BRACKET: "]",
    TokenType.LEFT_BRACE: "{",
    TokenType.RIGHT_BRACE: "}",
}


__all__ = ["CLOSER_OF", "DELIMITER_TEXT", "OPENER_OF", "Position", "Range", "Token", "TokenType"]
