"""Exceptions raised and collected while lexing, reading and formatting tan source."""

from __future__ import annotations

from typing import Optional, Sequence

from scripts.tanfmt.tokens import DELIMITER_TEXT, Token, TokenType


def _describe(token: Token) -> str:
    if token.type in DELIMITER_TEXT:
        return f"'{DELIMITER_TEXT[token.type]}'"
    if token.value is None:
        return token.type.name
    return f"{token.type.name}({token.value!r})"


class LexerError(Exception):
    def __init__(self, message, line, column):
        super().__init__(f"Error: {message} at {line}:{column}")
        self.line = line
        self.column = column


class ParseError(Exception):
    def __init__(self, message: str, token: Optional[Token] = None):
        self.message = message
        self.token = token
        if token:
            message = f"{message} at line {token.line}, column {token.column}"
        super().__init__(message)


class FormatterDiagnostic(Exception):
    """A problem found during a formatting pass.

    Diagnostics are collected rather than raised to the caller; ``recoverable``
    tells whether the pass could continue after recording it.
    """

    recoverable = False

    def __init__(self, message: str, token: Optional[Token] = None):
        self.message = message
        self.token = token
        if token:
            message = f"{message} at line {token.line}, column {token.column}"
        super().__init__(message)


class UnexpectedTokenError(FormatterDiagnostic):
    recoverable = True

    def __init__(self, token: Token):
        super().__init__(f"Unexpected token {_describe(token)}", token)


class UnterminatedListError(FormatterDiagnostic):
    def __init__(self, terminator: TokenType, opener: Optional[Token] = None):
        self.terminator = terminator
        super().__init__(f"Unterminated list, expected '{DELIMITER_TEXT[terminator]}'", opener)


class NestingTooDeepError(FormatterDiagnostic):
    def __init__(self, limit: int, token: Optional[Token] = None):
        self.limit = limit
        super().__init__(f"Nesting exceeds the maximum depth of {limit}", token)


class NonRecoverableError(Exception):
    """Unwinds a formatting pass; the cause is the last collected diagnostic."""


class FormatError(Exception):
    def __init__(self, diagnostics: Sequence[FormatterDiagnostic]):
        self.diagnostics = list(diagnostics)
        summary = "; ".join(str(diagnostic) for diagnostic in self.diagnostics)
        super().__init__(f"Formatting failed with {len(self.diagnostics)} diagnostic(s): {summary}")


__all__ = [
    "FormatError",
    "FormatterDiagnostic",
    "LexerError",
    "NestingTooDeepError",
    "NonRecoverableError",
    "ParseError",
    "UnexpectedTokenError",
    "UnterminatedListError",
]
