"""Pretty-printing utilities for tan source."""

from .tokens import Position, Range, Token, TokenType
from .expr import (
    BoolExpr,
    Expr,
    FloatExpr,
    FuncExpr,
    IntExpr,
    ListExpr,
    StringExpr,
    SymbolExpr,
    UnitExpr,
)
from .errors import (
    FormatError,
    FormatterDiagnostic,
    LexerError,
    NestingTooDeepError,
    ParseError,
    UnexpectedTokenError,
    UnterminatedListError,
)
from .compact import render
from .formatter import FormatResult, Formatter, FormatterConfig, format_tokens
from .lexer import Lexer, LexerConfig, tokenize
from .parser import Parser, ParserConfig, parse

__all__ = [
    "Position",
    "Range",
    "Token",
    "TokenType",
    "BoolExpr",
    "Expr",
    "FloatExpr",
    "FuncExpr",
    "IntExpr",
    "ListExpr",
    "StringExpr",
    "SymbolExpr",
    "UnitExpr",
    "FormatError",
    "FormatterDiagnostic",
    "LexerError",
    "NestingTooDeepError",
    "ParseError",
    "UnexpectedTokenError",
    "UnterminatedListError",
    "render",
    "FormatResult",
    "Formatter",
    "FormatterConfig",
    "format_tokens",
    "Lexer",
    "LexerConfig",
    "tokenize",
    "Parser",
    "ParserConfig",
    "parse",
]
