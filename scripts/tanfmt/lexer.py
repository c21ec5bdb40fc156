from typing import Optional, TypedDict, NotRequired
import logging
import re
from scripts.tanfmt.errors import LexerError
from scripts.tanfmt.logger import Logger
from scripts.tanfmt.tokens import Position, Range, Token, TokenType
from scripts.tanfmt.utils import resolve_config

DELIMITERS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

NUMBER_REGEX = re.compile(r"^-?[0-9][0-9_]*(\.[0-9_]+)?([eE][-+]?[0-9]+)?$")


class LexerConfig(TypedDict):
    tokenize: NotRequired[bool]
    enable_logger: NotRequired[bool]
    log_level: NotRequired[int]


class LexerConfigRequired(TypedDict):
    tokenize: bool
    enable_logger: bool
    log_level: int


DEFAULT_CONFIG: LexerConfigRequired = {
    "tokenize": True,
    "enable_logger": True,
    "log_level": logging.WARNING,
}


class Lexer:
    def __init__(self, input: str, config: Optional[LexerConfig] = None):
        self.input = input
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(
            config={"name": "lexer", "is_enabled": self.config["enable_logger"], "level": self.config["log_level"]}
        ).logger
        self._start = Position(0, 1, 1)
        self.position = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        if self.config["tokenize"]:
            self.tokenize()

    @property
    def has_more_chars(self):
        return self.position < len(self.input)

    @property
    def char(self):
        return self.input[self.position] if self.has_more_chars else "\0"

    @property
    def current_value(self):
        return self.input[self._start.index : self.position]

    @property
    def current_position(self) -> Position:
        return Position(self.position, self.line, self.column)

    def _advance(self, steps=1):
        for _ in range(steps):
            if not self.has_more_chars:
                raise LexerError("Attempt to advance beyond end of input", self.line, self.column)
            if self.char == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.position += 1

    def _consume_while(self, condition):
        while self.has_more_chars and condition(self.char):
            self._advance()

    def _mark(self):
        self._start = self.current_position

    def _add_token(self, token_type: TokenType, value=None):
        token_range = Range(self._start, self.current_position)
        self.logger.debug(
            f"Adding token {token_type} with value '{value}' at line {token_range.start.line}, column {token_range.start.column}",
        )
        self.tokens.append(Token(token_type, value, token_range))

    def _is_symbol_char(self, char: str) -> bool:
        return not (char.isspace() or char in DELIMITERS or char in {'"', ";", "'"})

    def tokenize(self) -> list[Token]:
        try:
            self.logger.info("Starting tokenization")
            while self.has_more_chars:
                char = self.char
                self._mark()
                if char.isspace():
                    self._consume_while(lambda c: c.isspace())
                elif char == ";":
                    self._handle_comment()
                elif char in DELIMITERS:
                    self._advance()
                    self._add_token(DELIMITERS[char])
                elif char == '"':
                    self._handle_string()
                elif char == "'":
                    self._advance()
                    self._add_token(TokenType.QUOTE)
                elif char == "#":
                    self._handle_annotation()
                else:
                    self._handle_symbol_or_number()
            self.logger.info("Tokenization complete")
            return self.tokens
        except LexerError as e:
            self.logger.error(e)
            raise

    def _handle_comment(self):
        self._consume_while(lambda c: c != "\n")
        self._add_token(TokenType.COMMENT, self.current_value)

    def _handle_string(self):
        self._advance()
        while self.has_more_chars and self.char != '"':
            if self.char == "\\":
                self._advance()
                if not self.has_more_chars:
                    break
            self._advance()
        if not self.has_more_chars:
            raise LexerError("Unterminated string", self._start.line, self._start.column)
        self._advance()
        # escapes are kept as written
        self._add_token(TokenType.STRING, self.current_value[1:-1])

    def _handle_annotation(self):
        self._advance()
        if self.char == "(":
            depth = 0
            while self.has_more_chars:
                if self.char == "(":
                    depth += 1
                elif self.char == ")":
                    depth -= 1
                    if depth == 0:
                        self._advance()
                        break
                self._advance()
            else:
                raise LexerError("Unterminated annotation", self._start.line, self._start.column)
        else:
            self._consume_while(self._is_symbol_char)
        text = self.current_value[1:]
        if not text:
            raise LexerError("Empty annotation", self._start.line, self._start.column)
        self._add_token(TokenType.ANNOTATION, text)

    def _handle_symbol_or_number(self):
        self._consume_while(self._is_symbol_char)
        value = self.current_value
        if NUMBER_REGEX.match(value):
            digits = value.replace("_", "")
            if any(c in digits for c in ".eE"):
                self._add_token(TokenType.FLOAT, float(digits))
            else:
                self._add_token(TokenType.INT, int(digits))
        else:
            self._add_token(TokenType.SYMBOL, value)


def tokenize(text: str, config: Optional[LexerConfig] = None) -> list[Token]:
    return Lexer(text, config=config).tokens


__all__ = ["Lexer", "LexerConfig", "tokenize"]
