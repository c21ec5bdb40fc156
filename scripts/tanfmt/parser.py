import logging
from typing import List, NotRequired, Optional, TypedDict
from scripts.tanfmt.errors import ParseError
from scripts.tanfmt.expr import (
    BoolExpr,
    Expr,
    FloatExpr,
    IntExpr,
    ListExpr,
    StringExpr,
    SymbolExpr,
    UnitExpr,
)
from scripts.tanfmt.logger import Logger
from scripts.tanfmt.tokens import CLOSER_OF, DELIMITER_TEXT, OPENER_OF, Token, TokenType
from scripts.tanfmt.utils import resolve_config

# head symbols of the bracket and brace sugar
SUGAR_HEADS = {
    TokenType.LEFT_BRACKET: "Array",
    TokenType.LEFT_BRACE: "Dict",
}


class ParserConfig(TypedDict):
    parse: NotRequired[bool]
    strip_comments: NotRequired[bool]
    enable_logger: NotRequired[bool]
    log_level: NotRequired[int]


class ParserConfigRequired(TypedDict):
    parse: bool
    strip_comments: bool
    enable_logger: bool
    log_level: int


DEFAULT_CONFIG: ParserConfigRequired = {
    "parse": True,
    "strip_comments": True,
    "enable_logger": True,
    "log_level": logging.WARNING,
}


class Parser:
    """Reads a token list into expressions.

    Comments and annotations carry no value and are dropped.
    """

    def __init__(self, tokens: List[Token], config: Optional[ParserConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(
            config={"name": "parser", "is_enabled": self.config["enable_logger"], "level": self.config["log_level"]}
        ).logger
        self.logger.info("Parser initialized")
        self.tokens = list(tokens)
        if self.config["strip_comments"]:
            self.tokens = self._strip_comments(self.tokens)
            self.logger.debug("Comments stripped from tokens")
        self.position = 0
        self.exprs: List[Expr] = []
        if self.config["parse"]:
            self.exprs = self.parse()
            self.logger.debug("Tokens parsed into expressions")

    def _strip_comments(self, tokens: List[Token]) -> List[Token]:
        return [token for token in tokens if token.type not in {TokenType.COMMENT, TokenType.ANNOTATION}]

    @property
    def has_more_tokens(self) -> bool:
        return self.position < len(self.tokens)

    @property
    def current_token(self) -> Optional[Token]:
        return self.tokens[self.position] if self.has_more_tokens else None

    def advance(self) -> Token:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def parse(self) -> List[Expr]:
        exprs: List[Expr] = []
        while self.has_more_tokens:
            expr = self._parse()
            if expr is not None:
                exprs.append(expr)
        return exprs

    def _parse(self) -> Optional[Expr]:
        token = self.advance()
        match token.type:
            case TokenType.COMMENT | TokenType.ANNOTATION:
                return None
            case TokenType.STRING:
                return StringExpr(value=token.value)
            case TokenType.SYMBOL:
                if token.value in {"true", "false"}:
                    return BoolExpr(value=token.value == "true")
                return SymbolExpr(value=token.value)
            case TokenType.INT:
                return IntExpr(value=token.value)
            case TokenType.FLOAT:
                return FloatExpr(value=token.value)
            case TokenType.QUOTE:
                return self._parse_quote(token)
            case TokenType.LEFT_PAREN | TokenType.LEFT_BRACKET | TokenType.LEFT_BRACE:
                return self._parse_list(token)
            case TokenType.RIGHT_PAREN | TokenType.RIGHT_BRACKET | TokenType.RIGHT_BRACE:
                raise ParseError(f"Unexpected '{DELIMITER_TEXT[token.type]}'", token)
        raise ParseError(f"Unexpected token type {token.type}", token)

    def _parse_quote(self, quote: Token) -> Expr:
        target = None
        while target is None:
            if not self.has_more_tokens:
                raise ParseError("Quote is not followed by an expression", quote)
            if self.current_token.type in OPENER_OF:
                raise ParseError("Quote is not followed by an expression", self.current_token)
            target = self._parse()
        return ListExpr(terms=[SymbolExpr(value="quot"), target])

    def _parse_list(self, opener: Token) -> Expr:
        terminator = CLOSER_OF[opener.type]
        terms: List[Expr] = []
        if opener.type in SUGAR_HEADS:
            terms.append(SymbolExpr(value=SUGAR_HEADS[opener.type]))
        while True:
            current_token = self.current_token
            if current_token is None:
                raise ParseError(f"Unterminated list, expected '{DELIMITER_TEXT[terminator]}'", opener)
            if current_token.type == terminator:
                self.advance()
                break
            if current_token.type in OPENER_OF:
                raise ParseError(
                    f"Expected '{DELIMITER_TEXT[terminator]}', but got '{DELIMITER_TEXT[current_token.type]}'",
                    current_token,
                )
            expr = self._parse()
            if expr is not None:
                terms.append(expr)
        self.logger.debug(f"Parsed list of {len(terms)} term(s) opened at line {opener.line}")
        if not terms:
            return UnitExpr()
        return ListExpr(terms=terms)


def parse(tokens: List[Token], config: Optional[ParserConfig] = None) -> List[Expr]:
    return Parser(tokens, config=config).exprs


__all__ = ["Parser", "ParserConfig", "parse"]
