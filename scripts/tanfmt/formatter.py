"""Structural formatter: turns a raw token stream into indented tan source.

The formatter performs its own delimiter matching instead of relying on a
parsed tree, so it can lay out any token stream, including ones a reader
would reject. Two kinds of problems are collected along the way:

* an unexpected close delimiter is recorded and replaced by an empty
  fragment, and the pass carries on;
* running out of tokens inside an open scope (or exceeding ``max_depth``)
  aborts the pass and raises :class:`FormatError` with every diagnostic
  collected so far.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Literal, NotRequired, Optional, TypedDict, assert_never

from .errors import (
    FormatError,
    FormatterDiagnostic,
    NestingTooDeepError,
    NonRecoverableError,
    UnexpectedTokenError,
    UnterminatedListError,
)
from .logger import Logger
from .tokens import CLOSER_OF, DELIMITER_TEXT, OPENER_OF, Token, TokenType
from .utils import resolve_config

Layout = Literal["compat", "canonical"]


class FormatterConfig(TypedDict):
    indent_size: NotRequired[int]
    layout: NotRequired[Layout]
    max_depth: NotRequired[Optional[int]]
    enable_logger: NotRequired[bool]
    log_level: NotRequired[int]


class FormatterConfigRequired(TypedDict):
    indent_size: int
    layout: Layout
    max_depth: Optional[int]
    enable_logger: bool
    log_level: int


DEFAULT_CONFIG: FormatterConfigRequired = {
    "indent_size": 4,
    "layout": "compat",
    "max_depth": None,
    "enable_logger": True,
    "log_level": logging.WARNING,
}


@dataclass
class _Scope:
    opener: TokenType
    terminator: TokenType
    token: Optional[Token] = None
    lines: list[str] = field(default_factory=list)


@dataclass
class FormatResult:
    text: str | None
    diagnostics: list[FormatterDiagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.text is not None


class Formatter:
    def __init__(self, tokens: Iterable[Token], config: Optional[FormatterConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        if self.config["layout"] not in ("compat", "canonical"):
            raise ValueError(f"Unknown layout: {self.config['layout']}")
        self.logger = Logger(
            config={"name": "formatter", "is_enabled": self.config["enable_logger"], "level": self.config["log_level"]}
        ).logger
        self.tokens: Iterator[Token] = iter(tokens)
        self.nesting = 0
        self.errors: list[FormatterDiagnostic] = []

    @property
    def diagnostics(self) -> list[FormatterDiagnostic]:
        return list(self.errors)

    def take_errors(self) -> list[FormatterDiagnostic]:
        errors, self.errors = self.errors, []
        return errors

    def _push_error(self, error: FormatterDiagnostic) -> None:
        if error.recoverable:
            self.logger.warning(error)
        else:
            self.logger.error(error)
        self.errors.append(error)

    def _next_token(self) -> Token | None:
        token = next(self.tokens, None)
        if token is not None:
            self.logger.debug(f"Consumed token {token}")
        return token

    def _indent(self) -> str:
        return " " * (self.nesting * self.config["indent_size"])

    def _open_scope(self, opener: TokenType, token: Optional[Token] = None) -> _Scope:
        max_depth = self.config["max_depth"]
        if max_depth is not None and self.nesting >= max_depth:
            self._push_error(NestingTooDeepError(max_depth, token))
            raise NonRecoverableError()
        self.nesting += 1
        return _Scope(opener=opener, terminator=CLOSER_OF[opener], token=token)

    def _close_scope(self, scope: _Scope) -> str:
        self.nesting -= 1
        return "".join(scope.lines)

    def _wrap(self, opener: TokenType, body: str) -> str:
        """Surround a list body with its delimiters; ``self.nesting`` is the enclosing depth."""
        if self.config["layout"] == "canonical":
            closer = DELIMITER_TEXT[CLOSER_OF[opener]]
            return f"{DELIMITER_TEXT[opener]}\n{body}{self._indent()}{closer}"
        if opener == TokenType.LEFT_PAREN:
            return f"({body})"
        if opener == TokenType.LEFT_BRACKET:
            return f"[\n{body}]"
        # mapping bodies are closed with "})"
        return f"{{\n{body}}})"

    def format_list(self, delimiter: TokenType, opener: Optional[Token] = None) -> str:
        """Format tokens up to ``delimiter`` as a list body, one child per line.

        Nested lists are kept on an explicit stack of scopes; each child line
        is indented by the nesting depth at the time it is emitted.
        """
        stack: list[_Scope] = []
        scope = self._open_scope(OPENER_OF[delimiter], opener)

        while True:
            token = self._next_token()
            if token is None:
                self._push_error(UnterminatedListError(scope.terminator, scope.token))
                raise NonRecoverableError()

            if token.type == scope.terminator:
                body = self._close_scope(scope)
                if not stack:
                    return body
                fragment = self._wrap(scope.opener, body)
                scope = stack.pop()
                scope.lines.append(f"{self._indent()}{fragment}\n")
            elif token.type in CLOSER_OF:
                stack.append(scope)
                scope = self._open_scope(token.type, token)
            else:
                s = self.format_expr(token)
                scope.lines.append(f"{self._indent()}{s}\n")

    def format_expr(self, token: Token) -> str:
        match token.type:
            case TokenType.COMMENT | TokenType.SYMBOL:
                return str(token.value)
            case TokenType.STRING:
                return f'"{token.value}"'
            case TokenType.INT:
                return str(token.value)
            case TokenType.FLOAT:
                return repr(float(token.value))  # type: ignore[arg-type]
            case TokenType.ANNOTATION:
                return f"#{token.value}"
            case TokenType.QUOTE:
                return "'"
            case TokenType.LEFT_PAREN | TokenType.LEFT_BRACKET | TokenType.LEFT_BRACE:
                s = self.format_list(CLOSER_OF[token.type], token)
                return self._wrap(token.type, s)
            case TokenType.RIGHT_PAREN | TokenType.RIGHT_BRACKET | TokenType.RIGHT_BRACE:
                self._push_error(UnexpectedTokenError(token))
                # formatting can continue
                return ""
            case _:
                assert_never(token.type)

    def format(self) -> str:
        """Format the whole token stream.

        Raises :class:`FormatError` carrying the drained diagnostics when the
        stream ends inside an open list or ``max_depth`` is exceeded.
        Recoverable diagnostics from a successful pass remain available
        through :attr:`diagnostics`.
        """
        output: list[str] = []
        while True:
            token = self._next_token()
            if token is None:
                break
            try:
                output.append(self.format_expr(token))
            except NonRecoverableError:
                raise FormatError(self.take_errors()) from None
        if self.errors:
            self.logger.info(f"Formatting finished with {len(self.errors)} recoverable diagnostic(s)")
        return "".join(output)


def format_tokens(tokens: Iterable[Token], config: Optional[FormatterConfig] = None) -> FormatResult:
    """Run one formatting pass and report both the text and every diagnostic.

    ``text`` is ``None`` when the pass was aborted.
    """
    formatter = Formatter(tokens, config=config)
    try:
        text = formatter.format()
    except FormatError as exc:
        return FormatResult(text=None, diagnostics=exc.diagnostics)
    return FormatResult(text=text, diagnostics=formatter.diagnostics)


__all__ = ["FormatResult", "Formatter", "FormatterConfig", "format_tokens"]
