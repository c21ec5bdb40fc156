"""Tests for the token reader and its round trip through the compact renderer."""

import pytest

from scripts.tanfmt import (
    BoolExpr,
    IntExpr,
    ListExpr,
    ParseError,
    Parser,
    StringExpr,
    SymbolExpr,
    UnitExpr,
    parse,
    render,
    tokenize,
)

QUIET = {"enable_logger": False}


def read(text):
    return parse(tokenize(text, config=QUIET), config=QUIET)


def compact(text):
    return [render(expr) for expr in read(text)]


class TestReader:
    def test_atoms(self):
        exprs = read('a 1 "s" true false')
        assert exprs == [
            SymbolExpr(value="a"),
            IntExpr(value=1),
            StringExpr(value="s"),
            BoolExpr(value=True),
            BoolExpr(value=False),
        ]

    def test_empty_parens_are_unit(self):
        assert read("()") == [UnitExpr()]

    def test_list(self):
        (expr,) = read("(+ 1 2)")
        assert isinstance(expr, ListExpr)
        assert [render(term) for term in expr.terms] == ["+", "1", "2"]

    def test_comments_and_annotations_are_dropped(self):
        assert compact("; header\n(#Int x 1) ; trailing") == ["(x 1)"]

    def test_sugar(self):
        assert compact("[1 2] {a 1}") == ["(Array 1 2)", "(Dict a 1)"]
        assert compact("[]") == ["(Array)"]

    def test_quote(self):
        assert compact("'x '(a b)") == ["(quot x)", "(quot (a b))"]

    def test_nested_round_trip(self):
        assert compact('(let [a 1.5 b "s"] (f a #Int b))') == ['(let (Array a 1.5 b s) (f a b))']

    def test_deferred_parse(self):
        parser = Parser(tokenize("a b", config=QUIET), config={"parse": False, "enable_logger": False})
        assert parser.exprs == []
        assert len(parser.parse()) == 2


class TestReaderErrors:
    def test_unexpected_close(self):
        with pytest.raises(ParseError) as excinfo:
            read("a )")
        assert excinfo.value.token.column == 3

    def test_unterminated_list(self):
        with pytest.raises(ParseError, match="Unterminated list"):
            read("(a [b")

    def test_mismatched_close(self):
        with pytest.raises(ParseError, match="Expected ']'"):
            read("[a)")

    def test_dangling_quote(self):
        with pytest.raises(ParseError):
            read("(a ')")
        with pytest.raises(ParseError):
            read("'")
