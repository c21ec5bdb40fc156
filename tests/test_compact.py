"""Tests for the compact single-line renderer."""

from scripts.tanfmt import (
    BoolExpr,
    FloatExpr,
    FuncExpr,
    IntExpr,
    ListExpr,
    StringExpr,
    SymbolExpr,
    UnitExpr,
    render,
)


class TestScalars:
    def test_unit(self):
        assert render(UnitExpr()) == "()"

    def test_booleans_are_lowercase(self):
        assert render(BoolExpr(value=True)) == "true"
        assert render(BoolExpr(value=False)) == "false"

    def test_integers(self):
        assert render(IntExpr(value=-17)) == "-17"
        assert render(IntExpr(value=1000000)) == "1000000"

    def test_floats_use_shortest_repr(self):
        assert render(FloatExpr(value=0.1)) == "0.1"
        assert render(FloatExpr(value=2.5)) == "2.5"

    def test_symbol_verbatim(self):
        assert render(SymbolExpr(value="x")) == "x"

    def test_string_is_not_quoted(self):
        assert render(StringExpr(value='say "hi"')) == 'say "hi"'

    def test_function_placeholder(self):
        assert render(FuncExpr(func=len)) == "#<func>"
        assert render(FuncExpr()) == "#<func>"


class TestLists:
    def test_empty_list(self):
        assert render(ListExpr()) == "()"

    def test_children_are_space_separated(self):
        expr = ListExpr(terms=[SymbolExpr(value="+"), IntExpr(value=1), FloatExpr(value=2.5)])
        assert render(expr) == "(+ 1 2.5)"

    def test_units_in_list(self):
        n = 5
        text = render(ListExpr(terms=[UnitExpr() for _ in range(n)]))
        assert text.count("()") == n
        assert text.count(" ") == n - 1
        assert text == "(() () () () ())"

    def test_nested_lists(self):
        inner = ListExpr(terms=[SymbolExpr(value="b"), StringExpr(value="c")])
        expr = ListExpr(terms=[SymbolExpr(value="a"), inner, FuncExpr()])
        assert render(expr) == "(a (b c) #<func>)"

    def test_shared_children(self):
        shared = ListExpr(terms=[IntExpr(value=1)])
        expr = ListExpr(terms=[shared, shared])
        assert render(expr) == "((1) (1))"

    def test_never_emits_newlines(self):
        expr = ListExpr(terms=[StringExpr(value="a b"), ListExpr(terms=[UnitExpr()])])
        assert "\n" not in render(expr)

    def test_deeply_nested(self):
        depth = 3000
        expr = UnitExpr()
        for _ in range(depth):
            expr = ListExpr(terms=[expr])
        assert render(expr) == "(" * depth + "()" + ")" * depth

    def test_large_floats_use_exponent_form(self):
        assert render(FloatExpr(value=1e20)) == "1e+20"
        assert render(FloatExpr(value=1.0)) == "1.0"
