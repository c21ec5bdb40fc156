"""Single-line rendering of expression trees."""

from __future__ import annotations

from typing import assert_never

from .expr import BoolExpr, Expr, FloatExpr, FuncExpr, IntExpr, ListExpr, StringExpr, SymbolExpr, UnitExpr


def render(expr: Expr) -> str:
    """Render ``expr`` on one line, e.g. ``(a 1 "x" ())`` -> ``(a 1 x ())``.

    Strings and symbols are written verbatim, without quotes or escaping.
    Lists are walked with an explicit stack, so nesting depth is not bounded
    by the interpreter's recursion limit.
    """
    parts: list[str] = []
    pending: list[Expr | str] = [expr]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        match item:
            case UnitExpr():
                parts.append("()")
            case BoolExpr(value=value):
                parts.append("true" if value else "false")
            case IntExpr(value=value):
                parts.append(str(value))
            case FloatExpr(value=value):
                parts.append(repr(value))
            case SymbolExpr(value=value) | StringExpr(value=value):
                parts.append(value)
            case ListExpr(terms=terms):
                pending.append(")")
                for index in range(len(terms) - 1, -1, -1):
                    pending.append(terms[index])
                    if index:
                        pending.append(" ")
                pending.append("(")
            case FuncExpr():
                parts.append("#<func>")
            case _:
                assert_never(item)
    return "".join(parts)


__all__ = ["render"]
