"""Expression tree consumed by the compact renderer."""

from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict, Field


class _ExprModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class UnitExpr(_ExprModel):
    pass


class BoolExpr(_ExprModel):
    value: bool


class IntExpr(_ExprModel):
    value: int


class FloatExpr(_ExprModel):
    value: float


class SymbolExpr(_ExprModel):
    value: str


class StringExpr(_ExprModel):
    value: str


class ListExpr(_ExprModel):
    terms: list["Expr"] = Field(default_factory=list)


class FuncExpr(_ExprModel):
    """A callable value. Its contents are opaque to rendering."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    func: Callable[..., Any] | None = None


Expr = Union[UnitExpr, BoolExpr, IntExpr, FloatExpr, SymbolExpr, StringExpr, ListExpr, FuncExpr]

ListExpr.model_rebuild()


__all__ = [
    "BoolExpr",
    "Expr",
    "FloatExpr",
    "FuncExpr",
    "IntExpr",
    "ListExpr",
    "StringExpr",
    "SymbolExpr",
    "UnitExpr",
]
