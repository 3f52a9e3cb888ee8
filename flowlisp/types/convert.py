"""Conversions between flow values and native Python types.

Every `to_*` coercion either returns the native value or raises CoercionError
carrying the expected and actual kinds. Symbols and text are both accepted
where text is wanted; no other cross-kind conversion is performed.
"""

from __future__ import annotations

from typing import Callable

from flowlisp import Value
from flowlisp.errors import CoercionError, IntegerOverflow
from flowlisp.types.kind import INT_MAX, INT_MIN, Kind, kind_of
from flowlisp.types.symbol import Symbol
from flowlisp.types.unit import Unit, UnitType

Coercion = Callable[[Value], object]


def to_int(value: Value) -> int:
    if type(value) is int:
        return value
    raise CoercionError(Kind.NUMBER, kind_of(value))


def to_bool(value: Value) -> bool:
    if type(value) is bool:
        return value
    raise CoercionError(Kind.BOOLEAN, kind_of(value))


def to_text(value: Value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Symbol):
        return value.id
    raise CoercionError(Kind.TEXT, kind_of(value))


def to_sequence(value: Value) -> list[Value]:
    if isinstance(value, list):
        return value
    raise CoercionError(Kind.SEQUENCE, kind_of(value))


def to_symbol_name(value: Value) -> str:
    if isinstance(value, Symbol):
        return value.id
    raise CoercionError(Kind.SYMBOL, kind_of(value))


def to_unit(value: Value) -> None:
    if isinstance(value, UnitType):
        return None
    raise CoercionError(Kind.UNIT, kind_of(value))


def from_native(value: object, context: str = "main") -> Value:
    """Convert a native result back into a flow value.

    None becomes Unit and tuples become lists. Integers outside the 64-bit
    signed range raise IntegerOverflow.
    """
    if value is None:
        return Unit
    if type(value) is int and not INT_MIN <= value <= INT_MAX:
        raise IntegerOverflow(context, value)
    if isinstance(value, tuple):
        return list(value)
    return value
