"""Argument checks shared by the special forms."""

from __future__ import annotations

from flowlisp import Value
from flowlisp.errors import CoercionError, InvalidArgumentsCount, InvalidArgumentType
from flowlisp.types.convert import to_sequence, to_symbol_name
from flowlisp.types.function import Function


def check_count(tail: list[Value], expected: int, context: str) -> None:
    if len(tail) != expected:
        raise InvalidArgumentsCount(context, expected, len(tail))


def symbol_argument(value: Value, context: str, position: int) -> str:
    try:
        return to_symbol_name(value)
    except CoercionError as e:
        raise InvalidArgumentType.from_coercion(e, context, position) from None


def make_function(params: Value, body: Value, context: str, position: int) -> Function:
    """Build a Function from a literal parameter list and an unevaluated body."""
    try:
        names = to_sequence(params)
    except CoercionError as e:
        raise InvalidArgumentType.from_coercion(e, context, position) from None
    parameters = [symbol_argument(name, context, position) for name in names]
    return Function(parameters, body)
