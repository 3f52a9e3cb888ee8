"""Kind tags for flow values, used for coercion and diagnostics."""

from __future__ import annotations

from enum import Enum

from flowlisp import Value
from flowlisp.types.function import Function
from flowlisp.types.quoted import Quoted
from flowlisp.types.symbol import Symbol
from flowlisp.types.unit import UnitType

# Numbers are 64-bit signed integers.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


class Kind(Enum):
    SYMBOL = "symbol"
    TEXT = "string"
    SEQUENCE = "list"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FUNCTION = "function"
    QUOTED = "quoted"
    UNIT = "void"

    def __str__(self) -> str:
        return self.value


def kind_of(value: Value) -> Kind:
    """Return the kind tag of `value` without altering it.

    Raises TypeError for Python objects that are not flow values.
    """
    # bool first: it is a subclass of int
    match value:
        case bool():
            return Kind.BOOLEAN
        case int():
            return Kind.NUMBER
        case str():
            return Kind.TEXT
        case list():
            return Kind.SEQUENCE
        case Symbol():
            return Kind.SYMBOL
        case Quoted():
            return Kind.QUOTED
        case Function():
            return Kind.FUNCTION
        case UnitType():
            return Kind.UNIT
    raise TypeError(f"Not a flow value: {value!r}")
