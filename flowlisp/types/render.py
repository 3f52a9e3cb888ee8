"""Render flow values back into source-like text.

Output re-parses to an equal value for every kind except Function and Unit,
so rendered results can be fed back through the reader.
"""

from __future__ import annotations

from io import StringIO

from flowlisp import Value
from flowlisp.types.function import Function
from flowlisp.types.quoted import Quoted
from flowlisp.types.symbol import Symbol
from flowlisp.types.unit import UnitType

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
}


def render_text(text: str) -> str:
    with StringIO() as buffer:
        buffer.write('"')
        for char in text:
            escaped = _ESCAPES.get(char)
            if escaped is not None:
                buffer.write(escaped)
            elif not char.isprintable():
                buffer.write(f"\\u{{{ord(char):x}}}")
            else:
                buffer.write(char)
        buffer.write('"')
        return buffer.getvalue()


def render(value: Value) -> str:
    match value:
        case UnitType():
            return "void"
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case str():
            return render_text(value)
        case Symbol():
            return value.id
        case Quoted():
            return "'" + render(value.value)
        case Function():
            applied = ", ".join(
                f"{name}={render(arg)}"
                for name, arg in zip(value.parameters, value.applied)
            )
            return f"(fn! {render(value.body)} [{applied}])"
        case list():
            return "(" + " ".join(render(v) for v in value) + ")"
    return repr(value)
