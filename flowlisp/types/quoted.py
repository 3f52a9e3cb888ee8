"""Quoted values: one layer of deferred evaluation."""

from __future__ import annotations

from flowlisp import Value


class Quoted:
    """Wraps a value so that evaluating it yields the value itself, unevaluated."""

    __slots__ = ("value",)

    def __init__(self, value: Value):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Quoted) and self.value == other.value

    __hash__ = None  # wraps lists

    def __repr__(self) -> str:
        return f"Quoted({self.value!r})"

    def __str__(self) -> str:
        from flowlisp.types.render import render
        return render(self)
