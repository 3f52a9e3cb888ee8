"""Persistent environment for flow.

A Scope maps names to values through a chain of immutable binding frames.
`bind` never mutates: it returns a new Scope whose newest frame points at the
receiver's chain, so every older Scope stays valid and shares its structure.
Each Scope also carries a context label naming the form being evaluated; it
only feeds diagnostics.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from flowlisp import Value
from flowlisp.types.kind import INT_MAX, INT_MIN

MAIN_CONTEXT = "main"


class _Binding:
    __slots__ = ("name", "value", "outer")

    def __init__(self, name: str, value: Value, outer: Optional[_Binding]):
        self.name = name
        self.value = value
        self.outer = outer


class Scope:
    """Immutable name -> value mapping with a diagnostic context label."""

    __slots__ = ("context", "_head")

    def __init__(self, context: str, head: Optional[_Binding] = None):
        if not context:
            raise ValueError("Scope context must be a non-empty string")
        self.context: str = context
        self._head: Optional[_Binding] = head

    @classmethod
    def empty(cls, context: str = MAIN_CONTEXT) -> Scope:
        return cls(context)

    def bind(self, name: str, value: Value) -> Scope:
        """Return a new Scope where `name` is bound to `value`, shadowing older bindings."""
        return Scope(self.context, _Binding(name, value, self._head))

    def with_context(self, context: str) -> Scope:
        """Return a Scope with the same bindings and a new context label."""
        if context == self.context:
            return self
        return Scope(context, self._head)

    def get(self, name: str) -> Optional[Value]:
        """Look up the most recent binding for `name`, or None."""
        frame = self._head
        while frame is not None:
            if frame.name == name:
                return frame.value
            frame = frame.outer
        return None

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def _frames(self) -> Iterator[_Binding]:
        frame = self._head
        while frame is not None:
            yield frame
            frame = frame.outer

    def bindings(self) -> dict[str, Value]:
        """Visible bindings as a dict, oldest first."""
        visible: dict[str, Value] = {}
        for frame in self._frames():
            visible.setdefault(frame.name, frame.value)
        return dict(reversed(list(visible.items())))

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return len(self.bindings())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scope):
            return NotImplemented
        if self.context != other.context:
            return False
        return self._head is other._head or self.bindings() == other.bindings()

    __hash__ = None

    def __str__(self) -> str:
        from flowlisp.types.render import render
        with StringIO() as buffer:
            buffer.write("{ ")
            buffer.write(", ".join(f"{k}: {render(v)}" for k, v in self.bindings().items()))
            buffer.write(" }")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Scope {self.context}: {self}>"


# Seeded once; Scope is immutable so sharing it is safe.
INITIAL_SCOPE = Scope.empty(MAIN_CONTEXT).bind("MIN_INT", INT_MIN).bind("MAX_INT", INT_MAX)
