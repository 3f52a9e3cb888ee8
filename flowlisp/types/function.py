"""Function values: user closures and curried natives share one representation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flowlisp import Value

if TYPE_CHECKING:
    from flowlisp.types.scope import Scope


class Function:
    """A callable with named parameters, a body and the arguments applied so far.

    A Function escaping a call always has fewer applied arguments than
    parameters; a saturating call evaluates the body instead.
    """

    __slots__ = ("parameters", "body", "applied")

    def __init__(
        self, parameters: list[str], body: Value, applied: list[Value] | None = None
    ):
        self.parameters: list[str] = list(parameters)
        self.body: Value = body
        self.applied: list[Value] = list(applied) if applied else []

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def with_applied(self, arguments: list[Value]) -> Function:
        """Return a copy of this function with `arguments` appended to `applied`."""
        return Function(self.parameters, self.body, [*self.applied, *arguments])

    def bind_arguments(self, scope: Scope, arguments: list[Value]) -> Scope:
        """Bind each parameter, in order, to the matching argument on top of `scope`."""
        for name, value in zip(self.parameters, arguments):
            scope = scope.bind(name, value)
        return scope

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Function)
            and self.parameters == other.parameters
            and self.body == other.body
            and self.applied == other.applied
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Function({self.parameters!r}, {self.body!r}, {self.applied!r})"

    def __str__(self) -> str:
        from flowlisp.types.render import render
        return render(self)
