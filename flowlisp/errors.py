"""Errors raised while reading and evaluating flow code.

Every error keeps its fields as attributes and renders a readable message,
so a caller can either inspect the failure or print it.
"""

from __future__ import annotations

from flowlisp import Value
from flowlisp.types.kind import Kind, kind_of
from flowlisp.types.quoted import Quoted
from flowlisp.types.render import render


class FlowError(Exception):
    """ Base class for all flow errors"""
    pass


class ParseError(FlowError):
    """ Raised when source text cannot be read as an expression"""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"Parse error at position {position}: {message}")


class CoercionError(FlowError):
    """ Raised when a value cannot be converted to the requested native type"""

    def __init__(self, expected: Kind, got: Kind):
        self.expected = expected
        self.got = got
        super().__init__(f"Expected `{expected}`, got `{got}`")


class EvalError(FlowError):
    """ Base class for errors raised during evaluation"""
    pass


class InvalidArgumentType(EvalError):
    """ Raised when an argument has the wrong kind for its slot"""

    def __init__(self, context: str, expected: Kind, got: Kind, position: int):
        self.context = context
        self.expected = expected
        self.got = got
        self.position = position
        super().__init__(
            f"Invalid argument type for `{context}` at position `{position}`, "
            f"expected `{expected}`, got `{got}`"
        )

    @classmethod
    def from_coercion(cls, error: CoercionError, context: str, position: int) -> InvalidArgumentType:
        return cls(context, error.expected, error.got, position)


class InvalidConcatenation(EvalError):
    """ Raised when concat is given a pair of kinds it cannot join"""

    def __init__(self, left: Kind, right: Kind):
        self.left = left
        self.right = right
        super().__init__(f"Invalid argument types, cannot concat `{left}` and `{right}`")


class InvalidFunctionCall(EvalError):
    """ Raised when the head of a list form is not callable"""

    def __init__(self, values: list[Value]):
        self.values = list(values)
        head = self.values[0]
        super().__init__(
            f"Invalid function call, got `{render(head)}` of type `{kind_of(head)}`. \n"
            f"Is this supposed to be a list? If so, use `{render(self.suggestion)}`"
        )

    @property
    def suggestion(self) -> Quoted:
        """The quoted form the caller probably meant."""
        return Quoted(list(self.values))


class UnknownIdentifier(EvalError):
    """ Raised when a name is neither bound nor a native function"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown identifier `{name}`.")


class InvalidArgumentsCount(EvalError):
    """ Raised when a special form receives the wrong number of arguments"""

    def __init__(self, context: str, expected: int, got: int):
        self.context = context
        self.expected = expected
        self.got = got
        super().__init__(f"`{context}` expects {expected} arguments, got {got}")


class TooManyArguments(EvalError):
    """ Raised when a callable is supplied more arguments than it has parameters"""

    def __init__(self, context: str, expected: int, got: int):
        self.context = context
        self.expected = expected
        self.got = got
        super().__init__(f"Too many arguments for `{context}`: expected at most {expected}, got {got}")


class RecursionLimitExceeded(EvalError):
    """ Raised when evaluation nests deeper than the configured limit"""

    def __init__(self, context: str, limit: int):
        self.context = context
        self.limit = limit
        super().__init__(f"Recursion limit of {limit} exceeded in `{context}`")


class DivisionByZero(EvalError):
    """ Raised when dividing or taking a remainder by zero"""

    def __init__(self, context: str):
        self.context = context
        super().__init__(f"Division by zero in `{context}`")


class EmptySequence(EvalError):
    """ Raised when head or tail is taken of an empty list"""

    def __init__(self, context: str):
        self.context = context
        super().__init__(f"`{context}` of an empty list")


class IntegerOverflow(EvalError):
    """ Raised when a result does not fit in a 64-bit signed integer"""

    def __init__(self, context: str, value: int):
        self.context = context
        self.value = value
        super().__init__(f"Integer overflow in `{context}`: {value} is out of range")
