"""Native functions for flow.

Every native has a fixed arity and shares the currying protocol of user
functions: called with fewer arguments it returns a Function whose body calls
the native by name, so partially applied natives and closures look the same.
The registry is built once at import time and is read-only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable

from flowlisp import EvaluatorFn, Value
from flowlisp.errors import (
    CoercionError,
    DivisionByZero,
    EmptySequence,
    InvalidArgumentType,
    InvalidConcatenation,
    TooManyArguments,
)
from flowlisp.types.convert import (
    Coercion,
    from_native,
    to_bool,
    to_int,
    to_sequence,
    to_text,
)
from flowlisp.types.kind import Kind, kind_of
from flowlisp.types.function import Function
from flowlisp.types.quoted import Quoted
from flowlisp.types.render import render
from flowlisp.types.scope import INITIAL_SCOPE, Scope
from flowlisp.types.symbol import Symbol
from flowlisp.types.unit import Unit

logger = logging.getLogger(__name__)

NativeImpl = Callable[[Scope, list[Value], EvaluatorFn, int], tuple[Scope, Value]]

# Kinds concat refuses on either side
_NOT_CONCATENABLE = (Kind.FUNCTION, Kind.QUOTED, Kind.UNIT)


@dataclass(frozen=True)
class NativeFunction:
    arity: int
    implementation: NativeImpl

    def to_function(self, name: str, applied: list[Value]) -> Function:
        """Wrap this native as a Function calling it by name with generated parameters."""
        parameters = [f"a{n}" for n in range(self.arity)]
        body = [Symbol(name), *(Symbol(p) for p in parameters)]
        return Function(parameters, body, applied)

    def call(
        self,
        name: str,
        args: list[Value],
        scope: Scope,
        evaluate_fn: EvaluatorFn,
        budget: int,
    ) -> tuple[Scope, Value]:
        if len(args) < self.arity:
            return scope, self.to_function(name, args)
        if len(args) > self.arity:
            raise TooManyArguments(name, self.arity, len(args))
        logger.debug("Calling native %s", name)
        return self.implementation(scope, args, evaluate_fn, budget)


def argument(args: list[Value], position: int, coerce: Coercion, context: str) -> Any:
    try:
        return coerce(args[position])
    except CoercionError as e:
        raise InvalidArgumentType.from_coercion(e, context, position) from None


# -------------------------------
# Typed wrappers
# -------------------------------
def native_op1(coerce: Coercion, operation: Callable[[Any], Any]) -> NativeImpl:
    def implementation(scope, args, evaluate_fn, budget):
        a = argument(args, 0, coerce, scope.context)
        return scope, from_native(operation(a), scope.context)
    return implementation


def native_op2(
    coerce_a: Coercion, coerce_b: Coercion, operation: Callable[[Any, Any], Any]
) -> NativeImpl:
    def implementation(scope, args, evaluate_fn, budget):
        a = argument(args, 0, coerce_a, scope.context)
        b = argument(args, 1, coerce_b, scope.context)
        try:
            result = operation(a, b)
        except ZeroDivisionError:
            raise DivisionByZero(scope.context) from None
        return scope, from_native(result, scope.context)
    return implementation


def math(operation: Callable[[int, int], int]) -> NativeImpl:
    return native_op2(to_int, to_int, operation)


def comparison(operation: Callable[[int, int], bool]) -> NativeImpl:
    return native_op2(to_int, to_int, operation)


def logic(operation: Callable[[bool, bool], bool]) -> NativeImpl:
    return native_op2(to_bool, to_bool, operation)


# -------------------------------
# Arithmetic
# -------------------------------
def truncating_div(a: int, b: int) -> int:
    # Integer division rounds toward zero.
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def truncating_mod(a: int, b: int) -> int:
    # Remainder takes the sign of the dividend.
    return a - b * truncating_div(a, b)


# -------------------------------
# Sequences
# -------------------------------
def head(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    items = argument(args, 0, to_sequence, scope.context)
    if not items:
        raise EmptySequence(scope.context)
    return scope, items[0]


def tail(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    items = argument(args, 0, to_sequence, scope.context)
    if not items:
        raise EmptySequence(scope.context)
    return scope, items[1:]


def push(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    items = argument(args, 0, to_sequence, scope.context)
    return scope, [*items, args[1]]


def concat(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    """Join lists, append or prepend a scalar, or pair two scalars."""
    left, right = args
    left_kind, right_kind = kind_of(left), kind_of(right)
    if left_kind in _NOT_CONCATENABLE or right_kind in _NOT_CONCATENABLE:
        raise InvalidConcatenation(left_kind, right_kind)

    match left, right:
        case list(), list():
            return scope, [*left, *right]
        case list(), _:
            return scope, [*left, right]
        case _, list():
            return scope, [left, *right]
    return scope, [left, right]


def fold(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    """Left fold: (op acc item) for each item, threading the scope."""
    operation, accumulator = args[0], args[1]
    items = argument(args, 2, to_sequence, scope.context)
    # Arguments are quoted so the already-evaluated values are passed through as-is.
    for item in items:
        scope, accumulator = evaluate_fn(
            scope, [operation, Quoted(accumulator), Quoted(item)], budget
        )
    return scope, accumulator


def map_(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    operation = args[0]
    items = argument(args, 1, to_sequence, scope.context)
    results = []
    for item in items:
        scope, result = evaluate_fn(scope, [operation, Quoted(item)], budget)
        results.append(result)
    return scope, results


# -------------------------------
# Evaluation and introspection
# -------------------------------
def eval_(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    return evaluate_fn(scope, args[0], budget)


def print_(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    text = argument(args, 0, to_text, scope.context)
    print(text)
    return scope, Unit


def debug(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    value = args[0]
    print(render(value))
    return scope, value


def print_scope(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    print(scope)
    return scope, Unit


def clear_scope(scope: Scope, args: list[Value], evaluate_fn: EvaluatorFn, budget: int) -> tuple[Scope, Value]:
    logger.info("Resetting scope to its initial bindings")
    return INITIAL_SCOPE, Unit


# -------------------------------
# Registration
# -------------------------------
NATIVE_FUNCTIONS: MappingProxyType[str, NativeFunction] = MappingProxyType({
    "eval": NativeFunction(1, eval_),
    "print": NativeFunction(1, print_),
    "debug": NativeFunction(1, debug),
    "to_string": NativeFunction(1, native_op1(to_int, str)),
    "print_scope": NativeFunction(0, print_scope),
    "clear_scope": NativeFunction(0, clear_scope),

    "fold": NativeFunction(3, fold),
    "map": NativeFunction(2, map_),
    "concat": NativeFunction(2, concat),
    "push": NativeFunction(2, push),
    "head": NativeFunction(1, head),
    "tail": NativeFunction(1, tail),
    "len": NativeFunction(1, native_op1(to_sequence, len)),

    "+": NativeFunction(2, math(lambda a, b: a + b)),
    "-": NativeFunction(2, math(lambda a, b: a - b)),
    "*": NativeFunction(2, math(lambda a, b: a * b)),
    "/": NativeFunction(2, math(truncating_div)),
    "%": NativeFunction(2, math(truncating_mod)),

    "add": NativeFunction(2, math(lambda a, b: a + b)),
    "sub": NativeFunction(2, math(lambda a, b: a - b)),
    "mul": NativeFunction(2, math(lambda a, b: a * b)),
    "div": NativeFunction(2, math(truncating_div)),
    "mod": NativeFunction(2, math(truncating_mod)),
    "max": NativeFunction(2, math(max)),
    "min": NativeFunction(2, math(min)),

    "<": NativeFunction(2, comparison(lambda a, b: a < b)),
    ">": NativeFunction(2, comparison(lambda a, b: a > b)),
    "<=": NativeFunction(2, comparison(lambda a, b: a <= b)),
    ">=": NativeFunction(2, comparison(lambda a, b: a >= b)),
    "=": NativeFunction(2, comparison(lambda a, b: a == b)),

    "lt": NativeFunction(2, comparison(lambda a, b: a < b)),
    "gt": NativeFunction(2, comparison(lambda a, b: a > b)),
    "ltq": NativeFunction(2, comparison(lambda a, b: a <= b)),
    "gtq": NativeFunction(2, comparison(lambda a, b: a >= b)),
    "eq": NativeFunction(2, comparison(lambda a, b: a == b)),

    "and": NativeFunction(2, logic(lambda a, b: a and b)),
    "or": NativeFunction(2, logic(lambda a, b: a or b)),
    "not": NativeFunction(1, native_op1(to_bool, lambda a: not a)),
})
