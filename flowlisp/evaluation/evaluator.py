"""Core evaluator for flow.

`evaluate(scope, expr)` returns the scope left behind by the expression
together with its value. Scopes are threaded, never mutated: a binding made
while evaluating one argument is visible to the arguments after it.

A list form is dispatched on its head, in this order:
1. a special form name (arguments passed unevaluated),
2. `list` (the evaluated arguments are the result),
3. a native function,
4. a Function bound in the scope under that name.
A head that is itself a Function, or a list evaluating to one, is applied
directly. Anything else is an InvalidFunctionCall.
"""

from __future__ import annotations

import logging
import sys

from flowlisp import Value
from flowlisp.builtins import NATIVE_FUNCTIONS
from flowlisp.config import get_max_depth
from flowlisp.errors import InvalidFunctionCall, RecursionLimitExceeded, UnknownIdentifier
from flowlisp.evaluation.apply import apply_function
from flowlisp.evaluation.special_forms import SPECIAL_FORMS
from flowlisp.types.function import Function
from flowlisp.types.quoted import Quoted
from flowlisp.types.scope import Scope
from flowlisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

ANONYMOUS_CONTEXT = "anonymous"
LIST_CONSTRUCTOR = "list"

# Python frames used by one nested list evaluation, at most
# (evaluate0 -> evaluate_list -> call_named -> native call -> native -> evaluate0).
FRAMES_PER_LEVEL = 6
STACK_MARGIN = 200


def ensure_stack_room(limit: int) -> None:
    """Raise the interpreter recursion limit so `limit` nested lists fit on the Python stack."""
    needed = limit * FRAMES_PER_LEVEL + STACK_MARGIN
    if sys.getrecursionlimit() < needed:
        logger.debug("Raising recursion limit to %d for depth %d", needed, limit)
        sys.setrecursionlimit(needed)


def evaluate(scope: Scope, expr: Value) -> tuple[Scope, Value]:
    """
    Evaluate `expr` in `scope` and return `(new scope, value)`.
    Nesting deeper than the configured limit, or exhausting the Python stack,
    is reported as RecursionLimitExceeded.
    """
    limit = get_max_depth()
    ensure_stack_room(limit)
    try:
        return evaluate0(scope, expr, limit)
    except RecursionError:
        raise RecursionLimitExceeded(scope.context, limit) from None
    except RecursionLimitExceeded as e:
        # evaluate0 only knows its budget ran out; report the configured limit.
        raise RecursionLimitExceeded(e.context, limit) from None


def evaluate0(scope: Scope, expr: Value, budget: int) -> tuple[Scope, Value]:
    """
    Single evaluation step. `budget` is the number of nested list evaluations
    still allowed; each list form spends one. Running out raises
    RecursionLimitExceeded, which `evaluate` reports with the configured limit.
    """
    match expr:
        case Symbol():
            value = scope.get(expr.id)
            if value is None:
                raise UnknownIdentifier(expr.id)
            return scope, value
        case Quoted():
            # Strip exactly one layer; the contents are not evaluated.
            return scope, expr.value
        case list():
            if budget <= 0:
                raise RecursionLimitExceeded(scope.context, 0)
            new_scope, value = evaluate_list(scope, expr, budget - 1)
            # The context label only describes the call in progress.
            return new_scope.with_context(scope.context), value

    # --- Atoms return as-is ---
    return scope, expr


def evaluate_arguments(
    scope: Scope, tail: list[Value], budget: int
) -> tuple[Scope, list[Value]]:
    """Evaluate `tail` left to right, feeding each resulting scope to the next element."""
    args = []
    for expr in tail:
        scope, value = evaluate0(scope, expr, budget)
        args.append(value)
    return scope, args


def evaluate_list(scope: Scope, elements: list[Value], budget: int) -> tuple[Scope, Value]:
    if not elements:
        return scope, []

    head, *tail = elements

    if isinstance(head, Symbol):
        return call_named(scope.with_context(head.id), head.id, tail, elements, budget)

    # Evaluate a list head, e.g. ((fn! (a) a) 1), and apply the result.
    if isinstance(head, list):
        scope, head = evaluate0(scope, head, budget)

    if isinstance(head, Function):
        scope, args = evaluate_arguments(scope.with_context(ANONYMOUS_CONTEXT), tail, budget)
        return apply_function(scope, head, args, evaluate0, budget)

    raise InvalidFunctionCall(elements)


def call_named(
    scope: Scope, name: str, tail: list[Value], form: list[Value], budget: int
) -> tuple[Scope, Value]:
    special_form = SPECIAL_FORMS.get(name)
    if special_form is not None:
        logger.debug("Dispatching special form %s", name)
        return special_form(tail, scope, evaluate0, budget)

    scope, args = evaluate_arguments(scope, tail, budget)

    if name == LIST_CONSTRUCTOR:
        return scope, args

    native = NATIVE_FUNCTIONS.get(name)
    if native is not None:
        return native.call(name, args, scope, evaluate0, budget)

    value = scope.get(name)
    if value is None:
        raise UnknownIdentifier(name)
    if not isinstance(value, Function):
        raise InvalidFunctionCall(form)
    return apply_function(scope, value, args, evaluate0, budget)
