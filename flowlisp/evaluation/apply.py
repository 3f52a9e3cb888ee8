"""Application engine for flow.

User closures and curried natives are both Function values, so one routine
applies them:
- Too few arguments: return a new Function with the arguments appended to
  `applied` (partial application). The body is not evaluated.
- Exactly enough: bind the parameters on top of the caller's scope (call-time
  scoping), evaluate the body there, then drop that scope. The caller gets its
  own scope back; nothing bound inside the body escapes.
- Too many: raise TooManyArguments.
"""

from __future__ import annotations

import logging

from flowlisp import EvaluatorFn, Value
from flowlisp.errors import TooManyArguments
from flowlisp.types.function import Function
from flowlisp.types.scope import Scope

logger = logging.getLogger(__name__)


def apply_function(
    scope: Scope,
    fn: Function,
    args: list[Value],
    evaluate_fn: EvaluatorFn,
    budget: int,
) -> tuple[Scope, Value]:
    """Apply `fn` to `args` (appended after its already-applied arguments)."""
    arguments = [*fn.applied, *args]
    provided = len(arguments)
    arity = fn.arity

    if provided < arity:
        return scope, fn.with_applied(args)

    if provided > arity:
        raise TooManyArguments(scope.context, arity, provided)

    logger.debug("Applying %s to %d argument(s) in `%s`", fn.parameters, provided, scope.context)
    call_scope = fn.bind_arguments(scope, arguments)
    _, result = evaluate_fn(call_scope, fn.body, budget)
    return scope, result
