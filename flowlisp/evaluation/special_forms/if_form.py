from flowlisp import EvaluatorFn, Value
from flowlisp.errors import CoercionError, InvalidArgumentType
from flowlisp.evaluation.special_forms.form_args import check_count
from flowlisp.types.convert import to_bool
from flowlisp.types.scope import Scope


def if_form(
    tail: list[Value],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
    budget: int,
) -> tuple[Scope, Value]:
    check_count(tail, 3, scope.context)
    context = scope.context

    scope, cond = evaluate_fn(scope, tail[0], budget)
    # Strict booleans: no truthiness for other kinds
    try:
        is_true = to_bool(cond)
    except CoercionError as e:
        raise InvalidArgumentType.from_coercion(e, context, 0) from None

    # Only the chosen branch is evaluated.
    if is_true:
        return evaluate_fn(scope, tail[1], budget)
    return evaluate_fn(scope, tail[2], budget)
