from flowlisp import EvaluatorFn, Value
from flowlisp.evaluation.special_forms.form_args import check_count, make_function
from flowlisp.types.scope import Scope


def fn_form(
    tail: list[Value],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
    budget: int,
) -> tuple[Scope, Value]:
    # (fn! (params...) body): neither the parameter list nor the body is evaluated.
    check_count(tail, 2, scope.context)
    return scope, make_function(tail[0], tail[1], scope.context, 0)
