from flowlisp import EvaluatorFn, Value
from flowlisp.evaluation.special_forms.form_args import check_count, make_function, symbol_argument
from flowlisp.types.scope import Scope
from flowlisp.types.unit import Unit


def define_form(
    tail: list[Value],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
    budget: int,
) -> tuple[Scope, Value]:
    """
    (def! name value)
    The name is taken raw; the value is evaluated and bound in the returned scope.
    """
    check_count(tail, 2, scope.context)
    name = symbol_argument(tail[0], scope.context, 0)
    scope, value = evaluate_fn(scope, tail[1], budget)
    return scope.bind(name, value), Unit


def defn_form(
    tail: list[Value],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
    budget: int,
) -> tuple[Scope, Value]:
    """
    (defn! name (params...) body)
    """
    check_count(tail, 3, scope.context)
    name = symbol_argument(tail[0], scope.context, 0)
    function = make_function(tail[1], tail[2], scope.context, 1)
    return scope.bind(name, function), Unit
