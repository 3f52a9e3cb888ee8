import pytest

from flowlisp.errors import TooManyArguments
from flowlisp.types.function import Function
from flowlisp.types.symbol import Symbol


def test_native_partial_application(interp):
    partial = interp.eval("(+ 3)")
    assert isinstance(partial, Function)
    assert partial.parameters == ["a0", "a1"]
    assert partial.applied == [3]
    assert partial.body == [Symbol("+"), Symbol("a0"), Symbol("a1")]
    assert interp.eval("((+ 3) 4)") == 7


def test_user_partial_application(interp):
    interp.eval("(defn! plus (a b) (+ a b))")
    partial = interp.eval("(plus 3)")
    assert isinstance(partial, Function)
    assert partial.parameters == ["a", "b"]
    assert partial.applied == [3]
    assert interp.eval("((plus 3) 4)") == 7


@pytest.mark.parametrize("callable_name", ["+", "plus"])
def test_curry_then_apply_through_a_binding(interp, callable_name):
    interp.eval("(defn! plus (a b) (+ a b))")
    interp.eval(f"(def! add3 ({callable_name} 3))")
    assert interp.eval("(add3 4)") == 7
    # The stored partial is unchanged by applying it
    assert interp.eval("(add3 10)") == 13


def test_currying_one_argument_at_a_time(interp):
    interp.eval("(defn! sum3 (a b c) (+ a (+ b c)))")
    interp.eval("(def! s1 (sum3 1))")
    interp.eval("(def! s2 (s1 2))")
    assert interp.eval("(s2 3)") == 6
    assert interp.eval("(s1 2 3)") == 6


def test_partial_application_does_not_evaluate_body(interp):
    interp.eval("(defn! boom (a b) (undefined a b))")
    assert isinstance(interp.eval("(boom 1)"), Function)


def test_zero_argument_call_of_native_returns_function(interp):
    partial = interp.eval("(-)")
    assert partial.applied == []
    assert interp.eval("((-) 10 4)") == 6


def test_escaping_functions_are_never_saturated(interp):
    interp.eval("(defn! pair (a b) (list a b))")
    for source in ["(pair)", "(pair 1)", "(+ 1)", "(fold '+)", "(fold '+ 0)"]:
        value = interp.eval(source)
        assert len(value.applied) < len(value.parameters)


def test_too_many_arguments_for_user_function(interp):
    interp.eval("(defn! id (a) a)")
    with pytest.raises(TooManyArguments) as info:
        interp.eval("(id 1 2)")
    assert (info.value.context, info.value.expected, info.value.got) == ("id", 1, 2)


def test_too_many_arguments_through_partial(interp):
    with pytest.raises(TooManyArguments):
        interp.eval("((+ 1) 2 3)")
