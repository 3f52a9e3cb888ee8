import pytest

from flowlisp.errors import InvalidArgumentsCount, InvalidArgumentType, UnknownIdentifier
from flowlisp.types.function import Function
from flowlisp.types.kind import Kind
from flowlisp.types.symbol import Symbol
from flowlisp.types.unit import Unit


# -----------------------------------------------------
# def! / defn!
# -----------------------------------------------------

def test_def_binds_evaluated_value(interp):
    assert interp.eval("(def! x (+ 1 2))") is Unit
    assert interp.eval("x") == 3


def test_def_shadows_previous_binding(interp):
    interp.eval("(def! x 1) (def! x 2)")
    assert interp.eval("x") == 2


def test_defn_builds_a_function(interp):
    interp.eval("(defn! double (n) (* n 2))")
    assert interp.scope.get("double") == Function(
        ["n"], [Symbol("*"), Symbol("n"), 2]
    )
    assert interp.eval("(double 21)") == 42


def test_defn_body_is_not_evaluated_at_definition(interp):
    interp.eval("(defn! later () (missing))")
    with pytest.raises(UnknownIdentifier):
        interp.eval("(later)")


def test_recursive_definition(interp):
    interp.eval("(defn! fact (n) (if! (<= n 1) 1 (* n (fact (- n 1)))))")
    assert interp.eval("(fact 10)") == 3628800


def test_mutual_recursion_resolves_at_call_time(interp):
    interp.eval(
        """
        (defn! even? (n) (if! (= n 0) true (odd? (- n 1))))
        (defn! odd? (n) (if! (= n 0) false (even? (- n 1))))
        """
    )
    assert interp.eval("(even? 10)") is True
    assert interp.eval("(odd? 7)") is True


@pytest.mark.parametrize(
    "source, context, expected, got",
    [
        ("(def! x)", "def!", 2, 1),
        ("(def! x 1 2)", "def!", 2, 3),
        ("(defn! f (a))", "defn!", 3, 2),
        ("(fn! (a))", "fn!", 2, 1),
        ("(if! true 1)", "if!", 3, 2),
        ("(if! true 1 2 3)", "if!", 3, 4),
    ]
)
def test_wrong_argument_count(interp, source, context, expected, got):
    with pytest.raises(InvalidArgumentsCount) as info:
        interp.eval(source)
    assert (info.value.context, info.value.expected, info.value.got) == (context, expected, got)


@pytest.mark.parametrize(
    "source, context, position, expected, got",
    [
        ("(def! 1 2)", "def!", 0, Kind.SYMBOL, Kind.NUMBER),
        ("(def! \"x\" 2)", "def!", 0, Kind.SYMBOL, Kind.TEXT),
        ("(defn! f x x)", "defn!", 1, Kind.SEQUENCE, Kind.SYMBOL),
        ("(defn! f (1) 1)", "defn!", 1, Kind.SYMBOL, Kind.NUMBER),
        ("(fn! x x)", "fn!", 0, Kind.SEQUENCE, Kind.SYMBOL),
        ("(fn! '(a) a)", "fn!", 0, Kind.SEQUENCE, Kind.QUOTED),
        ("(if! 1 2 3)", "if!", 0, Kind.BOOLEAN, Kind.NUMBER),
        ("(if! '() 2 3)", "if!", 0, Kind.BOOLEAN, Kind.SEQUENCE),
    ]
)
def test_wrong_argument_kind(interp, source, context, position, expected, got):
    with pytest.raises(InvalidArgumentType) as info:
        interp.eval(source)
    error = info.value
    assert (error.context, error.position, error.expected, error.got) == (
        context, position, expected, got
    )


def test_failed_definition_binds_nothing(interp):
    with pytest.raises(UnknownIdentifier):
        interp.eval("(def! x (missing))")
    assert "x" not in interp.scope


# -----------------------------------------------------
# fn! / if!
# -----------------------------------------------------

def test_fn_does_not_evaluate_its_body(interp):
    assert interp.eval("(fn! (a) (missing a))") == Function(
        ["a"], [Symbol("missing"), Symbol("a")]
    )


def test_fn_with_no_parameters(interp):
    assert interp.eval("((fn! () 42))") == 42


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if! true 1 2)", 1),
        ("(if! false 1 2)", 2),
        ("(if! (< 1 2) 'yes 'no)", Symbol("yes")),
        ("(if! true 1 (missing))", 1),
        ("(if! false (missing) 2)", 2),
    ]
)
def test_if_evaluates_only_the_chosen_branch(interp, source, expected):
    assert interp.eval(source) == expected


def test_if_branch_side_effects(interp, capsys):
    interp.eval('(if! false (print "then") (print "else"))')
    assert capsys.readouterr().out == "else\n"


def test_unlisted_bang_identifier_is_an_ordinary_call(interp):
    interp.eval("(defn! twice! (x) (* x 2))")
    assert interp.eval("(twice! 4)") == 8
    with pytest.raises(UnknownIdentifier):
        interp.eval("(while! true 1)")
