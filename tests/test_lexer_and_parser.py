import pytest
from hypothesis import given, strategies as st

from flowlisp.errors import ParseError
from flowlisp.reader.parser import lex, parse, parse_all
from flowlisp.types.kind import INT_MAX, INT_MIN
from flowlisp.types.quoted import Quoted
from flowlisp.types.render import render
from flowlisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("identifier", "a", 0)]),
        ("'a", [("quote", "'", 0), ("identifier", "a", 1)]),
        ("(+ 1 -2)", [("lparen", "(", 0), ("operator", "+", 1), ("number", "1", 3), ("number", "-2", 5), ("rparen", ")", 7)]),
        ('"hi"', [("string", '"hi"', 0)]),
        (" ; comment\n a b", [("identifier", "a", 12), ("identifier", "b", 14)]),
        ("def! empty?", [("identifier", "def!", 0), ("identifier", "empty?", 5)]),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("9223372036854775807", 2 ** 63 - 1),
        ("-9223372036854775808", -(2 ** 63)),
        ("true", True),
        ("false", False),
        ("abc_1", Symbol("abc_1")),
        ("fn!", Symbol("fn!")),
        ("<=", Symbol("<=")),
        ('"hello"', "hello"),
        ('"a\\"b\\n\\t\\\\"', 'a"b\n\t\\'),
        ('"\\u{1F600}"', "\U0001F600"),
        ("'a", Quoted(Symbol("a"))),
        ("''a", Quoted(Quoted(Symbol("a")))),
        ("()", []),
        ("(+ 1 2)", [Symbol("+"), 1, 2]),
        ("(+ 1 (* 2 3))", [Symbol("+"), 1, [Symbol("*"), 2, 3]]),
        ("'(1 2)", Quoted([1, 2])),
    ]
)
def test_parser(source, expected):
    value, remainder = parse(source)
    assert value == expected
    assert remainder == ""


def test_booleans_are_not_numbers():
    value, _ = parse("true")
    assert value is True
    value, _ = parse("1")
    assert type(value) is int


def test_parse_returns_remainder():
    value, remainder = parse("(a b)  (c) d")
    assert value == [Symbol("a"), Symbol("b")]
    assert remainder == "(c) d"


def test_parse_is_lazy_about_the_remainder():
    # Text after the first expression is not read.
    value, remainder = parse("1 @@@")
    assert value == 1
    assert remainder == "@@@"


def test_parse_all():
    exprs = list(parse_all("(def! x 1) ; bind\n (+ x 2)"))
    assert exprs == [
        [Symbol("def!"), Symbol("x"), 1],
        [Symbol("+"), Symbol("x"), 2],
    ]


@pytest.mark.parametrize(
    "source, message",
    [
        ("", "Unexpected end of input"),
        ("(1 2", "Unmatched '('"),
        (")", "Unexpected ')'"),
        ('"abc', "Unterminated string literal"),
        ("@", "Unexpected character"),
        ('"\\q"', "Unknown escape sequence"),
        ("'", "Unexpected end of input"),
        ("9223372036854775808", "Integer literal out of range"),
        ("-9223372036854775809", "Integer literal out of range"),
        ("(list 99999999999999999999)", "Integer literal out of range"),
    ]
)
def test_parse_errors(source, message):
    with pytest.raises(ParseError) as info:
        parse(source)
    assert message in str(info.value)


# -----------------------------------------------------
# Render / parse round trip
# -----------------------------------------------------

identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,8}[?!]?", fullmatch=True).filter(
    lambda s: s not in ("true", "false")
)
operators = st.from_regex(r"[<>+\-*/%=]{1,3}", fullmatch=True)

atoms = st.one_of(
    st.integers(min_value=INT_MIN, max_value=INT_MAX),
    st.booleans(),
    st.text(max_size=20),
    st.builds(Symbol, st.one_of(identifiers, operators)),
)

values = st.recursive(
    atoms,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.builds(Quoted, children),
    ),
    max_leaves=20,
)


@given(values)
def test_render_parse_round_trip(value):
    parsed, remainder = parse(render(value))
    assert parsed == value
    assert remainder == ""


def test_out_of_range_literal_reports_its_position():
    with pytest.raises(ParseError) as info:
        parse("(+ 1 99999999999999999999)")
    assert info.value.position == 5
