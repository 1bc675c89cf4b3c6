import string

import pytest
from hypothesis import given, strategies as st

from kappa.printer import to_string
from kappa.reader.parser import tokenize, parse, atom, read
from kappa.errors import KappaSyntaxError
from kappa.types.error import Error
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol
from kappa.types.vector import Vector


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("(+ 1 (* 2 3))", ["(", "+", "1", "(", "*", "2", "3", ")", ")"]),
        ("[1 2]", ["[", "1", "2", "]"]),
        ("(fn[x]x)", ["(", "fn", "[", "x", "]", "x", ")"]),
        ("  a\n\tb  ", ["a", "b"]),
        ("", []),
        # string literals are not special to the tokenizer
        ('"a b"', ['"a', 'b"']),
        ('"(x)"', ['"', "(", "x", ")", '"']),
    ],
)
def test_tokenize(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("12", 12),
        ("-7", -7),
        ("+5", 5),
        ("3.5", 3.5),
        ("1e3", 1000.0),
        ("99999999999999999999", 1e20),  # does not fit 64 bits
        ("1_000", Symbol("1_000")),
        ("true", True),
        ("false", False),
        ('"hi"', "hi"),
        ('"a"b"', "ab"),
        ('"', ""),
        ('a"b', Symbol('a"b')),
        ("foo-bar?", Symbol("foo-bar?")),
    ],
)
def test_atom(token, expected):
    result = atom(token)
    assert type(result) is type(expected)
    assert result == expected


def test_atom_nil():
    assert atom("nil") is Nil


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", [Symbol("+"), 1, 2]),
        ("[1 2 [3]]", Vector([1, 2, Vector([3])])),
        ("(fn [x] x)", [Symbol("fn"), Vector([Symbol("x")]), Symbol("x")]),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
        ("42", 42),
        ('"hello"', "hello"),
        ("()", []),
        ("[]", Vector()),
        # a List that happens to start with `true` is still a List
        ("(true 1)", [True, 1]),
    ],
)
def test_parse(source, expected):
    result = parse(tokenize(source))
    assert type(result) is type(expected)
    assert result == expected


def test_bare_atom_stops_the_read():
    assert parse(tokenize("x (y z)")) == Symbol("x")


def test_trailing_forms_join_the_first_form():
    assert parse(tokenize("(a)(b)")) == [Symbol("a"), [Symbol("b")]]
    assert parse(tokenize("(def a 1) (def b 2)")) == [
        Symbol("def"), Symbol("a"), 1, [Symbol("def"), Symbol("b"), 2],
    ]
    assert parse(tokenize("[1] 2")) == Vector([1, 2])
    assert parse(tokenize("(a) [b]")) == [Symbol("a"), Vector([Symbol("b")])]


@pytest.mark.parametrize(
    "source,message",
    [
        ("", "Unexpected end of input"),
        ("(a", "Could not parse"),
        ("(a (b)", "Could not parse"),
        (")", "Could not parse"),
        ("(a))", "Could not parse"),
        ("(a]", "Could not parse"),
        ("[a)", "Could not parse"),
        ("[1 2", "Could not parse"),
    ],
)
def test_parse_failures_are_error_values(source, message):
    assert parse(tokenize(source)) == Error(message)


def test_read_raises():
    with pytest.raises(KappaSyntaxError):
        read(tokenize("(a"))


# -----------------------------------------------------
# Properties
# -----------------------------------------------------

_words = st.text(alphabet=string.ascii_letters + string.digits + "-+*/!?<>=", min_size=1, max_size=8)


@given(st.integers(min_value=-(2**63), max_value=2**63 - 1))
def test_integer_round_trip(n):
    assert atom(to_string(n)) == n


@given(st.floats(allow_nan=False))
def test_float_round_trip(x):
    result = atom(to_string(x))
    assert isinstance(result, float)
    assert result == x


@given(_words)
def test_string_round_trip(s):
    assert atom(to_string(s)) == s


@pytest.mark.parametrize("value", [True, False, Nil])
def test_literal_round_trip(value):
    assert atom(to_string(value)) is value


_symbols = st.from_regex(r"s[a-z]{0,4}", fullmatch=True).map(Symbol)
_atoms = st.one_of(_symbols, st.integers(min_value=-1000, max_value=1000))


def _containers(children):
    return st.one_of(
        st.lists(children, max_size=4),
        st.lists(children, max_size=4).map(Vector),
    )


_forms = _containers(st.recursive(_atoms, _containers, max_leaves=12))


def _render(form) -> str:
    if isinstance(form, Vector):
        return "[" + " ".join(_render(f) for f in form) + "]"
    if isinstance(form, list):
        return "(" + " ".join(_render(f) for f in form) + ")"
    return str(form)


@given(_forms)
def test_balanced_input_parses_to_one_form(form):
    assert parse(tokenize(_render(form))) == form


@given(_forms)
def test_missing_closer_is_a_parse_failure(form):
    assert parse(tokenize(_render(form)[:-1])) == Error("Could not parse")


@given(_forms)
def test_surplus_closer_is_a_parse_failure(form):
    assert parse(tokenize(_render(form) + ")")) == Error("Could not parse")


def test_symbols_compare_by_name():
    assert atom("foo") == Symbol("foo")
    assert atom("foo") != Symbol("bar")
    assert Symbol("foo") != "foo"
    assert len({Symbol("foo"), Symbol("foo"), Symbol("bar")}) == 2
