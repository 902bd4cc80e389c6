import pytest
from hypothesis import given, strategies as st

from kons.types.errors import KonsSyntaxError
from kons.types.nil import Nil
from kons.types.pair import Pair
from kons.types.symbol import Symbol
from kons.types.value import make_list
from kons.reader.parser import lex, TokenStream, read_all


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ("(+ 1 -2)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "-2"), ("rparen", ")")]),
        ("a'b", [("symbol", "a"), ("quote", "'"), ("symbol", "b")]),
        ("(a)(b)", [("lparen", "("), ("symbol", "a"), ("rparen", ")"), ("lparen", "("), ("symbol", "b"), ("rparen", ")")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("a ; trailing", [("symbol", "a")]),
        ("   \t\n", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("0", 0),
        ("abc", Symbol("abc")),
        ("1a", Symbol("1a")),
        ("-", Symbol("-")),
        ("+", Symbol("+")),
        ("1-", Symbol("1-")),
        ("nil", Symbol("nil")),
        ("Foo", Symbol("Foo")),
        ("()", Nil),
        ("'a", make_list([Symbol("quote"), Symbol("a")])),
        ("'()", make_list([Symbol("quote"), Nil])),
        ("''a", make_list([Symbol("quote"), make_list([Symbol("quote"), Symbol("a")])])),
        ("(a b c)", make_list([Symbol("a"), Symbol("b"), Symbol("c")])),
        ("(1 (2 3) ())", make_list([1, make_list([2, 3]), Nil])),
        ("'(a b)", make_list([Symbol("quote"), make_list([Symbol("a"), Symbol("b")])])),
    ]
)
def test_parser(source, expected):
    stream = TokenStream(lex(source))
    result = list(stream.parse_all())
    assert result == [expected]     # Parser yields one expression


def test_lists_are_pair_chains():
    [expr] = read_all("(a b)")
    assert isinstance(expr, Pair)
    assert expr.car == Symbol("a")
    assert isinstance(expr.cdr, Pair)
    assert expr.cdr.car == Symbol("b")
    assert expr.cdr.cdr is Nil


def test_read_all_multiple_expressions():
    assert read_all("1 two (3)") == [1, Symbol("two"), make_list([3])]


def test_read_all_empty_and_comment_only():
    assert read_all("") == []
    assert read_all("  ; nothing here") == []


def test_multiline_expression_with_comments():
    source = """
    (defun sq (x) ; square
      (* x x))
    """
    [expr] = read_all(source)
    assert str(expr) == "(defun sq (x) (* x x))"


@pytest.mark.parametrize(
    "source",
    [
        "(a b",
        "((a b)",
        ")",
        "(a))",
        "'",
        "(a ')",
        '"hello"',
        'abc"',
    ]
)
def test_syntax_errors(source):
    with pytest.raises(KonsSyntaxError):
        read_all(source)


def test_unmatched_messages():
    with pytest.raises(KonsSyntaxError, match=r"Unmatched '\('"):
        read_all("(+ 1 2")
    with pytest.raises(KonsSyntaxError, match=r"Unmatched '\)'"):
        read_all("1)")


@given(st.integers())
def test_integer_tokens_read_as_integers(n):
    assert read_all(str(n)) == [n]


def test_nesting_past_the_stack_is_a_syntax_error():
    depth = 50_000
    with pytest.raises(KonsSyntaxError, match="nesting too deep"):
        read_all("(" * depth + ")" * depth)
    # the reader still works afterwards
    assert read_all("(1)") == [make_list([1])]
