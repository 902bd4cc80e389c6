import gc

import pytest

from kons.types import (
    Closure,
    Environment,
    KonsTypeError,
    Nil,
    Pair,
    Primitive,
    Symbol,
    is_equal,
    is_list,
    is_truthy,
    make_list,
    to_python_list,
    to_string,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "()"),
        (42, "42"),
        (-7, "-7"),
        (Symbol("abc"), "abc"),
        (make_list([1, 2, 3]), "(1 2 3)"),
        (make_list([Symbol("a"), make_list([Symbol("b"), Nil])]), "(a (b ()))"),
        (Pair(1, 2), "(1 . 2)"),
        (make_list([1, 2], tail=3), "(1 2 . 3)"),
        (Pair(Pair(1, 2), Nil), "((1 . 2))"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_function_rendering():
    env = Environment()
    named = Closure([Symbol("n")], Symbol("n"), env, name=Symbol("fib"))
    anonymous = Closure([Symbol("a"), Symbol("b")], Symbol("a"), env)
    assert to_string(named) == "#<closure fib (n)>"
    assert to_string(anonymous) == "#<closure (a b)>"
    assert to_string(Primitive("+", lambda env, args: 0)) == "#<primitive +>"


def test_make_list_of_nothing_is_nil():
    assert make_list([]) is Nil


def test_to_python_list():
    assert to_python_list(Nil) == []
    assert to_python_list(make_list([1, Symbol("x")])) == [1, Symbol("x")]
    with pytest.raises(KonsTypeError):
        to_python_list(Pair(1, 2))
    with pytest.raises(KonsTypeError):
        to_python_list(5)


def test_is_list():
    assert is_list(Nil)
    assert is_list(make_list([1, 2]))
    assert not is_list(Pair(1, 2))
    assert not is_list(Symbol("a"))


def test_truthiness():
    assert not is_truthy(Nil)
    assert is_truthy(0)
    assert is_truthy(Symbol("nil"))
    assert is_truthy(make_list([Nil]))


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (1, 1, True),
        (1, 2, False),
        (Symbol("a"), Symbol("a"), True),
        (Symbol("a"), Symbol("A"), False),
        (Nil, Nil, True),
        (Nil, 0, False),
        (1, Symbol("1"), False),
        (make_list([1, make_list([2])]), make_list([1, make_list([2])]), True),
        (make_list([1, 2]), make_list([1, 2, 3]), False),
        (Pair(1, 2), Pair(1, 2), True),
        (Pair(1, 2), make_list([1, 2]), False),
        (1, True, False),
    ]
)
def test_is_equal(a, b, expected):
    assert is_equal(a, b) is expected
    assert is_equal(b, a) is expected


def test_functions_compare_by_identity():
    env = Environment()
    f = Closure([], 1, env)
    g = Closure([], 1, env)
    assert is_equal(f, f)
    assert not is_equal(f, g)
    p = Primitive("car", lambda env, args: args[0])
    assert is_equal(p, p)
    assert not is_equal(p, Primitive("car", p.fn))


def test_pair_iteration_stops_at_improper_tail():
    assert list(make_list([1, 2, 3])) == [1, 2, 3]
    assert list(make_list([1, 2], tail=3)) == [1, 2]


def test_cons_shares_tail():
    tail = make_list([Symbol("a"), Symbol("b")])
    first = Pair(Symbol("x"), tail)
    second = Pair(Symbol("y"), tail)
    assert first.cdr is second.cdr
    assert to_string(tail) == "(a b)"


def test_symbols_are_interned():
    assert Symbol("lst") is Symbol("lst")
    assert Symbol("lst") is not Symbol("LST")
    assert {Symbol("a"): 1}[Symbol("a")] == 1


def test_unreferenced_symbols_leave_the_table():
    name = "only-used-once-here"
    sym = Symbol(name)
    assert Symbol._table[name] is sym
    del sym
    gc.collect()
    assert name not in Symbol._table
