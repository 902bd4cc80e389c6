"""Built-in functions for the kons runtime environment.

This module defines core arithmetic, comparison, list processing and
predicates exposed to Lisp code. Every builtin takes the calling env and the
already-evaluated argument list; `register` wraps them as Primitives.
"""
from __future__ import annotations

from kons import LispValue
from kons.types.environment import Environment
from kons.types.errors import KonsArityError, KonsDivisionByZero, KonsTypeError
from kons.types.nil import Nil
from kons.types.pair import Pair
from kons.types.primitive import Primitive
from kons.types.symbol import Symbol
from kons.types.value import is_equal, make_list, to_python_list, to_string

TRUE = Symbol("t")


def _truth(flag: bool) -> LispValue:
    return TRUE if flag else Nil


def _require_count(name: str, expr: list[LispValue], count: int) -> None:
    if len(expr) != count:
        raise KonsArityError(
            f"{name} requires exactly {count} argument{'s' if count != 1 else ''}, got {len(expr)}"
        )


def _require_integers(name: str, expr: list[LispValue]) -> None:
    for x in expr:
        # bool is an int subclass but never a Lisp integer
        if not isinstance(x, int) or isinstance(x, bool):
            raise KonsTypeError(f"All arguments to {name} must be integers, got {to_string(x)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the integer sum of all arguments; (+) is 0."""
    _require_integers("+", expr)
    return sum(expr)


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent integers from the first, left to right."""
    if not expr:
        raise KonsArityError("- requires at least 1 argument")
    _require_integers("-", expr)
    result = expr[0]
    for x in expr[1:]:
        result -= x
    return result


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    _require_integers("*", expr)
    result = 1
    for x in expr:
        result *= x
    return result


def truncating_div(n: int, d: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide the first integer by each subsequent one, left to right."""
    if not expr:
        raise KonsArityError("/ requires at least 1 argument")
    _require_integers("/", expr)
    result = expr[0]
    for x in expr[1:]:
        if x == 0:
            raise KonsDivisionByZero("Division by zero")
        result = truncating_div(result, x)
    return result


# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, expr: list[LispValue]) -> tuple[int, int]:
    _require_count(name, expr, 2)
    _require_integers(name, expr)
    return expr[0], expr[1]


def gt(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _compare(">", expr)
    return _truth(a > b)


def lt(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _compare("<", expr)
    return _truth(a < b)


def gte(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _compare(">=", expr)
    return _truth(a >= b)


def lte(env: Environment, expr: list[LispValue]) -> LispValue:
    a, b = _compare("<=", expr)
    return _truth(a <= b)


def equals(env: Environment, expr: list[LispValue]) -> LispValue:
    """(= a b): integers by value, any other values structurally."""
    _require_count("=", expr, 2)
    return _truth(is_equal(expr[0], expr[1]))


def logical_not(env: Environment, expr: list[LispValue]) -> LispValue:
    """t for Nil, Nil for anything else."""
    _require_count("not", expr, 1)
    return _truth(expr[0] is Nil)


# -------------------------------
# Lists
# -------------------------------
def cons(env: Environment, expr: list[LispValue]) -> Pair:
    """Return a new Pair; the second argument becomes the tail as-is (it need not be a list)."""
    _require_count("cons", expr, 2)
    return Pair(expr[0], expr[1])


def _pair_arg(name: str, expr: list[LispValue]) -> Pair:
    _require_count(name, expr, 1)
    xs = expr[0]
    if not isinstance(xs, Pair):
        raise KonsTypeError(f"{name}: argument is not a pair: {to_string(xs)}")
    return xs


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    return _pair_arg("car", expr).car


def cdr(env: Environment, expr: list[LispValue]) -> LispValue:
    return _pair_arg("cdr", expr).cdr


def count(env: Environment, expr: list[LispValue]) -> int:
    """Number of elements in a proper list; (count ()) is 0."""
    _require_count("count", expr, 1)
    return len(to_python_list(expr[0]))


def list_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Construct a proper list from the provided arguments."""
    return make_list(expr)


def null(env: Environment, expr: list[LispValue]) -> LispValue:
    """Predicate: t if the single argument is Nil."""
    _require_count("null", expr, 1)
    return _truth(expr[0] is Nil)


def atom(env: Environment, expr: list[LispValue]) -> LispValue:
    """Predicate: t for anything that is not a Pair (Nil included)."""
    _require_count("atom", expr, 1)
    return _truth(not isinstance(expr[0], Pair))


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    ">": gt,
    "<": lt,
    ">=": gte,
    "<=": lte,
    "=": equals,
    "not": logical_not,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "count": count,
    "length": count,
    "list": list_builtin,
    "null": null,
    "atom": atom,
}


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update({Symbol(name): Primitive(name, fn) for name, fn in BUILTINS.items()})
    env.define(Symbol("t"), TRUE)
    env.define(Symbol("T"), TRUE)
    env.define(Symbol("nil"), Nil)
    env.define(Symbol("NIL"), Nil)
