"""Operations over the kons value model.

Values are plain Python ints plus the classes in this package: Symbol, the Nil
singleton, Pair, Closure and Primitive. This module holds the helpers that
treat them uniformly: list construction and traversal, truthiness, structural
equality and the canonical printed form.
"""

from __future__ import annotations

from typing import Iterable

from kons import LispValue
from kons.types.closure import Closure
from kons.types.errors import KonsTypeError
from kons.types.nil import Nil
from kons.types.pair import Pair
from kons.types.primitive import Primitive
from kons.types.symbol import Symbol


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a chain of Pairs from `items`, ending in `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_python_list(value: LispValue) -> list[LispValue]:
    """Return the elements of a proper list; KonsTypeError for anything else."""
    items = []
    node = value
    while isinstance(node, Pair):
        items.append(node.car)
        node = node.cdr
    if node is not Nil:
        raise KonsTypeError(f"Expected a proper list, got {to_string(value)}")
    return items


def is_list(value: LispValue) -> bool:
    """True for Nil and for Pair chains ending in Nil."""
    node = value
    while isinstance(node, Pair):
        node = node.cdr
    return node is Nil


def is_truthy(value: LispValue) -> bool:
    return value is not Nil


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality.

    Integers compare by value, symbols by name and pairs element by element.
    Closures and primitives are only equal to themselves.
    """
    while isinstance(a, Pair) and isinstance(b, Pair):
        if a is b:
            return True
        if not is_equal(a.car, b.car):
            return False
        a, b = a.cdr, b.cdr
    if a is b:
        return True
    if isinstance(a, (Closure, Primitive)) or isinstance(b, (Closure, Primitive)):
        return False
    # bool is an int subclass; keep it out of integer comparisons
    if type(a) is not type(b):
        return False
    return a == b


def to_string(value: LispValue) -> str:
    """Render a value the way the REPL prints it."""
    if value is Nil:
        return "()"
    if isinstance(value, Pair):
        parts = []
        node = value
        while isinstance(node, Pair):
            parts.append(to_string(node.car))
            node = node.cdr
        if node is not Nil:
            parts.append(".")
            parts.append(to_string(node))
        return "(" + " ".join(parts) + ")"
    if isinstance(value, Symbol):
        return value.id
    return str(value)
