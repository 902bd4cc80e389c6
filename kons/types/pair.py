"""Cons cells.

A Pair holds references to its car and cdr, so two pairs built by `cons`
onto the same list share that list as their tail. Pairs are never mutated
after construction.
"""

from __future__ import annotations

from typing import Iterator

from kons import LispValue


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        """Yield the elements of the list headed by this pair (an improper tail is not yielded)."""
        node = self
        while isinstance(node, Pair):
            yield node.car
            node = node.cdr

    def __eq__(self, other) -> bool:
        from kons.types.value import is_equal
        return is_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"

    def __str__(self) -> str:
        from kons.types.value import to_string
        return to_string(self)
