from __future__ import annotations
import sys
from weakref import WeakValueDictionary


class Symbol:
    """A Lisp identifier. Symbols are interned: one live object per name.

    The table holds symbols weakly, so names no longer referenced by any
    form, binding or token stream are dropped from it.
    """

    __slots__ = ("id", "__weakref__")

    _table: WeakValueDictionary[str, Symbol] = WeakValueDictionary()

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = sys.intern(name)
            cls._table[sym.id] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return self is other or (isinstance(other, Symbol) and self.id == other.id)

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
