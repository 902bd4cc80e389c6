"""Runtime environment for kons.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are shared by reference: every closure
created in a frame keeps that frame (and its whole parent chain) alive.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from kons import LispValue
from kons.types.errors import KonsInvalidSymbol, KonsUnboundSymbol
from kons.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, never searching ancestors.

        Raises KonsInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise KonsInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def frames(self) -> Iterator[Environment]:
        """This frame, then each enclosing frame out to the global one."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        for env in self.frames():
            if symbol in env.vars:
                return env
        return None

    def set_existing(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises KonsUnboundSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise KonsUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def assign(self, name: Symbol, value: LispValue) -> None:
        """Mutate the nearest existing binding of `name`, else define it here."""
        if not isinstance(name, Symbol):
            raise KonsInvalidSymbol(f"Cannot assign to {name}")
        env = self.find(name)
        if env is None:
            self.vars[name] = value
        else:
            env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises KonsUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise KonsUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def child_frame(
        self, bindings: Iterable[tuple[Symbol, LispValue]] = ()
    ) -> Environment:
        """Create a frame whose parent is this one, pre-populated with `bindings`."""
        frame = Environment(outer=self)
        for name, value in bindings:
            frame.define(name, value)
        return frame

    def root(self) -> Environment:
        *_, env = self.frames()
        return env

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _render_vars(self) -> str:
        from kons.types.value import to_string
        return "{" + ", ".join(f"{k}: {to_string(v)}" for k, v in self.vars.items()) + "}"

    def __str__(self) -> str:
        suffix = " -> ..." if self.outer is not None else ""
        return self._render_vars() + suffix

    def __repr__(self) -> str:
        chain = " -> ".join(env._render_vars() for env in self.frames())
        return f"<Environment chain: {chain}>"
