"""Closure representation and argument binding for kons."""

from __future__ import annotations

from io import StringIO

from kons import SExpression, LispValue
from kons.types.environment import Environment
from kons.types.symbol import Symbol
from kons.types.errors import KonsArityError


class Closure:
    """A first-class function with formal parameters, body, and captured env."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        name: Symbol | None = None,
    ):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Live reference: later definitions in the defining frame stay visible
        self.env: Environment = env
        self.name: Symbol | None = name

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<closure ")
            if self.name is not None:
                buffer.write(f"{self.name} ")
            buffer.write("(")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's parameters and
        return the new frame for evaluating the body. The frame's parent is
        the captured environment, never the caller's.
        """
        if len(args) != self.arity:
            label = self.name if self.name is not None else "lambda"
            raise KonsArityError(
                f"{label} expects {self.arity} argument(s), got {len(args)}"
            )
        return self.env.child_frame(zip(self.params, args))
