"""Core evaluator for the kons interpreter.

Implements special-form dispatch and function application as a plain
recursive reduction. Lisp-level recursion depth maps onto Python stack
depth; the top-level entry point turns stack exhaustion into an error.
"""

from __future__ import annotations

from kons import SExpression, LispValue
from kons.types.environment import Environment
from kons.types.errors import KonsSyntaxError
from kons.types.nil import Nil
from kons.types.pair import Pair
from kons.types.symbol import Symbol
from kons.evaluation.apply import apply
from kons.evaluation.special_forms import SPECIAL_FORMS


def form_args(tail: SExpression) -> list[SExpression]:
    """The argument expressions of a form; a form must be a proper list."""
    args = []
    node = tail
    while isinstance(node, Pair):
        args.append(node.car)
        node = node.cdr
    if node is not Nil:
        raise KonsSyntaxError("Cannot evaluate an improper list form")
    return args


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Reduce `expr` to a value in `env`."""
    match expr:
        case Pair(car=head, cdr=tail):
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](form_args(tail), env, evaluate)

            # --- Application: operator first, then arguments left to right ---
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in form_args(tail)]
            return apply(fn, args, env, evaluate)

        case Symbol():
            return env.lookup(expr)

    # --- Integers, Nil, closures and primitives evaluate to themselves ---
    return expr
