"""Application engine for kons.

Function application lives here so the evaluator and any builtin that calls
back into Lisp share one definition of it:
- Closures are arity-checked and run in a fresh frame whose parent is the
  captured environment (lexical scoping).
- Primitives receive the runtime env and the evaluated argument list.
"""

from kons import LispValue, EvaluatorFn
from kons.types.environment import Environment
from kons.types.closure import Closure
from kons.types.primitive import Primitive
from kons.types.errors import KonsNotCallable
from kons.types.value import to_string


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Raises KonsArityError when the argument count differs from the parameter count.
    """
    frame = fn.extend_env(args)
    return evaluate_fn(fn.body, frame)


def apply(
    head: Closure | Primitive | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Primitive; anything else is not callable."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Primitive):
        return head(env, args)
    else:
        raise KonsNotCallable(f"Cannot apply non-function {to_string(head)}")
