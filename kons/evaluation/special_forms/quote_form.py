from kons import SExpression, LispValue, EvaluatorFn
from kons.types.environment import Environment
from kons.types.errors import KonsArityError


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise KonsArityError("Quote expects exactly 1 argument")
    return tail[0]
