from kons.types.errors import KonsArityError, KonsSyntaxError, KonsTypeError
from kons.types.closure import Closure

from kons import EvaluatorFn
from kons import SExpression, LispValue
from kons.types.environment import Environment
from kons.types.symbol import Symbol
from kons.types.value import to_python_list, to_string


def parse_params(params: SExpression) -> list[Symbol]:
    """Validate a parameter list: a proper list of distinct symbols."""
    try:
        formals = to_python_list(params)
    except KonsTypeError:
        raise KonsSyntaxError(f"Parameter list must be a list, got {to_string(params)}")
    for p in formals:
        if not isinstance(p, Symbol):
            raise KonsSyntaxError(f"Parameter must be a symbol, got {to_string(p)}")
    if len(set(formals)) != len(formals):
        raise KonsSyntaxError(f"Duplicate parameter in {to_string(params)}")
    return formals


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) body): exactly one body form.
    if len(tail) != 2:
        raise KonsArityError("lambda requires a parameter list and a body")

    params, body = tail
    return Closure(parse_params(params), body, env)
