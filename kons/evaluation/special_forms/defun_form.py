from kons import EvaluatorFn
from kons import SExpression, LispValue
from kons.types.closure import Closure
from kons.types.environment import Environment
from kons.types.errors import KonsArityError, KonsInvalidSymbol
from kons.types.symbol import Symbol
from kons.evaluation.special_forms.lambda_form import parse_params

OK = Symbol("ok")


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params...) body)
    The closure captures `env` and is bound in `env`, so the body can call
    itself by name.
    """
    if len(tail) != 3:
        raise KonsArityError("defun requires exactly 3 arguments: name, params, body")

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise KonsInvalidSymbol(f"defun: first argument must be a symbol, got {name}")
    env.define(name, Closure(parse_params(params), body, env, name=name))
    return OK
