from kons import EvaluatorFn
from kons import SExpression, LispValue
from kons.types.environment import Environment
from kons.types.errors import KonsSyntaxError, KonsTypeError
from kons.types.nil import Nil
from kons.types.value import to_python_list, to_string


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (cond (test result) ...)
    Clauses are tried in order; the first test that is not Nil selects its
    result. Falls through to Nil.
    """
    for clause in tail:
        try:
            parts = to_python_list(clause)
        except KonsTypeError:
            parts = None
        if parts is None or len(parts) != 2:
            raise KonsSyntaxError(f"cond: invalid clause {to_string(clause)}")
        test, result = parts
        if evaluate_fn(test, env) is not Nil:
            return evaluate_fn(result, env)
    return Nil
