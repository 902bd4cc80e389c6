from kons import EvaluatorFn
from kons import SExpression, LispValue
from kons.types.errors import KonsInvalidSymbol, KonsArityError
from kons.types.symbol import Symbol
from kons.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (setf var value)
    Rebinds `var` in the nearest frame that already has it, otherwise binds it
    in the current frame. At top level that frame is the global one.
    """
    if len(tail) != 2:
        raise KonsArityError("setf requires exactly 2 arguments: (setf var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise KonsInvalidSymbol(f"setf first argument must be a Symbol, got {var_sym}")
    value = evaluate_fn(val_expr, env)
    env.assign(var_sym, value)

    return value
