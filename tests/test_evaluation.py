import pytest

from kons.types import (
    Closure,
    Environment,
    KonsArityError,
    KonsNotCallable,
    KonsSyntaxError,
    KonsUnboundSymbol,
    Nil,
    Pair,
    Primitive,
    Symbol,
    make_list,
)
from kons.evaluation.evaluator import evaluate
from kons.reader.parser import read_all

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def env():
    env = Environment()
    env.define(Symbol("+"), Primitive("+", lambda _, args: sum(args)))
    env.define(Symbol("-"), Primitive("-", lambda _, args: args[0] - sum(args[1:])))
    env.define(Symbol("list"), Primitive("list", lambda _, args: make_list(args)))
    env.define(Symbol("x"), 42)
    env.define(Symbol("y"), 100)
    return env


def ev(source, env):
    [expr] = read_all(source)
    return evaluate(expr, env)

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_values(env):
    assert evaluate(1, env) == 1
    assert evaluate(Nil, env) is Nil
    prim = env.lookup(Symbol("+"))
    assert evaluate(prim, env) is prim
    fn = Closure([], 1, env)
    assert evaluate(fn, env) is fn


def test_symbol_lookup(env):
    assert evaluate(Symbol("x"), env) == 42
    assert evaluate(Symbol("y"), env) == 100
    with pytest.raises(KonsUnboundSymbol):
        evaluate(Symbol("z"), env)


def test_quote(env):
    assert ev("'(x y)", env) == make_list([Symbol("x"), Symbol("y")])
    assert ev("(quote x)", env) == Symbol("x")


def test_primitive_application(env):
    assert ev("(+ x 1 2)", env) == 45
    assert ev("(+ (- y x) 2)", env) == 60


def test_lambda_application(env):
    lam = ev("(lambda (a b) (+ a b))", env)
    assert isinstance(lam, Closure)
    assert lam.params == [Symbol("a"), Symbol("b")]
    assert evaluate(make_list([lam, 2, 3]), env) == 5


def test_lambda_in_head_position(env):
    assert ev("((lambda (a) (+ a x)) 8)", env) == 50


def test_application_does_not_leak_parameters(env):
    ev("((lambda (z) z) 1)", env)
    with pytest.raises(KonsUnboundSymbol):
        evaluate(Symbol("z"), env)


def test_closure_uses_captured_env_not_callers(env):
    inner = env.child_frame([(Symbol("x"), 1)])
    fn = evaluate(read_all("(lambda () x)")[0], inner)
    # Called from the outer env, where x is 42, it still sees x = 1
    assert evaluate(make_list([fn]), env) == 1


def test_arguments_evaluated_left_to_right(env):
    calls = []

    def record(_, args):
        calls.append(args[0])
        return args[0]

    env.define(Symbol("rec"), Primitive("rec", record))
    assert ev("(list (rec 1) (rec 2) (rec 3))", env) == make_list([1, 2, 3])
    assert calls == [1, 2, 3]


def test_closure_arity_mismatch(env):
    with pytest.raises(KonsArityError):
        ev("((lambda (a b) a) 1)", env)
    with pytest.raises(KonsArityError):
        ev("((lambda () 1) 1)", env)


@pytest.mark.parametrize("source", ["(1 2)", "('a 1)", "(x)", "(() 1)"])
def test_not_callable(env, source):
    with pytest.raises(KonsNotCallable):
        ev(source, env)


def test_improper_form_is_rejected(env):
    with pytest.raises(KonsSyntaxError):
        evaluate(Pair(Symbol("+"), 1), env)


def test_unbound_operator(env):
    with pytest.raises(KonsUnboundSymbol):
        ev("(nope 1 2)", env)
