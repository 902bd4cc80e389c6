import pytest

from kons.interpreter import Interpreter, evaluate_top_level, make_global_env


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return make_global_env()


@pytest.fixture
def run(env):
    """Evaluate source text in the `env` fixture and return the last value."""
    def _run(source):
        return evaluate_top_level(source, env)
    return _run


@pytest.fixture
def interp():
    return Interpreter()
