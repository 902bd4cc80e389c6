"""Top-level entry points: read a line of text, evaluate every form in it."""

from __future__ import annotations

import logging
from typing import Iterator

from kons import LispValue
from kons.reader.parser import read_all
from kons.evaluation.evaluator import evaluate
from kons.types.nil import Nil
from kons.types.environment import Environment
from kons.types.errors import KonsResourceExhausted
from kons.builtin.env_builtin import register

logger = logging.getLogger(__name__)


def evaluate_form(expr: LispValue, env: Environment) -> LispValue:
    """Evaluate one top-level form, reporting stack exhaustion as a KonsError."""
    try:
        return evaluate(expr, env)
    except KonsResourceExhausted:
        raise
    except RecursionError as exc:
        raise KonsResourceExhausted("Maximum recursion depth exceeded") from exc


def iter_top_level(text: str, env: Environment) -> Iterator[LispValue]:
    """Yield the value of each form in `text`.

    The whole text is read before the first form is evaluated, so a syntax
    error anywhere means nothing runs. An evaluation error stops at the
    failing form; effects of the forms before it are kept.
    """
    forms = read_all(text)
    for expr in forms:
        logger.debug("evaluating %s", expr)
        yield evaluate_form(expr, env)


def evaluate_top_level(text: str, env: Environment) -> LispValue:
    """Evaluate every form in `text`; return the last value (Nil for no forms)."""
    result = Nil
    for result in iter_top_level(text, env):
        pass
    return result


def make_global_env() -> Environment:
    env = Environment()
    register(env)
    return env


class Interpreter:
    """
    Holds the global environment across calls, so definitions made by one
    line are visible to the next.
    """
    def __init__(self, prelude: str | None = None):
        self.env = make_global_env()
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of Lisp code, discarding the results."""
        for _ in iter_top_level(code, self.env):
            pass

    def eval_iter(self, code: str) -> Iterator[LispValue]:
        return iter_top_level(code, self.env)

    def eval(self, code: str) -> LispValue:
        return evaluate_top_level(code, self.env)


#  Example use-age:
if __name__ == "__main__":
    interp = Interpreter()
    tests = [
        "(setf lst '(a b c))                 ;; -> (a b c)",
        "(cons 'x lst)                       ;; -> (x a b c)",
        "(cond ((> 5 4) 'yes) ((> 3 5) 'no)) ;; -> yes",
        "(defun fib (n) (cond ((= n 1) 1) ((= n 0) 0) (t (+ (fib (- n 1)) (fib (- n 2))))))",
        "(fib 10)                            ;; -> 55",
    ]
    for code in tests:
        print(code, "=>", interp.eval(code))
