# Core type aliases for the kons data model.
# Integers are plain Python ints; everything else is one of the classes in
# kons.types (Symbol, Nil, Pair, Closure, Primitive).
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Code is data here, so both aliases resolve to the same thing.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
