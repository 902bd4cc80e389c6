from kons.types.errors import (
    KonsError,
    KonsInvalidSymbol,
    KonsUnboundSymbol,
    KonsSyntaxError,
    KonsNotCallable,
    KonsArityError,
    KonsTypeError,
    KonsDivisionByZero,
    KonsResourceExhausted,
)
from kons.types.symbol import Symbol
from kons.types.nil import Nil, NilType
from kons.types.pair import Pair
from kons.types.environment import Environment
from kons.types.closure import Closure
from kons.types.primitive import Primitive
from kons.types.value import make_list, to_python_list, is_list, is_truthy, is_equal, to_string
