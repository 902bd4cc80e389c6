

class KonsError(Exception):
    """ Base class for all kons errors"""
    pass

class KonsSyntaxError(KonsError):
    """ Raised when there is a syntax error, in the source text or in a special form"""

class KonsInvalidSymbol(KonsSyntaxError):
    """ Raised when something other than a Symbol is used as a binding name"""
    pass

class KonsUnboundSymbol(KonsError):
    """ Raised when a symbol is used before it is bound"""
    pass

class KonsNotCallable(KonsError):
    """ Raised when the head of an application is not a function"""

class KonsArityError(KonsError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class KonsTypeError(KonsError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class KonsDivisionByZero(KonsError, ZeroDivisionError):
    """ Raised when an integer division has a zero divisor"""

class KonsResourceExhausted(KonsError, RecursionError):
    """ Raised when evaluation runs out of stack"""
