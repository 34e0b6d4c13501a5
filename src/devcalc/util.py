from enum import Enum
from functools import wraps


class ErrorKind(Enum):
    EMPTY_EXPRESSION = 'empty expression'
    UNEXPECTED_CHARACTER = 'unexpected character'
    INVALID_LITERAL = 'invalid literal'
    INVALID_NUMBER = 'invalid number'
    UNEXPECTED_TOKEN = 'unexpected token'
    UNMATCHED_PARENTHESIS = 'unmatched parenthesis'
    DIVISION_BY_ZERO = 'division by zero'
    MODULO_BY_ZERO = 'modulo by zero'
    NON_INTEGER_BITWISE_OPERAND = 'non-integer bitwise operand'
    SHIFT_OUT_OF_RANGE = 'shift out of range'
    OVERFLOW = 'overflow'
    TOO_DEEP = 'too deep'


class CalculatorError(Exception):
    '''
    User input that can't be evaluated.

    The message is meant to be shown verbatim. ``base`` names the base of a
    malformed prefixed literal, and is None for every other kind.
    '''
    def __init__(self, kind, message, base=None):
        super().__init__(message)
        self.kind = kind
        self.base = base

    @property
    def message(self):
        return self.args[0]


def wrap_user_errors(kind, fmt, *exceptions):
    '''
    Decorator that converts host exceptions to CalculatorErrors of one kind.

    Passes through CalculatorErrors. Only converts the listed exception types,
    or any Exception if none are given. fmt is formatted with the wrapped
    function's arguments.
    '''
    exceptions = exceptions or (Exception,)

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except exceptions as e:
                raise CalculatorError(kind,
                                      fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
