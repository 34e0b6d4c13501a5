'''
Numeric literal decoding.

Shares its digit grammar with the lexer, so a literal the lexer accepts always
decodes, and a string the lexer would reject never does.
'''

from decimal import Decimal

import regex

from .lexer import Lexer
from .util import CalculatorError, ErrorKind, wrap_user_errors


PREFIXES = {
    '0x': (16, Lexer.HEX),
    '0b': (2, Lexer.BINARY),
    '0o': (8, Lexer.OCTAL),
}


@wrap_user_errors(ErrorKind.INVALID_NUMBER, 'Invalid number: {0}', ValueError)
def parse_literal(text):
    '''
    Decode one unsigned literal to an int, or to a float if it has a point.

    Prefixed literals are always ints.
    '''
    prefix = text[:2].lower()
    if prefix in PREFIXES:
        base, pattern = PREFIXES[prefix]
        _check(pattern, text)
        return int(text[2:], base)
    _check(Lexer.DECIMAL, text)
    if '.' in text:
        return float(text)
    # int(str) refuses more than sys.get_int_max_str_digits() digits.
    return int(Decimal(text))


def _check(pattern, text):
    # int() and float() are laxer than the lexer: signs, underscores, padding.
    if regex.fullmatch(pattern, text) is None:
        raise CalculatorError(ErrorKind.INVALID_NUMBER,
                              'Invalid number: {0}'.format(text))
